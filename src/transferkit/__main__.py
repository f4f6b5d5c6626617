"""Entry point for ``python -m transferkit``."""

import sys

from transferkit.presentation.cli import main

sys.exit(main())
