"""Type aliases shared by the transfer helpers."""

import os
from typing import Union

# Local file, folder and temp-relative arguments; converted with Path() on entry
PathLike = Union[str, os.PathLike]
