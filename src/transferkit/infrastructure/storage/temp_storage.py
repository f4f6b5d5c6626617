"""Temporary storage management."""

import shutil
from pathlib import Path

from transferkit.shared.logging import get_logger
from transferkit.shared.types import PathLike

logger = get_logger(__name__)


class TempStorage:
    """Manages the scratch directory used for intermediate files."""

    def __init__(self, root: PathLike):
        """
        Initialize temp storage manager.

        Args:
            root: Temp root, resolved once at startup by the caller
        """
        self.root = Path(root)
        self._logger = get_logger(__name__)
        self._logger.info(f"Using temp root {self.root}")

    def get_temp_folder(self) -> Path:
        """Return the temp root."""
        return self.root

    def get_temp_path(self, relative_path: PathLike) -> Path:
        """
        Get a path under the temp root.

        The root directory is created if missing; intermediate directories
        of relative_path are not.

        A leading separator is dropped, so "/a/b" resolves like "a/b".

        Args:
            relative_path: Path relative to the temp root

        Returns:
            root / relative_path

        Raises:
            ValueError: If relative_path contains ".." components
        """
        parts = Path(relative_path).parts
        if ".." in parts:
            raise ValueError(f"Temp path must stay under {self.root}: {relative_path}")
        if parts and Path(relative_path).anchor:
            parts = parts[1:]

        self.root.mkdir(parents=True, exist_ok=True)
        return self.root.joinpath(*parts)

    def clear(self) -> None:
        """
        Empty the temp root, keeping the directory itself.

        Failures are logged and ignored.
        """
        if not self.root.exists():
            return

        try:
            for entry in self.root.iterdir():
                if entry.is_dir() and not entry.is_symlink():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
            self._logger.info(f"Cleared temp root: {self.root}")
        except OSError as e:
            self._logger.warning(f"Unable to empty {self.root}: {e}")
