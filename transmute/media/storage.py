from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .exceptions import MediaIOError, ScratchDirUnavailableError

logger = logging.getLogger(__name__)


class ConversionStorage:
    """Provides the scratch directory converted files are written to."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def scratch_dir(self) -> Path:
        try:
            directory = self._root.expanduser().resolve()
            directory.mkdir(parents=True, exist_ok=True)
        except (OSError, RuntimeError) as exc:
            raise ScratchDirUnavailableError(
                f"scratch directory '{self._root}' is unavailable: {exc}"
            ) from exc
        if not directory.is_dir():
            raise ScratchDirUnavailableError(f"scratch directory '{directory}' is not a directory")
        return directory

    @staticmethod
    def save_copy(source: Path, destination: Path) -> Path:
        try:
            shutil.copyfile(source, destination)
        except OSError as exc:
            raise MediaIOError(f"failed to save '{source}' to '{destination}': {exc}") from exc
        logger.info("Saved %s to %s", source, destination)
        return destination
