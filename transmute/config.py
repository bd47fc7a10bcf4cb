from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path


def _as_int(value: str, *, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


DEFAULT_SCRATCH_DIR = Path(tempfile.gettempdir()) / "transmute"


@dataclass(frozen=True)
class Settings:
    scratch_directory: Path = Path(os.getenv("TRANSMUTE_SCRATCH_DIR", str(DEFAULT_SCRATCH_DIR)))
    engine_binary: str = os.getenv("TRANSMUTE_ENGINE_BINARY", "ffmpeg")
    icon_max_dimension: int = _as_int(os.getenv("TRANSMUTE_ICON_MAX_DIMENSION"), default=256)
    log_level: str = os.getenv("TRANSMUTE_LOG_LEVEL", "INFO")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        settings = Settings()
        # The directory itself is created per request so a missing one is a request failure.
        object.__setattr__(settings, "scratch_directory", settings.scratch_directory.expanduser())
        if settings.icon_max_dimension <= 0:
            object.__setattr__(settings, "icon_max_dimension", 256)
        _settings = settings
    return _settings
