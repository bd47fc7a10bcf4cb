from __future__ import annotations

from .catalog import MediaKind, classify_media, target_formats
from .embedder import VectorEmbedder
from .engine import ConversionEngine, ProcessLauncher, launch_subprocess
from .exceptions import (
    DecodeError,
    EngineExecutionError,
    EngineLaunchError,
    InvalidInputError,
    MediaConversionError,
    MediaIOError,
    ScratchDirUnavailableError,
)
from .paths import resolve_output_path
from .storage import ConversionStorage
from .strategy import FormatStrategy, select_strategy
from .types import ConversionOutcome, ConversionRequest, ImageMetadata, ProcessResult

__all__ = [
    "ConversionEngine",
    "ConversionOutcome",
    "ConversionRequest",
    "ConversionStorage",
    "DecodeError",
    "EngineExecutionError",
    "EngineLaunchError",
    "FormatStrategy",
    "ImageMetadata",
    "InvalidInputError",
    "MediaConversionError",
    "MediaIOError",
    "MediaKind",
    "ProcessLauncher",
    "ProcessResult",
    "ScratchDirUnavailableError",
    "VectorEmbedder",
    "classify_media",
    "launch_subprocess",
    "resolve_output_path",
    "select_strategy",
    "target_formats",
]
