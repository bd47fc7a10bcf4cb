from __future__ import annotations


class MediaConversionError(Exception):
    """Base error for media conversion operations."""

    kind = "MediaConversionError"


class InvalidInputError(MediaConversionError):
    """Raised when the input path has no usable file-name stem."""

    kind = "InvalidInput"


class ScratchDirUnavailableError(MediaConversionError):
    """Raised when the scratch directory cannot be determined or created."""

    kind = "ScratchDirUnavailable"


class DecodeError(MediaConversionError):
    """Raised when the source raster image cannot be decoded."""

    kind = "DecodeError"


class EngineLaunchError(MediaConversionError):
    """Raised when the external conversion engine cannot be started."""

    kind = "EngineLaunchError"


class EngineExecutionError(MediaConversionError):
    """Raised when the conversion engine exits with a failure status."""

    kind = "EngineExecutionError"

    def __init__(self, stderr: str, returncode: int | None = None) -> None:
        super().__init__(f"engine failed: {stderr}")
        self.stderr = stderr
        self.returncode = returncode


class MediaIOError(MediaConversionError):
    """Raised when reading or writing a file fails."""

    kind = "IOError"
