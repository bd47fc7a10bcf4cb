from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .exceptions import MediaConversionError


@dataclass(frozen=True)
class ConversionRequest:
    input_path: Union[str, Path]
    output_format: str


@dataclass(frozen=True)
class ConversionOutcome:
    output_path: Optional[Path] = None
    message: Optional[str] = None
    error: Optional[MediaConversionError] = None

    @property
    def ok(self) -> bool:
        return self.output_path is not None

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None

    @classmethod
    def success(cls, output_path: Path) -> "ConversionOutcome":
        return cls(output_path=output_path)

    @classmethod
    def failure(cls, error: MediaConversionError) -> "ConversionOutcome":
        return cls(message=str(error), error=error)


@dataclass(frozen=True)
class ImageMetadata:
    width: int
    height: int


@dataclass(frozen=True)
class ProcessResult:
    returncode: int
    stderr: bytes = b""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    def stderr_text(self) -> str:
        return self.stderr.decode(errors="replace").strip()
