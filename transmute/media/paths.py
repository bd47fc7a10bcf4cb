from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from .exceptions import InvalidInputError

_SEPARATORS = tuple({os.sep, "/"} | ({os.altsep} if os.altsep else set()))


def file_stem(input_path: Union[str, Path]) -> str:
    """Return the part of the file name before its final extension.

    A path that ends in a separator names a directory, not a file, and has
    no stem even though ``pathlib`` would drop the trailing separator.
    """
    raw = os.fspath(input_path)
    if "\x00" in raw:
        raise InvalidInputError(f"Invalid file name: {raw!r} contains a NUL byte")
    if not raw or raw.endswith(_SEPARATORS):
        raise InvalidInputError(f"Invalid file name: '{raw}'")
    name = Path(raw).name
    if name in ("", ".", ".."):
        raise InvalidInputError(f"Invalid file name: '{raw}'")
    stem = Path(name).stem
    if not stem:
        raise InvalidInputError(f"Invalid file name: '{raw}'")
    return stem


def resolve_output_path(input_path: Union[str, Path], output_format: str, scratch_dir: Path) -> Path:
    stem = file_stem(input_path)
    extension = output_format.lower()
    if not extension:
        raise InvalidInputError("Output format must not be empty")
    return scratch_dir / f"{stem}.{extension}"
