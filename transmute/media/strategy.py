from __future__ import annotations

from enum import Enum
from typing import Dict, List

ICON_MAX_DIMENSION = 256


class FormatStrategy(str, Enum):
    DEFAULT = "default"
    SIZE_CONSTRAINED = "size_constrained"
    VECTOR_EMBED = "vector_embed"


_SPECIAL_FORMATS: Dict[str, FormatStrategy] = {
    "ico": FormatStrategy.SIZE_CONSTRAINED,
    "svg": FormatStrategy.VECTOR_EMBED,
}


def select_strategy(output_format: str) -> FormatStrategy:
    return _SPECIAL_FORMATS.get(output_format.lower(), FormatStrategy.DEFAULT)


def scale_filter(max_dimension: int = ICON_MAX_DIMENSION) -> str:
    """ffmpeg scale expression capping both sides at ``max_dimension``.

    ``min(N,iw)`` keeps small inputs at their own size, and
    ``force_original_aspect_ratio=decrease`` shrinks the box to the source
    aspect ratio, so the longer side ends up at most ``max_dimension``.
    """
    return (
        f"scale=w='min({max_dimension},iw)':h='min({max_dimension},ih)'"
        ":force_original_aspect_ratio=decrease"
    )


def engine_filter_args(strategy: FormatStrategy, *, max_dimension: int = ICON_MAX_DIMENSION) -> List[str]:
    if strategy is FormatStrategy.SIZE_CONSTRAINED:
        return ["-vf", scale_filter(max_dimension)]
    if strategy is FormatStrategy.DEFAULT:
        return []
    raise ValueError(f"Strategy {strategy.value!r} does not use the conversion engine")
