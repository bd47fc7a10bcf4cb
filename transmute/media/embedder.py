from __future__ import annotations

import base64
import logging
from pathlib import Path
from typing import Dict

from PIL import Image, UnidentifiedImageError

from .exceptions import DecodeError, MediaIOError
from .types import ImageMetadata

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/png"
MIME_TYPES: Dict[str, str] = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
    "gif": "image/gif",
}

_SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
    'viewBox="0 0 {width} {height}">\n'
    '    <image href="data:{mime};base64,{payload}" width="{width}" height="{height}" />\n'
    "</svg>"
)


def mime_type_for(path: Path) -> str:
    """Content type declared for ``path``, taken from its extension only."""
    extension = path.suffix.lstrip(".").lower()
    return MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)


def read_image_metadata(path: Path) -> ImageMetadata:
    try:
        with Image.open(path) as image:
            image.load()
            width, height = image.size
    except (FileNotFoundError, PermissionError, IsADirectoryError) as exc:
        raise MediaIOError(f"Failed to read '{path}': {exc}") from exc
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError, SyntaxError) as exc:
        raise DecodeError(f"Failed to open image for SVG conversion: {exc}") from exc
    return ImageMetadata(width=width, height=height)


def render_svg(metadata: ImageMetadata, mime_type: str, payload: str) -> str:
    return _SVG_TEMPLATE.format(
        width=metadata.width,
        height=metadata.height,
        mime=mime_type,
        payload=payload,
    )


class VectorEmbedder:
    """Wraps the original raster bytes in an SVG document via a data URI.

    The pixels are never re-encoded; the image is decoded only to learn its
    dimensions. Nothing is written until every earlier step has succeeded.
    """

    def embed(self, input_path: Path, output_path: Path) -> Path:
        metadata = read_image_metadata(input_path)
        try:
            raw = input_path.read_bytes()
        except OSError as exc:
            raise MediaIOError(f"Failed to read '{input_path}': {exc}") from exc

        payload = base64.standard_b64encode(raw).decode("ascii")
        document = render_svg(metadata, mime_type_for(input_path), payload)
        try:
            output_path.write_text(document, encoding="utf-8")
        except OSError as exc:
            raise MediaIOError(f"Failed to write '{output_path}': {exc}") from exc

        logger.debug(
            "Embedded %s (%dx%d) into %s",
            input_path,
            metadata.width,
            metadata.height,
            output_path,
        )
        return output_path
