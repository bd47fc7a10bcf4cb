from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, List


class MediaKind(str, Enum):
    VIDEO = "video"
    IMAGE = "image"
    AUDIO = "audio"
    UNKNOWN = "unknown"


_EXTENSIONS: Dict[MediaKind, FrozenSet[str]] = {
    MediaKind.VIDEO: frozenset(
        {"mp4", "mov", "avi", "mkv", "webm", "ogv", "flv", "wmv", "3gp", "mpg", "vob", "ts", "m2ts"}
    ),
    MediaKind.IMAGE: frozenset(
        {"png", "jpg", "jpeg", "webp", "gif", "avif", "bmp", "tiff", "ico", "tga", "svg"}
    ),
    MediaKind.AUDIO: frozenset(
        {"mp3", "wav", "m4a", "ogg", "flac", "aac", "wma", "aiff", "alac", "opus"}
    ),
}

TARGET_FORMATS: Dict[MediaKind, List[str]] = {
    MediaKind.VIDEO: [
        "MP4", "GIF", "MKV", "AVI", "MOV", "WEBM", "OGV", "FLV", "WMV", "3GP", "MPG", "VOB", "TS", "M2TS",
    ],
    MediaKind.IMAGE: ["PNG", "JPG", "WEBP", "AVIF", "BMP", "TIFF", "ICO", "TGA", "SVG"],
    MediaKind.AUDIO: ["MP3", "WAV", "M4A", "OGG", "FLAC", "AAC", "WMA", "AIFF", "ALAC", "OPUS"],
}


def classify_media(filename: str) -> MediaKind:
    extension = Path(filename).suffix.lstrip(".").lower()
    for kind, extensions in _EXTENSIONS.items():
        if extension in extensions:
            return kind
    return MediaKind.UNKNOWN


def target_formats(kind: MediaKind) -> List[str]:
    # Unknown files are offered the video formats, since ffmpeg probes the input anyway.
    return list(TARGET_FORMATS.get(kind, TARGET_FORMATS[MediaKind.VIDEO]))
