from __future__ import annotations

from functools import lru_cache

from transmute.config import get_settings
from transmute.media.embedder import VectorEmbedder
from transmute.media.engine import ConversionEngine, launch_subprocess
from transmute.media.storage import ConversionStorage
from transmute.services.media_converter import MediaConverterService


@lru_cache(maxsize=1)
def get_media_converter_service() -> MediaConverterService:
    settings = get_settings()
    storage = ConversionStorage(settings.scratch_directory)
    engine = ConversionEngine(binary=settings.engine_binary, launcher=launch_subprocess)
    return MediaConverterService(
        storage=storage,
        engine=engine,
        embedder=VectorEmbedder(),
        settings=settings,
    )
