from __future__ import annotations

import logging
from pathlib import Path
from typing import Awaitable, Callable, Dict

from transmute.config import Settings
from transmute.media.embedder import VectorEmbedder
from transmute.media.engine import ConversionEngine
from transmute.media.exceptions import MediaConversionError
from transmute.media.paths import resolve_output_path
from transmute.media.storage import ConversionStorage
from transmute.media.strategy import FormatStrategy, engine_filter_args, select_strategy
from transmute.media.types import ConversionOutcome, ConversionRequest

logger = logging.getLogger(__name__)

_Handler = Callable[[ConversionRequest, Path, FormatStrategy], Awaitable[Path]]


class MediaConverterService:
    def __init__(
        self,
        storage: ConversionStorage,
        engine: ConversionEngine,
        embedder: VectorEmbedder,
        settings: Settings,
    ) -> None:
        self._storage = storage
        self._engine = engine
        self._embedder = embedder
        self._settings = settings
        self._handlers: Dict[FormatStrategy, _Handler] = {
            FormatStrategy.DEFAULT: self._run_engine,
            FormatStrategy.SIZE_CONSTRAINED: self._run_engine,
            FormatStrategy.VECTOR_EMBED: self._embed_vector,
        }

    async def convert(self, request: ConversionRequest) -> ConversionOutcome:
        try:
            output_path = await self._convert(request)
        except MediaConversionError as exc:
            logger.warning(
                "Conversion of %s to %s failed (%s): %s",
                request.input_path,
                request.output_format,
                exc.kind,
                exc,
            )
            return ConversionOutcome.failure(exc)

        logger.info("Converted %s to %s", request.input_path, output_path)
        return ConversionOutcome.success(output_path)

    def save(self, source: Path, destination: Path) -> Path:
        return self._storage.save_copy(source, destination)

    async def _convert(self, request: ConversionRequest) -> Path:
        scratch_dir = self._storage.scratch_dir()
        output_path = resolve_output_path(request.input_path, request.output_format, scratch_dir)
        strategy = select_strategy(request.output_format)
        logger.debug("Using %s strategy for %s", strategy.value, output_path.name)
        handler = self._handlers[strategy]
        return await handler(request, output_path, strategy)

    async def _run_engine(self, request: ConversionRequest, output_path: Path, strategy: FormatStrategy) -> Path:
        filter_args = engine_filter_args(strategy, max_dimension=self._settings.icon_max_dimension)
        return await self._engine.convert(str(request.input_path), output_path, filter_args)

    async def _embed_vector(self, request: ConversionRequest, output_path: Path, strategy: FormatStrategy) -> Path:
        return self._embedder.embed(Path(request.input_path), output_path)
