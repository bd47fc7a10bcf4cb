from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import pytest
from PIL import Image

from transmute.config import Settings
from transmute.media.embedder import VectorEmbedder
from transmute.media.engine import ConversionEngine
from transmute.media.storage import ConversionStorage
from transmute.media.types import ProcessResult
from transmute.services.media_converter import MediaConverterService


class FakeLauncher:
    """Records commands and answers with a canned result or a launch error."""

    def __init__(self, result: ProcessResult | None = None, error: Exception | None = None) -> None:
        self.result = result or ProcessResult(returncode=0)
        self.error = error
        self.commands: List[List[str]] = []

    async def __call__(self, command: Sequence[str]) -> ProcessResult:
        self.commands.append(list(command))
        if self.error is not None:
            raise self.error
        return self.result


class GatedLauncher:
    """Holds every caller inside the launch until `expected` callers have entered."""

    def __init__(self, expected: int, timeout: float = 5.0) -> None:
        self.expected = expected
        self.timeout = timeout
        self.events: List[str] = []
        self._all_entered: Optional[asyncio.Event] = None

    async def __call__(self, command: Sequence[str]) -> ProcessResult:
        if self._all_entered is None:
            self._all_entered = asyncio.Event()
        self.events.append("enter")
        if self.events.count("enter") >= self.expected:
            self._all_entered.set()
        await asyncio.wait_for(self._all_entered.wait(), timeout=self.timeout)
        self.events.append("exit")
        return ProcessResult(returncode=0)


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str = "photo.png", size=(400, 300), fmt: str | None = None) -> Path:
        path = tmp_path / "input" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", size, color=(200, 40, 90)).save(path, format=fmt or "PNG")
        return path

    return _make


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    return tmp_path / "scratch"


@pytest.fixture
def fake_launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def make_service(scratch_dir: Path) -> Callable[[FakeLauncher], MediaConverterService]:
    def _make(launcher: FakeLauncher) -> MediaConverterService:
        settings = Settings(scratch_directory=scratch_dir, engine_binary="ffmpeg", icon_max_dimension=256)
        return MediaConverterService(
            storage=ConversionStorage(scratch_dir),
            engine=ConversionEngine(binary="ffmpeg", launcher=launcher),
            embedder=VectorEmbedder(),
            settings=settings,
        )

    return _make
