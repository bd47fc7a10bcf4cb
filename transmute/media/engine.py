from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, List, Sequence

from .exceptions import EngineExecutionError, EngineLaunchError
from .types import ProcessResult

logger = logging.getLogger(__name__)

ProcessLauncher = Callable[[Sequence[str]], Awaitable[ProcessResult]]


async def launch_subprocess(command: Sequence[str]) -> ProcessResult:
    process = await asyncio.create_subprocess_exec(
        *command,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    _, stderr = await process.communicate()
    return ProcessResult(returncode=process.returncode, stderr=stderr or b"")


def build_engine_args(
    input_path: str,
    output_path: str,
    filter_args: Sequence[str] = (),
) -> List[str]:
    args = ["-i", input_path, "-y"]
    args.extend(filter_args)
    args.append(output_path)
    return args


class ConversionEngine:
    """Runs the external conversion engine (ffmpeg) as a subprocess."""

    def __init__(self, binary: str = "ffmpeg", launcher: ProcessLauncher = launch_subprocess) -> None:
        self._binary = binary
        self._launcher = launcher

    async def convert(
        self,
        input_path: str,
        output_path: Path,
        filter_args: Sequence[str] = (),
    ) -> Path:
        args = build_engine_args(input_path, str(output_path), filter_args)
        logger.debug("Running %s %s", self._binary, " ".join(args))
        try:
            result = await self._launcher([self._binary, *args])
        except (ValueError, OSError) as exc:
            raise EngineLaunchError(f"failed to start {self._binary}: {exc}") from exc

        if not result.succeeded:
            raise EngineExecutionError(result.stderr_text(), returncode=result.returncode)
        return output_path
