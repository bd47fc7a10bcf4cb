from __future__ import annotations

import asyncio

import pytest

from conftest import FakeLauncher
from transmute.media.engine import ConversionEngine, build_engine_args, launch_subprocess
from transmute.media.exceptions import EngineExecutionError, EngineLaunchError
from transmute.media.types import ProcessResult


def test_build_engine_args_default_order():
    assert build_engine_args("/in/a.png", "/out/a.jpg") == ["-i", "/in/a.png", "-y", "/out/a.jpg"]


def test_build_engine_args_places_filters_before_output():
    args = build_engine_args("/in/a.png", "/out/a.ico", ["-vf", "scale=w=1:h=1"])

    assert args == ["-i", "/in/a.png", "-y", "-vf", "scale=w=1:h=1", "/out/a.ico"]


def test_convert_success_returns_output_path(tmp_path):
    launcher = FakeLauncher()
    engine = ConversionEngine(binary="ffmpeg", launcher=launcher)
    output = tmp_path / "a.jpg"

    result = asyncio.run(engine.convert("/in/a.png", output))

    assert result == output
    assert launcher.commands == [["ffmpeg", "-i", "/in/a.png", "-y", str(output)]]


def test_non_zero_exit_carries_stderr(tmp_path):
    launcher = FakeLauncher(result=ProcessResult(returncode=1, stderr=b"Unknown encoder 'xyz'\n"))
    engine = ConversionEngine(launcher=launcher)

    with pytest.raises(EngineExecutionError) as excinfo:
        asyncio.run(engine.convert("/in/a.png", tmp_path / "a.xyz"))

    assert "Unknown encoder 'xyz'" in str(excinfo.value)
    assert str(excinfo.value).startswith("engine failed: ")
    assert excinfo.value.returncode == 1


def test_launch_failure_is_reported_separately(tmp_path):
    launcher = FakeLauncher(error=PermissionError(13, "Permission denied"))
    engine = ConversionEngine(launcher=launcher)

    with pytest.raises(EngineLaunchError) as excinfo:
        asyncio.run(engine.convert("/in/a.png", tmp_path / "a.jpg"))

    assert "Permission denied" in str(excinfo.value)


def test_missing_binary_with_real_launcher(tmp_path):
    engine = ConversionEngine(binary="transmute-missing-engine-binary", launcher=launch_subprocess)
    output = tmp_path / "a.jpg"

    with pytest.raises(EngineLaunchError):
        asyncio.run(engine.convert("/in/a.png", output))

    assert not output.exists()


def test_launcher_value_error_is_launch_error(tmp_path):
    launcher = FakeLauncher(error=ValueError("embedded null byte"))
    engine = ConversionEngine(launcher=launcher)

    with pytest.raises(EngineLaunchError, match="embedded null byte"):
        asyncio.run(engine.convert("/in/a.png", tmp_path / "a.jpg"))
