from __future__ import annotations

import pytest

from core.errors import AssetLoadError


@pytest.fixture
def main_module():
    try:
        import main
    except Exception as e:  # main pulls in the GL engine
        pytest.skip(f"OpenGL unavailable: {e}")
    return main


class FailingEngine:
    def __init__(self) -> None:
        raise AssetLoadError("background", "x.png", OSError("missing"))


class RecordingEngine:
    runs = 0

    def run(self) -> None:
        RecordingEngine.runs += 1


def test_asset_failure_exits_with_status_1(main_module, monkeypatch, capsys) -> None:
    monkeypatch.setattr(main_module, "Engine", FailingEngine)
    assert main_module.main() == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("[Assets] Failed to load background x.png")
    assert captured.out == ""


def test_successful_start_runs_the_loop(main_module, monkeypatch) -> None:
    RecordingEngine.runs = 0
    monkeypatch.setattr(main_module, "Engine", RecordingEngine)
    assert main_module.main() == 0
    assert RecordingEngine.runs == 1
