# ruff: noqa: E402

import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import gsw.log as gsw_log


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("GSW_LOG_LEVEL", "GSW_NO_COLOR", "GSW_JOBS", "GSW_GIT", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    gsw_log.reset()
    yield
    gsw_log.reset()
