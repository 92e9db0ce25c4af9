# tests/conftest.py

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, List

import pytest

from td.models import Task
from td.storage import read_file, write_file

T0 = datetime(2024, 3, 1, 9, 0, 0, tzinfo=timezone(timedelta(hours=2)))


@pytest.fixture()
def t0() -> datetime:
    return T0


@pytest.fixture()
def make_tasks() -> Callable[..., List[Task]]:
    """Build a list from descriptions; position 1 is the newest task."""

    def _make(*descriptions: str) -> List[Task]:
        n = len(descriptions)
        return [
            Task(description=d, created=T0 + timedelta(minutes=n - i))
            for i, d in enumerate(descriptions)
        ]

    return _make


@pytest.fixture()
def tasks_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Tasks file in a temp dir; TD_FILE points at it so main() uses it."""
    path = tmp_path / "data" / "tasks.csv"
    monkeypatch.setenv("TD_FILE", str(path))
    monkeypatch.delenv("TD_LOG_FILE", raising=False)
    monkeypatch.delenv("TD_LOG_LEVEL", raising=False)
    return path


@pytest.fixture()
def seed(tasks_file: Path, make_tasks) -> Callable[..., List[Task]]:
    def _seed(*descriptions: str) -> List[Task]:
        tasks = make_tasks(*descriptions)
        tasks_file.parent.mkdir(parents=True, exist_ok=True)
        write_file(str(tasks_file), tasks)
        return tasks

    return _seed


@pytest.fixture()
def stored(tasks_file: Path) -> Callable[[], List[Task]]:
    return lambda: read_file(str(tasks_file))
