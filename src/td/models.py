"""Data models and constants for td."""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

APP_DIR_NAME = "td-todo"
TASKS_FILE_NAME = "tasks.csv"
HEADER = ["text", "created", "completed"]

# Fractions are padded or cut to microseconds; earlier files carry nanoseconds.
_FRACTION_RE = re.compile(r"\.(\d+)")


def now() -> datetime:
    """Current local time with its UTC offset attached."""
    return datetime.now().astimezone()


def format_timestamp(value: datetime) -> str:
    return value.isoformat()


def parse_timestamp(raw: str) -> datetime:
    """Parse an ISO 8601 timestamp with a UTC offset.

    Raises ValueError on garbage and on naive timestamps.
    """
    text = _FRACTION_RE.sub(lambda m: "." + (m.group(1) + "000000")[:6], raw.strip())
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        raise ValueError(f"timestamp {raw!r} has no UTC offset")
    return value


@dataclass
class Task:
    """A single task record.

    ``completed`` is None while the task is pending and is never cleared
    once set.
    """

    description: str
    created: datetime
    completed: Optional[datetime] = None

    @property
    def done(self) -> bool:
        return self.completed is not None

    def __str__(self) -> str:
        return f"X {self.description}" if self.done else self.description
