"""File I/O for td task lists.

The tasks file is CSV with a ``text,created,completed`` header. An empty
``completed`` column means the task is still pending.
"""

import csv
import logging
import os
from typing import List

from .models import HEADER, Task, format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """The tasks file could not be read, parsed or written."""


def _row_to_task(row: List[str], line: int) -> Task:
    if len(row) < 3:
        raise StorageError(f"line {line}: missing column")
    text, created, completed = row[0], row[1], row[2]
    try:
        return Task(
            description=text,
            created=parse_timestamp(created),
            completed=parse_timestamp(completed) if completed.strip() else None,
        )
    except ValueError as exc:
        raise StorageError(f"line {line}: failed to parse task ({exc})") from exc


def read_file(path: str) -> List[Task]:
    """Load every task record, pending and completed, in file order.

    Raises StorageError if the file is missing, unreadable or has a
    malformed row. Blank lines are skipped.
    """
    tasks: List[Task] = []
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            for row in reader:
                if not row:
                    continue
                if reader.line_num == 1 and row[: len(HEADER)] == HEADER:
                    continue
                tasks.append(_row_to_task(row, reader.line_num))
    except OSError as exc:
        raise StorageError(f"cannot read {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise StorageError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
    except csv.Error as exc:
        raise StorageError(f"{path}: {exc}") from exc

    logger.debug("Loaded %d tasks from %s", len(tasks), path)
    return tasks


def write_file(path: str, tasks: List[Task]) -> None:
    """Rewrite the file from in-memory state (header + tasks).

    Missing parent directories are created, so the first save of a new
    install also creates the file.
    """
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(HEADER)
            for t in tasks:
                writer.writerow(
                    [
                        t.description,
                        format_timestamp(t.created),
                        format_timestamp(t.completed) if t.completed else "",
                    ]
                )
    except OSError as exc:
        raise StorageError(f"cannot write {path}: {exc.strerror or exc}") from exc

    logger.debug("Saved %d tasks to %s", len(tasks), path)

