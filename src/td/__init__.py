"""td - a small ordered to-do list for the command line."""

__version__ = "0.3.0"

from .models import Task
from .selectors import (
    ALL,
    AllSelector,
    IndexSelector,
    InvalidPattern,
    PatternSelector,
    RangeSelector,
    SelectorError,
    parse_selector,
    resolve,
)
from .storage import StorageError, read_file, write_file
from .core import add_tasks, complete, pending, promote, select

__all__ = [
    "Task",
    "ALL",
    "AllSelector",
    "IndexSelector",
    "RangeSelector",
    "PatternSelector",
    "SelectorError",
    "InvalidPattern",
    "parse_selector",
    "resolve",
    "StorageError",
    "read_file",
    "write_file",
    "add_tasks",
    "complete",
    "pending",
    "promote",
    "select",
]
