"""Selector parsing and resolution.

A selector picks zero or more tasks out of an ordered candidate list:

  (empty)   every candidate (or the command's own default)
  N         the task at 1-based position N
  LO-HI     positions LO..HI inclusive, clamped to the list
  anything  a regular expression searched in each description

Positions are display positions, so they change whenever the list is
reordered. Nothing here prints or exits.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from .models import Task

INDEX_RE = re.compile(r"\d+", re.ASCII)
RANGE_RE = re.compile(r"(\d+)-(\d+)", re.ASCII)


class SelectorError(ValueError):
    """Base class for selectors that cannot be used."""


class InvalidPattern(SelectorError):
    """The selector text is not a valid regular expression."""

    def __init__(self, pattern: str, diagnostic: str) -> None:
        super().__init__(f"invalid pattern {pattern!r}: {diagnostic}")
        self.pattern = pattern
        self.diagnostic = diagnostic


@dataclass(frozen=True)
class AllSelector:
    def matches(self, position: int, task: Task) -> bool:
        return True


@dataclass(frozen=True)
class IndexSelector:
    index: int

    def matches(self, position: int, task: Task) -> bool:
        return position == self.index


@dataclass(frozen=True)
class RangeSelector:
    lo: int
    hi: int

    def matches(self, position: int, task: Task) -> bool:
        return self.lo <= position <= self.hi


@dataclass(frozen=True)
class PatternSelector:
    pattern: re.Pattern

    def matches(self, position: int, task: Task) -> bool:
        return self.pattern.search(task.description) is not None


Selector = Union[AllSelector, IndexSelector, RangeSelector, PatternSelector]

ALL = AllSelector()


def parse_selector(text: str, empty: Optional[Selector] = ALL) -> Optional[Selector]:
    """Turn user text into a Selector.

    Blank text yields ``empty`` so each command can pick its own default
    (None lets the caller decide later). Other text is classified as
    given, without trimming. Raises InvalidPattern when the
    text falls through to the regex branch and does not compile.
    """
    if not text.strip():
        return empty
    if INDEX_RE.fullmatch(text):
        return IndexSelector(int(text))
    m = RANGE_RE.fullmatch(text)
    if m:
        return RangeSelector(int(m.group(1)), int(m.group(2)))
    try:
        return PatternSelector(re.compile(text))
    except re.error as exc:
        raise InvalidPattern(text, str(exc)) from exc


def resolve(selector: Selector, candidates: Sequence[Task]) -> List[int]:
    """Return matching 1-based positions, in candidate order."""
    return [
        i for i, t in enumerate(candidates, start=1) if selector.matches(i, t)
    ]
