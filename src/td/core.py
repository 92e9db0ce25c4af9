"""td list operations (pure functions over a task list, no I/O)."""

from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from .models import Task, now as current_time
from .selectors import ALL, IndexSelector, Selector, resolve


def pending(tasks: List[Task]) -> List[Task]:
    """Pending tasks in display order (position 1 first)."""
    return [t for t in tasks if not t.done]


def candidates(tasks: List[Task], include_done: bool = False) -> List[Task]:
    """The sequence a selector is resolved against.

    Completed records, when included, follow the pending ones in store order.
    """
    live = pending(tasks)
    if not include_done:
        return live
    return live + [t for t in tasks if t.done]


def select(
    tasks: List[Task], selector: Selector = ALL, include_done: bool = False
) -> List[Tuple[int, Task]]:
    """Return (display position, task) pairs matched by selector."""
    seq = candidates(tasks, include_done)
    return [(i, seq[i - 1]) for i in resolve(selector, seq)]


def last_added_position(tasks: List[Task]) -> Optional[int]:
    """Display position of the most recently created pending task, or None.

    Ties go to the lower position, which is where the later task of a
    batch was inserted.
    """
    best = None
    for i, t in enumerate(pending(tasks), start=1):
        if best is None or t.created > best[1].created:
            best = (i, t)
    return best[0] if best else None


def _move(tasks: List[Task], chosen: List[Task], to_front: bool) -> None:
    ids = {id(t) for t in chosen}
    rest = [t for t in tasks if id(t) not in ids]
    tasks[:] = chosen + rest if to_front else rest + chosen


def add_tasks(
    tasks: List[Task], descriptions: Iterable[str], now: Optional[datetime] = None
) -> List[Task]:
    """Create tasks and insert each at position 1.

    Descriptions are inserted one after another, so the last one of a
    batch ends up on top. Blank descriptions are skipped.
    """
    stamp = now or current_time()
    created = []
    for text in descriptions:
        text = text.strip()
        if not text:
            continue
        task = Task(description=text, created=stamp)
        tasks.insert(0, task)
        created.append(task)
    return created


def promote(tasks: List[Task], selector: Optional[Selector] = None) -> List[Task]:
    """Move matched pending tasks to the front as one block.

    Without a selector the most recently added task is promoted. Matched
    tasks keep their relative order. Returns the promoted tasks.
    """
    if selector is None:
        pos = last_added_position(tasks)
        if pos is None:
            return []
        selector = IndexSelector(pos)
    chosen = [t for _, t in select(tasks, selector)]
    if chosen:
        _move(tasks, chosen, to_front=True)
    return chosen


def complete(
    tasks: List[Task],
    selector: Optional[Selector] = None,
    now: Optional[datetime] = None,
) -> List[Task]:
    """Stamp matched pending tasks as completed (default: position 1).

    Completed records move to the tail of the list so history collects
    below the pending tasks. Returns the completed tasks.
    """
    chosen = [t for _, t in select(tasks, selector or IndexSelector(1))]
    stamp = now or current_time()
    for t in chosen:
        t.completed = stamp
    if chosen:
        _move(tasks, chosen, to_front=False)
    return chosen
