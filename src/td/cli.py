"""td command-line interface.

Commands:
  add TEXT...       Add tasks (comma separated); the default command
  show [SELECTOR]   List matching pending tasks, numbered
  do [SELECTOR]     Move matching tasks to the top (default: last added)
  done [SELECTOR]   Mark matching tasks completed (default: the top task)

SELECTOR is an index (2), a range (2-4) or a regular expression searched
in each description. Indices are what `show` prints right now; they shift
whenever the list changes.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import get_settings
from .core import add_tasks, complete, pending, promote, select
from .logging_setup import level_for, setup_logging
from .models import Task
from .selectors import ALL, Selector, SelectorError, parse_selector
from .storage import StorageError, read_file, write_file

logger = logging.getLogger(__name__)

COMMANDS = ("add", "show", "do", "done")
NO_MATCH = "No matching tasks"


def print_task(position: int, task: Task) -> None:
    print(f"{position:>3}. {task}")


def print_status(tasks: List[Task]) -> None:
    """Print the pending list under a header."""
    print("Tasks:")
    live = pending(tasks)
    if not live:
        print("(no pending tasks)")
        return
    for i, t in enumerate(live, start=1):
        print_task(i, t)


def load(path: str) -> List[Task]:
    """Read the tasks file; a file that does not exist yet is an empty list."""
    if not os.path.exists(path):
        logger.info("No tasks file at %s yet", path)
        return []
    try:
        return read_file(path)
    except StorageError as exc:
        sys.exit(f"Error loading tasks: {exc}")


def save(path: str, tasks: List[Task]) -> None:
    try:
        write_file(path, tasks)
    except StorageError as exc:
        sys.exit(f"Error saving tasks: {exc}")


def selector_from_args(
    args: argparse.Namespace, empty: Optional[Selector]
) -> Optional[Selector]:
    try:
        return parse_selector(" ".join(args.selector), empty=empty)
    except SelectorError as exc:
        sys.exit(f"Invalid selector: {exc}")


def cmd_status(args: argparse.Namespace) -> None:
    print_status(load(args.file))


def cmd_add(args: argparse.Namespace) -> None:
    tasks = load(args.file)
    for t in add_tasks(tasks, " ".join(args.text).split(",")):
        print(f"Created new task: {t}")
    save(args.file, tasks)
    print_status(tasks)


def cmd_show(args: argparse.Namespace) -> None:
    selector = selector_from_args(args, ALL)
    tasks = load(args.file)
    matches = select(tasks, selector, include_done=args.all)
    if not matches:
        if args.selector:
            print(NO_MATCH)
        else:
            print("(no tasks yet)" if args.all else "(no pending tasks)")
        return
    for i, t in matches:
        print_task(i, t)


def cmd_do(args: argparse.Namespace) -> None:
    selector = selector_from_args(args, None)
    tasks = load(args.file)
    chosen = promote(tasks, selector)
    if not chosen:
        print(NO_MATCH)
        return
    for t in chosen:
        print(f"Working on: {t}")
    save(args.file, tasks)


def cmd_done(args: argparse.Namespace) -> None:
    selector = selector_from_args(args, None)
    tasks = load(args.file)
    chosen = complete(tasks, selector)
    if not chosen:
        print(NO_MATCH)
        return
    for t in chosen:
        print(f"Completed: {t.description}")
    save(args.file, tasks)
    print_status(tasks)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="td", description="Keep a short, ordered list of things to do."
    )
    p.add_argument(
        "-f",
        "--file",
        default=None,
        help="Path to tasks file (default: TD_FILE or the user data directory)",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log more to stderr (-vv for debug)",
    )
    p.add_argument(
        "--path", action="store_true", help="Print the path to the tasks file"
    )
    sub = p.add_subparsers(dest="cmd")

    s_add = sub.add_parser("add", help="Add tasks; commas separate several")
    s_add.add_argument("text", nargs="+", help="Task text")
    s_add.set_defaults(func=cmd_add)

    s_show = sub.add_parser("show", help="List matching pending tasks")
    s_show.add_argument(
        "-a", "--all", action="store_true", help="Include completed tasks"
    )
    s_show.add_argument("selector", nargs="*", help="Index, range or pattern")
    s_show.set_defaults(func=cmd_show)

    s_do = sub.add_parser("do", help="Move matching tasks to the top")
    s_do.add_argument("selector", nargs="*", help="Index, range or pattern")
    s_do.set_defaults(func=cmd_do)

    s_done = sub.add_parser("done", help="Mark matching tasks completed")
    s_done.add_argument("selector", nargs="*", help="Index, range or pattern")
    s_done.set_defaults(func=cmd_done)

    return p


def with_default_command(argv: List[str]) -> List[str]:
    """Insert `add` before the first word when it is not a known command."""
    i = 0
    while i < len(argv):
        word = argv[i]
        if word in ("-f", "--file"):
            i += 2
        elif word.startswith("-"):
            i += 1
        else:
            break
    if i < len(argv) and argv[i] not in COMMANDS:
        return argv[:i] + ["add"] + argv[i:]
    return argv


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point. Shows pending tasks if no command is given."""
    argv = list(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(with_default_command(argv))

    settings = get_settings()
    try:
        setup_logging(
            console_level=level_for(args.verbose, settings.log_level),
            log_file=settings.log_file,
        )
    except OSError as exc:
        sys.exit(f"Cannot open log file: {exc}")
    args.file = args.file or settings.tasks_file

    if args.path:
        print(os.path.abspath(args.file))
        return

    logger.info("td %s (file=%s)", args.cmd or "show", args.file)
    if args.cmd is None:
        cmd_status(args)
    else:
        args.func(args)


if __name__ == "__main__":
    main()
