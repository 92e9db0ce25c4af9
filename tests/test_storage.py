# tests/test_storage.py

from datetime import datetime, timedelta, timezone

import pytest

from td.models import Task, parse_timestamp
from td.storage import StorageError, read_file, write_file


def test_round_trip_preserves_records(tmp_path, make_tasks, t0) -> None:
    path = str(tmp_path / "tasks.csv")
    tasks = make_tasks('garden: Water plants, then "rest"', "multi\nline", "plain")
    tasks[1].completed = t0 + timedelta(seconds=1, microseconds=250)
    write_file(path, tasks)

    assert read_file(path) == tasks


def test_file_layout(tmp_path, t0) -> None:
    path = tmp_path / "tasks.csv"
    write_file(str(path), [Task("a, b", created=t0), Task("c", t0, completed=t0)])
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "text,created,completed"
    assert lines[1] == '"a, b",2024-03-01T09:00:00+02:00,'
    assert lines[2] == "c,2024-03-01T09:00:00+02:00,2024-03-01T09:00:00+02:00"


def test_reads_nanosecond_timestamps(tmp_path) -> None:
    path = tmp_path / "tasks.csv"
    path.write_text(
        "text,created,completed\n"
        "Water plants,2023-05-02T18:04:11.123456789+02:00,\n"
        "\n"
        "Pick cherries,2023-05-01T08:00:00.5+00:00,2023-05-03T10:00:00.000000001-04:00\n",
        encoding="utf-8",
    )
    tasks = read_file(str(path))
    assert [t.description for t in tasks] == ["Water plants", "Pick cherries"]
    assert tasks[0].created == datetime(
        2023, 5, 2, 18, 4, 11, 123456, tzinfo=timezone(timedelta(hours=2))
    )
    assert tasks[0].completed is None
    assert tasks[1].completed == parse_timestamp("2023-05-03T10:00:00-04:00")


def test_header_only_and_empty_file(tmp_path) -> None:
    path = tmp_path / "tasks.csv"
    path.write_text("", encoding="utf-8")
    assert read_file(str(path)) == []
    path.write_text("text,created,completed\n", encoding="utf-8")
    assert read_file(str(path)) == []


def test_missing_file_is_an_error(tmp_path) -> None:
    with pytest.raises(StorageError):
        read_file(str(tmp_path / "nope.csv"))


@pytest.mark.parametrize(
    "row",
    [
        "only text,2023-05-02T18:04:11+02:00",
        "bad date,yesterday,",
        "bad completed,2023-05-02T18:04:11+02:00,soon",
        "naive created,2024-01-02T00:00:00,",
        "date only,2024-01-02,",
        "naive completed,2024-01-01T00:00:00+00:00,2024-01-02T00:00:00",
    ],
)
def test_corrupt_rows_are_errors(tmp_path, row) -> None:
    path = tmp_path / "tasks.csv"
    path.write_text("text,created,completed\n" + row + "\n", encoding="utf-8")
    with pytest.raises(StorageError, match="line 2"):
        read_file(str(path))


def test_naive_timestamp_rejected() -> None:
    with pytest.raises(ValueError, match="no UTC offset"):
        parse_timestamp("2024-01-02T00:00:00")


def test_invalid_utf8_is_storage_error(tmp_path) -> None:
    path = tmp_path / "tasks.csv"
    path.write_bytes(
        b"text,created,completed\n\xff\xfe bad,2024-01-01T00:00:00+00:00,\n"
    )
    with pytest.raises(StorageError, match="UTF-8"):
        read_file(str(path))


def test_write_creates_parent_dirs_and_header(tmp_path) -> None:
    path = tmp_path / "nested" / "dir" / "tasks.csv"
    write_file(str(path), [])
    assert path.read_bytes() == b"text,created,completed\r\n"
    assert read_file(str(path)) == []

    keep = Task("keep", created=parse_timestamp("2024-01-01T00:00:00+00:00"))
    write_file(str(path), [keep])
    assert read_file(str(path)) == [keep]


def test_write_failure_is_storage_error(tmp_path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(StorageError):
        write_file(str(blocker / "tasks.csv"), [])
