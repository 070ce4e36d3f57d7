import os

from uprl.failure_log import FailureLog, format_entry
from uprl.models import FailureRecord


def test_entry_format():
    rec = FailureRecord(path="C:\\Links\\a.url", message="boom")
    assert format_entry(rec) == f"{os.linesep}File: C:\\Links\\a.url, Message: boom"


def test_append_only(tmp_path, read_failures):
    log = FailureLog(tmp_path / "log.txt")
    log.path.write_text("existing content", encoding="utf-8")

    log.append(FailureRecord("a.url", "first"))
    log.append(FailureRecord("b.url", "second"))

    with open(log.path, encoding="utf-8", newline="") as f:
        text = f.read()
    assert text.startswith("existing content")
    assert read_failures(log.path) == [("a.url", "first"), ("b.url", "second")]


def test_append_creates_missing_file(tmp_path):
    log = FailureLog(tmp_path / "new.txt")
    log.append(FailureRecord("a.url", "first"))
    assert log.path.exists()
