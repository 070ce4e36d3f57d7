import os
from pathlib import Path

import pytest

from uprl.errors import FetchFailure


def shortcut_bytes(url, extra=None):
    lines = ["[InternetShortcut]", f"URL={url}"] + list(extra or [])
    return ("\r\n".join(lines) + "\r\n").encode("utf-8")


@pytest.fixture
def make_shortcut():
    def _make(directory: Path, name: str, url: str, extra=None) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        p = directory / name
        p.write_bytes(shortcut_bytes(url, extra))
        return p
    return _make


class FakeFetcher:
    """Maps URL -> title; an Exception value is raised instead."""

    def __init__(self, titles):
        self.titles = titles
        self.calls = []

    def __call__(self, url):
        self.calls.append(url)
        value = self.titles.get(url)
        if value is None:
            raise FetchFailure(f"Network error: no route to {url}")
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def fake_fetcher():
    return FakeFetcher


def _read_failures(path):
    """(path, message) pairs from a failure log, oldest first."""
    if not Path(path).exists():
        return []
    with open(path, encoding="utf-8", newline="") as f:
        text = f.read()
    out = []
    for chunk in text.split(os.linesep):
        if chunk.startswith("File: "):
            file_part, _, message = chunk[len("File: "):].partition(", Message: ")
            out.append((file_part, message))
    return out


@pytest.fixture
def read_failures():
    return _read_failures
