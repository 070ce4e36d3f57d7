#===============================================================================
#  UpRL | shortcut_parser.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Reads Internet Shortcut (.url) files and extracts the target hyperlink.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .errors import ParseFailure
from .models import ShortcutFile

URL_PREFIX = "url="


def extract_url(lines: Iterable[str]) -> Optional[str]:
    """Return the value of the last line starting with `url=` (any case).

    The value is everything after the first '=' up to end of line, so query
    strings containing '=' survive. Returns None when no such line exists.
    """
    url = None
    for line in lines:
        if line[:len(URL_PREFIX)].lower() == URL_PREFIX:
            url = line.split("=", 1)[1]
    return url


def decode_shortcut(raw: bytes) -> str:
    # .url files are written as UTF-8 by newer tools and ANSI by older ones
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def read_shortcut(path: Path) -> ShortcutFile:
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ParseFailure(f"Cannot read shortcut: {e}") from e

    lines: List[str] = decode_shortcut(raw).splitlines()
    return ShortcutFile(path=path, raw=raw, lines=lines, url=extract_url(lines))
