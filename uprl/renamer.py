#===============================================================================
#  UpRL | renamer.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Turns a page title into a safe .url filename and writes the shortcut under
#  that name, optionally moving the original into UpRL-backup/ first.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import FrozenSet

from .constants import BACKUP_DIR_NAME, REPLACEMENT_CHAR, SHORTCUT_SUFFIX
from .errors import RenameFailure
from .models import ShortcutFile

log = logging.getLogger(__name__)

WINDOWS_FORBIDDEN = frozenset('<>:"/\\|?*') | frozenset(chr(c) for c in range(32))
POSIX_FORBIDDEN = frozenset("/\0")


def invalid_filename_chars(platform: str = sys.platform) -> FrozenSet[str]:
    """Characters that may not appear in a file name on `platform`."""
    if platform.startswith(("win", "cygwin")):
        return WINDOWS_FORBIDDEN
    return POSIX_FORBIDDEN


def sanitize_title(title: str, platform: str = sys.platform) -> str:
    """Map a title to '<title>.url', replacing every forbidden char with '_'."""
    if not title or not title.strip():
        raise RenameFailure("Empty title, cannot build a file name")

    forbidden = invalid_filename_chars(platform)
    stem = "".join(REPLACEMENT_CHAR if ch in forbidden else ch for ch in title)
    if stem in (".", ".."):
        raise RenameFailure(f"Title {title!r} does not make a usable file name")
    return stem + SHORTCUT_SUFFIX


def backup_original(path: Path) -> Path:
    """Move `path` into <dir>/UpRL-backup/ under its own name."""
    backup_dir = path.parent / BACKUP_DIR_NAME
    backup_dir.mkdir(parents=True, exist_ok=True)

    target = backup_dir / path.name
    if target.exists():
        raise RenameFailure(f"Backup already exists: {target}")
    shutil.move(str(path), str(target))
    return target


def _write_atomic(dest: Path, data: bytes) -> None:
    fd, tmp = tempfile.mkstemp(prefix=".uprl-", suffix=".tmp", dir=str(dest.parent))
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, dest)
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise


def rename_shortcut(shortcut: ShortcutFile, title: str, backup: bool = False,
                    platform: str = sys.platform) -> Path:
    """Write the shortcut's original bytes to <dir>/<sanitized title>.url.

    With `backup` the original is moved to UpRL-backup/ first; without it the
    original stays where it is and both files exist afterwards.
    """
    src = shortcut.path
    dest = src.parent / sanitize_title(title, platform)

    try:
        if backup:
            moved_to = backup_original(src)
            log.debug("Backed up %s -> %s", src, moved_to)

        if dest.exists() and dest != src:
            log.warning("Overwriting existing file %s", dest)
        _write_atomic(dest, shortcut.raw)
    except OSError as e:
        raise RenameFailure(f"Cannot write {dest.name}: {e}") from e

    return dest
