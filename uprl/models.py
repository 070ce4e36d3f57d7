#===============================================================================
#  UpRL | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models used across the batch pipeline and the front ends.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

OUTCOME_SUCCESS = "success"
OUTCOME_ERROR = "error"


@dataclass(frozen=True)
class ShortcutFile:
    """A .url file as read from disk. `raw` is written back untouched."""
    path: Path
    raw: bytes
    lines: List[str]
    url: Optional[str]  # last url= value, None when absent


@dataclass(frozen=True)
class FailureRecord:
    path: str
    message: str


@dataclass(frozen=True)
class FileOutcome:
    """Result of processing one shortcut file."""
    path: Path
    kind: str  # "success" | "parse_failure" | "fetch_failure" | "rename_failure" | "error"
    message: str = ""
    new_path: Optional[Path] = None
    title: str = ""

    @property
    def ok(self) -> bool:
        return self.kind == OUTCOME_SUCCESS


@dataclass
class BatchJob:
    """Directories and options for one run. Counters are mutated by the processor only."""
    directories: List[str] = field(default_factory=list)
    recurse: bool = True
    backup: bool = False
    processed: int = 0

    @property
    def directory_count(self) -> int:
        return len(self.directories)

    def add_directory(self, path) -> bool:
        """Add a directory; files, missing paths and duplicates are ignored."""
        p = Path(path)
        if not p.is_dir():
            return False
        s = str(p)
        if s in self.directories:
            return False
        self.directories.append(s)
        return True

    def clear(self) -> None:
        self.directories.clear()
        self.processed = 0


@dataclass
class BatchSummary:
    directories: int = 0
    total: int = 0
    processed: int = 0
    outcomes: List[FileOutcome] = field(default_factory=list)
    failures: List[FailureRecord] = field(default_factory=list)
    cancelled: bool = False

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.ok)
