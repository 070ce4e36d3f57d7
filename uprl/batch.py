#===============================================================================
#  UpRL | batch.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Batch pipeline: enumerate .url files in the selected directories, then for
#  each one parse -> fetch title -> rename. One file at a time; a failing file
#  is logged and skipped, never fatal to the batch.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, List, Optional, Set

from .constants import BACKUP_DIR_NAME, SHORTCUT_SUFFIX
from .errors import BatchBusyError, ParseFailure, UpRLError
from .failure_log import FailureLog
from .models import BatchJob, BatchSummary, FailureRecord, FileOutcome, OUTCOME_ERROR, OUTCOME_SUCCESS
from .renamer import rename_shortcut
from .shortcut_parser import read_shortcut
from .title_fetcher import fetch_title

log = logging.getLogger(__name__)

OutcomeCallback = Callable[[FileOutcome, int, int], None]


def enumerate_shortcuts(directory: Path, recurse: bool = True, skip_backups: bool = True) -> List[Path]:
    """Return the .url files under `directory`, sorted by path.

    Rules:
    - suffix match is case-insensitive
    - recurse=False only looks at the top level
    - skip_backups ignores anything inside an UpRL-backup folder
    Raises OSError when the directory is missing or unreadable.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    # iterdir() fails loudly on permission problems, rglob() would not
    top_level = list(directory.iterdir())
    candidates = directory.rglob("*") if recurse else top_level

    found: List[Path] = []
    for p in candidates:
        if p.suffix.lower() != SHORTCUT_SUFFIX or not p.is_file():
            continue
        if skip_backups and BACKUP_DIR_NAME in p.relative_to(directory).parts[:-1]:
            continue
        found.append(p)
    return sorted(found)


class BatchProcessor:
    """Runs BatchJobs. Only one run may be active per processor."""

    def __init__(
        self,
        failure_log: Optional[FailureLog] = None,
        title_fetcher: Callable[[str], str] = fetch_title,
        skip_backups: bool = True,
    ):
        self.failure_log = failure_log or FailureLog()
        self.title_fetcher = title_fetcher
        self.skip_backups = skip_backups
        self._busy = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._busy.locked()

    def process_file(self, path: Path, backup: bool) -> FileOutcome:
        """Parse -> fetch -> rename a single file. Failures come back as outcomes."""
        try:
            shortcut = read_shortcut(path)
            if not shortcut.url:
                raise ParseFailure("No URL= line found")
            title = self.title_fetcher(shortcut.url)
            new_path = rename_shortcut(shortcut, title, backup=backup)
        except UpRLError as e:
            return FileOutcome(path=path, kind=e.kind, message=str(e))
        except Exception as e:
            log.exception("Unexpected error processing %s", path)
            return FileOutcome(path=path, kind=OUTCOME_ERROR, message=f"{type(e).__name__}: {e}")
        return FileOutcome(path=path, kind=OUTCOME_SUCCESS, new_path=new_path, title=title)

    def _record_failure(self, summary: BatchSummary, path, message: str) -> None:
        record = FailureRecord(path=str(path), message=message)
        summary.failures.append(record)
        try:
            self.failure_log.append(record)
        except OSError as e:
            log.error("Could not write failure log %s: %s", self.failure_log.path, e)

    def run(
        self,
        job: BatchJob,
        on_outcome: Optional[OutcomeCallback] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> BatchSummary:
        """Process every shortcut in `job.directories`, in list order."""
        if not self._busy.acquire(blocking=False):
            raise BatchBusyError("A batch is already running")
        try:
            return self._run(job, on_outcome, should_stop)
        finally:
            self._busy.release()

    def _run(self, job, on_outcome, should_stop) -> BatchSummary:
        summary = BatchSummary(directories=job.directory_count)
        # options are fixed for the whole run
        recurse, backup = job.recurse, job.backup

        files: List[Path] = []
        seen: Set[Path] = set()
        for d in list(job.directories):
            try:
                found = enumerate_shortcuts(Path(d), recurse=recurse, skip_backups=self.skip_backups)
            except OSError as e:
                log.warning("Skipping directory %s: %s", d, e)
                self._record_failure(summary, d, f"Cannot enumerate directory: {e}")
                continue
            log.info("Found %d shortcut(s) in %s", len(found), d)
            for p in found:
                # nested entries (D and D/sub) would otherwise visit files twice
                key = p.resolve()
                if key not in seen:
                    seen.add(key)
                    files.append(p)

        summary.total = len(files)
        for i, path in enumerate(files, start=1):
            if should_stop and should_stop():
                log.info("Batch stopped after %d of %d file(s)", i - 1, len(files))
                summary.cancelled = True
                break

            outcome = self.process_file(path, backup=backup)
            summary.outcomes.append(outcome)
            if outcome.ok:
                job.processed += 1
                summary.processed += 1
                log.info("Renamed %s -> %s", path.name, outcome.new_path.name)
            else:
                log.warning("%s: %s", path, outcome.message)
                self._record_failure(summary, path, outcome.message)

            if on_outcome:
                on_outcome(outcome, i, len(files))

        return summary
