#===============================================================================
#  UpRL | cli.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Headless front end: python -m uprl.cli DIR [DIR ...]
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import functools
import logging
import sys
from pathlib import Path
from typing import List, Optional

import requests

from .batch import BatchProcessor
from .constants import APP_TITLE, ERROR_LOG_NAME
from .failure_log import FailureLog
from .models import BatchJob
from .title_fetcher import fetch_title


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="uprl-cli",
        description="Rename .url shortcut files after the title of the page they point to.",
    )
    p.add_argument("directories", nargs="+", help="directories to scan")
    p.add_argument("--no-recurse", action="store_true", help="only scan the top level of each directory")
    p.add_argument("--backup", action="store_true", help="move originals into UpRL-backup/ before renaming")
    p.add_argument("--error-log", default=ERROR_LOG_NAME, help=f"failure log path (default: {ERROR_LOG_NAME})")
    p.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds (default: none)")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def main(argv: Optional[List[str]] = None, title_fetcher=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    job = BatchJob(recurse=not args.no_recurse, backup=args.backup)
    for d in args.directories:
        if not job.add_directory(d):
            print(f"Skipping (not a directory): {d}", file=sys.stderr)
    if not job.directories:
        print("No directories to process.", file=sys.stderr)
        return 2

    with requests.Session() as session:
        fetcher = title_fetcher or functools.partial(fetch_title, session=session, timeout=args.timeout)
        processor = BatchProcessor(FailureLog(args.error_log), title_fetcher=fetcher)

        def report(outcome, index, total):
            if outcome.ok:
                print(f"[{index}/{total}] {outcome.path} -> {outcome.new_path.name}")
            else:
                print(f"[{index}/{total}] {outcome.path} FAILED: {outcome.message}")

        summary = processor.run(job, on_outcome=report)

    print(
        f"{APP_TITLE}: {summary.directories} director{'y' if summary.directories == 1 else 'ies'}, "
        f"{summary.processed}/{summary.total} processed, {len(summary.failures)} failure(s)"
    )
    if summary.failures:
        print(f"See {Path(args.error_log).resolve()}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
