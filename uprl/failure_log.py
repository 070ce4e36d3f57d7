#===============================================================================
#  UpRL | failure_log.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Append-only plain-text failure log (UpRL-ErrorLog.txt). Never rotated.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from .constants import ERROR_LOG_NAME
from .models import FailureRecord


def format_entry(record: FailureRecord) -> str:
    return f"{os.linesep}File: {record.path}, Message: {record.message}"


class FailureLog:
    """Appends FailureRecords to a text file.

    A relative path resolves against the working directory at write time.
    """

    def __init__(self, path: Union[str, Path] = ERROR_LOG_NAME):
        self.path = Path(path)

    def append(self, record: FailureRecord) -> None:
        # newline="" keeps os.linesep from being translated twice on Windows
        with open(self.path, "a", encoding="utf-8", newline="") as f:
            f.write(format_entry(record))
