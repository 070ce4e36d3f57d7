#===============================================================================
#  UpRL | log_setup.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Diagnostic logging (./.uprl/logs/uprl.log + stderr). Separate from the
#  user-facing UpRL-ErrorLog.txt written by failure_log.py.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path

from .constants import LOGS_DIR

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(base_dir: Path, level: int = logging.INFO) -> Path:
    """Attach file and console handlers to the root logger; return the log file path."""
    logs_dir = Path(base_dir) / LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / "uprl.log"

    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)

    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)

    sh = logging.StreamHandler()
    sh.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    sh.setLevel(logging.WARNING)
    root.addHandler(sh)

    # urllib3 is chatty at INFO
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return log_file
