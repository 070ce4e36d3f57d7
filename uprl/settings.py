#===============================================================================
#  UpRL | settings.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Load/save of persistent options (scan subdirectories, backup, always on top).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .constants import OPT_BACKUP, OPT_LAST_DIR, OPT_ON_TOP, OPT_RECURSE
from .models import BatchJob

log = logging.getLogger(__name__)


def default_settings() -> Dict[str, Any]:
    return {
        OPT_RECURSE: True,    # scan nested folders
        OPT_BACKUP: False,    # move originals to UpRL-backup/ before renaming
        OPT_ON_TOP: False,    # UI only
        OPT_LAST_DIR: "",     # folder picker start location
    }


def load_settings(settings_path: Path) -> Dict[str, Any]:
    """Load settings from disk (or create defaults)."""
    d = default_settings()
    if not settings_path.exists():
        return d
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable settings file %s: %s", settings_path, e)
        return d
    if not isinstance(data, dict):
        return d
    for k in d:
        if k not in data:
            data[k] = d[k]
    return data


def save_settings(settings_path: Path, settings: Dict[str, Any]) -> None:
    """Persist settings to disk."""
    settings_path.write_text(json.dumps(settings, indent=2), encoding="utf-8")


def job_from_settings(settings: Dict[str, Any]) -> BatchJob:
    """A fresh BatchJob carrying the processing flags from `settings`."""
    return BatchJob(
        recurse=bool(settings.get(OPT_RECURSE, True)),
        backup=bool(settings.get(OPT_BACKUP, False)),
    )
