#===============================================================================
#  UpRL | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for file/folder naming conventions, option keys and links.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "UpRL"
APP_VERSION = "1.0.0"

SHORTCUT_SUFFIX = ".url"
BACKUP_DIR_NAME = "UpRL-backup"
ERROR_LOG_NAME = "UpRL-ErrorLog.txt"
SETTINGS_FILE_NAME = "uprl_settings.json"
LOGS_DIR = ".uprl/logs"

# Forbidden filename characters are replaced with this
REPLACEMENT_CHAR = "_"

# Settings keys (persisted as-is in SETTINGS_FILE_NAME)
OPT_RECURSE = "recurseSubdirectories"
OPT_BACKUP = "backupFiles"
OPT_ON_TOP = "alwaysOnTop"
OPT_LAST_DIR = "lastDirectory"

HELP_LINKS = [
    ("&Free Releases @ PublicDomain.is", "https://publicdomain.is"),
    ("&Original thread @ DonationCoder.com", "https://www.donationcoder.com/forum/index.php?topic=52165.0"),
    ("&Source code @ Github.com", "https://github.com/publicdomain/uprl"),
]
