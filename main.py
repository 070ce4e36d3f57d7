#===============================================================================
#  UpRL  |  Internet Shortcut Title Updater
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Scans the directories you pick for Windows Internet Shortcut files (.url),
#  fetches the page each one links to and renames the shortcut after the
#  page's <title>. Supports:
#    - Adding folders via dialog or drag & drop
#    - Scanning subdirectories (optional)
#    - Backing up originals into ./UpRL-backup before renaming (optional)
#    - Failures appended to UpRL-ErrorLog.txt; the batch keeps going
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (PySide6, requests, beautifulsoup4)
#  which are licensed separately by their respective authors. Ensure compliance
#  with their license terms when distributing this software.
#===============================================================================

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from uprl.constants import APP_TITLE
from uprl.log_setup import configure_logging
from uprl.main_window import MainWindow


def main() -> int:
    base_dir = Path(__file__).resolve().parent
    configure_logging(base_dir)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    w = MainWindow(base_dir)
    w.resize(520, 360)
    w.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
