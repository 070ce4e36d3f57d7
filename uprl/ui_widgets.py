#===============================================================================
#  UpRL | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Reusable UI widgets (directory drop list). Keeps the main window smaller.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QAbstractItemView, QListWidget


def dropped_directories(local_paths: Iterable[str]) -> List[str]:
    """Keep only the paths that are existing directories."""
    return [p for p in local_paths if p and Path(p).is_dir()]


class DirectoryList(QListWidget):
    """List of directories to process. Accepts folders dropped from the file manager."""

    directoriesDropped = Signal(list)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAcceptDrops(True)
        self.setDragDropMode(QAbstractItemView.DropOnly)
        self.setSelectionMode(QAbstractItemView.ExtendedSelection)

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()
        else:
            event.ignore()

    def dropEvent(self, event):
        md = event.mimeData()
        if not md.hasUrls():
            event.ignore()
            return
        local = [u.toLocalFile() for u in md.urls() if u.isLocalFile()]
        dirs = dropped_directories(local)
        if dirs:
            self.directoriesDropped.emit(dirs)
        event.acceptProposedAction()
