#===============================================================================
#  UpRL | uprl/main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Main window:
#    - Directory list (Add directory button or drag & drop folders)
#    - Update URLs: runs the batch on a background thread, Stop cancels
#      between files
#    - File menu: New (clear list + counters), Exit
#    - Options menu: Always on top, Scan subdirectories, Backup files
#      (persisted to uprl_settings.json)
#    - Help menu: project links + About
#    - Status bar: directory count and processed count
#===============================================================================

from __future__ import annotations

import logging
import webbrowser
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .batch import BatchProcessor
from .batch_worker import BatchWorker
from .constants import (
    APP_TITLE,
    APP_VERSION,
    ERROR_LOG_NAME,
    HELP_LINKS,
    OPT_BACKUP,
    OPT_LAST_DIR,
    OPT_ON_TOP,
    OPT_RECURSE,
    SETTINGS_FILE_NAME,
)
from .failure_log import FailureLog
from .models import BatchJob
from .settings import job_from_settings, load_settings, save_settings
from .ui_widgets import DirectoryList

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, base_dir: Path):
        super().__init__()
        self.setWindowTitle(APP_TITLE)

        self.base_dir = Path(base_dir)
        self.settings_path = self.base_dir / SETTINGS_FILE_NAME
        self.settings = load_settings(self.settings_path)

        self.job: BatchJob = job_from_settings(self.settings)
        self.worker = BatchWorker(BatchProcessor(FailureLog(ERROR_LOG_NAME)))
        self.worker.signals.outcome.connect(self._on_outcome)
        self.worker.signals.finished.connect(self._on_finished)
        self.worker.signals.failed.connect(self._on_failed)

        self._build_menus()

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(8)

        self.dir_list = DirectoryList()
        self.dir_list.directoriesDropped.connect(self.add_directories)
        layout.addWidget(self.dir_list)

        buttons = QHBoxLayout()
        self.btn_add = QPushButton("&Add directory")
        self.btn_add.clicked.connect(self.browse_directory)
        buttons.addWidget(self.btn_add)

        self.btn_process = QPushButton("&Update URLs")
        self.btn_process.clicked.connect(self.start_batch)
        buttons.addWidget(self.btn_process)

        self.btn_stop = QPushButton("Stop")
        self.btn_stop.setEnabled(False)
        self.btn_stop.clicked.connect(self.stop_batch)
        buttons.addWidget(self.btn_stop)
        layout.addLayout(buttons)

        self.lbl_dirs = QLabel()
        self.lbl_processed = QLabel()
        self.lbl_current = QLabel()
        self.statusBar().addWidget(self.lbl_dirs)
        self.statusBar().addWidget(self.lbl_processed)
        self.statusBar().addWidget(self.lbl_current, 1)

        self._apply_on_top(bool(self.settings.get(OPT_ON_TOP)))
        self.update_counts()

    # ----------------------------
    # Menus
    # ----------------------------
    def _build_menus(self):
        file_menu = self.menuBar().addMenu("&File")
        act_new = QAction("&New", self)
        act_new.setShortcut("Ctrl+N")
        act_new.triggered.connect(self.new_list)
        file_menu.addAction(act_new)
        file_menu.addSeparator()
        act_exit = QAction("E&xit", self)
        act_exit.triggered.connect(self.close)
        file_menu.addAction(act_exit)

        options = self.menuBar().addMenu("&Options")
        self.act_on_top = self._option(options, "&Always on top", OPT_ON_TOP)
        self.act_recurse = self._option(options, "&Scan subdirectories", OPT_RECURSE)
        self.act_backup = self._option(options, "&Backup files", OPT_BACKUP)

        help_menu = self.menuBar().addMenu("&Help")
        for text, url in HELP_LINKS:
            act = QAction(text, self)
            act.triggered.connect(lambda _=False, u=url: webbrowser.open(u))
            help_menu.addAction(act)
        help_menu.addSeparator()
        act_about = QAction("&About...", self)
        act_about.triggered.connect(self.show_about)
        help_menu.addAction(act_about)

    def _option(self, menu, text: str, key: str) -> QAction:
        act = QAction(text, self)
        act.setCheckable(True)
        act.setChecked(bool(self.settings.get(key)))
        act.toggled.connect(lambda checked, k=key: self.set_option(k, checked))
        menu.addAction(act)
        return act

    def set_option(self, key: str, checked: bool):
        self.settings[key] = checked
        if key == OPT_RECURSE:
            self.job.recurse = checked
        elif key == OPT_BACKUP:
            self.job.backup = checked
        elif key == OPT_ON_TOP:
            self._apply_on_top(checked)
        self._save_settings()

    def _apply_on_top(self, on_top: bool):
        was_visible = self.isVisible()
        self.setWindowFlag(Qt.WindowStaysOnTopHint, on_top)
        # changing window flags hides the window
        if was_visible:
            self.show()

    def _save_settings(self):
        try:
            save_settings(self.settings_path, self.settings)
        except OSError as e:
            log.warning("Could not save settings: %s", e)

    # ----------------------------
    # Directory list
    # ----------------------------
    def browse_directory(self):
        start = self.settings.get(OPT_LAST_DIR) or str(Path.home())
        folder = QFileDialog.getExistingDirectory(self, "Add directory", start)
        if folder:
            self.settings[OPT_LAST_DIR] = folder
            self._save_settings()
            self.add_directories([folder])

    def add_directories(self, paths: list):
        if self.worker.is_running:
            return
        for p in paths:
            if self.job.add_directory(p):
                self.dir_list.addItem(self.job.directories[-1])
        self.update_counts()

    def new_list(self):
        if self.worker.is_running:
            QMessageBox.information(self, "Busy", "Wait for the current batch to finish.")
            return
        self.job.clear()
        self.dir_list.clear()
        self.lbl_current.setText("")
        self.update_counts()

    def update_counts(self):
        self.lbl_dirs.setText(f"Directories: {self.job.directory_count}")
        self.lbl_processed.setText(f"Processed: {self.job.processed}")

    # ----------------------------
    # Batch
    # ----------------------------
    def start_batch(self):
        if not self.job.directories:
            QMessageBox.information(self, "No directories", "Add at least one directory first.")
            return
        if not self.worker.start(self.job):
            QMessageBox.information(self, "Running", "Already running.")
            return
        self._set_busy(True)
        self.lbl_current.setText("Scanning…")

    def stop_batch(self):
        self.worker.cancel()
        self.lbl_current.setText("Stopping after the current file…")

    def _set_busy(self, busy: bool):
        self.btn_add.setEnabled(not busy)
        self.btn_process.setEnabled(not busy)
        self.btn_stop.setEnabled(busy)
        self.dir_list.setAcceptDrops(not busy)
        # the running batch has already read these
        self.act_recurse.setEnabled(not busy)
        self.act_backup.setEnabled(not busy)

    def _on_outcome(self, outcome, index: int, total: int):
        self.update_counts()
        self.lbl_current.setText(f"{index}/{total}  {outcome.path.name}")

    def _on_finished(self, summary):
        self._set_busy(False)
        self.update_counts()
        state = "Stopped" if summary.cancelled else "Done"
        self.lbl_current.setText(f"{state}: {summary.processed} of {summary.total} updated")
        if summary.failures:
            QMessageBox.warning(
                self,
                "Update URLs",
                f"{len(summary.failures)} item(s) failed.\n\nSee log:\n{Path(ERROR_LOG_NAME).resolve()}",
            )

    def _on_failed(self, msg: str):
        self._set_busy(False)
        self.update_counts()
        self.lbl_current.setText("")
        QMessageBox.critical(self, "Update URLs failed", msg)

    # ----------------------------
    # About
    # ----------------------------
    def show_about(self):
        QMessageBox.about(
            self,
            f"About {APP_TITLE}",
            f"<b>{APP_TITLE} {APP_VERSION}</b><br><br>"
            "Renames .url shortcut files after the title of the page they point to.<br><br>"
            "CC0 1.0 Universal (CC0 1.0) - Public Domain Dedication<br>"
            "https://creativecommons.org/publicdomain/zero/1.0/legalcode",
        )

    def closeEvent(self, event):
        if self.worker.is_running:
            res = QMessageBox.question(
                self,
                "Exit",
                "A batch is still running. Stop it and exit?",
                QMessageBox.Yes | QMessageBox.No,
            )
            if res != QMessageBox.Yes:
                event.ignore()
                return
            self.worker.cancel()
        event.accept()
