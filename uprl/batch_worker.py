#===============================================================================
#  UpRL | batch_worker.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Runs a BatchProcessor on a background thread and reports back through Qt
#  signals so the window stays responsive during the network round trips.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import threading
from typing import Optional

from PySide6.QtCore import QObject, Signal

from .batch import BatchProcessor
from .models import BatchJob

log = logging.getLogger(__name__)


class BatchSignals(QObject):
    outcome = Signal(object, int, int)   # FileOutcome, index, total
    finished = Signal(object)            # BatchSummary
    failed = Signal(str)


class BatchWorker:
    def __init__(self, processor: BatchProcessor):
        self.processor = processor
        self.signals = BatchSignals()
        self._thread: Optional[threading.Thread] = None
        self._stop = threading.Event()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, job: BatchJob) -> bool:
        """Start a batch; returns False when one is already running."""
        if self.is_running or self.processor.is_running:
            return False
        self._stop.clear()

        def worker():
            try:
                summary = self.processor.run(
                    job,
                    on_outcome=lambda o, i, n: self.signals.outcome.emit(o, i, n),
                    should_stop=self._stop.is_set,
                )
                self.signals.finished.emit(summary)
            except Exception as e:
                log.exception("Batch failed")
                self.signals.failed.emit(str(e))

        self._thread = threading.Thread(target=worker, daemon=True)
        self._thread.start()
        return True

    def cancel(self) -> None:
        if self.is_running:
            self._stop.set()
