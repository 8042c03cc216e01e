"""
gui_workers.py - GUI Worker Threads

Provides background execution of long tasks to avoid blocking UI
"""

from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from ..core import Renamer, RenameFailed, CollisionRetryExhausted


class RandomizeWorker(QThread):
    """Randomize (or preview) worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # List[RenameRecord]
    partial = Signal(object)            # Records completed before a failure
    error = Signal(str)                 # Error message

    def __init__(
        self,
        renamer: Renamer,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.renamer = renamer

    def run(self):
        try:
            def progress_callback(current: int, total: int, msg: str):
                self.progress.emit(current, total, msg)

            records = self.renamer.randomize(progress_callback=progress_callback)

            self.finished.emit(records)
        except (RenameFailed, CollisionRetryExhausted) as e:
            self.partial.emit(e.records)
            self.error.emit(str(e))
        except Exception as e:
            self.error.emit(str(e))
