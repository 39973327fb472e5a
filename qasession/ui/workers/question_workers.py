#!/usr/bin/env python3
"""
Question worker threads for background store I/O
"""
import logging
import traceback
from PyQt5.QtCore import QRunnable, pyqtSlot, QObject, pyqtSignal

from qasession.core.errors import QuestionValidationError


class WorkerSignals(QObject):
    """Signals for worker threads."""
    finished = pyqtSignal()
    error = pyqtSignal(str)
    result = pyqtSignal(object)
    status_update = pyqtSignal(str)


class BaseWorker(QRunnable):
    def __init__(self):
        super().__init__()
        self.signals = WorkerSignals()


class LoadQuestionsWorker(BaseWorker):
    """Reload a session's snapshot; emits the read error (or None) as the result"""

    def __init__(self, session):
        super().__init__()
        self.session = session

    @pyqtSlot()
    def run(self):
        try:
            self.signals.status_update.emit("Loading questions...")
            error = self.session.refresh()
            self.signals.result.emit(error)
        except Exception as e:
            logging.error(traceback.format_exc())
            self.signals.error.emit(str(e))
        finally:
            self.signals.finished.emit()


class SaveQuestionsWorker(BaseWorker):
    """
    Run one session action (submit, vote, status change...) off the UI thread.

    The result is the action's (ok, error) pair.
    """

    def __init__(self, action, *args):
        super().__init__()
        self.action = action
        self.args = args

    @pyqtSlot()
    def run(self):
        try:
            self.signals.status_update.emit("Saving questions...")
            self.signals.result.emit(self.action(*self.args))
        except QuestionValidationError as e:
            self.signals.error.emit(str(e))
        except Exception as e:
            logging.error(traceback.format_exc())
            self.signals.error.emit(str(e))
        finally:
            self.signals.finished.emit()
