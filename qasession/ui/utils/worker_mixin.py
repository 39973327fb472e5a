#!/usr/bin/env python3
"""
Mixin class to provide standardized worker handling
"""
from typing import Callable, Optional
from PyQt5.QtCore import QThreadPool
from qasession.ui.components.progress_dialog import ProgressDialog
from qasession.ui.error_handler import ErrorHandler


class WorkerMixin:
    """
    Mixin class that runs store workers in the background, keeping the window
    disabled behind a busy dialog until every outstanding worker has finished
    """

    def init_workers(self) -> None:
        self.threadpool = QThreadPool()
        # Reads and writes share the session snapshot: run them one at a time, in order
        self.threadpool.setMaxThreadCount(1)
        self.error_handler = ErrorHandler(self)
        self.progress_dialog: Optional[ProgressDialog] = None
        self.active_workers = 0

    @property
    def busy(self) -> bool:
        return self.active_workers > 0

    def run_worker(self,
                   worker,
                   progress_title: str,
                   on_result: Optional[Callable] = None,
                   show_progress: bool = True) -> None:
        """
        Run a worker in a background thread

        Args:
            worker: Worker instance to start
            progress_title: Title for the busy dialog and error messages
            on_result: Optional function to handle the worker result
            show_progress: Disable the window and show the busy dialog while running
        """
        self.active_workers += 1
        if show_progress:
            if self.progress_dialog is None:
                self.progress_dialog = ProgressDialog(progress_title, self)
                self.progress_dialog.show()
            worker.signals.status_update.connect(self.progress_dialog.update_status)
            self.setEnabled(False)

        try:
            if on_result:
                worker.signals.result.connect(on_result)
            worker.signals.error.connect(
                lambda error: self.handle_worker_error(error, progress_title)
            )
            worker.signals.finished.connect(self.handle_worker_finished)
            self.threadpool.start(worker)
        except Exception as e:
            self.handle_worker_finished()
            self.error_handler.handle_exception(
                e, "Error", f"Failed to start {progress_title.lower()}"
            )

    def handle_worker_finished(self) -> None:
        self.active_workers = max(self.active_workers - 1, 0)
        if self.active_workers:
            return
        if self.progress_dialog:
            self.progress_dialog.accept()
            self.progress_dialog = None
        self.setEnabled(True)

    def handle_worker_error(self, error: str, context: str) -> None:
        """Default error handler for workers"""
        self.error_handler.notify(f"Error during {context.lower()}: {error}", "error")
