#!/usr/bin/env python3
"""
Error handling and notification utilities for UI components
"""
import traceback
import logging
from typing import Optional
from PyQt5.QtWidgets import QMessageBox, QWidget, QMainWindow

# Milliseconds a transient notification stays in the status bar
NOTIFY_DURATIONS = {
    "message": 3000,
    "warning": 5000,
    "error": 5000,
}


class ErrorHandler:
    """
    Centralized error handling for UI components
    """
    def __init__(self, parent_widget: Optional[QWidget] = None):
        self.parent = parent_widget
        self.logger = logging.getLogger(__name__)

    def notify(self, message: str, level: str = "message", duration: Optional[int] = None) -> None:
        """Show a transient notification in the parent window's status bar"""
        if level == "error":
            self.logger.error(message)
        elif level == "warning":
            self.logger.warning(message)
        else:
            self.logger.info(message)

        if isinstance(self.parent, QMainWindow):
            timeout = duration if duration is not None else NOTIFY_DURATIONS.get(level, 3000)
            self.parent.statusBar().showMessage(message, timeout)

    def show_error(self, title: str, message: str, detailed_error: Optional[str] = None) -> None:
        """Display error message to user and log it"""
        if detailed_error:
            self.logger.error(f"{message}: {detailed_error}")
        else:
            self.logger.error(message)

        if self.parent:
            error_box = QMessageBox(self.parent)
            error_box.setIcon(QMessageBox.Critical)
            error_box.setWindowTitle(title)
            error_box.setText(message)
            if detailed_error:
                error_box.setDetailedText(detailed_error)
            error_box.exec_()

    def confirm(self, title: str, message: str) -> bool:
        """Ask user for confirmation, returns True if confirmed"""
        if self.parent:
            reply = QMessageBox.question(
                self.parent, title, message,
                QMessageBox.Yes | QMessageBox.No
            )
            return reply == QMessageBox.Yes
        return False

    def handle_exception(self, e: Exception, title: str, message: str) -> None:
        """Handle exception by showing error message with details"""
        error_details = f"{str(e)}\n\n{traceback.format_exc()}"
        self.show_error(title, message, error_details)
