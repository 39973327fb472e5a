from PyQt5.QtWidgets import QDialog, QVBoxLayout, QProgressBar, QLabel
from PyQt5.QtCore import Qt


class ProgressDialog(QDialog):
    """Busy indicator shown while a store read or write is outstanding"""

    def __init__(self, title="Operation in Progress", parent=None):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setWindowModality(Qt.WindowModal)
        self.setWindowFlags(self.windowFlags() & ~Qt.WindowContextHelpButtonHint)
        self.setMinimumWidth(300)

        layout = QVBoxLayout()

        self.status_label = QLabel("Please wait...")
        layout.addWidget(self.status_label)

        # Store calls report no progress, so the bar runs in busy mode
        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 0)
        layout.addWidget(self.progress_bar)

        self.setLayout(layout)

    def update_status(self, text):
        """Update the status text"""
        self.status_label.setText(text)
