from typing import Callable, Dict, List, Tuple
from PyQt5.QtWidgets import QTableWidget, QTableWidgetItem, QHeaderView, QAbstractItemView, QWidget
from PyQt5.QtCore import Qt

from qasession.models.question import Question

# (header, value function) pairs; a None value function marks a widget column
Column = Tuple[str, Callable[[Question], object]]


class QuestionTable(QTableWidget):
    """Read-only table of questions with optional per-row widgets (buttons)"""

    def __init__(self, columns: List[Column], empty_message: str, parent=None):
        super().__init__(parent)
        self.columns = columns
        self.empty_message = empty_message
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setSelectionMode(QAbstractItemView.NoSelection)
        self.verticalHeader().setVisible(False)
        self.setWordWrap(True)
        self.show_empty()

    def show_empty(self) -> None:
        self.clear()
        self.setColumnCount(1)
        self.setRowCount(1)
        self.setHorizontalHeaderLabels(["Message"])
        self.setItem(0, 0, QTableWidgetItem(self.empty_message))
        self.horizontalHeader().setSectionResizeMode(0, QHeaderView.Stretch)

    def set_questions(self, questions: List[Question],
                      widgets: Dict[int, Callable[[Question], QWidget]] = None) -> None:
        """Fill the table, one row per question, in the given order"""
        if not questions:
            self.show_empty()
            return

        widgets = widgets or {}
        self.clear()
        self.setColumnCount(len(self.columns))
        self.setRowCount(len(questions))
        self.setHorizontalHeaderLabels([header for header, _ in self.columns])

        for row, question in enumerate(questions):
            for col, (_, value) in enumerate(self.columns):
                if col in widgets:
                    self.setCellWidget(row, col, widgets[col](question))
                else:
                    item = QTableWidgetItem(str(value(question)))
                    item.setData(Qt.UserRole, question.id)
                    self.setItem(row, col, item)

        header = self.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.Stretch)
        for col in range(1, len(self.columns)):
            header.setSectionResizeMode(col, QHeaderView.ResizeToContents)
        self.resizeRowsToContents()
