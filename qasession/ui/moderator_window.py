#!/usr/bin/env python3
"""
Moderator dashboard: manage question status and view statistics
"""
import logging
from typing import Optional, Tuple
from PyQt5.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGroupBox,
                             QPushButton, QTabWidget, QLabel, QTableWidget,
                             QTableWidgetItem, QAbstractItemView, QHeaderView)
from PyQt5.QtCore import Qt, QTimer

from qasession.core.session import QuestionSession
from qasession.core.stats import display_order, question_counts, status_summary, status_label
from qasession.models.question import STATUS_ASKED, STATUS_PENDING
from qasession.ui.components.question_table import QuestionTable
from qasession.ui.utils.worker_mixin import WorkerMixin
from qasession.ui.workers.question_workers import LoadQuestionsWorker, SaveQuestionsWorker

STATS_HEADERS = ["Status", "Count", "Avg Votes", "Total Votes"]


class ModeratorWindow(QMainWindow, WorkerMixin):
    def __init__(self, session: QuestionSession, refresh_seconds: int = 0) -> None:
        super().__init__()
        self.session = session
        self.logger = logging.getLogger(__name__)
        self.init_workers()
        self.setWindowTitle("Q&A Session - Moderator Dashboard")
        self.setMinimumSize(1000, 700)
        self.init_ui()

        self.refresh_timer = QTimer(self)
        self.refresh_timer.timeout.connect(self.auto_refresh)
        if refresh_seconds > 0:
            self.refresh_timer.start(refresh_seconds * 1000)

        self.load_questions()

    def init_ui(self) -> None:
        tabs = QTabWidget()
        tabs.addTab(self.build_manage_tab(), "Manage Questions")
        tabs.addTab(self.build_stats_tab(), "Statistics")
        self.setCentralWidget(tabs)

    def build_manage_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout(tab)

        group = QGroupBox("Question Management")
        group_layout = QVBoxLayout()

        button_row = QHBoxLayout()
        refresh_btn = QPushButton("Refresh Questions")
        refresh_btn.clicked.connect(self.refresh_questions)
        reset_btn = QPushButton("Reset All to Pending")
        reset_btn.clicked.connect(self.reset_all_to_pending)
        button_row.addWidget(refresh_btn)
        button_row.addWidget(reset_btn)
        button_row.addStretch()
        group_layout.addLayout(button_row)

        self.questions_table = QuestionTable([
            ("Question", lambda q: q.text),
            ("Submitted By", lambda q: q.submitter),
            ("Votes", lambda q: q.votes),
            ("Status", lambda q: status_label(q.status, fallback="Unknown")),
            ("Submitted At", lambda q: q.timestamp),
            ("Actions", None),
        ], "No questions available.")
        group_layout.addWidget(self.questions_table)

        group.setLayout(group_layout)
        layout.addWidget(group)
        return tab

    def build_stats_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout(tab)

        boxes = QHBoxLayout()
        self.total_label = self.make_value_box(boxes, "Total Questions")
        self.pending_label = self.make_value_box(boxes, "Pending Questions")
        self.asked_label = self.make_value_box(boxes, "Asked Questions")
        layout.addLayout(boxes)

        group = QGroupBox("Question Statistics")
        group_layout = QVBoxLayout()
        self.stats_table = QTableWidget()
        self.stats_table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.stats_table.verticalHeader().setVisible(False)
        group_layout.addWidget(self.stats_table)
        group.setLayout(group_layout)
        layout.addWidget(group)
        return tab

    def make_value_box(self, layout: QHBoxLayout, subtitle: str) -> QLabel:
        box = QGroupBox(subtitle)
        box_layout = QVBoxLayout()
        value = QLabel("0")
        value.setAlignment(Qt.AlignCenter)
        value.setStyleSheet("font-size: 28px; font-weight: bold;")
        box_layout.addWidget(value)
        box.setLayout(box_layout)
        layout.addWidget(box)
        return value

    def make_actions(self, question) -> QWidget:
        actions = QWidget()
        layout = QHBoxLayout(actions)
        layout.setContentsMargins(2, 2, 2, 2)

        asked_btn = QPushButton("Mark Asked")
        asked_btn.setEnabled(question.status != STATUS_ASKED)
        asked_btn.clicked.connect(lambda _, qid=question.id: self.mark_asked(qid))

        pending_btn = QPushButton("Mark Pending")
        pending_btn.setEnabled(question.status != STATUS_PENDING)
        pending_btn.clicked.connect(lambda _, qid=question.id: self.mark_pending(qid))

        delete_btn = QPushButton("Delete")
        delete_btn.clicked.connect(lambda _, qid=question.id: self.delete_question(qid))

        layout.addWidget(asked_btn)
        layout.addWidget(pending_btn)
        layout.addWidget(delete_btn)
        return actions

    def render_questions(self) -> None:
        questions = self.session.questions
        self.questions_table.set_questions(display_order(questions), widgets={5: self.make_actions})

        counts = question_counts(questions)
        self.total_label.setText(str(counts.total))
        self.pending_label.setText(str(counts.pending))
        self.asked_label.setText(str(counts.asked))

        summary = status_summary(questions)
        self.stats_table.clear()
        if not summary:
            self.stats_table.setColumnCount(1)
            self.stats_table.setRowCount(1)
            self.stats_table.setHorizontalHeaderLabels(["Message"])
            self.stats_table.setItem(0, 0, QTableWidgetItem("No statistics available."))
        else:
            self.stats_table.setColumnCount(len(STATS_HEADERS))
            self.stats_table.setRowCount(len(summary))
            self.stats_table.setHorizontalHeaderLabels(STATS_HEADERS)
            for row, group in enumerate(summary):
                for col, value in enumerate(group):
                    self.stats_table.setItem(row, col, QTableWidgetItem(str(value)))
        self.stats_table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)

    def load_questions(self, show_progress: bool = True) -> None:
        self.run_worker(
            LoadQuestionsWorker(self.session), "Loading Questions",
            on_result=self.handle_load_result, show_progress=show_progress
        )

    def handle_load_result(self, error: Optional[str]) -> None:
        if error:
            self.logger.error(f"Questions could not be loaded: {error}")
        self.render_questions()

    def auto_refresh(self) -> None:
        if not self.busy:
            self.load_questions(show_progress=False)

    def refresh_questions(self) -> None:
        if self.busy:
            return
        self.load_questions()
        self.error_handler.notify("Questions refreshed!")

    def run_action(self, title: str, success_message: str, action, *args) -> None:
        if self.busy:
            return

        def handle_result(result: Tuple[bool, Optional[str]]) -> None:
            ok, error = result
            if ok:
                self.error_handler.notify(success_message)
            elif error:
                self.error_handler.notify(f"Error saving questions: {error}", "error")
            self.render_questions()

        self.run_worker(SaveQuestionsWorker(action, *args), title, on_result=handle_result)

    def mark_asked(self, question_id: int) -> None:
        self.run_action("Updating Question", "Question marked as asked!",
                        self.session.mark_asked, question_id)

    def mark_pending(self, question_id: int) -> None:
        self.run_action("Updating Question", "Question marked as pending!",
                        self.session.mark_pending, question_id)

    def delete_question(self, question_id: int) -> None:
        if self.busy:
            return
        if self.error_handler.confirm(
                "Delete Question",
                "Are you sure you want to delete this question? This action cannot be undone."):
            self.run_action("Deleting Question", "Question deleted!",
                            self.session.delete, question_id)

    def reset_all_to_pending(self) -> None:
        self.run_action("Resetting Questions", "All questions reset to pending status!",
                        self.session.reset_all_to_pending)
