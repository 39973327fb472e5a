#!/usr/bin/env python3
"""
Submitter dashboard: submit questions and vote on them
"""
import logging
from typing import Optional, Tuple
from PyQt5.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGroupBox,
                             QFormLayout, QTextEdit, QLineEdit, QPushButton)
from PyQt5.QtCore import QTimer

from qasession.core.session import QuestionSession
from qasession.core.stats import display_order, status_label
from qasession.ui.components.question_table import QuestionTable
from qasession.ui.utils.worker_mixin import WorkerMixin
from qasession.ui.workers.question_workers import LoadQuestionsWorker, SaveQuestionsWorker


class SubmitterWindow(QMainWindow, WorkerMixin):
    def __init__(self, session: QuestionSession, refresh_seconds: int = 10) -> None:
        super().__init__()
        self.session = session
        self.logger = logging.getLogger(__name__)
        self.init_workers()
        self.setWindowTitle("Q&A Session - Submit & Vote")
        self.setMinimumSize(900, 650)
        self.init_ui()

        self.refresh_timer = QTimer(self)
        self.refresh_timer.timeout.connect(self.auto_refresh)
        if refresh_seconds > 0:
            self.refresh_timer.start(refresh_seconds * 1000)

        self.load_questions()

    def init_ui(self) -> None:
        central = QWidget()
        main_layout = QVBoxLayout(central)

        # Submission group
        submit_group = QGroupBox("Submit a Question")
        submit_layout = QFormLayout()

        self.question_text = QTextEdit()
        self.question_text.setPlaceholderText("Type your question here...")
        self.question_text.setMaximumHeight(90)
        submit_layout.addRow("Your Question:", self.question_text)

        self.submitter_name = QLineEdit()
        self.submitter_name.setPlaceholderText("Anonymous")
        submit_layout.addRow("Your Name (optional):", self.submitter_name)

        submit_btn = QPushButton("Submit Question")
        submit_btn.clicked.connect(self.submit_question)
        submit_layout.addRow(submit_btn)

        submit_group.setLayout(submit_layout)
        main_layout.addWidget(submit_group)

        # Questions & voting group
        list_group = QGroupBox("Questions & Voting")
        list_layout = QVBoxLayout()

        button_row = QHBoxLayout()
        refresh_btn = QPushButton("Refresh Questions")
        refresh_btn.clicked.connect(self.refresh_questions)
        button_row.addWidget(refresh_btn)
        button_row.addStretch()
        list_layout.addLayout(button_row)

        self.questions_table = QuestionTable([
            ("Question", lambda q: q.text),
            ("Submitted By", lambda q: q.submitter),
            ("Votes", None),
            ("Status", lambda q: status_label(q.status, fallback="Pending")),
            ("Submitted At", lambda q: q.timestamp),
        ], "No questions submitted yet.")
        list_layout.addWidget(self.questions_table)

        list_group.setLayout(list_layout)
        main_layout.addWidget(list_group)

        self.setCentralWidget(central)

    def render_questions(self) -> None:
        self.questions_table.set_questions(
            display_order(self.session.questions),
            widgets={2: self.make_vote_button}
        )

    def make_vote_button(self, question) -> QPushButton:
        button = QPushButton(f"Vote ({question.votes})")
        button.clicked.connect(lambda _, qid=question.id: self.vote(qid))
        return button

    def load_questions(self, show_progress: bool = True) -> None:
        self.run_worker(
            LoadQuestionsWorker(self.session), "Loading Questions",
            on_result=self.handle_load_result, show_progress=show_progress
        )

    def handle_load_result(self, error: Optional[str]) -> None:
        # Read failures only reach the log; the list simply shows empty
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

    def submit_question(self) -> None:
        if self.busy:
            self.error_handler.notify("Still talking to the question table, try again in a moment.", "warning")
            return

        text = self.question_text.toPlainText()
        if not text.strip():
            self.error_handler.notify("Please enter a question before submitting.", "warning")
            return

        self.run_worker(
            SaveQuestionsWorker(self.session.submit, text, self.submitter_name.text()),
            "Submitting Question",
            on_result=self.handle_submit_result
        )

    def handle_submit_result(self, result: Tuple[bool, Optional[str]]) -> None:
        ok, error = result
        if ok:
            self.question_text.clear()
            self.submitter_name.clear()
            self.error_handler.notify("Question submitted successfully!")
        elif error:
            self.error_handler.notify(f"Error saving questions: {error}", "error")
        self.render_questions()

    def vote(self, question_id: int) -> None:
        if self.busy:
            return
        self.run_worker(
            SaveQuestionsWorker(self.session.vote, question_id),
            "Recording Vote",
            on_result=self.handle_vote_result
        )

    def handle_vote_result(self, result: Tuple[bool, Optional[str]]) -> None:
        ok, error = result
        if ok:
            self.error_handler.notify("Vote recorded!", duration=2000)
        elif error:
            self.error_handler.notify(f"Error saving questions: {error}", "error")
        self.render_questions()
