#!/usr/bin/env python3
"""
Per-window question state and the actions both dashboards perform on it.

A session owns the local snapshot of the question list. Every action builds a
new candidate list, writes the whole list through the store and only adopts the
candidate once the write succeeded, so a failed write leaves the snapshot as it
was before the action.
"""
import logging
from typing import List, Optional, Tuple

from qasession.core.errors import QuestionValidationError
from qasession.core.store.operations import QuestionStore
from qasession.models.question import (
    Question, STATUS_PENDING, STATUS_ASKED, STATUS_DELETED,
    DEFAULT_SUBMITTER, current_timestamp
)

WriteResult = Tuple[bool, Optional[str]]


class QuestionSession:
    def __init__(self, store: QuestionStore):
        self.store = store
        self.questions: List[Question] = []
        self.logger = logging.getLogger(__name__)

    def refresh(self) -> Optional[str]:
        """Reload the snapshot; on failure the snapshot becomes empty"""
        questions, error = self.store.read()
        self.questions = questions
        return error

    def commit(self, candidate: List[Question]) -> WriteResult:
        ok, error = self.store.write(candidate)
        if ok:
            self.questions = candidate
        return ok, error

    def find(self, question_id: int) -> Optional[Question]:
        """Active question with the given id; deleted rows may reuse ids"""
        for q in self.questions:
            if q.is_active and q.id == question_id:
                return q
        return None

    def next_id(self) -> int:
        return max((q.id for q in self.questions), default=0) + 1

    def submit(self, text: str, submitter: str = "") -> WriteResult:
        """Append a new pending question and save the list"""
        if not text or not text.strip():
            raise QuestionValidationError("Please enter a question before submitting.")

        submitter = submitter.strip() if submitter else ""
        question = Question(
            id=self.next_id(),
            text=text,
            submitter=submitter or DEFAULT_SUBMITTER,
            votes=0,
            timestamp=current_timestamp(),
            status=STATUS_PENDING
        )
        return self.commit(self.questions + [question])

    def vote(self, question_id: int) -> WriteResult:
        if self.find(question_id) is None:
            self.logger.warning(f"Vote for unknown question {question_id} ignored")
            return False, None

        candidate = [
            q.with_votes(q.votes + 1) if q.is_active and q.id == question_id else q
            for q in self.questions
        ]
        return self.commit(candidate)

    def set_status(self, question_id: int, status: str) -> WriteResult:
        if self.find(question_id) is None:
            self.logger.warning(f"Status change for unknown question {question_id} ignored")
            return False, None

        candidate = [
            q.with_status(status) if q.is_active and q.id == question_id else q
            for q in self.questions
        ]
        return self.commit(candidate)

    def mark_asked(self, question_id: int) -> WriteResult:
        return self.set_status(question_id, STATUS_ASKED)

    def mark_pending(self, question_id: int) -> WriteResult:
        return self.set_status(question_id, STATUS_PENDING)

    def delete(self, question_id: int) -> WriteResult:
        """Soft delete: the row stays in the table with status "deleted" """
        return self.set_status(question_id, STATUS_DELETED)

    def reset_all_to_pending(self) -> WriteResult:
        if not self.questions:
            return False, None

        candidate = [
            q.with_status(STATUS_PENDING) if q.is_active else q
            for q in self.questions
        ]
        return self.commit(candidate)
