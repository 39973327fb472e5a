#!/usr/bin/env python3
"""
Read-side views over a question list, shared by both dashboards
"""
from collections import namedtuple
from typing import List, Iterable

from qasession.models.question import Question, STATUS_PENDING, STATUS_ASKED

QuestionCounts = namedtuple("QuestionCounts", ["total", "pending", "asked"])
StatusSummary = namedtuple("StatusSummary", ["status", "count", "avg_votes", "total_votes"])

STATUS_LABELS = {
    STATUS_ASKED: "Asked",
    STATUS_PENDING: "Pending",
}


def active_questions(questions: Iterable[Question]) -> List[Question]:
    """Questions that have not been soft-deleted"""
    return [q for q in questions if q.is_active]


def display_order(questions: Iterable[Question]) -> List[Question]:
    """Active questions, most votes first, newer ids first among equal votes"""
    return sorted(active_questions(questions), key=lambda q: (-q.votes, -q.id))


def question_counts(questions: List[Question]) -> QuestionCounts:
    # total excludes deleted rows; pending/asked are counted over every row
    return QuestionCounts(
        total=len(active_questions(questions)),
        pending=sum(1 for q in questions if q.status == STATUS_PENDING),
        asked=sum(1 for q in questions if q.status == STATUS_ASKED)
    )


def status_summary(questions: Iterable[Question]) -> List[StatusSummary]:
    """Per-status record count, average votes (1 decimal) and total votes over active questions"""
    groups = {}
    for q in active_questions(questions):
        groups.setdefault(q.status, []).append(q.votes)

    return [
        StatusSummary(
            status=status,
            count=len(votes),
            avg_votes=round(sum(votes) / len(votes), 1),
            total_votes=sum(votes)
        )
        for status, votes in sorted(groups.items())
    ]


def status_label(status: str, fallback: str = "Pending") -> str:
    """Badge text for a status; unrecognized statuses get the fallback"""
    return STATUS_LABELS.get(status, fallback)
