#!/usr/bin/env python3
"""
Question data model for the Q&A session dashboards
"""
from dataclasses import dataclass, replace
from datetime import datetime
from typing import List, Any

STATUS_PENDING = "pending"
STATUS_ASKED = "asked"
STATUS_DELETED = "deleted"

DEFAULT_SUBMITTER = "Anonymous"

# Canonical column order of the shared table
COLUMNS = ("id", "text", "submitter", "votes", "timestamp", "status")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def current_timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


@dataclass
class Question:
    id: int
    text: str
    submitter: str = DEFAULT_SUBMITTER
    votes: int = 0
    timestamp: str = ""
    status: str = STATUS_PENDING

    @property
    def is_active(self) -> bool:
        return self.status != STATUS_DELETED

    def with_votes(self, votes: int) -> 'Question':
        return replace(self, votes=votes)

    def with_status(self, status: str) -> 'Question':
        return replace(self, status=status)

    def to_row(self) -> List[Any]:
        """Cell values in canonical column order"""
        return [getattr(self, column) for column in COLUMNS]
