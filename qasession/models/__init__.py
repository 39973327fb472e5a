"""
Data models for the Q&A session dashboards
"""
from qasession.models.question import (
    Question,
    COLUMNS,
    STATUS_PENDING,
    STATUS_ASKED,
    STATUS_DELETED,
    DEFAULT_SUBMITTER,
    TIMESTAMP_FORMAT,
    current_timestamp
)
