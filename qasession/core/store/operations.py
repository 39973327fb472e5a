#!/usr/bin/env python3
"""
Question store operations: read and write the whole question table.

Neither operation raises. Failures are logged and come back as the error half
of the returned pair, so UI code can decide how loudly to report them.
"""
import hashlib
import json
import logging
from typing import List, Optional, Tuple, Any

from qasession.core.errors import WriteConflictError
from qasession.core.store.backends import TableBackend
from qasession.core.store.schema import rows_to_questions, questions_to_rows
from qasession.models.question import Question

logger = logging.getLogger(__name__)


def table_fingerprint(rows: List[List[Any]]) -> str:
    """
    Digest of the table contents, used to notice that the table changed.

    Computed over the normalized records so that a table written with integer
    cells and read back as text yields the same digest.
    """
    normalized = [question.to_row() for question in rows_to_questions(rows, now="")]
    payload = json.dumps(normalized, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class QuestionStore:
    """
    Reads and writes the full question list through a table backend

    Args:
        backend: The remote table
        detect_conflicts: Refuse a write when the table changed since the last read or write
    """

    def __init__(self, backend: TableBackend, detect_conflicts: bool = False):
        self.backend = backend
        self.detect_conflicts = detect_conflicts
        self.last_fingerprint: Optional[str] = None

    def read(self) -> Tuple[List[Question], Optional[str]]:
        try:
            rows = self.backend.fetch_all_rows()
            questions = rows_to_questions(rows)
            self.last_fingerprint = table_fingerprint(rows)
            logger.info(f"Read {len(questions)} questions")
            return questions, None
        except Exception as e:
            logger.error(f"Error reading questions: {str(e)}")
            return [], str(e)

    def write(self, questions: List[Question]) -> Tuple[bool, Optional[str]]:
        try:
            rows = questions_to_rows(questions)
            if self.detect_conflicts:
                self._check_unchanged()

            logger.info(f"Writing {len(questions)} questions")
            self.backend.replace_all_rows(rows)
            self.last_fingerprint = table_fingerprint(rows)
            return True, None
        except WriteConflictError as e:
            logger.warning(f"Write refused: {str(e)}")
            return False, str(e)
        except Exception as e:
            logger.error(f"Error writing questions: {str(e)}")
            return False, str(e)

    def _check_unchanged(self) -> None:
        if self.last_fingerprint is None:
            return
        current = table_fingerprint(self.backend.fetch_all_rows())
        if current != self.last_fingerprint:
            raise WriteConflictError(
                "The question table was changed by someone else. Refresh and try again."
            )


def read_questions(backend: TableBackend) -> Tuple[List[Question], Optional[str]]:
    """Read and normalize every question in the table"""
    return QuestionStore(backend).read()


def write_questions(backend: TableBackend, questions: List[Question]) -> Tuple[bool, Optional[str]]:
    """Replace the table with the given questions"""
    return QuestionStore(backend).write(questions)
