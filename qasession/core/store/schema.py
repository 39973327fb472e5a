#!/usr/bin/env python3
"""
Conversion between raw table rows and normalized Question records.

Rows come from a backend as a header row followed by data rows. Reading repairs
the schema (missing columns get deterministic defaults) and coerces cell types;
writing always emits the canonical columns in canonical order.
"""
import math
from typing import List, Any, Optional, Dict

from qasession.models.question import (
    Question, COLUMNS, STATUS_PENDING, DEFAULT_SUBMITTER, current_timestamp
)

# Header used by spreadsheets created before the column was renamed to "text"
LEGACY_TEXT_COLUMN = "question"


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_blank(value: Any) -> bool:
    return value is None or _cell_text(value).strip() == ""


def coerce_int(value: Any) -> Optional[int]:
    """Parse a cell as an integer, truncating numeric values; None when not numeric"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number)


def _column_index(header: List[str]) -> Dict[str, int]:
    index = {}
    for position, name in enumerate(header):
        index.setdefault(name, position)
    if "text" not in index and LEGACY_TEXT_COLUMN in index:
        index["text"] = index[LEGACY_TEXT_COLUMN]
    return index


def rows_to_questions(rows: List[List[Any]], now: Optional[str] = None) -> List[Question]:
    """
    Build normalized questions from a header-first list of rows

    Args:
        rows: Header row followed by data rows, as returned by a backend
        now: Timestamp used when the table has no timestamp column

    Returns:
        One Question per data row, in row order
    """
    if not rows or not rows[0]:
        return []

    header = [_cell_text(name).strip() for name in rows[0]]
    data = rows[1:]
    if not data:
        return []

    index = _column_index(header)
    read_time = current_timestamp() if now is None else now

    def cell(row: List[Any], column: str) -> Any:
        position = index[column]
        return row[position] if position < len(row) else None

    records = []
    for row_number, row in enumerate(data, start=1):
        record = {}
        for column in COLUMNS:
            if column in index:
                record[column] = cell(row, column)
            elif column == "id":
                record[column] = row_number
            elif column == "votes":
                record[column] = 0
            elif column == "status":
                record[column] = STATUS_PENDING
            elif column == "timestamp":
                record[column] = read_time
            else:
                record[column] = ""
        records.append(record)

    ids = [coerce_int(record["id"]) for record in records]
    next_id = max([i for i in ids if i is not None], default=0) + 1

    questions = []
    for record, question_id in zip(records, ids):
        if question_id is None:
            question_id = next_id
            next_id += 1

        votes = coerce_int(record["votes"])
        if votes is None or votes < 0:
            votes = 0

        submitter = DEFAULT_SUBMITTER if _is_blank(record["submitter"]) else _cell_text(record["submitter"])
        status = STATUS_PENDING if _is_blank(record["status"]) else _cell_text(record["status"])

        questions.append(Question(
            id=question_id,
            text=_cell_text(record["text"]),
            submitter=submitter,
            votes=votes,
            timestamp=_cell_text(record["timestamp"]),
            status=status
        ))

    return questions


def questions_to_rows(questions: List[Question]) -> List[List[Any]]:
    """Header row plus one row per question, canonical columns only"""
    return [list(COLUMNS)] + [question.to_row() for question in questions]
