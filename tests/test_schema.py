import pytest

from qasession.core.store.schema import rows_to_questions, questions_to_rows, coerce_int
from qasession.models.question import Question, COLUMNS

HEADER = list(COLUMNS)


def test_empty_table_gives_no_questions():
    assert rows_to_questions([]) == []
    assert rows_to_questions([[]]) == []
    assert rows_to_questions([HEADER]) == []


def test_complete_rows_are_parsed():
    rows = [HEADER, ["1", "What is Python?", "Ada", "3", "2024-05-01 10:00:00", "asked"]]

    questions = rows_to_questions(rows)

    assert questions == [Question(1, "What is Python?", "Ada", 3, "2024-05-01 10:00:00", "asked")]


def test_missing_columns_get_defaults():
    rows = [["text"], ["First"], ["Second"]]

    questions = rows_to_questions(rows, now="2024-05-01 09:00:00")

    assert [q.id for q in questions] == [1, 2]
    for q in questions:
        assert q.submitter == "Anonymous"
        assert q.votes == 0
        assert q.status == "pending"
        assert q.timestamp == "2024-05-01 09:00:00"


def test_missing_text_column_becomes_empty_string():
    questions = rows_to_questions([["id", "votes"], ["4", "2"]])

    assert questions[0].text == ""
    assert questions[0].id == 4
    assert questions[0].votes == 2


def test_legacy_question_column_supplies_text():
    rows = [["id", "question", "submitter", "votes", "timestamp", "status"],
            ["1", "Old header", "Bo", "0", "t", "pending"]]

    assert rows_to_questions(rows)[0].text == "Old header"


def test_invalid_ids_get_fresh_ids_after_existing_ones():
    rows = [HEADER,
            ["abc", "a", "x", "0", "t", "pending"],
            ["5", "b", "x", "0", "t", "pending"],
            ["", "c", "x", "0", "t", "pending"],
            ["2", "d", "x", "0", "t", "pending"]]

    ids = [q.id for q in rows_to_questions(rows)]

    assert ids == [6, 5, 7, 2]
    assert len(set(ids)) == len(ids)


def test_invalid_votes_become_zero():
    rows = [HEADER,
            ["1", "a", "x", "many", "t", "pending"],
            ["2", "b", "x", "", "t", "pending"],
            ["3", "c", "x", "-4", "t", "pending"],
            ["4", "d", "x", "2.0", "t", "pending"]]

    assert [q.votes for q in rows_to_questions(rows)] == [0, 0, 0, 2]


def test_blank_submitter_and_status_are_defaulted():
    rows = [HEADER, ["1", "a", "   ", "0", "t", ""]]

    question = rows_to_questions(rows)[0]

    assert question.submitter == "Anonymous"
    assert question.status == "pending"


def test_unknown_status_is_preserved():
    rows = [HEADER, ["1", "a", "x", "0", "t", "archived"]]

    assert rows_to_questions(rows)[0].status == "archived"


def test_short_rows_are_padded():
    rows = [HEADER, ["1", "Trailing cells trimmed"]]

    question = rows_to_questions(rows)[0]

    assert question.submitter == "Anonymous"
    assert question.votes == 0
    assert question.timestamp == ""
    assert question.status == "pending"


def test_column_order_in_table_is_irrelevant():
    rows = [["status", "votes", "text", "id", "extra", "submitter", "timestamp"],
            ["asked", "7", "Q", "9", "ignored", "Cy", "t"]]

    assert rows_to_questions(rows) == [Question(9, "Q", "Cy", 7, "t", "asked")]


def test_questions_to_rows_uses_canonical_order():
    rows = questions_to_rows([Question(1, "Q", "Ann", 2, "t", "pending")])

    assert rows == [HEADER, [1, "Q", "Ann", 2, "t", "pending"]]


def test_questions_to_rows_empty_list_is_header_only():
    assert questions_to_rows([]) == [HEADER]


@pytest.mark.parametrize("value, expected", [
    ("3", 3),
    (" 12 ", 12),
    ("3.9", 3),
    (4, 4),
    (5.0, 5),
    ("nan", None),
    ("", None),
    (None, None),
    ("x1", None),
    ("9007199254740993", 9007199254740993),
    ("-12345678901234567890", -12345678901234567890),
])
def test_coerce_int(value, expected):
    assert coerce_int(value) == expected
