import pytest

from qasession.core.errors import QuestionValidationError
from qasession.core.session import QuestionSession
from qasession.core.stats import active_questions, question_counts
from qasession.core.store import QuestionStore
from qasession.models.question import Question
from tests.conftest import MemoryBackend, FailingBackend


def seeded_session(questions):
    backend = MemoryBackend()
    store = QuestionStore(backend)
    store.write(questions)
    session = QuestionSession(store)
    session.refresh()
    return session, backend


def test_full_session_scenario(session):
    assert session.refresh() is None
    assert session.questions == []

    ok, error = session.submit("Q1", "")
    assert (ok, error) == (True, None)

    stored, _ = session.store.read()
    assert len(stored) == 1
    q = stored[0]
    assert (q.id, q.text, q.submitter, q.votes, q.status) == (1, "Q1", "Anonymous", 0, "pending")

    session.vote(1)
    session.vote(1)
    assert session.store.read()[0][0].votes == 2

    session.mark_asked(1)
    session.refresh()
    counts = question_counts(session.questions)
    assert session.questions[0].status == "asked"
    assert counts.pending == 0
    assert counts.asked == 1


def test_submit_assigns_next_id_and_timestamp():
    session, _ = seeded_session([Question(4, "a", "x", 0, "t", "deleted"),
                                 Question(2, "b", "x", 0, "t", "pending")])

    session.submit("New", "  Dee ")

    new = session.questions[-1]
    assert new.id == 5
    assert new.submitter == "Dee"
    assert new.timestamp


@pytest.mark.parametrize("text", ["", "   ", None])
def test_submit_rejects_blank_text(text):
    session, backend = seeded_session([])
    writes_before = backend.replace_calls

    with pytest.raises(QuestionValidationError):
        session.submit(text, "Ann")

    assert backend.replace_calls == writes_before


def test_vote_changes_only_target():
    original = [Question(1, "a", "x", 0, "t1", "pending"),
                Question(2, "b", "y", 3, "t2", "asked")]
    session, _ = seeded_session(original)

    session.vote(2)

    assert session.questions[0] == original[0]
    assert session.questions[1] == Question(2, "b", "y", 4, "t2", "asked")


def test_vote_for_unknown_id_does_not_write():
    session, backend = seeded_session([Question(1, "a", "x", 0, "t", "pending")])
    writes_before = backend.replace_calls

    assert session.vote(99) == (False, None)
    assert backend.replace_calls == writes_before


def test_soft_delete_keeps_row_in_store():
    session, _ = seeded_session([Question(1, "a", "x", 0, "t", "pending"),
                                 Question(2, "b", "x", 0, "t", "pending")])

    session.delete(1)

    assert [q.id for q in active_questions(session.questions)] == [2]
    assert question_counts(session.questions).total == 1
    stored, _ = session.store.read()
    assert [(q.id, q.status) for q in stored] == [(1, "deleted"), (2, "pending")]


def test_mark_pending_after_asked():
    session, _ = seeded_session([Question(1, "a", "x", 0, "t", "asked")])

    session.mark_pending(1)

    assert session.store.read()[0][0].status == "pending"


def test_reset_all_to_pending_skips_deleted():
    session, _ = seeded_session([Question(1, "a", "x", 0, "t", "asked"),
                                 Question(2, "b", "x", 0, "t", "pending"),
                                 Question(3, "c", "x", 0, "t", "deleted"),
                                 Question(4, "d", "x", 0, "t", "asked")])

    assert session.reset_all_to_pending() == (True, None)

    stored, _ = session.store.read()
    assert [q.status for q in stored] == ["pending", "pending", "deleted", "pending"]


def test_reset_all_on_empty_snapshot_does_not_write():
    session, backend = seeded_session([])
    writes_before = backend.replace_calls

    assert session.reset_all_to_pending() == (False, None)
    assert backend.replace_calls == writes_before


def test_failed_write_keeps_previous_snapshot():
    session, backend = seeded_session([Question(1, "a", "x", 0, "t", "pending")])
    before = list(session.questions)
    session.store.backend = FailingBackend()

    ok, error = session.vote(1)

    assert ok is False
    assert "connection refused" in error
    assert session.questions == before


def test_failed_refresh_empties_snapshot():
    session, _ = seeded_session([Question(1, "a", "x", 0, "t", "pending")])
    session.store.backend = FailingBackend()

    error = session.refresh()

    assert error
    assert session.questions == []


def test_sessions_do_not_share_snapshots():
    backend = MemoryBackend()
    first = QuestionSession(QuestionStore(backend))
    second = QuestionSession(QuestionStore(backend))

    first.submit("Only in first until refresh")

    assert second.questions == []
    second.refresh()
    assert len(second.questions) == 1


def test_actions_leave_deleted_rows_with_same_id_alone():
    session, backend = seeded_session([
        Question(3, "old spam", "x", 0, "t", "deleted"),
        Question(3, "real", "x", 0, "t", "pending"),
    ])

    assert session.mark_asked(3) == (True, None)
    assert session.vote(3) == (True, None)

    stored, _ = session.store.read()
    assert [(q.text, q.status, q.votes) for q in stored] == [
        ("old spam", "deleted", 0),
        ("real", "asked", 1),
    ]

    assert session.mark_pending(3) == (True, None)
    stored, _ = session.store.read()
    assert [q.status for q in stored] == ["deleted", "pending"]


def test_deleted_only_id_is_not_actionable():
    session, backend = seeded_session([Question(5, "gone", "x", 2, "t", "deleted")])
    writes = backend.replace_calls

    assert session.vote(5) == (False, None)
    assert session.mark_asked(5) == (False, None)
    assert session.find(5) is None
    assert backend.replace_calls == writes
