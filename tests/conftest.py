import pytest

from qasession.core.store import QuestionStore, SQLiteTableBackend
from qasession.core.store.backends import TableBackend
from qasession.core.errors import BackendError
from qasession.core.session import QuestionSession


class MemoryBackend(TableBackend):
    """Table kept in a list, recording every replace call"""

    def __init__(self, rows=None):
        self.rows = [list(row) for row in rows] if rows else []
        self.replace_calls = 0

    def fetch_all_rows(self):
        return [list(row) for row in self.rows]

    def replace_all_rows(self, rows):
        self.replace_calls += 1
        self.rows = [list(row) for row in rows]


class FailingBackend(TableBackend):
    def fetch_all_rows(self):
        raise BackendError("connection refused")

    def replace_all_rows(self, rows):
        raise BackendError("connection refused")


@pytest.fixture
def sqlite_backend(tmp_path):
    return SQLiteTableBackend(str(tmp_path / "data" / "questions.db"))


@pytest.fixture
def store(sqlite_backend):
    return QuestionStore(sqlite_backend)


@pytest.fixture
def session(store):
    return QuestionSession(store)
