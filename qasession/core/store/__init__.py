"""
Question store: normalized read/write of the shared question table
"""
from qasession.core.store.backends import (
    TableBackend,
    GoogleSheetsBackend,
    SQLiteTableBackend,
    create_backend
)
from qasession.core.store.operations import (
    QuestionStore,
    read_questions,
    write_questions
)
