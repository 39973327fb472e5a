#!/usr/bin/env python3
"""
Table backends for the question store.

A backend exposes the whole remote table as a list of rows, header row first,
and replaces the whole table in one call. Nothing else is assumed about it.
"""
import os
import sqlite3
import logging
from typing import List, Any, Dict
from urllib.parse import quote

import requests

from qasession.core.errors import BackendError, ConfigError

logger = logging.getLogger(__name__)

SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets"


class TableBackend:
    """Interface of the remote tabular service"""

    def fetch_all_rows(self) -> List[List[Any]]:
        raise NotImplementedError

    def replace_all_rows(self, rows: List[List[Any]]) -> None:
        raise NotImplementedError


class GoogleSheetsBackend(TableBackend):
    """
    One worksheet of a Google spreadsheet, accessed through the Sheets REST API v4

    Args:
        sheet_id: Spreadsheet ID (the long token in the sheet URL)
        worksheet: Worksheet (tab) name used as the A1 range
        token: OAuth access token, required for writing
        api_key: API key, enough for reading a shared sheet
        timeout: Request timeout in seconds
    """

    def __init__(self, sheet_id: str, worksheet: str = "Sheet1", token: str = "",
                 api_key: str = "", timeout: float = 30, session=None):
        if not sheet_id:
            raise ConfigError("A spreadsheet ID is required for the Google Sheets backend")
        self.sheet_id = sheet_id
        self.worksheet = worksheet
        self.token = token
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, suffix: str = "") -> str:
        return f"{SHEETS_API_URL}/{self.sheet_id}/values/{quote(self.worksheet, safe='')}{suffix}"

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _params(self, **extra) -> Dict[str, str]:
        params = dict(extra)
        if self.api_key and not self.token:
            params["key"] = self.api_key
        return params

    def _request(self, method: str, url: str, **kwargs) -> dict:
        try:
            response = self.session.request(
                method, url, headers=self._headers(), timeout=self.timeout, **kwargs
            )
            response.raise_for_status()
            return response.json() if response.text.strip() else {}
        except requests.exceptions.RequestException as e:
            raise BackendError(f"Google Sheets request failed: {e}") from e
        except ValueError as e:
            raise BackendError(f"Google Sheets returned an invalid response: {e}") from e

    def fetch_all_rows(self) -> List[List[Any]]:
        data = self._request(
            "GET", self._url(),
            params=self._params(majorDimension="ROWS", valueRenderOption="FORMATTED_VALUE")
        )
        values = data.get("values", [])
        if not isinstance(values, list):
            raise BackendError("Google Sheets returned values in an unexpected shape")
        return values

    def replace_all_rows(self, rows: List[List[Any]]) -> None:
        # The API has no atomic replace: a failure after the clear loses the old content
        self._request("POST", self._url(":clear"), params=self._params(), json={})
        self._request(
            "PUT", self._url(),
            params=self._params(valueInputOption="RAW"),
            json={"range": self.worksheet, "majorDimension": "ROWS", "values": rows}
        )


def _quote_identifier(name: str) -> str:
    return '"' + str(name).replace('"', '""') + '"'


class SQLiteTableBackend(TableBackend):
    """
    A single table in a local SQLite database, every column stored as TEXT

    Args:
        db_path: Path to the database file; parent directories are created as needed
        table: Name of the table holding the questions
    """

    def __init__(self, db_path: str, table: str = "questions"):
        self.db_path = db_path
        self.table = table

    def _connect(self, create: bool = False) -> sqlite3.Connection:
        if create:
            db_dir = os.path.dirname(self.db_path)
            if db_dir and not os.path.exists(db_dir):
                os.makedirs(db_dir)
        return sqlite3.connect(self.db_path)

    def fetch_all_rows(self) -> List[List[Any]]:
        if not os.path.exists(self.db_path):
            return []

        conn = None
        try:
            conn = self._connect()
            exists = conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?",
                (self.table,)
            ).fetchone()
            if not exists:
                return []

            cursor = conn.execute(f"SELECT * FROM {_quote_identifier(self.table)} ORDER BY rowid")
            header = [col[0] for col in cursor.description]
            return [header] + [list(row) for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise BackendError(f"Error reading table {self.table}: {e}") from e
        finally:
            if conn:
                conn.close()

    def replace_all_rows(self, rows: List[List[Any]]) -> None:
        if not rows:
            raise BackendError("Cannot replace a table without a header row")

        header, data = rows[0], rows[1:]
        table = _quote_identifier(self.table)
        columns = ", ".join(f"{_quote_identifier(col)} TEXT" for col in header)
        placeholders = ", ".join(["?"] * len(header))

        conn = None
        try:
            conn = self._connect(create=True)

            # Start transaction
            conn.execute("BEGIN TRANSACTION")
            conn.execute(f"DROP TABLE IF EXISTS {table}")
            conn.execute(f"CREATE TABLE {table} ({columns})")
            conn.executemany(
                f"INSERT INTO {table} VALUES ({placeholders})",
                [[None if cell is None else str(cell) for cell in row] for row in data]
            )

            # Commit transaction
            conn.commit()
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            raise BackendError(f"Error writing table {self.table}: {e}") from e
        finally:
            if conn:
                conn.close()


def create_backend(config: dict) -> TableBackend:
    """Build the backend named by the configuration"""
    backend = config.get("backend", "sheets")
    if backend == "sheets":
        return GoogleSheetsBackend(
            sheet_id=config.get("sheet_id", ""),
            worksheet=config.get("worksheet", "Sheet1"),
            token=config.get("sheets_token", ""),
            api_key=config.get("sheets_api_key", ""),
            timeout=config.get("request_timeout", 30)
        )
    if backend == "sqlite":
        return SQLiteTableBackend(
            config.get("sqlite_path", "data/questions.db"),
            table=config.get("sqlite_table", "questions")
        )
    raise ConfigError(f"Unknown backend: {backend}")
