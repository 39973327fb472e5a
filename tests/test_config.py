import json

from qasession.app import build_session, parse_args
from qasession.core.store import SQLiteTableBackend
from qasession.utils.config import load_config, save_config, DEFAULT_CONFIG


def test_defaults_when_file_missing(tmp_path, monkeypatch):
    for var in ("QASESSION_BACKEND", "QASESSION_SHEET_ID",
                "QASESSION_SHEETS_TOKEN", "QASESSION_SHEETS_API_KEY"):
        monkeypatch.delenv(var, raising=False)

    assert load_config(tmp_path / "missing.json") == DEFAULT_CONFIG


def test_file_values_merge_over_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("QASESSION_BACKEND", raising=False)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"backend": "sqlite", "submitter_refresh_seconds": 30}))

    config = load_config(path)

    assert config["backend"] == "sqlite"
    assert config["submitter_refresh_seconds"] == 30
    assert config["worksheet"] == "Sheet1"


def test_unreadable_file_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("QASESSION_BACKEND", raising=False)
    path = tmp_path / "config.json"
    path.write_text("{not json")

    assert load_config(path)["backend"] == DEFAULT_CONFIG["backend"]


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"sheet_id": "from-file"}))
    monkeypatch.setenv("QASESSION_SHEET_ID", "from-env")
    monkeypatch.setenv("QASESSION_SHEETS_TOKEN", "secret")

    config = load_config(path)

    assert config["sheet_id"] == "from-env"
    assert config["sheets_token"] == "secret"


def test_save_then_load(tmp_path, monkeypatch):
    monkeypatch.delenv("QASESSION_BACKEND", raising=False)
    path = tmp_path / "config.json"
    config = dict(DEFAULT_CONFIG, backend="sqlite", detect_conflicts=True)

    save_config(config, path)

    loaded = load_config(path)
    assert loaded["backend"] == "sqlite"
    assert loaded["detect_conflicts"] is True


def test_build_session_from_config(tmp_path):
    session = build_session({"backend": "sqlite", "sqlite_path": str(tmp_path / "q.db"),
                             "detect_conflicts": True})

    assert isinstance(session.store.backend, SQLiteTableBackend)
    assert session.store.detect_conflicts is True
    assert session.questions == []


def test_parse_args():
    args = parse_args(["moderator", "--config", "other.json"])

    assert args.view == "moderator"
    assert args.config == "other.json"
