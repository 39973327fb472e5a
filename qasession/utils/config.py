"""
Application configuration module
"""
import os
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Default configuration
DEFAULT_CONFIG = {
    "backend": "sheets",
    "sheet_id": "",
    "worksheet": "Sheet1",
    "sheets_token": "",
    "sheets_api_key": "",
    "sqlite_path": "data/questions.db",
    "sqlite_table": "questions",
    "request_timeout": 30,
    "detect_conflicts": False,
    "submitter_refresh_seconds": 10,
    "moderator_refresh_seconds": 0,
}

CONFIG_FILE = Path.home() / ".qasession_config.json"

# Settings that may come from the environment (or a .env file)
ENV_OVERRIDES = {
    "backend": "QASESSION_BACKEND",
    "sheet_id": "QASESSION_SHEET_ID",
    "sheets_token": "QASESSION_SHEETS_TOKEN",
    "sheets_api_key": "QASESSION_SHEETS_API_KEY",
}


def load_config(config_file=None):
    """Load configuration from file, falling back to defaults, then apply environment overrides"""
    config_file = Path(config_file) if config_file else CONFIG_FILE
    config = dict(DEFAULT_CONFIG)

    if os.path.exists(config_file):
        try:
            with open(config_file, 'r') as f:
                config.update(json.load(f))
        except (OSError, ValueError) as e:
            logging.getLogger(__name__).warning(f"Ignoring unreadable config file {config_file}: {e}")

    for key, env_var in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            config[key] = value

    return config


def save_config(config, config_file=None):
    """Save configuration to file"""
    config_file = Path(config_file) if config_file else CONFIG_FILE
    with open(config_file, 'w') as f:
        json.dump(config, f, indent=2)
