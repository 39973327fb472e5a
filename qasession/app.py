#!/usr/bin/env python3
"""
Application wiring: configuration -> backend -> store -> session -> window
"""
import sys
import argparse
import logging

from qasession.core.session import QuestionSession
from qasession.core.store import QuestionStore, create_backend
from qasession.utils.config import load_config

VIEWS = ("submitter", "moderator")


def build_session(config: dict) -> QuestionSession:
    """Create a fresh session over the configured table"""
    backend = create_backend(config)
    store = QuestionStore(backend, detect_conflicts=bool(config.get("detect_conflicts", False)))
    return QuestionSession(store)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Q&A session dashboards")
    parser.add_argument("view", choices=VIEWS, help="Dashboard to open")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the application"""
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    config = load_config(args.config)
    try:
        session = build_session(config)
    except ValueError as e:
        logging.error(f"Invalid configuration: {str(e)}")
        return 1

    from PyQt5.QtWidgets import QApplication
    app = QApplication(sys.argv[:1])

    if args.view == "moderator":
        from qasession.ui.moderator_window import ModeratorWindow
        window = ModeratorWindow(session, refresh_seconds=int(config.get("moderator_refresh_seconds", 0)))
    else:
        from qasession.ui.submitter_window import SubmitterWindow
        window = SubmitterWindow(session, refresh_seconds=int(config.get("submitter_refresh_seconds", 10)))

    window.show()
    return app.exec_()
