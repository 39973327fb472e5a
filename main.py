#!/usr/bin/env python3
"""
Main entry point for the Q&A session dashboards
"""
import sys
from qasession.app import main


if __name__ == "__main__":
    sys.exit(main())
