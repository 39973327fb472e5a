#!/usr/bin/env python3
"""
Exception types raised inside the question store and session
"""


class StoreError(Exception):
    """Base class for question store failures"""


class BackendError(StoreError):
    """The remote table could not be read or written"""


class WriteConflictError(StoreError):
    """The remote table changed since it was last read"""


class QuestionValidationError(ValueError):
    """A submitted question was rejected before reaching the store"""


class ConfigError(ValueError):
    """Configuration does not describe a usable backend"""
