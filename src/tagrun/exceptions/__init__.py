"""
tagrun exception classes.

This package provides all exception types used throughout tagrun for
consistent error handling and reporting.
"""

from tagrun.exceptions.core import (
    CommandSpawnError,
    DocumentParseError,
    TagRunError,
)

__all__ = [
    "TagRunError",
    "DocumentParseError",
    "CommandSpawnError",
]
