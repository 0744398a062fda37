"""
Error types shared by the sync stages.

Filesystem failures surface as plain ``OSError``; everything the tool
itself rejects derives from ``SyncError``.  Both abort the run.
"""

from __future__ import annotations


class SyncError(Exception):
    """Raised when a sync stage cannot continue."""


class RouteFormatError(SyncError):
    """Raised when a page's route header cannot be parsed."""


class InputClosedError(SyncError):
    """Raised when the operator console has no more input to give."""
