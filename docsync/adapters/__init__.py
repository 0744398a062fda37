"""Adapters — operator console bindings.

Public re-exports for convenient access.
"""

from docsync.adapters.base import Console
from docsync.adapters.console import ClickConsole
from docsync.adapters.mock import ScriptedConsole

__all__ = [
    "ClickConsole",
    "Console",
    "ScriptedConsole",
]
