"""
Domain models — Pydantic types for the sync flow.

    from docsync.core.models import Route, SyncConfig
"""

from docsync.core.models.config import SyncConfig
from docsync.core.models.route import Route

__all__ = [
    "Route",
    "SyncConfig",
]
