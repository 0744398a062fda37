"""
Pruner — find curated pages whose endpoint disappeared, and delete them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from docsync.core.models.config import SyncConfig
from docsync.core.services.tree import list_files

logger = logging.getLogger(__name__)


def find_unmatched(config: SyncConfig, seen: Iterable[Path]) -> list[Path]:
    """Target files that were not seen during matching and are not protected.

    Returned in walk order.
    """
    keep = set(seen) | config.protected_paths()
    unmatched = [p for p in list_files(config.target_path) if p not in keep]
    logger.info("%d existing page(s) have no scraped counterpart", len(unmatched))
    return unmatched


def prune(paths: Iterable[Path]) -> list[Path]:
    """Delete each path in order.

    Stops at the first failure: files already deleted stay deleted and
    the rest are left alone.

    Returns:
        The deleted paths.

    Raises:
        OSError: If a file cannot be deleted.
    """
    removed: list[Path] = []
    for path in paths:
        path.unlink()
        logger.debug("Removed %s", path)
        removed.append(path)
    return removed
