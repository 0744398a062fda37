"""
Matcher — deduplicate freshly scraped pages against the curated tree.

A scraped page whose bytes are identical to an existing page is already
documented: it is deleted from the scratch tree and the existing page is
marked as seen.  Everything else is new and goes on to the renamer.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field
from pathlib import Path

from docsync.core.models.config import SyncConfig
from docsync.core.services.tree import list_files

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Outcome of matching the scratch tree against the target tree."""

    seen: list[Path] = field(default_factory=list)   # target pages with a scratch twin
    new: list[Path] = field(default_factory=list)    # scratch pages with no twin


class ContentIndex:
    """Target files keyed by SHA-256 digest of their bytes.

    When several files share content, the first in walk order is kept.
    """

    def __init__(self, files: list[Path]):
        self._by_digest: dict[str, Path] = {}
        for path in files:
            self._by_digest.setdefault(_digest(path.read_bytes()), path)

    def __len__(self) -> int:
        return len(self._by_digest)

    def find(self, content: bytes) -> Path | None:
        """Return the indexed file whose bytes equal ``content``, if any."""
        candidate = self._by_digest.get(_digest(content))
        if candidate is None:
            return None
        if candidate.read_bytes() != content:
            return None
        return candidate


def match(config: SyncConfig) -> MatchResult:
    """Classify every scratch page as duplicate or new.

    Duplicates are removed from the scratch tree immediately.

    Raises:
        SyncError: If either tree is missing.
        OSError: If any file cannot be read or deleted.
    """
    scratch_files = list_files(config.scratch_path)
    index = ContentIndex(list_files(config.target_path))
    logger.info(
        "Matching %d scraped page(s) against %d existing page(s)",
        len(scratch_files),
        len(index),
    )

    result = MatchResult()
    for path in scratch_files:
        existing = index.find(path.read_bytes())
        if existing is not None:
            logger.debug("%s duplicates %s", config.display(path), config.display(existing))
            path.unlink()
            result.seen.append(existing)
        else:
            logger.debug("%s is new", config.display(path))
            result.new.append(path)

    logger.info("Matched %d, new %d", len(result.seen), len(result.new))
    return result


def _digest(content: bytes) -> str:
    return hashlib.sha256(content).hexdigest()
