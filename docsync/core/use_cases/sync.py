"""
Sync use case — match, prune, rename, report.

    Start → Matching → Pruning (if stale pages) → Renaming (if new pages) → Done

Any SyncError or OSError ends the run as aborted with ``result.error``
set.  The scratch directory is removed on every exit path.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field

from docsync.adapters.base import Console
from docsync.core.errors import SyncError
from docsync.core.models.config import SyncConfig
from docsync.core.services.matcher import match
from docsync.core.services.pruner import find_unmatched, prune
from docsync.core.services.renamer import rename_new_files

logger = logging.getLogger(__name__)

SEPARATOR = "====================================="


@dataclass
class SyncResult:
    """Outcome of one sync run. Paths are root-relative display strings."""

    matched: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    renamed: list[str] = field(default_factory=list)
    declined: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        result: dict = {
            "matched": self.matched,
            "removed": self.removed,
            "renamed": self.renamed,
            "declined": self.declined,
        }
        if self.error:
            result["error"] = self.error
        return result


def run_sync(config: SyncConfig, console: Console) -> SyncResult:
    """Reconcile the scratch tree with the target tree.

    Args:
        config: Directories and protected pages.
        console: Where messages go and operator answers come from.

    Returns:
        SyncResult; ``error`` is set when a stage failed.
    """
    result = SyncResult()
    try:
        _run_stages(config, console, result)
    except (SyncError, OSError) as e:
        logger.debug("Sync aborted", exc_info=True)
        result.error = str(e)
    finally:
        clean_scratch(config)
    return result


def clean_scratch(config: SyncConfig) -> None:
    """Remove the scratch directory; a missing directory is fine."""
    shutil.rmtree(config.scratch_path, ignore_errors=True)
    logger.debug("Removed scratch directory %s", config.scratch_path)


def _run_stages(config: SyncConfig, console: Console, result: SyncResult) -> None:
    matches = match(config)
    result.matched = [config.display(p) for p in matches.seen]

    stale = find_unmatched(config, matches.seen)
    if stale:
        console.echo(SEPARATOR)
        console.echo("The following files are no longer in the OpenAPI spec and will be removed:")
        for path in stale:
            console.echo(config.display(path))
        if not console.confirm("Do you want to proceed? (y/n)\n"):
            console.echo("Aborted.")
            result.declined = True
            return

        # Record deletions as they happen so a partial prune is reported.
        for path in stale:
            prune([path])
            result.removed.append(config.display(path))
        logger.info("Removed %d stale page(s)", len(result.removed))

    if not matches.new:
        console.echo("Done.")
        return

    console.echo(SEPARATOR)
    console.echo("One or more new API endpoints were found!")
    console.echo("Please state what these API endpoints should appear as in the API reference sidebar.")
    console.echo("(Leave empty to accept the default suggestion)")

    moved = rename_new_files(config, matches.new, console)
    result.renamed = sorted(config.display(p) for p in moved)

    console.echo(f"Now add the newly generated files to {config.nav_file} (create your own groups!):")
    for line in nav_entries(result.renamed, config.extension):
        console.echo(line)


def nav_entries(paths: list[str], extension: str) -> list[str]:
    """Navigation-file lines for renamed pages: ``"<path-without-extension>",``."""
    return [f'"{p.removesuffix(extension)}",' for p in sorted(paths)]
