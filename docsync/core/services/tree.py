"""
Directory walking shared by the matcher and pruner.
"""

from __future__ import annotations

from pathlib import Path

from docsync.core.errors import SyncError


def list_files(root: Path) -> list[Path]:
    """Every regular file under ``root``, in lexical walk order.

    Entries are sorted by name within each directory and directories are
    descended where they sort, so ``a.mdx`` < ``b/`` < ``c.mdx``.

    Raises:
        SyncError: If ``root`` is missing or not a directory.
        OSError: If a directory cannot be listed.
    """
    if not root.is_dir():
        raise SyncError(f"Not a directory: {root}")

    files: list[Path] = []
    _walk(root, files)
    return files


def _walk(directory: Path, files: list[Path]) -> None:
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            _walk(entry, files)
        elif entry.is_file():
            files.append(entry)
