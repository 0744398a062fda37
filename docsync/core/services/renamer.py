"""
Renamer — give new pages a sidebar name and a home in the target tree.

Each scraped page carries its route on line 2 (``openapi: get /api/widgets``).
The route decides the default sidebar title and the directory the page is
moved into; the operator can override the title.
"""

from __future__ import annotations

import logging
from pathlib import Path

from docsync.adapters.base import Console
from docsync.core.errors import RouteFormatError
from docsync.core.models.config import SyncConfig
from docsync.core.models.route import Route

logger = logging.getLogger(__name__)

ROUTE_HEADER_PREFIX = "openapi: "

# Title prefix per HTTP verb; GET is decided by the path shape.
_VERB_PREFIXES = {
    "post": "Create ",
    "put": "Update ",
    "patch": "Update ",
    "delete": "Delete ",
}

# Prefixes that describe several resources, so the name stays plural.
_PLURAL_PREFIXES = frozenset({"List ", "Batch Get "})

# Segments that would point outside the directory they are joined onto.
_UNSAFE_SEGMENTS = frozenset({".", ".."})


def read_route(path: Path) -> Route:
    """Read the route descriptor from a scraped page.

    Raises:
        RouteFormatError: If line 2 is not ``<verb> <path>``.
        OSError: If the file cannot be read.
    """
    # Undecodable bytes become U+FFFD; only line 2 is used.
    lines = path.read_bytes().decode("utf-8", errors="replace").splitlines()
    header = lines[1] if len(lines) > 1 else ""
    return Route.parse(header.removeprefix(ROUTE_HEADER_PREFIX))


def default_name(route: Route) -> str:
    """Suggested sidebar title, e.g. ``get /api/widgets/{id}`` → ``Get Widget``.

    Singularization only strips one trailing ``s``.

    Raises:
        RouteFormatError: If the path has no resource segment.
    """
    prefix = _name_prefix(route)
    resource = _title(route.resource.replace("-", " ").replace("_", " "))
    if prefix not in _PLURAL_PREFIXES:
        resource = resource.removesuffix("s")
    return prefix + resource


def target_directory(config: SyncConfig, route: Route) -> Path:
    """Directory a route's page belongs in, mirroring the route path.

    ``post /api/user_groups/{id}/members`` →
    ``<target>/user-groups/{id}/members``.

    Raises:
        RouteFormatError: If a segment would leave the target tree.
    """
    subpath = "/".join(route.segments[2:]).replace("_", "-")
    parts = [p for p in subpath.split("/") if p]
    for part in parts:
        if part in _UNSAFE_SEGMENTS or "\\" in part:
            raise RouteFormatError(f"unsafe path segment {part!r} in route: {route}")
    return config.target_path.joinpath(*parts)


def normalize_name(name: str, extension: str) -> str:
    """Turn a sidebar title into a file name: ``List Widgets`` → ``list-widgets.mdx``."""
    return name.replace(" ", "-").lower() + extension


def rename_new_files(
    config: SyncConfig,
    files: list[Path],
    console: Console,
) -> list[Path]:
    """Prompt for a name for each new page and move it into the target tree.

    Pages are handled in the given order.  Any failure stops the batch;
    pages already moved stay where they are.

    Returns:
        The new locations of the moved pages.

    Raises:
        RouteFormatError: If a page's route header is malformed.
        InputClosedError: If the operator console runs out of input.
        OSError: If a directory cannot be created or a page cannot be moved.
    """
    moved: list[Path] = []
    for old_path in files:
        route = read_route(old_path)
        suggestion = default_name(route)
        directory = target_directory(config, route)

        answer = console.ask(f'Route: "{route}" (default: "{suggestion}") => ').strip()
        name = answer or suggestion

        directory.mkdir(parents=True, exist_ok=True)
        new_path = directory / normalize_name(name, config.extension)
        old_path.rename(new_path)
        logger.info("Moved %s → %s", config.display(old_path), config.display(new_path))
        moved.append(new_path)

    return moved


def _name_prefix(route: Route) -> str:
    if route.verb == "get":
        if "{" in route.path:
            return "Get "
        if "/batch/" in route.path:
            return "Batch Get "
        return "List "
    return _VERB_PREFIXES.get(route.verb, "")


def _title(text: str) -> str:
    """Upper-case every letter that starts a word and leave the rest alone.

    A word starts after any ASCII character other than a letter, digit or
    underscore, or after whitespace: ``{org}`` → ``{Org}``,
    ``user.profiles`` → ``User.Profiles``, ``oAuth`` → ``OAuth``.
    """
    chars: list[str] = []
    at_word_start = True
    for ch in text:
        chars.append(ch.upper() if at_word_start else ch)
        at_word_start = _is_word_break(ch)
    return "".join(chars)


def _is_word_break(ch: str) -> bool:
    if ch.isascii():
        return not (ch.isalnum() or ch == "_")
    return ch.isspace()
