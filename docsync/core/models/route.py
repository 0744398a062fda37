"""
Route model — the ``<verb> <path>`` descriptor embedded in each page.
"""

from __future__ import annotations

from pydantic import BaseModel

from docsync.core.errors import RouteFormatError


class Route(BaseModel):
    """An API operation identified by HTTP verb and resource path.

    Paths are assumed to look like ``/api/<resource>/...``: the first
    two segments are a fixed prefix and carry no naming information.
    """

    verb: str
    path: str

    @classmethod
    def parse(cls, line: str) -> Route:
        """Split a descriptor on its first space.

        Raises:
            RouteFormatError: If the line has no space separating verb and path.
        """
        parts = line.split(" ", 1)
        if len(parts) < 2:
            raise RouteFormatError(f"unexpected route name format: {line}")
        return cls(verb=parts[0], path=parts[1])

    @property
    def segments(self) -> list[str]:
        """Path segments, including the empty one before the leading slash.

        Raises:
            RouteFormatError: If there is no resource segment after the prefix.
        """
        segments = self.path.split("/")
        if len(segments) < 3:
            raise RouteFormatError(f"unexpected route name format: {self}")
        return segments

    @property
    def resource(self) -> str:
        """The raw resource segment (third path segment)."""
        return self.segments[2]

    def __str__(self) -> str:
        return f"{self.verb} {self.path}"
