"""Graph source errors."""

from __future__ import annotations


class GraphSourceError(RuntimeError):
    """Base error for graph lookups."""


class PageNotFoundError(GraphSourceError):
    """Raised when a page does not exist in the graph."""

    def __init__(self, page: str) -> None:
        super().__init__(f"page not found: {page!r}")
        self.page = page


class SnapshotError(GraphSourceError):
    """Raised when a graph snapshot cannot be read or parsed."""
