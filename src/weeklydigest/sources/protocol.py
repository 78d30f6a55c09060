"""Protocol definitions for pluggable graph sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from weeklydigest.models import OutlineNode, RelatedGroup


class GraphSource(ABC):
    """Read access to a page graph."""

    @abstractmethod
    def fetch_outline(self, page: str) -> list[OutlineNode]:
        """Return the top-level blocks of ``page`` with their children."""

    @abstractmethod
    def fetch_related_groups(self, page: str) -> list[RelatedGroup]:
        """Return blocks on other pages that link to ``page``, grouped by page."""
