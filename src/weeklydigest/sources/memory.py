"""In-memory graph source."""

from __future__ import annotations

from dataclasses import dataclass, field

from weeklydigest.models import OutlineNode, RelatedGroup
from weeklydigest.sources.errors import PageNotFoundError
from weeklydigest.sources.protocol import GraphSource


@dataclass
class InMemoryGraphSource(GraphSource):
    """Graph source backed by plain dictionaries keyed by page name."""

    pages: dict[str, list[OutlineNode]] = field(default_factory=dict)
    references: dict[str, list[RelatedGroup]] = field(default_factory=dict)

    def fetch_outline(self, page: str) -> list[OutlineNode]:
        try:
            return list(self.pages[page])
        except KeyError:
            raise PageNotFoundError(page) from None

    def fetch_related_groups(self, page: str) -> list[RelatedGroup]:
        return list(self.references.get(page, []))
