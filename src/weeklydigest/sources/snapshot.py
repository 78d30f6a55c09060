"""JSON snapshot graph source.

A snapshot is a JSON document exported from the host application::

    {
      "pages": {"Project": [{"content": "Goal", "children": [...]}]},
      "references": {
        "Project": [[{"originalName": "Jan 2nd, 2024", "journalDay": 20240102},
                     [{"content": "Task #[[Project]]"}]]]
      }
    }

Blocks use the host's field names; unexpanded children appear as ``["uuid", "<id>"]``.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from weeklydigest.logging import get_logger
from weeklydigest.models import OutlineNode, RelatedGroup
from weeklydigest.sources.errors import PageNotFoundError, SnapshotError
from weeklydigest.sources.protocol import GraphSource

logger = get_logger(__name__)


class GraphSnapshot(BaseModel):
    """Parsed snapshot document."""

    pages: dict[str, list[OutlineNode]] = Field(default_factory=dict)
    references: dict[str, list[RelatedGroup]] = Field(default_factory=dict)


_SNAPSHOT_ADAPTER = TypeAdapter(GraphSnapshot)


class SnapshotGraphSource(GraphSource):
    """Graph source reading from a :class:`GraphSnapshot`."""

    def __init__(self, snapshot: GraphSnapshot) -> None:
        self._snapshot = snapshot

    @classmethod
    def from_path(cls, path: Path) -> SnapshotGraphSource:
        """Load a snapshot file.

        Raises:
            SnapshotError: If the file is missing, is not JSON, or does not match the schema.
        """

        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SnapshotError(f"cannot read snapshot {path}: {e}") from e

        try:
            data = json.loads(raw)
            snapshot = _SNAPSHOT_ADAPTER.validate_python(data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise SnapshotError(f"invalid snapshot {path}: {e}") from e

        logger.info(
            "Loaded snapshot with %d pages and %d reference lists from %s",
            len(snapshot.pages),
            len(snapshot.references),
            path,
        )
        return cls(snapshot)

    def fetch_outline(self, page: str) -> list[OutlineNode]:
        try:
            return list(self._snapshot.pages[page])
        except KeyError:
            raise PageNotFoundError(page) from None

    def fetch_related_groups(self, page: str) -> list[RelatedGroup]:
        return list(self._snapshot.references.get(page, []))
