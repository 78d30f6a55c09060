"""Graph sources supplying page outlines and linked references."""

from __future__ import annotations

from weeklydigest.sources.errors import GraphSourceError, PageNotFoundError, SnapshotError
from weeklydigest.sources.memory import InMemoryGraphSource
from weeklydigest.sources.protocol import GraphSource
from weeklydigest.sources.snapshot import GraphSnapshot, SnapshotGraphSource

__all__ = [
    "GraphSnapshot",
    "GraphSource",
    "GraphSourceError",
    "InMemoryGraphSource",
    "PageNotFoundError",
    "SnapshotError",
    "SnapshotGraphSource",
]
