"""Export a page outline together with this week's journal backlog."""

from __future__ import annotations

from weeklydigest.digest import WeeklyDigestBuilder, build_digest
from weeklydigest.models import BlockRef, OutlineNode, RelatedGroup, Source
from weeklydigest.render import render_node

__version__ = "0.1.0"

__all__ = [
    "BlockRef",
    "OutlineNode",
    "RelatedGroup",
    "Source",
    "WeeklyDigestBuilder",
    "build_digest",
    "render_node",
]
