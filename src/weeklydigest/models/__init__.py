"""Pydantic models used across the project."""

from __future__ import annotations

from weeklydigest.models.outline import BlockRef, OutlineNode
from weeklydigest.models.page import RelatedGroup, Source

__all__ = [
    "BlockRef",
    "OutlineNode",
    "RelatedGroup",
    "Source",
]
