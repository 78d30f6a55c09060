"""Outline models.

A page is an ordered list of :class:`OutlineNode` trees. A child slot can hold either a
resolved node or a :class:`BlockRef`, the placeholder the host leaves behind for blocks it
has not expanded (serialized by the host as a ``["uuid", "<id>"]`` pair).
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BlockRef(BaseModel):
    """Unresolved reference to a block."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ref"] = "ref"
    uuid: str


class OutlineNode(BaseModel):
    """A text block with ordered children."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["block"] = "block"
    text: str = Field(default="", alias="content")
    children: list[Annotated[OutlineNode | BlockRef, Field(discriminator="kind")]] = Field(
        default_factory=list
    )

    @field_validator("children", mode="before")
    @classmethod
    def _tag_children(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            return value
        return [_tag_child(child) for child in value]


def _tag_child(child: Any) -> Any:
    if isinstance(child, (list, tuple)):
        # ["uuid", "6543..."]
        ref = child[-1] if child else ""
        return {"kind": "ref", "uuid": str(ref)}
    if isinstance(child, dict) and "kind" not in child:
        return {**child, "kind": "block"}
    return child


OutlineNode.model_rebuild()
