"""Journal page and linked-reference models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from weeklydigest.models.outline import OutlineNode


class Source(BaseModel):
    """The page a group of referencing blocks was found on.

    ``display_name`` is the page title as shown to the user; for journal pages it looks like
    ``"October 26th, 2023"``. ``journal_day`` is the YYYYMMDD date of a journal page and is
    ``None`` or ``0`` for ordinary pages.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    display_name: str = Field(default="", alias="originalName")
    journal_day: int | None = Field(default=None, alias="journalDay")

    @property
    def is_journal(self) -> bool:
        return bool(self.journal_day)


class RelatedGroup(BaseModel):
    """Blocks from one source page that link to the exported page."""

    model_config = ConfigDict(frozen=True)

    source: Source | None = None
    blocks: list[OutlineNode] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        # The host hands linked references over as [page, blocks] pairs.
        if isinstance(data, (list, tuple)) and len(data) == 2:
            return {"source": data[0], "blocks": data[1] or []}
        return data
