"""Weekly digest builder.

Turns a page into a single text document: the page's own outline, followed by a backlog of
this week's journal blocks that link to the page, newest journal day first::

    - Goal
      - Milestone
    ----
    ## Backlog
    **January 2, 2024**
    - Task
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date

from weeklydigest.config import DigestSettings
from weeklydigest.logging import get_logger, page_context, set_step
from weeklydigest.models import RelatedGroup
from weeklydigest.render import render_nodes
from weeklydigest.sources.protocol import GraphSource
from weeklydigest.utils.dates import strip_ordinal_suffix, week_start_yyyymmdd
from weeklydigest.utils.links import strip_page_refs

logger = get_logger(__name__)

Clock = Callable[[], date]


def _journal_day(group: RelatedGroup) -> int:
    if group.source is None:
        return 0
    return group.source.journal_day or 0


def select_this_week(groups: Iterable[RelatedGroup], week_start: int) -> list[RelatedGroup]:
    """Keep journal groups dated on or after ``week_start`` and order them newest first.

    Groups without a source or from non-journal pages are dropped. Groups sharing a journal
    day keep their original relative order.

    Args:
        groups: Linked-reference groups.
        week_start: First day of the week as YYYYMMDD.

    Returns:
        The retained groups, sorted by journal day descending.
    """

    kept: list[RelatedGroup] = []
    for group in groups:
        if group.source is None or not group.source.is_journal:
            logger.debug("Dropping reference group without a journal source: %s", group.source)
            continue
        if group.source.journal_day < week_start:
            continue
        kept.append(group)
    return sorted(kept, key=_journal_day, reverse=True)


def clean_group(group: RelatedGroup, page: str) -> RelatedGroup:
    """Return a copy of ``group`` with links to ``page`` removed from its top-level blocks."""

    blocks = [
        block.model_copy(update={"text": strip_page_refs(block.text, page)})
        for block in group.blocks
    ]
    return group.model_copy(update={"blocks": blocks})


def render_group(group: RelatedGroup) -> str:
    """Render one journal day as a bold date line followed by its blocks."""

    title = group.source.display_name if group.source is not None else ""
    return f"**{strip_ordinal_suffix(title)}**\n{render_nodes(group.blocks)}"


class WeeklyDigestBuilder:
    """Build the weekly digest of a page.

    Args:
        source: Graph to read the page and its linked references from.
        clock: Returns today's date; decides which week is "this week".
        settings: Separator and heading placed before the backlog.
    """

    def __init__(
        self,
        source: GraphSource,
        clock: Clock = date.today,
        settings: DigestSettings | None = None,
    ) -> None:
        self._source = source
        self._clock = clock
        self._settings = settings or DigestSettings()

    def build(self, page: str) -> str:
        """Build the digest for ``page``.

        Errors raised by the graph source propagate unchanged.
        """

        with page_context(page=page, step="fetch"):
            outline = self._source.fetch_outline(page)
            groups = self._source.fetch_related_groups(page)
            logger.debug("Fetched %d blocks and %d reference groups", len(outline), len(groups))

            set_step("filter")
            week_start = week_start_yyyymmdd(self._clock())
            journals = [
                clean_group(group, page) for group in select_this_week(groups, week_start)
            ]
            logger.info(
                "Kept %d of %d reference groups since %d", len(journals), len(groups), week_start
            )

            set_step("render")
            body = render_nodes(outline)

            set_step("assemble")
            return (
                body
                + f"{self._settings.separator}\n"
                + f"{self._settings.backlog_heading}\n"
                + "".join(render_group(group) for group in journals)
            )


def build_digest(page: str, *, source: GraphSource, clock: Clock = date.today) -> str:
    """Build the weekly digest of ``page`` with default settings."""

    return WeeklyDigestBuilder(source, clock=clock).build(page)
