"""Weekly digest assembly."""

from __future__ import annotations

from weeklydigest.digest.builder import (
    WeeklyDigestBuilder,
    build_digest,
    clean_group,
    render_group,
    select_this_week,
)

__all__ = [
    "WeeklyDigestBuilder",
    "build_digest",
    "clean_group",
    "render_group",
    "select_this_week",
]
