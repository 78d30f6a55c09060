"""Tests for graph sources."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from weeklydigest.models import BlockRef, OutlineNode
from weeklydigest.sources import (
    InMemoryGraphSource,
    PageNotFoundError,
    SnapshotError,
    SnapshotGraphSource,
)


def _write_snapshot(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_snapshot_source_loads_pages_and_references(tmp_path: Path) -> None:
    """It should parse host field names into models."""

    path = _write_snapshot(
        tmp_path / "graph.json",
        {
            "pages": {
                "Project": [
                    {"content": "Goal", "children": [["uuid", "abc"], {"content": "Step"}]}
                ]
            },
            "references": {
                "Project": [
                    [{"originalName": "Jan 2nd, 2024", "journalDay": 20240102}, [{"content": "T"}]],
                    [None, []],
                ]
            },
        },
    )

    source = SnapshotGraphSource.from_path(path)
    outline = source.fetch_outline("Project")
    groups = source.fetch_related_groups("Project")

    assert outline[0].text == "Goal"
    assert isinstance(outline[0].children[0], BlockRef)
    assert isinstance(outline[0].children[1], OutlineNode)
    assert len(groups) == 2
    assert groups[0].source is not None and groups[0].source.journal_day == 20240102
    assert groups[1].source is None


def test_snapshot_source_unknown_page(tmp_path: Path) -> None:
    """It should raise for unknown pages but return no references for unlinked ones."""

    source = SnapshotGraphSource.from_path(
        _write_snapshot(tmp_path / "graph.json", {"pages": {"Lonely": []}})
    )

    with pytest.raises(PageNotFoundError):
        source.fetch_outline("Missing")
    assert source.fetch_related_groups("Lonely") == []


def test_snapshot_source_rejects_bad_files(tmp_path: Path) -> None:
    """It should wrap missing, non-JSON and schema-invalid files in SnapshotError."""

    with pytest.raises(SnapshotError):
        SnapshotGraphSource.from_path(tmp_path / "absent.json")

    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{not json", encoding="utf-8")
    with pytest.raises(SnapshotError):
        SnapshotGraphSource.from_path(bad_json)

    with pytest.raises(SnapshotError):
        SnapshotGraphSource.from_path(
            _write_snapshot(tmp_path / "schema.json", {"pages": {"P": "not a list"}})
        )


def test_in_memory_source() -> None:
    """It should serve copies of the configured lists."""

    source = InMemoryGraphSource(pages={"P": [OutlineNode(text="a")]})

    outline = source.fetch_outline("P")
    outline.append(OutlineNode(text="b"))

    assert [n.text for n in source.fetch_outline("P")] == ["a"]
    assert source.fetch_related_groups("P") == []
    with pytest.raises(PageNotFoundError):
        source.fetch_outline("Q")
