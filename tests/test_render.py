"""Tests for outline rendering."""

from __future__ import annotations

import logging

import pytest

from weeklydigest.models import BlockRef, OutlineNode
from weeklydigest.render import render_node, render_nodes


def _node(text: str, *children: OutlineNode | BlockRef) -> OutlineNode:
    return OutlineNode(text=text, children=list(children))


def test_render_nested_blocks_indents_two_spaces_per_level() -> None:
    """It should indent each level of text-bearing ancestors by two spaces."""

    tree = _node("root", _node("child", _node("grandchild")), _node("sibling"))

    assert render_node(tree) == (
        "- root\n"
        "  - child\n"
        "    - grandchild\n"
        "  - sibling\n"
    )


def test_render_respects_starting_indent() -> None:
    """It should start at the given indentation level."""

    assert render_node(_node("x", _node("y")), indent=2) == "    - x\n      - y\n"


def test_empty_text_node_is_transparent() -> None:
    """It should emit no line for an empty node and keep its children at its level."""

    tree = _node("top", _node("", _node("a", _node("a1")), _node("b")))

    assert render_node(tree) == (
        "- top\n"
        "  - a\n"
        "    - a1\n"
        "  - b\n"
    )


def test_empty_leaf_renders_nothing() -> None:
    """It should render an empty childless node as an empty string."""

    assert render_node(_node("")) == ""


def test_block_refs_are_skipped_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    """It should skip unresolved children, warn, and keep rendering later siblings."""

    tree = _node("parent", _node("first"), BlockRef(uuid="65a1-unresolved"), _node("last"))

    with caplog.at_level(logging.WARNING, logger="weeklydigest.render.outline"):
        out = render_node(tree)

    assert out == "- parent\n  - first\n  - last\n"
    assert any("65a1-unresolved" in r.getMessage() for r in caplog.records)


def test_line_count_matches_text_bearing_nodes() -> None:
    """It should emit one line per node with text, ignoring refs and empty nodes."""

    tree = _node(
        "1",
        _node("", _node("2"), _node("")),
        BlockRef(uuid="r"),
        _node("3", _node("4", _node("", _node("5")))),
    )

    lines = render_node(tree).splitlines()

    assert len(lines) == 5
    assert [line.strip() for line in lines] == ["- 1", "- 2", "- 3", "- 4", "- 5"]
    assert lines[-1] == "      - 5"


def test_render_nodes_separates_siblings_by_single_newline() -> None:
    """It should put sibling trees on consecutive lines without blank lines."""

    out = render_nodes([_node("A"), _node("B", _node("B1"))])

    assert out == "- A\n- B\n  - B1\n"
    assert "\n\n" not in out
