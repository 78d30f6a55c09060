"""Render outline trees as indented ``- `` bullet lists."""

from __future__ import annotations

from collections.abc import Iterable

from weeklydigest.logging import get_logger
from weeklydigest.models.outline import BlockRef, OutlineNode

logger = get_logger(__name__)

INDENT = "  "


def render_node(node: OutlineNode, indent: int = 0) -> str:
    """Render a node and its descendants.

    A node with text becomes one ``"- text"`` line indented by ``indent`` levels, and its
    children move one level deeper. A node without text emits nothing and its children
    stay at ``indent``.

    Unresolved child references are skipped with a warning.

    Args:
        node: Node to render.
        indent: Indentation level of ``node``.

    Returns:
        Newline-terminated lines, or an empty string if nothing in the tree has text.
    """

    out = ""
    next_indent = indent
    if node.text:
        out = f"{INDENT * indent}- {node.text}\n"
        next_indent = indent + 1

    for child in node.children:
        if isinstance(child, BlockRef):
            logger.warning("Skipping unresolved block reference in children: %s", child.uuid)
            continue
        out += render_node(child, next_indent)
    return out


def render_nodes(nodes: Iterable[OutlineNode], indent: int = 0) -> str:
    """Render sibling nodes one after another.

    Every rendered line already ends with a newline, so siblings are separated by exactly
    one newline and no blank lines appear between them.
    """

    return "".join(render_node(node, indent) for node in nodes)
