"""Outline to text rendering."""

from __future__ import annotations

from weeklydigest.render.outline import INDENT, render_node, render_nodes

__all__ = ["INDENT", "render_node", "render_nodes"]
