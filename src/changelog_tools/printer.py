"""Markdown serialization of syntax trees."""

from __future__ import annotations

from markdown_it.tree import SyntaxTreeNode

from .options import SerializationOptions, serialization_options
from .parser import build_markdown


def render_md(
    tree: SyntaxTreeNode, options: SerializationOptions | None = None
) -> str:
    """Render a syntax tree back to Markdown text.

    Non-empty output always ends with a single newline; an empty tree renders
    as an empty string.
    """
    mdit = build_markdown(options or serialization_options)
    return mdit.renderer.render(tree.to_tokens(), mdit.options, {})
