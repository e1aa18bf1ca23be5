"""Markdown parsing utilities."""

from __future__ import annotations

from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdformat.renderer import MDRenderer

from . import bullets
from .options import SerializationOptions, serialization_options


@lru_cache(maxsize=8)
def build_markdown(
    options: SerializationOptions = serialization_options,
) -> MarkdownIt:
    """Return a CommonMark parser whose renderer emits Markdown via mdformat.

    Reference labels are not stored on link tokens, so ``[text][ref]`` links
    resolve to direct links during parsing and are rendered inline. List
    bullets follow `options.bullet` through the `bullets` extension.
    """
    mdit = MarkdownIt("commonmark", renderer_cls=MDRenderer)
    mdit.options["mdformat"] = options.to_mdformat()
    mdit.options["parser_extension"] = [bullets]
    mdit.options["codeformatters"] = {}
    return mdit


def parse_md(md: str) -> SyntaxTreeNode:
    """Parse a Markdown document into a syntax tree rooted at a `root` node."""
    return SyntaxTreeNode(build_markdown().parse(md))
