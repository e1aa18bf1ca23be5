"""Release section extraction for Keep a Changelog documents.

A release section starts at a level-2 heading whose leading text is the
version (optionally bracketed or linked) and runs until the next level-2
heading or the end of the document. Only top-level nodes are inspected.

See https://keepachangelog.com/en/1.1.0/ for the document convention.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence

from markdown_it.tree import SyntaxTreeNode

from .options import EMPTY, VERSION_HEADING_DEPTH, ExtractOptions
from .parser import parse_md

logger = logging.getLogger(__name__)

LeadTextReader = Callable[[SyntaxTreeNode], str | None]


def build_version_pattern(version: str) -> re.Pattern[str]:
    """Compile the heading pattern for one version.

    Matches ``1.0.0`` or ``[1.0.0]`` at the start of the heading text when
    followed by whitespace or the end of the text, so ``1.0.0 - 2024-01-01``
    and ``[1.0.0] (prerelease)`` match while ``1.0.0-beta`` and ``10.0.0``
    do not.
    """
    escaped = re.escape(version)
    return re.compile(rf"^(?:{escaped}|\[{escaped}\])(?:\s|\Z)")


def heading_depth(node: SyntaxTreeNode) -> int | None:
    """Return the depth of a heading node, or None for any other node."""
    if node.type != "heading":
        return None
    tag = node.tag
    if len(tag) != 2 or tag[0] != "h" or not tag[1].isdigit():
        return None
    return int(tag[1])


def _first_child(node: SyntaxTreeNode) -> SyntaxTreeNode | None:
    children = node.children
    return children[0] if children else None


def _read_text(node: SyntaxTreeNode) -> str | None:
    return node.content


def _read_link(node: SyntaxTreeNode) -> str | None:
    # ## [1.0.0](https://example.com/releases/1.0.0)
    label = _first_child(node)
    if label is None or label.type != "text":
        return None
    return label.content


_LEAD_TEXT_READERS: dict[str, LeadTextReader] = {
    "text": _read_text,
    "link": _read_link,
}
"""Inline shapes that may carry a version; anything else never matches."""


def heading_lead_text(heading: SyntaxTreeNode) -> str | None:
    """Return the text of a heading's first inline child when it is readable."""
    inline = _first_child(heading)
    if inline is None or inline.type != "inline":
        return None
    lead = _first_child(inline)
    if lead is None:
        return None
    reader = _LEAD_TEXT_READERS.get(lead.type)
    if reader is None:
        return None
    return reader(lead)


def is_matching_version_heading(
    node: SyntaxTreeNode,
    pattern: re.Pattern[str],
    depth: int = VERSION_HEADING_DEPTH,
) -> bool:
    """Return whether node is a heading of `depth` whose text matches pattern."""
    if heading_depth(node) != depth:
        return False
    text = heading_lead_text(node)
    return text is not None and pattern.match(text) is not None


def collect_until_next_heading(
    nodes: Sequence[SyntaxTreeNode],
    start: int,
    depth: int = VERSION_HEADING_DEPTH,
) -> list[SyntaxTreeNode]:
    """Collect nodes from `start` up to, not including, the next heading of `depth`."""
    collected: list[SyntaxTreeNode] = []
    for node in nodes[start:]:
        if heading_depth(node) == depth:
            break
        collected.append(node)
    return collected


def find_release_nodes(
    tree: SyntaxTreeNode, version: str
) -> list[SyntaxTreeNode]:
    """Return the top-level nodes of the first section headed by `version`.

    Later headings for the same version are ignored. An empty list means no
    heading matched or the matched section had no content.
    """
    pattern = build_version_pattern(version)
    nodes = tree.children
    for index, node in enumerate(nodes):
        if is_matching_version_heading(node, pattern):
            return collect_until_next_heading(nodes, index + 1)
    return []


def _new_root(children: list[SyntaxTreeNode]) -> SyntaxTreeNode:
    root = SyntaxTreeNode()
    root.children = children
    return root


def extract(
    tree: SyntaxTreeNode, version: str, fallback_text: str = EMPTY
) -> SyntaxTreeNode:
    """Extract one release section from a parsed changelog.

    Returns a new root whose children are the original section nodes (shared,
    not copied). When nothing is found, returns the parse of `fallback_text`
    instead, which is an empty root for empty text.
    """
    release_nodes = find_release_nodes(tree, version)
    if release_nodes:
        logger.debug(
            "Extracted %d node(s) for version %s", len(release_nodes), version
        )
        return _new_root(release_nodes)
    logger.info("No content found for version %s; using fallback", version)
    return parse_md(fallback_text)


def extract_release(
    version: str, options: ExtractOptions | None = None
) -> Callable[[SyntaxTreeNode], SyntaxTreeNode]:
    """Return a tree transformer that extracts `version` from a changelog."""
    fallback = (options.fallback if options else None) or EMPTY

    def transformer(tree: SyntaxTreeNode) -> SyntaxTreeNode:
        return extract(tree, version, fallback)

    return transformer
