"""mdformat parser extension that applies the configured list bullet.

mdformat renders bullet lists with ``-`` and switches to ``*`` for a list
that directly follows another one. The configured bullet replaces ``-`` and
the alternate marker replaces ``*``, so adjacent lists stay distinct.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from markdown_it import MarkdownIt
from mdformat.renderer import RenderContext, RenderTreeNode

_MDFORMAT_PRIMARY = "-"
_MDFORMAT_SECONDARY = "*"


def alternate_bullet(bullet: str) -> str:
    """Return the marker used for a list adjacent to one using `bullet`."""
    return "-" if bullet == "*" else "*"


def update_mdit(mdit: MarkdownIt) -> None:
    """Parsing is unchanged; only rendering is customized."""


def _swap_marker(line: str, markers: Mapping[str, str]) -> str:
    # Item lines start at column 0; continuation lines are indented or empty.
    marker = line[:1]
    if marker in markers and (len(line) == 1 or line[1] == " "):
        return markers[marker] + line[1:]
    return line


def _bullet_list(text: str, node: RenderTreeNode, context: RenderContext) -> str:
    bullet = context.options.get("mdformat", {}).get("bullet", _MDFORMAT_PRIMARY)
    if bullet == _MDFORMAT_PRIMARY:
        return text
    markers = {
        _MDFORMAT_PRIMARY: bullet,
        _MDFORMAT_SECONDARY: alternate_bullet(bullet),
    }
    return "\n".join(_swap_marker(line, markers) for line in text.split("\n"))


RENDERERS: Mapping[str, Callable[[RenderTreeNode, RenderContext], str]] = {}
POSTPROCESSORS: Mapping[str, Callable[[str, RenderTreeNode, RenderContext], str]] = {
    "bullet_list": _bullet_list
}
