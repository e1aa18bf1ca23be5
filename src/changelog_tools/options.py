"""Shared constants and option containers."""

from __future__ import annotations

from dataclasses import dataclass

EMPTY = ""
HYPHEN = "-"

VERSION_HEADING_DEPTH = 2
"""Heading depth that introduces one release section (``## 1.0.0``)."""

CHANGELOG_FILENAME = "changelog.md"
DEFAULT_FALLBACK = "See [CHANGELOG.md](./CHANGELOG.md) for the list of changes."

BULLETS = (HYPHEN, "*", "+")
WRAP_MODES = ("keep", "no")


@dataclass(frozen=True)
class ExtractOptions:
    """Options for the `extract_release` transformer."""

    fallback: str | None = None
    """Markdown used when the version is not found in the changelog."""


@dataclass(frozen=True)
class SerializationOptions:
    """Markdown rendering options passed through to mdformat."""

    bullet: str = HYPHEN
    number: bool = False
    wrap: str | int = "keep"

    def __post_init__(self) -> None:
        if self.bullet not in BULLETS:
            raise ValueError(f"Unsupported bullet style {self.bullet!r}.")
        if isinstance(self.wrap, int):
            if isinstance(self.wrap, bool) or self.wrap <= 0:
                raise ValueError("Wrap width must be a positive integer.")
        elif self.wrap not in WRAP_MODES:
            raise ValueError(f"Unsupported wrap mode {self.wrap!r}.")

    def to_mdformat(self) -> dict[str, object]:
        """Return the options mapping understood by mdformat's renderer."""
        return {"bullet": self.bullet, "number": self.number, "wrap": self.wrap}


serialization_options = SerializationOptions()
