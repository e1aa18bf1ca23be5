"""changelog-tools package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .extractor import extract, extract_release
from .options import ExtractOptions, SerializationOptions, serialization_options
from .parser import parse_md
from .printer import render_md

__all__ = [
    "ExtractOptions",
    "SerializationOptions",
    "__version__",
    "extract",
    "extract_release",
    "parse_md",
    "render_md",
    "serialization_options",
]

try:
    __version__ = version("changelog-tools")
except PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
    __version__ = "0.0.0"
