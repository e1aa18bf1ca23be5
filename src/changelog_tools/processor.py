"""End-to-end changelog processing: read, parse, extract, render."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import ChangelogNotFoundError, ChangelogReadError
from .extractor import extract_release
from .options import ExtractOptions, SerializationOptions
from .parser import parse_md
from .paths import resolve_input_path
from .printer import render_md
from .runtime_config import normalize_version

logger = logging.getLogger(__name__)


def read_changelog(path: Path) -> str:
    """Read changelog text as UTF-8, translating I/O failures to domain errors."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ChangelogNotFoundError(f"Changelog file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise ChangelogReadError(f"Changelog is not valid UTF-8: {path}") from exc
    except OSError as exc:
        raise ChangelogReadError(f"Unable to read {path}: {exc.strerror}") from exc


def process_changelog(
    text: str,
    version: str,
    *,
    options: ExtractOptions | None = None,
    serialization: SerializationOptions | None = None,
) -> str:
    """Return the rendered release notes for `version` from changelog text."""
    version = normalize_version(version)
    tree = parse_md(text)
    result = extract_release(version, options)(tree)
    return render_md(result, serialization)


def extract_release_notes(
    version: str,
    *,
    input_path: str | Path | None = None,
    fallback: str | None = None,
    directory: Path | None = None,
    serialization: SerializationOptions | None = None,
) -> str:
    """Locate, read and process a changelog for one version."""
    path = resolve_input_path(input_path, directory)
    logger.info("Reading changelog from %s", path)
    text = read_changelog(path)
    return process_changelog(
        text,
        version,
        options=ExtractOptions(fallback=fallback),
        serialization=serialization,
    )
