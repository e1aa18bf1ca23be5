"""Runtime configuration normalization helpers.

These helpers keep CLI flag interpretation deterministic across entrypoints.
"""

from __future__ import annotations

from .errors import InvalidVersionError
from .options import DEFAULT_FALLBACK


def resolve_log_level(*, verbose: bool, quiet: bool) -> str:
    """Resolve effective log level from CLI flags.

    Precedence is deterministic: --quiet overrides --verbose.
    """
    if quiet:
        return "WARNING"
    if verbose:
        return "DEBUG"
    return "INFO"


def normalize_version(value: str) -> str:
    """Strip surrounding whitespace; the version is otherwise matched literally."""
    normalized = value.strip()
    if not normalized:
        raise InvalidVersionError("Version must not be empty.")
    return normalized


def resolve_fallback(value: str | None) -> str:
    """Return the CLI fallback text, using the CHANGELOG.md notice when unset."""
    if value is None:
        return DEFAULT_FALLBACK
    return value


def resolve_console_level(*, verbose: bool, quiet: bool) -> str:
    """Resolve the stderr log level; progress messages need --verbose.

    stderr stays limited to warnings by default so pipelines capturing it only
    see the `Error:` line on failure.
    """
    if verbose and not quiet:
        return "DEBUG"
    return "WARNING"
