"""User-visible error types raised around the extraction core."""

from __future__ import annotations


class ChangelogError(Exception):
    """Base class for failures reported to the user by the command surface."""


class ChangelogNotFoundError(ChangelogError):
    """No changelog file could be located."""


class ChangelogReadError(ChangelogError):
    """Changelog file exists but could not be read as UTF-8 text."""


class InvalidVersionError(ChangelogError, ValueError):
    """Requested version is empty after normalization."""
