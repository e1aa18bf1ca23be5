"""Test configuration."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import changelog_tools.cli as cli_module  # noqa: E402

KEEP_A_CHANGELOG = """\
# Changelog

All notable changes to this project will be documented in this file.

## [Unreleased]

### Added

- Upcoming feature.

## [1.1.0] - 2024-03-01

### Added

- Support for [linked notes][docs].

### Fixed

- Crash on empty input.

## [1.0.0] - 2024-01-01

### Added

- Initial release.

[Unreleased]: https://example.com/compare/v1.1.0...HEAD
[1.1.0]: https://example.com/compare/v1.0.0...v1.1.0
[1.0.0]: https://example.com/releases/v1.0.0
[docs]: https://example.com/docs
"""


@pytest.fixture
def keep_a_changelog() -> str:
    """Changelog using reference-style version links."""
    return KEEP_A_CHANGELOG


@pytest.fixture
def changelog_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory containing a CHANGELOG.md."""
    (tmp_path / "CHANGELOG.md").write_text(KEEP_A_CHANGELOG, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def isolated_log_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep CLI log files out of the real per-user data directory."""
    monkeypatch.setattr(cli_module, "log_dir", lambda: tmp_path / "logs")

