"""Path helpers for changelog discovery and per-user app data."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from platformdirs import AppDirs

from .errors import ChangelogNotFoundError
from .options import CHANGELOG_FILENAME

DEFAULT_APP_NAME = "changelog-tools"


@lru_cache(maxsize=4)
def get_app_dirs(app_name: str = DEFAULT_APP_NAME) -> AppDirs:
    """Return platform-specific app directories."""
    return AppDirs(app_name, appauthor=False)


def ensure_dir(path: Path) -> Path:
    """Create `path` and any missing parents; existing directories are fine."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def data_dir(app_name: str = DEFAULT_APP_NAME) -> Path:
    """Return the per-user data directory, creating it if needed."""
    return ensure_dir(Path(get_app_dirs(app_name).user_data_dir))


def log_dir(app_name: str = DEFAULT_APP_NAME) -> Path:
    """Return the per-user log directory, creating it if needed."""
    return ensure_dir(data_dir(app_name) / "logs")


def find_changelog(directory: Path | None = None) -> Path:
    """Find CHANGELOG.md in `directory` (default: cwd), ignoring case."""
    root = directory if directory is not None else Path.cwd()
    for entry in sorted(root.iterdir()):
        if entry.name.lower() == CHANGELOG_FILENAME and entry.is_file():
            return entry
    raise ChangelogNotFoundError(f"CHANGELOG.md not found in {root}")


def resolve_input_path(
    input_path: str | Path | None, directory: Path | None = None
) -> Path:
    """Resolve an explicit changelog path, or discover one in `directory`."""
    if input_path:
        return Path(input_path).resolve()
    return find_changelog(directory)
