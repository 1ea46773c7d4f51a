"""Transfer policy, persisted in the repository's git config."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from bulletnote.errors import SettingsError

SECTION = "bulletnote"

DEFAULTS = {
    "remove-first-line": False,
    "keep-original-text": True,
    "note-folder": "",
    "auto-commit": False,
}


@dataclass(frozen=True)
class Policy:
    """How a bullet is turned into a note.

    - remove_first_line: drop the bullet's own line from the note
    - keep_original_text: leave the source untouched instead of linking
    - note_folder: "" for the vault root, "." for the source's folder,
      otherwise a folder relative to the vault
    - auto_commit: commit the new note (and rewritten source) to git
    """

    remove_first_line: bool = False
    keep_original_text: bool = True
    note_folder: str = ""
    auto_commit: bool = False

    def override(self, **changes: Any) -> Policy:
        """Return a copy with the non-None ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _python_key(git_key: str) -> str:
    """Convert git-style key (hyphenated) to Python-style (underscored)."""
    return git_key.replace("-", "_")


def _git_key(python_key: str) -> str:
    """Convert Python-style key (underscored) to git-style (hyphenated)."""
    return python_key.replace("_", "-")


def coerce_value(git_key: str, raw: str) -> Any:
    """Type-coerce a raw config string using the key's default type."""
    if git_key not in DEFAULTS:
        raise SettingsError(f"Unknown setting '{git_key}'. Known: {', '.join(DEFAULTS)}")
    default = DEFAULTS[git_key]
    if isinstance(default, bool):
        return raw.lower() in ("true", "yes", "1")
    return raw


def _get_repo(path: str | Path) -> Repo | None:
    try:
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return None


def read_settings(repo_path: str | Path) -> dict[str, Any]:
    """Read the bulletnote section into a {git_key: value} dict.

    Missing keys, and everything outside a git repository, get defaults.
    Unknown keys in the section are ignored.
    """
    result = dict(DEFAULTS)
    repo = _get_repo(repo_path)
    if repo is None:
        return result
    reader = repo.config_reader()
    if not reader.has_section(SECTION):
        return result
    for git_k, raw in reader.items(SECTION):
        if git_k in DEFAULTS:
            result[git_k] = coerce_value(git_k, raw)
    return result


def write_setting(repo_path: str | Path, key: str, value: Any) -> None:
    """Write one setting. ``key`` may be git-style or Python-style."""
    git_k = _git_key(key)
    if git_k not in DEFAULTS:
        raise SettingsError(f"Unknown setting '{key}'. Known: {', '.join(DEFAULTS)}")
    repo = _get_repo(repo_path)
    if repo is None:
        raise SettingsError(f"{repo_path} is not a git repository; settings cannot be saved")
    if isinstance(value, bool):
        value = str(value).lower()
    writer = repo.config_writer("repository")
    try:
        writer.set_value(SECTION, git_k, str(value))
    finally:
        writer.release()


def load_policy(repo_path: str | Path) -> Policy:
    """Build a Policy from stored settings."""
    settings = read_settings(repo_path)
    names = {f.name for f in fields(Policy)}
    return Policy(**{_python_key(k): v for k, v in settings.items() if _python_key(k) in names})


def save_policy(repo_path: str | Path, policy: Policy) -> None:
    """Persist every field of ``policy``."""
    for f in fields(Policy):
        write_setting(repo_path, f.name, getattr(policy, f.name))
