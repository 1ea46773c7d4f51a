"""Note placement and creation inside a vault folder."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from bulletnote.errors import BulletNoteError, NoteExistsError

logger = logging.getLogger(__name__)

_SLASHES = re.compile(r"[\\/]+")


def normalize_path(path: str) -> str:
    """Normalize a vault-relative path.

    Uses forward slashes, collapses repeats, drops "." segments and
    leading/trailing slashes. "/a//b/./c.md/" → "a/b/c.md", "/" → ""
    """
    parts = [p for p in _SLASHES.split(path) if p and p != "."]
    return "/".join(parts)


def note_parent(vault: Path, source: Path | None, note_folder: str) -> str:
    """Vault-relative folder a new note goes in.

    "" is the vault root, "." is the source document's folder (root if there
    is no source or it lies outside the vault), anything else is a folder
    relative to the vault.
    """
    if note_folder == ".":
        if source is None:
            return ""
        try:
            relative = source.resolve().parent.relative_to(vault.resolve())
        except ValueError:
            return ""
        return normalize_path(relative.as_posix())
    return normalize_path(note_folder)


def note_path(vault: Path, folder: str, file_name: str) -> Path:
    """Absolute path of note ``file_name`` in vault-relative ``folder``.

    Raises BulletNoteError if the path resolves outside the vault, e.g. for a
    title like "../escaped".
    """
    relative = normalize_path(f"{folder}/{file_name}")
    path = vault / relative
    try:
        path.resolve().relative_to(vault.resolve())
    except ValueError:
        raise BulletNoteError(f"Note path '{relative}' is outside the vault {vault}") from None
    return path


def create_note(vault: Path, folder: str, file_name: str, content: str) -> Path:
    """Write a new note and return its path. Existing notes are never overwritten."""
    path = note_path(vault, folder, file_name)
    if path.exists():
        raise NoteExistsError(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("x", encoding="utf-8", newline="") as f:
        f.write(content)
    logger.info("created note %s", path)
    return path


def vault_repo(vault: Path) -> Repo:
    """Git repository holding ``vault``. Raises BulletNoteError if there is none."""
    try:
        return Repo(vault, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        raise BulletNoteError(f"{vault} is not a git repository; cannot commit") from None


def commit_paths(vault: Path, paths: list[Path], message: str) -> str:
    """Stage ``paths`` and commit them. Returns the commit hash."""
    repo = vault_repo(vault)
    root = Path(repo.working_tree_dir).resolve()
    relative = []
    for p in paths:
        try:
            relative.append(p.resolve().relative_to(root).as_posix())
        except ValueError:
            raise BulletNoteError(f"{p} is outside the repository at {root}") from None
    repo.index.add(relative)
    commit = repo.index.commit(message)
    logger.info("committed %s: %s", commit.hexsha[:7], message)
    return commit.hexsha
