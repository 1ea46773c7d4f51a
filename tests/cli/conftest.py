"""Shared fixtures for CLI tests."""

from argparse import Namespace

import pytest
from git import Repo

TODO = "# Todo\n\n- Buy milk\n\tand eggs\n- Call mom\n"


@pytest.fixture
def vault(tmp_path):
    """A git repo holding todo.md with two bullets."""
    Repo.init(tmp_path)
    (tmp_path / "todo.md").write_text(TODO)
    return tmp_path


@pytest.fixture
def transfer_args(vault):
    """Build transfer/check args with CLI defaults, overridable per test."""

    def _make(**kwargs):
        values = {
            "vault": str(vault),
            "json": False,
            "verbose": False,
            "file": str(vault / "todo.md"),
            "line": 3,
            "ch": 0,
            "folding": "indent",
            "remove_first_line": None,
            "keep_original_text": None,
            "folder": None,
            "commit": None,
            "dry_run": False,
        }
        values.update(kwargs)
        return Namespace(**values)

    return _make
