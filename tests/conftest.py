"""Shared fixtures."""

import pytest
from git import Repo


@pytest.fixture
def repo_path(tmp_path):
    """An empty git repository."""
    Repo.init(tmp_path)
    return tmp_path
