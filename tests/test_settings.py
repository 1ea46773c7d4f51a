"""Tests for settings stored in git config."""

import pytest

from bulletnote.errors import SettingsError
from bulletnote.settings import (
    DEFAULTS,
    Policy,
    coerce_value,
    load_policy,
    read_settings,
    save_policy,
    write_setting,
)


def test_defaults_outside_repo(tmp_path):
    assert read_settings(tmp_path) == DEFAULTS


def test_defaults_in_fresh_repo(repo_path):
    assert load_policy(repo_path) == Policy()


def test_default_policy():
    policy = Policy()
    assert policy.remove_first_line is False
    assert policy.keep_original_text is True


def test_write_and_read(repo_path):
    write_setting(repo_path, "remove_first_line", True)
    write_setting(repo_path, "note-folder", "inbox")

    settings = read_settings(repo_path)
    assert settings["remove-first-line"] is True
    assert settings["note-folder"] == "inbox"
    assert settings["keep-original-text"] is True


def test_settings_found_from_subfolder(repo_path):
    write_setting(repo_path, "auto-commit", True)
    sub = repo_path / "notes"
    sub.mkdir()
    assert load_policy(sub).auto_commit is True


def test_policy_round_trip(repo_path):
    policy = Policy(remove_first_line=True, keep_original_text=False, note_folder=".", auto_commit=True)
    save_policy(repo_path, policy)
    assert load_policy(repo_path) == policy


def test_write_unknown_key(repo_path):
    with pytest.raises(SettingsError, match="Unknown setting"):
        write_setting(repo_path, "colour", "red")


def test_write_outside_repo(tmp_path):
    with pytest.raises(SettingsError, match="not a git repository"):
        write_setting(tmp_path, "auto-commit", True)


def test_coerce_value():
    assert coerce_value("auto-commit", "yes") is True
    assert coerce_value("auto-commit", "TRUE") is True
    assert coerce_value("auto-commit", "0") is False
    assert coerce_value("note-folder", "inbox") == "inbox"


def test_coerce_unknown_key():
    with pytest.raises(SettingsError):
        coerce_value("nope", "1")


def test_override_ignores_none():
    policy = Policy().override(remove_first_line=None, note_folder="inbox")
    assert policy == Policy(note_folder="inbox")
