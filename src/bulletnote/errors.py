"""Exceptions raised outside the extraction core."""


class BulletNoteError(Exception):
    """Base class for bulletnote errors."""


class NoteExistsError(BulletNoteError):
    """The note file to create already exists."""

    def __init__(self, path):
        super().__init__(f"Note already exists: {path}")
        self.path = path


class SettingsError(BulletNoteError):
    """A setting could not be read or written."""
