"""Textual UI for bulletnote."""

from bulletnote.ui.app import BulletNoteApp
from bulletnote.ui.menu import ContextMenu, MenuItem

__all__ = [
    "BulletNoteApp",
    "ContextMenu",
    "MenuItem",
]
