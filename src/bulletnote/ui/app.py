"""Main Textual application: a markdown editor that turns bullets into notes."""

from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.events import Click
from textual.widgets import Footer, TextArea

from bulletnote.document import Document
from bulletnote.errors import BulletNoteError
from bulletnote.folding import IndentFolding
from bulletnote.settings import Policy, load_policy
from bulletnote.transfer import cursor_on_marker, transfer_bullet
from bulletnote.ui.menu import ContextMenu, MenuItem
from bulletnote.vault import commit_paths, create_note, note_parent, vault_repo


class BulletNoteApp(App):
    """Edit a markdown file and transfer bullets into their own notes."""

    TITLE = "bulletnote"
    BINDINGS = [
        Binding("ctrl+t", "transfer", "To note", priority=True),
        Binding("f2", "menu", "Menu", priority=True),
        Binding("ctrl+s", "save", "Save", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, path: Path | None, vault: Path, policy: Policy | None = None):
        super().__init__()
        self.path = path
        self.vault = vault
        self.policy = policy if policy is not None else load_policy(vault)
        self.folding = IndentFolding()

    def compose(self) -> ComposeResult:
        yield TextArea(self._read(self.path), id="editor")
        yield Footer()

    def on_mount(self) -> None:
        self._update_title()
        self.query_one("#editor", TextArea).focus()

    @property
    def editor(self) -> TextArea:
        return self.query_one("#editor", TextArea)

    @staticmethod
    def _read(path: Path | None) -> str:
        if path is None or not path.exists():
            return ""
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()

    def _update_title(self) -> None:
        self.sub_title = str(self.path) if self.path else "untitled"

    def open_file(self, path: Path) -> None:
        """Switch the editor to ``path``."""
        self.path = path
        self.editor.load_text(self._read(path))
        self.editor.move_cursor((0, 0))
        self._update_title()

    def action_save(self) -> None:
        if self.path is None:
            self.notify("No file to save to", severity="warning")
            return
        with self.path.open("w", encoding="utf-8", newline="") as f:
            f.write(self.editor.text)

    def _cursor_on_marker(self) -> bool:
        row, col = self.editor.cursor_location
        return cursor_on_marker(self.editor.document.get_line(row), col)

    def action_menu(self) -> None:
        """Show the context menu at the cursor."""
        items = []
        if self._cursor_on_marker():
            items.append(MenuItem("Transfer bullet to note", item_id="transfer"))
        items.append(MenuItem("Save", item_id="save"))
        x, y = self.editor.cursor_screen_offset
        self.push_screen(ContextMenu(items, x, y + 1), self._on_menu_closed)

    def _on_menu_closed(self, item_id: str | None) -> None:
        if item_id == "transfer":
            self.action_transfer()
        elif item_id == "save":
            self.action_save()

    def on_click(self, event: Click) -> None:
        if event.button == 3:
            event.stop()
            self.action_menu()

    def action_transfer(self) -> None:
        """Transfer the bullet under the cursor into a new note and open it."""
        if self.path is None:
            # The note replaces the buffer in the editor, so the source must be on disk
            self.notify("Save the file before transferring a bullet", severity="warning")
            return

        editor = self.editor
        doc = Document(editor.text)
        row, col = editor.cursor_location
        result = transfer_bullet(doc, doc.pos_to_offset(row, col), self.policy, self.folding)
        if result is None:
            self.notify("Cursor is not on a bullet", severity="warning")
            return

        folder = note_parent(self.vault, self.path, self.policy.note_folder)
        try:
            if self.policy.auto_commit:
                vault_repo(self.vault)
            note = create_note(self.vault, folder, result.file_name, result.content)
        except BulletNoteError as e:
            self.notify(str(e), severity="error")
            return

        changed = [note]
        if result.replacement is not None:
            start = doc.offset_to_pos(result.span.start)
            end = doc.offset_to_pos(result.span.end)
            editor.replace(result.replacement, start, end)
            changed.append(self.path)
        self.action_save()

        if self.policy.auto_commit:
            try:
                commit_paths(self.vault, changed, f"Transfer bullet to note: {result.title}")
            except BulletNoteError as e:
                self.notify(str(e), severity="error")

        self.notify(f"Created {note.name}")
        self.open_file(note)
