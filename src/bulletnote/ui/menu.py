"""Context menu for the editor."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.events import Click
from textual.message import Message
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static


class MenuItem(Static):
    """A selectable menu entry."""

    class Selected(Message):
        """Posted when this item is selected."""

        def __init__(self, item: MenuItem) -> None:
            super().__init__()
            self.item = item

        @property
        def control(self) -> MenuItem:
            return self.item

    DEFAULT_CSS = """
    MenuItem {
        width: 100%;
        height: auto;
        padding: 0 1;
    }

    MenuItem:hover, MenuItem.-highlighted {
        background: $primary-darken-1;
    }
    """

    def __init__(self, label: str, item_id: str) -> None:
        super().__init__(label)
        self.label = label
        self.item_id = item_id

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(self.Selected(self))


class MenuList(Vertical):
    """Menu items with keyboard navigation."""

    DEFAULT_CSS = """
    MenuList {
        height: auto;
        background: $surface;
        border: round $primary;
    }
    """

    BINDINGS = [
        ("up", "cursor_up", "Up"),
        ("down", "cursor_down", "Down"),
        ("enter", "select", "Select"),
    ]

    can_focus = True

    highlighted: reactive[int] = reactive(-1)

    def __init__(self, items: list[MenuItem]) -> None:
        super().__init__()
        self._items = items

    def compose(self) -> ComposeResult:
        yield from self._items

    def on_mount(self) -> None:
        # Border plus padding around the longest label
        self.styles.width = max(len(item.label) for item in self._items) + 4
        self.highlighted = 0

    def watch_highlighted(self, old: int, new: int) -> None:
        items = list(self.query(MenuItem))
        if 0 <= old < len(items):
            items[old].remove_class("-highlighted")
        if 0 <= new < len(items):
            items[new].add_class("-highlighted")

    def action_cursor_up(self) -> None:
        self.highlighted = max(0, self.highlighted - 1)

    def action_cursor_down(self) -> None:
        self.highlighted = min(len(self._items) - 1, self.highlighted + 1)

    def action_select(self) -> None:
        items = list(self.query(MenuItem))
        if 0 <= self.highlighted < len(items):
            item = items[self.highlighted]
            item.post_message(MenuItem.Selected(item))


class ContextMenu(ModalScreen[str | None]):
    """Menu shown at a screen position. Dismisses with the chosen item_id."""

    DEFAULT_CSS = """
    ContextMenu {
        background: transparent;
    }
    """

    BINDINGS = [("escape", "close", "Close")]

    def __init__(self, items: list[MenuItem], x: int, y: int) -> None:
        super().__init__()
        self._items = items
        self._x = x
        self._y = y

    def compose(self) -> ComposeResult:
        yield MenuList(self._items)

    def on_mount(self) -> None:
        menu = self.query_one(MenuList)
        menu.focus()
        self.call_after_refresh(self._apply_position, menu)

    def _apply_position(self, menu: MenuList) -> None:
        """Keep the menu on screen once its size is known."""
        x = min(self._x, self.app.size.width - menu.size.width)
        y = min(self._y, self.app.size.height - menu.size.height)
        menu.styles.offset = (max(0, x), max(0, y))

    def on_menu_item_selected(self, event: MenuItem.Selected) -> None:
        event.stop()
        self.dismiss(event.item.item_id)

    def on_click(self, event: Click) -> None:
        """Dismiss when clicking outside the menu."""
        menu = self.query_one(MenuList)
        if not menu.region.contains(event.screen_x, event.screen_y):
            self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)
