import logging

import rumps

from cliptray import __version__
from cliptray.config import HISTORY_SIZE, MENU_REFRESH_INTERVAL, POLL_INTERVAL
from cliptray.menu import MenuItemSpec, compute_menu_specs
from cliptray.models import ClipboardItem
from cliptray.pasteboard import MacPasteboard
from cliptray.session import ClipboardSession

logger = logging.getLogger(__name__)


class ClipTrayApp(rumps.App):
    def __init__(self, capacity: int = HISTORY_SIZE, interval: float = POLL_INTERVAL):
        super().__init__("Cliptray", title="📋", quit_button=None)
        self._init_app(capacity, interval)

    def _init_app(self, capacity: int, interval: float) -> None:
        """Initialize app components. Separated for testability."""
        self._session = ClipboardSession(
            MacPasteboard(),
            capacity=capacity,
            interval=interval,
            on_history_changed=self._mark_menu_dirty,
            on_selection_committed=self._on_selection_committed,
            on_selection_failed=self._on_selection_failed,
        )
        self._entry_items: dict[str, ClipboardItem] = {}
        self._menu_dirty = False
        self._build_menu()
        self._session.start()
        logger.info("Cliptray v%s started (history size %d)", __version__, capacity)

    def _build_menu(self) -> None:
        self._menu_dirty = False
        self.menu.clear()
        self._entry_items.clear()
        specs = compute_menu_specs(self._session.get_snapshot())
        self.menu = [self._render_single_spec(spec) for spec in specs]

    def _render_single_spec(self, spec: MenuItemSpec | None) -> rumps.MenuItem | None:
        if spec is None:
            return None

        callbacks = {
            "select": self._on_entry_click,
            "clear": self._on_clear,
            "quit": self._on_quit,
        }
        item = rumps.MenuItem(spec.title, callback=callbacks.get(spec.action))
        if spec.item is not None:
            self._entry_items[spec.title] = spec.item
        return item

    def _mark_menu_dirty(self) -> None:
        # Called from the watcher thread; the rebuild happens on the main thread.
        self._menu_dirty = True

    @rumps.timer(MENU_REFRESH_INTERVAL)
    def _refresh_if_dirty(self, _sender) -> None:
        if self._menu_dirty:
            self._build_menu()

    def _on_entry_click(self, sender) -> None:
        item = self._entry_items.get(getattr(sender, "title", ""))
        if item is None:
            return
        # The menu may be older than the history; select by content, not position
        self._session.select_item(item)

    def _on_selection_committed(self, _item: ClipboardItem) -> None:
        rumps.notification("Cliptray", "", "Copied to clipboard", sound=False)

    def _on_selection_failed(self, _item: ClipboardItem) -> None:
        rumps.notification("Cliptray", "", "Could not copy to clipboard", sound=False)

    def _on_clear(self, _sender) -> None:
        self._session.clear_history()
        self._build_menu()

    def _on_quit(self, _sender) -> None:
        self._session.stop()
        rumps.quit_application()
