import logging
from collections.abc import Callable

from cliptray.classifier import ContentClassifier
from cliptray.config import DEFAULT_HISTORY_SIZE, DEFAULT_POLL_INTERVAL
from cliptray.history import HistoryStore
from cliptray.models import ClipboardItem
from cliptray.pasteboard import Pasteboard
from cliptray.selection import SelectionController
from cliptray.watcher import ClipboardWatcher

logger = logging.getLogger(__name__)


class ClipboardSession:
    """Wires the history engine together for a presentation layer.

    Event callbacks may fire from the watcher thread (``on_history_changed``)
    or from whichever thread called ``select``/``clear_history``; the UI is
    responsible for hopping back onto its own thread.
    """

    def __init__(
        self,
        pasteboard: Pasteboard,
        capacity: int = DEFAULT_HISTORY_SIZE,
        interval: float = DEFAULT_POLL_INTERVAL,
        on_history_changed: Callable[[], None] | None = None,
        on_selection_committed: Callable[[ClipboardItem], None] | None = None,
        on_selection_failed: Callable[[ClipboardItem], None] | None = None,
        on_visibility_changed: Callable[[bool], None] | None = None,
    ):
        self._on_history_changed = on_history_changed
        self._on_selection_committed = on_selection_committed
        self._on_selection_failed = on_selection_failed
        self._on_visibility_changed = on_visibility_changed
        self._visible = False

        self.store = HistoryStore(capacity)
        self.watcher = ClipboardWatcher(
            pasteboard,
            self.store,
            classifier=ContentClassifier(),
            on_change=self._history_changed,
            interval=interval,
        )
        self.selection = SelectionController(
            self.store,
            pasteboard,
            on_committed=self._selection_committed,
            on_failed=self._selection_failed,
        )

    def start(self) -> None:
        self.watcher.start()

    def stop(self) -> None:
        self.watcher.stop()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False

    def get_snapshot(self) -> tuple[ClipboardItem, ...]:
        return self.store.snapshot()

    def select(self, index: int) -> bool:
        return self.selection.select(index)

    def select_item(self, item: ClipboardItem) -> bool:
        return self.selection.select_item(item)

    def drag_text(self, index: int) -> str | None:
        return self.selection.drag_text(index)

    def clear_history(self) -> None:
        self.store.clear()
        logger.info("Clipboard history cleared")
        self._history_changed()

    @property
    def visible(self) -> bool:
        return self._visible

    def show(self) -> None:
        self._set_visible(True)

    def hide(self) -> None:
        self._set_visible(False)

    def toggle_visibility(self) -> bool:
        self._set_visible(not self._visible)
        return self._visible

    def _set_visible(self, visible: bool) -> None:
        if visible == self._visible:
            return
        self._visible = visible
        if self._on_visibility_changed:
            self._on_visibility_changed(visible)

    def _history_changed(self) -> None:
        if self._on_history_changed:
            self._on_history_changed()

    def _selection_committed(self, item: ClipboardItem) -> None:
        self.hide()
        if self._on_selection_committed:
            self._on_selection_committed(item)

    def _selection_failed(self, item: ClipboardItem) -> None:
        if self._on_selection_failed:
            self._on_selection_failed(item)
