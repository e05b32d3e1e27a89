import logging
from collections.abc import Callable

from cliptray.history import HistoryStore
from cliptray.models import ClipboardItem, ContentType
from cliptray.pasteboard import Pasteboard

logger = logging.getLogger(__name__)


class SelectionController:
    def __init__(
        self,
        store: HistoryStore,
        pasteboard: Pasteboard,
        on_committed: Callable[[ClipboardItem], None] | None = None,
        on_failed: Callable[[ClipboardItem], None] | None = None,
    ):
        self._store = store
        self._pasteboard = pasteboard
        self._on_committed = on_committed
        self._on_failed = on_failed

    def select(self, index: int) -> bool:
        """Copy the history entry at ``index`` back onto the clipboard.

        An index that no longer exists (the list changed between render and
        click) is ignored. History is never modified here; the watcher sees
        the write as a regular clipboard change and promotes the entry.
        """
        item = self._store.get(index)
        if item is None:
            logger.debug("Ignoring selection of stale index %d", index)
            return False
        return self._write_back(item)

    def select_item(self, item: ClipboardItem) -> bool:
        """Copy ``item`` back onto the clipboard if it is still in the history.

        Menus that were rendered before the latest insert should select by
        item, since the index they captured may now point at other content.
        """
        if item not in self._store.snapshot():
            logger.debug("Ignoring selection of %s entry no longer in history", item.content_type.value)
            return False
        return self._write_back(item)

    def _write_back(self, item: ClipboardItem) -> bool:
        try:
            copied = self._pasteboard.write_item(item)
        except Exception:
            logger.exception("Error copying entry to clipboard")
            copied = False

        if not copied:
            logger.warning("Failed to copy %s entry to clipboard", item.content_type.value)
            if self._on_failed:
                self._on_failed(item)
            return False

        logger.info("Copied %s entry to clipboard", item.content_type.value)
        if self._on_committed:
            self._on_committed(item)
        return True

    def drag_text(self, index: int) -> str | None:
        """Payload for dragging an entry into another app.

        Only text entries can be dragged; images and files return None.
        """
        item = self._store.get(index)
        if item is None:
            return None
        if item.content_type == ContentType.TEXT:
            return item.content
        if item.content_type in (ContentType.IMAGE, ContentType.FILE):
            logger.debug("Dragging %s entries is not supported", item.content_type.value)
            return None
        raise ValueError(f"Unknown content type: {item.content_type!r}")
