import logging
import threading

from cliptray.config import DEFAULT_HISTORY_SIZE
from cliptray.models import ClipboardItem

logger = logging.getLogger(__name__)


class HistoryStore:
    """Bounded, deduplicated, most-recent-first clipboard history.

    Re-inserting content that is already present promotes it to the front
    instead of adding a second copy; once the store is full, the oldest entry
    is evicted. Every public method runs under one lock, so readers always see
    the state between two mutations and never a half-applied insert.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE):
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._items: list[ClipboardItem] = []
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert(self, item: ClipboardItem) -> None:
        with self._lock:
            if item in self._items:
                self._items.remove(item)
            self._items.insert(0, item)
            evicted = len(self._items) - self._capacity
            if evicted > 0:
                del self._items[self._capacity:]
                logger.debug("Evicted %d history entries", evicted)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def snapshot(self) -> tuple[ClipboardItem, ...]:
        with self._lock:
            return tuple(self._items)

    def get(self, index: int) -> ClipboardItem | None:
        with self._lock:
            if 0 <= index < len(self._items):
                return self._items[index]
            return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
