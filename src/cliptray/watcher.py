import logging
import threading
from collections.abc import Callable

from cliptray.classifier import ContentClassifier
from cliptray.config import DEFAULT_POLL_INTERVAL
from cliptray.history import HistoryStore
from cliptray.pasteboard import Pasteboard

logger = logging.getLogger(__name__)

STOP_TIMEOUT = 5.0  # seconds to wait for the polling thread on stop()


class ClipboardWatcher:
    def __init__(
        self,
        pasteboard: Pasteboard,
        store: HistoryStore,
        classifier: ContentClassifier | None = None,
        on_change: Callable[[], None] | None = None,
        interval: float = DEFAULT_POLL_INTERVAL,
    ):
        if interval <= 0:
            raise ValueError(f"Poll interval must be positive, got {interval}")
        self._pasteboard = pasteboard
        self._store = store
        self._classifier = classifier or ContentClassifier()
        self._on_change = on_change
        self._interval = interval
        self._poll_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._last_change_count = self._read_change_count()

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def poll(self) -> bool:
        """Record the clipboard contents if they changed since the last poll.

        Returns True when a new item reached the history. Failures are logged
        and reported as False; the change token is advanced before reading so
        a broken clipboard entry is not retried on every tick.
        """
        with self._poll_lock:
            current_count = self._read_change_count()
            if current_count is None or current_count == self._last_change_count:
                return False

            self._last_change_count = current_count

            try:
                snapshot = self._pasteboard.read_snapshot()
                item = self._classifier.classify(snapshot)
            except Exception:
                logger.exception("Error reading clipboard")
                return False

            if item is None:
                return False

            self._store.insert(item)
            logger.debug("Recorded %s clipboard item", item.content_type.value)

        if self._on_change:
            try:
                self._on_change()
            except Exception:
                logger.exception("Error in history change callback")
        return True

    def start(self) -> None:
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="cliptray-watcher", daemon=True)
        self._thread.start()
        logger.info("Clipboard watcher started (interval %.2fs)", self._interval)

    def stop(self) -> None:
        thread = self._thread
        if thread is None:
            return
        self._stop_event.set()
        if thread is not threading.current_thread():
            thread.join(timeout=STOP_TIMEOUT)
            if thread.is_alive():
                logger.warning("Clipboard watcher did not stop within %.1fs", STOP_TIMEOUT)
        self._thread = None
        logger.info("Clipboard watcher stopped")

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval):
            self.poll()

    def _read_change_count(self) -> int | None:
        try:
            return self._pasteboard.change_count()
        except Exception:
            logger.exception("Error reading clipboard change count")
            return None
