import logging

from cliptray.config import MAX_IMAGE_SIZE, MAX_TEXT_SIZE
from cliptray.models import ClipboardItem, ClipboardSnapshot

logger = logging.getLogger(__name__)


class ContentClassifier:
    """Pick exactly one history item out of a clipboard snapshot.

    Files win over images, and images win over text: apps copying a file or
    an image usually also publish a text fallback such as the file name.
    """

    def __init__(self, max_text_size: int = MAX_TEXT_SIZE, max_image_size: int = MAX_IMAGE_SIZE):
        self._max_text_size = max_text_size
        self._max_image_size = max_image_size

    def classify(self, snapshot: ClipboardSnapshot) -> ClipboardItem | None:
        item = self._classify_files(snapshot)
        if item is None:
            item = self._classify_image(snapshot)
        if item is None:
            item = self._classify_text(snapshot)
        if item is None:
            logger.debug("No classifiable clipboard content")
        return item

    def _classify_files(self, snapshot: ClipboardSnapshot) -> ClipboardItem | None:
        paths = [p for p in snapshot.file_paths if p]
        if not paths:
            return None
        return ClipboardItem.file(paths[0])

    def _classify_image(self, snapshot: ClipboardSnapshot) -> ClipboardItem | None:
        if not snapshot.image_data:
            return None
        # bytes() detaches the payload from the pasteboard's buffer
        img_bytes = bytes(snapshot.image_data)
        if len(img_bytes) > self._max_image_size:
            logger.warning("Image too large (%d bytes), skipping", len(img_bytes))
            return None
        return ClipboardItem.image(img_bytes)

    def _classify_text(self, snapshot: ClipboardSnapshot) -> ClipboardItem | None:
        text = snapshot.text
        if not text or not text.strip():
            return None
        size = len(text.encode("utf-8"))
        if size > self._max_text_size:
            logger.warning("Text too large (%d bytes), skipping", size)
            return None
        return ClipboardItem.text(text)
