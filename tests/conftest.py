import pytest

from cliptray.history import HistoryStore
from cliptray.models import ClipboardItem, ClipboardSnapshot, ContentType

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + (100).to_bytes(4, "big") + (50).to_bytes(4, "big") + b"\x00" * 32


class FakePasteboard:
    """In-memory stand-in for the system clipboard."""

    def __init__(self):
        self.count = 0
        self.snapshot = ClipboardSnapshot()
        self.written: list[ClipboardItem] = []
        self.write_result = True
        self.write_error: Exception | None = None
        self.read_error: Exception | None = None

    def copy(self, text=None, image_data=None, file_paths=None) -> None:
        """Simulate another app copying something."""
        self.snapshot = ClipboardSnapshot(file_paths=list(file_paths or []), image_data=image_data, text=text)
        self.count += 1

    def change_count(self) -> int:
        return self.count

    def read_snapshot(self) -> ClipboardSnapshot:
        if self.read_error is not None:
            raise self.read_error
        return self.snapshot

    def write_item(self, item: ClipboardItem) -> bool:
        if self.write_error is not None:
            raise self.write_error
        if not self.write_result:
            return False
        self.written.append(item)
        if item.content_type == ContentType.TEXT:
            self.copy(text=item.content)
        elif item.content_type == ContentType.IMAGE:
            self.copy(image_data=item.content)
        else:
            self.copy(text=item.content, file_paths=[item.content])
        return True


@pytest.fixture
def pasteboard():
    return FakePasteboard()


@pytest.fixture
def store():
    return HistoryStore(capacity=10)


@pytest.fixture
def make_item():
    """Factory fixture to create ClipboardItem instances for testing."""

    def _make_item(content="hello world", content_type: ContentType = ContentType.TEXT) -> ClipboardItem:
        if content_type == ContentType.IMAGE:
            return ClipboardItem.image(content if isinstance(content, bytes) else PNG_BYTES)
        if content_type == ContentType.FILE:
            return ClipboardItem.file(content)
        return ClipboardItem.text(content)

    return _make_item


@pytest.fixture
def png_bytes():
    return PNG_BYTES
