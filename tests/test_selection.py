from unittest.mock import MagicMock

import pytest

from cliptray.history import HistoryStore
from cliptray.models import ClipboardItem, ContentType
from cliptray.selection import SelectionController


@pytest.fixture
def callbacks():
    return MagicMock(), MagicMock()


@pytest.fixture
def controller(store, pasteboard, callbacks):
    on_committed, on_failed = callbacks
    return SelectionController(store, pasteboard, on_committed=on_committed, on_failed=on_failed)


class TestSelect:
    def test_writes_text_back(self, controller, store, pasteboard, callbacks):
        store.insert(ClipboardItem.text("old"))
        store.insert(ClipboardItem.text("new"))
        assert controller.select(1) is True
        assert pasteboard.written == [ClipboardItem.text("old")]
        callbacks[0].assert_called_once_with(ClipboardItem.text("old"))
        callbacks[1].assert_not_called()

    def test_writes_image_back(self, controller, store, pasteboard, png_bytes):
        store.insert(ClipboardItem.image(png_bytes))
        controller.select(0)
        assert pasteboard.written[0].content_type == ContentType.IMAGE

    def test_writes_file_back(self, controller, store, pasteboard):
        store.insert(ClipboardItem.file("/Users/test/a.pdf"))
        controller.select(0)
        assert pasteboard.snapshot.file_paths == ["/Users/test/a.pdf"]

    def test_history_unchanged(self, controller, store):
        for text in ("a", "b", "c"):
            store.insert(ClipboardItem.text(text))
        before = store.snapshot()
        controller.select(2)
        assert store.snapshot() == before

    def test_select_front_is_idempotent(self, controller, store):
        store.insert(ClipboardItem.text("a"))
        store.insert(ClipboardItem.text("b"))
        before = store.snapshot()
        controller.select(0)
        controller.select(0)
        assert store.snapshot() == before


class TestOutOfRange:
    @pytest.mark.parametrize("index", [-1, 1, 5])
    def test_noop(self, controller, store, pasteboard, callbacks, index):
        store.insert(ClipboardItem.text("only"))
        count_before = pasteboard.count
        assert controller.select(index) is False
        assert pasteboard.written == []
        assert pasteboard.count == count_before
        assert len(store) == 1
        callbacks[0].assert_not_called()
        callbacks[1].assert_not_called()

    def test_empty_history(self, controller):
        assert controller.select(0) is False


class TestWriteFailure:
    def test_write_returns_false(self, controller, store, pasteboard, callbacks):
        store.insert(ClipboardItem.text("a"))
        pasteboard.write_result = False
        assert controller.select(0) is False
        callbacks[1].assert_called_once_with(ClipboardItem.text("a"))
        callbacks[0].assert_not_called()
        assert store.snapshot() == (ClipboardItem.text("a"),)

    def test_write_raises(self, controller, store, pasteboard, callbacks):
        store.insert(ClipboardItem.text("a"))
        pasteboard.write_error = RuntimeError("pasteboard locked")
        assert controller.select(0) is False
        callbacks[1].assert_called_once()

    def test_without_callbacks(self, store, pasteboard):
        controller = SelectionController(store, pasteboard)
        store.insert(ClipboardItem.text("a"))
        pasteboard.write_result = False
        assert controller.select(0) is False


class TestDragText:
    def test_text_entry(self, controller, store):
        store.insert(ClipboardItem.text("drag me"))
        assert controller.drag_text(0) == "drag me"

    def test_image_not_supported(self, controller, store, png_bytes):
        store.insert(ClipboardItem.image(png_bytes))
        assert controller.drag_text(0) is None

    def test_file_not_supported(self, controller, store):
        store.insert(ClipboardItem.file("/tmp/a.txt"))
        assert controller.drag_text(0) is None

    def test_out_of_range(self, controller):
        assert controller.drag_text(3) is None


class TestSelectItem:
    def test_writes_item_even_after_it_moved(self, controller, store, pasteboard, callbacks):
        store.insert(ClipboardItem.text("x"))
        clicked = store.get(0)
        store.insert(ClipboardItem.text("y"))
        assert controller.select_item(clicked) is True
        assert pasteboard.written == [ClipboardItem.text("x")]
        callbacks[0].assert_called_once_with(ClipboardItem.text("x"))

    def test_item_no_longer_in_history(self, controller, store, pasteboard, callbacks):
        store.insert(ClipboardItem.text("x"))
        clicked = store.get(0)
        store.clear()
        assert controller.select_item(clicked) is False
        assert pasteboard.written == []
        callbacks[0].assert_not_called()
        callbacks[1].assert_not_called()

    def test_evicted_item_ignored(self, pasteboard):
        store = HistoryStore(capacity=1)
        controller = SelectionController(store, pasteboard)
        store.insert(ClipboardItem.text("old"))
        clicked = store.get(0)
        store.insert(ClipboardItem.text("new"))
        assert controller.select_item(clicked) is False
        assert pasteboard.written == []

    def test_write_failure_reported(self, controller, store, pasteboard, callbacks):
        store.insert(ClipboardItem.text("x"))
        pasteboard.write_result = False
        assert controller.select_item(ClipboardItem.text("x")) is False
        callbacks[1].assert_called_once_with(ClipboardItem.text("x"))
