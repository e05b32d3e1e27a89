"""Access to the system clipboard.

The rest of the package only depends on the ``Pasteboard`` protocol; the
AppKit-backed implementation is imported lazily so the core stays importable
off macOS.
"""

import logging
from typing import Protocol

from cliptray.models import ClipboardItem, ClipboardSnapshot, ContentType
from cliptray.utils import is_png

logger = logging.getLogger(__name__)


class Pasteboard(Protocol):
    def change_count(self) -> int:
        """Opaque token that changes whenever the clipboard contents change."""
        ...

    def read_snapshot(self) -> ClipboardSnapshot:
        ...

    def write_item(self, item: ClipboardItem) -> bool:
        ...


class MacPasteboard:
    """``Pasteboard`` backed by ``NSPasteboard.generalPasteboard()``."""

    def __init__(self):
        from AppKit import NSPasteboard

        self._pasteboard = NSPasteboard.generalPasteboard()
        self._cleared = False

    def change_count(self) -> int:
        return int(self._pasteboard.changeCount())

    def read_snapshot(self) -> ClipboardSnapshot:
        from AppKit import (
            NSFilenamesPboardType,
            NSPasteboardTypePNG,
            NSPasteboardTypeString,
            NSPasteboardTypeTIFF,
        )

        snapshot = ClipboardSnapshot()
        types = self._pasteboard.types()
        if types is None:
            return snapshot

        if NSFilenamesPboardType in types:
            filenames = self._pasteboard.propertyListForType_(NSFilenamesPboardType)
            if filenames:
                snapshot.file_paths = [str(f) for f in filenames]

        for img_type in (NSPasteboardTypePNG, NSPasteboardTypeTIFF):
            if img_type in types:
                data = self._pasteboard.dataForType_(img_type)
                if data is not None:
                    snapshot.image_data = bytes(data)
                    break

        if NSPasteboardTypeString in types:
            text = self._pasteboard.stringForType_(NSPasteboardTypeString)
            if text is not None:
                snapshot.text = str(text)

        return snapshot

    def write_item(self, item: ClipboardItem) -> bool:
        """Replace the clipboard contents with ``item``.

        NSPasteboard has to be cleared before it accepts new data, so a write
        that fails afterwards would leave it empty. In that case the text,
        image and file representations read beforehand are put back.
        """
        previous = self.read_snapshot()
        self._cleared = False
        try:
            written = self._write(item)
        except Exception:
            if self._cleared:
                self._restore(previous)
            raise
        if not written and self._cleared:
            self._restore(previous)
        return written

    def _write(self, item: ClipboardItem) -> bool:
        from AppKit import (
            NSPasteboardTypeFileURL,
            NSPasteboardTypePNG,
            NSPasteboardTypeString,
            NSPasteboardTypeTIFF,
        )
        from Foundation import NSData, NSURL

        pb = self._pasteboard

        if item.content_type == ContentType.TEXT:
            self._clear()
            return bool(pb.setString_forType_(item.content, NSPasteboardTypeString))

        if item.content_type == ContentType.IMAGE:
            ns_data = NSData.dataWithBytes_length_(item.content, len(item.content))
            if not ns_data:
                return False
            img_type = NSPasteboardTypePNG if is_png(item.content) else NSPasteboardTypeTIFF
            self._clear()
            return bool(pb.setData_forType_(ns_data, img_type))

        if item.content_type == ContentType.FILE:
            path = item.content
            url = NSURL.URLWithString_(path) if path.startswith("file://") else NSURL.fileURLWithPath_(path)
            if url is None:
                logger.warning("Cannot build file URL for %s", path)
                return False
            self._clear()
            written = pb.setString_forType_(url.absoluteString(), NSPasteboardTypeFileURL)
            if written:
                pb.setString_forType_(url.path() or path, NSPasteboardTypeString)
            return bool(written)

        raise ValueError(f"Unknown content type: {item.content_type!r}")

    def _clear(self) -> None:
        self._pasteboard.clearContents()
        self._cleared = True

    def _restore(self, snapshot: ClipboardSnapshot) -> None:
        from AppKit import (
            NSFilenamesPboardType,
            NSPasteboardTypePNG,
            NSPasteboardTypeString,
            NSPasteboardTypeTIFF,
        )
        from Foundation import NSData

        pb = self._pasteboard
        pb.clearContents()
        if snapshot.file_paths:
            pb.setPropertyList_forType_(snapshot.file_paths, NSFilenamesPboardType)
        if snapshot.image_data:
            data = snapshot.image_data
            img_type = NSPasteboardTypePNG if is_png(data) else NSPasteboardTypeTIFF
            pb.setData_forType_(NSData.dataWithBytes_length_(data, len(data)), img_type)
        if snapshot.text is not None:
            pb.setString_forType_(snapshot.text, NSPasteboardTypeString)
        logger.info("Restored previous clipboard contents after failed write")
