from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ContentType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    FILE = "file"


_PAYLOAD_TYPES = {
    ContentType.TEXT: str,
    ContentType.IMAGE: bytes,
    ContentType.FILE: str,
}


@dataclass(frozen=True)
class ClipboardItem:
    """A single history entry.

    Equality and hashing only look at the tag and the payload, so re-copying
    the same content later compares equal to the earlier capture.
    """

    content_type: ContentType
    content: str | bytes
    created_at: datetime = field(default_factory=datetime.now, compare=False)

    def __post_init__(self):
        # Accept plain strings such as "text"; unknown tags raise ValueError
        object.__setattr__(self, "content_type", ContentType(self.content_type))
        expected = _PAYLOAD_TYPES[self.content_type]
        if not isinstance(self.content, expected):
            raise TypeError(
                f"{self.content_type.value} payload must be {expected.__name__}, "
                f"got {type(self.content).__name__}"
            )

    @classmethod
    def text(cls, text: str) -> "ClipboardItem":
        return cls(ContentType.TEXT, text)

    @classmethod
    def image(cls, data: bytes) -> "ClipboardItem":
        return cls(ContentType.IMAGE, bytes(data))

    @classmethod
    def file(cls, path: str) -> "ClipboardItem":
        return cls(ContentType.FILE, path)

    @property
    def display_label(self) -> str:
        from cliptray.utils import display_label

        return display_label(self)


@dataclass
class ClipboardSnapshot:
    """Every representation the clipboard exposes for one copy event."""

    file_paths: list[str] = field(default_factory=list)
    image_data: bytes | None = None
    text: str | None = None
