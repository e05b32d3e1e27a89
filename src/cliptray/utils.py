import mimetypes
from pathlib import Path
from urllib.parse import unquote, urlparse

from cliptray.config import DATA_DIR
from cliptray.models import ClipboardItem, ContentType

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
IMAGE_LABEL = "[Image]"

# (mime prefix or exact type, icon, category)
FILE_CATEGORIES = (
    ("image/", "🖼️", "Image"),
    ("video/", "🎬", "Video"),
    ("audio/", "🎵", "Audio"),
    ("text/plain", "📄", "Text"),
)
GENERIC_FILE = ("📁", "File")


def truncate_text(text: str, max_len: int) -> str:
    single_line = " ".join(text.split())
    if len(single_line) <= max_len:
        return single_line
    return single_line[: max_len - 3] + "..."


def first_line(text: str) -> str:
    """Return the first line of text, marked with an ellipsis if more lines follow."""
    lines = text.splitlines()
    if not lines or lines == [text]:
        return text
    return lines[0] + "..."


def is_png(data: bytes) -> bool:
    return data[:8] == PNG_SIGNATURE


def ensure_dirs() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def file_name(path: str) -> str:
    if path.startswith("file://"):
        path = unquote(urlparse(path).path)
    return Path(path).name or path


def file_category(path: str) -> tuple[str, str]:
    """Map a file path to an (icon, category) pair using its declared type."""
    mime_type, _ = mimetypes.guess_type(file_name(path))
    if mime_type:
        for prefix, icon, category in FILE_CATEGORIES:
            if mime_type.startswith(prefix):
                return icon, category
    return GENERIC_FILE


def display_label(item: ClipboardItem) -> str:
    if item.content_type == ContentType.TEXT:
        return first_line(item.content)
    if item.content_type == ContentType.IMAGE:
        return IMAGE_LABEL
    if item.content_type == ContentType.FILE:
        icon, category = file_category(item.content)
        return f"{icon} [{category}] {file_name(item.content)}"
    raise ValueError(f"Unknown content type: {item.content_type!r}")
