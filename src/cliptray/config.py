import os
from pathlib import Path

DATA_DIR = Path(os.environ.get("CLIPTRAY_DATA_DIR", Path.home() / ".local" / "share" / "cliptray"))
LOG_PATH = DATA_DIR / "cliptray.log"

DEFAULT_HISTORY_SIZE = 10
DEFAULT_POLL_INTERVAL = 1.0  # seconds between clipboard checks
MAX_TEXT_SIZE = 1_000_000  # 1MB text limit
MAX_IMAGE_SIZE = 10_000_000  # 10MB image limit
PREVIEW_LENGTH = 60  # characters shown in menu item
MENU_REFRESH_INTERVAL = 0.25  # seconds between main-thread menu rebuild checks


def _parse_history_size() -> int:
    raw = os.environ.get("CLIPTRAY_HISTORY_SIZE")
    if raw is None:
        return DEFAULT_HISTORY_SIZE
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_HISTORY_SIZE
    return max(1, min(100, value))


def _parse_poll_interval() -> float:
    raw = os.environ.get("CLIPTRAY_POLL_INTERVAL")
    if raw is None:
        return DEFAULT_POLL_INTERVAL
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_POLL_INTERVAL
    if value != value:  # NaN
        return DEFAULT_POLL_INTERVAL
    return max(0.1, min(10.0, value))


HISTORY_SIZE = _parse_history_size()
POLL_INTERVAL = _parse_poll_interval()
