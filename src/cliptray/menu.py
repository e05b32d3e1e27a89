from collections.abc import Sequence
from dataclasses import dataclass

from cliptray.config import PREVIEW_LENGTH
from cliptray.models import ClipboardItem
from cliptray.utils import truncate_text

HEADER_TITLE = "CLIPBOARD HISTORY"
EMPTY_TITLE = "No clipboard history yet"
CLEAR_TITLE = "Clear History"
QUIT_TITLE = "Quit Cliptray"
ZERO_WIDTH_SPACE = "\u200b"


@dataclass
class MenuItemSpec:
    """Specification for a menu item, separating logic from rumps rendering."""

    title: str
    action: str | None = None
    index: int | None = None
    item: ClipboardItem | None = None


def compute_menu_specs(items: Sequence[ClipboardItem], preview_length: int = PREVIEW_LENGTH) -> list[MenuItemSpec | None]:
    """Compute menu item specifications for a history snapshot.

    ``None`` marks a separator. Entry specs carry their item (and its snapshot
    index) so a click can be routed back to the session.
    """
    specs: list[MenuItemSpec | None] = [
        MenuItemSpec(HEADER_TITLE),
        None,
    ]

    if not items:
        specs.append(MenuItemSpec(EMPTY_TITLE))
    else:
        seen = {HEADER_TITLE, CLEAR_TITLE, QUIT_TITLE}
        for index, item in enumerate(items):
            title = truncate_text(item.display_label, preview_length)
            # rumps keys menu items by title; pad repeats so none get dropped
            while title in seen:
                title += ZERO_WIDTH_SPACE
            seen.add(title)
            specs.append(MenuItemSpec(title, action="select", index=index, item=item))

    specs.extend([
        None,
        MenuItemSpec(CLEAR_TITLE, action="clear"),
        None,
        MenuItemSpec(QUIT_TITLE, action="quit"),
    ])
    return specs
