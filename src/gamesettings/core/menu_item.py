"""Optional entries of the main and in-game menus."""

from __future__ import annotations

from enum import Enum, auto


class MenuItem(Enum):
    SAVE_LOAD = auto()
    EXTRA = auto()
    ONLINE = auto()


def all_menu_items() -> set[MenuItem]:
    """Return a new set holding every menu item."""
    return set(MenuItem)
