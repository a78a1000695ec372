"""Menu descriptions for menu bars and pop-up menus."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

Action = Callable[[], None]


@dataclass
class MenuItem:
    """A single entry in a menu: a label and the action run when it is tapped."""

    label: str
    action: Optional[Action] = None


@dataclass
class Menu:
    """A labelled list of items, shown from a main menu or as a pop-up."""

    label: str
    items: list[MenuItem] = field(default_factory=list)


@dataclass
class MainMenu:
    """The top-level menus of a window's menu bar."""

    items: list[Menu] = field(default_factory=list)


def new_menu_item(label: str, action: Optional[Action]) -> MenuItem:
    """Create a menu item from a label and an action."""
    return MenuItem(label, action)


def new_menu(label: str, *items: MenuItem) -> Menu:
    """Create a menu with the given label and items."""
    return Menu(label, list(items))


def new_main_menu(*menus: Menu) -> MainMenu:
    """Create a top-level menu structure from the given menus."""
    return MainMenu(list(menus))