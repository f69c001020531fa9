"""Search bar that opens the search overlay when clicked."""

from __future__ import annotations

from typing import Any

from ..element_tree import BackgroundType, Border, Element, ElementTree, Overflow, Padding
from ..theme import BORDER_COLOR, TEXT_COLOR_MUTED, WHITE
from .search_overlay import open_search_overlay


def click_open_overlay(tree: ElementTree, data: Any = None) -> None:
    """Open the search overlay."""
    open_search_overlay(tree)


def create_search_bar_element() -> Element:
    """Build the search bar."""
    return Element(
        background_type=BackgroundType.COLOR,
        background=WHITE,
        padding=Padding(6, 10, 6, 10),
        corner_radius=15,
        border_color=BORDER_COLOR,
        border=Border(1, 1, 1, 1),
        text="Search...",
        text_color=TEXT_COLOR_MUTED,
        on_click=click_open_overlay,
        overflow=Overflow.SCROLL_X,
    )