"""Side panel menu switching the content panel between the demo pages."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from ..element_tree import BackgroundType, Element, ElementTree, Padding
from ..font import FontVariant
from ..layout import set_dimensions
from ..theme import MENU_ACTIVE_COLOR, TEXT_COLOR, TEXT_COLOR_ACTIVE, ElementTag
from .background import create_background_element
from .border import create_border_element
from .layers import create_layers_element
from .table import create_table_element
from .text import create_text_element

_PAGE_FACTORIES: dict[int, Callable[[], Element]] = {
    ElementTag.BORDER_MENU_ITEM: create_border_element,
    ElementTag.BACKGROUND_MENU_ITEM: create_background_element,
    ElementTag.TEXT_MENU_ITEM: create_text_element,
    ElementTag.TABLE_MENU_ITEM: create_table_element,
    ElementTag.LAYERS_MENU_ITEM: create_layers_element,
}

_pages: dict[int, Element] = {}

_MENU_ITEMS = (
    (ElementTag.BORDER_MENU_ITEM, "Border"),
    (ElementTag.BACKGROUND_MENU_ITEM, "Background"),
    (ElementTag.TEXT_MENU_ITEM, "Text"),
    (ElementTag.TABLE_MENU_ITEM, "Table"),
    (ElementTag.LAYERS_MENU_ITEM, "Layers"),
)


def reset_menu_elements(side_panel: Element) -> None:
    """Return every highlighted menu item to its passive look."""
    for child in side_panel.children:
        if child.background_type == BackgroundType.COLOR:
            child.background_type = BackgroundType.NONE
            child.text_color = TEXT_COLOR
            child.font_variant = FontVariant.REGULAR
            child.changed = True


def set_active_menu_element(element: Element) -> None:
    """Highlight a menu item."""
    element.background_type = BackgroundType.COLOR
    element.text_color = TEXT_COLOR_ACTIVE
    element.font_variant = FontVariant.BOLD
    element.changed = True


def set_menu(tree: ElementTree) -> None:
    """Highlight the menu item carrying the tag of the clicked element."""
    clicked = tree.active_element
    side_panel = tree.root.find_by_tag(ElementTag.SIDE_PANEL)
    if clicked is None or side_panel is None:
        return
    active_item = side_panel.find_by_tag(clicked.element_tag)
    reset_menu_elements(side_panel)
    if active_item is not None:
        set_active_menu_element(active_item)


def set_content_panel(tree: ElementTree, element: Element) -> None:
    """Show ``element`` as the only content of the content panel."""
    content_panel = tree.root.find_by_tag(ElementTag.CONTENT_PANEL)
    if content_panel is None:
        return
    content_panel.children = [element]
    content_panel.layout.scroll_x = 0
    content_panel.layout.scroll_y = 0
    set_dimensions(tree)


def get_content(tree: ElementTree, tag: int) -> Optional[Element]:
    """The page belonging to a menu tag, built on first use; ``None`` for other tags."""
    page = _pages.get(tag)
    if page is None:
        factory = _PAGE_FACTORIES.get(tag)
        if factory is None:
            return None
        page = _pages[tag] = factory()
    return page


def click_menu_item(tree: ElementTree, data: Any = None) -> None:
    """Switch to the page of the clicked menu item."""
    clicked = tree.active_element
    if clicked is None:
        return
    page = get_content(tree, clicked.element_tag)
    if page is None:
        return
    set_menu(tree)
    set_content_panel(tree, page)


def add_menu_items(side_panel: Element) -> None:
    """Fill the side panel with the menu items, the first one highlighted."""
    for position, (tag, label) in enumerate(_MENU_ITEMS):
        first = position == 0
        side_panel.add_new(
            element_tag=tag,
            background_type=BackgroundType.COLOR if first else BackgroundType.NONE,
            background=MENU_ACTIVE_COLOR,
            padding=Padding(6, 10, 6, 10),
            corner_radius=15,
            text=label,
            text_color=TEXT_COLOR,
            on_click=click_menu_item,
            font_variant=FontVariant.BOLD if first else FontVariant.REGULAR,
        )