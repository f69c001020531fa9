"""Search overlay listing the demo pages that match the typed text."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from ..element_tree import (
    BackgroundType,
    Border,
    Element,
    ElementTree,
    LayoutDirection,
    Overflow,
    Padding,
)
from ..input import InputData
from ..layout import set_dimensions, set_root_element_dimensions
from ..style_helpers import set_active_input_style, set_passive_input_style
from ..theme import BORDER_COLOR, GRAY_1, GRAY_2, TEXT_COLOR, WHITE, ElementTag
from .menu import get_content, set_content_panel, set_menu

_RESULTS = (
    ("border", ElementTag.BORDER_MENU_ITEM, "Border"),
    ("background", ElementTag.BACKGROUND_MENU_ITEM, "Background"),
    ("text", ElementTag.TEXT_MENU_ITEM, "Text"),
    ("table", ElementTag.TABLE_MENU_ITEM, "Table"),
    ("layers", ElementTag.LAYERS_MENU_ITEM, "Layers"),
)


def close_search_overlay(tree: ElementTree, data: Any = None) -> None:
    """Hide the search overlay and drop the focus."""
    tree.overlay = None
    tree.active_element = None


def click_search_bar(tree: ElementTree, data: Any = None) -> None:
    """Highlight the focused search input."""
    if tree.active_element is not None:
        set_active_input_style(tree.active_element)


def blur_search_bar(tree: ElementTree, data: Any = None) -> None:
    """Restore the style of the search input losing focus."""
    if tree.active_element is not None:
        set_passive_input_style(tree.active_element)


def add_separator(parent: Element) -> Element:
    """Append a one-pixel separator line and return it."""
    return parent.add_new(
        element_tag=ElementTag.SEARCH_RESULT_SEPARATOR,
        height=1,
        background_type=BackgroundType.COLOR,
        background=GRAY_2,
    )


def click_result_item(tree: ElementTree, data: Any = None) -> None:
    """Open the page of the clicked result and close the overlay."""
    clicked = tree.active_element
    if clicked is None:
        return
    page = get_content(tree, clicked.element_tag)
    if page is not None:
        set_menu(tree)
        set_content_panel(tree, page)
        close_search_overlay(tree)


def fill_search_results(result_list: Element, search_value: str) -> None:
    """Replace the results with the pages whose name contains ``search_value``."""
    result_list.children = []
    for name, tag, label in _RESULTS:
        if not search_value or search_value in name:
            result_list.add_new(
                element_tag=tag,
                padding=Padding(8, 10, 8, 10),
                text=label,
                text_color=TEXT_COLOR,
                on_click=click_result_item,
            )
            add_separator(result_list)
    children = result_list.children
    if len(children) > 1:
        if children[-1].element_tag == ElementTag.SEARCH_RESULT_SEPARATOR:
            children.pop()
    else:
        result_list.add_new(
            padding=Padding(8, 10, 8, 10),
            text="No results found",
            text_color=TEXT_COLOR,
        )


def on_search_bar_input(tree: ElementTree, data: Any = None) -> None:
    """Close on escape, otherwise refresh the results from the input text."""
    if data == "ESCAPE":
        close_search_overlay(tree)
        return
    if tree.overlay is None or tree.active_element is None:
        return
    result_list = tree.overlay.find_by_tag(ElementTag.SEARCH_RESULT_LIST)
    input_data = tree.active_element.input
    if result_list is not None and input_data is not None:
        fill_search_results(result_list, input_data.text)
        result_list.changed = True
        set_dimensions(tree)


def create_search_overlay_element() -> Element:
    """Build the search overlay layer."""
    overlay = Element()
    overlay.add_new(
        width=200,
        background_type=BackgroundType.COLOR,
        background=0x00000080,
        on_click=close_search_overlay,
    )
    content_panel = overlay.add_new(
        background_type=BackgroundType.COLOR,
        background=WHITE,
        layout_direction=LayoutDirection.VERTICAL,
    )
    input_panel = content_panel.add_new(
        height=50,
        background_type=BackgroundType.COLOR,
        background=WHITE,
        padding=Padding(10, 10, 10, 10),
        border_color=BORDER_COLOR,
        border=Border(0, 0, 1, 0),
    )
    search_input = input_panel.add_new(
        element_tag=ElementTag.SEARCH_PANEL_INPUT,
        background_type=BackgroundType.COLOR,
        background=WHITE,
        padding=Padding(6, 10, 6, 10),
        corner_radius=15,
        border_color=BORDER_COLOR,
        border=Border(1, 1, 1, 1),
        input=InputData(),
        text_color=TEXT_COLOR,
        on_click=click_search_bar,
        on_blur=blur_search_bar,
        on_key_press=on_search_bar_input,
        overflow=Overflow.SCROLL_X,
    )
    result_panel = content_panel.add_new(
        background_type=BackgroundType.COLOR,
        background=GRAY_1,
        layout_direction=LayoutDirection.VERTICAL,
        overflow=Overflow.SCROLL_Y,
        padding=Padding(10, 10, 10, 10),
        gutter=10,
    )
    result_list = result_panel.add_new(
        element_tag=ElementTag.SEARCH_RESULT_LIST,
        background_type=BackgroundType.COLOR,
        background=WHITE,
        border=Border(1, 1, 1, 1),
        border_color=GRAY_2,
        corner_radius=15,
        padding=Padding(2, 0, 2, 0),
        layout_direction=LayoutDirection.VERTICAL,
    )
    assert search_input.input is not None
    fill_search_results(result_list, search_input.input.text)
    return overlay


@lru_cache(maxsize=None)
def _shared_search_overlay() -> Element:
    return create_search_overlay_element()


def open_search_overlay(tree: ElementTree) -> None:
    """Show the search overlay with an empty, focused input and all results."""
    overlay = _shared_search_overlay()
    search_input = overlay.find_by_tag(ElementTag.SEARCH_PANEL_INPUT)
    result_list = overlay.find_by_tag(ElementTag.SEARCH_RESULT_LIST)
    if search_input is None or search_input.input is None or result_list is None:
        raise ValueError("search overlay is missing its input or result list")
    tree.active_element = search_input
    search_input.input.clear()
    set_active_input_style(search_input)
    fill_search_results(result_list, search_input.input.text)
    search_input.changed = True
    set_root_element_dimensions(
        tree.measurer,
        overlay,
        tree.root.layout.max_width,
        tree.root.layout.max_height,
    )
    tree.overlay = overlay