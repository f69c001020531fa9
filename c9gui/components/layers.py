"""Demo page describing the content and overlay layers."""

from __future__ import annotations

from typing import Any

from ..element_tree import (
    BackgroundType,
    Border,
    Element,
    ElementTree,
    LayoutDirection,
    Overflow,
    Padding,
    TextAlign,
)
from ..font import FontVariant
from ..theme import BUTTON_GRADIENT, GRAY_1, GRAY_2, TEXT_COLOR, WHITE
from .overlay import open_overlay


def click_overlay_button(tree: ElementTree, data: Any = None) -> None:
    """Open the overlay layer."""
    open_overlay(tree)


def create_layers_element() -> Element:
    """Build the layers page."""
    page = Element(
        background_type=BackgroundType.COLOR,
        background=WHITE,
        layout_direction=LayoutDirection.VERTICAL,
        overflow=Overflow.SCROLL_Y,
        padding=Padding(10, 10, 10, 10),
        gutter=10,
    )
    content_panel = page.add_new(
        background_type=BackgroundType.COLOR,
        background=GRAY_1,
        corner_radius=25,
        padding=Padding(10, 10, 10, 10),
        gutter=10,
        layout_direction=LayoutDirection.VERTICAL,
        overflow=Overflow.SCROLL_Y,
        border=Border(1, 1, 1, 1),
        border_color=GRAY_2,
    )
    text_panel = content_panel.add_new(
        background_type=BackgroundType.COLOR,
        background=WHITE,
        padding=Padding(6, 10, 6, 10),
        layout_direction=LayoutDirection.VERTICAL,
        corner_radius=15,
        gutter=6,
        border=Border(1, 1, 1, 1),
        border_color=GRAY_2,
    )
    text_panel.add_new(
        text="Layers",
        text_color=TEXT_COLOR,
        overflow=Overflow.SCROLL_X,
        font_variant=FontVariant.LARGE,
    )
    text_panel.add_new(
        text=(
            "C9 gui uses two rendering layers, one for the normal content "
            "and one for overlays."
        ),
        text_color=TEXT_COLOR,
    )
    text_panel.add_new(
        text=(
            "The overlay layer is rendered on top of the content layer and is "
            "used for modals, popups, dropdowns, etc."
        ),
        text_color=TEXT_COLOR,
    )
    content_panel.add_new(
        text="Open overlay",
        text_color=WHITE,
        text_align=TextAlign.CENTER,
        padding=Padding(6, 10, 6, 10),
        background_type=BackgroundType.HORIZONTAL_GRADIENT,
        background=BUTTON_GRADIENT,
        corner_radius=15,
        overflow=Overflow.SCROLL_X,
        on_click=click_overlay_button,
        font_variant=FontVariant.BOLD,
    )
    return page