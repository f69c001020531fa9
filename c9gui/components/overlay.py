"""Modal overlay with a card and a close button."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from ..element_tree import (
    BackgroundType,
    Element,
    ElementTree,
    LayoutDirection,
    Overflow,
    Padding,
    TextAlign,
)
from ..font import FontVariant
from ..layout import set_root_element_dimensions
from ..theme import BUTTON_GRADIENT, TEXT_COLOR, WHITE


def close_overlay(tree: ElementTree, data: Any = None) -> None:
    """Remove the overlay layer from the tree."""
    tree.overlay = None


def create_overlay_element() -> Element:
    """Build the overlay layer."""
    overlay = Element(
        background_type=BackgroundType.COLOR,
        background=0x00000080,
        layout_direction=LayoutDirection.VERTICAL,
        overflow=Overflow.SCROLL,
        padding=Padding(20, 20, 20, 20),
    )
    card = overlay.add_new(
        width=200,
        background_type=BackgroundType.COLOR,
        background=WHITE,
        corner_radius=35,
        padding=Padding(20, 20, 20, 20),
        layout_direction=LayoutDirection.VERTICAL,
        overflow=Overflow.SCROLL_Y,
        gutter=10,
    )
    card.add_new(
        text="Overlay Title",
        text_color=TEXT_COLOR,
        font_variant=FontVariant.LARGE,
    )
    card.add_new(
        text="Some bold statement",
        text_color=TEXT_COLOR,
        font_variant=FontVariant.BOLD,
    )
    card.add_new(
        text=(
            "This is a multiline text that does not scroll horizontally "
            "but reflows to the next line."
        ),
        text_color=TEXT_COLOR,
        padding=Padding(bottom=10),
        overflow=Overflow.CONTAIN,
    )
    card.add_new(
        background_type=BackgroundType.HORIZONTAL_GRADIENT,
        background=BUTTON_GRADIENT,
        padding=Padding(6, 10, 6, 10),
        corner_radius=15,
        text="Close overlay",
        text_color=WHITE,
        text_align=TextAlign.CENTER,
        on_click=close_overlay,
        font_variant=FontVariant.BOLD,
    )
    return overlay


@lru_cache(maxsize=None)
def _shared_overlay() -> Element:
    return create_overlay_element()


def open_overlay(tree: ElementTree) -> None:
    """Lay out the overlay to the root's size and show it."""
    overlay = _shared_overlay()
    set_root_element_dimensions(
        tree.measurer,
        overlay,
        tree.root.layout.max_width,
        tree.root.layout.max_height,
    )
    tree.overlay = overlay