"""Demo page showing border widths and corner radii."""

from __future__ import annotations

from ..element_tree import (
    BackgroundType,
    Border,
    Element,
    LayoutDirection,
    Overflow,
    Padding,
)
from ..font import FontVariant
from ..theme import BORDER_COLOR, GRAY_1, GRAY_2, TEXT_COLOR, WHITE


def _section_panel(page: Element) -> Element:
    return page.add_new(
        background_type=BackgroundType.COLOR,
        background=GRAY_1,
        corner_radius=25,
        padding=Padding(10, 10, 10, 10),
        layout_direction=LayoutDirection.VERTICAL,
        gutter=10,
        border=Border(1, 1, 1, 1),
        border_color=GRAY_2,
    )


def _text_panel(panel: Element, title: str, description: str) -> None:
    text_panel = panel.add_new(
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
        text=title,
        text_color=TEXT_COLOR,
        overflow=Overflow.SCROLL_X,
        font_variant=FontVariant.LARGE,
    )
    text_panel.add_new(text=description, text_color=TEXT_COLOR)


def _example_panel(panel: Element) -> Element:
    return panel.add_new(
        layout_direction=LayoutDirection.HORIZONTAL,
        overflow=Overflow.SCROLL_X,
        gutter=10,
    )


def _example_box(panel: Element, border: Border, corner_radius: int = 0) -> None:
    panel.add_new(
        width=100,
        height=100,
        background_type=BackgroundType.COLOR,
        background=WHITE,
        border=border,
        corner_radius=corner_radius,
        border_color=BORDER_COLOR,
    )


def create_border_element() -> Element:
    """Build the border page."""
    page = Element(
        background_type=BackgroundType.COLOR,
        background=WHITE,
        layout_direction=LayoutDirection.VERTICAL,
        overflow=Overflow.SCROLL_Y,
        padding=Padding(10, 10, 10, 10),
        gutter=10,
    )

    width_panel = _section_panel(page)
    _text_panel(
        width_panel,
        "Border Width",
        "Border width can be set individually for each side of an element.",
    )
    width_examples = _example_panel(width_panel)
    _example_box(width_examples, Border(1, 1, 1, 1))
    _example_box(width_examples, Border(0, 6, 6, 0))
    _example_box(width_examples, Border(6, 6, 6, 6))

    radius_panel = _section_panel(page)
    _text_panel(
        radius_panel,
        "Corner Radius",
        "Corner radius can be set from zero, resulting in a square, up to half "
        "the width or height of the element, resulting in a superellipse.",
    )
    radius_examples = _example_panel(radius_panel)
    for radius in (0, 30, 50):
        _example_box(radius_examples, Border(2, 2, 2, 2), radius)

    return page