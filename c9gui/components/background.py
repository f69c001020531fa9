"""Demo page showing the background types."""

from __future__ import annotations

from ..color import Gradient
from ..element_tree import (
    BackgroundType,
    Border,
    Element,
    LayoutDirection,
    Overflow,
    Padding,
)
from ..font import FontVariant
from ..theme import BORDER_COLOR, GRAY_1, GRAY_2, TEXT_COLOR, WHITE, WHITE_2

_DESCRIPTIONS = (
    "The background type can be solid color, horizontal gradient, vertical "
    "gradient or image.",
    "The gradients are smoothed using a blue noise dithering algorithm reducing "
    "banding artifacts.",
    "If the background is set to image, no border or corner radius will be "
    "drawn on that element.",
)


def _example_box(panel: Element, background_type: BackgroundType, background) -> Element:
    return panel.add_new(
        width=100,
        height=100,
        background_type=background_type,
        background=background,
        border=Border(2, 2, 2, 2),
        corner_radius=15,
        border_color=BORDER_COLOR,
    )


def create_background_element() -> Element:
    """Build the background page."""
    page = Element(
        background_type=BackgroundType.COLOR,
        background=WHITE,
        layout_direction=LayoutDirection.VERTICAL,
        overflow=Overflow.SCROLL_Y,
        padding=Padding(10, 10, 0, 10),
        gutter=10,
    )
    panel = page.add_new(
        background_type=BackgroundType.COLOR,
        background=GRAY_1,
        corner_radius=25,
        padding=Padding(10, 10, 5, 10),
        layout_direction=LayoutDirection.VERTICAL,
        gutter=10,
        border=Border(1, 1, 1, 1),
        border_color=GRAY_2,
    )
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
        text="Background Type",
        text_color=TEXT_COLOR,
        overflow=Overflow.SCROLL_X,
        font_variant=FontVariant.LARGE,
    )
    for description in _DESCRIPTIONS:
        text_panel.add_new(text=description, text_color=TEXT_COLOR)

    examples = panel.add_new(
        layout_direction=LayoutDirection.HORIZONTAL,
        overflow=Overflow.SCROLL_X,
        gutter=10,
        padding=Padding(0, 0, 5, 0),
    )
    _example_box(examples, BackgroundType.COLOR, WHITE)
    _example_box(examples, BackgroundType.VERTICAL_GRADIENT, Gradient(WHITE, WHITE_2))
    _example_box(examples, BackgroundType.HORIZONTAL_GRADIENT, Gradient(WHITE, WHITE_2))

    image_frame = _example_box(examples, BackgroundType.COLOR, WHITE)
    image_frame.padding = Padding(top=35, bottom=35, left=32, right=32)
    image_frame.add_new(
        width=36,
        height=31,
        background_type=BackgroundType.IMAGE,
        background="C9_segment_small.png",
    )
    return page