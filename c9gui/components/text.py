"""Demo page showing font variants, text inputs and text boxes."""

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
)
from ..font import FontVariant
from ..input import InputData
from ..style_helpers import set_active_input_style, set_passive_input_style
from ..theme import BORDER_COLOR, GRAY_1, GRAY_2, TEXT_COLOR, WHITE


def _active(tree: ElementTree) -> Element:
    if tree.active_element is None:
        raise ValueError("no active element")
    return tree.active_element


def click_text_input(tree: ElementTree, data: Any = None) -> None:
    """Highlight the focused input."""
    set_active_input_style(_active(tree))


def blur_text_input(tree: ElementTree, data: Any = None) -> None:
    """Restore the style of the input losing focus."""
    set_passive_input_style(_active(tree))


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


def _small_title(panel: Element, text: str) -> None:
    panel.add_new(
        text=text,
        text_color=TEXT_COLOR,
        font_variant=FontVariant.SMALL,
        padding=Padding(10, 0, 6, 10),
    )


def _text_input(panel: Element, overflow: Overflow) -> None:
    panel.add_new(
        background_type=BackgroundType.COLOR,
        background=WHITE,
        padding=Padding(6, 10, 6, 10),
        corner_radius=15,
        border_color=BORDER_COLOR,
        border=Border(1, 1, 1, 1),
        input=InputData(),
        text_color=TEXT_COLOR,
        on_click=click_text_input,
        on_blur=blur_text_input,
        overflow=overflow,
    )


def _text_box(panel: Element, text: str, overflow: Overflow) -> None:
    panel.add_new(
        text=text,
        text_color=TEXT_COLOR,
        background_type=BackgroundType.COLOR,
        background=WHITE,
        padding=Padding(6, 10, 6, 10),
        corner_radius=15,
        overflow=overflow,
        font_variant=FontVariant.REGULAR,
        border=Border(1, 1, 1, 1),
        border_color=GRAY_2,
    )


def _section(page: Element, **kwargs: Any) -> Element:
    return page.add_new(
        background_type=BackgroundType.COLOR,
        background=GRAY_1,
        corner_radius=25,
        padding=Padding(10, 10, 10, 10),
        layout_direction=LayoutDirection.VERTICAL,
        border=Border(1, 1, 1, 1),
        border_color=GRAY_2,
        **kwargs,
    )


def create_text_element() -> Element:
    """Build the text page."""
    page = Element(
        background_type=BackgroundType.COLOR,
        background=WHITE,
        layout_direction=LayoutDirection.VERTICAL,
        overflow=Overflow.SCROLL_Y,
        padding=Padding(10, 10, 10, 10),
        gutter=10,
    )

    variants = _section(page, gutter=10, overflow=Overflow.SCROLL_Y)
    _text_panel(
        variants,
        "Font Variants",
        "C9 gui uses four font variants: regular, bold, large, and small.",
    )
    examples = variants.add_new(
        padding=Padding(6, 10, 6, 10),
        layout_direction=LayoutDirection.VERTICAL,
        gutter=10,
    )
    for text, variant in (
        ("Regular text", FontVariant.REGULAR),
        ("Bold text", FontVariant.BOLD),
        ("Large text", FontVariant.LARGE),
        ("Small text", FontVariant.SMALL),
    ):
        examples.add_new(text=text, font_variant=variant)

    inputs = _section(page)
    _text_panel(
        inputs,
        "Text Input",
        "There are two types of text inputs: single line and multiline. Vertical "
        "overflow setting is used to determine the type. If the text is allowed to "
        "scroll horizontally, a single line input is used, otherwise a multiline "
        "input is used.",
    )
    _small_title(inputs, "SINGLE LINE")
    _text_input(inputs, Overflow.SCROLL_X)
    _small_title(inputs, "MULTILINE")
    _text_input(inputs, Overflow.CONTAIN)

    boxes = _section(page, overflow=Overflow.SCROLL_Y)
    _text_panel(
        boxes,
        "Text Boxes",
        "As with text input, text boxes can be either vertically scrolling or "
        "multiline with automatic and manual linebreaks. The overflow setting "
        "determines which type of box is used.",
    )
    _small_title(boxes, "VERTICALLY SCROLLING")
    _text_box(
        boxes,
        "This is a scrolling text that overflows its parent. Scrolling horizontally "
        "on this line will reveal the rest of its content.",
        Overflow.SCROLL_X,
    )
    _small_title(boxes, "AUTOMATIC LINEBREAKS")
    _text_box(
        boxes,
        "This is a long text that does not scroll horizontally. Instead it reflows "
        "to the next line.",
        Overflow.CONTAIN,
    )
    _small_title(boxes, "MANUAL LINEBREAKS")
    _text_box(
        boxes,
        "This is a long\nmanually broken\ntext that does not\nscroll horizontally."
        "\nInstead it reflows\nto the next line.",
        Overflow.CONTAIN,
    )
    return page