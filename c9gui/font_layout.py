"""Line breaking and mapping between text indexes and screen positions."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from .element_tree import Element, Overflow
from .font import TextMeasurer, get_font_height
from .input import Line

LINE_SPACING = 2


def contains_newline(text: str) -> bool:
    """Whether ``text`` holds a line feed."""
    return "\n" in text


def _iter_lines(
    measurer: TextMeasurer, variant: int, text: str, max_width: int
) -> Iterator[Line]:
    length = len(text)
    start = 0
    while start < length:
        _, count = measurer.measure(variant, text[start:], max_width)
        # Always advance by at least one character so narrow widths terminate.
        count = max(count, 1)
        last_space = -1
        newline = -1
        read = start
        while count > 0 and read < length:
            char = text[read]
            if char == "\n":
                newline = read
                break
            if char == " ":
                last_space = read
            read += 1
            count -= 1
        if newline != -1:
            yield Line(start, newline)
            start = newline + 1
        elif last_space != -1 and read < length:
            yield Line(start, last_space + 1)
            start = last_space + 1
        else:
            yield Line(start, read)
            start = read


def split_string_at_width(
    measurer: TextMeasurer, variant: int, text: str, max_width: int
) -> list[Line]:
    """Break ``text`` into lines no wider than ``max_width`` (0 means unlimited)."""
    if max_width == 0 or not text:
        return [Line(0, len(text))]
    lines = list(_iter_lines(measurer, variant, text, max_width))
    if text.endswith("\n"):
        lines.append(Line(len(text), len(text)))
    return lines


def get_text_line_height(variant: int) -> int:
    """Height of one text line including line spacing."""
    return get_font_height(variant) + LINE_SPACING


def get_text_block_height(
    measurer: TextMeasurer, variant: int, text: str, max_width: int
) -> int:
    """Height of ``text`` wrapped at ``max_width``."""
    font_height = get_font_height(variant)
    if max_width == 0 or not text:
        return font_height
    rows = len(split_string_at_width(measurer, variant, text, max_width))
    return font_height * rows + LINE_SPACING * (rows - 1)


def index_from_x(measurer: TextMeasurer, variant: int, text: str, position: int) -> int:
    """Character index in a single line nearest to the pixel offset ``position``."""
    if position <= 0 or not text:
        return 0
    width, count = measurer.measure(variant, text, position)
    next_width = measurer.text_width(variant, text[count : count + 1])
    if position - width > next_width // 2:
        count += 1
    index = min(count, len(text))
    if index > 0 and text[index - 1] == "\n":
        index -= 1
    if index == len(text) and text[index - 1] == " ":
        index -= 1
    return index


def get_child_order_at(parent: Element, y: int) -> int:
    """Index of the child covering vertical coordinate ``y``, or -1 without children."""
    children = parent.children
    if not children:
        return -1
    low, high = 0, len(children) - 1
    while low <= high:
        mid = (low + high) // 2
        child = children[mid]
        if y <= child.layout.y + child.layout.max_height:
            if mid == 0:
                return mid
            previous = children[mid - 1]
            if y > previous.layout.y + previous.layout.max_height:
                return mid
            high = mid - 1
        else:
            low = mid + 1
    return len(children) - 1


def _require_input(element: Element):
    if element.input is None:
        raise ValueError("element has no text input")
    return element.input


def index_from_position(
    measurer: TextMeasurer, cursor: tuple[int, int], element: Element
) -> int:
    """Character index of the input under the global position ``cursor``."""
    data = _require_input(element)
    cursor_x, cursor_y = cursor
    layout, padding = element.layout, element.padding
    x = cursor_x - layout.x - padding.left - layout.scroll_x
    y = cursor_y - layout.y - padding.top - layout.scroll_y
    if y <= 0:
        return 0
    line_number = get_child_order_at(element, cursor_y)
    if line_number < 0:
        return 0
    if line_number >= len(data.lines):
        return len(data.text)
    line = data.lines[line_number]
    line_text = data.text[line.start_index : line.end_index]
    return line.start_index + index_from_x(measurer, element.font_variant, line_text, x)


def position_from_index(
    measurer: TextMeasurer, index: int, element: Element
) -> tuple[int, int]:
    """Global position of the cursor placed at character ``index`` of the input."""
    data = _require_input(element)
    variant = element.font_variant
    if element.overflow in (Overflow.SCROLL, Overflow.SCROLL_X):
        width = measurer.text_width(variant, data.text)
        return (
            element.layout.x + element.padding.left + width,
            element.layout.y + element.padding.top,
        )

    line: Optional[Line] = None
    line_index = 0
    for number, current in enumerate(data.lines):
        if current.start_index <= index <= current.end_index:
            line, line_index = current, number
    if line is None and data.lines:
        line_index = len(data.lines) - 1
        line = data.lines[line_index]
    if line is None or not element.children or line_index >= len(element.children):
        return (0, 0)

    child = element.children[line_index]
    width = measurer.text_width(variant, data.text[line.start_index : index])
    height = get_text_line_height(variant)
    return (child.layout.x + width, child.layout.y + height // 2)