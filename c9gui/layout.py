"""Layout engine: sizes, positions, scrolling and hit testing of the element tree."""

from __future__ import annotations

from typing import Optional

from .element_tree import Element, ElementTree, LayoutDirection, Overflow
from .font import TextMeasurer, get_font_height
from .font_layout import LINE_SPACING, get_text_block_height, split_string_at_width
from .input import Line

_SCROLLS_X = (Overflow.SCROLL, Overflow.SCROLL_X)
_SCROLLS_Y = (Overflow.SCROLL, Overflow.SCROLL_Y)


def force_input_rerender(element: Element) -> None:
    """Mark every input element in the subtree as changed."""
    if element.input is not None:
        element.changed = True
    for child in element.children:
        force_input_rerender(child)


def _line_element(element: Element, line: Line) -> Element:
    assert element.input is not None
    return Element(
        text=element.input.text[line.start_index : line.end_index],
        overflow=Overflow.SCROLL_X,
        font_variant=element.font_variant,
        changed=True,
    )


def populate_input_text(measurer: TextMeasurer, element: Element) -> None:
    """Give every input element in the subtree one child per line of its text."""
    data = element.input
    if data is None:
        for child in element.children:
            populate_input_text(measurer, child)
        return

    if element.overflow in _SCROLLS_X:
        max_width = 0
    else:
        max_width = (
            element.layout.max_width - element.padding.left - element.padding.right
        )

    if not element.children:
        element.layout_direction = LayoutDirection.VERTICAL
        element.gutter = LINE_SPACING
        if element.height > 0:
            element.overflow = Overflow.SCROLL_Y
        lines = split_string_at_width(measurer, element.font_variant, data.text, max_width)
        data.lines = lines
        element.children = [_line_element(element, line) for line in lines]
    elif element.changed:
        lines = split_string_at_width(measurer, element.font_variant, data.text, max_width)
        data.lines = lines
        children = element.children
        for position, (line, child) in enumerate(zip(lines, children)):
            line_text = data.text[line.start_index : line.end_index]
            if child.text != line_text:
                children[position] = _line_element(element, line)
        if len(lines) > len(children):
            children.extend(_line_element(element, line) for line in lines[len(children) :])
        elif len(lines) < len(children):
            del children[len(lines) :]


def fill_max_width(element: Element, max_width: int) -> None:
    """Recursively share the available width out among the elements."""
    if element.width == 0:
        element.layout.max_width = max_width
    else:
        element.layout.max_width = element.width
        max_width = element.width

    children = element.children
    if not children:
        return
    child_width = 0
    if element.overflow not in _SCROLLS_X:
        child_width = max_width - element.padding.left - element.padding.right
        if element.layout_direction == LayoutDirection.HORIZONTAL:
            split_count = 0
            for position, child in enumerate(children):
                if child.width == 0:
                    split_count += 1
                else:
                    child_width -= child.width
                if position != 0:
                    child_width -= element.gutter
            child_width = max(child_width, 0)
            if split_count > 0:
                child_width //= split_count
        child_width = max(child_width, 0)
    for child in children:
        fill_max_width(child, child_width)


def fill_max_height(element: Element, max_height: int) -> None:
    """Recursively share the available height out among the elements."""
    if element.height == 0:
        element.layout.max_height = max_height
    else:
        element.layout.max_height = element.height
        max_height = element.height

    children = element.children
    if not children:
        return
    child_height = 0
    if element.overflow not in _SCROLLS_Y:
        child_height = max_height - element.padding.top - element.padding.bottom
        if element.layout_direction == LayoutDirection.VERTICAL:
            split_count = 0
            for position, child in enumerate(children):
                if child.height == 0:
                    split_count += 1
                else:
                    child_height -= child.height
                if position != 0:
                    child_height -= element.gutter
            child_height = max(child_height, 0)
            if split_count > 0:
                child_height //= split_count
        child_height = max(child_height, 0)
    for child in children:
        fill_max_height(child, child_height)


def fill_scroll_width(measurer: TextMeasurer, element: Element) -> int:
    """Recursively compute content widths; return the width the element takes."""
    self_width = element.width
    element_padding = element.padding.left + element.padding.right
    child_width = element_padding
    layout = element.layout

    if element.children:
        for position, child in enumerate(element.children):
            if element.layout_direction == LayoutDirection.HORIZONTAL:
                if position != 0:
                    child_width += element.gutter
                child_width += fill_scroll_width(measurer, child)
            else:
                current = fill_scroll_width(measurer, child)
                child_width = max(child_width, current + element_padding)
    elif element.text is not None:
        text_width = measurer.text_width(element.font_variant, element.text)
        if layout.max_width > 0 and element.overflow not in _SCROLLS_X:
            if text_width < layout.max_width:
                child_width += text_width
            else:
                child_width = layout.max_width
                text_height = get_text_block_height(
                    measurer,
                    element.font_variant,
                    element.text,
                    layout.max_width - element_padding,
                )
                layout.scroll_height = (
                    text_height + element.padding.top + element.padding.bottom
                )
        else:
            # Leave room for the text cursor.
            child_width += text_width + 1 if text_width > 0 else 2
            layout.scroll_height = 0

    data = element.input
    if data is not None and element.overflow in _SCROLLS_X:
        if child_width < layout.max_width:
            layout.scroll_x = 0
        elif (
            child_width > layout.max_width
            and child_width + layout.scroll_x < layout.max_width
        ):
            layout.scroll_x = layout.max_width - child_width
        elif (
            child_width + layout.scroll_x > layout.max_width
            and data.selection.end_index == len(data.text)
        ):
            layout.scroll_x = layout.max_width - child_width

    layout.scroll_width = max(child_width, self_width)
    return self_width if self_width > 0 else child_width


def fill_scroll_height(element: Element) -> int:
    """Recursively compute content heights; return the height the element takes."""
    self_height = element.height
    element_padding = element.padding.top + element.padding.bottom
    child_height = element_padding
    layout = element.layout

    if element.children:
        for position, child in enumerate(element.children):
            if element.layout_direction == LayoutDirection.VERTICAL:
                if position != 0:
                    child_height += element.gutter
                child_height += fill_scroll_height(child)
            else:
                current = fill_scroll_height(child)
                child_height = max(child_height, current + element_padding)
    elif element.text is not None or element.input is not None:
        child_height += get_font_height(element.font_variant)
        # Wrapped text already set its height while measuring widths.
        child_height = max(child_height, layout.scroll_height)

    layout.scroll_height = max(child_height, self_height)
    return self_height if self_height > 0 else child_height


def set_max_on_scrolled(element: Element) -> None:
    """Give elements without a maximum size their content size."""
    layout = element.layout
    if layout.max_height == 0:
        layout.max_height = layout.scroll_height
    if layout.max_width == 0:
        layout.max_width = layout.scroll_width
    for child in element.children:
        set_max_on_scrolled(child)


def cap_scroll(element: Element) -> None:
    """Bring scroll offsets that are out of range back within range."""
    layout = element.layout
    if layout.scroll_x < 0 and layout.scroll_width + layout.scroll_x < layout.max_width:
        layout.scroll_x = layout.max_width - layout.scroll_width
    elif layout.scroll_x > 0:
        layout.scroll_x = 0
    if (
        layout.scroll_y < 0
        and layout.scroll_height + layout.scroll_y < layout.max_height
    ):
        layout.scroll_y = layout.max_height - layout.scroll_height
    elif layout.scroll_y > 0:
        layout.scroll_y = 0
    for child in element.children:
        cap_scroll(child)


def set_x(element: Element, x: int) -> int:
    """Recursively place elements horizontally; return the element's right edge."""
    element.layout.x = x
    child_x = x + element.layout.scroll_x + element.padding.left
    for child in element.children:
        if element.layout_direction == LayoutDirection.HORIZONTAL:
            child_x = set_x(child, child_x) + element.gutter
        else:
            set_x(child, child_x)
    return x + element.layout.max_width


def set_y(element: Element, y: int) -> int:
    """Recursively place elements vertically; return the element's bottom edge."""
    element.layout.y = y
    child_y = y + element.layout.scroll_y + element.padding.top
    for child in element.children:
        if element.layout_direction == LayoutDirection.VERTICAL:
            child_y = set_y(child, child_y) + element.gutter
        else:
            set_y(child, child_y)
    return y + element.layout.max_height


def set_root_element_dimensions(
    measurer: TextMeasurer,
    element: Optional[Element],
    window_width: int,
    window_height: int,
) -> None:
    """Lay out a whole layer for a window of the given size."""
    if element is None:
        return
    fill_max_width(element, window_width)
    fill_max_height(element, window_height)
    fill_scroll_width(measurer, element)
    fill_scroll_height(element)
    set_max_on_scrolled(element)
    cap_scroll(element)
    set_x(element, 0)
    set_y(element, 0)


def rerender_inputs(tree: ElementTree) -> None:
    """Mark all inputs of both layers as changed, e.g. after a resize."""
    force_input_rerender(tree.root)
    if tree.overlay is not None:
        force_input_rerender(tree.overlay)


def populate_inputs(tree: ElementTree) -> None:
    """Rebuild the line children of all inputs of both layers."""
    populate_input_text(tree.measurer, tree.root)
    if tree.overlay is not None:
        populate_input_text(tree.measurer, tree.overlay)


def set_dimensions(tree: ElementTree) -> None:
    """Lay out both layers for the tree's current size."""
    set_root_element_dimensions(tree.measurer, tree.root, tree.size.width, tree.size.height)
    if tree.overlay is not None:
        set_root_element_dimensions(
            tree.measurer, tree.overlay, tree.size.width, tree.size.height
        )


def is_pointer_in_element(element: Element, x: int, y: int) -> bool:
    """Whether ``(x, y)`` lies within the element's box, edges included."""
    layout = element.layout
    return (
        layout.x <= x <= layout.x + layout.max_width
        and layout.y <= y <= layout.y + layout.max_height
    )


def get_clickable_element_at(element: Element, x: int, y: int) -> Optional[Element]:
    """The clickable element under ``(x, y)``, searching from ``element`` down."""
    if element.on_click is not None:
        return element
    for child in element.children:
        if is_pointer_in_element(child, x, y):
            return get_clickable_element_at(child, x, y)
    return None


def scroll_x(element: Element, x: int, y: int, scroll_delta: int) -> int:
    """Scroll elements under the pointer horizontally, innermost first.

    Returns the part of ``scroll_delta`` that no element could take.
    """
    if not is_pointer_in_element(element, x, y):
        return scroll_delta
    for child in element.children:
        scroll_delta = scroll_x(child, x, y, scroll_delta)
    layout = element.layout
    if element.overflow in _SCROLLS_X and layout.scroll_width > layout.max_width:
        max_scroll = layout.max_width - layout.scroll_width
        if scroll_delta > 0 or layout.scroll_x > max_scroll:
            new_scroll = layout.scroll_x + scroll_delta
            if new_scroll < max_scroll:
                scroll_delta = new_scroll - max_scroll
                layout.scroll_x = max_scroll
            elif new_scroll > 0:
                scroll_delta = new_scroll
                layout.scroll_x = 0
            else:
                scroll_delta = 0
                layout.scroll_x = new_scroll
            element.changed = True
    return scroll_delta


def scroll_y(element: Element, x: int, y: int, scroll_delta: int) -> int:
    """Scroll elements under the pointer vertically, innermost first.

    Returns the part of ``scroll_delta`` that no element could take.
    """
    if not is_pointer_in_element(element, x, y):
        return scroll_delta
    for child in element.children:
        scroll_delta = scroll_y(child, x, y, scroll_delta)
    layout = element.layout
    if element.overflow in _SCROLLS_Y and layout.scroll_height > layout.max_height:
        max_scroll = layout.max_height - layout.scroll_height
        if scroll_delta > 0 or layout.scroll_y > max_scroll:
            new_scroll = layout.scroll_y + scroll_delta
            if new_scroll < max_scroll:
                scroll_delta = new_scroll - max_scroll
                layout.scroll_y = max_scroll
            elif new_scroll > 0:
                scroll_delta = new_scroll
                layout.scroll_y = 0
            else:
                scroll_delta = 0
                layout.scroll_y = new_scroll
            element.changed = True
    return scroll_delta