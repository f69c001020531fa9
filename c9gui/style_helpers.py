"""Shared styles for inputs and tables."""

from __future__ import annotations

from .element_tree import Border, Element, Padding
from .font import FontVariant
from .theme import BORDER_COLOR, BORDER_COLOR_ACTIVE, TEXT_COLOR, TEXT_COLOR_ACTIVE


def set_active_input_style(element: Element) -> None:
    """Highlight a focused input."""
    element.border_color = BORDER_COLOR_ACTIVE
    element.text_color = TEXT_COLOR_ACTIVE


def set_passive_input_style(element: Element) -> None:
    """Restore an unfocused input."""
    element.border_color = BORDER_COLOR
    element.text_color = TEXT_COLOR


def table_title_style(element: Element) -> None:
    """Style of a header cell."""
    element.font_variant = FontVariant.BOLD
    element.padding = Padding(6, 10, 6, 10)
    element.border = Border(0, 0, 1, 0)
    element.border_color = BORDER_COLOR


def table_content_style(element: Element) -> None:
    """Style of a body cell."""
    element.padding = Padding(6, 10, 6, 10)


def set_table_style(element: Element) -> None:
    """Style a table whose children are columns of cells; stops at the first empty column."""
    for column in element.children:
        if not column.children:
            return
        title, *cells = column.children
        table_title_style(title)
        for cell in cells:
            table_content_style(cell)