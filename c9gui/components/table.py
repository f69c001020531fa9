"""Demo page with a table describing the element attributes."""

from __future__ import annotations

from ..element_tree import Element, LayoutDirection, Overflow, Padding
from ..style_helpers import set_table_style

_ROWS = (
    ("Type", "Name", "Description"),
    ("u8", "element_tag", "id or group id"),
    ("u8", "background_type", "none, color, gradient, image"),
    ("RGBA", "background.color", "used if background_type is color"),
    ("C9_Gradient", "background.gradient", "used if background_type is gradient"),
    ("s8", "background.image", "used if background_type is image"),
    ("u16", "width", "fixed width of the element"),
    ("u16", "height", "fixed height of the element"),
    ("u8", "gutter", "space between children"),
    ("s8", "text", "text label"),
    ("u8", "text_align", "left, center, right"),
    ("InputData*", "input", "text input object (new_input)"),
    ("RGBA", "text_color", "color of rendered text"),
    ("OnEvent", "on_click", "function pointer called on click"),
    ("OnEvent", "on_blur", "function pointer called on blur"),
    ("OnEvent", "on_key_press", "function pointer called on input"),
    ("Padding", "padding", "padding inside element (4 values)"),
    ("Border", "border", "border around element (4 values)"),
    ("u8", "corner_radius", "radius of superellipse corners"),
    ("RGBA", "border_color", "color of border"),
    ("Array*", "children", "flexible array of child elements"),
    ("u8", "layout_direction", "direction of flex layout (contain)"),
    ("u8", "overflow", "contain, scroll, scroll_x, scroll_y"),
    ("LayoutProps", "layout", "props set by the layout engine"),
    ("RenderProps", "render", "cache for renderer"),
)


def add_column(table: Element) -> Element:
    """Append a vertical column to the table and return it."""
    return table.add_new(layout_direction=LayoutDirection.VERTICAL)


def add_cell(column: Element, text: str) -> Element:
    """Append a text cell to the column and return it."""
    return column.add_new(text=text)


def create_table_element() -> Element:
    """Build the table page."""
    table = Element(
        layout_direction=LayoutDirection.HORIZONTAL,
        overflow=Overflow.SCROLL,
        padding=Padding(10, 10, 10, 10),
        gutter=10,
    )
    columns = [add_column(table) for _ in range(3)]
    for row in _ROWS:
        for column, text in zip(columns, row):
            add_cell(column, text)
    set_table_style(table)
    return table