from c9gui.element_tree import Border, Element, Padding
from c9gui.font import FontVariant
from c9gui.style_helpers import (
    set_active_input_style,
    set_passive_input_style,
    set_table_style,
    table_content_style,
    table_title_style,
)
from c9gui.theme import BORDER_COLOR, BORDER_COLOR_ACTIVE, TEXT_COLOR, TEXT_COLOR_ACTIVE


def _table(columns):
    table = Element()
    for cells in columns:
        column = table.add_new()
        for text in cells:
            column.add_new(text=text)
    return table


def test_active_then_passive_input_style():
    element = Element()
    set_active_input_style(element)
    assert element.border_color == BORDER_COLOR_ACTIVE
    assert element.text_color == TEXT_COLOR_ACTIVE
    set_passive_input_style(element)
    assert element.border_color == BORDER_COLOR
    assert element.text_color == TEXT_COLOR


def test_title_style():
    cell = Element()
    table_title_style(cell)
    assert cell.font_variant is FontVariant.BOLD
    assert cell.padding == Padding(6, 10, 6, 10)
    assert cell.border == Border(0, 0, 1, 0)
    assert cell.border_color == BORDER_COLOR


def test_content_style_only_sets_padding():
    cell = Element()
    table_content_style(cell)
    assert cell.padding == Padding(6, 10, 6, 10)
    assert cell.font_variant is FontVariant.REGULAR
    assert cell.border == Border()


def test_table_style_first_row_is_title():
    table = _table([["Type", "u8"], ["Name", "gutter", "width"]])
    set_table_style(table)
    for column in table.children:
        assert column.children[0].font_variant is FontVariant.BOLD
        for cell in column.children[1:]:
            assert cell.font_variant is FontVariant.REGULAR
            assert cell.padding == Padding(6, 10, 6, 10)


def test_table_style_stops_at_empty_column():
    table = _table([["A", "a"], [], ["B", "b"]])
    set_table_style(table)
    assert table.children[0].children[0].font_variant is FontVariant.BOLD
    assert table.children[2].children[0].font_variant is FontVariant.REGULAR
    assert table.children[2].children[1].padding == Padding()