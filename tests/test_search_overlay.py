import pytest

from c9gui.components.menu import add_menu_items, get_content
from c9gui.components.search_overlay import (
    add_separator,
    blur_search_bar,
    click_result_item,
    click_search_bar,
    close_search_overlay,
    create_search_overlay_element,
    fill_search_results,
    on_search_bar_input,
    open_search_overlay,
)
from c9gui.element_tree import BackgroundType, Element, ElementTree, LayoutDirection
from c9gui.layout import set_dimensions
from c9gui.theme import (
    BORDER_COLOR,
    BORDER_COLOR_ACTIVE,
    GRAY_2,
    TEXT_COLOR,
    TEXT_COLOR_ACTIVE,
    ElementTag,
)

SEPARATOR = ElementTag.SEARCH_RESULT_SEPARATOR


@pytest.fixture
def tree():
    tree = ElementTree()
    side = tree.root.add_new(
        element_tag=ElementTag.SIDE_PANEL, layout_direction=LayoutDirection.VERTICAL
    )
    add_menu_items(side)
    tree.root.add_new(element_tag=ElementTag.CONTENT_PANEL)
    set_dimensions(tree)
    return tree


def _texts(result_list):
    return [c.text for c in result_list.children if c.element_tag != SEPARATOR]


def test_add_separator():
    parent = Element()
    separator = add_separator(parent)
    assert parent.children == [separator]
    assert separator.element_tag == SEPARATOR
    assert separator.height == 1
    assert separator.background == GRAY_2
    assert separator.background_type == BackgroundType.COLOR


def test_fill_all_results_alternates_with_separators():
    result_list = Element()
    fill_search_results(result_list, "")
    assert _texts(result_list) == ["Border", "Background", "Text", "Table", "Layers"]
    tags = [child.element_tag for child in result_list.children]
    assert tags[-1] != SEPARATOR
    assert all(tag == SEPARATOR for tag in tags[1::2])
    assert all(tag != SEPARATOR for tag in tags[0::2])


def test_fill_without_match():
    result_list = Element()
    fill_search_results(result_list, "zzz")
    assert [c.text for c in result_list.children] == ["No results found"]


def test_create_overlay_structure():
    overlay = create_search_overlay_element()
    search_input = overlay.find_by_tag(ElementTag.SEARCH_PANEL_INPUT)
    assert search_input.input.text == ""
    assert search_input.on_key_press is on_search_bar_input
    result_list = overlay.find_by_tag(ElementTag.SEARCH_RESULT_LIST)
    assert _texts(result_list)[0] == "Border"
    assert overlay.children[0].on_click is close_search_overlay


def test_open_focuses_input(tree):
    open_search_overlay(tree)
    assert tree.overlay is not None
    assert tree.active_element.element_tag == ElementTag.SEARCH_PANEL_INPUT
    assert tree.active_element.border_color == BORDER_COLOR_ACTIVE
    assert tree.active_element.text_color == TEXT_COLOR_ACTIVE


def test_open_clears_previous_input(tree):
    open_search_overlay(tree)
    tree.active_element.input.text = "tab"
    open_search_overlay(tree)
    assert tree.active_element.input.text == ""
    result_list = tree.overlay.find_by_tag(ElementTag.SEARCH_RESULT_LIST)
    assert len(_texts(result_list)) == 5


def test_click_and_blur_styles(tree):
    tree.active_element = Element()
    click_search_bar(tree, None)
    assert tree.active_element.border_color == BORDER_COLOR_ACTIVE
    blur_search_bar(tree, None)
    assert tree.active_element.border_color == BORDER_COLOR
    assert tree.active_element.text_color == TEXT_COLOR


def test_input_filters_results(tree):
    open_search_overlay(tree)
    tree.active_element.input.text = "lay"
    on_search_bar_input(tree, "lay")
    result_list = tree.overlay.find_by_tag(ElementTag.SEARCH_RESULT_LIST)
    assert _texts(result_list) == ["Layers"]
    assert result_list.changed is True


def test_escape_closes(tree):
    open_search_overlay(tree)
    on_search_bar_input(tree, "ESCAPE")
    assert tree.overlay is None
    assert tree.active_element is None


def test_click_result_item_opens_page(tree):
    open_search_overlay(tree)
    result_list = tree.overlay.find_by_tag(ElementTag.SEARCH_RESULT_LIST)
    table_item = result_list.find_by_tag(ElementTag.TABLE_MENU_ITEM)
    tree.active_element = table_item
    click_result_item(tree, None)
    assert tree.overlay is None
    content = tree.root.find_by_tag(ElementTag.CONTENT_PANEL)
    assert content.children == [get_content(tree, ElementTag.TABLE_MENU_ITEM)]
    side = tree.root.find_by_tag(ElementTag.SIDE_PANEL)
    highlighted = [i.text for i in side.children if i.background_type == BackgroundType.COLOR]
    assert highlighted == ["Table"]