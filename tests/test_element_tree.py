import pytest

from c9gui.element_tree import (
    Element,
    ElementTree,
    LayoutDirection,
    Overflow,
    Padding,
)


def test_element_defaults_match_empty_element():
    element = Element()
    assert element.background == 0xFFFFFFFF
    assert element.text_color == 0x000000FF
    assert element.border_color == 0x000000FF
    assert element.changed is True
    assert element.children == []
    assert element.text is None


def test_padding_field_order():
    padding = Padding(1, 2, 3, 4)
    assert (padding.top, padding.right, padding.bottom, padding.left) == (1, 2, 3, 4)


def test_add_new_appends_configured_child():
    parent = Element()
    child = parent.add_new(text="hi", overflow=Overflow.SCROLL_X)
    assert parent.children[-1] is child
    assert child.text == "hi"
    assert child.overflow is Overflow.SCROLL_X


def test_add_new_rejects_unknown_attribute():
    with pytest.raises(TypeError):
        Element().add_new(no_such_attribute=1)


def test_add_keeps_identity():
    parent = Element()
    child = Element(element_tag=7)
    parent.add(child)
    assert parent.children[0] is child


def test_find_by_tag_depth_first():
    root = Element()
    first = root.add_new()
    nested = first.add_new(element_tag=5)
    root.add_new(element_tag=5)
    assert root.find_by_tag(5) is nested


def test_find_by_tag_returns_self_and_none():
    root = Element(element_tag=3)
    root.add_new()
    assert root.find_by_tag(3) is root
    assert root.find_by_tag(9) is None


def test_find_parent():
    root = Element()
    middle = root.add_new()
    leaf = middle.add_new()
    assert root.find_parent(leaf) is middle
    assert root.find_parent(middle) is root
    assert root.find_parent(root) is None
    assert root.find_parent(Element()) is None


def test_find_parent_uses_identity():
    root = Element()
    root.add_new()
    lookalike = Element()
    assert root.find_parent(lookalike) is None


def test_tree_defaults():
    tree = ElementTree()
    assert (tree.size.width, tree.size.height) == (640, 640)
    assert tree.root.layout_direction is LayoutDirection.VERTICAL
    assert tree.overlay is None
    assert tree.active_element is None
    assert tree.rerender is True


def test_current_root_prefers_overlay():
    tree = ElementTree()
    assert tree.current_root() is tree.root
    overlay = Element()
    tree.overlay = overlay
    assert tree.current_root() is overlay