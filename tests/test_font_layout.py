import pytest

from c9gui.element_tree import Element, LayoutProps, Overflow, Padding
from c9gui.font import FontVariant, MonospaceMeasurer, get_font_height
from c9gui.font_layout import (
    contains_newline,
    get_child_order_at,
    get_text_block_height,
    get_text_line_height,
    index_from_position,
    index_from_x,
    position_from_index,
    split_string_at_width,
)
from c9gui.input import InputData, Line

ADVANCE = 10
MEASURER = MonospaceMeasurer({FontVariant.REGULAR: ADVANCE})
REGULAR = FontVariant.REGULAR


def _input_element(text, max_width=1000):
    lines = split_string_at_width(MEASURER, REGULAR, text, max_width)
    element = Element(input=InputData(text=text, lines=lines))
    line_height = get_text_line_height(REGULAR)
    for number, _ in enumerate(lines):
        element.add_new(
            layout=LayoutProps(
                x=0, y=number * line_height, max_height=get_font_height(REGULAR)
            )
        )
    return element


def test_contains_newline():
    assert contains_newline("a\nb")
    assert not contains_newline("ab")


def test_split_without_limit_is_one_line():
    text = "hello world\nagain"
    assert split_string_at_width(MEASURER, REGULAR, text, 0) == [Line(0, len(text))]


def test_split_empty_text():
    assert split_string_at_width(MEASURER, REGULAR, "", 50) == [Line(0, 0)]


@pytest.mark.parametrize("max_width", [30, 60, 75, 200])
def test_split_wraps_and_covers_text(max_width):
    text = "hello world foo bar baz"
    lines = split_string_at_width(MEASURER, REGULAR, text, max_width)
    assert "".join(text[l.start_index : l.end_index] for l in lines) == text
    for first, second in zip(lines, lines[1:]):
        assert first.end_index == second.start_index
    for line in lines:
        width = MEASURER.text_width(REGULAR, text[line.start_index : line.end_index])
        assert width <= max_width


def test_split_breaks_after_space():
    text = "hello world foo"
    lines = split_string_at_width(MEASURER, REGULAR, text, 60)
    assert [text[l.start_index : l.end_index] for l in lines] == ["hello ", "world ", "foo"]


def test_split_on_newlines():
    text = "ab\ncd"
    lines = split_string_at_width(MEASURER, REGULAR, text, 1000)
    assert [text[l.start_index : l.end_index] for l in lines] == ["ab", "cd"]


def test_split_trailing_newline_adds_empty_line():
    text = "ab\n"
    lines = split_string_at_width(MEASURER, REGULAR, text, 1000)
    assert lines[-1] == Line(len(text), len(text))


def test_split_narrower_than_a_character_terminates():
    text = "abc"
    lines = split_string_at_width(MEASURER, REGULAR, text, 1)
    assert len(lines) == len(text)


def test_line_height_adds_spacing():
    assert get_text_line_height(REGULAR) == get_font_height(REGULAR) + 2


def test_block_height_single_line():
    assert get_text_block_height(MEASURER, REGULAR, "anything", 0) == get_font_height(REGULAR)
    assert get_text_block_height(MEASURER, REGULAR, "", 40) == get_font_height(REGULAR)


def test_block_height_grows_by_line_height_per_row():
    text = "hello world foo"
    rows = len(split_string_at_width(MEASURER, REGULAR, text, 60))
    single = get_text_block_height(MEASURER, REGULAR, "x", 60)
    multi = get_text_block_height(MEASURER, REGULAR, text, 60)
    assert multi - single == (rows - 1) * get_text_line_height(REGULAR)


def test_index_from_x_basic():
    text = "abcdef"
    assert index_from_x(MEASURER, REGULAR, text, 0) == 0
    assert index_from_x(MEASURER, REGULAR, "", 50) == 0
    for count in range(len(text) + 1):
        assert index_from_x(MEASURER, REGULAR, text, count * ADVANCE) == count


def test_index_from_x_rounds_to_nearest():
    text = "abcdef"
    assert index_from_x(MEASURER, REGULAR, text, 16) == index_from_x(MEASURER, REGULAR, text, 20)
    assert index_from_x(MEASURER, REGULAR, text, 14) == index_from_x(MEASURER, REGULAR, text, 10)


def test_index_from_x_steps_back_over_trailing_space():
    text = "ab "
    assert index_from_x(MEASURER, REGULAR, text, 1000) == len(text) - 1


def test_child_order_at():
    parent = Element()
    for top in (0, 12, 24):
        parent.add_new(layout=LayoutProps(y=top, max_height=10))
    assert get_child_order_at(parent, 5) == 0
    assert get_child_order_at(parent, 15) == 1
    assert get_child_order_at(parent, 1000) == len(parent.children) - 1
    assert get_child_order_at(Element(), 5) == -1


def test_index_from_position_above_element_is_zero():
    element = _input_element("hello")
    assert index_from_position(MEASURER, (30, 0), element) == 0


def test_index_from_position_past_known_lines_is_text_end():
    element = _input_element("hello")
    element.add_new(layout=LayoutProps(y=100, max_height=19))
    assert index_from_position(MEASURER, (5, 110), element) == len("hello")


def test_index_from_position_requires_input():
    with pytest.raises(ValueError):
        index_from_position(MEASURER, (5, 5), Element())


@pytest.mark.parametrize("text", ["hello world", "ab\ncd"])
def test_position_round_trip(text):
    element = _input_element(text)
    for index in range(len(text) + 1):
        position = position_from_index(MEASURER, index, element)
        assert index_from_position(MEASURER, position, element) == index


def test_position_single_line_input_is_at_text_end():
    element = Element(
        input=InputData(text="abc"),
        overflow=Overflow.SCROLL_X,
        layout=LayoutProps(x=5, y=7),
        padding=Padding(2, 0, 0, 3),
    )
    assert position_from_index(MEASURER, 0, element) == (5 + 3 + 3 * ADVANCE, 7 + 2)


def test_position_without_children_is_origin():
    element = Element(input=InputData(text="abc", lines=[Line(0, 3)]))
    assert position_from_index(MEASURER, 1, element) == (0, 0)