import pytest

from c9gui.font import FontVariant, MonospaceMeasurer
from c9gui.input import EditAction, EditActionType, EditHistory, InputData, Selection
from c9gui.input_actions import (
    Clipboard,
    add_edit_action,
    copy_text,
    cut_text,
    delete_text,
    deselect,
    handle_text_input,
    insert_text,
    measure_selection,
    move_cursor_left,
    move_cursor_right,
    paste_text,
    redo_action,
    select_all,
    select_end,
    select_left,
    select_right,
    select_start,
    select_word_at_index,
    set_selection_end_index,
    set_selection_start_index,
    undo_action,
)


def _typed(text):
    data = InputData()
    insert_text(data, text)
    return data


def test_insert_into_empty_input():
    data = _typed("abc")
    assert data.text == "abc"
    assert data.selection == Selection(len("abc"), len("abc"))
    assert data.history.actions[0].type == EditActionType.INSERT


def test_insert_then_undo_and_redo():
    data = _typed("abc")
    undo_action(data)
    assert data.text == ""
    assert data.selection == Selection(0, 0)
    redo_action(data)
    assert data.text == "abc"
    assert data.history.current_index == len(data.history.actions)


def test_backspace_removes_last_character_and_undo_restores():
    data = _typed("abc")
    delete_text(data)
    deleted = data.history.actions[-1].replaced_text
    assert len(deleted) == 1
    assert data.text + deleted == "abc"
    undo_action(data)
    assert data.text == "abc"
    assert data.selection.end_index == len("abc")


def test_delete_at_start_does_nothing():
    data = _typed("abc")
    data.selection = Selection(0, 0)
    delete_text(data)
    assert data.text == "abc"
    assert len(data.history.actions) == 1


def test_replace_selection_and_undo():
    data = _typed("hello world")
    select_all(data)
    insert_text(data, "bye")
    assert data.text == "bye"
    action = data.history.actions[-1]
    assert action.type == EditActionType.REPLACE
    assert action.replaced_text == "hello world"
    undo_action(data)
    assert data.text == "hello world"
    assert data.selection == Selection(len("hello world"), len("hello world"))
    redo_action(data)
    assert data.text == "bye"


def test_new_edit_after_undo_drops_redo_history():
    data = _typed("a")
    insert_text(data, "b")
    undo_action(data)
    insert_text(data, "c")
    assert len(data.history.actions) == 2
    before = data.text
    redo_action(data)
    assert data.text == before


def test_add_edit_action_truncates_and_counts():
    history = EditHistory()
    add_edit_action(history, EditAction(EditActionType.INSERT, 0, text="x"))
    add_edit_action(history, EditAction(EditActionType.INSERT, 1, text="y"))
    history.current_index = 1
    add_edit_action(history, EditAction(EditActionType.INSERT, 1, text="z"))
    assert [action.text for action in history.actions] == ["x", "z"]
    assert history.current_index == 2


def test_move_cursor_left_collapses_reversed_selection():
    data = _typed("abcdef")
    data.selection = Selection(4, 1)
    move_cursor_left(data)
    assert data.selection.start_index == data.selection.end_index == 0


def test_move_cursor_right_stops_at_end():
    data = _typed("abc")
    move_cursor_right(data)
    assert data.selection == Selection(len("abc"), len("abc"))


def test_select_left_and_right_move_only_end():
    data = _typed("abc")
    select_left(data)
    assert data.selection.start_index == len("abc")
    assert data.selection.end_index == len("abc") - 1
    select_right(data)
    select_right(data)
    assert data.selection.end_index == len("abc")


def test_select_start_end_all_and_deselect():
    data = _typed("abcd")
    select_start(data)
    assert data.selection.end() - data.selection.start() == len("abcd")
    select_end(data)
    assert data.selection.end_index == len("abcd")
    select_all(data)
    assert data.selection == Selection(0, len("abcd"))
    deselect(data)
    assert data.selection.start_index == data.selection.end_index


def test_copy_cut_and_paste_round_trip():
    clipboard = Clipboard()
    data = _typed("hello world")
    select_word_at_index(data, 8)
    assert data.text[data.selection.start() : data.selection.end()] == "world"
    copy_text(data, clipboard)
    assert clipboard.text == "world"
    cut_text(data, clipboard)
    assert data.text + clipboard.text == "hello world"
    paste_text(data, clipboard)
    assert data.text == "hello world"


def test_cut_without_selection_keeps_text():
    clipboard = Clipboard()
    data = _typed("abc")
    cut_text(data, clipboard)
    assert data.text == "abc"
    assert clipboard.text is None


def test_paste_with_empty_clipboard_keeps_text():
    data = _typed("abc")
    paste_text(data, Clipboard())
    assert data.text == "abc"
    assert len(data.history.actions) == 1


@pytest.mark.parametrize(
    "command, changed",
    [
        ("SELECT_LEFT", False),
        ("SELECT_RIGHT", False),
        ("SELECT_START", False),
        ("SELECT_END", False),
        ("SELECT_ALL", False),
        ("ESCAPE", False),
        ("MOVE_LEFT", False),
        ("MOVE_RIGHT", False),
        ("COPY", False),
        ("BACKSPACE", True),
        ("UNDO", True),
        ("REDO", True),
        ("CUT", True),
        ("PASTE", True),
        ("q", True),
    ],
)
def test_handle_text_input_reports_changes(command, changed):
    data = _typed("abc")
    assert handle_text_input(data, command, Clipboard()) is changed


def test_handle_text_input_inserts_plain_text():
    data = _typed("ab")
    handle_text_input(data, "cd", Clipboard())
    assert data.text == "abcd"


def test_handle_text_input_undo_command():
    data = _typed("ab")
    handle_text_input(data, "UNDO", Clipboard())
    assert data.text == ""


def test_set_selection_indexes_are_clamped():
    data = _typed("abc")
    set_selection_start_index(data, -5)
    set_selection_end_index(data, 100)
    assert data.selection == Selection(0, len("abc"))


def test_measure_selection_matches_text_widths():
    measurer = MonospaceMeasurer()
    data = _typed("abcdef")
    data.selection = Selection(4, 1)
    x, width = measure_selection(measurer, FontVariant.REGULAR, data)
    assert x == measurer.text_width(FontVariant.REGULAR, data.text[:1])
    assert x + width == measurer.text_width(FontVariant.REGULAR, data.text[:4])


def test_select_word_stops_at_newline():
    data = _typed("one\ntwo")
    select_word_at_index(data, 5)
    assert data.text[data.selection.start() : data.selection.end()] == "two"