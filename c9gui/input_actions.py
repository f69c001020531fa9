"""Editing actions on text inputs: cursor movement, selection, edits, undo and clipboard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .font import TextMeasurer
from .input import EditAction, EditActionType, EditHistory, InputData

_WORD_BREAKS = (" ", "\n")


@dataclass
class Clipboard:
    """Holds copied text; ``None`` means the clipboard is empty."""

    text: Optional[str] = None


_DEFAULT_CLIPBOARD = Clipboard()


def _place_cursor(input_data: InputData, index: int) -> None:
    input_data.selection.start_index = index
    input_data.selection.end_index = index


def _insert(input_data: InputData, text: str, index: int) -> None:
    current = input_data.text
    input_data.text = current[:index] + text + current[index:]


def _delete(input_data: InputData, index: int, length: int) -> None:
    current = input_data.text
    input_data.text = current[:index] + current[index + length :]


def add_edit_action(history: EditHistory, action: EditAction) -> None:
    """Record ``action``, dropping any actions that were undone before it."""
    del history.actions[history.current_index :]
    history.actions.append(action)
    history.current_index += 1


def move_cursor_left(input_data: InputData) -> None:
    """Collapse the selection one character left of its start."""
    start = input_data.selection.start()
    if start > 0:
        start -= 1
    _place_cursor(input_data, start)


def move_cursor_right(input_data: InputData) -> None:
    """Collapse the selection one character right of its end."""
    end = input_data.selection.end()
    if end < len(input_data.text):
        end += 1
    _place_cursor(input_data, end)


def select_left(input_data: InputData) -> None:
    """Move the selection cursor one character left."""
    if input_data.selection.end_index > 0:
        input_data.selection.end_index -= 1


def select_right(input_data: InputData) -> None:
    """Move the selection cursor one character right."""
    if input_data.selection.end_index < len(input_data.text):
        input_data.selection.end_index += 1


def select_start(input_data: InputData) -> None:
    """Extend the selection to the start of the text."""
    input_data.selection.end_index = 0


def select_end(input_data: InputData) -> None:
    """Extend the selection to the end of the text."""
    input_data.selection.end_index = len(input_data.text)


def select_all(input_data: InputData) -> None:
    """Select the whole text."""
    input_data.selection.start_index = 0
    input_data.selection.end_index = len(input_data.text)


def deselect(input_data: InputData) -> None:
    """Collapse the selection onto its cursor."""
    input_data.selection.start_index = input_data.selection.end_index


def replace_text(input_data: InputData, text: str) -> None:
    """Replace the selected text with ``text``."""
    start = input_data.selection.start()
    end = input_data.selection.end()
    replaced = input_data.text[start:end]
    _delete(input_data, start, end - start)
    _insert(input_data, text, start)
    add_edit_action(
        input_data.history,
        EditAction(EditActionType.REPLACE, start, text=text, replaced_text=replaced),
    )
    _place_cursor(input_data, start + len(text))


def insert_text(input_data: InputData, text: str) -> None:
    """Insert ``text`` at the cursor, replacing any selection."""
    start = input_data.selection.start()
    if start != input_data.selection.end():
        replace_text(input_data, text)
        return
    _insert(input_data, text, start)
    add_edit_action(input_data.history, EditAction(EditActionType.INSERT, start, text=text))
    _place_cursor(input_data, start + len(text))


def delete_text(input_data: InputData) -> None:
    """Delete the selection, or the character before the cursor."""
    start = input_data.selection.start()
    end = input_data.selection.end()
    if end == 0:
        return
    if start == end and start > 0:
        start -= 1
    deleted = input_data.text[start:end]
    _delete(input_data, start, end - start)
    add_edit_action(
        input_data.history,
        EditAction(EditActionType.DELETE, start, replaced_text=deleted),
    )
    _place_cursor(input_data, start)


def undo_action(input_data: InputData) -> None:
    """Revert the most recently applied edit."""
    history = input_data.history
    if history.current_index == 0:
        return
    action = history.actions[history.current_index - 1]
    if action.type == EditActionType.INSERT:
        _delete(input_data, action.index, len(action.text))
        _place_cursor(input_data, action.index)
    elif action.type == EditActionType.DELETE:
        _insert(input_data, action.replaced_text, action.index)
        _place_cursor(input_data, action.index + len(action.replaced_text))
    elif action.type == EditActionType.REPLACE:
        _delete(input_data, action.index, len(action.text))
        _insert(input_data, action.replaced_text, action.index)
        _place_cursor(input_data, action.index + len(action.replaced_text))
    history.current_index -= 1


def redo_action(input_data: InputData) -> None:
    """Apply again the most recently undone edit."""
    history = input_data.history
    if history.current_index >= len(history.actions):
        return
    action = history.actions[history.current_index]
    if action.type == EditActionType.INSERT:
        _insert(input_data, action.text, action.index)
        _place_cursor(input_data, action.index + len(action.text))
    elif action.type == EditActionType.DELETE:
        _delete(input_data, action.index, len(action.replaced_text))
        _place_cursor(input_data, action.index)
    elif action.type == EditActionType.REPLACE:
        _delete(input_data, action.index, len(action.replaced_text))
        _insert(input_data, action.text, action.index)
        _place_cursor(input_data, action.index + len(action.text))
    history.current_index += 1


def copy_text(input_data: InputData, clipboard: Clipboard) -> None:
    """Put the selected text on the clipboard."""
    selection = input_data.selection
    clipboard.text = input_data.text[selection.start() : selection.end()]


def cut_text(input_data: InputData, clipboard: Clipboard) -> None:
    """Move the selected text to the clipboard."""
    if input_data.selection.start_index != input_data.selection.end_index:
        copy_text(input_data, clipboard)
        delete_text(input_data)


def paste_text(input_data: InputData, clipboard: Clipboard) -> None:
    """Insert the clipboard text at the cursor."""
    if clipboard.text is not None:
        insert_text(input_data, clipboard.text)


_NAVIGATION = {
    "SELECT_LEFT": select_left,
    "SELECT_RIGHT": select_right,
    "SELECT_START": select_start,
    "SELECT_END": select_end,
    "SELECT_ALL": select_all,
    "ESCAPE": deselect,
    "MOVE_LEFT": move_cursor_left,
    "MOVE_RIGHT": move_cursor_right,
}

_EDITING = {
    "BACKSPACE": delete_text,
    "UNDO": undo_action,
    "REDO": redo_action,
}

_CLIPBOARD_ACTIONS = {
    "COPY": (copy_text, False),
    "CUT": (cut_text, True),
    "PASTE": (paste_text, True),
}


def handle_text_input(
    input_data: InputData, text: str, clipboard: Optional[Clipboard] = None
) -> bool:
    """Apply a command name or typed text; return whether the text may have changed."""
    if clipboard is None:
        clipboard = _DEFAULT_CLIPBOARD
    if text in _NAVIGATION:
        _NAVIGATION[text](input_data)
        return False
    if text in _EDITING:
        _EDITING[text](input_data)
        return True
    if text in _CLIPBOARD_ACTIONS:
        action, changes = _CLIPBOARD_ACTIONS[text]
        action(input_data, clipboard)
        return changes
    insert_text(input_data, text)
    return True


def measure_selection(
    measurer: TextMeasurer, variant: int, input_data: InputData
) -> tuple[int, int]:
    """Pixel offset and width of the selection within the text."""
    start = input_data.selection.start()
    end = input_data.selection.end()
    start_x = measurer.text_width(variant, input_data.text[:start])
    end_x = measurer.text_width(variant, input_data.text[:end])
    return start_x, end_x - start_x


def _clamp_index(input_data: InputData, index: int) -> int:
    return min(max(index, 0), len(input_data.text))


def set_selection_start_index(input_data: InputData, index: int) -> None:
    """Set the selection anchor, clamped to the text."""
    input_data.selection.start_index = _clamp_index(input_data, index)


def set_selection_end_index(input_data: InputData, index: int) -> None:
    """Set the selection cursor, clamped to the text."""
    input_data.selection.end_index = _clamp_index(input_data, index)


def select_word_at_index(input_data: InputData, index: int) -> None:
    """Select the word, delimited by spaces and line feeds, around ``index``."""
    _place_cursor(input_data, _clamp_index(input_data, index))
    text = input_data.text
    selection = input_data.selection
    while selection.start_index > 0 and text[selection.start_index - 1] not in _WORD_BREAKS:
        move_cursor_left(input_data)
    while selection.end_index < len(text) and text[selection.end_index] not in _WORD_BREAKS:
        select_right(input_data)