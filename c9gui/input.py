"""Text input state: content, selection, edit history and line breaks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


@dataclass
class Line:
    """Character range ``[start_index, end_index)`` of one laid-out line."""

    start_index: int
    end_index: int


class EditActionType(IntEnum):
    """Kind of change recorded in the edit history."""

    INSERT = 1
    DELETE = 2
    REPLACE = 3


@dataclass
class EditAction:
    """One undoable change to the input text."""

    type: EditActionType
    index: int
    text: str = ""
    replaced_text: str = ""


@dataclass
class EditHistory:
    """Recorded edit actions; ``current_index`` counts the actions applied."""

    actions: list[EditAction] = field(default_factory=list)
    current_index: int = 0


@dataclass
class Selection:
    """Selection between an anchor (start) and a cursor (end) index."""

    start_index: int = 0
    end_index: int = 0

    def start(self) -> int:
        """The lower of the two indexes."""
        return min(self.start_index, self.end_index)

    def end(self) -> int:
        """The higher of the two indexes."""
        return max(self.start_index, self.end_index)


@dataclass
class InputData:
    """State of an editable text field."""

    text: str = ""
    selection: Selection = field(default_factory=Selection)
    history: EditHistory = field(default_factory=EditHistory)
    lines: list[Line] = field(default_factory=list)

    def clear(self) -> None:
        """Empty the text, selection, history and line breaks."""
        self.text = ""
        self.selection = Selection()
        self.history.current_index = 0
        self.history.actions.clear()
        self.lines.clear()