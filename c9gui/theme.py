"""Colour theme and element tags of the demo interface."""

from __future__ import annotations

from enum import IntEnum

from .color import Gradient

WHITE = 0xFFFFFFFF
WHITE_2 = 0xF8F8F8FF
GRAY_1 = 0xF8F9FAFF
GRAY_2 = 0xF2F3F4FF
BORDER_COLOR = 0xDEE2E6FF
BORDER_COLOR_ACTIVE = 0xADAFB2FF
TEXT_COLOR = 0x555555FF
TEXT_COLOR_ACTIVE = 0x222222FF
TEXT_COLOR_MUTED = 0x9999AAFF
MENU_ACTIVE_COLOR = 0xDEE2E6FF
TEXT_CURSOR_COLOR = 0x88BBF1FF
SELECTION_COLOR = 0xC7E1FCFF
SCROLLBAR_COLOR = 0xDEE2E6FF

WHITE_SHADE = Gradient(WHITE, WHITE_2, 0.95, 1.0)
GRAY_1_SHADE = Gradient(GRAY_1, GRAY_2, 0.95, 1.0)
BUTTON_GRADIENT = Gradient(0x7281EDFF, 0x8998EFFF)


class ElementTag(IntEnum):
    """Tags used to find elements in the tree."""

    CONTENT_PANEL = 3
    SIDE_PANEL = 4
    SEARCH_PANEL_INPUT = 5
    SEARCH_RESULT_LIST = 6
    SEARCH_RESULT_SEPARATOR = 7
    BORDER_MENU_ITEM = 8
    BACKGROUND_MENU_ITEM = 9
    TEXT_MENU_ITEM = 10
    TABLE_MENU_ITEM = 11
    LAYERS_MENU_ITEM = 12