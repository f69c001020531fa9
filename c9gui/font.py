"""Font variants, line heights and text measurement."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import IntEnum


class FontVariant(IntEnum):
    """The four font variants of the interface."""

    REGULAR = 0
    BOLD = 1
    SMALL = 2
    LARGE = 3


_FONT_HEIGHTS = {
    FontVariant.REGULAR: 19,
    FontVariant.BOLD: 19,
    FontVariant.SMALL: 16,
    FontVariant.LARGE: 23,
}


def get_font_height(variant: int) -> int:
    """Pixel height of one line of text in ``variant``; unknown variants use regular."""
    return _FONT_HEIGHTS.get(variant, _FONT_HEIGHTS[FontVariant.REGULAR])


class TextMeasurer:
    """Measures text from a per-character width function ``char_width(variant, char)``."""

    def __init__(self, char_width: Callable[[int, str], int]) -> None:
        self._char_width = char_width

    def text_width(self, variant: int, text: str) -> int:
        """Total pixel width of ``text``."""
        return sum(self._char_width(variant, char) for char in text)

    def measure(self, variant: int, text: str, max_width: int) -> tuple[int, int]:
        """Width and count of the leading characters that fit within ``max_width``."""
        width = 0
        count = 0
        for char in text:
            char_width = self._char_width(variant, char)
            if width + char_width > max_width:
                break
            width += char_width
            count += 1
        return width, count


_DEFAULT_ADVANCES = {
    FontVariant.REGULAR: 8,
    FontVariant.BOLD: 8,
    FontVariant.SMALL: 7,
    FontVariant.LARGE: 10,
}


class MonospaceMeasurer(TextMeasurer):
    """Measurer in which every character of a variant has the same advance."""

    def __init__(self, advances: Mapping[int, int] | None = None) -> None:
        self._advances = dict(_DEFAULT_ADVANCES if advances is None else advances)
        super().__init__(lambda variant, _char: self._advance(variant))

    def _advance(self, variant: int) -> int:
        return self._advances.get(variant, self._advances.get(FontVariant.REGULAR, 8))

    def text_width(self, variant: int, text: str) -> int:
        """Total pixel width of ``text``."""
        return self._advance(variant) * len(text)

    def measure(self, variant: int, text: str, max_width: int) -> tuple[int, int]:
        """Width and count of the leading characters that fit within ``max_width``."""
        advance = self._advance(variant)
        if advance <= 0:
            return 0, len(text)
        count = min(len(text), max(max_width, 0) // advance)
        return count * advance, count