"""Element tree nodes, their style enums and the tree holding them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional, Union

from .color import Gradient
from .font import FontVariant, MonospaceMeasurer, TextMeasurer
from .input import InputData


class LayoutDirection(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1


class Overflow(IntEnum):
    CONTAIN = 0
    SCROLL = 1
    SCROLL_X = 2
    SCROLL_Y = 3


class BackgroundType(IntEnum):
    NONE = 0
    COLOR = 1
    HORIZONTAL_GRADIENT = 2
    VERTICAL_GRADIENT = 3
    IMAGE = 4


class TextAlign(IntEnum):
    START = 0
    CENTER = 1
    END = 2


class ScrollState(IntEnum):
    AVAILABLE = 0
    ACTIVE = 1
    BLOCKED = 2


@dataclass
class Padding:
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0


@dataclass
class Border:
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0


@dataclass
class LayoutProps:
    """Position and sizes computed by the layout engine."""

    x: int = 0
    y: int = 0
    max_width: int = 0
    max_height: int = 0
    scroll_width: int = 0
    scroll_height: int = 0
    scroll_x: int = 0
    scroll_y: int = 0


@dataclass
class ScrollProps:
    """Touch-scroll tracking state."""

    last_x: float = 0.0
    last_y: float = 0.0
    state: ScrollState = ScrollState.AVAILABLE


@dataclass
class TreeSize:
    width: int = 640
    height: int = 640
    min_width: int = 0
    min_height: int = 0


EventHandler = Callable[["ElementTree", Any], None]


@dataclass(eq=False)
class Element:
    """A node of the element tree; compared by identity."""

    layout: LayoutProps = field(default_factory=LayoutProps)
    background: Union[int, Gradient, str] = 0xFFFFFFFF
    text: Optional[str] = None
    padding: Padding = field(default_factory=Padding)
    border: Border = field(default_factory=Border)
    input: Optional[InputData] = None
    children: list[Element] = field(default_factory=list)
    on_click: Optional[EventHandler] = None
    on_blur: Optional[EventHandler] = None
    on_key_press: Optional[EventHandler] = None
    border_color: int = 0x000000FF
    text_color: int = 0x000000FF
    width: int = 0
    height: int = 0
    gutter: int = 0
    corner_radius: int = 0
    layout_direction: LayoutDirection = LayoutDirection.HORIZONTAL
    overflow: Overflow = Overflow.CONTAIN
    element_tag: int = 0
    background_type: BackgroundType = BackgroundType.NONE
    text_align: TextAlign = TextAlign.START
    font_variant: FontVariant = FontVariant.REGULAR
    changed: bool = True

    def add_new(self, **kwargs: Any) -> Element:
        """Create a child from the given attributes, append it and return it."""
        child = Element(**kwargs)
        self.children.append(child)
        return child

    def add(self, child: Element) -> None:
        """Append an existing element as the last child."""
        self.children.append(child)

    def find_by_tag(self, tag: int) -> Optional[Element]:
        """First element, depth first from this one, carrying ``tag``."""
        if self.element_tag == tag:
            return self
        for child in self.children:
            found = child.find_by_tag(tag)
            if found is not None:
                return found
        return None

    def find_parent(self, element: Element) -> Optional[Element]:
        """Direct parent of ``element`` within this subtree."""
        for child in self.children:
            if child is element:
                return self
            found = child.find_parent(element)
            if found is not None:
                return found
        return None


def _new_root() -> Element:
    return Element(layout_direction=LayoutDirection.VERTICAL, changed=True)


@dataclass(eq=False)
class ElementTree:
    """The content layer, an optional overlay layer and interaction state."""

    root: Element = field(default_factory=_new_root)
    overlay: Optional[Element] = None
    active_element: Optional[Element] = None
    scroll: ScrollProps = field(default_factory=ScrollProps)
    size: TreeSize = field(default_factory=TreeSize)
    rerender: bool = True
    measurer: TextMeasurer = field(default_factory=MonospaceMeasurer)

    def current_root(self) -> Element:
        """The overlay when one is open, otherwise the content root."""
        return self.overlay if self.overlay is not None else self.root