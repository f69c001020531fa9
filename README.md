# c9gui

The core of a small retained-mode GUI, independent of any renderer. It provides:

- **Element tree** (`c9gui.element_tree`). `Element` nodes carry padding,
  border, corner radius, a background, text, an optional text input
  (`InputData`) and the callbacks `on_click`, `on_blur` and `on_key_press`.
  A background is a solid color, a horizontal or vertical `Gradient`, or an
  image path. `Element.add_new(**kwargs)` creates a child and returns it.
  `Element.add`, `Element.find_by_tag` and `Element.find_parent` are also
  available. An `ElementTree` holds a `root`, an optional `overlay`, the
  `active_element`, the window `size` and a `measurer`.
  `ElementTree.current_root()` returns the overlay while one is open.
- **Flex layout** (`c9gui.layout`). `set_dimensions(tree)` lays out both
  layers. It computes maximum sizes, scroll extents and positions, and
  clamps out-of-range scroll offsets. `populate_inputs(tree)` gives every
  input element one child per wrapped line. `rerender_inputs(tree)` marks
  all inputs as changed. Hit testing uses `is_pointer_in_element` and
  `get_clickable_element_at`. `scroll_x` and `scroll_y` scroll the elements
  under a point, innermost first, and return the part of the delta that
  nothing took.
- **Text layout** (`c9gui.font_layout`):
  - `split_string_at_width` wraps text, breaking at spaces and line feeds.
  - `get_text_block_height` measures a wrapped block.
  - `index_from_position` and `position_from_index` map between pointer
    positions and character indexes of an input.

  Text is measured through a `TextMeasurer` (`c9gui.font`). It is built
  from a `char_width(variant, char)` function. `MonospaceMeasurer` is a
  ready-made one with a fixed advance per `FontVariant`.
- **Text editing** (`c9gui.input_actions`). It covers:
  - cursor movement and selection
  - insert, delete and replace
  - undo and redo through `EditHistory`
  - copy, cut and paste through a `Clipboard` object
  - word selection

  `handle_text_input(input_data, text, clipboard)` takes either a command
  name or typed text. The command names are `BACKSPACE`, `SELECT_LEFT`,
  `SELECT_RIGHT`, `SELECT_START`, `SELECT_END`, `SELECT_ALL`, `ESCAPE`,
  `MOVE_LEFT`, `MOVE_RIGHT`, `UNDO`, `REDO`, `COPY`, `CUT` and `PASTE`.
  Any other string is inserted as typed text. The function returns whether
  the text may have changed.
- **Colors** (`c9gui.color`, `c9gui.blue_noise`). These modules pack and
  unpack `0xRRGGBBAA` colors and blend them (`blend_colors`, `blend_alpha`).
  They also sample gradients dithered with a tiled 32×32 blue-noise texture
  (`get_dither_spread`, `get_dithered_gradient_color`,
  `get_blue_noise_value`).
- **Random numbers** (`c9gui.random_numbers`). `SeededRandom` is a small,
  deterministic generator of floats in [0, 1).
- **Theme** (`c9gui.theme`). It holds the color constants, the gradients
  `WHITE_SHADE`, `GRAY_1_SHADE` and `BUTTON_GRADIENT`, and the `ElementTag`
  enum.
- **Demo components** (`c9gui.components`). They build the pages of a demo
  application:
  - `border`, `background`, `text`, `table` and `layers` pages
  - a modal `overlay`
  - a side `menu` that switches the content panel
  - a `search_bar` that opens a `search_overlay`, which filters the pages by
    name

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Layout:

```python
from c9gui.element_tree import ElementTree, LayoutDirection, Padding
from c9gui.layout import set_dimensions

tree = ElementTree()
panel = tree.root.add_new(
    layout_direction=LayoutDirection.VERTICAL,
    padding=Padding(10, 10, 10, 10),
    gutter=10,
)
panel.add_new(text="Hello")
panel.add_new(text="World")

set_dimensions(tree)
for child in panel.children:
    print(child.text, child.layout.x, child.layout.y)
```

Colors:

```python
from c9gui.color import Gradient, blend_colors, get_dithered_gradient_color, red

print(red(0x7281EDFF))                        # 114
print(hex(blend_colors(0x00000080, 0xFFFFFFFF)))

gradient = Gradient(start_color=0xFFFFFFFF, end_color=0xF8F8F8FF)
print(hex(get_dithered_gradient_color(gradient, 0.5, 0.0)))
```

Text editing:

```python
from c9gui.input import InputData
from c9gui.input_actions import Clipboard, handle_text_input

field = InputData()
clipboard = Clipboard()
handle_text_input(field, "hello", clipboard)
handle_text_input(field, "SELECT_ALL", clipboard)
handle_text_input(field, "CUT", clipboard)
handle_text_input(field, "UNDO", clipboard)
print(field.text)                             # hello
print(clipboard.text)                         # hello
```

Menu and pages:

```python
from c9gui.components.menu import add_menu_items, click_menu_item
from c9gui.element_tree import ElementTree, LayoutDirection
from c9gui.theme import ElementTag

tree = ElementTree()
side_panel = tree.root.add_new(
    element_tag=ElementTag.SIDE_PANEL, layout_direction=LayoutDirection.VERTICAL
)
content_panel = tree.root.add_new(element_tag=ElementTag.CONTENT_PANEL)
add_menu_items(side_panel)

tree.active_element = side_panel.children[3]  # "Table"
click_menu_item(tree)
print(len(content_panel.children[0].children))  # 3 table columns
```

## What this package does not do

The package computes the state, layout and editing of an interface and
nothing more. It does not:

- draw pixels or render shapes, gradients, images or glyphs;
- open a window or run an event loop;
- read the keyboard, mouse or touch devices;
- load font files, since text widths come only from the `TextMeasurer` you
  supply;
- touch the system clipboard, since `Clipboard` is a plain in-memory object.

The host application must:

1. translate its input events into calls such as `handle_text_input`,
   `get_clickable_element_at` and the elements' callbacks;
2. draw the tree from the computed `layout` of each element.