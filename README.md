# lunarsprites

Building blocks for a small 2D engine, in plain Python with no third-party
dependencies.

## Modules

- `lunarsprites.keys`: the `Keycode` and `MouseButton` enums, and functions
  that turn native codes into them:
  - `x11_map_key(code)` and `x11_map_mbutton(button)` for X11 hardware
    keycodes and button numbers;
  - `windows_map_key(code, right_shift_down=False, right_control_down=False)`
    and `windows_map_mbutton(button)` for Windows virtual-key codes. The
    generic shift and control codes resolve to the right-hand key only when
    the matching flag says it is held;
  - `web_map_key(code)` and `web_map_mbutton(button)` for browser
    `KeyboardEvent.code` strings and `MouseEvent.button` numbers.

  Codes that are not in a table map to `Keycode.UNKNOWN` or
  `MouseButton.NONE`.
- `lunarsprites.theme`: `Vec2` (an immutable integer vector supporting `+`
  and `-`), `Color` (RGBA floats, alpha 1.0 by default) and
  `UIElementTheme` (background, border and font colours, radius, border
  size, font size, font and texture), whose `copy()` returns an independent
  copy sharing the same font and texture.
- `lunarsprites.ui`: `UIRenderer` collects rectangles, arbitrary shapes and
  text glyphs into a `Batch` of vertex rows, indices and textures. Each
  vertex row holds 12 floats: position (2), texture coordinates (2), texture
  slot (1), colour (4), radius (1) and element size (2). A batch holds at
  most 1024 vertices, 1024 indices and 16 textures; when a shape would not
  fit, the current batch is handed to the `submit` callback first.
  `flush()` submits a non-empty batch, stamped with the viewport size as its
  `resolution`. Root elements registered with `add_element` are drawn by
  `update(delta_time)`, which then flushes.
- `lunarsprites.window`: `WindowManager` creates `CanvasWindow` objects for
  a host that implements the `Canvas` operations (create, size, position,
  focus, show/hide and fullscreen a canvas). At most one root window can be
  made (its canvas id is `#root_window`; a second one raises
  `RuntimeError`); other windows get `#window_0`, `#window_1`, and so on.
  Input given to a window's `on_key_down`, `on_key_up`, `on_mouse_down`,
  `on_mouse_up`, `on_mouse_move`, `on_mouse_enter` and `on_mouse_leave`
  is queued as `WindowEvent`s and passed, in order, to the input manager by
  `poll()`.

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

Mapping keys:

```python
from lunarsprites.keys import Keycode, MouseButton, web_map_key, web_map_mbutton

assert web_map_key("KeyA") is Keycode.A
assert web_map_key("NoSuchKey") is Keycode.UNKNOWN
assert web_map_mbutton(0) is MouseButton.LEFT
```

Batching a rectangle:

```python
from lunarsprites.theme import Color, Vec2
from lunarsprites.ui import UIRenderer

batches = []
renderer = UIRenderer(Vec2(800, 600), batches.append)
renderer.draw_rect(None, Color(1.0, 0.0, 0.0, 1.0), 4, Vec2(0, 0), Vec2(100, 50))
renderer.flush()

batch = batches[0]
assert batch.vertex_count == 4
assert batch.indices == [0, 1, 2, 2, 3, 0]
assert batch.rows[0][4] == -1.0  # no texture
```

`viewport_size` may also be a callable returning the current `Vec2`, so
the renderer follows a window that changes size.

## What it does not do

The package does not talk to a GPU, a display server or a browser itself:
finished batches go to your `submit` callback, and canvas operations go to
the `Canvas` object you supply. It ships no fonts; text drawing needs a font
object with `text_size` and `draw_text` methods. It provides no ready-made
UI element types: anything with a `draw(renderer, outer_bounds,
inner_bounds)` method can be registered as a root element. There are no file
or path helpers, no engine main loop and no command-line program.