# rxserver

Building blocks for an X11-compatible display server. You can use them on
their own from Python:

- **Configuration**: `rxserver.core.config.ServerConfig` has network,
  logging, plugin, security and performance sections. It is read from and
  written to TOML.
- **Errors**: `rxserver.core.errors` provides the `ServerError` hierarchy:
  `ConfigError`, `NetworkError`, `PluginError`, `ProtocolError`,
  `LoggingError`, `ServerIOError`, `AuthError` and `InitError`.
  `rxserver.plugins.errors` provides the plugin failures: `PluginInitError`,
  `PluginExecutionError`, `PluginCommunicationError` and
  `PluginResourceError`.
- **Logging**: `rxserver.core.log_setup.init_logging(config)` sets up the
  root logger from a `LoggingConfig`, or from defaults when given `None`.
  It logs to standard output and, optionally, appends to a log file.
- **Command line options**: `rxserver.core.args.parse_args(argv)` returns a
  `CommandlineArgs` with these defaults:
  - `--display` / `-d`: `:0`
  - `--config` / `-c`: `rxserver.toml`
  - `--mode`: `headless`
  - `--width`: 1920
  - `--height`: 1080
- **Graphics**: `rxserver.graphics` provides:
  - `Color`, `Point`, `Rectangle` and the X11 drawing enums.
  - Graphics contexts, managed by `GraphicsContextManager`.
  - A software `Renderer` with pixels, Bresenham lines, rectangles and area copies. Drawing is clipped to the context's clip rectangle.
- **Input**: `KeyboardManager` and `MouseManager` track key, modifier, button
  and pointer state. They produce `KeyEvent` and `MouseEvent` values.
- **Resources**:
  - `AtomRegistry`: interned strings, with the predefined X11 atoms registered up front.
  - `FontManager`.
  - `CursorManager`, with the default cursors loaded.
  - `PluginRegistry`, which holds `Plugin` objects.

Requires Python 3.11 or later.

## Configuration

```python
from rxserver.core.config import ServerConfig
from rxserver.core.log_setup import init_logging

config = ServerConfig.load("rxserver.toml")
init_logging(config.logging)

config.performance.max_connections = 50
config.save("rxserver.toml")
```

Loading a file that does not exist returns the defaults and tries to write
them to that path. A file that cannot be read or parsed raises
`ConfigError`, and so does a value of the wrong type or out of range.

Every section and field has a default, so a TOML file only needs to name
what it changes:

```toml
[network]
listen_address = "0.0.0.0"
port_base = 6000

[logging]
level = "debug"
```

The logging `level` can be a single level name (`trace`, `debug`, `info`,
`warn`, `error`, `off`). It can also be a comma-separated list of
`target=level` directives. An unparseable level falls back to `info`.

## Drawing

```python
from rxserver.graphics.context import GCUpdates, GraphicsContextManager
from rxserver.graphics.renderer import Renderer
from rxserver.graphics.types import Color, Rectangle

renderer = Renderer(320, 200, 24)     # starts with the "rx" tile pattern
contexts = GraphicsContextManager()

gc_id = contexts.create_gc()
contexts.update_gc(gc_id, GCUpdates(foreground=Color.RED))
gc = contexts.get_gc(gc_id)

renderer.clear(Color.BLACK)
renderer.fill_rectangle(Rectangle(10, 10, 50, 30), gc)
renderer.draw_line(0, 0, 319, 199, gc)

print(renderer.get_pixel(20, 20))     # Color(r=255, g=0, b=0, a=255)
print(renderer.dimensions())          # (320, 200)
```

Pixels are stored as `0xAARRGGBB` integers. `Color.to_u32` and
`Color.from_u32` convert between the two forms. Drawing outside the
framebuffer, or outside the context's clip rectangle, is silently skipped.
`copy_area` also handles overlapping source and destination blocks.

## Input

```python
from rxserver.input.keyboard import KeyboardManager
from rxserver.input.mouse import MouseButton, MouseManager

keyboard = KeyboardManager()
event = keyboard.key_press(38)        # "a"
print(hex(event.keysym))              # 0x61

mouse = MouseManager()
mouse.mouse_move(100, 40)
mouse.button_press(MouseButton.LEFT)
print(mouse.is_button_pressed(MouseButton.LEFT))   # True
```

## Atoms, fonts, cursors and plugins

```python
from rxserver.plugins.atom_registry import AtomRegistry
from rxserver.plugins.font_manager import FontManager

atoms = AtomRegistry()
atom = atoms.intern("_NET_WM_NAME")
assert atoms.get_name(atom) == "_NET_WM_NAME"
assert atoms.intern("_NET_WM_NAME") == atom

fonts = FontManager()
font_id = fonts.load_font("fixed")
assert fonts.load_font("fixed") == font_id
```

A `PluginRegistry` initializes each `Plugin` as it is registered. It refuses
a second plugin with the same name by raising `PluginError`.

## What this package does not do

This is a library of components, not a running display server:

- It installs no command. `parse_args` only parses options; nothing in the package starts a server from them.
- It does not listen on a socket.
- It does not speak the X11 wire protocol.
- It does not manage windows.
- It does not show the framebuffer on a screen. `Renderer` only draws into an in-memory list of pixels.

## Tests

The test suite uses pytest. Install the `test` extra to get it.