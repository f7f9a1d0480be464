"""Window creation and keyboard handling for the game client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

WINDOW_TITLE = "LearnOpenGL"
GL_VERSION = (3, 3)

# Key symbol of the escape key as reported by the windowing layer.
ESCAPE = 0xFF1B


class WindowError(RuntimeError):
    """Raised when the game window cannot be created."""


@dataclass
class _ScreenSize:
    width: int = 0
    height: int = 0


_screen = _ScreenSize()


def initialize_window(width: int, height: int) -> Any:
    """Open a resizable OpenGL 3.3 core window of the given size."""
    if width <= 0 or height <= 0:
        raise WindowError(f"invalid window size {width}x{height}")
    _screen.width, _screen.height = width, height

    try:
        import pyglet

        major, minor = GL_VERSION
        config = pyglet.gl.Config(
            major_version=major,
            minor_version=minor,
            forward_compatible=True,
            double_buffer=True,
        )
        window = pyglet.window.Window(
            width, height, caption=WINDOW_TITLE, config=config, resizable=True
        )
    except Exception as exc:
        raise WindowError("Failed to create window") from exc

    def on_resize(new_width: int, new_height: int) -> None:
        # The window's own handler still runs afterwards and resets the viewport.
        _screen.width, _screen.height = new_width, new_height

    window.push_handlers(on_resize=on_resize)
    return window


def terminate() -> None:
    """Close every open window."""
    import pyglet

    for window in list(pyglet.app.windows):
        window.close()


def process_input(window: Any, keys: Mapping[int, bool]) -> bool:
    """Ask the window to close when escape is held; return whether it was."""
    if keys.get(ESCAPE, False):
        window.has_exit = True
        return True
    return False