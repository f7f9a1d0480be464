"""The game client: window loop, input, rendering and network events."""

from __future__ import annotations

from functools import cached_property
from typing import Any

from voxelgame.event_handler import EventHandler
from voxelgame.graphics import process_input
from voxelgame.network import NetworkHandler
from voxelgame.rendering import Renderer


class _KeyState(dict):
    """Which keys are currently held, fed by the window's key events."""

    def __missing__(self, key: int) -> bool:
        return False

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        self[symbol] = True

    def on_key_release(self, symbol: int, modifiers: int) -> None:
        self[symbol] = False


class Client:
    """Connects to a server and runs the frame loop in a window."""

    def __init__(self, window: Any, network: Any = None) -> None:
        self.window = window
        self.network = network if network is not None else NetworkHandler(False)
        self.event_handler = EventHandler(self.network)
        self.keys = _KeyState()
        window.push_handlers(self.keys)

    @cached_property
    def renderer(self) -> Renderer:
        return Renderer()

    def run(self) -> int:
        """Run frames until the window is asked to close; return the frame count."""
        frames = 0
        while not self.window.has_exit:
            self.event_handler.poll_events()
            process_input(self.window, self.keys)
            self.renderer.process_rendering()
            self.window.flip()
            self.window.dispatch_events()
            frames += 1
        return frames