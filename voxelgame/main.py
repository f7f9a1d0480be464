"""Command entry point: run the server, the client, or both."""

from __future__ import annotations

import sys
import threading

MODE_BOTH = 0
MODE_SERVER = 1
MODE_CLIENT = 2
_MODES = (MODE_BOTH, MODE_SERVER, MODE_CLIENT)

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600


def parse_mode(text: str) -> int | None:
    """Read the run mode from the first token; None for an unknown number."""
    tokens = text.split()
    if not tokens:
        raise ValueError("no mode given")
    mode = int(tokens[0])
    return mode if mode in _MODES else None


def _run_server() -> None:
    from voxelgame.server import Server

    Server().run()


def _run_client() -> None:
    from voxelgame.client import Client
    from voxelgame.graphics import initialize_window

    window = initialize_window(WINDOW_WIDTH, WINDOW_HEIGHT)
    Client(window).run()


def main(argv: list[str] | None = None) -> int:
    """Start the program in the mode given as argument or on standard input."""
    from voxelgame.graphics import WindowError

    args = sys.argv[1:] if argv is None else list(argv)
    text = args[0] if args else sys.stdin.readline()
    try:
        mode = parse_mode(text)
    except ValueError:
        print(f"invalid mode: {text.strip()!r}", file=sys.stderr)
        return 1

    try:
        if mode == MODE_BOTH:
            threading.Thread(target=_run_server, daemon=True).start()
            _run_client()
        elif mode == MODE_SERVER:
            _run_server()
        elif mode == MODE_CLIENT:
            _run_client()
    except WindowError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())