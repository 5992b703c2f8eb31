"""A fixed-size, non-resizable window with an OpenGL 4.6 core context."""

from __future__ import annotations

from typing import Any

from .linalg import Rect
from .prerequisites import OGL3DError

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
WINDOW_TITLE = "OpenGL 3D Game"

CLOSE_EVENT = "close"


class _PygletWindowBackend:
    """A pyglet window whose close button is reported instead of obeyed."""

    def __init__(self, width: int, height: int, title: str) -> None:
        try:
            import pyglet
            from pyglet import gl

            config = gl.Config(
                double_buffer=True,
                depth_size=24,
                stencil_size=8,
                major_version=4,
                minor_version=6,
                forward_compatible=True,
            )
            self._window = pyglet.window.Window(
                width=width,
                height=height,
                caption=title,
                resizable=False,
                config=config,
            )
        except Exception as exc:
            raise OGL3DError(f"Window | creating the window failed: {exc}") from exc
        self._handled = pyglet.event.EVENT_HANDLED
        self._events: list[str] = []
        self._window.push_handlers(on_close=self._on_close)

    def _on_close(self) -> bool:
        self._events.append(CLOSE_EVENT)
        return self._handled

    def get_size(self) -> tuple[int, int]:
        return self._window.get_size()

    def switch_to(self) -> None:
        self._window.switch_to()

    def set_vsync(self, vsync: bool) -> None:
        self._window.set_vsync(vsync)

    def flip(self) -> None:
        self._window.flip()

    def poll_events(self) -> list[str]:
        self._window.dispatch_events()
        events, self._events = self._events, []
        return events

    def close(self) -> None:
        self._window.close()


class Window:
    """The game window and its rendering context.

    ``backend`` replaces the platform window; it must offer ``get_size``,
    ``switch_to``, ``set_vsync``, ``flip``, ``poll_events`` and ``close``.
    """

    def __init__(self, *, backend: Any = None) -> None:
        self._backend = (
            backend
            if backend is not None
            else _PygletWindowBackend(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        )
        self._close_requested = False
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise OGL3DError("Window | window has been closed")

    def inner_size(self) -> Rect:
        """Size of the drawable area."""
        self._check_open()
        width, height = self._backend.get_size()
        return Rect(width, height)

    def make_current_context(self) -> None:
        self._check_open()
        self._backend.switch_to()

    def present(self, vsync: bool) -> None:
        """Show the back buffer, waiting for vertical sync if ``vsync`` is set."""
        self._check_open()
        self._backend.set_vsync(bool(vsync))
        self._backend.flip()

    def dispatch_events(self) -> bool:
        """Process pending events; True once the user has asked to close."""
        self._check_open()
        for event in self._backend.poll_events():
            if event == CLOSE_EVENT:
                self._close_requested = True
        return self._close_requested

    @property
    def close_requested(self) -> bool:
        return self._close_requested

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Destroy the window and its context; safe to call twice."""
        if not self._closed:
            self._backend.close()
            self._closed = True

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()