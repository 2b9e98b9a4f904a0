"""The application window: event queue, keyboard state and presentation."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class EventKind(Enum):
    CLOSED = auto()
    RESIZED = auto()
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()
    TEXT_ENTERED = auto()


@dataclass(frozen=True)
class Event:
    """A window event; keys are named by their pyglet symbol strings ("W", "LEFT")."""

    kind: EventKind
    key: Optional[str] = None
    text: Optional[str] = None
    size: Optional[tuple[int, int]] = None


class KeyboardState:
    """The set of keys currently held down."""

    def __init__(self) -> None:
        self._pressed: set[str] = set()

    def apply(self, event: Event) -> None:
        if event.kind is EventKind.KEY_PRESSED:
            self._pressed.add(event.key)
        elif event.kind is EventKind.KEY_RELEASED:
            self._pressed.discard(event.key)

    def is_pressed(self, key: str) -> bool:
        return key in self._pressed

    def clear(self) -> None:
        self._pressed.clear()


class _PygletSurface:
    """An OpenGL 3.3 window with a depth buffer."""

    def __init__(self, width: int, height: int, title: str) -> None:
        import pyglet
        from pyglet import gl
        from pyglet.gl import gl_info
        from pyglet.window import key

        self._gl = gl
        self._key = key
        config = gl.Config(major_version=3, minor_version=3, depth_size=24, double_buffer=True)
        self._window = pyglet.window.Window(
            width, height, title, resizable=True, config=config
        )
        self._window.switch_to()
        self.is_open = True
        print(f"Version: {gl_info.get_version_string()}")
        print(f"Renderer: {gl_info.get_renderer()}")
        print(f"Vendor: {gl_info.get_vendor()}")

    def connect(self, callback: Callable[[Event], None]) -> None:
        symbol_string = self._key.symbol_string
        window = self._window

        def on_close():
            callback(Event(EventKind.CLOSED))
            return True

        def on_resize(width, height):
            callback(Event(EventKind.RESIZED, size=tuple(window.get_framebuffer_size())))
            return True

        def on_key_press(symbol, modifiers):
            callback(Event(EventKind.KEY_PRESSED, key=symbol_string(symbol)))
            return True

        def on_key_release(symbol, modifiers):
            callback(Event(EventKind.KEY_RELEASED, key=symbol_string(symbol)))
            return True

        def on_text(text):
            callback(Event(EventKind.TEXT_ENTERED, text=text))
            return True

        window.push_handlers(
            on_close=on_close,
            on_resize=on_resize,
            on_key_press=on_key_press,
            on_key_release=on_key_release,
            on_text=on_text,
        )

    def dispatch_events(self) -> None:
        self._window.dispatch_events()

    def get_size(self) -> tuple[int, int]:
        width, height = self._window.get_size()
        return width, height

    def flip(self) -> None:
        self._window.flip()

    def close(self) -> None:
        if self.is_open:
            self._window.close()
            self.is_open = False

    def viewport(self, width: int, height: int) -> None:
        self._gl.glViewport(0, 0, width, height)


class Window:
    """A window that queues its events and tracks held keys."""

    def __init__(
        self, width: int = 800, height: int = 600, title: str = "", *, surface=None
    ) -> None:
        self._surface = surface if surface is not None else _PygletSurface(width, height, title)
        self._events: deque[Event] = deque()
        self._keyboard = KeyboardState()
        self._running = True
        self._surface.connect(self._events.append)
        self._surface.viewport(width, height)

    def is_running(self) -> bool:
        return self._running and self._surface.is_open

    def is_key_pressed(self, key: str) -> bool:
        return self._keyboard.is_pressed(key)

    def clear_input_state(self) -> None:
        self._keyboard.clear()

    def poll_event(self) -> Optional[Event]:
        """Return the next pending event, or None when there is none."""
        if not self._events and self.is_running():
            self._surface.dispatch_events()
        return self._events.popleft() if self._events else None

    def handle_event(self, event: Event) -> None:
        if event.kind is EventKind.CLOSED:
            self._running = False
            self._surface.close()
        elif event.kind is EventKind.RESIZED and event.size is not None:
            self._surface.viewport(*event.size)
        self._keyboard.apply(event)

    def display(self) -> None:
        self._surface.flip()

    def size(self) -> tuple[int, int]:
        return tuple(self._surface.get_size())