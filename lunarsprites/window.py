"""Canvas-backed windows that queue input events and replay them on poll."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Protocol

from .keys import Keycode, MouseButton, web_map_key, web_map_mbutton
from .theme import Vec2

_log = logging.getLogger(__name__)

ROOT_CANVAS_ID = "#root_window"


class Canvas(Protocol):
    """The page-side operations a window needs from its host."""

    def new_canvas(self, canvas_id: str, width: int, height: int, x: int, y: int) -> None: ...

    def delete_canvas(self, canvas_id: str) -> None: ...

    def set_canvas_focused(self, canvas_id: str, focused: bool) -> None: ...

    def set_canvas_size(self, canvas_id: str, width: int, height: int) -> None: ...

    def set_canvas_position(self, canvas_id: str, x: int, y: int) -> None: ...

    def set_canvas_visibility(self, canvas_id: str, visible: bool) -> None: ...

    def set_canvas_fullscreen(self, canvas_id: str, fullscreen: bool) -> None: ...


class InputManager(Protocol):
    """Receiver of the input events a window replays when polled."""

    def handle_press(self, keycode: Keycode) -> None: ...

    def handle_release(self, keycode: Keycode) -> None: ...

    def handle_mouse_press(self, button: MouseButton, position: Vec2) -> None: ...

    def handle_mouse_release(self, button: MouseButton, position: Vec2) -> None: ...

    def handle_mouse_move(self, position: Vec2) -> None: ...

    def handle_mouse_enter(self, position: Vec2) -> None: ...

    def handle_mouse_leave(self, position: Vec2) -> None: ...


@dataclass
class WindowConfig:
    """How a window should look when it is created."""

    title: str = ""
    size: Vec2 = field(default_factory=lambda: Vec2(800, 600))
    position: Vec2 = field(default_factory=Vec2)
    fullscreen: bool = False
    hidden: bool = False
    root_window: bool = False


class WindowEventType(Enum):
    """Kinds of input event a window queues."""

    NONE = 0
    KEYDOWN = auto()
    KEYUP = auto()
    MOUSEDOWN = auto()
    MOUSEUP = auto()
    MOUSEMOVE = auto()
    MOUSEENTER = auto()
    MOUSELEAVE = auto()


@dataclass(frozen=True)
class WindowEvent:
    """One queued input event."""

    type: WindowEventType
    keycode: Keycode = Keycode.UNKNOWN
    button: MouseButton = MouseButton.NONE
    position: Vec2 = field(default_factory=Vec2)


class CanvasWindow:
    """A window drawn into a page canvas.

    Input arrives through the ``on_*`` methods, is queued, and is handed to
    the input manager in arrival order by :meth:`poll`.
    """

    def __init__(
        self,
        canvas: Canvas,
        input_manager: InputManager,
        canvas_id: str,
        config: WindowConfig,
    ) -> None:
        self.canvas = canvas
        self.input_manager = input_manager
        self.canvas_id = canvas_id
        self.title = config.title
        self.width = config.size.x
        self.height = config.size.y
        self.position = config.position
        self.root_window = config.root_window
        self.hidden = False
        self.fullscreen = False
        self.events: list[WindowEvent] = []

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    @property
    def is_visible(self) -> bool:
        return not self.hidden

    @property
    def is_fullscreen(self) -> bool:
        return self.fullscreen

    def poll(self) -> None:
        """Hand every queued event to the input manager, then clear the queue."""
        manager = self.input_manager
        for event in self.events:
            kind = event.type
            if kind is WindowEventType.KEYDOWN:
                manager.handle_press(event.keycode)
            elif kind is WindowEventType.KEYUP:
                manager.handle_release(event.keycode)
            elif kind is WindowEventType.MOUSEDOWN:
                manager.handle_mouse_press(event.button, event.position)
            elif kind is WindowEventType.MOUSEUP:
                manager.handle_mouse_release(event.button, event.position)
            elif kind is WindowEventType.MOUSEMOVE:
                manager.handle_mouse_move(event.position)
            elif kind is WindowEventType.MOUSEENTER:
                manager.handle_mouse_enter(event.position)
            elif kind is WindowEventType.MOUSELEAVE:
                manager.handle_mouse_leave(event.position)
            else:
                _log.warning("Unknown event type: %s", kind)
        self.events.clear()

    def set_fullscreen(self, fullscreen: bool) -> None:
        if self.fullscreen == fullscreen:
            return
        self.fullscreen = fullscreen
        self.canvas.set_canvas_fullscreen(self.canvas_id, fullscreen)

    def show(self) -> None:
        if not self.hidden:
            return
        self.hidden = False
        self.canvas.set_canvas_visibility(self.canvas_id, True)

    def hide(self) -> None:
        if self.hidden:
            return
        self.hidden = True
        self.canvas.set_canvas_visibility(self.canvas_id, False)

    def set_title(self, title: str) -> None:
        self.title = title

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.canvas.set_canvas_size(self.canvas_id, width, height)

    def on_key_down(self, code: str) -> None:
        """Queue a key press given as a DOM ``KeyboardEvent.code``."""
        self.events.append(WindowEvent(WindowEventType.KEYDOWN, keycode=web_map_key(code)))

    def on_key_up(self, code: str) -> None:
        """Queue a key release given as a DOM ``KeyboardEvent.code``."""
        self.events.append(WindowEvent(WindowEventType.KEYUP, keycode=web_map_key(code)))

    def on_mouse_down(self, button: int, x: int, y: int) -> None:
        self.events.append(
            WindowEvent(WindowEventType.MOUSEDOWN, button=web_map_mbutton(button), position=Vec2(x, y))
        )

    def on_mouse_up(self, button: int, x: int, y: int) -> None:
        self.events.append(
            WindowEvent(WindowEventType.MOUSEUP, button=web_map_mbutton(button), position=Vec2(x, y))
        )

    def on_mouse_move(self, x: int, y: int) -> None:
        self.events.append(WindowEvent(WindowEventType.MOUSEMOVE, position=Vec2(x, y)))

    def on_mouse_enter(self, x: int, y: int) -> None:
        self.events.append(WindowEvent(WindowEventType.MOUSEENTER, position=Vec2(x, y)))

    def on_mouse_leave(self, x: int, y: int) -> None:
        self.events.append(WindowEvent(WindowEventType.MOUSELEAVE, position=Vec2(x, y)))


class WindowManager:
    """Creates canvas windows: at most one root window and any number of others."""

    def __init__(self, canvas: Canvas, input_manager: InputManager) -> None:
        self.canvas = canvas
        self.input_manager = input_manager
        self._root_created = False
        self._sub_window_count = 0
        self._windows: list[CanvasWindow] = []

    @property
    def windows(self) -> tuple[CanvasWindow, ...]:
        return tuple(self._windows)

    def create_window(self, config: Optional[WindowConfig] = None) -> CanvasWindow:
        """Create a window; raises RuntimeError for a second root window."""
        config = config or WindowConfig()
        if config.root_window:
            if self._root_created:
                raise RuntimeError("Root window already created")
            self._root_created = True
            canvas_id = ROOT_CANVAS_ID
        else:
            canvas_id = f"#window_{self._sub_window_count}"
            self._sub_window_count += 1

        window = CanvasWindow(self.canvas, self.input_manager, canvas_id, config)
        window.set_fullscreen(config.fullscreen)
        if config.hidden:
            window.hide()
        self.canvas.set_canvas_focused(canvas_id, True)
        self._windows.append(window)
        return window

    def destroy_window(self, window: CanvasWindow) -> None:
        """Forget a window created by this manager."""
        for index, known in enumerate(self._windows):
            if known is window:
                del self._windows[index]
                return
        raise ValueError("window was not created by this manager")