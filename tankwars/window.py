"""Window state and input dispatch to subscribed controllers."""

from __future__ import annotations

import enum
import sys
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field

from tankwars.mathutil import clear_bit, is_bit_set, set_bit

KEY_STATE_COUNT = 384


class Key(enum.IntEnum):
    """Keyboard key codes."""

    SPACE = 32
    A = 65
    C = 67
    D = 68
    E = 69
    Q = 81
    S = 83
    W = 87
    ESCAPE = 256
    ENTER = 257
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    F3 = 292
    F5 = 294
    KP_4 = 324
    KP_5 = 325
    KP_6 = 326
    KP_8 = 328
    KP_DIVIDE = 331
    KP_MULTIPLY = 332


class Mod(enum.IntFlag):
    """Modifier keys held alongside a key or mouse event."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8


class MouseButton(enum.IntEnum):
    """Mouse buttons; each is a bit position in button masks."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


@dataclass
class WindowProperties:
    """Configuration and live geometry of a window."""

    self_dir: str = ""
    name: str = "WindowName"
    resolution: tuple[int, int] = (1280, 720)
    scale_factor: float = 1.0
    position: tuple[int, int] = (0, 0)
    cursor_pos: tuple[int, int] | None = None
    aspect_ratio: float = 1280.0 / 720.0
    resizable: bool = True
    visible: bool = True
    full_screen: bool = False
    centered: bool = True
    hide_on_close: bool = False
    v_sync: bool = True

    def __post_init__(self) -> None:
        if self.cursor_pos is None:
            self.cursor_pos = (self.resolution[0] // 2, self.resolution[1] // 2)


class InputController:
    """Receives input events from a window.

    Override the ``on_*`` hooks, or attach callbacks with :meth:`bind`; the
    default hooks forward each event to the callbacks bound to its name.
    """

    def __init__(self, window: "Window | None" = None) -> None:
        self.window = window
        self._attached = True
        self._handlers: dict[str, list[Callable[..., None]]] = defaultdict(list)
        if window is not None:
            window.subscribe(self)

    def is_active(self) -> bool:
        """Whether the controller is receiving events."""
        return self._attached

    def set_active(self, value: bool) -> None:
        """Subscribe to or unsubscribe from the window's events."""
        self._attached = value
        if self.window is None:
            return
        if value:
            self.window.subscribe(self)
        else:
            self.window.unsubscribe(self)

    def bind(self, event: str, callback: Callable[..., None]) -> None:
        """Call ``callback`` with the event's arguments whenever ``event`` fires."""
        self._handlers[event].append(callback)

    def _emit(self, event: str, *args: float) -> None:
        for callback in self._handlers.get(event, ()):
            callback(*args)

    def on_input_update(self, delta_time: float, mods: int) -> None:
        """Called every frame with the previous frame's duration."""
        self._emit("input_update", delta_time, mods)

    def on_key_press(self, key: int, mods: int) -> None:
        """Called when a key goes down."""
        self._emit("key_press", key, mods)

    def on_key_release(self, key: int, mods: int) -> None:
        """Called when a key goes up."""
        self._emit("key_release", key, mods)

    def on_mouse_move(self, mouse_x: int, mouse_y: int, delta_x: int, delta_y: int) -> None:
        """Called when the cursor moved during the last frame."""
        self._emit("mouse_move", mouse_x, mouse_y, delta_x, delta_y)

    def on_mouse_btn_press(self, mouse_x: int, mouse_y: int, button: int, mods: int) -> None:
        """Called with a bit mask of buttons pressed during the last frame."""
        self._emit("mouse_btn_press", mouse_x, mouse_y, button, mods)

    def on_mouse_btn_release(self, mouse_x: int, mouse_y: int, button: int, mods: int) -> None:
        """Called with a bit mask of buttons released during the last frame."""
        self._emit("mouse_btn_release", mouse_x, mouse_y, button, mods)

    def on_mouse_scroll(self, mouse_x: int, mouse_y: int, offset_x: int, offset_y: int) -> None:
        """Called when the wheel scrolled during the last frame."""
        self._emit("mouse_scroll", mouse_x, mouse_y, offset_x, offset_y)

    def on_window_resize(self, width: int, height: int) -> None:
        """Called when the window was resized during the last frame."""
        self._emit("window_resize", width, height)


@dataclass
class Window:
    """Buffers raw input callbacks and dispatches them once per frame."""

    props: WindowProperties = field(default_factory=WindowProperties)
    start_time: float = 0.0

    def __post_init__(self) -> None:
        width, height = self.props.resolution
        self.props.aspect_ratio = width / height
        self.frame_id = 0
        self.elapsed_time = self.start_time
        self.delta_frame_time = 0.0
        self.hidden_pointer = False
        self._should_close = False
        self._resize_event = False
        self._mouse_move_event = False
        self._mouse_delta = (0, 0)
        self._scroll_event = False
        self._scroll_delta = (0, 0)
        self._mouse_button_action = 0
        self._mouse_button_states = 0
        self._key_states = [False] * KEY_STATE_COUNT
        self._key_events: list[int] = []
        self._key_mods = 0
        self._observers: list[InputController] = []

    # Subscriptions

    def subscribe(self, controller: InputController) -> None:
        """Add a controller to the event receivers."""
        self._observers.append(controller)

    def unsubscribe(self, controller: InputController) -> None:
        """Remove every subscription of a controller."""
        self._observers = [obs for obs in self._observers if obs is not controller]

    # Raw input

    @staticmethod
    def _check_key(key: int) -> None:
        if not 0 <= key < KEY_STATE_COUNT:
            raise ValueError(f"key code {key} out of range")

    def key_callback(self, key: int, scan_code: int, action: int, mods: int) -> None:
        """Record a key state change; repeats of the same state are ignored."""
        self._check_key(key)
        self._key_mods = mods
        pressed = bool(action)
        if self._key_states[key] == pressed:
            return
        self._key_states[key] = pressed
        self._key_events.append(key)

    def mouse_button_callback(self, button: int, action: int, mods: int) -> None:
        """Record a mouse button going down or up."""
        self._key_mods = mods
        self._mouse_button_action = set_bit(self._mouse_button_action, button)
        if action:
            self._mouse_button_states = set_bit(self._mouse_button_states, button)
        else:
            self._mouse_button_states = clear_bit(self._mouse_button_states, button)

    def mouse_move(self, pos_x: int, pos_y: int) -> None:
        """Record the cursor moving, accumulating deltas within a frame."""
        cx, cy = self.props.cursor_pos
        dx, dy = pos_x - cx, pos_y - cy
        if self._mouse_move_event:
            ax, ay = self._mouse_delta
            self._mouse_delta = (ax + dx, ay + dy)
        else:
            self._mouse_move_event = True
            self._mouse_delta = (dx, dy)
        self.props.cursor_pos = (pos_x, pos_y)

    def mouse_scroll(self, offset_x: float, offset_y: float) -> None:
        """Record a scroll, truncated to whole steps."""
        self._scroll_event = True
        self._scroll_delta = (int(offset_x), int(offset_y))

    # Input state queries

    def key_hold(self, key_code: int) -> bool:
        """Whether a key is currently down."""
        self._check_key(key_code)
        return self._key_states[key_code]

    def mouse_hold(self, button: int) -> bool:
        """Whether a mouse button is currently down."""
        return is_bit_set(self._mouse_button_states, button)

    def special_key_state(self) -> int:
        """Modifier bits of the last key or mouse button event."""
        return self._key_mods

    def cursor_position(self) -> tuple[int, int]:
        """The cursor position in unscaled window coordinates."""
        return self.props.cursor_pos

    # Window state

    def set_size(
        self,
        width: int,
        height: int,
        framebuffer_width: int | None = None,
        framebuffer_height: int | None = None,
    ) -> None:
        """Resize the window; the framebuffer size defaults to the window size."""
        fb_w = width if framebuffer_width is None else framebuffer_width
        fb_h = height if framebuffer_height is None else framebuffer_height
        self.props.scale_factor = fb_w / width
        self.props.resolution = (fb_w, fb_h)
        self.props.aspect_ratio = width / height
        self._resize_event = True

    def get_resolution(self, unscaled: bool = False) -> tuple[int, int]:
        """The resolution, multiplied by the whole part of the scale unless ``unscaled``."""
        width, height = self.props.resolution
        if not unscaled:
            factor = int(self.props.scale_factor)
            width, height = width * factor, height * factor
        return (width, height)

    def show(self) -> None:
        """Make the window visible."""
        self.props.visible = True

    def hide(self) -> None:
        """Hide the window."""
        self.props.visible = False

    def close(self) -> None:
        """Hide the window or flag it for closing, as configured."""
        if self.props.hide_on_close:
            self.hide()
        else:
            self._should_close = True

    def should_close(self) -> bool:
        """Whether the window was asked to close."""
        return self._should_close

    def set_vsync(self, state: bool) -> None:
        """Turn vertical sync on or off."""
        self.props.v_sync = state

    def toggle_vsync(self) -> bool:
        """Flip vertical sync and return the new state."""
        self.set_vsync(not self.props.v_sync)
        return self.props.v_sync

    def show_pointer(self) -> None:
        """Show the cursor."""
        self.hidden_pointer = False

    def hide_pointer(self) -> None:
        """Hide the cursor."""
        self.hidden_pointer = True

    def disable_pointer(self) -> None:
        """Hide and capture the cursor."""
        self.hidden_pointer = True

    def set_pointer_position(self, mouse_x: int, mouse_y: int) -> None:
        """Move the cursor."""
        self.props.cursor_pos = (mouse_x, mouse_y)

    def center_pointer(self) -> None:
        """Move the cursor to the middle of the window."""
        width, height = self.props.resolution
        self.props.cursor_pos = (width // 2, height // 2)

    def on_error(self, error: int, description: str) -> None:
        """Report a windowing error."""
        print(f"[WINDOW ERROR]\t{error}\t{description}", file=sys.stderr)

    # Dispatch

    def update_observers(self, now: float) -> None:
        """Compute the frame time and deliver the buffered events."""
        self.frame_id += 1
        self.delta_frame_time = now - self.elapsed_time
        self.elapsed_time = now

        x, y = self.props.cursor_pos
        mods = self._key_mods

        if self._resize_event:
            self._resize_event = False
            width, height = self.props.resolution
            for obs in list(self._observers):
                obs.on_window_resize(width, height)

        if self._mouse_move_event:
            self._mouse_move_event = False
            dx, dy = self._mouse_delta
            for obs in list(self._observers):
                obs.on_mouse_move(x, y, dx, dy)

        press = self._mouse_button_action & self._mouse_button_states
        if press:
            for obs in list(self._observers):
                obs.on_mouse_btn_press(x, y, press, mods)

        release = self._mouse_button_action & ~self._mouse_button_states
        if release:
            for obs in list(self._observers):
                obs.on_mouse_btn_release(x, y, release, mods)

        if self._scroll_event:
            self._scroll_event = False
            sx, sy = self._scroll_delta
            for obs in list(self._observers):
                obs.on_mouse_scroll(x, y, sx, sy)

        events, self._key_events = self._key_events, []
        for key in events:
            for obs in list(self._observers):
                if self._key_states[key]:
                    obs.on_key_press(key, mods)
                else:
                    obs.on_key_release(key, mods)

        for obs in list(self._observers):
            obs.on_input_update(self.delta_frame_time, mods)

        self._mouse_button_action = 0