"""Per-frame keyboard and mouse state.

Key codes follow the GLFW numbering: mouse buttons use codes 0-7 and
share the table with keyboard keys, which start at ``KEY_SPACE``.
"""

from __future__ import annotations

from enum import IntEnum
from itertools import chain
from typing import Callable

MOUSE_BUTTON_1 = 0
MOUSE_BUTTON_2 = 1
MOUSE_BUTTON_8 = 7

KEY_SPACE = 32
KEY_B = 66
KEY_D = 68
KEY_F = 70
KEY_L = 76
KEY_R = 82
KEY_U = 85
KEY_X = 88
KEY_Y = 89
KEY_Z = 90
KEY_KP_1 = 321
KEY_KP_2 = 322
KEY_KP_3 = 323
KEY_KP_4 = 324
KEY_KP_6 = 326
KEY_KP_7 = 327
KEY_KP_8 = 328
KEY_LEFT_SHIFT = 340
KEY_MENU = 348

KEY_COUNT = KEY_MENU + 1

# Mouse buttons 1-7 and every keyboard key are polled each frame.
_TRACKED = tuple(chain(range(MOUSE_BUTTON_8), range(KEY_SPACE, KEY_MENU + 1)))


class KeyState(IntEnum):
    FREE = 0  # not pressed, and was not pressed last frame
    PRESSED = 1  # went down this frame
    HOLD = 2  # still down
    RELEASED = 3  # went up this frame


class Input:
    """Tracks key states, mouse movement and scrolling between frames."""

    def __init__(self, width: float = 0, height: float = 0) -> None:
        self.any_key_pressed = False
        self.any_key_hold = False
        self.any_key_released = False
        self._keys = [KeyState.FREE] * KEY_COUNT

        self._mouse_first_move = True
        self._scroll_changed = True
        self.scroll_offset = 0.0
        self.mouse_position: tuple[float, float] = (width / 2.0, height / 2.0)
        self._mouse_last_position = self.mouse_position
        self.mouse_offset: tuple[float, float] = (0.0, 0.0)

    def update(self, is_pressed: Callable[[int], bool]) -> None:
        """Advance one frame, polling ``is_pressed(code)`` for every key."""
        self.any_key_pressed = False
        self.any_key_hold = False
        self.any_key_released = False

        for code in _TRACKED:
            state = self._keys[code]
            if is_pressed(code):
                if state in (KeyState.FREE, KeyState.RELEASED):
                    self._keys[code] = KeyState.PRESSED
                    self.any_key_pressed = True
                elif state is KeyState.PRESSED:
                    self._keys[code] = KeyState.HOLD
                    self.any_key_hold = True
            elif state in (KeyState.PRESSED, KeyState.HOLD):
                self._keys[code] = KeyState.RELEASED
                self.any_key_released = True
            else:
                self._keys[code] = KeyState.FREE

        x, y = self.mouse_position
        last_x, last_y = self._mouse_last_position
        self.mouse_offset = (x - last_x, last_y - y)
        self._mouse_last_position = self.mouse_position

        if not self._scroll_changed:
            self.scroll_offset = 0.0
        self._scroll_changed = False

    def key_pressed(self, key: int) -> bool:
        return self.key_state(key) is KeyState.PRESSED

    def key_hold(self, key: int) -> bool:
        return self.key_state(key) is KeyState.HOLD

    def key_released(self, key: int) -> bool:
        return self.key_state(key) is KeyState.RELEASED

    def key_state(self, key: int) -> KeyState:
        if not 0 <= key < KEY_COUNT:
            raise ValueError(f"unknown key code {key}")
        return self._keys[key]

    def on_mouse_move(self, x: float, y: float) -> None:
        """Record a new cursor position."""
        self.mouse_position = (float(x), float(y))
        if self._mouse_first_move:
            self._mouse_last_position = self.mouse_position
            self._mouse_first_move = False

    def on_scroll(self, x_offset: float, y_offset: float) -> None:
        """Record a vertical scroll; the horizontal offset is ignored."""
        del x_offset
        self.scroll_offset = float(y_offset)
        self._scroll_changed = True