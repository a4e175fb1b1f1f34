"""Orbiting camera controller."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from .component import Component
from .input_state import (
    KEY_KP_1,
    KEY_KP_2,
    KEY_KP_3,
    KEY_KP_4,
    KEY_KP_6,
    KEY_KP_7,
    KEY_KP_8,
    MOUSE_BUTTON_2,
)
from .transform import angle_axis, quat_from_euler, quat_multiply, quat_rotate, rotate_vector

ROTATION_LIMIT = 75.0 * 3.14 / 180.0
KEYPAD_STEP = math.radians(5.0)

_IDENTITY = np.array([1.0, 0.0, 0.0, 0.0])


def rotation_between(start: Any, dest: Any) -> np.ndarray:
    """Shortest rotation taking the direction of ``start`` to that of ``dest``.

    Returns the identity if either vector is zero.
    """
    start = np.asarray(start, dtype=float)
    dest = np.asarray(dest, dtype=float)
    if not start.any() or not dest.any():
        return _IDENTITY.copy()

    n_start = start / np.linalg.norm(start)
    n_dest = dest / np.linalg.norm(dest)
    cos_theta = float(np.dot(n_start, n_dest))

    if cos_theta < -1.0 + 0.001:
        axis = np.cross((1.0, 0.0, 0.0), n_start)
        if np.dot(axis, axis) < 0.01:
            axis = np.cross((0.0, 0.0, 1.0), n_start)
        axis = axis / np.linalg.norm(axis)
        return angle_axis(math.pi, axis)

    axis = np.cross(n_start, n_dest)
    s = math.sqrt((1.0 + cos_theta) * 2.0)
    return np.array([s * 0.5, *(axis / s)])


class ThirdPersonController(Component):
    """Keeps its object orbiting a target at a fixed radius, facing it.

    Reads input from the scene's ``input``: drag with the right mouse
    button, or use the numeric keypad (1 front, 3 right, 7 top, 2/8/4/6
    to turn). The vertical angle stays within ``ROTATION_LIMIT``.
    """

    def __init__(
        self,
        target: Any,
        front: Any,
        right: Any,
        radius: float = 0.0,
        mouse_sensitivity: float = 0.1,
    ) -> None:
        super().__init__()
        self.target = target
        self._target_transform: Any = None
        self._radius = max(float(radius), 0.0)
        self.mouse_sensitivity = float(mouse_sensitivity)
        self._front = -np.asarray(front, dtype=float)
        self._rotation_axis = np.asarray(right, dtype=float).copy()
        self.x_rotation = 0.0
        self.y_rotation = 0.0

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, radius: float) -> None:
        self._radius = max(float(radius), 0.0)

    def initialize(self) -> None:
        self._target_transform = self.target.root
        self.register_update_call()

    def update(self) -> None:
        self._read_input(self.game_object.scene.input)
        self.x_rotation = min(max(self.x_rotation, -ROTATION_LIMIT), ROTATION_LIMIT)

        rot_y = quat_from_euler((0.0, self.y_rotation, 0.0))
        current_axis = quat_rotate(rot_y, self._rotation_axis)

        target_position = np.asarray(self._target_transform.position, dtype=float)
        new_pos = quat_rotate(rot_y, (self._radius, 0.0, 0.0))
        new_pos = rotate_vector(new_pos, self.x_rotation, current_axis)
        new_pos = new_pos + target_position

        # Horizontal then vertical, so the view never rolls around its own axis.
        diff = target_position - new_pos
        front = self._front
        horizontal = rotation_between((front[0], 0.0, front[2]), (diff[0], 0.0, diff[2]))
        vertical = rotation_between(quat_rotate(horizontal, front), diff)

        root = self.game_object.root
        root.position = new_pos
        root.rotation = quat_multiply(vertical, horizontal)

    def _read_input(self, keys: Any) -> None:
        if keys.key_hold(MOUSE_BUTTON_2):
            offset_x, offset_y = keys.mouse_offset
            self.x_rotation -= math.radians(offset_y * self.mouse_sensitivity)
            self.y_rotation += math.radians(offset_x * self.mouse_sensitivity)
        elif keys.key_pressed(KEY_KP_1):
            self.x_rotation = 0.0
            self.y_rotation = 0.0
        elif keys.key_pressed(KEY_KP_3):
            self.x_rotation = 0.0
            self.y_rotation = math.radians(90.0)
        elif keys.key_pressed(KEY_KP_7):
            self.x_rotation = ROTATION_LIMIT
            self.y_rotation = 0.0
        else:
            if keys.key_hold(KEY_KP_2):
                self.x_rotation -= KEYPAD_STEP
            elif keys.key_hold(KEY_KP_8):
                self.x_rotation += KEYPAD_STEP
            if keys.key_hold(KEY_KP_4):
                self.y_rotation -= KEYPAD_STEP
            elif keys.key_hold(KEY_KP_6):
                self.y_rotation += KEYPAD_STEP