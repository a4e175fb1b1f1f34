"""Camera component and projection helpers.

Matrices are 4x4 numpy arrays acting on column vectors, right-handed,
with clip-space depth in [-1, 1].
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from .component import Component


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection; ``fovy`` in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def orthographic(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Orthographic projection of the given box."""
    if left == right or bottom == top or near == far:
        raise ValueError("projection box must not be flat")
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def _normalize(v: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(v)
    if norm == 0.0:
        raise ValueError("cannot normalize a zero vector")
    return v / norm


def look_at(eye: Any, center: Any, up: Any) -> np.ndarray:
    """View matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


class Camera(Component):
    """Viewpoint placed at its object's root transform."""

    def __init__(self, projection: Any) -> None:
        super().__init__()
        self.projection = np.array(projection, dtype=float)
        if self.projection.shape != (4, 4):
            raise ValueError("projection must be a 4x4 matrix")
        self._transform: Any = None

    @classmethod
    def with_perspective(cls, fovy: float, aspect: float, near: float, far: float) -> Camera:
        return cls(perspective(fovy, aspect, near, far))

    @classmethod
    def with_orthographic(
        cls, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> Camera:
        return cls(orthographic(left, right, bottom, top, near, far))

    def initialize(self) -> None:
        self.game_object.scene.register_camera(self)
        self._transform = self.game_object.root

    def view_matrix(self) -> np.ndarray:
        if self._transform is None:
            raise RuntimeError("camera has not been initialized")
        position = self._transform.position
        return look_at(position, position + self._transform.front(), self._transform.up())