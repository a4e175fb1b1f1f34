"""Position, rotation and scale of an object, with quaternion helpers.

Quaternions are numpy arrays ordered ``(w, x, y, z)``. Matrices are 4x4
numpy arrays that act on column vectors.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .component import Component


def _vec3(v: Any) -> np.ndarray:
    arr = np.asarray(v, dtype=float).ravel()
    if arr.size != 3:
        raise ValueError(f"expected 3 components, got {arr.size}")
    return arr


def quat_from_euler(angles: Any) -> np.ndarray:
    """Quaternion from Euler angles (pitch, yaw, roll) in radians."""
    half = _vec3(angles) * 0.5
    c = np.cos(half)
    s = np.sin(half)
    return np.array(
        [
            c[0] * c[1] * c[2] + s[0] * s[1] * s[2],
            s[0] * c[1] * c[2] - c[0] * s[1] * s[2],
            c[0] * s[1] * c[2] + s[0] * c[1] * s[2],
            c[0] * c[1] * s[2] - s[0] * s[1] * c[2],
        ]
    )


def quat_multiply(a: Any, b: Any) -> np.ndarray:
    """Hamilton product ``a * b``: apply ``b`` first, then ``a``."""
    w1, x1, y1, z1 = np.asarray(a, dtype=float)
    w2, x2, y2, z2 = np.asarray(b, dtype=float)
    return np.array(
        [
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        ]
    )


def quat_rotate(q: Any, v: Any) -> np.ndarray:
    """Rotate vector ``v`` by unit quaternion ``q``."""
    q = np.asarray(q, dtype=float)
    v = _vec3(v)
    u = q[1:]
    uv = np.cross(u, v)
    uuv = np.cross(u, uv)
    return v + 2.0 * (q[0] * uv + uuv)


def quat_to_mat4(q: Any) -> np.ndarray:
    """Rotation matrix of unit quaternion ``q``."""
    w, x, y, z = np.asarray(q, dtype=float)
    m = np.identity(4)
    m[0, 0] = 1.0 - 2.0 * (y * y + z * z)
    m[0, 1] = 2.0 * (x * y - w * z)
    m[0, 2] = 2.0 * (x * z + w * y)
    m[1, 0] = 2.0 * (x * y + w * z)
    m[1, 1] = 1.0 - 2.0 * (x * x + z * z)
    m[1, 2] = 2.0 * (y * z - w * x)
    m[2, 0] = 2.0 * (x * z - w * y)
    m[2, 1] = 2.0 * (y * z + w * x)
    m[2, 2] = 1.0 - 2.0 * (x * x + y * y)
    return m


def angle_axis(angle: float, axis: Any) -> np.ndarray:
    """Quaternion rotating by ``angle`` radians around unit ``axis``."""
    axis = _vec3(axis)
    half = angle * 0.5
    return np.concatenate(([np.cos(half)], axis * np.sin(half)))


def rotate_vector(v: Any, angle: float, axis: Any) -> np.ndarray:
    """Rotate ``v`` by ``angle`` radians around ``axis`` (normalised here)."""
    axis = _vec3(axis)
    norm = np.linalg.norm(axis)
    if norm == 0.0:
        raise ValueError("rotation axis must not be zero")
    return quat_rotate(angle_axis(angle, axis / norm), v)


def _as_quat(rotation: Any) -> np.ndarray:
    arr = np.asarray(rotation, dtype=float).ravel()
    if arr.size == 3:
        return quat_from_euler(arr)
    if arr.size == 4:
        return arr.copy()
    raise ValueError("rotation must be a quaternion or Euler angles")


def _translation(v: np.ndarray) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = v
    return m


def _scaling(v: np.ndarray) -> np.ndarray:
    return np.diag([v[0], v[1], v[2], 1.0])


class Transform(Component):
    """Placement of an object, published through property pipes.

    Rotations may be given as quaternions or as Euler angles.
    """

    def make_connectors(self, message_manager: Any) -> None:
        self.parent = message_manager.make_property_in(self)
        self.transform_out = message_manager.make_property_out(self, self)
        self.model_out = message_manager.make_property_out(self, np.identity(4))
        self.position_out = message_manager.make_property_out(self, np.zeros(3))
        self.rotation_out = message_manager.make_property_out(
            self, quat_from_euler(np.zeros(3))
        )
        self.scale_out = message_manager.make_property_out(self, np.ones(3))

    def initialize(self) -> None:
        self._update_model()

    @property
    def model(self) -> np.ndarray:
        return self.model_out.value

    @property
    def position(self) -> np.ndarray:
        return self.position_out.value

    @position.setter
    def position(self, position: Any) -> None:
        self.position_out.value = _vec3(position).copy()
        self._update_model()

    def move(self, vector: Any) -> None:
        """Translate in world space."""
        self.position_out.value = self.position_out.value + _vec3(vector)
        self._update_model()

    def move_relative(self, vector: Any) -> None:
        """Translate along the object's own axes."""
        offset = quat_rotate(self.rotation_out.value, vector)
        self.position_out.value = self.position_out.value + offset
        self._update_model()

    @property
    def rotation(self) -> np.ndarray:
        return self.rotation_out.value

    @rotation.setter
    def rotation(self, rotation: Any) -> None:
        self.rotation_out.value = _as_quat(rotation)
        self._update_model()

    def rotate(self, rotation: Any) -> None:
        """Apply a rotation in world space."""
        self.rotation_out.value = quat_multiply(_as_quat(rotation), self.rotation_out.value)
        self._update_model()

    def rotate_relative(self, rotation: Any) -> None:
        """Apply a rotation in the object's own space."""
        self.rotation_out.value = quat_multiply(self.rotation_out.value, _as_quat(rotation))
        self._update_model()

    @property
    def scale(self) -> np.ndarray:
        return self.scale_out.value

    @scale.setter
    def scale(self, scale: Any) -> None:
        self.scale_out.value = _vec3(scale).copy()
        self._update_model()

    def front(self) -> np.ndarray:
        return quat_rotate(self.rotation_out.value, (1.0, 0.0, 0.0))

    def up(self) -> np.ndarray:
        return quat_rotate(self.rotation_out.value, (0.0, 1.0, 0.0))

    def right(self) -> np.ndarray:
        return quat_rotate(self.rotation_out.value, (0.0, 0.0, 1.0))

    def _update_model(self) -> None:
        if self.parent.connected:
            base = np.array(self.parent.value.model, dtype=float)
        else:
            base = np.identity(4)
        self.model_out.value = (
            base
            @ _translation(self.position_out.value)
            @ quat_to_mat4(self.rotation_out.value)
            @ _scaling(self.scale_out.value)
        )