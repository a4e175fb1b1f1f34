import math
from types import SimpleNamespace

import numpy as np
import pytest

from cubesim.entity import GameObject
from cubesim.input_state import (
    KEY_KP_1,
    KEY_KP_3,
    KEY_KP_7,
    KEY_KP_8,
    MOUSE_BUTTON_2,
    Input,
)
from cubesim.third_person_controller import (
    ROTATION_LIMIT,
    ThirdPersonController,
    rotation_between,
)
from cubesim.transform import quat_rotate


def make_rig(radius=15.0):
    keys = Input(1920, 1080)
    scene = SimpleNamespace(input=keys)
    owner = SimpleNamespace(scene=scene)
    target = GameObject(owner, 0, "target")
    camera = GameObject(owner, 1, "camera")
    controller = camera.create_component(
        ThirdPersonController(target, (-1.0, 0.0, 0.0), (0.0, 0.0, 1.0), radius)
    )
    camera.initialize_components()
    return keys, target, camera, controller


def press(keys, *codes, frames=1):
    for _ in range(frames):
        keys.update(lambda code: code in codes)


def assert_faces_target(camera, target, radius):
    offset = target.root.position - camera.root.position
    assert np.linalg.norm(offset) == pytest.approx(radius)
    assert np.allclose(camera.root.front(), offset / np.linalg.norm(offset), atol=1e-6)


def test_rotation_between_zero_is_identity():
    assert np.allclose(rotation_between((0, 0, 0), (1, 0, 0)), (1, 0, 0, 0))
    assert np.allclose(rotation_between((1, 0, 0), (0, 0, 0)), (1, 0, 0, 0))


@pytest.mark.parametrize(
    "start,dest",
    [
        ((1, 0, 0), (0, 1, 0)),
        ((1, 2, 3), (-3, 0.5, 2)),
        ((1, 0, 0), (-1, 0, 0)),
        ((0, 0, 2), (0, 0, -5)),
    ],
)
def test_rotation_between_maps_start_onto_dest(start, dest):
    q = rotation_between(start, dest)
    assert np.linalg.norm(q) == pytest.approx(1.0)
    rotated = quat_rotate(q, np.asarray(start, float) / np.linalg.norm(start))
    assert np.allclose(rotated, np.asarray(dest, float) / np.linalg.norm(dest), atol=1e-6)


def test_radius_setter_clamps_negative():
    _, _, _, controller = make_rig()
    controller.radius = -4.0
    assert controller.radius == 0.0


def test_initial_update_faces_target():
    keys, target, camera, controller = make_rig()
    press(keys)
    controller.update()
    assert_faces_target(camera, target, 15.0)


def test_follows_moved_target():
    keys, target, camera, controller = make_rig()
    target.root.position = (2.0, -3.0, 4.0)
    press(keys)
    controller.update()
    assert_faces_target(camera, target, 15.0)


def test_keypad_right_view():
    keys, target, camera, controller = make_rig()
    press(keys, KEY_KP_3)
    controller.update()
    assert controller.y_rotation == pytest.approx(math.radians(90.0))
    assert controller.x_rotation == 0.0
    assert_faces_target(camera, target, 15.0)


def test_keypad_top_view():
    keys, target, camera, controller = make_rig()
    press(keys, KEY_KP_7)
    controller.update()
    assert controller.x_rotation == ROTATION_LIMIT
    assert_faces_target(camera, target, 15.0)


def test_keypad_front_resets():
    keys, _, _, controller = make_rig()
    controller.x_rotation = 0.5
    controller.y_rotation = 1.0
    press(keys, KEY_KP_1)
    controller.update()
    assert (controller.x_rotation, controller.y_rotation) == (0.0, 0.0)


def test_vertical_angle_is_limited():
    keys, target, camera, controller = make_rig()
    press(keys, KEY_KP_8)
    for _ in range(40):
        press(keys, KEY_KP_8)
        controller.update()
    assert controller.x_rotation == pytest.approx(ROTATION_LIMIT)
    assert_faces_target(camera, target, 15.0)


def test_mouse_drag_turns_horizontally():
    keys, target, camera, controller = make_rig()
    keys.on_mouse_move(100.0, 100.0)
    press(keys, MOUSE_BUTTON_2)
    keys.on_mouse_move(110.0, 100.0)
    press(keys, MOUSE_BUTTON_2)
    controller.update()
    assert controller.y_rotation == pytest.approx(math.radians(10.0 * 0.1))
    assert controller.x_rotation == 0.0
    assert_faces_target(camera, target, 15.0)


def test_zero_radius_sits_on_target():
    keys, target, camera, controller = make_rig(radius=0.0)
    target.root.position = (1.0, 1.0, 1.0)
    press(keys)
    controller.update()
    assert np.allclose(camera.root.position, (1.0, 1.0, 1.0))