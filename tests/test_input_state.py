import pytest

from cubesim.input_state import (
    KEY_COUNT,
    KEY_F,
    KEY_LEFT_SHIFT,
    KEY_SPACE,
    MOUSE_BUTTON_2,
    Input,
    KeyState,
)


def _pressing(*codes):
    down = set(codes)
    return lambda code: code in down


def test_initial_state_is_free():
    inp = Input(800, 600)
    assert inp.key_state(KEY_F) is KeyState.FREE
    assert not inp.key_pressed(KEY_F)


def test_key_cycle():
    inp = Input()
    inp.update(_pressing(KEY_F))
    assert inp.key_pressed(KEY_F)
    assert inp.any_key_pressed
    inp.update(_pressing(KEY_F))
    assert inp.key_hold(KEY_F)
    assert inp.any_key_hold
    assert not inp.any_key_pressed
    inp.update(_pressing())
    assert inp.key_released(KEY_F)
    assert inp.any_key_released
    inp.update(_pressing())
    assert inp.key_state(KEY_F) is KeyState.FREE
    assert not inp.any_key_released


def test_hold_persists_while_down():
    inp = Input()
    for _ in range(4):
        inp.update(_pressing(KEY_LEFT_SHIFT))
    assert inp.key_hold(KEY_LEFT_SHIFT)


def test_mouse_button_tracked():
    inp = Input()
    inp.update(_pressing(MOUSE_BUTTON_2))
    inp.update(_pressing(MOUSE_BUTTON_2))
    assert inp.key_hold(MOUSE_BUTTON_2)


def test_press_after_release():
    inp = Input()
    inp.update(_pressing(KEY_SPACE))
    inp.update(_pressing())
    inp.update(_pressing(KEY_SPACE))
    assert inp.key_pressed(KEY_SPACE)


@pytest.mark.parametrize("key", [-1, KEY_COUNT])
def test_unknown_key_raises(key):
    with pytest.raises(ValueError):
        Input().key_state(key)


def test_mouse_starts_at_window_centre():
    inp = Input(800, 600)
    assert inp.mouse_position == (400.0, 300.0)


def test_first_move_has_no_offset():
    inp = Input(800, 600)
    inp.on_mouse_move(10, 20)
    inp.update(_pressing())
    assert inp.mouse_offset == (0.0, 0.0)


def test_mouse_offset_y_is_inverted():
    inp = Input()
    inp.on_mouse_move(410, 290)
    inp.update(_pressing())
    inp.on_mouse_move(420, 280)
    inp.update(_pressing())
    assert inp.mouse_offset == (10.0, 10.0)
    inp.update(_pressing())
    assert inp.mouse_offset == (0.0, 0.0)


def test_scroll_lasts_one_frame():
    inp = Input()
    inp.update(_pressing())
    inp.on_scroll(0.0, 2.5)
    inp.update(_pressing())
    assert inp.scroll_offset == 2.5
    inp.update(_pressing())
    assert inp.scroll_offset == 0.0