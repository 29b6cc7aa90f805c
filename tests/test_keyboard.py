import pytest

from rxserver.input.keyboard import (
    KeyboardManager,
    ModifierMask,
    keycode_to_keysym,
)


@pytest.mark.parametrize(
    "keycode, keysym",
    [
        (9, 0xFF1B),
        (22, 0xFF08),
        (23, 0xFF09),
        (36, 0xFF0D),
        (65, 0x0020),
        (24, 0x0071),
        (38, 0x0061),
        (52, 0x007A),
        (10, 0x0031),
        (19, 0x0030),
    ],
)
def test_keysym_mapping(keycode, keysym):
    assert keycode_to_keysym(keycode) == keysym


def test_keysym_fallback_is_keycode():
    assert keycode_to_keysym(100) == 100
    assert keycode_to_keysym(0) == 0


def test_keysym_runs_are_consecutive():
    values = [keycode_to_keysym(k) for k in range(24, 34)]
    assert values == list(range(values[0], values[0] + 10))


@pytest.mark.parametrize("bad", [-1, 256, 1000])
def test_keycode_out_of_range(bad):
    with pytest.raises(ValueError):
        keycode_to_keysym(bad)
    with pytest.raises(ValueError):
        KeyboardManager().key_press(bad)


def test_press_and_release_tracks_state():
    kb = KeyboardManager()
    event = kb.key_press(38)
    assert event.pressed is True
    assert event.keycode == 38
    assert event.keysym == 0x0061
    assert kb.is_key_pressed(38)
    event = kb.key_release(38)
    assert event.pressed is False
    assert not kb.is_key_pressed(38)


def test_shift_sets_and_clears_modifier():
    kb = KeyboardManager()
    event = kb.key_press(50)
    assert ModifierMask.SHIFT in event.modifiers
    assert kb.modifier_state() == ModifierMask.SHIFT
    event = kb.key_release(50)
    assert ModifierMask.SHIFT not in event.modifiers
    assert kb.modifier_state() == ModifierMask(0)


def test_modifiers_combine():
    kb = KeyboardManager()
    kb.key_press(37)
    kb.key_press(108)
    state = kb.modifier_state()
    assert state == ModifierMask.CONTROL | ModifierMask.MOD1
    assert ModifierMask.SHIFT not in state


def test_releasing_one_shift_clears_shift():
    kb = KeyboardManager()
    kb.key_press(50)
    kb.key_press(62)
    kb.key_release(50)
    assert ModifierMask.SHIFT not in kb.modifier_state()
    assert kb.is_key_pressed(62)


def test_ordinary_key_leaves_modifiers():
    kb = KeyboardManager()
    kb.key_press(105)
    event = kb.key_press(24)
    assert event.modifiers == ModifierMask.CONTROL
    kb.key_release(24)
    assert kb.modifier_state() == ModifierMask.CONTROL


def test_repeat_params():
    kb = KeyboardManager()
    assert (kb.repeat_delay, kb.repeat_rate) == (500, 30)
    kb.set_repeat_params(250, 60)
    assert (kb.repeat_delay, kb.repeat_rate) == (250, 60)