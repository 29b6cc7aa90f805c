"""Keyboard state: pressed keys, modifiers and a basic keycode-to-keysym map."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

_KEYCODE_COUNT = 256


class ModifierMask(IntFlag):
    """Modifier bits reported with key events."""

    SHIFT = 1 << 0
    LOCK = 1 << 1
    CONTROL = 1 << 2
    MOD1 = 1 << 3
    MOD2 = 1 << 4
    MOD3 = 1 << 5
    MOD4 = 1 << 6
    MOD5 = 1 << 7


# Keycodes of the modifier keys and the bit each one controls.
_MODIFIER_KEYS: dict[int, ModifierMask] = {
    50: ModifierMask.SHIFT,
    62: ModifierMask.SHIFT,
    37: ModifierMask.CONTROL,
    105: ModifierMask.CONTROL,
    64: ModifierMask.MOD1,
    108: ModifierMask.MOD1,
}

_SPECIAL_KEYSYMS: dict[int, int] = {
    9: 0xFF1B,   # Escape
    22: 0xFF08,  # BackSpace
    23: 0xFF09,  # Tab
    36: 0xFF0D,  # Return
    65: 0x0020,  # space
}

# (first keycode, last keycode, keysym of the first keycode)
_KEYSYM_RUNS: tuple[tuple[int, int, int], ...] = (
    (24, 33, 0x0071),
    (38, 46, 0x0061),
    (52, 58, 0x007A),
    (10, 18, 0x0031),
)


def _check_keycode(keycode: int) -> None:
    if (
        not isinstance(keycode, int)
        or isinstance(keycode, bool)
        or not 0 <= keycode < _KEYCODE_COUNT
    ):
        raise ValueError(f"keycode must be an integer in [0, 255], got {keycode!r}")


def keycode_to_keysym(keycode: int) -> int:
    """Map a keycode to a keysym; unknown keycodes map to themselves."""
    _check_keycode(keycode)
    if keycode in _SPECIAL_KEYSYMS:
        return _SPECIAL_KEYSYMS[keycode]
    if keycode == 19:
        return 0x0030
    for first, last, base in _KEYSYM_RUNS:
        if first <= keycode <= last:
            return base + (keycode - first)
    return keycode


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release."""

    keycode: int
    keysym: int
    modifiers: ModifierMask
    pressed: bool
    time: int = 0


class KeyboardManager:
    """Tracks which keys are down and the resulting modifier state."""

    def __init__(self) -> None:
        self._pressed: set[int] = set()
        self._modifiers = ModifierMask(0)
        self.repeat_delay = 500
        self.repeat_rate = 30

    def _event(self, keycode: int, pressed: bool) -> KeyEvent:
        return KeyEvent(
            keycode=keycode,
            keysym=keycode_to_keysym(keycode),
            modifiers=self._modifiers,
            pressed=pressed,
        )

    def key_press(self, keycode: int) -> KeyEvent:
        """Record a key going down and return the event."""
        _check_keycode(keycode)
        self._pressed.add(keycode)
        modifier = _MODIFIER_KEYS.get(keycode)
        if modifier is not None:
            self._modifiers |= modifier
        return self._event(keycode, True)

    def key_release(self, keycode: int) -> KeyEvent:
        """Record a key going up and return the event."""
        _check_keycode(keycode)
        self._pressed.discard(keycode)
        modifier = _MODIFIER_KEYS.get(keycode)
        if modifier is not None:
            self._modifiers &= ~modifier
        return self._event(keycode, False)

    def is_key_pressed(self, keycode: int) -> bool:
        _check_keycode(keycode)
        return keycode in self._pressed

    def modifier_state(self) -> ModifierMask:
        """The modifiers currently held."""
        return self._modifiers

    def set_repeat_params(self, delay: int, rate: int) -> None:
        """Set auto-repeat delay (ms) and rate (Hz)."""
        self.repeat_delay = delay
        self.repeat_rate = rate