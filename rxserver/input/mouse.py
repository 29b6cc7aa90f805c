"""Pointer state: position and pressed buttons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag

_I16_MIN, _I16_MAX = -0x8000, 0x7FFF


class MouseButton(IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5


class ButtonMask(IntFlag):
    """Button bits as reported in pointer event state."""

    BUTTON1 = 1 << 8
    BUTTON2 = 1 << 9
    BUTTON3 = 1 << 10
    BUTTON4 = 1 << 11
    BUTTON5 = 1 << 12


_BUTTON_BITS: dict[MouseButton, ButtonMask] = {
    MouseButton.LEFT: ButtonMask.BUTTON1,
    MouseButton.MIDDLE: ButtonMask.BUTTON2,
    MouseButton.RIGHT: ButtonMask.BUTTON3,
    MouseButton.WHEEL_UP: ButtonMask.BUTTON4,
    MouseButton.WHEEL_DOWN: ButtonMask.BUTTON5,
}


def _check_coord(name: str, value: int) -> None:
    if (
        not isinstance(value, int)
        or isinstance(value, bool)
        or not _I16_MIN <= value <= _I16_MAX
    ):
        raise ValueError(f"{name} must be a 16-bit signed integer, got {value!r}")


@dataclass(frozen=True)
class MouseEvent:
    """A pointer motion or button event."""

    x: int
    y: int
    button: MouseButton | None
    pressed: bool
    button_mask: ButtonMask
    time: int = 0


class MouseManager:
    """Tracks the pointer position and button state."""

    def __init__(self) -> None:
        self._x = 0
        self._y = 0
        self._buttons = ButtonMask(0)
        self.acceleration = 1.0
        self.sensitivity = 1.0

    def _event(self, button: MouseButton | None, pressed: bool) -> MouseEvent:
        return MouseEvent(
            x=self._x,
            y=self._y,
            button=button,
            pressed=pressed,
            button_mask=self._buttons,
        )

    def _move_to(self, x: int, y: int) -> None:
        _check_coord("x", x)
        _check_coord("y", y)
        self._x, self._y = x, y

    def mouse_move(self, x: int, y: int) -> MouseEvent:
        """Move the pointer and return a motion event."""
        self._move_to(x, y)
        return self._event(None, False)

    def button_press(self, button: MouseButton) -> MouseEvent:
        button = MouseButton(button)
        self._buttons |= _BUTTON_BITS[button]
        return self._event(button, True)

    def button_release(self, button: MouseButton) -> MouseEvent:
        button = MouseButton(button)
        self._buttons &= ~_BUTTON_BITS[button]
        return self._event(button, False)

    def position(self) -> tuple[int, int]:
        return self._x, self._y

    def is_button_pressed(self, button: MouseButton) -> bool:
        return _BUTTON_BITS[MouseButton(button)] in self._buttons

    def button_state(self) -> ButtonMask:
        return self._buttons

    def set_params(self, acceleration: float, sensitivity: float) -> None:
        self.acceleration = acceleration
        self.sensitivity = sensitivity

    def warp_cursor(self, x: int, y: int) -> None:
        """Move the pointer without producing an event."""
        self._move_to(x, y)