"""Keyboard, mouse and gamepad state with press and trigger queries.

Devices are sampled elsewhere; each frame the raw readings are handed to
:meth:`InputState.update`, which keeps the previous frame for edge detection.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

KEY_COUNT = 256
MOUSE_BUTTON_COUNT = 4
PRESSED_MASK = 0x80

LEFT_THUMB_DEADZONE = 7849
RIGHT_THUMB_DEADZONE = 8689
STICK_MAX = 32767.0
TRIGGER_MAX = 255.0


class GamepadButton(enum.IntFlag):
    """Gamepad button bits as reported in :attr:`GamepadState.buttons`."""

    DPAD_UP = 0x0001
    DPAD_DOWN = 0x0002
    DPAD_LEFT = 0x0004
    DPAD_RIGHT = 0x0008
    START = 0x0010
    BACK = 0x0020
    LEFT_THUMB = 0x0040
    RIGHT_THUMB = 0x0080
    LEFT_SHOULDER = 0x0100
    RIGHT_SHOULDER = 0x0200
    A = 0x1000
    B = 0x2000
    X = 0x4000
    Y = 0x8000


@dataclass(frozen=True)
class GamepadState:
    """One reading of a gamepad; the default is a disconnected pad."""

    buttons: int = 0
    left_trigger: int = 0
    right_trigger: int = 0
    thumb_lx: int = 0
    thumb_ly: int = 0
    thumb_rx: int = 0
    thumb_ry: int = 0


def normalize_stick_value(value: int, deadzone: int) -> float:
    """Map a raw stick axis to roughly [-1, 1], returning 0 inside the dead zone."""
    if abs(value) < deadzone:
        return 0.0
    return value / STICK_MAX


def _checked(values: Sequence[int], size: int, what: str) -> List[int]:
    result = list(values)
    if len(result) != size:
        raise ValueError(f"{what} must hold exactly {size} values")
    return result


def _check_index(index: int, size: int, what: str) -> None:
    if not 0 <= index < size:
        raise IndexError(f"{what} {index} out of range 0..{size - 1}")


@dataclass
class InputState:
    """Current and previous input readings."""

    keys: List[int] = field(default_factory=lambda: [0] * KEY_COUNT)
    previous_keys: List[int] = field(default_factory=lambda: [0] * KEY_COUNT)
    mouse_buttons: List[int] = field(default_factory=lambda: [0] * MOUSE_BUTTON_COUNT)
    previous_mouse_buttons: List[int] = field(
        default_factory=lambda: [0] * MOUSE_BUTTON_COUNT
    )
    mouse_delta: Tuple[int, int] = (0, 0)
    mouse_position: Tuple[int, int] = (0, 0)
    gamepad: GamepadState = field(default_factory=GamepadState)
    previous_gamepad: GamepadState = field(default_factory=GamepadState)

    def update(
        self,
        keys: Optional[Sequence[int]] = None,
        mouse_buttons: Optional[Sequence[int]] = None,
        mouse_delta: Tuple[int, int] = (0, 0),
        mouse_position: Optional[Tuple[int, int]] = None,
        gamepad: Optional[GamepadState] = None,
    ) -> None:
        """Advance one frame with fresh readings.

        Missing keyboard or mouse-button readings count as nothing pressed, a
        missing gamepad as disconnected, and a missing cursor position keeps
        the last one.
        """
        new_keys = (
            [0] * KEY_COUNT if keys is None else _checked(keys, KEY_COUNT, "keys")
        )
        new_buttons = (
            [0] * MOUSE_BUTTON_COUNT
            if mouse_buttons is None
            else _checked(mouse_buttons, MOUSE_BUTTON_COUNT, "mouse_buttons")
        )

        self.previous_keys = self.keys
        self.keys = new_keys

        self.mouse_delta = tuple(mouse_delta)
        if mouse_position is not None:
            self.mouse_position = tuple(mouse_position)

        self.previous_mouse_buttons = self.mouse_buttons
        self.mouse_buttons = new_buttons

        self.previous_gamepad = self.gamepad
        self.gamepad = gamepad if gamepad is not None else GamepadState()

    def push_key(self, key_number: int) -> bool:
        """True while the key is held."""
        _check_index(key_number, KEY_COUNT, "key")
        return self.keys[key_number] != 0

    def trigger_key(self, key_number: int) -> bool:
        """True on the frame the key goes down."""
        _check_index(key_number, KEY_COUNT, "key")
        return self.keys[key_number] != 0 and self.previous_keys[key_number] == 0

    def push_mouse_button(self, button_number: int) -> bool:
        _check_index(button_number, MOUSE_BUTTON_COUNT, "mouse button")
        return bool(self.mouse_buttons[button_number] & PRESSED_MASK)

    def trigger_mouse_button(self, button_number: int) -> bool:
        _check_index(button_number, MOUSE_BUTTON_COUNT, "mouse button")
        return bool(self.mouse_buttons[button_number] & PRESSED_MASK) and not (
            self.previous_mouse_buttons[button_number] & PRESSED_MASK
        )

    def push_gamepad_button(self, button: int) -> bool:
        """True while any of the given button bits is held."""
        return (self.gamepad.buttons & button) != 0

    def trigger_gamepad_button(self, button: int) -> bool:
        return (self.gamepad.buttons & button) != 0 and not (
            self.previous_gamepad.buttons & button
        )

    def left_stick_x(self) -> float:
        return normalize_stick_value(self.gamepad.thumb_lx, LEFT_THUMB_DEADZONE)

    def left_stick_y(self) -> float:
        return normalize_stick_value(self.gamepad.thumb_ly, LEFT_THUMB_DEADZONE)

    def right_stick_x(self) -> float:
        return normalize_stick_value(self.gamepad.thumb_rx, RIGHT_THUMB_DEADZONE)

    def right_stick_y(self) -> float:
        return normalize_stick_value(self.gamepad.thumb_ry, RIGHT_THUMB_DEADZONE)

    def left_trigger(self) -> float:
        """Left trigger pressure in [0, 1]."""
        return self.gamepad.left_trigger / TRIGGER_MAX

    def right_trigger(self) -> float:
        """Right trigger pressure in [0, 1]."""
        return self.gamepad.right_trigger / TRIGGER_MAX