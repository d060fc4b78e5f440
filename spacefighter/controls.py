"""Keyboard, mouse and game pad identifiers and game pad state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from spacefighter.geometry import Vector2


class ButtonState(enum.Enum):
    """Whether a button is pressed or released."""

    PRESSED = enum.auto()
    RELEASED = enum.auto()


class Button(enum.Enum):
    """The buttons of an Xbox controller."""

    A = enum.auto()
    B = enum.auto()
    X = enum.auto()
    Y = enum.auto()
    START = enum.auto()
    BACK = enum.auto()
    LEFT_STICK = enum.auto()
    LEFT_SHOULDER = enum.auto()
    RIGHT_STICK = enum.auto()
    RIGHT_SHOULDER = enum.auto()
    DPAD_UP = enum.auto()
    DPAD_DOWN = enum.auto()
    DPAD_LEFT = enum.auto()
    DPAD_RIGHT = enum.auto()


@dataclass
class GamePadDPad:
    """Which directions of the directional pad are pressed."""

    up: ButtonState = ButtonState.RELEASED
    down: ButtonState = ButtonState.RELEASED
    left: ButtonState = ButtonState.RELEASED
    right: ButtonState = ButtonState.RELEASED


@dataclass
class GamePadTriggers:
    """Positions of the left and right triggers."""

    left: float = 0.0
    right: float = 0.0


@dataclass
class GamePadThumbSticks:
    """Positions of the left and right thumbsticks."""

    left: Vector2 = field(default_factory=Vector2)
    right: Vector2 = field(default_factory=Vector2)


@dataclass
class GamePadButtons:
    """Whether each face, menu, stick and shoulder button is pressed."""

    a: ButtonState = ButtonState.RELEASED
    b: ButtonState = ButtonState.RELEASED
    x: ButtonState = ButtonState.RELEASED
    y: ButtonState = ButtonState.RELEASED
    start: ButtonState = ButtonState.RELEASED
    back: ButtonState = ButtonState.RELEASED
    left_stick: ButtonState = ButtonState.RELEASED
    left_shoulder: ButtonState = ButtonState.RELEASED
    right_stick: ButtonState = ButtonState.RELEASED
    right_shoulder: ButtonState = ButtonState.RELEASED


# Where each button's state lives within a GamePadState.
_BUTTON_FIELDS: Dict[Button, Tuple[str, str]] = {
    Button.A: ("buttons", "a"),
    Button.B: ("buttons", "b"),
    Button.X: ("buttons", "x"),
    Button.Y: ("buttons", "y"),
    Button.START: ("buttons", "start"),
    Button.BACK: ("buttons", "back"),
    Button.LEFT_STICK: ("buttons", "left_stick"),
    Button.LEFT_SHOULDER: ("buttons", "left_shoulder"),
    Button.RIGHT_STICK: ("buttons", "right_stick"),
    Button.RIGHT_SHOULDER: ("buttons", "right_shoulder"),
    Button.DPAD_UP: ("dpad", "up"),
    Button.DPAD_DOWN: ("dpad", "down"),
    Button.DPAD_LEFT: ("dpad", "left"),
    Button.DPAD_RIGHT: ("dpad", "right"),
}


@dataclass
class GamePadState:
    """The current state of a controller's buttons, sticks and triggers."""

    is_connected: bool = False
    buttons: GamePadButtons = field(default_factory=GamePadButtons)
    thumbsticks: GamePadThumbSticks = field(default_factory=GamePadThumbSticks)
    triggers: GamePadTriggers = field(default_factory=GamePadTriggers)
    dpad: GamePadDPad = field(default_factory=GamePadDPad)
    device: Any = None

    def is_button_down(self, button: Button) -> bool:
        """Return True if the button is pressed."""
        location = _BUTTON_FIELDS.get(button)
        if location is None:
            return False
        group, name = location
        return getattr(getattr(self, group), name) is ButtonState.PRESSED

    def is_button_up(self, button: Button) -> bool:
        """Return True if the button is not pressed."""
        return not self.is_button_down(button)

    def reset(self) -> None:
        """Release every button and zero the triggers; sticks keep their positions."""
        for group, name in _BUTTON_FIELDS.values():
            setattr(getattr(self, group), name, ButtonState.RELEASED)
        self.triggers.left = 0.0
        self.triggers.right = 0.0


class Key(enum.IntEnum):
    """Keys on a keyboard."""

    A = 1
    B = 2
    C = 3
    D = 4
    E = 5
    F = 6
    G = 7
    H = 8
    I = 9  # noqa: E741
    J = 10
    K = 11
    L = 12
    M = 13
    N = 14
    O = 15  # noqa: E741
    P = 16
    Q = 17
    R = 18
    S = 19
    T = 20
    U = 21
    V = 22
    W = 23
    X = 24
    Y = 25
    Z = 26

    NUM_0 = 27
    NUM_1 = 28
    NUM_2 = 29
    NUM_3 = 30
    NUM_4 = 31
    NUM_5 = 32
    NUM_6 = 33
    NUM_7 = 34
    NUM_8 = 35
    NUM_9 = 36

    PAD_0 = 37
    PAD_1 = 38
    PAD_2 = 39
    PAD_3 = 40
    PAD_4 = 41
    PAD_5 = 42
    PAD_6 = 43
    PAD_7 = 44
    PAD_8 = 45
    PAD_9 = 46

    F1 = 47
    F2 = 48
    F3 = 49
    F4 = 50
    F5 = 51
    F6 = 52
    F7 = 53
    F8 = 54
    F9 = 55
    F10 = 56
    F11 = 57
    F12 = 58

    ESCAPE = 59
    TILDE = 60
    MINUS = 61
    EQUALS = 62
    BACKSPACE = 63
    TAB = 64
    OPENBRACE = 65
    CLOSEBRACE = 66
    ENTER = 67
    SEMICOLON = 68
    QUOTE = 69
    BACKSLASH = 70
    BACKSLASH2 = 71
    COMMA = 72
    FULLSTOP = 73
    SLASH = 74
    SPACE = 75

    INSERT = 76
    DELETE = 77
    HOME = 78
    END = 79
    PGUP = 80
    PGDN = 81
    LEFT = 82
    RIGHT = 83
    UP = 84
    DOWN = 85

    PAD_SLASH = 86
    PAD_ASTERISK = 87
    PAD_MINUS = 88
    PAD_PLUS = 89
    PAD_DELETE = 90
    PAD_ENTER = 91

    PRINTSCREEN = 92
    PAUSE = 93

    LSHIFT = 215
    RSHIFT = 216
    LCTRL = 217
    RCTRL = 218
    ALT = 219
    ALTGR = 220
    LWIN = 221
    RWIN = 222
    MENU = 223
    SCROLLLOCK = 224
    NUMLOCK = 225
    CAPSLOCK = 226

    MAX = 227


class MouseButton(enum.IntEnum):
    """Buttons on a mouse."""

    LEFT = 1
    RIGHT = 2
    CENTER = 3
    BACK = 4
    FORWARD = 5