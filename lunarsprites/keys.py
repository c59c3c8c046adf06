"""Keyboard and mouse codes, and the tables that map native codes onto them."""

from __future__ import annotations

from enum import IntEnum, auto
from string import ascii_uppercase


class Keycode(IntEnum):
    """Platform independent key identifiers."""

    UNKNOWN = 0
    SPACE = auto()
    APOSTROPHE = auto()
    COMMA = auto()
    MINUS = auto()
    PERIOD = auto()
    SLASH = auto()
    KEY_0 = auto()
    KEY_1 = auto()
    KEY_2 = auto()
    KEY_3 = auto()
    KEY_4 = auto()
    KEY_5 = auto()
    KEY_6 = auto()
    KEY_7 = auto()
    KEY_8 = auto()
    KEY_9 = auto()
    SEMICOLON = auto()
    EQUAL = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    LEFT_BRACKET = auto()
    BACKSLASH = auto()
    RIGHT_BRACKET = auto()
    GRAVE_ACCENT = auto()
    ESCAPE = auto()
    ENTER = auto()
    TAB = auto()
    BACKSPACE = auto()
    INSERT = auto()
    DELETE = auto()
    RIGHT = auto()
    LEFT = auto()
    DOWN = auto()
    UP = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    HOME = auto()
    END = auto()
    CAPS_LOCK = auto()
    SCROLL_LOCK = auto()
    NUM_LOCK = auto()
    PRINT_SCREEN = auto()
    PAUSE = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    F16 = auto()
    F17 = auto()
    F18 = auto()
    F19 = auto()
    F20 = auto()
    F21 = auto()
    F22 = auto()
    F23 = auto()
    F24 = auto()
    KP_0 = auto()
    KP_1 = auto()
    KP_2 = auto()
    KP_3 = auto()
    KP_4 = auto()
    KP_5 = auto()
    KP_6 = auto()
    KP_7 = auto()
    KP_8 = auto()
    KP_9 = auto()
    KP_DECIMAL = auto()
    KP_DIVIDE = auto()
    KP_MULTIPLY = auto()
    KP_SUBTRACT = auto()
    KP_ADD = auto()
    KP_ENTER = auto()
    LEFT_SHIFT = auto()
    LEFT_CONTROL = auto()
    LEFT_ALT = auto()
    LEFT_SUPER = auto()
    RIGHT_SHIFT = auto()
    RIGHT_CONTROL = auto()
    RIGHT_ALT = auto()
    RIGHT_SUPER = auto()
    MENU = auto()


class MouseButton(IntEnum):
    """Platform independent mouse button identifiers."""

    NONE = 0
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()
    BUTTON_1 = auto()
    BUTTON_2 = auto()
    BUTTON_3 = auto()
    BUTTON_4 = auto()
    BUTTON_5 = auto()


_DIGITS = [Keycode[f"KEY_{n}"] for n in range(10)]
_KEYPAD = [Keycode[f"KP_{n}"] for n in range(10)]
_FUNCTION = [Keycode[f"F{n}"] for n in range(1, 25)]
_LETTERS = {letter: Keycode[letter] for letter in ascii_uppercase}


def _x11_table() -> dict[int, Keycode]:
    table: dict[int, Keycode] = {0x09: Keycode.ESCAPE}
    # Top row: 1..9 then 0.
    table.update(zip(range(0x0A, 0x14), _DIGITS[1:] + _DIGITS[:1]))
    table.update(
        {
            0x14: Keycode.MINUS,
            0x15: Keycode.EQUAL,
            0x16: Keycode.BACKSPACE,
            0x17: Keycode.TAB,
        }
    )
    table.update(zip(range(0x18, 0x22), (_LETTERS[c] for c in "QWERTYUIOP")))
    table.update(
        {
            0x22: Keycode.LEFT_BRACKET,
            0x23: Keycode.RIGHT_BRACKET,
            0x24: Keycode.ENTER,
            0x25: Keycode.LEFT_CONTROL,
        }
    )
    table.update(zip(range(0x26, 0x2F), (_LETTERS[c] for c in "ASDFGHJKL")))
    table.update(
        {
            0x2F: Keycode.SEMICOLON,
            0x30: Keycode.APOSTROPHE,
            0x31: Keycode.GRAVE_ACCENT,
            0x32: Keycode.LEFT_SHIFT,
            0x33: Keycode.BACKSLASH,
        }
    )
    table.update(zip(range(0x34, 0x3B), (_LETTERS[c] for c in "ZXCVBNM")))
    table.update(
        {
            0x3B: Keycode.COMMA,
            0x3C: Keycode.PERIOD,
            0x3D: Keycode.SLASH,
            0x3E: Keycode.RIGHT_SHIFT,
            0x3F: Keycode.KP_MULTIPLY,
            0x40: Keycode.LEFT_ALT,
            0x41: Keycode.SPACE,
            0x42: Keycode.CAPS_LOCK,
        }
    )
    table.update(zip(range(0x43, 0x4D), _FUNCTION[:10]))
    table.update(
        {
            0x4D: Keycode.NUM_LOCK,
            0x4E: Keycode.SCROLL_LOCK,
            0x4F: Keycode.KP_7,
            0x50: Keycode.KP_8,
            0x51: Keycode.KP_9,
            0x52: Keycode.KP_SUBTRACT,
            0x53: Keycode.KP_4,
            0x54: Keycode.KP_5,
            0x55: Keycode.KP_6,
            0x56: Keycode.KP_ADD,
            0x57: Keycode.KP_1,
            0x58: Keycode.KP_2,
            0x59: Keycode.KP_3,
            0x5A: Keycode.KP_0,
            0x5B: Keycode.KP_DECIMAL,
            0x5F: Keycode.F11,
            0x60: Keycode.F12,
            0x68: Keycode.KP_ENTER,
            0x69: Keycode.RIGHT_CONTROL,
            0x6A: Keycode.KP_DIVIDE,
            0x6B: Keycode.PRINT_SCREEN,
            0x6C: Keycode.RIGHT_ALT,
            0x6D: Keycode.PAUSE,
            0x6E: Keycode.HOME,
            0x6F: Keycode.UP,
            0x70: Keycode.PAGE_UP,
            0x71: Keycode.LEFT,
            0x72: Keycode.RIGHT,
            0x73: Keycode.END,
            0x74: Keycode.DOWN,
            0x75: Keycode.PAGE_DOWN,
            0x76: Keycode.INSERT,
            0x77: Keycode.DELETE,
        }
    )
    table.update(zip(range(0x7B, 0x85), _FUNCTION[12:22]))
    table.update(
        {
            0x85: Keycode.LEFT_SUPER,
            0x86: Keycode.RIGHT_SUPER,
            0x87: Keycode.MENU,
        }
    )
    return table


# Windows virtual-key codes that need a key state lookup.
VK_SHIFT = 0x10
VK_CONTROL = 0x11


def _windows_table() -> dict[int, Keycode]:
    table: dict[int, Keycode] = dict(zip(range(0x30, 0x3A), _DIGITS))
    table.update(zip(range(0x41, 0x5B), _LETTERS.values()))
    table.update(
        {
            0x08: Keycode.BACKSPACE,
            0x09: Keycode.TAB,
            0x0D: Keycode.ENTER,
            0x12: Keycode.MENU,
            0x13: Keycode.PAUSE,
            0x14: Keycode.CAPS_LOCK,
            0x1B: Keycode.ESCAPE,
            0x20: Keycode.SPACE,
            0x21: Keycode.PAGE_UP,
            0x22: Keycode.PAGE_DOWN,
            0x23: Keycode.END,
            0x24: Keycode.HOME,
            0x25: Keycode.LEFT,
            0x26: Keycode.UP,
            0x27: Keycode.RIGHT,
            0x28: Keycode.DOWN,
            0x2C: Keycode.PRINT_SCREEN,
            0x2D: Keycode.INSERT,
            0x2E: Keycode.DELETE,
            0x5B: Keycode.LEFT_SUPER,
            0x5C: Keycode.RIGHT_SUPER,
            0x5D: Keycode.MENU,
        }
    )
    table.update(zip(range(0x60, 0x6A), _KEYPAD))
    table.update(
        {
            0x6A: Keycode.KP_MULTIPLY,
            0x6B: Keycode.KP_ADD,
            0x6C: Keycode.KP_DECIMAL,
            0x6D: Keycode.KP_SUBTRACT,
            0x6E: Keycode.KP_DECIMAL,
            0x6F: Keycode.KP_DIVIDE,
        }
    )
    table.update(zip(range(0x70, 0x88), _FUNCTION))
    table.update(
        {
            0x90: Keycode.NUM_LOCK,
            0x91: Keycode.SCROLL_LOCK,
            0xA0: Keycode.LEFT_SHIFT,
            0xA1: Keycode.RIGHT_SHIFT,
            0xA2: Keycode.LEFT_CONTROL,
            0xA3: Keycode.RIGHT_CONTROL,
            0xA4: Keycode.LEFT_ALT,
            0xA5: Keycode.RIGHT_ALT,
            0xBA: Keycode.SEMICOLON,
            0xBB: Keycode.EQUAL,
            0xBC: Keycode.COMMA,
            0xBD: Keycode.MINUS,
            0xBE: Keycode.PERIOD,
            0xBF: Keycode.SLASH,
            0xC0: Keycode.GRAVE_ACCENT,
            0xDB: Keycode.LEFT_BRACKET,
            0xDC: Keycode.BACKSLASH,
            0xDD: Keycode.RIGHT_BRACKET,
            0xDE: Keycode.APOSTROPHE,
        }
    )
    return table


def _web_table() -> dict[str, Keycode]:
    table: dict[str, Keycode] = {f"F{n}": _FUNCTION[n - 1] for n in range(1, 13)}
    table.update({f"Digit{n}": _DIGITS[n] for n in range(10)})
    table.update({f"Key{letter}": code for letter, code in _LETTERS.items()})
    table.update({f"Numpad{n}": _KEYPAD[n] for n in range(10)})
    table.update(
        {
            "Escape": Keycode.ESCAPE,
            "PrintScreen": Keycode.PRINT_SCREEN,
            "ScrollLock": Keycode.SCROLL_LOCK,
            "Pause": Keycode.PAUSE,
            "Backquote": Keycode.GRAVE_ACCENT,
            "Minus": Keycode.MINUS,
            "Equal": Keycode.EQUAL,
            "Backspace": Keycode.BACKSPACE,
            "Tab": Keycode.TAB,
            "BracketLeft": Keycode.LEFT_BRACKET,
            "BracketRight": Keycode.RIGHT_BRACKET,
            "Backslash": Keycode.BACKSLASH,
            "CapsLock": Keycode.CAPS_LOCK,
            "Semicolon": Keycode.SEMICOLON,
            "Quote": Keycode.APOSTROPHE,
            "Enter": Keycode.ENTER,
            "ShiftLeft": Keycode.LEFT_SHIFT,
            "Comma": Keycode.COMMA,
            "Period": Keycode.PERIOD,
            "Slash": Keycode.SLASH,
            "ShiftRight": Keycode.RIGHT_SHIFT,
            "ControlLeft": Keycode.LEFT_CONTROL,
            "MetaLeft": Keycode.LEFT_SUPER,
            "AltLeft": Keycode.LEFT_ALT,
            "Space": Keycode.SPACE,
            "AltRight": Keycode.RIGHT_ALT,
            "MetaRight": Keycode.RIGHT_SUPER,
            "ContextMenu": Keycode.MENU,
            "ControlRight": Keycode.RIGHT_CONTROL,
            "ArrowLeft": Keycode.LEFT,
            "ArrowUp": Keycode.UP,
            "ArrowRight": Keycode.RIGHT,
            "ArrowDown": Keycode.DOWN,
            "Insert": Keycode.INSERT,
            "Delete": Keycode.DELETE,
            "Home": Keycode.HOME,
            "End": Keycode.END,
            "PageUp": Keycode.PAGE_UP,
            "PageDown": Keycode.PAGE_DOWN,
            "NumLock": Keycode.NUM_LOCK,
            "NumpadDivide": Keycode.KP_DIVIDE,
            "NumpadMultiply": Keycode.KP_MULTIPLY,
            "NumpadSubtract": Keycode.KP_SUBTRACT,
            "NumpadAdd": Keycode.KP_ADD,
            "NumpadEnter": Keycode.KP_ENTER,
            "NumpadDecimal": Keycode.KP_DECIMAL,
        }
    )
    return table


_X11_KEYS = _x11_table()
_WINDOWS_KEYS = _windows_table()
_WEB_KEYS = _web_table()

_X11_BUTTONS = {
    1: MouseButton.BUTTON_1,
    2: MouseButton.BUTTON_2,
    3: MouseButton.BUTTON_3,
    4: MouseButton.BUTTON_4,
    5: MouseButton.BUTTON_5,
}

_WINDOWS_BUTTONS = {
    0x01: MouseButton.BUTTON_1,  # VK_LBUTTON
    0x02: MouseButton.BUTTON_2,  # VK_RBUTTON
    0x04: MouseButton.BUTTON_3,  # VK_MBUTTON
    0x05: MouseButton.BUTTON_4,  # VK_XBUTTON1
    0x06: MouseButton.BUTTON_5,  # VK_XBUTTON2
}

_WEB_BUTTONS = {
    0: MouseButton.LEFT,
    1: MouseButton.RIGHT,
    2: MouseButton.MIDDLE,
}


def x11_map_key(code: int) -> Keycode:
    """Map an X11 hardware keycode to a Keycode."""
    return _X11_KEYS.get(code, Keycode.UNKNOWN)


def x11_map_mbutton(button: int) -> MouseButton:
    """Map an X11 button number to a MouseButton."""
    return _X11_BUTTONS.get(button, MouseButton.NONE)


def windows_map_key(
    code: int, right_shift_down: bool = False, right_control_down: bool = False
) -> Keycode:
    """Map a Windows virtual-key code to a Keycode.

    The generic shift and control codes resolve to the right-hand key when
    that key is reported as held down, otherwise to the left-hand one.
    """
    if code == VK_SHIFT:
        return Keycode.RIGHT_SHIFT if right_shift_down else Keycode.LEFT_SHIFT
    if code == VK_CONTROL:
        return Keycode.RIGHT_CONTROL if right_control_down else Keycode.LEFT_CONTROL
    return _WINDOWS_KEYS.get(code, Keycode.UNKNOWN)


def windows_map_mbutton(button: int) -> MouseButton:
    """Map a Windows virtual-key mouse button code to a MouseButton."""
    return _WINDOWS_BUTTONS.get(button, MouseButton.NONE)


def web_map_key(code: str) -> Keycode:
    """Map a DOM KeyboardEvent.code string to a Keycode."""
    return _WEB_KEYS.get(code, Keycode.UNKNOWN)


def web_map_mbutton(button: int) -> MouseButton:
    """Map a DOM MouseEvent.button number to a MouseButton."""
    return _WEB_BUTTONS.get(button, MouseButton.NONE)