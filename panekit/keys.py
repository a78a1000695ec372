"""Names of keyboard keys as reported in key events."""

from __future__ import annotations

from enum import Enum


class KeyName(str, Enum):
    """The name of a key that has been pressed."""

    ESCAPE = "Escape"
    RETURN = "Return"
    TAB = "Tab"
    BACKSPACE = "BackSpace"
    INSERT = "Insert"
    DELETE = "Delete"
    RIGHT = "Right"
    LEFT = "Left"
    DOWN = "Down"
    UP = "Up"
    PAGE_UP = "Prior"
    PAGE_DOWN = "Next"
    HOME = "Home"
    END = "End"

    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"

    # The enter key on the keypad, distinct from RETURN on the main keyboard.
    ENTER = "KP_Enter"

    KEY_0 = "0"
    KEY_1 = "1"
    KEY_2 = "2"
    KEY_3 = "3"
    KEY_4 = "4"
    KEY_5 = "5"
    KEY_6 = "6"
    KEY_7 = "7"
    KEY_8 = "8"
    KEY_9 = "9"

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"