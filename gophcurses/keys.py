"""Keyboard input: escape-sequence decoding and normalisation of key codes."""

from __future__ import annotations

from typing import Callable

# Key codes, numbered as curses numbers them.
KEY_DOWN = 0o402
KEY_UP = 0o403
KEY_LEFT = 0o404
KEY_RIGHT = 0o405
KEY_BACKSPACE = 0o407
KEY_NPAGE = 0o522
KEY_PPAGE = 0o523
KEY_ENTER = 0o527
KEY_HELP = 0o553

ESCAPE = 27
CANCEL = 0x07
BACKSPACE = ord("\b")
NEWLINE = ord("\n")

# Returned for ^L, ^R and ^W: the caller should repaint the screen.
REDRAW = -2

_REDRAW_KEYS = frozenset({12, 18, 23})
_BACKSPACE_KEYS = frozenset({0x08, 0x7F, KEY_BACKSPACE})
_ARROWS = {
    ord("A"): KEY_UP,
    ord("B"): KEY_DOWN,
    ord("C"): KEY_RIGHT,
    ord("D"): KEY_LEFT,
}


class TerminalClosed(EOFError):
    """Raised when reading from the terminal fails, usually because it closed."""


def _escape_sequence(getch: Callable[[], int]) -> int:
    """Decode the keys that follow an ESC; return ESCAPE if unrecognised."""
    b = getch()
    a = getch() if b in (ord("["), ord("O")) else b

    if a in _ARROWS:
        return _ARROWS[a]
    if a == ord("M"):  # vt100 Enter
        return KEY_ENTER if b == ord("O") else ESCAPE
    if a == ord("Q"):  # vt100 Help
        return KEY_HELP if b == ord("O") else ESCAPE

    code = ESCAPE
    if a == ord("2"):
        if b == ord("["):
            b = getch()
        if b == ord("8"):  # vt200 Help
            if getch() == ord("~"):
                code = KEY_HELP
        elif b == ord("9"):  # vt200 Do
            if getch() == ord("~"):
                code = KEY_ENTER
        # A "2" sequence goes on to be checked as a previous-screen key.
        if b == ord("[") and getch() == ord("~"):
            code = KEY_PPAGE
    elif a == ord("5"):  # vt200 previous screen
        if b == ord("[") and getch() == ord("~"):
            code = KEY_PPAGE
    elif a == ord("6"):  # vt200 next screen
        if b == ord("[") and getch() == ord("~"):
            code = KEY_NPAGE
    return code


def _normalise(code: int) -> int:
    if code in (KEY_ENTER, ord("\r")):
        code = NEWLINE
    if code in _BACKSPACE_KEYS:
        return BACKSPACE
    return code


def read_key(getch: Callable[[], int]) -> int:
    """Read one key through ``getch`` and return its normalised code.

    Escape sequences become KEY_* codes, every form of Return becomes a
    newline and every form of backspace becomes ``\\b``.  Redraw keys give
    REDRAW; an interrupt gives CANCEL (^G).  A read error (-1) raises
    TerminalClosed.
    """
    try:
        code = getch()
        if code == -1:
            raise TerminalClosed("error reading from the terminal")
        if code in _REDRAW_KEYS:
            return REDRAW
        if code == ESCAPE:
            code = _escape_sequence(getch)
    except KeyboardInterrupt:
        return CANCEL
    return _normalise(code)