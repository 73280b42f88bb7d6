"""Single-line text entry with editing keys, and simple yes/no prompts."""

from __future__ import annotations

import curses
from typing import Optional

from gophcurses.keys import BACKSPACE, CANCEL, KEY_LEFT, KEY_RIGHT, NEWLINE

# Returned in place of a key when the user cancels with ^G.
CANCELLED = -1

_CTRL_A = 0x01
_CTRL_E = 0x05
_CTRL_K = 0x0B
_CTRL_U = 0x15


def _printable(key: int) -> bool:
    return 32 <= key < 127


class LineEditor:
    """Editing state of a one-line input field.

    Typing overwrites the character under the cursor and extends the text
    at its end.  ``feed`` returns None while editing goes on, or the key
    that ended it: a newline, an unrecognised control key, the character
    that overflowed a word-wrapping field, or CANCELLED.
    """

    def __init__(
        self,
        text: str = "",
        maxlength: int = 80,
        hidden: bool = False,
        wordwrap: bool = False,
    ) -> None:
        if maxlength < 0:
            raise ValueError(f"maxlength must not be negative, got {maxlength}")
        self.text = text
        self.cursor = len(text)
        self.maxlength = maxlength
        self.hidden = hidden
        self.wordwrap = wordwrap
        self.bell = False

    @property
    def display(self) -> str:
        """The text as it is shown on screen."""
        return "*" * len(self.text) if self.hidden else self.text

    def feed(self, key: int) -> Optional[int]:
        """Apply one key; return the finishing key or None to keep editing."""
        self.bell = False

        if key == NEWLINE:
            return key
        if key == CANCEL:
            return CANCELLED
        if key == BACKSPACE:
            if self.cursor > 0:
                self.text = self.text[: self.cursor - 1] + self.text[self.cursor:]
                self.cursor -= 1
            return None
        if key == _CTRL_A:
            self.cursor = 0
            return None
        if key == _CTRL_E:
            self.cursor = len(self.text)
            return None
        if key == _CTRL_K:
            self.text = self.text[: self.cursor]
            return None
        if key == _CTRL_U:
            self.text = ""
            self.cursor = 0
            return None
        if key == KEY_LEFT:
            if self.cursor > 0:
                self.cursor -= 1
            return None
        if key == KEY_RIGHT:
            if self.cursor < len(self.text):
                self.cursor += 1
            return None

        if not _printable(key):
            return key

        if self.cursor >= self.maxlength:
            if self.wordwrap:
                self.text = self.text[: self.cursor]
                return key
            self.bell = True
            return None

        ch = chr(key)
        self.text = self.text[: self.cursor] + ch + self.text[self.cursor + 1:]
        self.cursor += 1
        return None


def _safe_addstr(win, text: str) -> None:
    try:
        win.addstr(text)
    except curses.error:
        # Writing into the last cell of a window moves the cursor off it.
        pass


def edit_line(
    screen,
    win,
    text: str = "",
    maxlength: int = 80,
    hidden: bool = False,
    wordwrap: bool = False,
) -> tuple[int, str]:
    """Let the user edit ``text`` at the cursor position of ``win``.

    Returns the key that ended editing (CANCELLED for ^G) and the text.
    """
    editor = LineEditor(text, maxlength, hidden, wordwrap)
    y, x = win.getyx()
    shown = 0

    def draw() -> None:
        nonlocal shown
        visible = editor.display
        win.move(y, x)
        _safe_addstr(win, visible + " " * max(0, shown - len(visible)))
        shown = len(visible)
        win.move(y, x + editor.cursor)
        win.refresh()

    win.standout()
    draw()
    try:
        while True:
            result = editor.feed(screen.getch(win))
            if editor.bell:
                screen.beep()
            draw()
            if result is not None:
                return result, editor.text
    finally:
        win.standend()
        win.refresh()


def get_yes_or_no(screen, prompt: str, default: str = "n") -> str:
    """Ask a yes/no question on the bottom line; return "y" or "n"."""
    win = screen.window
    lines, _ = win.getmaxyx()
    win.move(lines - 1, 0)
    win.addstr(prompt)
    win.clrtoeol()
    posy, posx = win.getyx()
    _safe_addstr(win, " ")

    answer = "y" if default == "y" else "n"
    win.move(posy, posx + 1)
    win.addstr("y" if answer == "y" else "n ")
    win.move(posy, posx + 1)
    win.refresh()

    while True:
        key = screen.getch(win)
        if key == ord("y"):
            shown, answer = "Yes", "y"
        elif key == ord("n"):
            shown, answer = "No ", "n"
        elif key in (NEWLINE, ord("\r")):
            return answer
        else:
            screen.beep()
            continue
        win.move(posy, posx + 1)
        win.addstr(shown)
        win.move(posy, posx + 1)
        win.refresh()
        return answer


def old_get_one_option(screen, prompt: str, response: str = "") -> tuple[int, str]:
    """Read a short answer of up to four characters on the bottom line."""
    win = screen.window
    lines, _ = win.getmaxyx()
    win.move(lines - 1, 0)
    win.addstr(prompt)
    win.standout()
    win.addstr("    ")
    win.standend()
    win.clrtoeol()
    win.move(lines - 1, len(prompt))
    win.refresh()
    return edit_line(screen, win, response, 4, False)