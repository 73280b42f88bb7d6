"""Pop-up dialogs: message boxes, multiple-choice lists and fill-in forms."""

from __future__ import annotations

import curses
import enum
from dataclasses import dataclass, field
from typing import Optional, Sequence

from gophcurses.keys import (
    CANCEL,
    KEY_DOWN,
    KEY_HELP,
    KEY_NPAGE,
    KEY_PPAGE,
    KEY_UP,
    NEWLINE,
)
from gophcurses.lineedit import CANCELLED, edit_line

DIALOG_CANCEL = "Cancel - ^G"
FORM_CANCEL = "[Help: ^-]  [Cancel: ^G] "

REQUEST_HELP = [
    "^G      : Cancel",
    "Tab, ^N : Move to next field",
    "^P      : Move to previous field",
    "^F      : Display next page",
    "^B      : Display previous page",
    "^-      : Help (^/ or ^7 may work)",
    "Enter   : Accept",
]

CHOICE_HELP = [
    "^G        : Cancel",
    "Down, ^N  : Move to next choice",
    "Up, ^P    : Move to previous choice",
    "Space, ^F : Display next page",
    "b, ^B     : Display previous page",
    "^         : Display first page",
    "$         : Display last page",
    "0-9       : Select a specific choice",
    "Enter     : Select current choice",
]

MAX_CHOICES = 99

_CTRL_B = 0x02
_CTRL_F = 0x06
_CTRL_N = 0x0E
_CTRL_P = 0x10
_CTRL_X = 0x18
_CTRL_UNDERSCORE = 0x1F
_TAB = ord("\t")


class RequestType(enum.IntEnum):
    """Kinds of line in a request form."""

    LABEL = 1
    PROMPT = 2
    PASSWD = 3
    CHOICE = 4
    ASKL = 5
    FNAME = 6


@dataclass
class RequestItem:
    """One line of a request form.

    ``stowage`` holds the text the user types; ``choices`` and
    ``chooseitem`` hold the values of a CHOICE line and the selected one.
    """

    prompt: Optional[str] = ""
    stowage: Optional[str] = ""
    thing: RequestType = RequestType.PROMPT
    chooseitem: int = 0
    choices: list[str] = field(default_factory=list)

    @property
    def editable(self) -> bool:
        return self.thing != RequestType.LABEL


class RequestNavigator:
    """Which field of a form is current and which fields are on screen.

    ``first`` and ``last`` are the indexes of the fields shown; labels are
    never made current.
    """

    def __init__(self, items: Sequence[RequestItem], page_size: int) -> None:
        if page_size < 1:
            raise ValueError(f"page size must be positive, got {page_size}")
        if not items:
            raise ValueError("a form needs at least one item")
        self.items = list(items)
        self.count = len(self.items)
        self.page_size = min(self.count, page_size)

        current = 0
        for index, item in enumerate(self.items):
            if not self._editable(index) and current == index:
                current += 1
        if current >= self.count:
            raise ValueError("a form needs at least one editable field")
        self.current = current
        self.first = 0
        self.last = min(self.first + self.page_size, self.count) - 1

    def _editable(self, index: int) -> bool:
        return self.items[index].thing != RequestType.LABEL

    def _skip_labels(self, index: int, step: int) -> int:
        """Step from ``index`` past labels, turning back at the ends."""
        probe = index
        while 0 <= probe < self.count and not self._editable(probe):
            probe += step
        if 0 <= probe < self.count:
            return probe
        probe = index
        while 0 <= probe < self.count and not self._editable(probe):
            probe -= step
        return probe

    def _show_from_start(self) -> None:
        self.first = 0
        self.last = min(self.first + self.page_size, self.count) - 1

    def _show_at_end(self) -> None:
        self.first = max(0, self.count - self.page_size)
        self.last = self.count - 1

    def next_field(self) -> None:
        """Move to the next editable field, wrapping to the first."""
        while True:
            self.current += 1
            if self.current > self.count - 1:
                self._show_from_start()
                self.current = self.first
            elif self.current > self.last:
                self.first += 1
                self.last += 1
            if self._editable(self.current):
                return

    def previous_field(self) -> None:
        """Move to the previous editable field, wrapping to the last."""
        while True:
            self.current -= 1
            if self.current < 0:
                self.current = self.count - 1
                self.first = max(0, self.count - self.page_size)
                self.last = self.current
            elif self.current < self.first:
                self.first -= 1
                self.last -= 1
            if self._editable(self.current):
                return

    def _scroll_down(self) -> None:
        self.first += 1
        self.last += 1
        if self.last > self.count - 1:
            self._show_from_start()
            self.current = self._skip_labels(self.first, 1)
        elif self._editable(self.last):
            self.current = self.last

    def _scroll_up(self) -> None:
        self.first -= 1
        self.last -= 1
        if self.first < 0:
            self._show_at_end()
            self.current = self._skip_labels(self.last, -1)
        elif self._editable(self.first):
            self.current = self.first

    def line_down(self) -> None:
        """Move to the next editable field on screen, or scroll one line."""
        if self.current != self.last:
            for index in range(self.current + 1, self.last + 1):
                if self._editable(index):
                    self.current = index
                    return
        self._scroll_down()

    def line_up(self) -> None:
        """Move to the previous editable field on screen, or scroll one line."""
        if self.current != self.first:
            for index in range(self.current - 1, self.first - 1, -1):
                if self._editable(index):
                    self.current = index
                    return
        self._scroll_up()

    def page_down(self) -> None:
        """Show the next page of fields."""
        if self.last == self.count - 1:
            self.current = self._skip_labels(self.last, -1)
            return
        self.last = min(self.last + self.page_size, self.count) - 1
        self.first = max(0, self.last - self.page_size + 1)
        if self.current < self.first:
            self.current = self._skip_labels(self.first, 1)

    def page_up(self) -> None:
        """Show the previous page of fields."""
        if self.first == 0:
            self.current = self._skip_labels(0, 1)
            return
        self.first = max(0, self.first - self.page_size + 1)
        self.last = min(self.first + self.page_size, self.count) - 1
        if self.current > self.last:
            self.current = self._skip_labels(self.last, -1)


class ChoiceNavigator:
    """Selection and scrolling state of a list of choices."""

    def __init__(self, count: int, page_size: int, default: Optional[int] = None) -> None:
        if count < 1:
            raise ValueError("there must be at least one choice")
        if page_size < 1:
            raise ValueError(f"page size must be positive, got {page_size}")
        if default is not None and default >= count:
            raise ValueError(f"default {default} is out of range")
        self.count = count
        self.page_size = min(count, page_size)
        self.current = default if default is not None and default > -1 else 0
        page = self.current // self.page_size
        self.last = min(page * self.page_size + self.page_size, count) - 1
        self.first = max(0, self.last - self.page_size + 1)

    def down(self) -> None:
        """Move down one choice, wrapping to the first."""
        if self.current == self.last:
            self.first += 1
            self.last += 1
            if self.last > self.count - 1:
                self.current = 0
                self.first = 0
                self.last = min(self.page_size, self.count) - 1
                return
        self.current += 1

    def up(self) -> None:
        """Move up one choice, wrapping to the last."""
        if self.current == self.first:
            self.first -= 1
            self.last -= 1
            if self.first < 0:
                self.current = self.count - 1
                self.first = max(0, self.count - self.page_size)
                self.last = self.current
                return
        self.current -= 1

    def page_down(self) -> None:
        """Show the next page of choices."""
        if self.last == self.count - 1:
            self.current = self.last
            return
        self.last = min(self.last + self.page_size, self.count) - 1
        self.first = max(0, self.last - self.page_size + 1)
        self.current = max(self.first, self.current)

    def page_up(self) -> None:
        """Show the previous page of choices."""
        if self.first == 0:
            self.current = self.first
            return
        self.first = max(0, self.first - self.page_size + 1)
        self.last = min(self.first + self.page_size, self.count) - 1
        self.current = min(self.current, self.last)

    def top(self) -> None:
        """Go to the first choice."""
        self.first = 0
        self.last = min(self.page_size, self.count) - 1
        self.current = 0

    def bottom(self) -> None:
        """Go to the last choice."""
        self.last = self.count - 1
        self.first = max(0, self.last - self.page_size + 1)
        self.current = self.last


def _put(win, text: str) -> None:
    try:
        win.addstr(text)
    except curses.error:
        # Writing into the last cell of a window moves the cursor off it.
        pass


def _new_window(height: int, width: int, y: int, x: int):
    win = curses.newwin(height, width, max(0, y), max(0, x))
    win.keypad(True)
    return win


def dialog(screen, title: Optional[str], message: Sequence[str]) -> bool:
    """Show a message box; return True for OK and False for cancel."""
    lines, cols = screen.window.getmaxyx()
    height = len(message)
    length = max((len(line) for line in message), default=0)

    width = max(31, length + 6)
    width = max(width, len(title or "") + 6)
    width = min(width, cols - 2)

    win = _new_window(5 + height, width, (lines - (5 + height)) // 2, (cols - width) // 2)
    screen.box(win, 5 + height, width)

    for row, line in enumerate(message):
        win.move(2 + row, (width - length) // 2)
        _put(win, line[:length])

    if title is not None:
        screen.centerline(win, title, 0, width, True)

    win.move(3 + height, max(0, width - 28))
    screen.button(win, DIALOG_CANCEL, False)
    _put(win, " ")
    screen.button(win, "OK: Enter", False)
    win.refresh()

    key = screen.getch(win)
    del win
    return key not in (CANCEL, CANCELLED)


def choice(
    screen,
    title: Optional[str],
    choices: Sequence[str],
    prompt: str,
    default: Optional[int] = None,
) -> Optional[int]:
    """Let the user pick one of ``choices``; return its index, or None if
    the user cancels or there is nothing to choose from."""
    count = len(choices)
    if count == 0:
        return None
    if count > MAX_CHOICES:
        raise ValueError(f"more than {MAX_CHOICES} choices")

    lines, cols = screen.window.getmaxyx()
    nav = ChoiceNavigator(count, max(1, lines - 6), default)
    per_page = nav.page_size
    win_lines = per_page + 6

    widest = max(
        len(text) + 10 if index == default else len(text)
        for index, text in enumerate(choices)
    )
    width = max(len(prompt) + 17, widest + 15)
    width = max(len(title or "") + 8, width)
    width = max(29, width)
    width = min(cols - 2, width)

    win = _new_window(win_lines, width, (lines - win_lines) // 2, (cols - width) // 2)
    screen.box(win, win_lines, width)
    if title is not None:
        screen.centerline(win, title, 0, width, True)

    win.move(per_page + 3, 3)
    _put(win, f"{prompt} (1-{count}): ")
    win.move(per_page + 4, 3)
    screen.button(win, "Help: ?", False)
    _put(win, "  ")
    screen.button(win, DIALOG_CANCEL, False)

    while True:
        for row, index in enumerate(range(nav.first, nav.last + 1)):
            win.move(2 + row, 8)
            _put(win, " " * (width - 10))
            win.move(2 + row, 8)
            _put(win, f"{index + 1:2d}.")
            win.move(2 + row, 12)
            _put(win, choices[index])
            if index == default:
                _put(win, " (default)")

        cursor_line = nav.current - nav.first + 2
        win.move(cursor_line, 3)
        _put(win, "-->")
        win.refresh()

        key = screen.getch(win)
        if key in (_CTRL_N, KEY_DOWN):
            nav.down()
        elif key in (_CTRL_P, KEY_UP):
            nav.up()
        elif key in (_CTRL_F, ord(" "), ord("+"), KEY_NPAGE):
            nav.page_down()
        elif key in (_CTRL_B, ord("b"), ord("-"), KEY_PPAGE):
            nav.page_up()
        elif key == ord("^"):
            nav.top()
        elif key == ord("$"):
            nav.bottom()
        elif key in (_CTRL_UNDERSCORE, KEY_HELP, ord("h"), ord("?")):
            dialog(screen, "Choice Dialog Help", CHOICE_HELP)
            win.touchwin()
        elif ord("0") <= key <= ord("9"):
            col = len(prompt) + (11 if count < 10 else 12)
            row = per_page + 3
            win.move(row, col)
            end, text = edit_line(screen, win, chr(key), 1 if count < 10 else 2, False)
            number = int(text) if text.isdigit() else 0
            if end == NEWLINE and 0 < number <= count:
                del win
                return number - 1
            win.move(row, col)
            _put(win, "  ")
            if end != CANCELLED:
                screen.beep()
        elif key in (CANCEL, CANCELLED):
            del win
            return None
        elif key in (NEWLINE, _CTRL_X):
            del win
            return nav.current
        else:
            screen.beep()

        win.move(cursor_line, 3)
        _put(win, "   ")


def _draw_labels(win, win_lines: int, item: RequestItem) -> None:
    win.move(win_lines - 2, 2)
    _put(win, FORM_CANCEL)
    if item.thing == RequestType.CHOICE:
        _put(win, "  [Cycle Values: Space]  [List Values: l]")
    else:
        _put(win, " [Accept: Enter] ")
        _put(win, " [Next field: TAB] ")
        _put(win, "           ")


def _draw_fields(win, items, nav, width: int, prompt_width: int) -> None:
    for row, index in enumerate(range(nav.first, nav.last + 1)):
        item = items[index]
        win.move(2 + row, 2)
        if item.prompt:
            _put(win, item.prompt)
            _put(win, " " * max(0, width - len(item.prompt) - 4))

        stowage = item.stowage or ""
        if item.thing == RequestType.LABEL:
            continue
        if item.thing == RequestType.CHOICE:
            win.move(2 + row, prompt_width + 4)
            _put(win, item.choices[item.chooseitem])
        elif item.thing == RequestType.ASKL:
            win.move(2 + row, 2)
            win.standout()
            _put(win, stowage + " " * max(0, width - len(stowage) - 4))
            win.standend()
        else:
            win.move(2 + row, prompt_width + 4)
            win.standout()
            shown = "*" * len(stowage) if item.thing == RequestType.PASSWD else stowage
            _put(win, shown + " " * max(0, width - len(stowage) - prompt_width - 6))
            win.standend()


def _cycle_choice(screen, win, item: RequestItem, row: int, prompt_width: int) -> int:
    current = item.chooseitem
    win.move(row, prompt_width + len(item.choices[current]) + 4)
    win.refresh()
    while True:
        key = screen.getch(win)
        win.move(row, prompt_width + 4)
        _put(win, " " * len(item.choices[current]))
        done = False
        if key == ord(" "):
            current += 1
        elif key == ord("l"):
            picked = choice(screen, item.prompt, item.choices, "Select an item", item.chooseitem)
            win.touchwin()
            if picked is not None:
                current = picked
        else:
            done = True
        if current >= len(item.choices):
            current = 0
        win.move(row, prompt_width + 4)
        _put(win, item.choices[current])
        item.chooseitem = current
        win.refresh()
        if done:
            return key


def requester(screen, title: Optional[str], items: Sequence[RequestItem]) -> bool:
    """Let the user fill in a form; the answers are left in the items'
    ``stowage`` and ``chooseitem``.  Returns True when the form is accepted
    and False when it is cancelled."""
    count = len(items)
    if count == 0:
        return False

    prompt_width = max(
        (len(item.prompt) for item in items if item.editable and item.prompt),
        default=0,
    )
    lines, cols = screen.window.getmaxyx()
    width = cols - 1
    nav = RequestNavigator(items, max(1, lines - 5))

    single = count == 1 and items[0].thing == RequestType.PROMPT
    if single:
        win_lines = 8
        maxlength = width - 4
    else:
        win_lines = nav.page_size + 5
        maxlength = width - prompt_width - 6

    win = _new_window(win_lines, width, (lines - win_lines) // 2, 0)
    screen.box(win, win_lines, width)
    if title is not None:
        screen.centerline(win, title, 0, width, True)

    while True:
        item = items[nav.current]
        _draw_labels(win, win_lines, item)

        if single:
            win.move(2, 2)
            _put(win, item.prompt or "")
            item.stowage = (item.stowage or "")[:maxlength]
            win.move(4, 2)
            win.standout()
            _put(win, item.stowage + " " * max(0, width - 4 - len(item.stowage)))
            win.standend()
        else:
            _draw_fields(win, items, nav, width, prompt_width)

        row = 2 + nav.current - nav.first
        if count == 1:
            win.move(4, 2)
        else:
            win.move(row, prompt_width + 4)
        wordwrap = item.thing == RequestType.ASKL
        if wordwrap:
            win.move(row, 2)
        win.refresh()

        if item.thing == RequestType.CHOICE:
            key = _cycle_choice(screen, win, item, row, prompt_width)
        else:
            limit = cols - 6 if wordwrap else maxlength
            key, item.stowage = edit_line(
                screen,
                win,
                item.stowage or "",
                max(0, limit),
                item.thing == RequestType.PASSWD,
                wordwrap,
            )

        if key in (_CTRL_N, _TAB):
            nav.next_field()
        elif key == _CTRL_P:
            nav.previous_field()
        elif key == KEY_DOWN:
            nav.line_down()
        elif key == KEY_UP:
            nav.line_up()
        elif key in (_CTRL_F, KEY_NPAGE):
            nav.page_down()
        elif key in (_CTRL_B, KEY_PPAGE):
            nav.page_up()
        elif key in (_CTRL_UNDERSCORE, KEY_HELP):
            dialog(screen, "Form Help", REQUEST_HELP)
            win.touchwin()
        elif key in (CANCEL, CANCELLED):
            del win
            return False
        elif key == NEWLINE:
            del win
            return True
        elif wordwrap and 32 <= key < 127:
            following = nav.current + 1
            if following >= count or items[following].thing != RequestType.ASKL:
                screen.beep()
                continue
            text = item.stowage or ""
            space = text.rfind(" ")
            if space != -1:
                items[following].stowage = text[space + 1:] + chr(key)
                item.stowage = text[:space]
            nav.current = following
            if nav.current > nav.last:
                nav.first += 1
                nav.last += 1


def request(
    screen,
    title: Optional[str],
    prompts: Sequence[str],
    stowages: Sequence[Optional[str]],
) -> Optional[list[Optional[str]]]:
    """Show a form of prompts; a prompt whose stowage is None is a label.

    Returns the edited stowages, or None if the user cancels.
    """
    items = [
        RequestItem(
            prompt=prompt,
            stowage=stowage,
            thing=RequestType.LABEL if stowage is None else RequestType.PROMPT,
        )
        for prompt, stowage in zip(prompts, stowages)
    ]
    if not requester(screen, title, items):
        return None
    return [item.stowage for item in items]


def get_one_option(screen, title: Optional[str], prompt: str, response: str = "") -> Optional[str]:
    """Ask for one line of text; return it, or None if the user cancels."""
    item = RequestItem(prompt=prompt, stowage=response, thing=RequestType.PROMPT)
    accepted = requester(screen, title, [item])
    screen.window.refresh()
    return item.stowage if accepted else None