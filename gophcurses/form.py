"""Gopher+ ASK forms: definition, parsing of ASK blocks and a curses editor."""

from __future__ import annotations

import curses
import enum
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from gophcurses.keys import CANCEL, KEY_DOWN, KEY_UP, NEWLINE
from gophcurses.lineedit import CANCELLED, edit_line

_TAB = ord("\t")
_SPACE = ord(" ")
_PAGE_MARGIN = 8


class ItemType(enum.Enum):
    """Kinds of control a form can hold."""

    UNINIT = 0
    LABEL = 1
    PROMPT = 2
    CHOICE = 3
    SELECT = 4
    PASSWD = 5
    LONG = 6
    FILENAME = 7


@dataclass
class Item:
    """One control of a form: a label, a text prompt or a list of choices."""

    type: ItemType = ItemType.UNINIT
    label: str = ""
    response: str = ""
    chooseitem: int = -1
    choices: list[str] = field(default_factory=list)

    @property
    def prompt(self) -> str:
        """The text shown in front of the control."""
        return self.label

    @property
    def editable(self) -> bool:
        return self.type != ItemType.LABEL

    @property
    def choice_text(self) -> str:
        """The text of the selected choice."""
        return self.choices[self.chooseitem]

    def push_choice(self, choice: str) -> None:
        """Append a value to the item's list of choices."""
        self.choices.append(choice)


@dataclass
class Form:
    """An ordered collection of form items."""

    items: list[Item] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Item:
        return self.items[index]

    def add_label(self, label: str) -> Item:
        """Add a line of text that cannot be edited."""
        item = Item(type=ItemType.LABEL, label=label)
        self.items.append(item)
        return item

    def add_prompt(self, prompt: Optional[str], default: Optional[str] = None) -> Item:
        """Add a one-line text field."""
        item = Item(
            type=ItemType.PROMPT,
            label=prompt if prompt is not None else "",
            response=default if default is not None else "",
        )
        self.items.append(item)
        return item

    def add_passwd(self, prompt: Optional[str], default: Optional[str] = None) -> Item:
        """Add a text field whose contents are hidden."""
        item = self.add_prompt(prompt, default)
        item.type = ItemType.PASSWD
        return item

    def add_filechoice(self, prompt: Optional[str], default: Optional[str] = None) -> Item:
        """Add a field that names a file."""
        item = self.add_prompt(prompt, default)
        item.type = ItemType.FILENAME
        return item

    def add_long(self, prompt: Optional[str], default: Optional[str] = None) -> Item:
        """Add a field for longer text."""
        item = self.add_prompt(prompt, default)
        item.type = ItemType.LONG
        return item

    def add_choice(self, prompt: Optional[str], choices: Sequence[str], default: int = 0) -> Item:
        """Add a field whose value is one of ``choices``."""
        item = self.add_prompt(prompt, "")
        item.chooseitem = default
        item.type = ItemType.CHOICE
        for choice in choices:
            item.push_choice(choice)
        return item

    def add_select(self, prompt: Optional[str], default: int = 0) -> Item:
        """Add a No/Yes field; ``default`` 1 selects Yes."""
        item = self.add_prompt(prompt, "")
        item.chooseitem = default
        item.push_choice("No")
        item.push_choice("Yes")
        item.type = ItemType.SELECT
        return item


def _add_ask_line(form: Form, line: str) -> None:
    colon = line.find(":")
    if colon == -1:
        form.add_label("")
        return

    kind = line[: colon + 1].lower()
    prompt = line[colon + 2:]
    prompt, tab, rest = prompt.partition("\t")
    default = rest if tab else None

    if kind.startswith("note:"):
        form.add_label(prompt)
    elif kind.startswith("choose:"):
        if default is None:
            raise ValueError(f"choice without any values: {line!r}")
        form.add_choice(prompt, default.split("\t"), 0)
    elif kind.startswith("select:"):
        chosen = 0
        head, sep, tail = prompt.rpartition(":")
        if sep:
            prompt = head
            if tail.startswith("1"):
                chosen = 1
        form.add_select(prompt, chosen)
    elif kind.startswith("askp:"):
        form.add_passwd(prompt, default)
    elif kind.startswith("askl:"):
        form.add_long(prompt, default)
    elif kind.startswith("choosef:"):
        form.add_filechoice(prompt, default)
    else:
        form.add_prompt(prompt, default)


def form_from_ask(lines: Sequence[str]) -> Form:
    """Build a form from the lines of a Gopher+ ASK block.

    Each line reads ``Kind: prompt<TAB>default``; lines without a colon
    become empty labels.
    """
    form = Form()
    for line in lines:
        _add_ask_line(form, line)
    return form


def form_responses(form: Form) -> list[str]:
    """Return the answers of a filled-in form in the order a server expects.

    A long field contributes a line count of "1" followed by its text; a
    No/Yes field contributes "0" or "1"; labels and file fields contribute
    nothing.
    """
    responses: list[str] = []
    for item in form:
        if item.type == ItemType.LONG:
            responses.append("1")
            responses.append(item.response)
        elif item.type == ItemType.SELECT:
            responses.append("0" if item.chooseitem == 0 else "1")
        elif item.type == ItemType.CHOICE:
            responses.append(item.choice_text)
        elif item.type in (ItemType.PROMPT, ItemType.PASSWD):
            responses.append(item.response)
    return responses


def _put(win, text: str) -> None:
    try:
        win.addstr(text)
    except curses.error:
        # Writing into the last cell of a window moves the cursor off it.
        pass


def _draw_page(win, items: Sequence[Item], prompt_width: int, cols: int) -> None:
    for row, item in enumerate(items):
        win.move(2 + row, 2)
        _put(win, item.prompt)
        if item.type == ItemType.LABEL:
            continue
        win.move(2 + row, prompt_width + 4)
        if item.type in (ItemType.CHOICE, ItemType.SELECT):
            _put(win, item.choice_text)
            continue
        win.standout()
        shown = "*" * len(item.response) if item.type == ItemType.PASSWD else item.response
        _put(win, shown)
        _put(win, " " * max(0, cols - 6 - (len(item.response) + prompt_width + 4)))
        win.standend()


def _draw_buttons(screen, win, row: int, cols: int) -> None:
    win.move(row, max(0, (cols - 63) // 2))
    screen.button(win, "Switch Fields: TAB", False)
    screen.button(win, "Cancel: ^G", False)
    _put(win, " ")
    screen.button(win, "Erase: ^U", False)
    _put(win, " ")
    screen.button(win, "Accept: Enter", False)


def _cycle_choice(screen, win, item: Item, row: int, hint_row: int,
                  prompt_width: int, cols: int) -> int:
    current = item.chooseitem
    win.move(hint_row, max(0, (cols - 22) // 2))
    screen.button(win, "Cycle Values: SPACE", False)
    win.move(row, prompt_width + len(item.choices[current]) + 4)
    win.refresh()

    while True:
        key = screen.getch(win)
        previous = current
        done = key != _SPACE
        if not done:
            current += 1
        if current == len(item.choices):
            current = 0
        win.move(row, prompt_width + 4)
        _put(win, " " * len(item.choices[previous]))
        win.move(row, prompt_width + 4)
        _put(win, item.choices[current])
        item.chooseitem = current
        win.refresh()
        if done:
            break

    win.move(hint_row, max(0, (cols - 22) // 2))
    _put(win, " " * 23)
    return key


def _fill_page(screen, win, items: Sequence[Item], prompt_width: int,
               maxlength: int, cols: int) -> bool:
    count = len(items)
    any_editable = any(item.editable for item in items)
    current = 0

    while True:
        item = items[current]
        row = 2 + current
        win.move(row, prompt_width + 4)
        win.refresh()

        if item.type in (ItemType.CHOICE, ItemType.SELECT):
            key = _cycle_choice(screen, win, item, row, 4 + count, prompt_width, cols)
        elif item.type == ItemType.LABEL:
            key = _TAB if any_editable else screen.getch(win)
        else:
            key, item.response = edit_line(
                screen, win, item.response, maxlength, item.type == ItemType.PASSWD
            )

        if key in (_TAB, KEY_DOWN):
            if any_editable:
                current = (current + 1) % count
                while not items[current].editable:
                    current = (current + 1) % count
        elif key == KEY_UP:
            if any_editable:
                current = (current - 1) % count
                while not items[current].editable:
                    current = (current - 1) % count
        elif key in (CANCEL, CANCELLED):
            return False
        elif key == NEWLINE:
            return True


def run_form(screen, title: Optional[str], form: Form) -> bool:
    """Let the user fill in ``form`` page by page.

    Answers are stored in the items.  Returns True when every page is
    accepted and False when the user cancels or the form is empty.
    """
    items = list(form)
    total = len(items)
    if total == 0:
        return False

    lines, cols = screen.window.getmaxyx()
    page_size = max(1, lines - _PAGE_MARGIN)
    pages = (total - 1) // page_size + 1
    prompt_width = max((len(item.prompt) for item in items if item.editable), default=0)
    maxlength = max(0, cols - 7 - (prompt_width + 1))
    width = cols - 2

    height = 6 + (page_size if pages > 1 else total)
    win = curses.newwin(height, width, max(0, (lines - height) // 2), 1)
    win.keypad(True)

    try:
        for page in range(pages):
            page_items = items[page * page_size:(page + 1) * page_size]
            count = len(page_items)

            win.standend()
            screen.box(win, 6 + count, width)
            if title is not None:
                screen.centerline(win, title, 0, width, True)
            _draw_page(win, page_items, prompt_width, cols)
            _draw_buttons(screen, win, 3 + count, cols)
            win.touchwin()
            win.refresh()

            if not _fill_page(screen, win, page_items, prompt_width, maxlength, cols):
                return False
            if page < pages - 1:
                win.clear()
        return True
    finally:
        del win


def ask_data(screen, title: Optional[str], form: Form) -> Optional[list[str]]:
    """Show the form and return its answers, or None if the user cancels."""
    if not run_form(screen, title, form):
        return None
    return form_responses(form)