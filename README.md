# gophcurses

Building blocks for the terminal side of a Gopher client, on top of the
standard `curses` module: keystroke decoding, an editable input line, pop-up
dialogs, multi-field request forms and Gopher+ ASK forms. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `gophcurses.waitstatus`: `wait_status(status)` reduces a raw `waitpid()`
  status word to the child's exit code, the number of the signal that killed
  it, or 0 (for example when it is stopped).
- `gophcurses.keys`: `read_key(getch)` reads one keystroke through a
  `getch` callable. VT100/VT200 escape sequences become the `KEY_*` codes
  defined in the module, every form of Return becomes a newline and every form
  of backspace becomes `\b`. ^L, ^R and ^W give `REDRAW`, an interrupt gives
  `CANCEL`, and a read error (-1) raises `TerminalClosed`.
- `gophcurses.lineedit`: `LineEditor` holds the state of a one-line input
  field with the keys ^A, ^E, ^K, ^U, ^G, backspace and the left/right arrows;
  `feed(key)` returns `None` while editing goes on, or the key that ended it
  (`CANCELLED` for ^G). `edit_line`, `get_yes_or_no` and `old_get_one_option`
  drive it on screen.
- `gophcurses.dialogs`: `dialog` (message box), `choice` (pick one of up to
  99 items), `requester` and `request` (fill-in forms) and `get_one_option`
  (one line of text). The paging and field-selection logic lives in
  `RequestNavigator` and `ChoiceNavigator`, which need no terminal; form lines
  are `RequestItem`s of a `RequestType`.
- `gophcurses.form`: `Form` and `Item` (of an `ItemType`) model Gopher+ ASK
  blocks. `form_from_ask(lines)` builds a form, `form_responses(form)` gives
  the answers in the order a server expects, `run_form` lets the user fill the
  form in page by page and `ask_data` does both.

## Examples

Parsing an ASK block and collecting its default answers:

```python
from gophcurses.form import form_from_ask, form_responses

form = form_from_ask([
    "Ask: Your name\tAnonymous",
    "Select: Subscribe:1",
    "Choose: Colour\tred\tgreen\tblue",
])
print(form_responses(form))   # ['Anonymous', '1', 'red']
```

Editing a line without a terminal:

```python
from gophcurses.keys import BACKSPACE, NEWLINE
from gophcurses.lineedit import LineEditor

editor = LineEditor("ab", maxlength=4)
editor.feed(ord("c"))          # text is now "abc"
editor.feed(BACKSPACE)         # text is now "ab"
print(editor.feed(NEWLINE))    # 10: editing is finished
```

Decoding an escape sequence:

```python
from gophcurses.keys import KEY_UP, read_key

keys = iter([27, ord("["), ord("A")])
assert read_key(lambda: next(keys)) == KEY_UP
```

## The screen object

The on-screen functions (`edit_line`, `get_yes_or_no`, `old_get_one_option`,
`dialog`, `choice`, `requester`, `request`, `get_one_option`, `run_form`,
`ask_data`) take a `screen` argument that you supply. It must provide:

- `window`: the main curses window;
- `getch(win)`: read one key from `win`, normalised as `read_key` does;
- `beep()`: sound the bell;
- `box(win, height, width)`: draw a border round `win`;
- `centerline(win, text, y, width, bright)`: write a centred title;
- `button(win, label, bright)`: write a bracketed button label.

## What this package does not do

It is not a complete Gopher client. It ships no implementation of the screen
object above, no terminal set-up or line-drawing character selection, no
configuration of root servers or helper commands, and no network code: it
neither fetches Gopher menus nor queries CSO (qi/ph) name servers. Those are
left to the program that uses it.