"""Keystroke decoding, line editing, dialogs and Gopher+ ASK forms for curses."""

__version__ = "2.3.1"
__all__ = ["waitstatus", "keys", "lineedit", "dialogs", "form"]