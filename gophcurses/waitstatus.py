"""Decoding of raw process status words as returned by waitpid()."""

from __future__ import annotations

_STOPPED = 0x7F


def wait_status(status: int) -> int:
    """Return the exit code of a normally exited child, the signal number of
    a child killed by a signal, and 0 otherwise (for example when stopped)."""
    if not isinstance(status, int):
        raise TypeError(f"status must be an int, not {type(status).__name__}")
    low = status & 0x7F
    if low == 0:
        return (status >> 8) & 0xFF
    if low != _STOPPED:
        return low
    return 0