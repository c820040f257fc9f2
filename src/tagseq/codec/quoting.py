"""Delimiter quoting shared by the text encoder and decoder."""

from __future__ import annotations

from ..constants import ESCAPE, STRING_QUOTE, TAG_DELIM

_ESC = ord(ESCAPE)
_QUOTE = ord(STRING_QUOTE)
_TAG = ord(TAG_DELIM)


def quote(name: str, delim: str) -> str:
    """Wrap *name* in *delim*, escaping the delimiter and the escape char."""
    escaped = name.replace(ESCAPE, ESCAPE * 2).replace(delim, ESCAPE + delim)
    return f'{delim}{escaped}{delim}'


def payload_end(data: bytes | memoryview, start: int) -> tuple[int, bool]:
    """Find where a payload starting at *start* ends.

    A payload runs up to the next tag delimiter that is not inside a
    double-quoted section, or to the end of *data*. Returns
    ``(end, balanced)`` where ``balanced`` is false if a quote was left open.
    """
    in_quote = False
    pos = start
    n = len(data)
    while pos < n:
        b = data[pos]
        if in_quote:
            if b == _ESC:
                pos += 1
            elif b == _QUOTE:
                in_quote = False
        elif b == _QUOTE:
            in_quote = True
        elif b == _TAG:
            break
        pos += 1
    return min(pos, n), not in_quote
