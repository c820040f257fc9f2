"""Phred quality character -> error probability lookup tables."""

from __future__ import annotations


def _phred_table(offset: int) -> tuple[float, ...]:
    # P = 10 ^ (-Q / 10) for printable codes from the offset up to '~'
    table = [1.0] * 256
    for code in range(offset, 127):
        table[code] = 10.0 ** (-(code - offset) / 10.0)
    return tuple(table)


PHRED33 = _phred_table(33)
PHRED64 = _phred_table(64)

_TABLES = {33: PHRED33, 64: PHRED64}


def error_probability(ch: str | int, offset: int = 33) -> float:
    """Return the error probability encoded by one quality character."""
    try:
        table = _TABLES[offset]
    except KeyError:
        raise ValueError(f"Unsupported Phred offset {offset}; use 33 or 64") from None
    code = ord(ch) if isinstance(ch, str) else ch
    return table[code & 0xFF]
