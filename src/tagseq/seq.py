"""Residue sequence with lazily-allocated tagged data.

Usage::

    from tagseq import Seq

    s = Seq("ACGT")
    s["score"] = 33
    s.has("score")          # True
    s.subseq(1, 2)          # Seq('CG')
    s == "ACGT"             # tags never take part in equality
"""

from __future__ import annotations

import copy
import sys
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from .constants import DEFAULT_FILL, ID_TAG, DESC_TAG, QUALITY_TAG
from .exc import RangeError, TagNotFoundError
from .view import SeqView, as_residue_bytes

# rough per-entry cost of a dict slot plus key object
_TAG_OVERHEAD = 64

_EMPTY_TAGS: Mapping[str, Any] = MappingProxyType({})

__all__ = ['Seq', 'ID_TAG', 'DESC_TAG', 'QUALITY_TAG']


def _residue_byte(value: Any) -> int:
    """Coerce a one-character string or byte int into a residue."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"residue must be a single character, got {value!r}")
        code = ord(value)
    elif isinstance(value, int):
        code = value
    else:
        raise TypeError(f"residue must be str or int, not {type(value).__name__}")
    if not 0 <= code <= 0xFF:
        raise ValueError(f"residue out of byte range: {value!r}")
    return code


def _to_buffer(data: Any) -> bytearray:
    if data is None:
        return bytearray()
    if isinstance(data, str):
        return bytearray(data.encode('latin-1'))
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytearray(data)
    if isinstance(data, SeqView):
        return bytearray(data.tobytes())
    if isinstance(data, Seq):
        return bytearray(data._sq)
    return bytearray(_residue_byte(item) for item in data)


class Seq:
    """A residue buffer coupled with a name -> value map of tagged data.

    Residues are single bytes exposed as one-character strings; they are
    never checked against an alphabet. The tag map is only allocated on
    the first tag write, and takes no part in equality.
    """

    __slots__ = ('_sq', '_td')

    def __init__(self, data: str | bytes | Iterable[Any] | None = None) -> None:
        self._sq: bytearray = _to_buffer(data)
        self._td: dict[str, Any] | None = None

    @classmethod
    def filled(cls, count: int, fill: str | int = DEFAULT_FILL) -> Seq:
        """Return a sequence of *count* copies of *fill*."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        s = cls()
        s._sq = bytearray([_residue_byte(fill)]) * count
        return s

    # ── Copy / move ────────────────────────────────────────────────

    def copy(self) -> Seq:
        """Deep copy: residues and every tagged value."""
        return copy.deepcopy(self)

    def __copy__(self) -> Seq:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Seq:
        other = type(self)()
        memo[id(self)] = other
        other._sq = bytearray(self._sq)
        if self._td is not None:
            other._td = copy.deepcopy(self._td, memo)
        return other

    def move(self) -> Seq:
        """Transfer residues and tags to a new sequence; this one is emptied."""
        other = type(self)()
        other._sq, self._sq = self._sq, bytearray()
        other._td, self._td = self._td, None
        return other

    # ── Capacity ───────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._sq)

    @property
    def empty(self) -> bool:
        """True when there are no residues and no tags."""
        return not self._sq and not self._td

    def __bool__(self) -> bool:
        return not self.empty

    def memory_usage(self) -> int:
        """Estimate bytes held by the buffer and tag map (diagnostic only)."""
        total = sys.getsizeof(self._sq)
        if self._td is not None:
            total += sys.getsizeof(self._td)
            for tag, value in self._td.items():
                total += _TAG_OVERHEAD + len(tag) + sys.getsizeof(value)
        return total

    # ── Residues and tags ──────────────────────────────────────────

    def __getitem__(self, key: int | slice | str) -> Any:
        if isinstance(key, str):
            if self._td is None or key not in self._td:
                raise TagNotFoundError(key)
            return self._td[key]
        if isinstance(key, slice):
            return type(self)(self._sq[key])
        try:
            return chr(self._sq[key])
        except IndexError:
            raise RangeError(f"Seq: index {key} out of range for size {len(self._sq)}") from None

    def __setitem__(self, key: int | str, value: Any) -> None:
        if isinstance(key, str):
            if self._td is None:
                self._td = {}
            self._td[key] = value
            return
        try:
            self._sq[key] = _residue_byte(value)
        except IndexError:
            raise RangeError(f"Seq: index {key} out of range for size {len(self._sq)}") from None

    def __delitem__(self, key: str) -> None:
        if not isinstance(key, str):
            raise TypeError("only tags can be deleted; use slicing to drop residues")
        if self._td is None or key not in self._td:
            raise TagNotFoundError(key)
        del self._td[key]

    def subseq(self, pos: int, count: int | None = None) -> Seq:
        """Residues in ``[pos, pos + count)`` as a new sequence without tags.

        ``count`` past the end is clamped; ``pos`` past the end raises
        :class:`~tagseq.exc.RangeError`.
        """
        size = len(self._sq)
        if pos < 0 or pos > size:
            raise RangeError(f"Seq: pos {pos} > size {size}")
        end = size if count is None or count > size - pos else pos + count
        return type(self)(self._sq[pos:end])

    def view(self, pos: int = 0, count: int | None = None) -> SeqView:
        """Borrow the residues without copying; see :mod:`tagseq.view`."""
        return SeqView(self._sq, pos, count)

    def __iter__(self) -> Iterator[str]:
        return (chr(b) for b in self._sq)

    def __reversed__(self) -> Iterator[str]:
        return (chr(b) for b in reversed(self._sq))

    # ── Tagged data ────────────────────────────────────────────────

    def has(self, tag: str) -> bool:
        return self._td is not None and tag in self._td

    def get(self, tag: str, default: Any = None) -> Any:
        if self._td is None:
            return default
        return self._td.get(tag, default)

    def setdefault(self, tag: str, default: Any = None) -> Any:
        """Return the value for *tag*, creating it with *default* if missing."""
        if self._td is None:
            self._td = {}
        return self._td.setdefault(tag, default)

    @property
    def tags(self) -> Mapping[str, Any]:
        """Read-only view of the tag map."""
        if self._td is None:
            return _EMPTY_TAGS
        return MappingProxyType(self._td)

    # ── Comparison / conversion ────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        other_bytes = as_residue_bytes(other)
        if other_bytes is None:
            return NotImplemented
        return self._sq == other_bytes

    __hash__ = None  # type: ignore[assignment]

    def __bytes__(self) -> bytes:
        return bytes(self._sq)

    def __str__(self) -> str:
        return self._sq.decode('latin-1')

    def __repr__(self) -> str:
        text = str(self)
        if len(text) > 40:
            text = text[:37] + '...'
        if not self._td:
            return f"Seq({text!r})"
        return f"Seq({text!r}, tags={sorted(self._td)!r})"

    # ── File I/O ───────────────────────────────────────────────────

    @classmethod
    def load(cls, source: str, key: int | str) -> Seq:
        """Read one FASTA/FASTQ record; see :func:`tagseq.io.read`."""
        from .io.fastaqz import read
        return read(source, key)

    def save(self, destination: str, **kwargs: Any) -> None:
        """Write as FASTA/FASTQ; see :func:`tagseq.io.save`."""
        from .io.fastaqz import save
        save(destination, self, **kwargs)
