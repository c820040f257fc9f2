"""Non-owning, read-only window over a sequence's residues.

A :class:`SeqView` borrows the residue buffer of a :class:`~tagseq.seq.Seq`
through a ``memoryview``. While the view is alive the owner cannot be
resized (Python raises ``BufferError``), but the caller is still responsible
for two things:

- a view must not be used after its owner is discarded or moved from;
- residues written through the owner while a view is alive are visible
  through the view.

Call :meth:`SeqView.release` (or use the view as a context manager) to end
the borrow, and :meth:`SeqView.to_seq` to take an owning copy.
"""

from __future__ import annotations

from typing import Any, Iterator, TYPE_CHECKING

from .exc import RangeError

if TYPE_CHECKING:
    from .seq import Seq


def as_residue_bytes(obj: Any) -> bytes | None:
    """Return the residues of *obj* as bytes, or ``None`` if not comparable."""
    if isinstance(obj, str):
        try:
            return obj.encode('latin-1')
        except UnicodeEncodeError:
            return None
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return bytes(obj)
    if isinstance(obj, SeqView):
        return obj.tobytes()
    residues = getattr(obj, '_sq', None)
    if isinstance(residues, bytearray):
        return bytes(residues)
    return None


class SeqView:
    """Borrowed ``[pos, pos + count)`` window over a residue buffer."""

    __slots__ = ('_mv',)

    def __init__(self, buffer: bytes | bytearray | memoryview = b'',
                 pos: int = 0, count: int | None = None) -> None:
        mv = buffer if isinstance(buffer, memoryview) else memoryview(buffer)
        if pos < 0 or pos > len(mv):
            raise RangeError(f"SeqView: pos {pos} > size {len(mv)}")
        end = len(mv) if count is None else min(pos + count, len(mv))
        self._mv = mv[pos:end]

    # ── Capacity ───────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._mv)

    @property
    def empty(self) -> bool:
        return len(self._mv) == 0

    # ── Element access ─────────────────────────────────────────────

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self._mv))
            if step != 1:
                raise ValueError("SeqView slices must be contiguous")
            return self.substr(start, max(stop - start, 0))
        try:
            return chr(self._mv[index])
        except IndexError:
            raise RangeError(f"SeqView: index {index} out of range") from None

    def at(self, pos: int) -> str:
        """Checked access: raise RangeError unless ``0 <= pos < len``."""
        if pos < 0 or pos >= len(self._mv):
            raise RangeError(f"SeqView: pos {pos} >= size {len(self._mv)}")
        return chr(self._mv[pos])

    def front(self) -> str:
        return self.at(0)

    def back(self) -> str:
        return self.at(len(self._mv) - 1)

    def __iter__(self) -> Iterator[str]:
        return (chr(b) for b in self._mv)

    def __reversed__(self) -> Iterator[str]:
        return (chr(b) for b in self._mv[::-1])

    # ── Modifiers ──────────────────────────────────────────────────

    def remove_prefix(self, n: int) -> None:
        if n > len(self._mv):
            raise RangeError("SeqView: remove_prefix overflow")
        self._mv = self._mv[n:]

    def remove_suffix(self, n: int) -> None:
        if n > len(self._mv):
            raise RangeError("SeqView: remove_suffix overflow")
        self._mv = self._mv[:len(self._mv) - n]

    # ── Operations ─────────────────────────────────────────────────

    def substr(self, pos: int, count: int | None = None) -> SeqView:
        """Return a narrower view; ``count`` is clamped to the end."""
        return SeqView(self._mv, pos, count)

    def tobytes(self) -> bytes:
        return self._mv.tobytes()

    def to_seq(self) -> Seq:
        """Copy the viewed residues into a new, owning sequence."""
        from .seq import Seq
        return Seq(self._mv.tobytes())

    def release(self) -> None:
        """End the borrow so the owner may be resized again."""
        self._mv.release()

    def __enter__(self) -> SeqView:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()

    # ── Comparison ─────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        other_bytes = as_residue_bytes(other)
        if other_bytes is None:
            return NotImplemented
        return self._mv.tobytes() == other_bytes

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self._mv.tobytes().decode('latin-1')

    def __repr__(self) -> str:
        return f"SeqView({str(self)!r})"
