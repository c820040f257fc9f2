"""Deserialize the text format back into a Seq.

Uses memoryview for zero-copy slicing.
"""

from __future__ import annotations

from typing import Any, BinaryIO

from ..constants import COUNT_SEP, ESCAPE, TAG_DELIM, TYPE_DELIM
from ..exc import DeserializationError
from ..seq import Seq
from ..types.base import TypeRegistry, default_registry
from .quoting import payload_end

_ESC = ord(ESCAPE)
_SEP = ord(COUNT_SEP)
_TAG = ord(TAG_DELIM)
_WHITESPACE = b' \t\r\n'


class TextDecoder:
    """Decode sequences using the readers of a :class:`TypeRegistry`."""

    def __init__(self, registry: TypeRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry
        self._data: memoryview = memoryview(b'')
        self._pos: int = 0

    def decode(self, data: bytes | bytearray | memoryview) -> Seq:
        """Rebuild a sequence from its text form.

        Raises
        ------
        UnregisteredTypeError
            A tag carries a type name with no registered reader.
        DeserializationError
            The input is malformed or a reader rejected its payload.
        """
        if isinstance(data, str):
            raise TypeError("decode() expects bytes, not str")
        self._data = memoryview(data)
        self._pos = 0
        try:
            seq = Seq(self._read_residues())
            while self._pos < len(self._data) and self._data[self._pos] == _TAG:
                tag = self._read_quoted(TAG_DELIM)
                type_name = self._read_quoted(TYPE_DELIM)
                seq[tag] = self._read_value(tag, type_name)
            if self._pos != len(self._data):
                raise DeserializationError(
                    f"Unexpected data at offset {self._pos}"
                )
            return seq
        except UnicodeDecodeError as exc:
            raise DeserializationError(f"Invalid UTF-8 in tag data: {exc}") from exc
        finally:
            self._data = memoryview(b'')

    def load(self, fp: BinaryIO) -> Seq:
        return self.decode(fp.read())

    # ── Pieces ─────────────────────────────────────────────────────

    def _read_residues(self) -> bytes:
        data = self._data
        while self._pos < len(data) and data[self._pos] in _WHITESPACE:
            self._pos += 1
        start = self._pos
        while self._pos < len(data) and 0x30 <= data[self._pos] <= 0x39:
            self._pos += 1
        if self._pos == start:
            raise DeserializationError("Missing residue count")
        try:
            count = int(bytes(data[start:self._pos]))
        except ValueError as exc:
            raise DeserializationError(f"Invalid residue count: {exc}") from exc
        if self._pos >= len(data) or data[self._pos] != _SEP:
            raise DeserializationError(
                f"Expected {COUNT_SEP!r} after residue count at offset {self._pos}"
            )
        self._pos += 1
        if self._pos + count > len(data):
            raise DeserializationError(
                f"Truncated residues: expected {count}, "
                f"got {len(data) - self._pos}"
            )
        residues = bytes(data[self._pos:self._pos + count])
        self._pos += count
        return residues

    def _read_quoted(self, delim: str) -> str:
        """Read a *delim*-quoted name with backslash escapes."""
        data = self._data
        d = ord(delim)
        if self._pos >= len(data) or data[self._pos] != d:
            raise DeserializationError(
                f"Expected {delim!r} at offset {self._pos}"
            )
        self._pos += 1
        out = bytearray()
        while self._pos < len(data):
            b = data[self._pos]
            self._pos += 1
            if b == _ESC and self._pos < len(data):
                out.append(data[self._pos])
                self._pos += 1
            elif b == d:
                return out.decode('utf-8')
            else:
                out.append(b)
        raise DeserializationError(f"Unterminated {delim!r}-quoted name")

    def _read_value(self, tag: str, type_name: str) -> Any:
        tag_type = self.registry.reader_for(type_name)
        end, balanced = payload_end(self._data, self._pos)
        if not balanced:
            raise DeserializationError(f"Unterminated string payload for tag {tag!r}")
        payload = bytes(self._data[self._pos:end]).decode('utf-8')
        self._pos = end
        try:
            return tag_type.reader(payload)
        except Exception as exc:
            raise DeserializationError(
                f"Reader for {type_name!r} rejected payload {payload!r} "
                f"of tag {tag!r}: {exc}"
            ) from exc
