"""Split a FASTA/FASTQ byte stream into records.

FASTA and FASTQ records may be mixed in one stream. Sequence and quality
data may span several lines; quality lines are consumed until they cover
the residues, so a quality line starting with ``@`` is not mistaken for a
header.
"""

from __future__ import annotations

import zlib
from typing import BinaryIO, Iterator, NamedTuple

from ..exc import RecordReadError, TruncatedQualityError

_HEADER_CHARS = (b'>', b'@')
_EOL = b'\r\n'


class Record(NamedTuple):
    """One tokenized record; ``comment`` and ``qual`` may be empty."""
    name: str
    comment: str
    seq: bytes
    qual: str


class RecordTokenizer:
    """Iterate :class:`Record` tuples from a binary stream."""

    def __init__(self, stream: BinaryIO, source: str = '<stream>') -> None:
        self._stream = stream
        self._source = source
        self._header: bytes | None = None

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        record = self.read()
        if record is None:
            raise StopIteration
        return record

    def _readline(self) -> bytes:
        try:
            return self._stream.readline()
        except (OSError, EOFError, zlib.error) as exc:
            raise RecordReadError(
                f"error reading file -> {self._source}: {exc}"
            ) from exc

    def read(self) -> Record | None:
        """Return the next record, or ``None`` at end of stream."""
        header = self._header
        self._header = None
        while header is None:
            line = self._readline()
            if not line:
                return None
            if line[:1] in _HEADER_CHARS:
                header = line

        text = header[1:].rstrip(_EOL).decode('utf-8', errors='surrogateescape')
        parts = text.split(None, 1)
        name = parts[0] if parts else ''
        comment = parts[1] if len(parts) > 1 else ''

        chunks = []
        has_quality = False
        while True:
            line = self._readline()
            if not line:
                break
            first = line[:1]
            if first in _HEADER_CHARS:
                self._header = line
                break
            if first == b'+':
                has_quality = True
                break
            chunks.append(line.rstrip(_EOL))
        seq = b''.join(chunks)

        qual = bytearray()
        if has_quality:
            while len(qual) < len(seq):
                line = self._readline()
                if not line:
                    break
                qual += line.rstrip(_EOL)
            if len(qual) != len(seq):
                raise TruncatedQualityError(
                    f"truncated quality string in file -> {self._source} "
                    f"(record {name!r}: {len(qual)} quality for {len(seq)} residues)"
                )
        return Record(name, comment, seq, qual.decode('latin-1'))
