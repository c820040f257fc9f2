"""Read and write FASTA/FASTQ records, plain or gzip-compressed.

Only three tags take part: ``_id`` (record identifier), ``_desc`` (header
comment) and ``_qs`` (quality string). Any other tag is ignored on write.

Usage::

    from tagseq.io import read, save

    s = read("genome.fa.gz", "NC_017288.1")
    if s.empty:
        ...  # not found
    save("out.fq", s, line_width=60)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, BinaryIO, Iterator

from ..config import WriterConfig
from ..constants import ID_TAG, DESC_TAG, QUALITY_TAG, STDIO_PATH
from ..seq import Seq
from .streams import open_input, open_output
from .tokenizer import Record, RecordTokenizer

log = logging.getLogger("tagseq.io")


def _source_name(source: str | Path) -> str:
    return '<stdin>' if source == STDIO_PATH else str(source)


def record_to_seq(record: Record) -> Seq:
    """Build a sequence from a tokenized record."""
    s = Seq(record.seq)
    s[ID_TAG] = record.name
    if record.comment:
        s[DESC_TAG] = record.comment
    if record.qual:
        s[QUALITY_TAG] = record.qual
    return s


def iter_records(source: str | Path) -> Iterator[Seq]:
    """Yield every record of *source* as a sequence."""
    with open_input(source) as fh:
        for record in RecordTokenizer(fh, _source_name(source)):
            yield record_to_seq(record)


def read(source: str | Path, key: int | str) -> Seq:
    """Load one record by zero-based index or by identifier.

    Returns an empty :class:`Seq` if the stream ends before the record is
    found; check ``seq.empty`` rather than catching an exception.

    Raises
    ------
    OpenError
        *source* cannot be opened.
    TruncatedQualityError, RecordReadError
        The stream is malformed before the record is reached.
    """
    if isinstance(key, bool) or not isinstance(key, (int, str)):
        raise TypeError(f"key must be an int index or str identifier, not {type(key).__name__}")
    if isinstance(key, int) and key < 0:
        raise ValueError(f"record index must be >= 0, got {key}")

    name = _source_name(source)
    with open_input(source) as fh:
        for ndx, record in enumerate(RecordTokenizer(fh, name)):
            hit = ndx == key if isinstance(key, int) else record.name == key
            if hit:
                log.debug("Found record %r at index %d in %s", record.name, ndx, name)
                return record_to_seq(record)
    log.debug("Record %r not found in %s", key, name)
    return Seq()


# ── Writers ───────────────────────────────────────────────────────

def _as_bytes(value: Any, encoding: str, errors: str = 'strict') -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return str(value).encode(encoding, errors)


class _RecordWriter:
    """Framing shared by the FASTA and FASTQ writers."""

    prefix = b''

    def __init__(
        self,
        line_width: int | None = None,
        compress: bool = False,
        config: WriterConfig | None = None,
    ) -> None:
        self.config = config if config is not None else WriterConfig()
        self.line_width = self._default_width() if line_width is None else line_width
        if self.line_width < 0:
            raise ValueError(f"line_width must be >= 0, got {self.line_width}")
        self.compress = compress

    def _default_width(self) -> int:
        raise NotImplementedError

    def write(self, destination: str | Path, seq: Seq) -> None:
        """Write *seq* as one record to *destination* (``"-"`` for stdout)."""
        with open_output(destination, self.compress, self.config.compresslevel) as fh:
            self.write_to(fh, seq)
        log.debug(
            "Wrote %s record %r (%d residues) to %s",
            type(self).__name__, seq.get(ID_TAG, self.config.default_id),
            len(seq), '<stdout>' if destination == STDIO_PATH else destination,
        )

    def write_to(self, fh: BinaryIO, seq: Seq) -> None:
        """Write *seq* to an already-open binary stream."""
        fh.write(self._header(seq))
        self._write_wrapped(fh, bytes(seq))

    def _header(self, seq: Seq) -> bytes:
        ident = seq[ID_TAG] if seq.has(ID_TAG) else self.config.default_id
        desc = seq[DESC_TAG] if seq.has(DESC_TAG) else self.config.default_description
        return (
            self.prefix + _as_bytes(ident, 'utf-8', 'surrogateescape')
            + b' ' + _as_bytes(desc, 'utf-8', 'surrogateescape') + b'\n'
        )

    def _write_wrapped(self, fh: BinaryIO, data: bytes) -> None:
        width = self.line_width
        if width:
            for i in range(0, len(data), width):
                fh.write(data[i:i + width])
                fh.write(b'\n')
        else:
            fh.write(data)
            fh.write(b'\n')


class FastaWriter(_RecordWriter):
    """Write ``>id desc`` records, residues wrapped at ``line_width`` (0 = one line)."""

    prefix = b'>'

    def _default_width(self) -> int:
        return self.config.fasta_line_width


class FastqWriter(_RecordWriter):
    """Write ``@id desc`` records followed by ``+`` and the quality string.

    Sequences without a ``_qs`` tag get one filler quality character per
    residue.
    """

    prefix = b'@'

    def _default_width(self) -> int:
        return self.config.fastq_line_width

    def write_to(self, fh: BinaryIO, seq: Seq) -> None:
        super().write_to(fh, seq)
        fh.write(b'+\n')
        if seq.has(QUALITY_TAG):
            qual = _as_bytes(seq[QUALITY_TAG], 'latin-1')
        else:
            qual = self.config.quality_filler.encode('latin-1') * len(seq)
        self._write_wrapped(fh, qual)


_WRITERS = {'fasta': FastaWriter, 'fastq': FastqWriter}
_FASTQ_SUFFIXES = ('.fq', '.fastq')


def save(
    destination: str | Path,
    seq: Seq,
    line_width: int | None = None,
    format: str | None = None,
    compress: bool | None = None,
    config: WriterConfig | None = None,
) -> None:
    """Write *seq* as FASTA or FASTQ.

    ``format`` defaults to FASTQ for ``.fq``/``.fastq`` names (optionally
    followed by ``.gz``) and FASTA otherwise; ``compress`` defaults to true
    for ``.gz`` names. ``line_width`` defaults to the format's configured
    width.
    """
    name = str(destination).lower()
    if compress is None:
        compress = name.endswith('.gz')
    if format is None:
        stem = name[:-3] if name.endswith('.gz') else name
        format = 'fastq' if stem.endswith(_FASTQ_SUFFIXES) else 'fasta'
    try:
        writer_cls = _WRITERS[format.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown record format {format!r}. Use 'fasta' or 'fastq'."
        ) from None
    writer_cls(line_width, compress, config).write(destination, seq)
