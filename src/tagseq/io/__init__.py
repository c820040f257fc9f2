"""FASTA/FASTQ input and output, plain or gzip-compressed."""

from __future__ import annotations

from .streams import open_input, open_output
from .tokenizer import Record, RecordTokenizer
from .fastaqz import (
    read, iter_records, record_to_seq, save, FastaWriter, FastqWriter,
)

__all__ = [
    'open_input', 'open_output',
    'Record', 'RecordTokenizer',
    'read', 'iter_records', 'record_to_seq', 'save',
    'FastaWriter', 'FastqWriter',
]
