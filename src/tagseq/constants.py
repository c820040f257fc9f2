"""Text format delimiters, reserved tag names and writer defaults."""

from __future__ import annotations

# ── Text codec ─────────────────────────────────────────────────────
TAG_DELIM = '#'
TYPE_DELIM = '|'
ESCAPE = '\\'
STRING_QUOTE = '"'
COUNT_SEP = ':'

UNREGISTERED_TYPE_NAME = 'UNREGISTERED TYPE'
VOID_PAYLOAD = '{}'

# ── Reserved tags (FASTA/FASTQ) ────────────────────────────────────
ID_TAG = '_id'
DESC_TAG = '_desc'
QUALITY_TAG = '_qs'

# ── Record writers ─────────────────────────────────────────────────
STDIO_PATH = '-'
FASTA_LINE_WIDTH = 80
FASTQ_LINE_WIDTH = 0
DEFAULT_ID = 'seq'
DEFAULT_DESCRIPTION = 'generated by tagseq'
QUALITY_FILLER = 'I'
GZIP_MAGIC = b'\x1f\x8b'
COMPRESS_LEVEL = 6

DEFAULT_FILL = 'A'
