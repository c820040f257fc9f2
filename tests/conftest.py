"""Test fixtures: small FASTA/FASTQ files shaped like real NCBI downloads."""

from __future__ import annotations

import gzip
from pathlib import Path

import pytest

from tagseq.types import TypeRegistry, register_builtins

PLASMID_ID = "NC_017288.1"
PLASMID_DESC = "Chlamydia psittaci 6BC plasmid pCps6BC, complete sequence"
PLASMID_HEAD = "TATAATTAAA"
PLASMID_TAIL = "TCCAATTCTA"
PLASMID_LENGTH = 7553


def plasmid_residues() -> str:
    """7553 residues with the head and tail of the real pCps6BC plasmid."""
    body_len = PLASMID_LENGTH - len(PLASMID_HEAD) - len(PLASMID_TAIL)
    body = ("GATTACA" * (body_len // 7 + 1))[:body_len]
    return PLASMID_HEAD + body + PLASMID_TAIL


def wrap(text: str, width: int = 70) -> str:
    return "".join(text[i:i + width] + "\n" for i in range(0, len(text), width))


def genome_fasta_text() -> str:
    return (
        ">NC_017287.1 Chlamydia psittaci 6BC, complete sequence\n"
        + wrap("ACGTTGCA" * 40)
        + f">{PLASMID_ID} {PLASMID_DESC}\n"
        + wrap(plasmid_residues())
        + ">extra_contig\n"
        + wrap("GGGCCC" * 5)
    )


FASTQ_TEXT = (
    "@read1 sample=A lane=1\n"
    "ACGTACGT\n"
    "+\n"
    "IIIIHHHH\n"
    "@read2\n"
    "GGCC\n"
    "+read2\n"
    "@@@@\n"
)


@pytest.fixture
def genome_fasta(tmp_path: Path) -> Path:
    path = tmp_path / "genome.fa"
    path.write_text(genome_fasta_text())
    return path


@pytest.fixture
def genome_fasta_gz(tmp_path: Path) -> Path:
    path = tmp_path / "genome.fa.gz"
    with gzip.open(path, "wt") as f:
        f.write(genome_fasta_text())
    return path


@pytest.fixture
def reads_fastq(tmp_path: Path) -> Path:
    path = tmp_path / "reads.fq"
    path.write_text(FASTQ_TEXT)
    return path


@pytest.fixture
def registry() -> TypeRegistry:
    """An isolated registry holding only the built-in types."""
    return register_builtins(TypeRegistry())
