"""Unit tests for FASTA/FASTQ reading and writing."""

import gzip
import io
import sys

import pytest

from tagseq import Seq, read, save, iter_records, FastaWriter, FastqWriter, WriterConfig
from tagseq.exc import OpenError, TruncatedQualityError

PLASMID_DESC = "Chlamydia psittaci 6BC plasmid pCps6BC, complete sequence"


class TestReadFasta:
    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(OpenError):
            read(tmp_path / "wrong.fa", "no_id")

    @pytest.mark.parametrize("key", [1, "NC_017288.1"])
    def test_plasmid(self, genome_fasta, key):
        s = read(genome_fasta, key)
        assert len(s) == 7553
        assert s.subseq(0, 10) == Seq("TATAATTAAA")
        assert s.subseq(7543) == Seq("TCCAATTCTA")
        assert s["_id"] == "NC_017288.1"
        assert s["_desc"] == PLASMID_DESC
        assert not s.has("_qs")

    def test_gzip_source(self, genome_fasta_gz):
        s = read(genome_fasta_gz, "NC_017288.1")
        assert len(s) == 7553
        assert s.subseq(7543) == "TCCAATTCTA"

    def test_first_record(self, genome_fasta):
        s = read(genome_fasta, 0)
        assert s["_id"] == "NC_017287.1"
        assert len(s) == 320

    def test_no_comment_means_no_desc(self, genome_fasta):
        s = read(genome_fasta, "extra_contig")
        assert s["_id"] == "extra_contig"
        assert not s.has("_desc")

    def test_index_not_found(self, genome_fasta):
        s = read(genome_fasta, 3)
        assert s.empty
        assert not s.has("_id")

    def test_id_not_found(self, genome_fasta):
        s = read(genome_fasta, "NC_000000.0")
        assert s.empty
        assert not s.has("_id")

    def test_bad_key(self, genome_fasta):
        with pytest.raises(TypeError):
            read(genome_fasta, 1.0)
        with pytest.raises(TypeError):
            read(genome_fasta, True)
        with pytest.raises(ValueError):
            read(genome_fasta, -1)

    def test_seq_load_classmethod(self, genome_fasta):
        assert len(Seq.load(str(genome_fasta), 1)) == 7553

    def test_stdin(self, genome_fasta, monkeypatch):
        data = genome_fasta.read_bytes()
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BufferedReader(io.BytesIO(data))))
        assert read("-", 1)["_id"] == "NC_017288.1"

    def test_iter_records(self, genome_fasta):
        ids = [s["_id"] for s in iter_records(genome_fasta)]
        assert ids == ["NC_017287.1", "NC_017288.1", "extra_contig"]


class TestReadFastq:
    def test_quality_and_comment(self, reads_fastq):
        s = read(reads_fastq, "read1")
        assert s == "ACGTACGT"
        assert s["_qs"] == "IIIIHHHH"
        assert s["_desc"] == "sample=A lane=1"

    def test_second_by_index(self, reads_fastq):
        s = read(reads_fastq, 1)
        assert s["_id"] == "read2"
        assert s["_qs"] == "@@@@"
        assert not s.has("_desc")

    def test_truncated_quality_propagates(self, tmp_path):
        f = tmp_path / "bad.fq"
        f.write_text("@r1\nACGT\n+\nII\n")
        with pytest.raises(TruncatedQualityError):
            read(f, "r1")

    def test_truncation_is_not_a_miss(self, tmp_path):
        f = tmp_path / "bad.fq"
        f.write_text("@r1\nACGT\n+\nIIII\n@r2\nACGT\n+\nI\n")
        assert read(f, 0)["_qs"] == "IIII"
        with pytest.raises(TruncatedQualityError):
            read(f, "missing")


class TestWriteFasta:
    def test_header_defaults(self, tmp_path):
        f = tmp_path / "out.fa"
        FastaWriter().write(f, Seq("ACGT"))
        assert f.read_text() == ">seq generated by tagseq\nACGT\n"

    def test_header_from_tags(self, tmp_path):
        s = Seq("ACGT")
        s["_id"] = "chr1"
        s["_desc"] = "first"
        s["ignored"] = 5
        f = tmp_path / "out.fa"
        FastaWriter().write(f, s)
        assert f.read_text() == ">chr1 first\nACGT\n"

    def test_wrapping(self, tmp_path):
        f = tmp_path / "out.fa"
        FastaWriter(line_width=3).write(f, Seq("ACGTACG"))
        assert f.read_text().splitlines()[1:] == ["ACG", "TAC", "G"]

    def test_no_wrapping(self, tmp_path):
        f = tmp_path / "out.fa"
        FastaWriter(line_width=0).write(f, Seq("A" * 200))
        assert f.read_text().splitlines()[1:] == ["A" * 200]

    def test_default_width_80(self, tmp_path):
        f = tmp_path / "out.fa"
        FastaWriter().write(f, Seq("A" * 200))
        assert [len(l) for l in f.read_text().splitlines()[1:]] == [80, 80, 40]

    def test_negative_width(self):
        with pytest.raises(ValueError):
            FastaWriter(line_width=-1)

    @pytest.mark.parametrize("width", [0, 1, 7, 60, 80, 10000])
    def test_roundtrip_any_width(self, genome_fasta, tmp_path, width):
        original = read(genome_fasta, 1)
        f = tmp_path / "rt.fa"
        FastaWriter(line_width=width).write(f, original)
        back = read(f, 0)
        assert back == original
        assert back["_id"] == original["_id"]
        assert back["_desc"] == original["_desc"]

    def test_compressed(self, tmp_path):
        s = Seq("ACGT")
        s["_id"] = "z"
        f = tmp_path / "out.fa.gz"
        FastaWriter(compress=True).write(f, s)
        assert gzip.decompress(f.read_bytes()) == b">z generated by tagseq\nACGT\n"
        assert read(f, "z") == s

    def test_stdout(self, monkeypatch):
        raw = io.BytesIO()
        monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(raw))
        FastaWriter().write("-", Seq("AC"))
        assert raw.getvalue() == b">seq generated by tagseq\nAC\n"

    def test_unwritable(self, tmp_path):
        with pytest.raises(OpenError):
            FastaWriter().write(tmp_path / "missing_dir" / "x.fa", Seq("A"))

    def test_config_defaults(self, tmp_path):
        cfg = WriterConfig(fasta_line_width=2, default_id="x", default_description="y")
        f = tmp_path / "out.fa"
        FastaWriter(config=cfg).write(f, Seq("ACG"))
        assert f.read_text() == ">x y\nAC\nG\n"

    def test_non_utf8_header_roundtrip(self, tmp_path):
        src = tmp_path / "latin.fa"
        src.write_bytes(b">id\xff note\xe9\nACGT\n")
        s = read(src, 0)
        assert read(src, b"id\xff".decode("utf-8", "surrogateescape")) == "ACGT"
        out = tmp_path / "copy.fa"
        FastaWriter().write(out, s)
        assert out.read_bytes() == src.read_bytes()


class TestWriteFastq:
    def test_filler_quality(self, tmp_path):
        f = tmp_path / "out.fq"
        FastqWriter().write(f, Seq("ACGT"))
        assert f.read_text() == "@seq generated by tagseq\nACGT\n+\nIIII\n"

    def test_filler_roundtrip(self, tmp_path):
        f = tmp_path / "out.fq"
        FastqWriter().write(f, Seq("ACGTA"))
        back = read(f, 0)
        assert back == "ACGTA"
        assert back["_qs"] == "IIIII"

    def test_quality_wrapped(self, tmp_path):
        s = Seq("ACGTA")
        s["_id"] = "r"
        s["_qs"] = "!#%&("
        f = tmp_path / "out.fq"
        FastqWriter(line_width=2).write(f, s)
        assert f.read_text() == "@r generated by tagseq\nAC\nGT\nA\n+\n!#\n%&\n(\n"
        assert read(f, "r")["_qs"] == "!#%&("

    @pytest.mark.parametrize("width", [0, 1, 3, 80])
    def test_roundtrip_any_width(self, reads_fastq, tmp_path, width):
        original = read(reads_fastq, "read1")
        f = tmp_path / "rt.fq.gz"
        FastqWriter(line_width=width, compress=True).write(f, original)
        back = read(f, "read1")
        assert back == original
        assert back["_qs"] == original["_qs"]
        assert back["_desc"] == original["_desc"]


class TestSave:
    def test_format_from_suffix(self, tmp_path):
        save(tmp_path / "a.fastq", Seq("AC"))
        assert (tmp_path / "a.fastq").read_text().startswith("@")
        save(tmp_path / "a.fa", Seq("AC"))
        assert (tmp_path / "a.fa").read_text().startswith(">")

    def test_gz_suffix_compresses(self, tmp_path):
        save(tmp_path / "a.fq.gz", Seq("AC"))
        text = gzip.decompress((tmp_path / "a.fq.gz").read_bytes())
        assert text.startswith(b"@seq")

    def test_explicit_overrides(self, tmp_path):
        f = tmp_path / "a.txt"
        save(f, Seq("ACGT"), line_width=2, format="fastq", compress=False)
        assert f.read_text() == "@seq generated by tagseq\nAC\nGT\n+\nII\nII\n"

    def test_unknown_format(self, tmp_path):
        with pytest.raises(ValueError):
            save(tmp_path / "a.fa", Seq("A"), format="genbank")

    def test_seq_save_method(self, tmp_path):
        s = Seq("GATTACA")
        s["_id"] = "m"
        s.save(str(tmp_path / "m.fa"), line_width=0)
        assert (tmp_path / "m.fa").read_text() == ">m generated by tagseq\nGATTACA\n"
