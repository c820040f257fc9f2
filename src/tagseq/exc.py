"""Exception hierarchy for tagseq."""


class TagseqError(Exception):
    """Base exception for all tagseq errors."""


class OpenError(TagseqError, OSError):
    """A source or destination could not be opened."""


class RecordError(TagseqError):
    """A FASTA/FASTQ record could not be read."""


class TruncatedQualityError(RecordError):
    """Quality string shorter or longer than its residues."""


class RecordReadError(RecordError):
    """Low-level read or decompression failure mid-stream."""


class SerializationError(TagseqError):
    """Failed to serialize a sequence to text."""


class DeserializationError(TagseqError):
    """Failed to deserialize text into a sequence."""


class UnregisteredTypeError(DeserializationError):
    """No reader is registered for a type name."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"unregistered type: {type_name!r}")


class RangeError(TagseqError, IndexError):
    """Position outside the residue buffer."""


class TagNotFoundError(TagseqError, KeyError):
    """Requested tag is not present on the sequence."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(tag)

    def __str__(self) -> str:
        return f"tag not found: {self.tag!r}"
