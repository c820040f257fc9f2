"""tagseq: biological sequences with typed tagged data.

Usage::

    from tagseq import Seq, dumps, loads, read, save

    s = read("sample.fa.gz", "NC_017288.1")
    s["coverage"] = 31.5
    s["exons"] = [1, 4, 9]

    data = dumps(s)
    assert loads(data) == s

    save("copy.fq", s, line_width=60)
"""

from .constants import ID_TAG, DESC_TAG, QUALITY_TAG
from .seq import Seq
from .view import SeqView
from .types import (
    TagType, TypeRegistry, default_registry, register_type,
    Unsigned, Float32,
)
from .codec import TextEncoder, TextDecoder, dumps, loads, dump, load
from .io import (
    read, iter_records, save, FastaWriter, FastqWriter,
    Record, RecordTokenizer,
)
from .config import WriterConfig, load_config, writer_config_from_file
from .quality import PHRED33, PHRED64, error_probability
from .exc import (
    TagseqError, OpenError, RecordError, TruncatedQualityError,
    RecordReadError, SerializationError, DeserializationError,
    UnregisteredTypeError, RangeError, TagNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    'Seq', 'SeqView', 'ID_TAG', 'DESC_TAG', 'QUALITY_TAG',
    # Types
    'TagType', 'TypeRegistry', 'default_registry', 'register_type',
    'Unsigned', 'Float32',
    # Text codec
    'TextEncoder', 'TextDecoder', 'dumps', 'loads', 'dump', 'load',
    # Records
    'read', 'iter_records', 'save', 'FastaWriter', 'FastqWriter',
    'Record', 'RecordTokenizer',
    # Config
    'WriterConfig', 'load_config', 'writer_config_from_file',
    # Quality
    'PHRED33', 'PHRED64', 'error_probability',
    # Exceptions
    'TagseqError', 'OpenError', 'RecordError', 'TruncatedQualityError',
    'RecordReadError', 'SerializationError', 'DeserializationError',
    'UnregisteredTypeError', 'RangeError', 'TagNotFoundError',
]
