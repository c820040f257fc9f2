"""Self-describing text codec for tagged sequences.

Usage::

    from tagseq import Seq
    from tagseq.codec import dumps, loads

    s = Seq("ACGT")
    s["reads"] = 12
    data = dumps(s)        # b'4:ACGT#reads#|int|12'
    assert loads(data) == s
"""

from __future__ import annotations

from typing import BinaryIO, TYPE_CHECKING

from ..types.base import TypeRegistry
from .encoder import TextEncoder
from .decoder import TextDecoder

if TYPE_CHECKING:
    from ..seq import Seq


def dumps(seq: Seq, registry: TypeRegistry | None = None) -> bytes:
    """Encode *seq* to bytes."""
    return TextEncoder(registry).encode(seq)


def loads(data: bytes | bytearray | memoryview, registry: TypeRegistry | None = None) -> Seq:
    """Decode a sequence from bytes produced by :func:`dumps`."""
    return TextDecoder(registry).decode(data)


def dump(seq: Seq, fp: BinaryIO, registry: TypeRegistry | None = None) -> None:
    """Encode *seq* into a binary file object."""
    TextEncoder(registry).dump(seq, fp)


def load(fp: BinaryIO, registry: TypeRegistry | None = None) -> Seq:
    """Decode a sequence from the remaining contents of a binary file object."""
    return TextDecoder(registry).load(fp)


__all__ = ['TextEncoder', 'TextDecoder', 'dumps', 'loads', 'dump', 'load']
