"""Serialize a Seq to the self-describing text format.

Layout::

    <count>:<residue bytes>{#<tag>#|<type>|<payload>}*
"""

from __future__ import annotations

import logging
from typing import Any, BinaryIO, TYPE_CHECKING

from ..constants import (
    COUNT_SEP, TAG_DELIM, TYPE_DELIM, UNREGISTERED_TYPE_NAME, VOID_PAYLOAD,
)
from ..exc import SerializationError
from ..types.base import TypeRegistry, default_registry
from .quoting import quote, payload_end

if TYPE_CHECKING:
    from ..seq import Seq

log = logging.getLogger("tagseq.codec")

_UNREGISTERED = (quote(UNREGISTERED_TYPE_NAME, TYPE_DELIM) + VOID_PAYLOAD).encode('utf-8')


class TextEncoder:
    """Encode sequences using the writers of a :class:`TypeRegistry`."""

    def __init__(self, registry: TypeRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry

    def encode(self, seq: Seq) -> bytes:
        """Return the text form of *seq* (residues, then every tag)."""
        out = bytearray(f'{len(seq)}{COUNT_SEP}'.encode('ascii'))
        out += bytes(seq)
        for tag, value in seq.tags.items():
            out += quote(tag, TAG_DELIM).encode('utf-8')
            out += self._encode_value(tag, value)
        return bytes(out)

    def _encode_value(self, tag: str, value: Any) -> bytes:
        tag_type = self.registry.writer_for(value)
        if tag_type is None:
            log.warning(
                "No writer registered for %s (tag %r); writing placeholder",
                type(value).__name__, tag,
            )
            return _UNREGISTERED
        try:
            payload = tag_type.writer(value).encode('utf-8')
        except SerializationError:
            raise
        except Exception as exc:
            raise SerializationError(
                f"Writer for {tag_type.name!r} failed on tag {tag!r}: {exc}"
            ) from exc
        end, balanced = payload_end(payload, 0)
        if end != len(payload) or not balanced:
            raise SerializationError(
                f"Writer for {tag_type.name!r} produced an unquoted "
                f"{TAG_DELIM!r} or unbalanced quote on tag {tag!r}"
            )
        return quote(tag_type.name, TYPE_DELIM).encode('utf-8') + payload

    def dump(self, seq: Seq, fp: BinaryIO) -> None:
        fp.write(self.encode(seq))
