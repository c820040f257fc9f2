"""Core type system: TagType descriptor, type registry."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable

from ..exc import UnregisteredTypeError

log = logging.getLogger("tagseq.types")

Writer = Callable[[Any], str]
Reader = Callable[[str], Any]


@dataclasses.dataclass(frozen=True, slots=True)
class TagType:
    """Describes how one Python type is stored as tagged data.

    Parameters
    ----------
    python_type : type
        Exact run-time type of values handled by this entry.
    name : str
        Canonical type name recorded next to each serialized value.
    writer : callable
        ``writer(value) -> str`` payload renderer.
    reader : callable
        ``reader(payload) -> value`` payload parser, the inverse of *writer*.
    accepts : callable, optional
        ``accepts(value) -> bool`` guard for values whose exact type matches
        but whose contents the writer cannot render; rejected values are
        treated as unregistered.
    """
    python_type: type
    name: str
    writer: Writer
    reader: Reader
    accepts: Callable[[Any], bool] | None = None


class TypeRegistry:
    """Two lookup tables: exact type -> writer, type name -> reader.

    Registration is last-writer-wins for both the type and the name. The
    registry does no locking; populate it before sharing it across threads.

    Usage::

        registry = TypeRegistry()
        registry.register(Fraction, "fraction", str, Fraction)
        registry.writer_for(Fraction(1, 3))   # TagType(...)
        registry.reader_for("fraction")       # TagType(...)
    """

    def __init__(self) -> None:
        self._by_type: dict[type, TagType] = {}
        self._by_name: dict[str, TagType] = {}

    def register(
        self,
        python_type: type,
        name: str,
        writer: Writer,
        reader: Reader,
        accepts: Callable[[Any], bool] | None = None,
    ) -> TagType:
        """Register a type, replacing any entry for the same type or name."""
        tag_type = TagType(python_type, name, writer, reader, accepts)
        if python_type in self._by_type or name in self._by_name:
            log.debug("Overriding registration for %s (%r)", python_type.__name__, name)
        self._by_type[python_type] = tag_type
        self._by_name[name] = tag_type
        return tag_type

    def register_reader(self, name: str, reader: Reader) -> None:
        """Register a reader for a name with no writable Python type."""
        self._by_name[name] = TagType(type(None), name, _no_writer, reader)

    def writer_for(self, value: Any) -> TagType | None:
        """Return the entry for ``type(value)``, or ``None`` if unregistered.

        An entry whose ``accepts`` guard rejects *value* counts as unregistered.
        """
        tag_type = self._by_type.get(type(value))
        if tag_type is None or (tag_type.accepts is not None and not tag_type.accepts(value)):
            return None
        return tag_type

    def reader_for(self, name: str) -> TagType:
        """Return the entry registered under *name*."""
        try:
            return self._by_name[name]
        except KeyError:
            raise UnregisteredTypeError(name) from None

    def name_for(self, value: Any) -> str | None:
        """Return the registered type name for *value*, if any."""
        tag_type = self.writer_for(value)
        return tag_type.name if tag_type is not None else None

    @property
    def names(self) -> list[str]:
        """Return all registered type names."""
        return list(self._by_name)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._by_name
        return item in self._by_type

    def copy(self) -> TypeRegistry:
        """Return an independent registry with the same entries."""
        other = TypeRegistry()
        other._by_type = dict(self._by_type)
        other._by_name = dict(self._by_name)
        return other

    def __repr__(self) -> str:
        return f"TypeRegistry([{', '.join(self._by_name)}])"


def _no_writer(value: Any) -> str:
    raise TypeError("reader-only registration has no writer")


# ── Process-wide registry ─────────────────────────────────────────
default_registry = TypeRegistry()


def register_type(
    python_type: type,
    name: str,
    writer: Writer,
    reader: Reader,
    accepts: Callable[[Any], bool] | None = None,
) -> TagType:
    """Register a type in the process-wide registry."""
    return default_registry.register(python_type, name, writer, reader, accepts)


def get_type_by_name(name: str) -> TagType:
    """Look up a TagType in the process-wide registry by name."""
    return default_registry.reader_for(name)


def all_types() -> list[TagType]:
    """Return all TagTypes reachable by name in the process-wide registry."""
    return [default_registry.reader_for(name) for name in default_registry.names]
