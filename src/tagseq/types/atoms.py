"""Built-in tagged value types and their text payloads."""

from __future__ import annotations

import struct
from typing import Any

from ..constants import STRING_QUOTE, ESCAPE, UNREGISTERED_TYPE_NAME, VOID_PAYLOAD
from ..exc import SerializationError
from .base import TypeRegistry, default_registry

_F32 = struct.Struct('<f')


class Unsigned(int):
    """Non-negative integer stored under the ``unsigned`` type name."""

    def __new__(cls, value: Any = 0) -> Unsigned:
        self = super().__new__(cls, value)
        if self < 0:
            raise ValueError(f"unsigned value must be >= 0, got {int(self)}")
        return self

    def __repr__(self) -> str:
        return f"Unsigned({int(self)})"


class Float32(float):
    """Float rounded to IEEE single precision, stored as ``float``."""

    def __new__(cls, value: Any = 0.0) -> Float32:
        return super().__new__(cls, _F32.unpack(_F32.pack(float(value)))[0])

    def __repr__(self) -> str:
        return f"Float32({float(self)!r})"


# ── Writers / readers ─────────────────────────────────────────────

def write_void(value: None) -> str:
    return VOID_PAYLOAD


def read_void(payload: str) -> None:
    if payload != VOID_PAYLOAD:
        raise ValueError(f"expected {VOID_PAYLOAD!r}, got {payload!r}")
    return None


def write_bool(value: bool) -> str:
    return 'true' if value else 'false'


def read_bool(payload: str) -> bool:
    if payload == 'true':
        return True
    if payload == 'false':
        return False
    raise ValueError(f"expected 'true' or 'false', got {payload!r}")


def write_int(value: int) -> str:
    return str(int(value))


def read_int(payload: str) -> int:
    return int(payload)


def read_unsigned(payload: str) -> Unsigned:
    return Unsigned(int(payload))


def write_float(value: float) -> str:
    # repr is the shortest string that parses back to the same double
    return repr(float(value))


def read_float32(payload: str) -> Float32:
    return Float32(float(payload))


def read_double(payload: str) -> float:
    return float(payload)


def write_string(value: str) -> str:
    escaped = value.replace(ESCAPE, ESCAPE * 2).replace(STRING_QUOTE, ESCAPE + STRING_QUOTE)
    return f'{STRING_QUOTE}{escaped}{STRING_QUOTE}'


def read_string(payload: str) -> str:
    if len(payload) < 2 or payload[0] != STRING_QUOTE or payload[-1] != STRING_QUOTE:
        raise ValueError(f"string payload is not quoted: {payload!r}")
    out = []
    chars = iter(payload[1:-1])
    for ch in chars:
        if ch == ESCAPE:
            ch = next(chars, ESCAPE)
        out.append(ch)
    return ''.join(out)


def _is_int(item: Any) -> bool:
    return isinstance(item, int) and not isinstance(item, bool)


def accepts_int_list(value: list) -> bool:
    return all(_is_int(item) for item in value)


def write_int_list(value: list) -> str:
    for item in value:
        if not _is_int(item):
            raise SerializationError(
                f"int_list accepts only integers, got {type(item).__name__}"
            )
    return '{' + ''.join(f'{int(item)},' for item in value) + '}'


def read_int_list(payload: str) -> list[int]:
    if not (payload.startswith('{') and payload.endswith('}')):
        raise ValueError(f"list payload is not braced: {payload!r}")
    return [int(item) for item in payload[1:-1].split(',') if item]


# ── Register all built-in types ───────────────────────────────────

def register_builtins(registry: TypeRegistry) -> TypeRegistry:
    """Add the built-in types to *registry* and return it."""
    registry.register(type(None), 'void', write_void, read_void)
    registry.register(bool, 'bool', write_bool, read_bool)
    registry.register(int, 'int', write_int, read_int)
    registry.register(Unsigned, 'unsigned', write_int, read_unsigned)
    registry.register(Float32, 'float', write_float, read_float32)
    registry.register(float, 'double', write_float, read_double)
    registry.register(str, 'string', write_string, read_string)
    registry.register(list, 'int_list', write_int_list, read_int_list, accepts_int_list)
    # values written without a registered type decode as void
    registry.register_reader(UNREGISTERED_TYPE_NAME, lambda payload: None)
    return registry


register_builtins(default_registry)
