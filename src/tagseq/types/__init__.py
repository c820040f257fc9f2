"""Tagged value types and the registry that serializes them.

Usage::

    from fractions import Fraction
    from tagseq.types import register_type

    register_type(Fraction, "fraction", str, Fraction)
"""

from __future__ import annotations

from .base import (
    TagType, TypeRegistry, default_registry,
    register_type, get_type_by_name, all_types,
)
from .atoms import Unsigned, Float32, register_builtins

__all__ = [
    'TagType', 'TypeRegistry', 'default_registry',
    'register_type', 'get_type_by_name', 'all_types',
    'Unsigned', 'Float32', 'register_builtins',
]
