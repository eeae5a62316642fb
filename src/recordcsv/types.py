# src/recordcsv/types.py
"""
Supported field types and schema checks.

The writer accepts a closed set of Arrow primitive types. Each one maps to a
TypeKind, which is what the formatter registry dispatches on:

    bool                      -> BOOLEAN
    int8 / int16 / int32 / int64      -> SIGNED_INT
    uint8 / uint16 / uint32 / uint64  -> UNSIGNED_INT
    float32                   -> FLOAT32
    float64                   -> FLOAT64
    string (utf8)             -> STRING

Anything else (lists, structs, dictionaries, temporal types, large_string,
binary, ...) is rejected by validate_schema before a writer becomes usable.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

import pyarrow as pa

from recordcsv.errors import UnsupportedTypeError


class TypeKind(str, Enum):
    """Formatting family of a supported Arrow type."""

    BOOLEAN = "boolean"
    SIGNED_INT = "signed_int"
    UNSIGNED_INT = "unsigned_int"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"

    def __str__(self) -> str:
        return self.value


SUPPORTED_TYPES: Dict[pa.DataType, TypeKind] = {
    pa.bool_(): TypeKind.BOOLEAN,
    pa.int8(): TypeKind.SIGNED_INT,
    pa.int16(): TypeKind.SIGNED_INT,
    pa.int32(): TypeKind.SIGNED_INT,
    pa.int64(): TypeKind.SIGNED_INT,
    pa.uint8(): TypeKind.UNSIGNED_INT,
    pa.uint16(): TypeKind.UNSIGNED_INT,
    pa.uint32(): TypeKind.UNSIGNED_INT,
    pa.uint64(): TypeKind.UNSIGNED_INT,
    pa.float32(): TypeKind.FLOAT32,
    pa.float64(): TypeKind.FLOAT64,
    pa.string(): TypeKind.STRING,
}


def type_kind(dtype: pa.DataType) -> Optional[TypeKind]:
    """Return the TypeKind for an Arrow type, or None if unsupported."""
    return SUPPORTED_TYPES.get(dtype)


def is_supported_type(dtype: pa.DataType) -> bool:
    return type_kind(dtype) is not None


def validate_schema(schema: pa.Schema) -> None:
    """
    Check that every field of `schema` has a supported type.

    Raises:
        TypeError: If `schema` is not a pyarrow.Schema
        UnsupportedTypeError: On the first field with an unsupported type
    """
    if not isinstance(schema, pa.Schema):
        raise TypeError(
            f"schema must be a pyarrow.Schema, got {type(schema).__name__}"
        )
    for field in schema:
        if not is_supported_type(field.type):
            raise UnsupportedTypeError(field.name, field.type)


def schema_difference(expected: pa.Schema, actual: pa.Schema) -> Optional[str]:
    """
    Describe the first structural difference between two schemas.

    Only field count, order, names and types are compared; nullability and
    metadata are ignored. Returns None when the schemas are structurally equal.
    """
    if len(expected) != len(actual):
        return f"expected {len(expected)} fields, got {len(actual)}"

    for i, (exp, act) in enumerate(zip(expected, actual)):
        if exp.name != act.name:
            return f"field {i}: expected name '{exp.name}', got '{act.name}'"
        if exp.type != act.type:
            return f"field {i} ('{exp.name}'): expected type {exp.type}, got {act.type}"
    return None


def schemas_equal(a: pa.Schema, b: pa.Schema) -> bool:
    """Structural equality: same ordered fields with matching names and types."""
    return schema_difference(a, b) is None
