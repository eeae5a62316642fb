# src/recordcsv/formatters.py
"""
Primitive formatters: one canonical, locale-independent text form per TypeKind.

    BOOLEAN        "true" / "false"
    SIGNED_INT     base-10, "-" prefix for negatives only
    UNSIGNED_INT   base-10
    FLOAT64        shortest decimal that parses back to the same double (repr)
    FLOAT32        shortest decimal that parses back to the same single
    STRING         verbatim (quoting is the csv writer's job)

Null slots arrive as None from the Arrow accessor and always render as "".

Each formatter is registered for its TypeKind with @register_formatter. The
projector asks for a column-level formatter via `column_formatter()`, which
turns a whole Arrow array into a list of tokens.
"""

from __future__ import annotations

import math
import struct
from typing import Any, Callable, Dict, Iterator, List, Optional

import pyarrow as pa

from recordcsv.errors import RecordCsvError
from recordcsv.types import TypeKind, type_kind

ValueFormatter = Callable[[Any], str]

# Registry: TypeKind -> value formatter
_FORMATTERS: Dict[TypeKind, ValueFormatter] = {}


def register_formatter(kind: TypeKind):
    """
    Decorator to register the value formatter for a TypeKind.
    A kind can only be registered once.
    """

    def deco(fn: ValueFormatter) -> ValueFormatter:
        if kind in _FORMATTERS:
            raise ValueError(f"Formatter for '{kind}' is already registered.")
        _FORMATTERS[kind] = fn
        return fn

    return deco


def get_formatter(kind: TypeKind) -> ValueFormatter:
    fn = _FORMATTERS.get(kind)
    if fn is None:
        raise RecordCsvError(f"No formatter registered for type kind '{kind}'")
    return fn


# ------------------------------ Formatters ------------------------------------


@register_formatter(TypeKind.BOOLEAN)
def format_bool(value: Optional[bool]) -> str:
    if value is None:
        return ""
    return "true" if value else "false"


@register_formatter(TypeKind.SIGNED_INT)
def format_signed(value: Optional[int]) -> str:
    if value is None:
        return ""
    return str(int(value))


@register_formatter(TypeKind.UNSIGNED_INT)
def format_unsigned(value: Optional[int]) -> str:
    if value is None:
        return ""
    return str(int(value))


@register_formatter(TypeKind.FLOAT64)
def format_float64(value: Optional[float]) -> str:
    if value is None:
        return ""
    # repr() is the shortest round-tripping form since Python 3.1
    return repr(float(value))


def _to_float32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        # rounding a candidate near FLT_MAX upwards can leave float32 range
        return math.copysign(math.inf, value)


def _float32_candidates(target: float, digits: int) -> Iterator[float]:
    """
    Decimals of `digits` significant digits around `target`: the nearest one
    first, then its neighbours one unit below and above in the last digit.
    """
    mantissa, _, exp = f"{abs(target):.{digits - 1}e}".partition("e")
    m = int(mantissa.replace(".", ""))
    scale = int(exp) - (digits - 1)
    sign = "-" if target < 0 else ""
    for step in (0, -1, 1):
        if m + step > 0:
            yield float(f"{sign}{m + step}e{scale}")


@register_formatter(TypeKind.FLOAT32)
def format_float32(value: Optional[float]) -> str:
    """
    Shortest decimal that reads back as the same float32.

    Arrow hands float32 slots over as widened doubles, whose repr carries
    digits that only matter at double precision (0.1f -> 0.10000000149011612).
    We search for the fewest significant digits (at most 9 are ever needed
    for a single) that still round to the same float32, then render that
    decimal the same way float64 values are rendered.

    At powers of two the rounding interval below a value is half as wide as
    the one above, so the nearest n-digit decimal can miss while its
    neighbour one unit away still hits. Both neighbours are tried at every
    digit count, and the hit closest to the value wins.
    """
    if value is None:
        return ""
    value = float(value)
    if math.isnan(value) or math.isinf(value) or value == 0.0:
        return repr(value)

    target = _to_float32(value)
    for digits in range(1, 10):
        hits = [c for c in _float32_candidates(target, digits) if _to_float32(c) == target]
        if hits:
            return repr(min(hits, key=lambda c: abs(c - target)))
    return repr(target)


@register_formatter(TypeKind.STRING)
def format_string(value: Optional[str]) -> str:
    if value is None:
        return ""
    return value


# ------------------------------ Helpers ---------------------------------------


def format_value(value: Any, dtype: pa.DataType) -> str:
    """
    Format a single Python value as the canonical text of Arrow type `dtype`.

    Raises:
        RecordCsvError: If `dtype` is not a supported type
    """
    kind = type_kind(dtype)
    if kind is None:
        raise RecordCsvError(f"Cannot format values of unsupported type {dtype}")
    return get_formatter(kind)(value)


def column_formatter(dtype: pa.DataType) -> Callable[[pa.Array], List[str]]:
    """
    Return a function turning an Arrow array of type `dtype` into text tokens,
    one per slot, in slot order.
    """
    kind = type_kind(dtype)
    if kind is None:
        raise RecordCsvError(f"Cannot format columns of unsupported type {dtype}")
    fmt = get_formatter(kind)

    def _format_column(column: pa.Array) -> List[str]:
        if column.type != dtype:
            raise RecordCsvError(
                f"Column of type {column.type} passed to {dtype} formatter"
            )
        return [fmt(v) for v in column.to_pylist()]

    return _format_column
