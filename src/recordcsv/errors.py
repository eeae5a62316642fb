# src/recordcsv/errors.py
"""
Exception types raised by recordcsv.

Every exception derives from RecordCsvError, and each one also subclasses the
builtin a caller would naturally catch (ValueError for bad input/config).
I/O failures from the underlying stream are never wrapped; they reach the
caller as the original OSError / csv.Error.
"""

from __future__ import annotations

from typing import Any, Optional


class RecordCsvError(Exception):
    """Base class for all recordcsv errors."""


class ConfigError(RecordCsvError, ValueError):
    """A writer option or configuration value is invalid."""


class UnsupportedTypeError(ConfigError):
    """
    A schema field has a type outside the supported primitive set.

    Raised at writer construction, so no write can ever run against
    a schema that contains it.
    """

    def __init__(self, field_name: str, field_type: Any):
        self.field_name = field_name
        self.field_type = field_type
        super().__init__(
            f"Field '{field_name}' has unsupported type {field_type}; "
            "only boolean, integer, floating point and utf8 string fields can be written"
        )


class SchemaMismatchError(RecordCsvError, ValueError):
    """The record's schema differs structurally from the writer's schema."""

    def __init__(self, expected: Any, actual: Any, detail: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        self.detail = detail
        msg = "Record schema does not match writer schema"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
