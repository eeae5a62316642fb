"""Tests for supported-type checks and structural schema equality."""

import pyarrow as pa
import pytest

from recordcsv.errors import ConfigError, UnsupportedTypeError
from recordcsv.types import (
    SUPPORTED_TYPES,
    TypeKind,
    is_supported_type,
    schema_difference,
    schemas_equal,
    type_kind,
    validate_schema,
)


# =============================================================================
# Supported types
# =============================================================================


class TestSupportedTypes:
    """Tests for the closed supported-type set."""

    def test_supported_set(self):
        """Exactly the twelve primitive types are supported."""
        assert len(SUPPORTED_TYPES) == 12
        for dtype in (
            pa.bool_(),
            pa.int8(), pa.int16(), pa.int32(), pa.int64(),
            pa.uint8(), pa.uint16(), pa.uint32(), pa.uint64(),
            pa.float32(), pa.float64(),
            pa.string(),
        ):
            assert is_supported_type(dtype)

    @pytest.mark.parametrize(
        "dtype",
        [
            pa.list_(pa.int32()),
            pa.struct([("x", pa.int32())]),
            pa.large_string(),
            pa.binary(),
            pa.timestamp("ms"),
            pa.date32(),
            pa.float16(),
            pa.decimal128(10, 2),
            pa.dictionary(pa.int32(), pa.string()),
            pa.null(),
        ],
    )
    def test_unsupported(self, dtype):
        """Nested, temporal and other non-primitive types are unsupported."""
        assert not is_supported_type(dtype)
        assert type_kind(dtype) is None

    def test_type_kinds(self):
        """Types map to their formatting family."""
        assert type_kind(pa.bool_()) is TypeKind.BOOLEAN
        assert type_kind(pa.int16()) is TypeKind.SIGNED_INT
        assert type_kind(pa.uint64()) is TypeKind.UNSIGNED_INT
        assert type_kind(pa.float32()) is TypeKind.FLOAT32
        assert type_kind(pa.float64()) is TypeKind.FLOAT64
        assert type_kind(pa.utf8()) is TypeKind.STRING

    def test_type_kind_str(self):
        assert str(TypeKind.SIGNED_INT) == "signed_int"


# =============================================================================
# validate_schema
# =============================================================================


class TestValidateSchema:
    """Tests for construction-time schema validation."""

    def test_all_supported_passes(self, all_types_schema):
        """A schema of supported types validates without error."""
        validate_schema(all_types_schema)

    def test_empty_schema_passes(self):
        validate_schema(pa.schema([]))

    def test_nested_field_rejected(self):
        """A list field raises UnsupportedTypeError naming the field."""
        schema = pa.schema([("a", pa.int32()), ("tags", pa.list_(pa.string()))])

        with pytest.raises(UnsupportedTypeError) as excinfo:
            validate_schema(schema)

        assert excinfo.value.field_name == "tags"
        assert excinfo.value.field_type == pa.list_(pa.string())
        assert "tags" in str(excinfo.value)

    def test_unsupported_is_config_error(self):
        """Unsupported types are configuration errors (and ValueErrors)."""
        schema = pa.schema([("ts", pa.timestamp("s"))])
        with pytest.raises(ConfigError):
            validate_schema(schema)
        with pytest.raises(ValueError):
            validate_schema(schema)

    def test_not_a_schema(self):
        """Non-schema input raises TypeError."""
        with pytest.raises(TypeError, match="pyarrow.Schema"):
            validate_schema([("a", pa.int32())])


# =============================================================================
# Structural equality
# =============================================================================


class TestSchemaEquality:
    """Tests for schemas_equal / schema_difference."""

    def test_identical(self, ab_schema):
        same = pa.schema([("a", pa.int32()), ("b", pa.string())])
        assert schemas_equal(ab_schema, same)
        assert schema_difference(ab_schema, same) is None

    def test_different_name(self, ab_schema):
        other = pa.schema([("a", pa.int32()), ("c", pa.string())])
        assert not schemas_equal(ab_schema, other)
        assert "expected name 'b'" in schema_difference(ab_schema, other)

    def test_different_type(self):
        a = pa.schema([("a", pa.int32())])
        b = pa.schema([("a", pa.int64())])
        assert not schemas_equal(a, b)
        assert "expected type int32, got int64" in schema_difference(a, b)

    def test_different_order(self, ab_schema):
        other = pa.schema([("b", pa.string()), ("a", pa.int32())])
        assert not schemas_equal(ab_schema, other)

    def test_different_count(self, ab_schema):
        other = pa.schema([("a", pa.int32())])
        assert not schemas_equal(ab_schema, other)
        assert schema_difference(ab_schema, other) == "expected 2 fields, got 1"

    def test_nullability_ignored(self):
        """Nullability does not take part in structural equality."""
        a = pa.schema([pa.field("a", pa.int32(), nullable=True)])
        b = pa.schema([pa.field("a", pa.int32(), nullable=False)])
        assert schemas_equal(a, b)

    def test_metadata_ignored(self, ab_schema):
        other = ab_schema.with_metadata({"source": "test"})
        assert schemas_equal(ab_schema, other)
