# src/recordcsv/__init__.py
"""
recordcsv - write Arrow record batches as delimited text

Usage:
    import pyarrow as pa
    import recordcsv

    schema = pa.schema([("a", pa.int32()), ("b", pa.string())])
    batch = pa.record_batch([[1, -5], ["x", "y"]], schema=schema)

    with open("out.csv", "w", newline="") as fh:
        writer = recordcsv.new_writer(fh, schema, recordcsv.with_header())
        writer.write(batch)

    # Settings from YAML
    cfg = recordcsv.load_config("csv.yml")
    writer = recordcsv.new_writer(fh, schema, recordcsv.with_config(cfg))
"""

from recordcsv.version import VERSION as __version__

from recordcsv.config import WriterConfig, config_from_dict, load_config
from recordcsv.errors import (
    ConfigError,
    RecordCsvError,
    SchemaMismatchError,
    UnsupportedTypeError,
)
from recordcsv.formatters import format_value
from recordcsv.options import Option, with_config, with_delimiter, with_header
from recordcsv.types import (
    SUPPORTED_TYPES,
    TypeKind,
    is_supported_type,
    schemas_equal,
    validate_schema,
)
from recordcsv.writer import Writer, new_writer

__all__ = [
    "__version__",
    # writer
    "Writer",
    "new_writer",
    # options / config
    "Option",
    "with_delimiter",
    "with_header",
    "with_config",
    "WriterConfig",
    "config_from_dict",
    "load_config",
    # types
    "SUPPORTED_TYPES",
    "TypeKind",
    "is_supported_type",
    "schemas_equal",
    "validate_schema",
    "format_value",
    # errors
    "RecordCsvError",
    "ConfigError",
    "UnsupportedTypeError",
    "SchemaMismatchError",
]
