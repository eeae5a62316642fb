# src/recordcsv/writer.py
"""
Writer: projects Arrow record batches onto delimited text rows.

    import pyarrow as pa
    from recordcsv import new_writer, with_delimiter

    schema = pa.schema([("a", pa.int32()), ("b", pa.string())])
    with open("out.csv", "w", newline="") as fh:
        w = new_writer(fh, schema, with_delimiter(";"))
        w.write(pa.record_batch([[1, -5], ["x", "y"]], schema=schema))

    # out.csv
    1;x
    -5;y

How a write works
-----------------
1. The record's schema is compared structurally (names + types, in order)
   with the writer's schema. A mismatch raises SchemaMismatchError and the
   stream is left untouched.
2. A rows x columns buffer of "" is allocated.
3. Each column is formatted by the formatter picked for the *writer's* field
   type at construction, and token i lands in buffer[i][j].
4. The whole buffer goes to csv.writer.writerows() in a single call. Errors
   raised by the stream propagate unchanged.

The writer never closes the stream it was given, and does no locking: calls
on one writer must not overlap.
"""

from __future__ import annotations

import csv
from typing import IO, Any, Callable, List

import polars as pl
import pyarrow as pa

from recordcsv.config import WriterConfig
from recordcsv.errors import RecordCsvError, SchemaMismatchError
from recordcsv.formatters import column_formatter
from recordcsv.logging import get_logger, log_exception
from recordcsv.options import Option
from recordcsv.types import schema_difference, validate_schema

_logger = get_logger(__name__)

# string_view only exists on newer pyarrow releases
_STRING_FAMILY = tuple(
    t() for t in (pa.large_string, getattr(pa, "string_view", None)) if t is not None
)


class Writer:
    """
    Writes pyarrow.RecordBatch objects as CSV rows to a text stream.

    Construction validates the schema; a schema with an unsupported field type
    raises UnsupportedTypeError, so an unusable writer is never returned.
    """

    def __init__(self, stream: IO[str], schema: pa.Schema, *options: Option):
        validate_schema(schema)

        cfg = WriterConfig()
        for opt in options:
            opt(cfg)

        self._stream = stream
        self._schema = schema
        self._config = cfg
        self._csv = csv.writer(stream, delimiter=cfg.delimiter)
        # one formatter per field, fixed for the writer's lifetime
        self._formatters: List[Callable[[pa.Array], List[str]]] = [
            column_formatter(field.type) for field in schema
        ]
        self._header_written = False
        self.records_written = 0
        self.rows_written = 0

        _logger.debug(
            "csv writer ready: %d fields, delimiter=%r, header=%s",
            len(schema),
            cfg.delimiter,
            cfg.header,
        )

    # ------------------------------ Accessors -------------------------------

    @property
    def schema(self) -> pa.Schema:
        """The writer's schema (pyarrow schemas are immutable)."""
        return self._schema

    @property
    def config(self) -> WriterConfig:
        """A copy of the effective settings."""
        return self._config.model_copy()

    # ------------------------------ Writing ---------------------------------

    def write(self, record: pa.RecordBatch) -> None:
        """
        Write every row of `record`.

        Raises:
            TypeError: If `record` is not a pyarrow.RecordBatch
            SchemaMismatchError: If the record's schema differs from the writer's
            OSError / csv.Error: Whatever the underlying stream raises
        """
        if not isinstance(record, pa.RecordBatch):
            raise TypeError(
                f"record must be a pyarrow.RecordBatch, got {type(record).__name__}"
            )
        self._check_schema(record.schema)

        rows = self._project(record)
        if self._config.header and not self._header_written:
            rows.insert(0, [field.name for field in self._schema])

        try:
            self._csv.writerows(rows)
        except (OSError, csv.Error) as e:
            log_exception(_logger, "Failed to write record", e)
            raise

        if self._config.header:
            self._header_written = True
        self.records_written += 1
        self.rows_written += record.num_rows
        _logger.debug("wrote record %d (%d rows)", self.records_written, record.num_rows)

    def write_table(self, table: pa.Table) -> None:
        """
        Write a pyarrow.Table, one record batch at a time.

        The schema is checked once before anything is written, so a mismatching
        table emits nothing. An I/O error part-way leaves the earlier batches
        written.
        """
        if not isinstance(table, pa.Table):
            raise TypeError(f"table must be a pyarrow.Table, got {type(table).__name__}")
        self._check_schema(table.schema)

        batches = table.to_batches()
        if not batches:
            batches = [_empty_batch(table.schema)]
        for batch in batches:
            self.write(batch)

    def write_frame(self, df: pl.DataFrame) -> None:
        """
        Write a polars DataFrame.

        Polars hands strings to Arrow as large_string (or string_view); those
        columns are cast to utf8 string so the frame can match a schema
        declared with pa.string(). All other column types must match the
        writer's schema as-is.
        """
        if not isinstance(df, pl.DataFrame):
            raise TypeError(f"df must be a polars.DataFrame, got {type(df).__name__}")
        table = df.to_arrow(compat_level=pl.CompatLevel.oldest())
        self.write_table(_normalize_strings(table))

    def flush(self) -> None:
        """Flush the underlying stream, if it can be flushed."""
        flush = getattr(self._stream, "flush", None)
        if callable(flush):
            flush()

    # ------------------------------ Internals -------------------------------

    def _check_schema(self, actual: pa.Schema) -> None:
        detail = schema_difference(self._schema, actual)
        if detail is not None:
            _logger.debug("schema mismatch: %s", detail)
            raise SchemaMismatchError(self._schema, actual, detail)

    def _project(self, record: pa.RecordBatch) -> List[List[str]]:
        """Transpose the record's columns into a row-major buffer of tokens."""
        n_rows = record.num_rows
        n_cols = record.num_columns
        rows = [[""] * n_cols for _ in range(n_rows)]

        for j, fmt in enumerate(self._formatters):
            tokens = fmt(record.column(j))
            if len(tokens) != n_rows:
                raise RecordCsvError(
                    f"Column {j} produced {len(tokens)} values for a {n_rows}-row record"
                )
            for i, token in enumerate(tokens):
                rows[i][j] = token
        return rows

    def __repr__(self) -> str:
        return (
            f"Writer(fields={self._schema.names!r}, delimiter={self._config.delimiter!r}, "
            f"records_written={self.records_written})"
        )


def new_writer(stream: IO[str], schema: pa.Schema, *options: Option) -> Writer:
    """
    Create a Writer for `schema` on `stream`, applying `options` in order.

    Open files with newline="" so the csv module controls line endings.

    Raises:
        UnsupportedTypeError: If a schema field has an unsupported type
        ConfigError: If an option sets an invalid value
    """
    return Writer(stream, schema, *options)


# ------------------------------ Helpers ---------------------------------------


def _empty_batch(schema: pa.Schema) -> pa.RecordBatch:
    return pa.RecordBatch.from_arrays(
        [pa.array([], type=field.type) for field in schema], schema=schema
    )


def _normalize_strings(table: pa.Table) -> pa.Table:
    fields: List[Any] = []
    changed = False
    for field in table.schema:
        if field.type in _STRING_FAMILY:
            fields.append(field.with_type(pa.string()))
            changed = True
        else:
            fields.append(field)
    if not changed:
        return table
    return table.cast(pa.schema(fields))
