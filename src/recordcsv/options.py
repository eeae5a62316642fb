# src/recordcsv/options.py
"""
Writer options.

An option is a callable that mutates a WriterConfig. new_writer applies them
in the order given, so a later option wins over an earlier one for the same
setting:

    new_writer(out, schema, with_delimiter(";"), with_delimiter("\\t"))  # tab
"""

from __future__ import annotations

from typing import Callable

from pydantic import ValidationError

from recordcsv.config import WriterConfig
from recordcsv.errors import ConfigError

Option = Callable[[WriterConfig], None]


def _assign(cfg: WriterConfig, name: str, value) -> None:
    try:
        setattr(cfg, name, value)
    except ValidationError as e:
        raise ConfigError(f"Invalid value for option '{name}': {e}") from e


def with_delimiter(delimiter: str) -> Option:
    """Use `delimiter` instead of ',' as the field separator."""

    def _apply(cfg: WriterConfig) -> None:
        _assign(cfg, "delimiter", delimiter)

    return _apply


def with_header(header: bool = True) -> Option:
    """Write the schema's field names as a row before the first record."""

    def _apply(cfg: WriterConfig) -> None:
        _assign(cfg, "header", header)

    return _apply


def with_config(config: WriterConfig) -> Option:
    """Copy every setting from `config` (e.g. one returned by load_config)."""

    def _apply(cfg: WriterConfig) -> None:
        for name in WriterConfig.model_fields:
            _assign(cfg, name, getattr(config, name))

    return _apply
