# src/recordcsv/config.py
"""
Writer settings.

WriterConfig holds every writer-level setting. Options (see recordcsv.options)
mutate an instance of it in order; assignment is validated, so a bad value is
rejected at the option that sets it.

Settings can also live in a YAML file:

    # csv.yml
    delimiter: ";"
    header: true

    cfg = load_config("csv.yml")
    writer = new_writer(stream, schema, with_config(cfg))
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from recordcsv.errors import ConfigError

_FORBIDDEN_DELIMITERS = {'"', "\r", "\n"}


class WriterConfig(BaseModel):
    """Writer-level settings applied at construction."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    delimiter: str = Field(",", description="Field separator, a single character.")
    header: bool = Field(False, description="Write field names as the first row.")

    @field_validator("delimiter")
    @classmethod
    def _check_delimiter(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"delimiter must be a single character, got {v!r}")
        if v in _FORBIDDEN_DELIMITERS:
            raise ValueError(f"delimiter cannot be {v!r}")
        return v


def config_from_dict(data: Dict[str, Any]) -> WriterConfig:
    """
    Build a WriterConfig from a plain mapping.

    Raises:
        ConfigError: On unknown keys or invalid values
    """
    try:
        return WriterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid writer config: {e}") from e


def load_config(path: Union[str, Path]) -> WriterConfig:
    """
    Load writer settings from a YAML file.

    An empty file yields the defaults.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file is not a YAML mapping or holds invalid values
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse writer config {path}: {e}") from e

    if data is None:
        return WriterConfig()
    if not isinstance(data, dict):
        raise ConfigError(
            f"Writer config {path} must be a mapping, got {type(data).__name__}"
        )
    return config_from_dict(data)
