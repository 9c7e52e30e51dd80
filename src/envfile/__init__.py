"""envfile: Environment File Codec

A Python library for reading and writing environment files (``KEY=value``
lines) from and to records, in the spirit of ``json.dumps``/``json.loads``
but driven by per-field configuration.

Key Features:
- Pydantic- and dataclass-based records
- Per-field key renaming, skipping and omit-empty
- Comment and blank line tolerant decoding with line-numbered errors

Quick Start:
    >>> from envfile import EnvField, EnvRecord, decode, encode
    >>>
    >>> class Settings(EnvRecord):
    ...     name: str = ""
    ...     my_setting: str = EnvField("MY_SETTING", default="")
    ...     empty: str = EnvField(omitempty=True, default="")
    >>>
    >>> data = encode(Settings(name="foo", my_setting="https://127.0.0.1"))
    >>> data
    b'NAME=foo\\nMY_SETTING=https://127.0.0.1\\n'
    >>> settings = Settings()
    >>> decode(data, settings)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import FieldConfig, RecordSchema, decode, encode, parse_line, resolve_field
from .exceptions import (
    DecodeError,
    EncodeError,
    EnvfileError,
    LineParsingError,
    UnsupportedTypeError,
)
from .models import EnvField, EnvRecord, env_config
from .utils import duplicate_keys, field_configs, key_names

__all__ = [
    # Core API
    "EnvRecord",
    "encode",
    "decode",
    # Field configuration
    "EnvField",
    "env_config",
    "resolve_field",
    "FieldConfig",
    "RecordSchema",
    "parse_line",
    # Exceptions
    "EnvfileError",
    "EncodeError",
    "DecodeError",
    "UnsupportedTypeError",
    "LineParsingError",
    # Inspection
    "key_names",
    "field_configs",
    "duplicate_keys",
    # Version
    "__version__",
]
