"""Environment file codec for envfile.

This module provides encoding and decoding between records and
``KEY=value`` environment file text, driven by per-field configuration.
"""

from __future__ import annotations

from .decoder import decode, parse_line
from .encoder import encode
from .schema import DEFAULT_ENCODING, FieldConfig, FieldSchema, RecordSchema, resolve_field

__all__ = [
    "encode",
    "decode",
    "parse_line",
    "resolve_field",
    "FieldConfig",
    "RecordSchema",
    "FieldSchema",
    "DEFAULT_ENCODING",
]
