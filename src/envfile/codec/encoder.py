"""Environment file encoder for records.

This module provides the encode() function that converts a record instance
(pydantic model or dataclass) to ``KEY=value`` lines.
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import EncodeError, UnsupportedTypeError
from .schema import DEFAULT_ENCODING, FieldSchema, RecordSchema, is_record, value_kind

logger = logging.getLogger(__name__)


def encode(record: Any) -> bytes:
    """Encode a record to environment file format.

    Fields are written in declaration order, one ``KEY=value`` line each.
    Values are copied verbatim; no quoting or trimming is applied.

    Args:
        record: Record instance to encode, or None

    Returns:
        UTF-8 encoded environment file (empty for None)

    Raises:
        UnsupportedTypeError: If record is not a record instance, or a
            non-skipped field is not a string
        EncodeError: If a non-skipped field was never assigned

    Examples:
        ```python
        from envfile import EnvField, EnvRecord, encode

        class Settings(EnvRecord):
            name: str
            my_setting: str = EnvField("MY_SETTING")
            empty: str = EnvField(omitempty=True, default="")

        encode(Settings(name="foo", my_setting="https://127.0.0.1"))
        # b"NAME=foo\\nMY_SETTING=https://127.0.0.1\\n"
        ```
    """
    if record is None:
        return b""

    if not is_record(record):
        raise UnsupportedTypeError(value_kind(record))

    schema = RecordSchema.from_record(record)

    lines: list[str] = []
    for field_schema in schema.fields:
        if field_schema.skip:
            logger.debug("Skipping field %s", field_schema.name)
            continue
        try:
            value = getattr(record, field_schema.name)
        except AttributeError as e:
            raise EncodeError(f"Field {field_schema.name} has no value") from e

        line = _encode_field(field_schema, value)
        if line is not None:
            lines.append(line)

    logger.debug("Encoded %s: %d lines", type(record).__name__, len(lines))
    return "".join(lines).encode(DEFAULT_ENCODING)


def _encode_field(field_schema: FieldSchema, value: Any) -> str | None:
    """Encode a single field value.

    Args:
        field_schema: Schema information for the field
        value: Field value to encode

    Returns:
        The encoded line, or None if the field is omitted

    Raises:
        UnsupportedTypeError: If the field is not a string
    """
    if not field_schema.is_str:
        raise UnsupportedTypeError(field_schema.kind, field_schema.name)
    if not isinstance(value, str):
        raise UnsupportedTypeError(value_kind(value), field_schema.name)

    if field_schema.omit_empty and value == "":
        logger.debug("Omitting empty field %s", field_schema.name)
        return None

    return f"{field_schema.key_name}={value}\n"
