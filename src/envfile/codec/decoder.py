"""Environment file decoder for records.

This module provides the decode() function that reads ``KEY=value`` lines
and assigns the values to the matching fields of an existing record.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple, Union

from ..exceptions import DecodeError, LineParsingError, UnsupportedTypeError
from .schema import DEFAULT_ENCODING, FieldSchema, RecordSchema, is_frozen, is_record, value_kind

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
SEPARATOR = "="


def parse_line(line: str, line_number: int) -> Optional[Tuple[str, str]]:
    """Split one environment file line into a raw key/value pair.

    The key is stripped of surrounding whitespace. The value is returned as
    found after the first ``=``, so additional ``=`` characters are kept.

    Args:
        line: Line text, without its line terminator
        line_number: 1-based number of the line, used in errors

    Returns:
        (key, raw_value) tuple, or None for blank and comment lines

    Raises:
        LineParsingError: If the line has no ``=`` separator

    Example:
        >>> parse_line("  TEST=abc=123 ", 1)
        ('TEST', 'abc=123')
        >>> parse_line("# comment", 2) is None
        True
    """
    line = line.strip()
    if not line or line.startswith(COMMENT_PREFIX):
        return None

    key, sep, value = line.partition(SEPARATOR)
    if not sep:
        raise LineParsingError(line_number)
    return key.strip(), value


def decode(data: Union[bytes, bytearray, memoryview, str], record: Any) -> None:
    """Decode environment file data into an existing record.

    Matching fields are assigned in place; fields that the data does not
    mention keep their current values, and keys that no field maps to are
    ignored. The first malformed line aborts decoding.

    Args:
        data: Environment file contents (UTF-8 bytes-like object or text)
        record: Mutable record instance to assign to

    Raises:
        UnsupportedTypeError: If record is not a mutable record instance, data
            is neither text nor bytes, or a matched field is not a string
        LineParsingError: If a line has no ``=`` separator
        DecodeError: If data is not valid UTF-8 or a value fails validation

    Examples:
        ```python
        from envfile import EnvField, EnvRecord, decode

        class Settings(EnvRecord):
            foo: str = ""
            database: str = EnvField("DB", default="")
            ignored: str = EnvField(skip=True, default="")

        settings = Settings()
        decode(b"FOO=bar\\nDB=test\\n# comment\\nIGNORED=x\\n", settings)
        # settings.foo == "bar", settings.database == "test", settings.ignored == ""
        ```
    """
    if not is_record(record):
        raise UnsupportedTypeError(value_kind(record))
    if is_frozen(record):
        raise UnsupportedTypeError(f"frozen {type(record).__name__}")

    text = _to_text(data)

    fields = RecordSchema.from_record(record).active_fields()

    count = 0
    for line_number, line in enumerate(text.split("\n"), start=1):
        pair = parse_line(line, line_number)
        if pair is None:
            continue
        key, value = pair

        matched = False
        for field_schema in fields:
            if field_schema.key_name == key:
                matched = True
                _decode_field(record, field_schema, value)

        if matched:
            count += 1
        else:
            logger.debug("Line %d: no field for key %s", line_number, key)

    logger.debug("Decoded %d keys into %s", count, type(record).__name__)


def _decode_field(record: Any, field_schema: FieldSchema, raw_value: str) -> None:
    """Assign a single raw value to a record field.

    Args:
        record: Record to assign to
        field_schema: Schema information for the field
        raw_value: Value as found after the first ``=`` (not yet stripped)

    Raises:
        UnsupportedTypeError: If the field is not a string
        DecodeError: If the record rejects the value
    """
    str_type = field_schema.str_type
    if str_type is None:
        raise UnsupportedTypeError(field_schema.kind, field_schema.name)

    if field_schema.omit_empty and raw_value == "":
        logger.debug("Leaving empty field %s unassigned", field_schema.name)
        return

    try:
        setattr(record, field_schema.name, str_type(raw_value.strip()))
    except (TypeError, ValueError) as e:
        # pydantic ValidationError is a ValueError
        raise DecodeError(f"Invalid value for field {field_schema.name}: {e}") from e


def _to_text(data: Any) -> str:
    """Return the document as text, decoding bytes-like input as UTF-8.

    Raises:
        UnsupportedTypeError: If data is neither text nor bytes-like
        DecodeError: If the bytes are not valid UTF-8
    """
    if isinstance(data, str):
        return data
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise UnsupportedTypeError(value_kind(data))
    try:
        return bytes(data).decode(DEFAULT_ENCODING)
    except UnicodeDecodeError as e:
        raise DecodeError(f"Invalid {DEFAULT_ENCODING} data: {e}") from e
