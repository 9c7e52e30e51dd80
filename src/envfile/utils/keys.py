"""Key mapping inspection utilities.

This module provides functions to see which environment file keys a record
reads and writes, without encoding or decoding anything.
"""

from __future__ import annotations

from typing import Any

from ..codec.schema import FieldConfig, RecordSchema


def key_names(record_or_class: Any) -> dict[str, str]:
    """Get the key name of each non-skipped field of a record.

    Args:
        record_or_class: Record instance or class (pydantic model or dataclass)

    Returns:
        Dictionary mapping field names to key names, in declaration order

    Raises:
        UnsupportedTypeError: If the argument is not a record

    Example:
        >>> class Settings(EnvRecord):
        ...     name: str = ""
        ...     database: str = EnvField("DB", default="")
        >>> key_names(Settings)
        {'name': 'NAME', 'database': 'DB'}
    """
    return RecordSchema.from_record(record_or_class).key_names()


def field_configs(record_or_class: Any) -> dict[str, FieldConfig]:
    """Get the resolved configuration of every field, including skipped ones.

    Args:
        record_or_class: Record instance or class

    Returns:
        Dictionary mapping field names to their FieldConfig

    Raises:
        UnsupportedTypeError: If the argument is not a record
    """
    schema = RecordSchema.from_record(record_or_class)
    return {field.name: field.config for field in schema.fields}


def duplicate_keys(record_or_class: Any) -> dict[str, list[str]]:
    """Find keys that more than one field maps to.

    Decoding assigns a shared key to every field that maps to it, which is
    rarely intended.

    Args:
        record_or_class: Record instance or class

    Returns:
        Dictionary mapping each shared key to the field names using it

    Example:
        >>> duplicate_keys(Settings)
        {}
    """
    by_key: dict[str, list[str]] = {}
    for field_name, key in key_names(record_or_class).items():
        by_key.setdefault(key, []).append(field_name)
    return {key: names for key, names in by_key.items() if len(names) > 1}
