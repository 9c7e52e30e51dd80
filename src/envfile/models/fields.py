"""Field configuration helpers.

This module provides convenience functions for attaching envfile
configuration to record fields.
"""

from __future__ import annotations

from typing import Any, Optional, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..codec.schema import ENV_METADATA_KEY, OMITEMPTY_FLAG, SKIP_TOKEN


def env_config(key: Optional[str] = None, *, omitempty: bool = False, skip: bool = False) -> str:
    """Build a field configuration string.

    Args:
        key: Key name in the environment file (default: field name upper-cased)
        omitempty: Omit the field when its value is empty
        skip: Exclude the field from encoding and decoding

    Returns:
        Configuration string in ``key[,flag]*`` form

    Example:
        >>> env_config("DB", omitempty=True)
        'DB,omitempty'
        >>> env_config(omitempty=True)
        ',omitempty'
        >>> env_config(skip=True)
        '-'
    """
    if skip:
        return SKIP_TOKEN
    if key == SKIP_TOKEN:
        raise ValueError(f"key {SKIP_TOKEN!r} is reserved, use skip=True")
    options = [key or ""]
    if omitempty:
        options.append(OMITEMPTY_FLAG)
    return ",".join(options)


def EnvField(
    key: Optional[str] = None, *, omitempty: bool = False, skip: bool = False, **kwargs: Any
) -> FieldInfo:
    """Create a record field with envfile configuration.

    This is a convenience wrapper around Pydantic's Field() that stores the
    configuration string under ``json_schema_extra["env"]``, where the codec
    reads it. Dataclass records use ``dataclasses.field(metadata={"env": ...})``
    instead.

    Args:
        key: Key name in the environment file (default: field name upper-cased)
        omitempty: Omit the field when its value is empty
        skip: Exclude the field from encoding and decoding
        **kwargs: Additional Field() arguments (default, description, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default.

    Example:
        >>> class Settings(EnvRecord):
        ...     database: str = EnvField("DB", default="")
        ...     token: str = EnvField(omitempty=True, default="")
    """
    extra = dict(kwargs.pop("json_schema_extra", None) or {})
    extra[ENV_METADATA_KEY] = env_config(key, omitempty=omitempty, skip=skip)
    return cast(FieldInfo, Field(json_schema_extra=extra, **kwargs))
