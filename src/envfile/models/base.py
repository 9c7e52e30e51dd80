"""Base record class and envfile-specific Pydantic configuration.

This module provides the EnvRecord class that envfile records can inherit from.
Plain pydantic models and dataclasses are accepted by the codec as well;
EnvRecord only fixes a sensible model configuration for them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EnvRecord(BaseModel):
    """Base class for envfile records.

    Records should inherit from this class and declare ``str`` fields. The key
    a field maps to is configured with EnvField():

    Example:
        >>> from envfile import EnvField
        >>> class Settings(EnvRecord):
        ...     name: str = ""
        ...     my_setting: str = EnvField("MY_SETTING", default="")
        ...     empty: str = EnvField(omitempty=True, default="")
        ...     internal: int = EnvField(skip=True, default=0)

    Decoding assigns to an existing instance, so fields usually carry defaults
    (``""`` is the natural zero value).
    """

    model_config = ConfigDict(
        strict=False,
        # Decoded values go through field validation
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )
