"""Exception hierarchy for envfile.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from EnvfileError for easy catching of any envfile-specific error.
"""

from __future__ import annotations

from typing import Optional


class EnvfileError(Exception):
    """Base exception for all envfile errors."""

    pass


class EncodeError(EnvfileError):
    """Raised when encoding a record fails."""

    pass


class DecodeError(EnvfileError):
    """Raised when decoding environment file data fails.

    Examples:
        - A line without an ``=`` separator
        - Input bytes that are not valid UTF-8
        - Target record that cannot be assigned to
    """

    pass


class UnsupportedTypeError(EncodeError, DecodeError):
    """Raised when a value is or contains a type the codec cannot handle.

    Only struct-like records (pydantic models, dataclasses) are accepted at the
    top level, and only ``str`` fields inside them.

    Examples:
        - Encoding a plain ``str`` or ``dict`` instead of a record
        - Decoding into ``None`` or into a frozen record
        - A non-skipped field annotated as ``int``

    Attributes:
        kind: Name of the offending kind (e.g. ``"int"``)
        field: Name of the offending field, if the error is field-level
    """

    def __init__(self, kind: str, field: Optional[str] = None) -> None:
        self.kind = kind
        self.field = field
        message = f"unsupported type {kind}"
        if field is not None:
            message += f" (field {field})"
        super().__init__(message)


class LineParsingError(DecodeError):
    """Raised when an environment file line cannot be parsed.

    Attributes:
        line_number: 1-based number of the offending line
    """

    def __init__(self, line_number: int) -> None:
        self.line_number = line_number
        super().__init__(f"error parsing line {line_number}")
