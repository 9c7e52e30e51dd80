"""Field configuration resolution and record introspection.

This module turns the per-field ``env`` configuration string into a key name
and options, and walks pydantic models or dataclasses to collect the
encoding-relevant information for each of their fields.

The configuration grammar is ``key[,flag]*``:

- ``""`` (or a leading comma): key is the field name upper-cased
- ``"-"``: the field is skipped entirely
- ``"MY_KEY"``: the field is renamed to ``MY_KEY``
- ``omitempty`` flag: empty strings are not written, and empty values are not read
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, List, Optional, Type, get_type_hints

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import UnsupportedTypeError

#: Metadata key holding the configuration string on a field.
ENV_METADATA_KEY = "env"

SKIP_TOKEN = "-"
OMITEMPTY_FLAG = "omitempty"

#: Text encoding used for both directions.
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class FieldConfig:
    """Resolved configuration for a single field.

    Attributes:
        key_name: Key used in the environment file (empty when skipped)
        skip: Field is excluded from both encoding and decoding
        omit_empty: Empty values are neither written nor assigned
    """

    key_name: str
    skip: bool = False
    omit_empty: bool = False


def resolve_field(field_name: str, raw_config: Optional[str]) -> FieldConfig:
    """Resolve a field's key name and options from its configuration string.

    Malformed configuration never fails; it degrades to the defaults. Unknown
    flags are ignored.

    Args:
        field_name: Declared name of the field
        raw_config: Comma-separated configuration string, or None

    Returns:
        FieldConfig with the key name and options

    Example:
        >>> resolve_field("my_setting", None)
        FieldConfig(key_name='MY_SETTING', skip=False, omit_empty=False)
        >>> resolve_field("db", "DATABASE_URL,omitempty")
        FieldConfig(key_name='DATABASE_URL', skip=False, omit_empty=True)
    """
    options = (raw_config or "").split(",")
    omit_empty = OMITEMPTY_FLAG in options[1:]

    name = options[0]
    if name == SKIP_TOKEN:
        return FieldConfig(key_name="", skip=True, omit_empty=omit_empty)
    if name == "":
        # TODO: strip characters that are not valid in shell variable names
        name = field_name.upper()
    return FieldConfig(key_name=name, omit_empty=omit_empty)


def kind_name(obj: Any) -> str:
    """Describe the kind of a type annotation, for error reporting."""
    if isinstance(obj, type):
        return obj.__name__
    if isinstance(obj, str):
        return obj
    return str(obj).replace("typing.", "")


def value_kind(value: Any) -> str:
    """Describe the kind of a runtime value, for error reporting."""
    if isinstance(value, type):
        return "type"
    return type(value).__name__


def is_record(obj: Any) -> bool:
    """Return True if obj is a record instance (pydantic model or dataclass)."""
    if isinstance(obj, type):
        return False
    return isinstance(obj, BaseModel) or dataclasses.is_dataclass(obj)


def is_record_class(obj: Any) -> bool:
    """Return True if obj is a record class (pydantic model or dataclass)."""
    if not isinstance(obj, type):
        return False
    return issubclass(obj, BaseModel) or dataclasses.is_dataclass(obj)


def is_frozen(record: Any) -> bool:
    """Return True if attribute assignment on the record is forbidden."""
    if isinstance(record, BaseModel):
        return bool(type(record).model_config.get("frozen", False))
    return bool(type(record).__dataclass_params__.frozen)


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single record field.

    Attributes:
        name: Field name (attribute name on the record)
        python_type: Declared type annotation
        raw_config: Configuration string from the field metadata ("" if none)
        config: Resolved configuration
    """

    name: str
    python_type: Any
    raw_config: str
    config: FieldConfig

    @property
    def key_name(self) -> str:
        return self.config.key_name

    @property
    def skip(self) -> bool:
        return self.config.skip

    @property
    def omit_empty(self) -> bool:
        return self.config.omit_empty

    @property
    def str_type(self) -> Optional[type]:
        """The string class a field holds, or None for non-string fields.

        ``str`` subclasses and ``NewType`` aliases of ``str`` count as strings.
        """
        python_type = self.python_type
        # NewType chains expose the wrapped type as __supertype__
        while hasattr(python_type, "__supertype__"):
            python_type = python_type.__supertype__
        if isinstance(python_type, type) and issubclass(python_type, str):
            return python_type
        # Unresolvable string annotations are compared by name
        if python_type == "str":
            return str
        return None

    @property
    def is_str(self) -> bool:
        """Whether the field holds a string."""
        return self.str_type is not None

    @property
    def kind(self) -> str:
        return kind_name(self.python_type)


class RecordSchema:
    """Schema information for an entire record type.

    Introspects a pydantic model or a dataclass and resolves the configuration
    of each field, in declaration order.

    Example:
        >>> schema = RecordSchema.from_record(settings)
        >>> for field in schema.fields:
        ...     print(f"{field.name}: {field.key_name}")
    """

    def __init__(self, record_class: Type[Any]) -> None:
        """Initialize schema from a record class.

        Args:
            record_class: Pydantic model or dataclass to introspect

        Raises:
            UnsupportedTypeError: If record_class is not a record class
        """
        if not is_record_class(record_class):
            raise UnsupportedTypeError(value_kind(record_class))
        self.record_class = record_class
        self.fields: List[FieldSchema] = []
        self._introspect()

    @classmethod
    def from_record(cls, record_or_class: Any) -> RecordSchema:
        """Create a schema from a record instance or a record class.

        Raises:
            UnsupportedTypeError: If the argument is neither
        """
        if is_record(record_or_class):
            return cls(type(record_or_class))
        if is_record_class(record_or_class):
            return cls(record_or_class)
        raise UnsupportedTypeError(value_kind(record_or_class))

    def _introspect(self) -> None:
        """Introspect the record class and populate field schemas."""
        if issubclass(self.record_class, BaseModel):
            for field_name, field_info in self.record_class.model_fields.items():
                raw_config = self._pydantic_config(field_info)
                self._add_field(field_name, field_info.annotation, raw_config)
            return

        try:
            hints = get_type_hints(self.record_class)
        except (NameError, TypeError):
            # Annotations referring to names that are not importable here
            hints = {}

        for field in dataclasses.fields(self.record_class):
            raw_config = field.metadata.get(ENV_METADATA_KEY, "")
            self._add_field(field.name, hints.get(field.name, field.type), raw_config)

    def _add_field(self, name: str, python_type: Any, raw_config: Any) -> None:
        raw_config = raw_config if isinstance(raw_config, str) else ""
        self.fields.append(
            FieldSchema(
                name=name,
                python_type=python_type,
                raw_config=raw_config,
                config=resolve_field(name, raw_config),
            )
        )

    @staticmethod
    def _pydantic_config(field_info: FieldInfo) -> str:
        """Extract the configuration string from pydantic field metadata."""
        extra = field_info.json_schema_extra
        if isinstance(extra, dict):
            value = extra.get(ENV_METADATA_KEY, "")
            return value if isinstance(value, str) else ""
        return ""

    def active_fields(self) -> List[FieldSchema]:
        """Fields that take part in encoding and decoding (not skipped)."""
        return [field for field in self.fields if not field.skip]

    def key_names(self) -> dict[str, str]:
        """Map each non-skipped field name to its key name."""
        return {field.name: field.key_name for field in self.active_fields()}
