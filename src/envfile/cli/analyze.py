"""Record analysis CLI command."""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from typing import Any

from ..codec.schema import RecordSchema, is_record_class
from ..models.base import EnvRecord
from ..utils.keys import duplicate_keys

logger = logging.getLogger(__name__)


def analyze_file(file_path: Path) -> None:
    """Analyze all record classes in a Python file.

    Records are EnvRecord subclasses, other pydantic models and dataclasses
    defined in the file itself (not imported into it).

    Args:
        file_path: Path to Python file containing record definitions
    """
    spec = importlib.util.spec_from_file_location("user_module", file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules["user_module"] = module
    spec.loader.exec_module(module)

    record_classes = []
    for _name, obj in inspect.getmembers(module, inspect.isclass):
        if obj is not EnvRecord and is_record_class(obj) and obj.__module__ == "user_module":
            record_classes.append(obj)

    logger.debug("Found %d record classes in %s", len(record_classes), file_path)

    if not record_classes:
        print(f"No record classes found in {file_path}")
        return

    print("|" * 7, "envfile: Environment File Codec", "|" * 7)
    print(f"{len(record_classes)} record{'s' if len(record_classes) != 1 else ''} loaded.")
    print()

    for record_class in record_classes:
        analyze_record_class(record_class)


def analyze_record_class(record_class: type[Any]) -> None:
    """Analyze a single record class and print its key mapping.

    Args:
        record_class: Record class to analyze
    """
    print(f"{'=' * 19} {record_class.__name__} {'=' * 19}")

    schema = RecordSchema.from_record(record_class)

    for i, field_schema in enumerate(schema.fields, 1):
        field_desc = f"{i}. {field_schema.name}"

        if field_schema.skip:
            target = "(skipped)"
        else:
            target = field_schema.key_name
            info_parts = []
            if field_schema.omit_empty:
                info_parts.append("[omitempty]")
            if not field_schema.is_str:
                info_parts.append(f"(unsupported type {field_schema.kind})")
            if info_parts:
                target = f"{target} {' '.join(info_parts)}"

        dots = "." * max(1, 54 - len(field_desc) - len(target))
        print(f"        {field_desc}{dots}{target}")

    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    active = schema.active_fields()
    print(f"Keys: {len(active)}, skipped fields: {len(schema.fields) - len(active)}")
    for key, names in duplicate_keys(record_class).items():
        print(f"Warning: key {key} is shared by fields {', '.join(names)}")

    print()
