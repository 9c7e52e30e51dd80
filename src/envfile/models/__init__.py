"""Pydantic record modeling for envfile.

This module provides the EnvRecord class and field utilities for defining
records that map to environment files.
"""

from __future__ import annotations

from .base import EnvRecord
from .fields import EnvField, env_config

__all__ = [
    "EnvRecord",
    "EnvField",
    "env_config",
]
