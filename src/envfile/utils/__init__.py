"""Utility functions for envfile.

This module provides key-mapping inspection helpers.
"""

from __future__ import annotations

from .keys import duplicate_keys, field_configs, key_names

__all__ = [
    "key_names",
    "field_configs",
    "duplicate_keys",
]
