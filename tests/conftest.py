"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_document() -> bytes:
    """Environment file with comments, blank lines and an unknown key."""
    return b"""FOO=bar
DB=test
# Comments and empty lines are ignored
EMPTY=

IGNORED=valuenotread
"""


@pytest.fixture
def record_source() -> str:
    """Python source defining records, for CLI analysis."""
    return '''
from __future__ import annotations

from dataclasses import dataclass, field

from envfile import EnvField, EnvRecord


class Settings(EnvRecord):
    """Application settings."""

    name: str = ""
    my_setting: str = EnvField("MY_SETTING", default="")
    empty: str = EnvField(omitempty=True, default="")
    retries: int = EnvField(skip=True, default=3)


@dataclass
class Credentials:
    user: str = field(default="", metadata={"env": "DB_USER"})
    password: str = field(default="", metadata={"env": "DB_USER"})
'''
