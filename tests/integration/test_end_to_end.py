"""End-to-end integration tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from envfile import (
    EnvField,
    EnvRecord,
    LineParsingError,
    UnsupportedTypeError,
    decode,
    duplicate_keys,
    encode,
    key_names,
)


class ServiceSettings(EnvRecord):
    """Settings for a web service."""

    app_name: str = ""
    database_url: str = EnvField("DATABASE_URL", default="")
    secret_key: str = EnvField("SECRET_KEY", omitempty=True, default="")
    log_level: str = EnvField("LOG_LEVEL", default="info")
    workers: int = EnvField(skip=True, default=4)


@dataclass
class WorkerSettings:
    """Subset of the same file, read by another process."""

    database_url: str = field(default="", metadata={"env": "DATABASE_URL"})
    queue: str = field(default="default", metadata={"env": "QUEUE,omitempty"})


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_settings_file_workflow(self, tmp_path: Path) -> None:
        """Test writing settings to a file and reading them back."""
        # 1. Create record
        settings = ServiceSettings(
            app_name="shop",
            database_url="postgres://user:pw@db:5432/shop?sslmode=require",
            log_level="debug",
            workers=8,
        )

        # 2. Inspect the key mapping
        assert key_names(settings) == {
            "app_name": "APP_NAME",
            "database_url": "DATABASE_URL",
            "secret_key": "SECRET_KEY",
            "log_level": "LOG_LEVEL",
        }
        assert duplicate_keys(settings) == {}

        # 3. Encode and write; the caller owns the I/O
        path = tmp_path / ".env"
        path.write_bytes(encode(settings))

        assert path.read_text(encoding="utf-8") == (
            "APP_NAME=shop\n"
            "DATABASE_URL=postgres://user:pw@db:5432/shop?sslmode=require\n"
            "LOG_LEVEL=debug\n"
        )

        # 4. A human edits the file
        with path.open("a", encoding="utf-8") as fh:
            fh.write("\n# added by ops\nSECRET_KEY = s3cr3t==\nUNRELATED=1\n")

        # 5. Decode into a fresh record
        loaded = ServiceSettings()
        decode(path.read_bytes(), loaded)

        assert loaded.app_name == "shop"
        assert loaded.database_url == settings.database_url
        assert loaded.secret_key == "s3cr3t=="
        assert loaded.log_level == "debug"
        # Skipped fields keep their own value
        assert loaded.workers == 4

    def test_partial_decode(self) -> None:
        """Test a second record type reading a subset of the same file."""
        data = encode(ServiceSettings(app_name="shop", database_url="sqlite://"))

        worker = WorkerSettings()
        decode(data, worker)

        assert worker == WorkerSettings(database_url="sqlite://", queue="default")

    def test_roundtrip(self) -> None:
        """Test encode then decode reproduces the record."""
        original = ServiceSettings(
            app_name="a", database_url="b=c", secret_key="d", log_level="e"
        )
        copy = ServiceSettings()
        decode(encode(original), copy)

        assert copy == original

    def test_bad_file_leaves_error_location(self) -> None:
        """Test a malformed edit is reported by line."""
        data = b"APP_NAME=shop\n# comment\nDATABASE_URL sqlite://\n"

        with pytest.raises(LineParsingError) as excinfo:
            decode(data, ServiceSettings())

        assert excinfo.value.line_number == 3

    def test_unsupported_field_in_use(self) -> None:
        """Test a record whose non-string field is not skipped."""

        class BadSettings(EnvRecord):
            port: int = EnvField("PORT", default=80)

        with pytest.raises(UnsupportedTypeError, match="unsupported type int"):
            encode(BadSettings())
        with pytest.raises(UnsupportedTypeError, match="unsupported type int"):
            decode(b"PORT=8080\n", BadSettings())
