#!/usr/bin/env python3
"""Basic usage example for envfile.

This example demonstrates:
1. Defining a record with EnvRecord and EnvField
2. Encoding to environment file format
3. Decoding a hand-edited file back into a record
4. Inspecting the key mapping
"""

from __future__ import annotations

from envfile import EnvField, EnvRecord, LineParsingError, decode, encode, key_names


# Define a record class
class Settings(EnvRecord):
    """Web service settings.

    Fields map to upper-cased keys unless EnvField gives another key.
    """

    name: str = ""
    my_setting: str = EnvField("MY_SETTING", default="")
    empty: str = EnvField(omitempty=True, default="")
    workers: int = EnvField(skip=True, default=4)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("envfile Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Key mapping...")
    for field_name, key in key_names(Settings).items():
        print(f"   {field_name:12s} -> {key}")
    print()

    print("2. Encoding a record...")
    settings = Settings(name="foo", my_setting="https://127.0.0.1")
    data = encode(settings)
    print(data.decode("utf-8"))

    print("3. Decoding a hand-edited file...")
    edited = data + b"\n# set by ops\nEMPTY=now set\nUNKNOWN=ignored\n"
    loaded = Settings()
    decode(edited, loaded)
    print(f"   {loaded!r}")
    print()

    print("4. Malformed input...")
    try:
        decode(b"NAME=foo\nMY_SETTING https://127.0.0.1\n", Settings())
    except LineParsingError as e:
        print(f"   {e}")
    print()


if __name__ == "__main__":
    main()
