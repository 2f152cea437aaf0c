from __future__ import annotations

import base64
import binascii
import logging
from pathlib import Path

"""Test fixture loading.

Fixtures live under the configured fixtures directory. A fixture can be read
in one of three encodings, matching how the step layer wants the content:

- "binary": raw bytes
- "base64": ASCII base64 text
- "latin-1": binary string (one char per byte)

fixture_to_bytes() turns any of them back into the byte buffer the workbook
codec works on.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "FixtureNotFoundError",
    "ENCODINGS",
    "resolve_fixture",
    "load_fixture",
    "load_fixture_bytes",
    "fixture_to_bytes",
]

ENCODINGS = ("binary", "base64", "latin-1")


class FixtureNotFoundError(FileNotFoundError):
    pass


def _check_encoding(encoding: str) -> None:
    if encoding not in ENCODINGS:
        raise ValueError(f"unsupported fixture encoding: {encoding} (expected one of {', '.join(ENCODINGS)})")


def resolve_fixture(fixtures_dir: Path, name: str) -> Path:
    path = Path(fixtures_dir) / name
    if not path.is_file():
        raise FixtureNotFoundError(f"fixture not found: {path}")
    return path


def load_fixture(fixtures_dir: Path, name: str, encoding: str = "binary") -> bytes | str:
    _check_encoding(encoding)
    raw = resolve_fixture(fixtures_dir, name).read_bytes()
    logger.debug(f"loaded fixture {name} bytes={len(raw)} encoding={encoding}")
    if encoding == "base64":
        return base64.b64encode(raw).decode("ascii")
    if encoding == "latin-1":
        return raw.decode("latin-1")
    return raw


def fixture_to_bytes(content: bytes | str, encoding: str = "binary") -> bytes:
    """Convert fixture content in ``encoding`` back to bytes."""
    _check_encoding(encoding)
    if encoding == "binary":
        if not isinstance(content, (bytes, bytearray)):
            raise TypeError("binary fixture content must be bytes")
        return bytes(content)
    if not isinstance(content, str):
        raise TypeError(f"{encoding} fixture content must be str")
    if encoding == "base64":
        try:
            return base64.b64decode(content, validate=True)
        except binascii.Error as e:
            raise ValueError(f"invalid base64 fixture content: {e}") from e
    return content.encode("latin-1")


def load_fixture_bytes(fixtures_dir: Path, name: str) -> bytes:
    return resolve_fixture(fixtures_dir, name).read_bytes()
