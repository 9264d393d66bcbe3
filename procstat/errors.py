"""Errors raised while collecting metrics, and the shared parsing helpers."""

from __future__ import annotations

import os
import re
from pathlib import Path

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


class MetricError(Exception):
    """Base class for every error raised while collecting a metric."""


class InvalidFieldNumberError(MetricError):
    """A line held a different number of fields than the format requires."""

    def __init__(self, name, count, data):
        self.name = name
        self.count = count
        self.data = data
        super().__init__(f"invalid number of fields for {name}: {count} in {data!r}")


class ConversionError(MetricError):
    """A text value could not be turned into the requested number type."""

    def __init__(self, value, kind):
        self.value = value
        self.kind = kind
        super().__init__(f"cannot convert {value!r} to {kind}")


def read_file_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a text file without their line endings."""
    try:
        return Path(path).read_text().splitlines()
    except OSError as exc:
        raise MetricError(f"cannot read {os.fspath(path)}: {exc}") from exc


def _parse_int(value: str, pattern: re.Pattern[str], low: int, high: int, kind: str) -> int:
    if not pattern.fullmatch(value):
        raise ConversionError(value, kind)
    number = int(value)
    if not low <= number <= high:
        raise ConversionError(value, kind)
    return number


def to_i64(value: str) -> int:
    """Parse a signed 64-bit integer, raising ConversionError on bad input."""
    return _parse_int(value, _SIGNED_RE, _I64_MIN, _I64_MAX, "i64")


def to_u64(value: str) -> int:
    """Parse an unsigned 64-bit integer, raising ConversionError on bad input."""
    return _parse_int(value, _UNSIGNED_RE, 0, _U64_MAX, "u64")