"""Configured swap devices, as listed in /proc/swaps."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConversionError, InvalidFieldNumberError, read_file_lines, to_i64, to_u64

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass
class Swap:
    """One entry of /proc/swaps."""

    filename: str = ""
    swap_type: str = ""
    size: int = 0
    used: int = 0
    priority: int = 0


def _u64_or_zero(value: str) -> int:
    try:
        return to_u64(value)
    except ConversionError:
        return 0


def _i32_or_zero(value: str) -> int:
    try:
        number = to_i64(value)
    except ConversionError:
        return 0
    return number if _I32_MIN <= number <= _I32_MAX else 0


def collect() -> list[Swap]:
    """Return all swap devices configured on the running system."""
    return collect_from("/proc/swaps")


def collect_from(filename: str | os.PathLike[str]) -> list[Swap]:
    """Parse a swaps file; numbers that do not parse are read as zero."""
    swaps = []
    for line in read_file_lines(filename)[1:]:
        fields = line.split()
        if len(fields) != 5:
            raise InvalidFieldNumberError("swaps", len(fields), line)
        name, swap_type, size, used, priority = fields
        swaps.append(
            Swap(
                filename=name,
                swap_type=swap_type,
                size=_u64_or_zero(size),
                used=_u64_or_zero(used),
                priority=_i32_or_zero(priority),
            )
        )
    return swaps