"""Namespaces of a process, read from /proc/<pid>/ns."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConversionError, InvalidFieldNumberError, MetricError, to_u64

_U32_MAX = 2**32 - 1


@dataclass
class ProcessNamespace:
    """A single namespace a process belongs to."""

    ns_type: str = ""
    inode: int = 0


def _u32_or_zero(value: str) -> int:
    try:
        number = to_u64(value)
    except ConversionError:
        return 0
    return number if number <= _U32_MAX else 0


def _list_entries(directory: Path) -> list[str]:
    try:
        return sorted(entry.name for entry in directory.iterdir())
    except OSError:
        return []


def namespaces(pid_dir: str | os.PathLike[str]) -> dict[str, ProcessNamespace]:
    """Map each entry of <pid_dir>/ns to the namespace its link points at."""
    ns_dir = Path(pid_dir) / "ns"
    result: dict[str, ProcessNamespace] = {}
    for name in _list_entries(ns_dir):
        link_path = ns_dir / name
        try:
            target = os.readlink(link_path)
        except OSError as exc:
            raise MetricError(f"cannot read link {link_path}: {exc}") from exc

        fields = [part for part in target.strip().split(":") if part]
        if len(fields) != 2:
            raise InvalidFieldNumberError("process ns item", len(fields), target)

        inode = fields[1].strip().strip("[").strip("]")
        result[name] = ProcessNamespace(ns_type=fields[0].strip(), inode=_u32_or_zero(inode))
    return result