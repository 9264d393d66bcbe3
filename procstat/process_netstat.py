"""Extended network statistics of a process, read from /proc/<pid>/net/netstat."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .errors import InvalidFieldNumberError, read_file_lines
from .netstat_ipext import IpExt
from .netstat_tcpext import TcpExt


@dataclass
class ProcessNetstat:
    """The TcpExt and IpExt sections of /proc/<pid>/net/netstat."""

    tcp_ext: TcpExt = field(default_factory=TcpExt)
    ip_ext: IpExt = field(default_factory=IpExt)


def _split_line(line: str) -> tuple[str, list[str]]:
    """Split a lower-cased "<section>: <fields...>" line into its name and fields."""
    lowered = line.lower()
    parts = [part for part in lowered.strip().split(":") if part]
    if len(parts) != 2:
        raise InvalidFieldNumberError("process netstat header", len(parts), lowered)
    name, rest = parts
    return name, [item for item in rest.strip().split(" ") if item]


def parse_netstat(lines: Iterable[str]) -> ProcessNetstat:
    """Parse header/value line pairs; unknown sections and counters are ignored.

    A trailing header line without a value line is ignored.
    """
    all_lines = list(lines)
    stats = ProcessNetstat()
    sections = {"tcpext": stats.tcp_ext, "ipext": stats.ip_ext}

    for header_line, value_line in zip(all_lines[0::2], all_lines[1::2]):
        name, headers = _split_line(header_line)
        _, values = _split_line(value_line)
        if len(headers) != len(values):
            raise InvalidFieldNumberError(
                "process netstat field count mismatch", len(headers), str(len(values))
            )
        section = sections.get(name)
        if section is not None:
            section.apply(headers, values)
    return stats


def netstat(pid_dir: str | os.PathLike[str]) -> ProcessNetstat:
    """Read the net/netstat counters of the process whose directory is pid_dir."""
    return parse_netstat(read_file_lines(Path(pid_dir) / "net" / "netstat"))