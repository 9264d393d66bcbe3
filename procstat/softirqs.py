"""Per-CPU softirq counters, as listed in /proc/softirqs."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .errors import read_file_lines, to_u64

_LABELS = {
    "HI:": "hi",
    "TIMER:": "timer",
    "NET_TX:": "net_tx",
    "NET_RX:": "net_rx",
    "BLOCK:": "block",
    "IRQ_POLL:": "irq_poll",
    "TASKLET:": "tasklet",
    "SCHED:": "sched",
    "HRTIMER:": "hr_timer",
    "RCU:": "rcu",
}


@dataclass
class Softirqs:
    """Softirq counts, one list entry per CPU for each softirq kind."""

    hi: list[int] = field(default_factory=list)
    timer: list[int] = field(default_factory=list)
    net_tx: list[int] = field(default_factory=list)
    net_rx: list[int] = field(default_factory=list)
    block: list[int] = field(default_factory=list)
    irq_poll: list[int] = field(default_factory=list)
    tasklet: list[int] = field(default_factory=list)
    sched: list[int] = field(default_factory=list)
    hr_timer: list[int] = field(default_factory=list)
    rcu: list[int] = field(default_factory=list)


def collect() -> Softirqs:
    """Return the softirq statistics of the running system."""
    return collect_from("/proc/softirqs")


def collect_from(filename: str | os.PathLike[str]) -> Softirqs:
    """Parse a softirqs file; unknown rows are ignored."""
    stats = Softirqs()
    for line in read_file_lines(filename)[1:]:
        fields = line.split()
        if not fields:
            continue
        attr = _LABELS.get(fields[0])
        if attr is not None:
            getattr(stats, attr).extend(to_u64(value) for value in fields[1:])
    return stats