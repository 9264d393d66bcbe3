"""Parsers for Linux /proc swaps, softirqs, process namespaces, net/snmp6 and net/netstat."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "swaps",
    "softirqs",
    "process_ns",
    "process_net_snmp6",
    "netstat_tcpext",
    "netstat_ipext",
    "process_netstat",
]