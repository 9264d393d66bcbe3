# procstat

`procstat` reads Linux `/proc` statistics files and turns them into plain
Python dataclasses. It has no runtime dependencies.

It covers:

- `/proc/swaps`: configured swap devices (`procstat.swaps`)
- `/proc/softirqs`: per-CPU softirq counters (`procstat.softirqs`)
- `/proc/<pid>/ns/*`: a process's namespaces (`procstat.process_ns`)
- `/proc/<pid>/net/snmp6`: IPv6, ICMPv6, UDP6 and UDP-Lite6 counters
  (`procstat.process_net_snmp6`)
- `/proc/<pid>/net/netstat`: `TcpExt` and `IpExt` counters
  (`procstat.process_netstat`, with the sections in
  `procstat.netstat_tcpext` and `procstat.netstat_ipext`)

## Installation

```
pip install .
```

## Usage

System-wide files:

```python
from procstat import softirqs, swaps

for swap in swaps.collect():
    print(swap.filename, swap.swap_type, swap.size, swap.used, swap.priority)

irqs = softirqs.collect()
print(irqs.timer)   # one counter per CPU
```

`swaps.collect()` and `softirqs.collect()` read `/proc/swaps` and
`/proc/softirqs`; any file with the same format can be read with
`collect_from(filename)`. The first (heading) line of each file is skipped.
In a swaps file, a size, used or priority value that does not parse is read
as `0`. In a softirqs file, rows with unknown names are ignored.

Per-process files take the process directory, such as `/proc/1234`:

```python
from procstat.process_ns import namespaces
from procstat.process_net_snmp6 import net_snmp6
from procstat.process_netstat import netstat

for name, ns in namespaces("/proc/self").items():
    print(name, ns.ns_type, ns.inode)

snmp6 = net_snmp6("/proc/self")
print(snmp6.ip6_in_receives)

stats = netstat("/proc/self")
print(stats.tcp_ext.delayed_acks, stats.ip_ext.in_octets)
```

`namespaces` returns a dictionary keyed by the entry names in `<pid_dir>/ns`;
if that directory cannot be listed, the dictionary is empty. An inode that
does not parse as a 32-bit unsigned number is read as `0`.

Counters that the file does not hold are left as `None`, and counters with
names the parsers do not know are ignored. Already-read content can be parsed
with `parse_net_snmp6(lines)` and `parse_netstat(lines)`; a single netstat
section can be filled with `TcpExt().apply(headers, values)` or
`IpExt().apply(headers, values)`, which take lower-case header names.

## Errors

Every error is `procstat.errors.MetricError` or one of its subclasses:

- `InvalidFieldNumberError` when a line has the wrong number of fields, or a
  netstat header line and its value line hold different numbers of fields;
- `ConversionError` when a value is not a valid 64-bit integer.

A file or namespace link that cannot be read also raises `MetricError`.

The helpers `read_file_lines(path)`, `to_i64(value)` and `to_u64(value)` in
`procstat.errors` are the ones the parsers use.

## What it does not do

`procstat` is a library only: it has no command-line tool, and it does not
print, export or store the values it reads. It covers only the files listed
above, and per-process files are found from the process directory given,
not looked up by process id.

## Tests

```
pip install .[test]
pytest
```