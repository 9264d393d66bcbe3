[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procstat"
version = "0.1.0"
description = "Parse Linux /proc statistics: swaps, softirqs, process namespaces, net/snmp6 and net/netstat"
requires-python = ">=3.10"
dependencies = []
keywords = ["proc", "procfs", "linux", "metrics", "monitoring", "netstat", "snmp6", "softirqs", "swaps"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["procstat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
