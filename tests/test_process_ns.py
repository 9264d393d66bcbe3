import os

import pytest

from procstat.errors import InvalidFieldNumberError, MetricError
from procstat.process_ns import ProcessNamespace, namespaces


def _make_ns(tmp_path, links):
    pid_dir = tmp_path / "26231"
    ns_dir = pid_dir / "ns"
    ns_dir.mkdir(parents=True)
    for name, target in links.items():
        os.symlink(target, ns_dir / name)
    return pid_dir


def test_proc_ns(tmp_path):
    pid_dir = _make_ns(
        tmp_path, {"mnt": "mnt:[4026531840]", "net": "net:[4026531993]"}
    )
    result = namespaces(pid_dir)

    assert len(result) == 2
    assert set(result) == {"mnt", "net"}
    assert result["mnt"].ns_type == "mnt"
    assert result["mnt"].inode == 4026531840
    assert result["net"].ns_type == "net"
    assert result["net"].inode == 4026531993


def test_bad_link_target_raises(tmp_path):
    pid_dir = _make_ns(tmp_path, {"uts": "uts-no-colon"})
    with pytest.raises(InvalidFieldNumberError) as info:
        namespaces(pid_dir)
    assert info.value.count == 1


def test_unparsable_inode_is_zero(tmp_path):
    pid_dir = _make_ns(tmp_path, {"ipc": "ipc:[abc]"})
    assert namespaces(pid_dir) == {"ipc": ProcessNamespace("ipc", 0)}


def test_non_link_entry_raises(tmp_path):
    pid_dir = _make_ns(tmp_path, {})
    (pid_dir / "ns" / "plain").write_text("")
    with pytest.raises(MetricError):
        namespaces(pid_dir)


def test_missing_ns_dir_gives_empty(tmp_path):
    assert namespaces(tmp_path / "missing") == {}