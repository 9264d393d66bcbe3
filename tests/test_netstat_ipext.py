import dataclasses

import pytest

from procstat.errors import ConversionError, InvalidFieldNumberError
from procstat.netstat_ipext import IpExt

HEADERS = [
    "innoroutes",
    "intruncatedpkts",
    "inmcastpkts",
    "outmcastpkts",
    "inbcastpkts",
    "outbcastpkts",
    "inoctets",
    "outoctets",
    "inmcastoctets",
    "outmcastoctets",
    "inbcastoctets",
    "outbcastoctets",
    "incsumerrors",
    "innoectpkts",
    "inect1pkts",
    "inect0pkts",
    "incepkts",
    "reasmoverlaps",
]
VALUES = [
    "0", "0", "208", "214", "118", "111", "190585481", "7512674", "26093",
    "25903", "14546", "13628", "0", "134215", "0", "0", "0", "0",
]


def test_default_all_none():
    stats = IpExt()
    assert all(value is None for value in dataclasses.asdict(stats).values())


def test_apply_full_section():
    stats = IpExt()
    stats.apply(HEADERS, VALUES)
    assert stats.in_no_routes == 0
    assert stats.in_truncated_pkts == 0
    assert stats.in_mcast_pkts == 208
    assert stats.out_mcast_pkts == 214
    assert stats.in_bcast_pkts == 118
    assert stats.out_bcast_pkts == 111
    assert stats.in_octets == 190585481
    assert stats.out_octets == 7512674
    assert stats.in_mcast_octets == 26093
    assert stats.out_mcast_octets == 25903
    assert stats.in_bcast_octets == 14546
    assert stats.out_bcast_octets == 13628
    assert stats.in_csum_errors == 0
    assert stats.in_no_ect_pkts == 134215
    assert stats.in_ect1_pkts == 0
    assert stats.in_ect0_pkts == 0
    assert stats.in_ce_pkts == 0
    assert stats.reasm_overlaps == 0


def test_every_field_set_after_full_section():
    stats = IpExt()
    stats.apply(HEADERS, VALUES)
    values = list(dataclasses.asdict(stats).values())
    assert len(values) == 18
    assert sorted(values) == [
        0, 0, 0, 0, 0, 0, 0, 0, 0,
        111, 118, 208, 214, 13628, 14546, 25903, 26093,
        134215, 7512674, 190585481,
    ][2:]


def test_partial_section_leaves_others_none():
    stats = IpExt()
    stats.apply(["inoctets"], ["190585481"])
    assert stats.in_octets == 190585481
    assert stats.out_octets is None
    assert stats.reasm_overlaps is None


def test_unknown_header_ignored_without_parsing():
    stats = IpExt()
    stats.apply(["somethingnew", "outoctets"], ["not-a-number", "7512674"])
    assert stats.out_octets == 7512674
    assert sum(v is not None for v in dataclasses.asdict(stats).values()) == 1


def test_mixed_case_header_not_recognised():
    stats = IpExt()
    stats.apply(["InOctets"], ["5"])
    assert stats.in_octets is None


def test_later_apply_overrides():
    stats = IpExt()
    stats.apply(["inoctets"], ["26093"])
    stats.apply(["inoctets"], ["25903"])
    assert stats.in_octets == 25903


def test_negative_value_accepted():
    stats = IpExt()
    stats.apply(["incsumerrors"], ["-2"])
    assert stats.in_csum_errors == -2


def test_count_mismatch_raises():
    stats = IpExt()
    with pytest.raises(InvalidFieldNumberError) as info:
        stats.apply(["inoctets", "outoctets"], ["1"])
    assert info.value.count == 2
    assert info.value.data == "1"


def test_bad_value_raises_conversion_error():
    stats = IpExt()
    with pytest.raises(ConversionError):
        stats.apply(["inoctets"], ["abc"])


def test_value_out_of_i64_range_raises():
    stats = IpExt()
    with pytest.raises(ConversionError):
        stats.apply(["inoctets"], [str(2**63)])


def test_empty_apply_changes_nothing():
    stats = IpExt()
    stats.apply([], [])
    assert stats == IpExt()