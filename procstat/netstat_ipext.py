"""The IpExt section of /proc/<pid>/net/netstat."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidFieldNumberError, to_i64

_FIELDS = {
    "innoroutes": "in_no_routes",
    "intruncatedpkts": "in_truncated_pkts",
    "inmcastpkts": "in_mcast_pkts",
    "outmcastpkts": "out_mcast_pkts",
    "inbcastpkts": "in_bcast_pkts",
    "outbcastpkts": "out_bcast_pkts",
    "inoctets": "in_octets",
    "outoctets": "out_octets",
    "inmcastoctets": "in_mcast_octets",
    "outmcastoctets": "out_mcast_octets",
    "inbcastoctets": "in_bcast_octets",
    "outbcastoctets": "out_bcast_octets",
    "incsumerrors": "in_csum_errors",
    "innoectpkts": "in_no_ect_pkts",
    "inect1pkts": "in_ect1_pkts",
    "inect0pkts": "in_ect0_pkts",
    "incepkts": "in_ce_pkts",
    "reasmoverlaps": "reasm_overlaps",
}


@dataclass
class IpExt:
    """IpExt counters; a counter absent from the file is None."""

    in_no_routes: Optional[int] = None
    in_truncated_pkts: Optional[int] = None
    in_mcast_pkts: Optional[int] = None
    out_mcast_pkts: Optional[int] = None
    in_bcast_pkts: Optional[int] = None
    out_bcast_pkts: Optional[int] = None
    in_octets: Optional[int] = None
    out_octets: Optional[int] = None
    in_mcast_octets: Optional[int] = None
    out_mcast_octets: Optional[int] = None
    in_bcast_octets: Optional[int] = None
    out_bcast_octets: Optional[int] = None
    in_csum_errors: Optional[int] = None
    in_no_ect_pkts: Optional[int] = None
    in_ect1_pkts: Optional[int] = None
    in_ect0_pkts: Optional[int] = None
    in_ce_pkts: Optional[int] = None
    reasm_overlaps: Optional[int] = None

    def apply(self, headers: Sequence[str], values: Sequence[str]) -> None:
        """Set counters from lower-case header names and their matching values.

        Unknown names are ignored and their values are not parsed.
        """
        if len(headers) != len(values):
            raise InvalidFieldNumberError(
                "process netstat ipext field count mismatch", len(headers), str(len(values))
            )
        for header, value in zip(headers, values):
            attr = _FIELDS.get(header)
            if attr is not None:
                setattr(self, attr, to_i64(value))