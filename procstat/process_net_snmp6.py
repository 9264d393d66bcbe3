"""IPv6 SNMP counters of a process, read from /proc/<pid>/net/snmp6."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import InvalidFieldNumberError, read_file_lines, to_i64

_FIELDS = {
    "Ip6InReceives": "ip6_in_receives",
    "Ip6InHdrErrors": "ip6_in_hdr_errors",
    "Ip6InTooBigErrors": "ip6_in_too_big_errors",
    "Ip6InNoRoutes": "ip6_in_no_routes",
    "Ip6InAddrErrors": "ip6_in_addr_errors",
    "Ip6InUnknownProtos": "ip6_in_unknown_protos",
    "Ip6InTruncatedPkts": "ip6_in_truncated_pkts",
    "Ip6InDiscards": "ip6_in_discards",
    "Ip6InDelivers": "ip6_in_delivers",
    "Ip6OutForwDatagrams": "ip6_out_forw_datagrams",
    "Ip6OutRequests": "ip6_out_requests",
    "Ip6OutDiscards": "ip6_out_discards",
    "Ip6OutNoRoutes": "ip6_out_no_routes",
    "Ip6ReasmTimeout": "ip6_reasm_timeout",
    "Ip6ReasmReqds": "ip6_reasm_reqds",
    "Ip6ReasmOKs": "ip6_reasm_oks",
    "Ip6ReasmFails": "ip6_reasm_fails",
    "Ip6FragOKs": "ip6_frag_oks",
    "Ip6FragFails": "ip6_frag_fails",
    "Ip6FragCreates": "ip6_frag_creates",
    "Ip6InMcastPkts": "ip6_in_mcast_pkts",
    "Ip6OutMcastPkts": "ip6_out_mcast_pkts",
    "Ip6InOctets": "ip6_in_octets",
    "Ip6OutOctets": "ip6_out_octets",
    "Ip6InMcastOctets": "ip6_in_mcast_octets",
    "Ip6OutMcastOctets": "ip6_out_mcast_octets",
    "Ip6InBcastOctets": "ip6_in_bcast_octets",
    "Ip6OutBcastOctets": "ip6_out_bcast_octets",
    "Ip6InNoECTPkts": "ip6_in_no_ect_pkts",
    "Ip6InECT1Pkts": "ip6_in_ect1_pkts",
    "Ip6InECT0Pkts": "ip6_in_ect0_pkts",
    "Ip6InCEPkts": "ip6_in_ce_pkts",
    "Ip6OutTransmits": "ip6_out_transmits",
    "Icmp6InMsgs": "icmp6_in_msgs",
    "Icmp6InErrors": "icmp6_in_errors",
    "Icmp6OutMsgs": "icmp6_out_msgs",
    "Icmp6OutErrors": "icmp6_out_errors",
    "Icmp6InCsumErrors": "icmp6_in_csum_errors",
    "Icmp6OutRateLimitHost": "icmp6_out_rate_limit_host",
    "Icmp6InDestUnreachs": "icmp6_in_dest_unreachs",
    "Icmp6InPktTooBigs": "icmp6_in_pkt_too_bigs",
    "Icmp6InTimeExcds": "icmp6_in_time_excds",
    "Icmp6InParmProblems": "icmp6_in_parm_problems",
    "Icmp6InEchos": "icmp6_in_echos",
    "Icmp6InEchoReplies": "icmp6_in_echo_replies",
    "Icmp6InGroupMembQueries": "icmp6_in_group_memb_queries",
    "Icmp6InGroupMembResponses": "icmp6_in_group_memb_responses",
    "Icmp6InGroupMembReductions": "icmp6_in_group_memb_reductions",
    "Icmp6InRouterSolicits": "icmp6_in_router_solicits",
    "Icmp6InRouterAdvertisements": "icmp6_in_router_advertisements",
    "Icmp6InNeighborSolicits": "icmp6_in_neighbor_solicits",
    "Icmp6InNeighborAdvertisements": "icmp6_in_neighbor_advertisements",
    "Icmp6InRedirects": "icmp6_in_redirects",
    "Icmp6InMLDv2Reports": "icmp6_in_mldv2_reports",
    "Icmp6OutDestUnreachs": "icmp6_out_dest_unreachs",
    "Icmp6OutPktTooBigs": "icmp6_out_pkt_too_bigs",
    "Icmp6OutTimeExcds": "icmp6_out_time_excds",
    "Icmp6OutParmProblems": "icmp6_out_parm_problems",
    "Icmp6OutEchos": "icmp6_out_echos",
    "Icmp6OutEchoReplies": "icmp6_out_echo_replies",
    "Icmp6OutGroupMembQueries": "icmp6_out_group_memb_queries",
    "Icmp6OutGroupMembResponses": "icmp6_out_group_memb_responses",
    "Icmp6OutGroupMembReductions": "icmp6_out_group_memb_reductions",
    "Icmp6OutRouterSolicits": "icmp6_out_router_solicits",
    "Icmp6OutRouterAdvertisements": "icmp6_out_router_advertisements",
    "Icmp6OutNeighborSolicits": "icmp6_out_neighbor_solicits",
    "Icmp6OutNeighborAdvertisements": "icmp6_out_neighbor_advertisements",
    "Icmp6OutRedirects": "icmp6_out_redirects",
    "Icmp6OutMLDv2Reports": "icmp6_out_mldv2_reports",
    "Icmp6InType1": "icmp6_in_type1",
    "Icmp6InType134": "icmp6_in_type134",
    "Icmp6InType135": "icmp6_in_type135",
    "Icmp6InType136": "icmp6_in_type136",
    "Icmp6InType143": "icmp6_in_type143",
    "Icmp6OutType133": "icmp6_out_type133",
    "Icmp6OutType135": "icmp6_out_type135",
    "Icmp6OutType136": "icmp6_out_type136",
    "Icmp6OutType143": "icmp6_out_type143",
    "Udp6InDatagrams": "udp6_in_datagrams",
    "Udp6NoPorts": "udp6_no_ports",
    "Udp6InErrors": "udp6_in_errors",
    "Udp6OutDatagrams": "udp6_out_datagrams",
    "Udp6RcvbufErrors": "udp6_rcvbuf_errors",
    "Udp6SndbufErrors": "udp6_sndbuf_errors",
    "Udp6InCsumErrors": "udp6_in_csum_errors",
    "Udp6IgnoredMulti": "udp6_ignored_multi",
    "Udp6MemErrors": "udp6_mem_errors",
    "UdpLite6InDatagrams": "udp_lite6_in_datagrams",
    "UdpLite6NoPorts": "udp_lite6_no_ports",
    "UdpLite6InErrors": "udp_lite6_in_errors",
    "UdpLite6OutDatagrams": "udp_lite6_out_datagrams",
    "UdpLite6RcvbufErrors": "udp_lite6_rcvbuf_errors",
    "UdpLite6SndbufErrors": "udp_lite6_sndbuf_errors",
    "UdpLite6InCsumErrors": "udp_lite6_in_csum_errors",
    "UdpLite6MemErrors": "udp_lite6_mem_errors",
}


@dataclass
class ProcessNetSnmp6:
    """Counters of /proc/<pid>/net/snmp6; a counter absent from the file is None."""

    ip6_in_receives: Optional[int] = None
    ip6_in_hdr_errors: Optional[int] = None
    ip6_in_too_big_errors: Optional[int] = None
    ip6_in_no_routes: Optional[int] = None
    ip6_in_addr_errors: Optional[int] = None
    ip6_in_unknown_protos: Optional[int] = None
    ip6_in_truncated_pkts: Optional[int] = None
    ip6_in_discards: Optional[int] = None
    ip6_in_delivers: Optional[int] = None
    ip6_out_forw_datagrams: Optional[int] = None
    ip6_out_requests: Optional[int] = None
    ip6_out_discards: Optional[int] = None
    ip6_out_no_routes: Optional[int] = None
    ip6_reasm_timeout: Optional[int] = None
    ip6_reasm_reqds: Optional[int] = None
    ip6_reasm_oks: Optional[int] = None
    ip6_reasm_fails: Optional[int] = None
    ip6_frag_oks: Optional[int] = None
    ip6_frag_fails: Optional[int] = None
    ip6_frag_creates: Optional[int] = None
    ip6_in_mcast_pkts: Optional[int] = None
    ip6_out_mcast_pkts: Optional[int] = None
    ip6_in_octets: Optional[int] = None
    ip6_out_octets: Optional[int] = None
    ip6_in_mcast_octets: Optional[int] = None
    ip6_out_mcast_octets: Optional[int] = None
    ip6_in_bcast_octets: Optional[int] = None
    ip6_out_bcast_octets: Optional[int] = None
    ip6_in_no_ect_pkts: Optional[int] = None
    ip6_in_ect1_pkts: Optional[int] = None
    ip6_in_ect0_pkts: Optional[int] = None
    ip6_in_ce_pkts: Optional[int] = None
    ip6_out_transmits: Optional[int] = None
    icmp6_in_msgs: Optional[int] = None
    icmp6_in_errors: Optional[int] = None
    icmp6_out_msgs: Optional[int] = None
    icmp6_out_errors: Optional[int] = None
    icmp6_in_csum_errors: Optional[int] = None
    icmp6_out_rate_limit_host: Optional[int] = None
    icmp6_in_dest_unreachs: Optional[int] = None
    icmp6_in_pkt_too_bigs: Optional[int] = None
    icmp6_in_time_excds: Optional[int] = None
    icmp6_in_parm_problems: Optional[int] = None
    icmp6_in_echos: Optional[int] = None
    icmp6_in_echo_replies: Optional[int] = None
    icmp6_in_group_memb_queries: Optional[int] = None
    icmp6_in_group_memb_responses: Optional[int] = None
    icmp6_in_group_memb_reductions: Optional[int] = None
    icmp6_in_router_solicits: Optional[int] = None
    icmp6_in_router_advertisements: Optional[int] = None
    icmp6_in_neighbor_solicits: Optional[int] = None
    icmp6_in_neighbor_advertisements: Optional[int] = None
    icmp6_in_redirects: Optional[int] = None
    icmp6_in_mldv2_reports: Optional[int] = None
    icmp6_out_dest_unreachs: Optional[int] = None
    icmp6_out_pkt_too_bigs: Optional[int] = None
    icmp6_out_time_excds: Optional[int] = None
    icmp6_out_parm_problems: Optional[int] = None
    icmp6_out_echos: Optional[int] = None
    icmp6_out_echo_replies: Optional[int] = None
    icmp6_out_group_memb_queries: Optional[int] = None
    icmp6_out_group_memb_responses: Optional[int] = None
    icmp6_out_group_memb_reductions: Optional[int] = None
    icmp6_out_router_solicits: Optional[int] = None
    icmp6_out_router_advertisements: Optional[int] = None
    icmp6_out_neighbor_solicits: Optional[int] = None
    icmp6_out_neighbor_advertisements: Optional[int] = None
    icmp6_out_redirects: Optional[int] = None
    icmp6_out_mldv2_reports: Optional[int] = None
    icmp6_in_type1: Optional[int] = None
    icmp6_in_type134: Optional[int] = None
    icmp6_in_type135: Optional[int] = None
    icmp6_in_type136: Optional[int] = None
    icmp6_in_type143: Optional[int] = None
    icmp6_out_type133: Optional[int] = None
    icmp6_out_type135: Optional[int] = None
    icmp6_out_type136: Optional[int] = None
    icmp6_out_type143: Optional[int] = None
    udp6_in_datagrams: Optional[int] = None
    udp6_no_ports: Optional[int] = None
    udp6_in_errors: Optional[int] = None
    udp6_out_datagrams: Optional[int] = None
    udp6_rcvbuf_errors: Optional[int] = None
    udp6_sndbuf_errors: Optional[int] = None
    udp6_in_csum_errors: Optional[int] = None
    udp6_ignored_multi: Optional[int] = None
    udp6_mem_errors: Optional[int] = None
    udp_lite6_in_datagrams: Optional[int] = None
    udp_lite6_no_ports: Optional[int] = None
    udp_lite6_in_errors: Optional[int] = None
    udp_lite6_out_datagrams: Optional[int] = None
    udp_lite6_rcvbuf_errors: Optional[int] = None
    udp_lite6_sndbuf_errors: Optional[int] = None
    udp_lite6_in_csum_errors: Optional[int] = None
    udp_lite6_mem_errors: Optional[int] = None


def parse_net_snmp6(lines: Iterable[str]) -> ProcessNetSnmp6:
    """Parse "<name> <value>" lines; names that are not known are ignored."""
    stats = ProcessNetSnmp6()
    for line in lines:
        fields = [part for part in line.strip().split(" ") if part]
        if len(fields) != 2:
            raise InvalidFieldNumberError("process net snmp6", len(fields), line)
        name, raw = (part.strip() for part in fields)
        value = to_i64(raw)
        attr = _FIELDS.get(name)
        if attr is not None:
            setattr(stats, attr, value)
    return stats


def net_snmp6(pid_dir: str | os.PathLike[str]) -> ProcessNetSnmp6:
    """Read the net/snmp6 counters of the process whose directory is pid_dir."""
    return parse_net_snmp6(read_file_lines(Path(pid_dir) / "net" / "snmp6"))