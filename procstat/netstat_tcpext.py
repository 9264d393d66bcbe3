"""The TcpExt section of /proc/<pid>/net/netstat."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidFieldNumberError, to_i64

_FIELDS = {
    "syncookiessent": "syn_cookies_sent",
    "syncookiesrecv": "syn_cookies_recv",
    "syncookiesfailed": "syn_cookies_failed",
    "embryonicrsts": "embryonic_rsts",
    "prunecalled": "prune_called",
    "rcvpruned": "rcv_pruned",
    "ofopruned": "ofo_pruned",
    "outofwindowicmps": "out_of_window_icmps",
    "lockdroppedicmps": "lock_dropped_icmps",
    "arpfilter": "arp_filter",
    "tw": "tw",
    "twrecycled": "tw_recycled",
    "twkilled": "tw_killed",
    "pawsactive": "paws_active",
    "pawsestab": "paws_estab",
    "delayedacks": "delayed_acks",
    "delayedacklocked": "delayed_ack_locked",
    "delayedacklost": "delayed_ack_lost",
    "listenoverflows": "listen_overflows",
    "listendrops": "listen_drops",
    "tcphphits": "tcp_hp_hits",
    "tcppureacks": "tcp_pure_acks",
    "tcphpacks": "tcp_hp_acks",
    "tcprenorecovery": "tcp_reno_recovery",
    "tcpsackrecovery": "tcp_s_ack_recovery",
    "tcpsackreneging": "tcp_s_ack_reneging",
    "tcpsackreorder": "tcp_s_ack_reorder",
    "tcprenoreorder": "tcp_reno_reorder",
    "tcptsreorder": "tcp_ts_reorder",
    "tcpfullundo": "tcp_full_undo",
    "tcppartialundo": "tcp_partial_undo",
    "tcpdsackundo": "tcp_ds_ack_undo",
    "tcplossundo": "tcp_loss_undo",
    "tcplostretransmit": "tcp_lost_retransmit",
    "tcprenofailures": "tcp_reno_failures",
    "tcpsackfailures": "tcp_s_ack_failures",
    "tcplossfailures": "tcp_loss_failures",
    "tcpfastretrans": "tcp_fast_retrans",
    "tcpslowstartretrans": "tcp_slow_start_retrans",
    "tcptimeouts": "tcp_timeouts",
    "tcplossprobes": "tcp_loss_probes",
    "tcplossproberecovery": "tcp_loss_probe_recovery",
    "tcprenorecoveryfail": "tcp_reno_recovery_fail",
    "tcpsackrecoveryfail": "tcp_s_ack_recovery_fail",
    "tcprcvcollapsed": "tcp_rcv_collapsed",
    "tcpbacklogcoalesce": "tcp_backlog_coalesce",
    "tcpdsackoldsent": "tcp_ds_ack_old_sent",
    "tcpdsackofosent": "tcp_ds_ack_ofo_sent",
    "tcpdsackrecv": "tcp_ds_ack_recv",
    "tcpdsackoforecv": "tcp_ds_ack_ofo_recv",
    "tcpabortondata": "tcp_abort_on_data",
    "tcpabortonclose": "tcp_abort_on_close",
    "tcpabortonmemory": "tcp_abort_on_memory",
    "tcpabortontimeout": "tcp_abort_on_timeout",
    "tcpabortonlinger": "tcp_abort_on_linger",
    "tcpabortfailed": "tcp_abort_failed",
    "tcpmemorypressures": "tcp_memory_pressures",
    "tcpmemorypressureschrono": "tcp_memory_pressures_chrono",
    "tcpsackdiscard": "tcp_s_ack_discard",
    "tcpdsackignoredold": "tcp_ds_ack_ignored_old",
    "tcpdsackignorednoundo": "tcp_ds_ack_ignored_no_undo",
    "tcpspuriousrtos": "tcp_spurious_rtos",
    "tcpmd5notfound": "tcp_md5_not_found",
    "tcpmd5unexpected": "tcp_md5_unexpected",
    "tcpmd5failure": "tcp_md5_failure",
    "tcpsackshifted": "tcp_s_ack_shifted",
    "tcpsackmerged": "tcp_s_ack_merged",
    "tcpsackshiftfallback": "tcp_s_ack_shift_fallback",
    "tcpbacklogdrop": "tcp_backlog_drop",
    "pfmemallocdrop": "pf_memalloc_drop",
    "tcpminttldrop": "tcp_min_ttl_drop",
    "tcpdeferacceptdrop": "tcp_defer_accept_drop",
    "ipreversepathfilter": "ip_reverse_path_filter",
    "tcptimewaitoverflow": "tcp_time_wait_overflow",
    "tcpreqqfulldocookies": "tcp_req_q_full_do_cookies",
    "tcpreqqfulldrop": "tcp_req_q_full_drop",
    "tcpretransfail": "tcp_retrans_fail",
    "tcprcvcoalesce": "tcp_rcv_coalesce",
    "tcpofoqueue": "tcp_ofo_queue",
    "tcpofodrop": "tcp_ofo_drop",
    "tcpofomerge": "tcp_ofo_merge",
    "tcpchallengeack": "tcp_challenge_ack",
    "tcpsynchallenge": "tcp_syn_challenge",
    "tcpfastopenactive": "tcp_fast_open_active",
    "tcpfastopenactivefail": "tcp_fast_open_active_fail",
    "tcpfastopenpassive": "tcp_fast_open_passive",
    "tcpfastopenpassivefail": "tcp_fast_open_passive_fail",
    "tcpfastopenlistenoverflow": "tcp_fast_open_listen_overflow",
    "tcpfastopencookiereqd": "tcp_fast_open_cookie_reqd",
    "tcpfastopenblackhole": "tcp_fast_open_blackhole",
    "tcpspuriousrtxhostqueues": "tcp_spurious_rtx_host_queues",
    "busypollrxpackets": "busy_poll_rx_packets",
    "tcpautocorking": "tcp_auto_corking",
    "tcpfromzerowindowadv": "tcp_from_zero_window_adv",
    "tcptozerowindowadv": "tcp_to_zero_window_adv",
    "tcpwantzerowindowadv": "tcp_want_zero_window_adv",
    "tcpsynretrans": "tcp_syn_retrans",
    "tcporigdatasent": "tcp_orig_data_sent",
    "tcphystarttraindetect": "tcp_hystart_train_detect",
    "tcphystarttraincwnd": "tcp_hystart_train_cwnd",
    "tcphystartdelaydetect": "tcp_hystart_delay_detect",
    "tcphystartdelaycwnd": "tcp_hystart_delay_cwnd",
    "tcpackskippedsynrecv": "tcp_ack_skipped_syn_recv",
    "tcpackskippedpaws": "tcp_ack_skipped_paws",
    "tcpackskippedseq": "tcp_ack_skipped_seq",
    "tcpackskippedfinwait2": "tcp_ack_skipped_fin_wait2",
    "tcpackskippedtimewait": "tcp_ack_skipped_time_wait",
    "tcpackskippedchallenge": "tcp_ack_skipped_challenge",
    "tcpwinprobe": "tcp_win_probe",
    "tcpkeepalive": "tcp_keep_alive",
    "tcpmtupfail": "tcp_mtup_fail",
    "tcpmtupsuccess": "tcp_mtup_success",
    "tcpdelivered": "tcp_delivered",
    "tcpdeliveredce": "tcp_delivered_ce",
    "tcpackcompressed": "tcp_ack_compressed",
    "tcpzerowindowdrop": "tcp_zero_window_drop",
    "tcprcvqdrop": "tcp_rcv_q_drop",
    "tcpwqueuetoobig": "tcp_wqueue_too_big",
    "tcpfastopenpassivealtkey": "tcp_fast_open_passive_altkey",
    "tcptimeoutrehash": "tcp_timeout_rehash",
    "tcpduplicatedatarehash": "tcp_duplicate_data_rehash",
    "tcpdsackrecvsegs": "tcp_ds_ack_recv_segs",
    "tcpdsackignoreddubious": "tcp_ds_ack_ignored_dubious",
    "tcpmigratereqsuccess": "tcp_migrate_req_success",
    "tcpmigratereqfailure": "tcp_migrate_req_failure",
    "tcpplbrehash": "tcp_plb_rehash",
    "tcpaorequired": "tcp_ao_required",
    "tcpaobad": "tcp_ao_bad",
    "tcpaokeynotfound": "tcp_ao_key_not_found",
    "tcpaogood": "tcp_ao_good",
    "tcpaodroppedicmps": "tcp_ao_dropped_icmps",
}


@dataclass
class TcpExt:
    """TcpExt counters; a counter absent from the file is None."""

    syn_cookies_sent: Optional[int] = None
    syn_cookies_recv: Optional[int] = None
    syn_cookies_failed: Optional[int] = None
    embryonic_rsts: Optional[int] = None
    prune_called: Optional[int] = None
    rcv_pruned: Optional[int] = None
    ofo_pruned: Optional[int] = None
    out_of_window_icmps: Optional[int] = None
    lock_dropped_icmps: Optional[int] = None
    arp_filter: Optional[int] = None
    tw: Optional[int] = None
    tw_recycled: Optional[int] = None
    tw_killed: Optional[int] = None
    paws_active: Optional[int] = None
    paws_estab: Optional[int] = None
    delayed_acks: Optional[int] = None
    delayed_ack_locked: Optional[int] = None
    delayed_ack_lost: Optional[int] = None
    listen_overflows: Optional[int] = None
    listen_drops: Optional[int] = None
    tcp_hp_hits: Optional[int] = None
    tcp_pure_acks: Optional[int] = None
    tcp_hp_acks: Optional[int] = None
    tcp_reno_recovery: Optional[int] = None
    tcp_s_ack_recovery: Optional[int] = None
    tcp_s_ack_reneging: Optional[int] = None
    tcp_s_ack_reorder: Optional[int] = None
    tcp_reno_reorder: Optional[int] = None
    tcp_ts_reorder: Optional[int] = None
    tcp_full_undo: Optional[int] = None
    tcp_partial_undo: Optional[int] = None
    tcp_ds_ack_undo: Optional[int] = None
    tcp_loss_undo: Optional[int] = None
    tcp_lost_retransmit: Optional[int] = None
    tcp_reno_failures: Optional[int] = None
    tcp_s_ack_failures: Optional[int] = None
    tcp_loss_failures: Optional[int] = None
    tcp_fast_retrans: Optional[int] = None
    tcp_slow_start_retrans: Optional[int] = None
    tcp_timeouts: Optional[int] = None
    tcp_loss_probes: Optional[int] = None
    tcp_loss_probe_recovery: Optional[int] = None
    tcp_reno_recovery_fail: Optional[int] = None
    tcp_s_ack_recovery_fail: Optional[int] = None
    tcp_rcv_collapsed: Optional[int] = None
    tcp_backlog_coalesce: Optional[int] = None
    tcp_ds_ack_old_sent: Optional[int] = None
    tcp_ds_ack_ofo_sent: Optional[int] = None
    tcp_ds_ack_recv: Optional[int] = None
    tcp_ds_ack_ofo_recv: Optional[int] = None
    tcp_abort_on_data: Optional[int] = None
    tcp_abort_on_close: Optional[int] = None
    tcp_abort_on_memory: Optional[int] = None
    tcp_abort_on_timeout: Optional[int] = None
    tcp_abort_on_linger: Optional[int] = None
    tcp_abort_failed: Optional[int] = None
    tcp_memory_pressures: Optional[int] = None
    tcp_memory_pressures_chrono: Optional[int] = None
    tcp_s_ack_discard: Optional[int] = None
    tcp_ds_ack_ignored_old: Optional[int] = None
    tcp_ds_ack_ignored_no_undo: Optional[int] = None
    tcp_spurious_rtos: Optional[int] = None
    tcp_md5_not_found: Optional[int] = None
    tcp_md5_unexpected: Optional[int] = None
    tcp_md5_failure: Optional[int] = None
    tcp_s_ack_shifted: Optional[int] = None
    tcp_s_ack_merged: Optional[int] = None
    tcp_s_ack_shift_fallback: Optional[int] = None
    tcp_backlog_drop: Optional[int] = None
    pf_memalloc_drop: Optional[int] = None
    tcp_min_ttl_drop: Optional[int] = None
    tcp_defer_accept_drop: Optional[int] = None
    ip_reverse_path_filter: Optional[int] = None
    tcp_time_wait_overflow: Optional[int] = None
    tcp_req_q_full_do_cookies: Optional[int] = None
    tcp_req_q_full_drop: Optional[int] = None
    tcp_retrans_fail: Optional[int] = None
    tcp_rcv_coalesce: Optional[int] = None
    tcp_ofo_queue: Optional[int] = None
    tcp_ofo_drop: Optional[int] = None
    tcp_ofo_merge: Optional[int] = None
    tcp_challenge_ack: Optional[int] = None
    tcp_syn_challenge: Optional[int] = None
    tcp_fast_open_active: Optional[int] = None
    tcp_fast_open_active_fail: Optional[int] = None
    tcp_fast_open_passive: Optional[int] = None
    tcp_fast_open_passive_fail: Optional[int] = None
    tcp_fast_open_listen_overflow: Optional[int] = None
    tcp_fast_open_cookie_reqd: Optional[int] = None
    tcp_fast_open_blackhole: Optional[int] = None
    tcp_spurious_rtx_host_queues: Optional[int] = None
    busy_poll_rx_packets: Optional[int] = None
    tcp_auto_corking: Optional[int] = None
    tcp_from_zero_window_adv: Optional[int] = None
    tcp_to_zero_window_adv: Optional[int] = None
    tcp_want_zero_window_adv: Optional[int] = None
    tcp_syn_retrans: Optional[int] = None
    tcp_orig_data_sent: Optional[int] = None
    tcp_hystart_train_detect: Optional[int] = None
    tcp_hystart_train_cwnd: Optional[int] = None
    tcp_hystart_delay_detect: Optional[int] = None
    tcp_hystart_delay_cwnd: Optional[int] = None
    tcp_ack_skipped_syn_recv: Optional[int] = None
    tcp_ack_skipped_paws: Optional[int] = None
    tcp_ack_skipped_seq: Optional[int] = None
    tcp_ack_skipped_fin_wait2: Optional[int] = None
    tcp_ack_skipped_time_wait: Optional[int] = None
    tcp_ack_skipped_challenge: Optional[int] = None
    tcp_win_probe: Optional[int] = None
    tcp_keep_alive: Optional[int] = None
    tcp_mtup_fail: Optional[int] = None
    tcp_mtup_success: Optional[int] = None
    tcp_delivered: Optional[int] = None
    tcp_delivered_ce: Optional[int] = None
    tcp_ack_compressed: Optional[int] = None
    tcp_zero_window_drop: Optional[int] = None
    tcp_rcv_q_drop: Optional[int] = None
    tcp_wqueue_too_big: Optional[int] = None
    tcp_fast_open_passive_altkey: Optional[int] = None
    tcp_timeout_rehash: Optional[int] = None
    tcp_duplicate_data_rehash: Optional[int] = None
    tcp_ds_ack_recv_segs: Optional[int] = None
    tcp_ds_ack_ignored_dubious: Optional[int] = None
    tcp_migrate_req_success: Optional[int] = None
    tcp_migrate_req_failure: Optional[int] = None
    tcp_plb_rehash: Optional[int] = None
    tcp_ao_required: Optional[int] = None
    tcp_ao_bad: Optional[int] = None
    tcp_ao_key_not_found: Optional[int] = None
    tcp_ao_good: Optional[int] = None
    tcp_ao_dropped_icmps: Optional[int] = None

    def apply(self, headers: Sequence[str], values: Sequence[str]) -> None:
        """Set counters from lower-case header names and their matching values.

        Unknown names are ignored and their values are not parsed.
        """
        if len(headers) != len(values):
            raise InvalidFieldNumberError(
                "process netstat tcpext field count mismatch", len(headers), str(len(values))
            )
        for header, value in zip(headers, values):
            attr = _FIELDS.get(header)
            if attr is not None:
                setattr(self, attr, to_i64(value))