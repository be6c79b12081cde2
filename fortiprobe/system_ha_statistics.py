"""Probe for per-member HA cluster statistics."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

MEMBER_INFO = Desc(
    "fortigate_ha_member_info",
    "Info metric regarding cluster members",
    ("vdom", "hostname", "serial", "group"),
)
MEMBER_SESSIONS = Desc(
    "fortigate_ha_member_sessions", "Sessions which are handled by this HA member", ("vdom", "hostname")
)
MEMBER_PACKETS = Desc(
    "fortigate_ha_member_packets_total", "Packets which are handled by this HA member", ("vdom", "hostname")
)
MEMBER_VIRUS_EVENTS = Desc(
    "fortigate_ha_member_virus_events_total",
    "Virus events which are detected by this HA member",
    ("vdom", "hostname"),
)
MEMBER_NETWORK_USAGE = Desc(
    "fortigate_ha_member_network_usage_ratio", "Network usage by HA member", ("vdom", "hostname")
)
MEMBER_BYTES_TOTAL = Desc(
    "fortigate_ha_member_bytes_total", "Bytes transferred by HA member", ("vdom", "hostname")
)
MEMBER_IPS_EVENTS = Desc(
    "fortigate_ha_member_ips_events_total", "IPS events processed by HA member", ("vdom", "hostname")
)
MEMBER_CPU_USAGE = Desc(
    "fortigate_ha_member_cpu_usage_ratio", "CPU usage by HA member", ("vdom", "hostname")
)
MEMBER_MEMORY_USAGE = Desc(
    "fortigate_ha_member_memory_usage_ratio", "Memory usage by HA member", ("vdom", "hostname")
)


def _number(data: dict, key: str) -> float:
    return float(data.get(key) or 0)


def probe_system_ha_statistics(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report sessions, traffic, events and usage ratios of every HA member.

    The cluster group name comes from the HA configuration; it is empty when
    that configuration carries no results.
    """
    stats = client.get("api/v2/monitor/system/ha-statistics", "") or {}
    config = client.get("api/v2/cmdb/system/ha", "") or {}

    group = (config.get("results") or {}).get("group-name") or ""
    vdom = stats.get("vdom") or ""

    metrics = []
    for member in stats.get("results") or []:
        hostname = member.get("hostname") or ""
        labels = (vdom, hostname)
        metrics.extend(
            [
                MEMBER_INFO.metric(ValueType.GAUGE, 1.0, vdom, hostname, member.get("serial_no") or "", group),
                MEMBER_SESSIONS.metric(ValueType.GAUGE, _number(member, "sessions"), *labels),
                MEMBER_PACKETS.metric(ValueType.COUNTER, _number(member, "tpacket"), *labels),
                MEMBER_VIRUS_EVENTS.metric(ValueType.COUNTER, _number(member, "vir_usage"), *labels),
                MEMBER_NETWORK_USAGE.metric(ValueType.GAUGE, _number(member, "net_usage") / 100, *labels),
                MEMBER_BYTES_TOTAL.metric(ValueType.COUNTER, _number(member, "tbyte"), *labels),
                MEMBER_IPS_EVENTS.metric(ValueType.COUNTER, _number(member, "intr_usage"), *labels),
                MEMBER_CPU_USAGE.metric(ValueType.GAUGE, _number(member, "cpu_usage") / 100, *labels),
                MEMBER_MEMORY_USAGE.metric(ValueType.GAUGE, _number(member, "mem_usage") / 100, *labels),
            ]
        )
    return metrics