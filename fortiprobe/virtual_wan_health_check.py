"""Probe for SD-WAN health check members."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

_LABELS = ("vdom", "sla", "interface")

MEMBER_STATUS = Desc(
    "fortigate_virtual_wan_status",
    "Status of the Interface. If the SD-WAN interface is disabled, disable will be returned. "
    "If the interface does not participate in the health check, error will be returned.",
    ("vdom", "sla", "interface", "state"),
)
LATENCY = Desc(
    "fortigate_virtual_wan_latency_seconds", "Measured latency for this Health check", _LABELS
)
JITTER = Desc(
    "fortigate_virtual_wan_latency_jitter_seconds",
    "Measured latency jitter for this Health check",
    _LABELS,
)
PACKET_LOSS = Desc(
    "fortigate_virtual_wan_packet_loss_ratio",
    "Measured packet loss in percentage for this Health check",
    _LABELS,
)
PACKET_SENT = Desc(
    "fortigate_virtual_wan_packet_sent_total",
    "Number of packets sent for this Health check",
    _LABELS,
)
PACKET_RECEIVED = Desc(
    "fortigate_virtual_wan_packet_received_total",
    "Number of packets received for this Health check",
    _LABELS,
)
SESSIONS = Desc(
    "fortigate_virtual_wan_active_sessions",
    "Active Session count for the health check interface",
    _LABELS,
)
TX_BANDWIDTH = Desc(
    "fortigate_virtual_wan_bandwidth_tx_byte_per_second",
    "Upload bandwidth of the health check interface",
    _LABELS,
)
RX_BANDWIDTH = Desc(
    "fortigate_virtual_wan_bandwidth_rx_byte_per_second",
    "Download bandwidth of the health check interface",
    _LABELS,
)
STATE_CHANGED = Desc(
    "fortigate_virtual_wan_status_change_time_seconds",
    "Unix timestamp describing the time when the last status change has occurred",
    _LABELS,
)

_STATES = ("up", "down", "error", "disable", "unknown")
_KNOWN_STATES = frozenset(_STATES) - {"unknown"}


def _number(data: dict, key: str) -> float:
    return float(data.get(key) or 0)


def probe_virtual_wan_health_check(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report the state of every SD-WAN health check member and, for members
    that are up, their latency, loss, traffic and bandwidth."""
    metrics = []
    for response in client.get("api/v2/monitor/virtual-wan/health-check", "vdom=*") or []:
        vdom = response.get("vdom") or ""
        for sla, members in (response.get("results") or {}).items():
            for interface, member in (members or {}).items():
                status = member.get("status")
                state = status if status in _KNOWN_STATES else "unknown"
                metrics.extend(
                    MEMBER_STATUS.metric(
                        ValueType.GAUGE, 1.0 if s == state else 0.0, vdom, sla, interface, s
                    )
                    for s in _STATES
                )
                if state != "up":
                    continue
                labels = (vdom, sla, interface)
                metrics.extend(
                    [
                        LATENCY.metric(ValueType.GAUGE, _number(member, "latency") / 1000, *labels),
                        JITTER.metric(ValueType.GAUGE, _number(member, "jitter") / 1000, *labels),
                        PACKET_LOSS.metric(
                            ValueType.GAUGE, _number(member, "packet_loss") / 100, *labels
                        ),
                        PACKET_SENT.metric(ValueType.GAUGE, _number(member, "packet_sent"), *labels),
                        PACKET_RECEIVED.metric(
                            ValueType.GAUGE, _number(member, "packet_received"), *labels
                        ),
                        SESSIONS.metric(ValueType.GAUGE, _number(member, "session"), *labels),
                        TX_BANDWIDTH.metric(
                            ValueType.GAUGE, _number(member, "tx_bandwidth") / 8, *labels
                        ),
                        RX_BANDWIDTH.metric(
                            ValueType.GAUGE, _number(member, "rx_bandwidth") / 8, *labels
                        ),
                        STATE_CHANGED.metric(
                            ValueType.GAUGE, _number(member, "state_changed"), *labels
                        ),
                    ]
                )
    return metrics