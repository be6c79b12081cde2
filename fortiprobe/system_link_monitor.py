"""Probe for link monitor health checks."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

_LABELS = ("vdom", "monitor", "link")

LINK_STATUS = Desc(
    "fortigate_link_status",
    "Signals the status of the link. 1 means that this state is present in every other case the value is 0",
    ("vdom", "monitor", "link", "state"),
)
LINK_LATENCY = Desc(
    "fortigate_link_latency_seconds",
    "Average latency of this link based on the last 30 probes in seconds",
    _LABELS,
)
LINK_JITTER = Desc(
    "fortigate_link_latency_jitter_seconds",
    "Average of the latency jitter  on this link based on the last 30 probes in seconds",
    _LABELS,
)
LINK_PACKET_LOSS = Desc(
    "fortigate_link_packet_loss_ratio",
    "Percentage of packets lost relative to  all sent based on the last 30 probes",
    _LABELS,
)
LINK_PACKET_SENT = Desc(
    "fortigate_link_packet_sent_total", "Number of packets sent on this link", _LABELS
)
LINK_PACKET_RECEIVED = Desc(
    "fortigate_link_packet_received_total", "Number of packets received on this link", _LABELS
)
LINK_SESSIONS = Desc(
    "fortigate_link_active_sessions", "Number of sessions active on this link", _LABELS
)
LINK_BANDWIDTH_TX = Desc(
    "fortigate_link_bandwidth_tx_byte_per_second",
    "Bandwidth available on this link for sending",
    _LABELS,
)
LINK_BANDWIDTH_RX = Desc(
    "fortigate_link_bandwidth_rx_byte_per_second",
    "Bandwidth available on this link for sending",
    _LABELS,
)
LINK_STATUS_CHANGED = Desc(
    "fortigate_link_status_change_time_seconds",
    "Unix timestamp describing the time when the last status change has occurred",
    _LABELS,
)

_STATES = ("up", "down", "error", "unknown")


def _number(data: dict, key: str) -> float:
    return float(data.get(key) or 0)


def probe_system_link_monitor(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report the state of every monitored link and, unless it is in error
    or an unknown state, its latency, loss, traffic and bandwidth."""
    metrics = []
    for response in client.get("api/v2/monitor/system/link-monitor", "vdom=*") or []:
        vdom = response.get("vdom") or ""
        for monitor, links in (response.get("results") or {}).items():
            for link_name, link in (links or {}).items():
                status = link.get("status")
                state = status if status in ("up", "down", "error") else "unknown"
                metrics.extend(
                    LINK_STATUS.metric(
                        ValueType.GAUGE, 1.0 if s == state else 0.0, vdom, monitor, link_name, s
                    )
                    for s in _STATES
                )
                if state in ("error", "unknown"):
                    continue
                labels = (vdom, monitor, link_name)
                metrics.extend(
                    [
                        LINK_LATENCY.metric(ValueType.GAUGE, _number(link, "latency") / 1000, *labels),
                        LINK_JITTER.metric(ValueType.GAUGE, _number(link, "jitter") / 1000, *labels),
                        LINK_PACKET_LOSS.metric(
                            ValueType.GAUGE, _number(link, "packet_loss") / 100, *labels
                        ),
                        LINK_PACKET_SENT.metric(
                            ValueType.COUNTER, _number(link, "packet_sent"), *labels
                        ),
                        LINK_PACKET_RECEIVED.metric(
                            ValueType.COUNTER, _number(link, "packet_received"), *labels
                        ),
                        LINK_SESSIONS.metric(ValueType.GAUGE, _number(link, "session"), *labels),
                        LINK_BANDWIDTH_TX.metric(
                            ValueType.GAUGE, _number(link, "tx_bandwidth") / 8, *labels
                        ),
                        LINK_BANDWIDTH_RX.metric(
                            ValueType.GAUGE, _number(link, "rx_bandwidth") / 8, *labels
                        ),
                        LINK_STATUS_CHANGED.metric(
                            ValueType.GAUGE, _number(link, "state_changed"), *labels
                        ),
                    ]
                )
    return metrics