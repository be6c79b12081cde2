"""Probe for wireless access point and client counts."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

WTP_COUNT = Desc(
    "fortigate_wifi_access_points",
    "Number of connected access points by status",
    ("vdom", "status"),
)
WTP_CLIENT_COUNT = Desc("fortigate_wifi_fabric_clients", "Number of connected clients", ("vdom",))
WTP_MAX_CLIENT_COUNT = Desc(
    "fortigate_wifi_fabric_max_allowed_clients",
    "Maximum number of clients which are allowed to connect",
    ("vdom",),
)


def _number(data: dict, key: str) -> float:
    return float(data.get(key) or 0)


def probe_wifi_ap_status(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report access points by state and connected/allowed client counts per VDOM."""
    metrics = []
    for response in client.get("api/v2/monitor/wifi/ap_status", "vdom=*") or []:
        vdom = response.get("vdom") or ""
        results = response.get("results") or {}
        metrics.extend(
            [
                WTP_COUNT.metric(ValueType.GAUGE, _number(results, "wtp_active"), vdom, "active"),
                WTP_COUNT.metric(ValueType.GAUGE, _number(results, "wtp_down"), vdom, "down"),
                WTP_COUNT.metric(
                    ValueType.GAUGE, _number(results, "wtp_rebooted"), vdom, "rebooting"
                ),
                WTP_CLIENT_COUNT.metric(ValueType.GAUGE, _number(results, "client_count"), vdom),
                WTP_MAX_CLIENT_COUNT.metric(
                    ValueType.GAUGE, _number(results, "client_count_max"), vdom
                ),
            ]
        )
    return metrics