"""Probe for SSL VPN statistics."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

VPN_CURRENT_USERS = Desc("fortigate_vpn_ssl_users", "Number of current SSL VPN users", ("vdom",))
VPN_CURRENT_TUNNELS = Desc(
    "fortigate_vpn_ssl_tunnels", "Number of current SSL VPN tunnels", ("vdom",)
)
VPN_CURRENT_CONNECTIONS = Desc(
    "fortigate_vpn_ssl_connections", "Number of current SSL VPN connections", ("vdom",)
)


def probe_vpn_ssl_stats(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report current SSL VPN users, tunnels and connections per VDOM."""
    metrics = []
    for response in client.get("api/v2/monitor/vpn/ssl/stats", "vdom=*") or []:
        vdom = response.get("vdom") or ""
        current = (response.get("results") or {}).get("current") or {}
        metrics.append(
            VPN_CURRENT_USERS.metric(ValueType.GAUGE, int(current.get("users") or 0), vdom)
        )
        metrics.append(
            VPN_CURRENT_TUNNELS.metric(ValueType.GAUGE, int(current.get("tunnels") or 0), vdom)
        )
        metrics.append(
            VPN_CURRENT_CONNECTIONS.metric(
                ValueType.GAUGE, int(current.get("connections") or 0), vdom
            )
        )
    return metrics