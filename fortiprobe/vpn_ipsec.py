"""Probe for IPsec tunnel phase-2 selectors."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

_LABELS = ("vdom", "name", "p2serial", "parent")

TUNNEL_UP = Desc("fortigate_ipsec_tunnel_up", "Status of IPsec tunnel (0 - Down, 1 - Up)", _LABELS)
TUNNEL_TRANSMITTED = Desc(
    "fortigate_ipsec_tunnel_transmit_bytes_total",
    "Total number of bytes transmitted over the IPsec tunnel",
    _LABELS,
)
TUNNEL_RECEIVED = Desc(
    "fortigate_ipsec_tunnel_receive_bytes_total",
    "Total number of bytes received over the IPsec tunnel",
    _LABELS,
)


def probe_vpn_ipsec(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report state and traffic of every phase-2 selector of every IPsec tunnel.

    Dial-up tunnels (client VPN) are skipped.
    """
    metrics = []
    for response in client.get("api/v2/monitor/vpn/ipsec", "vdom=*") or []:
        vdom = response.get("vdom") or ""
        for tunnel in response.get("results") or []:
            if tunnel.get("type") == "dialup":
                continue
            parent = tunnel.get("name") or ""
            for selector in tunnel.get("proxyid") or []:
                labels = (
                    vdom,
                    selector.get("p2name") or "",
                    str(int(selector.get("p2serial") or 0)),
                    parent,
                )
                up = 1.0 if selector.get("status") == "up" else 0.0
                metrics.extend(
                    [
                        TUNNEL_UP.metric(ValueType.GAUGE, up, *labels),
                        TUNNEL_TRANSMITTED.metric(
                            ValueType.COUNTER, float(selector.get("outgoing_bytes") or 0), *labels
                        ),
                        TUNNEL_RECEIVED.metric(
                            ValueType.COUNTER, float(selector.get("incoming_bytes") or 0), *labels
                        ),
                    ]
                )
    return metrics