"""Probe for FSSO connectors."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

FSSO_USERS = Desc(
    "fortigate_user_fsso_info",
    "Info on Fsso defined connectors",
    ("vdom", "name", "id", "type", "status"),
)


def probe_user_fsso(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report one info metric per FSSO connector in every VDOM.

    Connectors of type ``fsso`` are identified by name, all others by id.
    """
    metrics = []
    for response in client.get("api/v2/monitor/user/fsso", "vdom=*") or []:
        vdom = response.get("vdom") or ""
        for connector in response.get("results") or []:
            kind = connector.get("type") or ""
            status = connector.get("status") or ""
            if kind == "fsso":
                labels = (vdom, connector.get("name") or "", "", kind, status)
            else:
                labels = (vdom, "", str(int(connector.get("id") or 0)), kind, status)
            metrics.append(FSSO_USERS.metric(ValueType.GAUGE, 1.0, *labels))
    return metrics