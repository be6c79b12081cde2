"""Probe for SDN connector status."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

SDN_CONNECTOR_STATUS = Desc(
    "fortigate_system_sdn_connector_status",
    "Status of SDN connectors (0=Disabled, 1=Down, 2=Unknown, 3=Up, 4=Updating)",
    ("vdom", "name", "type"),
)
SDN_CONNECTOR_LAST_UPDATE = Desc(
    "fortigate_system_sdn_connector_last_update_seconds",
    "Last update time for SDN connectors (in seconds from epoch)",
    ("vdom", "name", "type"),
)

_STATUS_CODES = {"Disabled": 0, "Down": 1, "Unknown": 2, "Up": 3, "Updating": 4}


def probe_system_sdn_connector(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report status and last update time of every SDN connector.

    A status outside the known set yields no status sample.
    """
    metrics = []
    for response in client.get("api/v2/monitor/system/sdn-connector/status", "vdom=*") or []:
        vdom = response.get("vdom") or ""
        for connector in response.get("results") or []:
            labels = (vdom, connector.get("name") or "", connector.get("type") or "")
            code = _STATUS_CODES.get(connector.get("status"))
            if code is not None:
                metrics.append(SDN_CONNECTOR_STATUS.metric(ValueType.GAUGE, code, *labels))
            metrics.append(
                SDN_CONNECTOR_LAST_UPDATE.metric(
                    ValueType.GAUGE, int(connector.get("last_update") or 0), *labels
                )
            )
    return metrics