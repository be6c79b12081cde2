"""Probe for the FortiManager connection and registration status."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

CONNECTION_STATUS = Desc(
    "fortigate_fortimanager_connection_status",
    "Fortimanager status ID",
    ("vdom", "mode", "status"),
)
REGISTRATION_STATUS = Desc(
    "fortigate_fortimanager_registration_status",
    "Fortimanager registration status ID",
    ("vdom", "mode", "status"),
)

# Index in each tuple is the status id reported by the device.
_CONNECTION_STATES = ("down", "handshake", "up")
_REGISTRATION_STATES = ("unknown", "inprogress", "registered", "unregistered")


def _one_hot(desc: Desc, states: tuple[str, ...], state_id: Any, vdom: str, mode: str) -> list[Metric]:
    return [
        desc.metric(ValueType.GAUGE, 1.0 if index == state_id else 0.0, vdom, mode, state)
        for index, state in enumerate(states)
    ]


def probe_system_fortimanager_status(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report the management tunnel and registration state per VDOM.

    Each state gets its own sample; the active one is 1, the rest 0.
    An unknown id leaves every sample at 0.
    """
    metrics = []
    for response in client.get("api/v2/monitor/system/fortimanager/status", "vdom=*") or []:
        vdom = response.get("vdom") or ""
        results = response.get("results") or {}
        mode = results.get("mode") or ""
        status_id = int(results.get("fortimanager_status_id") or 0)
        registration_id = int(results.get("fortimanager_registration_status_id") or 0)
        metrics.extend(_one_hot(CONNECTION_STATUS, _CONNECTION_STATES, status_id, vdom, mode))
        metrics.extend(
            _one_hot(REGISTRATION_STATUS, _REGISTRATION_STATES, registration_id, vdom, mode)
        )
    return metrics