"""Probe for the device clock."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

TIME = Desc("fortigate_time_seconds", "System epoch time in seconds")
ENDPOINT = "api/v2/monitor/system/time"


def probe_system_time(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report the device's current epoch time."""
    clock = (client.get(ENDPOINT, "vdom=root") or {}).get("results") or {}
    return [TIME.metric(ValueType.GAUGE, float(clock.get("time") or 0))]