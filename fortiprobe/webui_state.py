"""Probe for the web UI state: last reboot and last snapshot times."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

REBOOT_TIME = Desc("fortigate_last_reboot_seconds", "Last system reboot epoch time in seconds")
SNAPSHOT_TIME = Desc("fortigate_last_snapshot_seconds", "Last snapshot epoch time in seconds")


def probe_webui_state(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report last reboot and snapshot times, converted from milliseconds."""
    response = client.get("api/v2/monitor/web-ui/state", "") or {}
    results = response.get("results") or {}
    return [
        REBOOT_TIME.metric(ValueType.GAUGE, float(results.get("utc_last_reboot") or 0) / 1000),
        SNAPSHOT_TIME.metric(ValueType.GAUGE, float(results.get("snapshot_utc_time") or 0) / 1000),
    ]