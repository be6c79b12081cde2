"""Probe for system version and build information."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

VERSION_INFO = Desc(
    "fortigate_version_info",
    "System version and build information",
    ("serial", "version", "build"),
)


def probe_system_status(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report the serial number, OS version and build of the device."""
    status = client.get("api/v2/monitor/system/status", "") or {}
    return [
        VERSION_INFO.metric(
            ValueType.GAUGE,
            1.0,
            status.get("serial") or "",
            status.get("version") or "",
            str(int(status.get("build") or 0)),
        )
    ]