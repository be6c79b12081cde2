"""Probe for HA member roles and configuration checksum synchronisation."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

IS_MASTER = Desc("fortigate_ha_member_has_role", "Master/Slave information", ("role", "serial"))
CHECKSUM_SYNC = Desc(
    "fortigate_ha_checksum_sync",
    "HA checksum synchronization status (1=synced, 0=out of sync)",
    ("checksum_type", "serial"),
)


def probe_system_ha_checksum(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report each member's master roles and whether its checksums match the first member's.

    Synchronisation is only reported when the cluster has more than one member.
    """
    response = client.get("api/v2/monitor/system/ha-checksums", "scope=global") or {}
    nodes = response.get("results") or []

    metrics = []
    for node in nodes:
        serial = node.get("serial_no") or ""
        metrics.append(
            IS_MASTER.metric(ValueType.GAUGE, int(node.get("is_manage_master") or 0), "manage_master", serial)
        )
        metrics.append(
            IS_MASTER.metric(ValueType.GAUGE, int(node.get("is_root_master") or 0), "root_master", serial)
        )

    if len(nodes) > 1:
        reference = nodes[0].get("checksum") or {}
        reference_vdoms = reference.get("vdoms") or {}
        for node in nodes:
            serial = node.get("serial_no") or ""
            checksum = node.get("checksum") or {}
            for kind in ("global", "root", "all"):
                synced = (checksum.get(kind) or "") == (reference.get(kind) or "")
                metrics.append(CHECKSUM_SYNC.metric(ValueType.GAUGE, 1.0 if synced else 0.0, kind, serial))
            for vdom, value in (checksum.get("vdoms") or {}).items():
                synced = vdom in reference_vdoms and reference_vdoms[vdom] == value
                metrics.append(
                    CHECKSUM_SYNC.metric(ValueType.GAUGE, 1.0 if synced else 0.0, f"vdom_{vdom}", serial)
                )
    return metrics