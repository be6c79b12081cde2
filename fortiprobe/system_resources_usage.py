"""Probes for CPU, memory and session usage, globally and per VDOM."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import ApiError, Desc, Metric, TargetMetadata, ValueType

CPU_USAGE = Desc(
    "fortigate_cpu_usage_ratio",
    "Current resource usage ratio of system CPU, per core",
    ("processor",),
)
MEMORY_USAGE = Desc(
    "fortigate_memory_usage_ratio",
    "Current resource usage ratio of system memory",
)
CURRENT_SESSIONS = Desc(
    "fortigate_current_sessions",
    "Current amount of sessions, per IP version",
    ("protocol",),
)

VDOM_CPU_USAGE = Desc(
    "fortigate_vdom_cpu_usage_ratio",
    "Current resource usage ratio of CPU, per VDOM",
    ("vdom",),
)
VDOM_MEMORY_USAGE = Desc(
    "fortigate_vdom_memory_usage_ratio",
    "Current resource usage ratio of memory, per VDOM",
    ("vdom",),
)
VDOM_CURRENT_SESSIONS = Desc(
    "fortigate_vdom_current_sessions",
    "Current amount of sessions, per VDOM and IP version",
    ("vdom", "protocol"),
)

_PATH = "api/v2/monitor/system/resource/usage"


def _current(results: dict, key: str) -> float:
    """Return the current value of the first sample of ``key``."""
    samples = results.get(key) or []
    if not samples:
        raise ApiError(f"resource usage has no {key!r} samples")
    return float(samples[0].get("current") or 0)


def probe_system_resource_usage(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report per-core CPU usage, memory usage and session counts of the whole device.

    The first CPU sample is the average over all cores and is skipped.
    """
    response = client.get(_PATH, "interval=1-min&scope=global") or {}
    results = response.get("results") or {}

    metrics = [
        CPU_USAGE.metric(ValueType.GAUGE, float(cpu.get("current") or 0) / 100.0, str(index))
        for index, cpu in enumerate((results.get("cpu") or [])[1:])
    ]
    metrics.append(MEMORY_USAGE.metric(ValueType.GAUGE, _current(results, "mem") / 100.0))
    metrics.append(CURRENT_SESSIONS.metric(ValueType.GAUGE, _current(results, "session"), "ipv4"))
    metrics.append(CURRENT_SESSIONS.metric(ValueType.GAUGE, _current(results, "session6"), "ipv6"))
    return metrics


def probe_system_vdom_resources(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report CPU usage, memory usage and session counts of every VDOM."""
    metrics = []
    for response in client.get(_PATH, "interval=1-min&vdom=*") or []:
        vdom = response.get("vdom") or ""
        results = response.get("results") or {}
        metrics.extend(
            [
                VDOM_CPU_USAGE.metric(ValueType.GAUGE, _current(results, "cpu") / 100.0, vdom),
                VDOM_MEMORY_USAGE.metric(ValueType.GAUGE, _current(results, "mem") / 100.0, vdom),
                VDOM_CURRENT_SESSIONS.metric(
                    ValueType.GAUGE, _current(results, "session"), vdom, "ipv4"
                ),
                VDOM_CURRENT_SESSIONS.metric(
                    ValueType.GAUGE, _current(results, "session6"), vdom, "ipv6"
                ),
            ]
        )
    return metrics