import textwrap

import pytest

from fortiprobe.base import ApiError, TargetMetadata, ValueType, render
from fortiprobe.system_ha_statistics import probe_system_ha_statistics

META = TargetMetadata(version_major=7, version_minor=0)

STATS = {
    "http_method": "GET",
    "vdom": "root",
    "path": "system",
    "name": "ha-statistics",
    "status": "success",
    "serial": "FGT61E4QXXXXXXXX1",
    "version": "v6.2.4",
    "build": 1112,
    "results": [
        {
            "hostname": "member-name-1",
            "serial_no": "FGT61E4QXXXXXXXX1",
            "tnow": 1600000000,
            "sessions": 148,
            "tpacket": 549981862,
            "vir_usage": 0,
            "net_usage": 152,
            "tbyte": 202844842379,
            "intr_usage": 0,
            "cpu_usage": 1,
            "mem_usage": 67,
        },
        {
            "hostname": "member-name-2",
            "serial_no": "FGT61E4QXXXXXXXX2",
            "tnow": 1600000000,
            "sessions": 12,
            "tpacket": 1,
            "vir_usage": 0,
            "net_usage": 43,
            "tbyte": 40,
            "intr_usage": 0,
            "cpu_usage": 0,
            "mem_usage": 68,
        },
    ],
}

CONFIG = {"http_method": "GET", "status": "success", "results": {"group-name": "my-cluster"}}
CONFIG_NO_ACCESS = {"http_method": "GET", "status": "error", "http_status": 403}


class FakeClient:
    def __init__(self, data):
        self.data = data
        self.calls = []

    def get(self, path, query=""):
        self.calls.append((path, query))
        if path not in self.data:
            raise AssertionError(f"unprepared path {path}")
        return self.data[path]


class FailingClient:
    def get(self, path, query=""):
        raise ApiError("boom")


def _expected(group):
    return textwrap.dedent(
        f"""\
        # HELP fortigate_ha_member_bytes_total Bytes transferred by HA member
        # TYPE fortigate_ha_member_bytes_total counter
        fortigate_ha_member_bytes_total{{hostname="member-name-1",vdom="root"}} 2.02844842379e+11
        fortigate_ha_member_bytes_total{{hostname="member-name-2",vdom="root"}} 40
        # HELP fortigate_ha_member_cpu_usage_ratio CPU usage by HA member
        # TYPE fortigate_ha_member_cpu_usage_ratio gauge
        fortigate_ha_member_cpu_usage_ratio{{hostname="member-name-1",vdom="root"}} 0.01
        fortigate_ha_member_cpu_usage_ratio{{hostname="member-name-2",vdom="root"}} 0
        # HELP fortigate_ha_member_info Info metric regarding cluster members
        # TYPE fortigate_ha_member_info gauge
        fortigate_ha_member_info{{group="{group}",hostname="member-name-1",serial="FGT61E4QXXXXXXXX1",vdom="root"}} 1
        fortigate_ha_member_info{{group="{group}",hostname="member-name-2",serial="FGT61E4QXXXXXXXX2",vdom="root"}} 1
        # HELP fortigate_ha_member_ips_events_total IPS events processed by HA member
        # TYPE fortigate_ha_member_ips_events_total counter
        fortigate_ha_member_ips_events_total{{hostname="member-name-1",vdom="root"}} 0
        fortigate_ha_member_ips_events_total{{hostname="member-name-2",vdom="root"}} 0
        # HELP fortigate_ha_member_memory_usage_ratio Memory usage by HA member
        # TYPE fortigate_ha_member_memory_usage_ratio gauge
        fortigate_ha_member_memory_usage_ratio{{hostname="member-name-1",vdom="root"}} 0.67
        fortigate_ha_member_memory_usage_ratio{{hostname="member-name-2",vdom="root"}} 0.68
        # HELP fortigate_ha_member_network_usage_ratio Network usage by HA member
        # TYPE fortigate_ha_member_network_usage_ratio gauge
        fortigate_ha_member_network_usage_ratio{{hostname="member-name-1",vdom="root"}} 1.52
        fortigate_ha_member_network_usage_ratio{{hostname="member-name-2",vdom="root"}} 0.43
        # HELP fortigate_ha_member_packets_total Packets which are handled by this HA member
        # TYPE fortigate_ha_member_packets_total counter
        fortigate_ha_member_packets_total{{hostname="member-name-1",vdom="root"}} 5.49981862e+08
        fortigate_ha_member_packets_total{{hostname="member-name-2",vdom="root"}} 1
        # HELP fortigate_ha_member_sessions Sessions which are handled by this HA member
        # TYPE fortigate_ha_member_sessions gauge
        fortigate_ha_member_sessions{{hostname="member-name-1",vdom="root"}} 148
        fortigate_ha_member_sessions{{hostname="member-name-2",vdom="root"}} 12
        # HELP fortigate_ha_member_virus_events_total Virus events which are detected by this HA member
        # TYPE fortigate_ha_member_virus_events_total counter
        fortigate_ha_member_virus_events_total{{hostname="member-name-1",vdom="root"}} 0
        fortigate_ha_member_virus_events_total{{hostname="member-name-2",vdom="root"}} 0
        """
    )


def test_ha_statistics_render():
    client = FakeClient(
        {"api/v2/monitor/system/ha-statistics": STATS, "api/v2/cmdb/system/ha": CONFIG}
    )
    metrics = probe_system_ha_statistics(client, META)
    assert render(metrics) == _expected("my-cluster")
    assert client.calls == [
        ("api/v2/monitor/system/ha-statistics", ""),
        ("api/v2/cmdb/system/ha", ""),
    ]


def test_ha_statistics_without_config_access():
    client = FakeClient(
        {"api/v2/monitor/system/ha-statistics": STATS, "api/v2/cmdb/system/ha": CONFIG_NO_ACCESS}
    )
    metrics = probe_system_ha_statistics(client, META)
    assert render(metrics) == _expected("")


def test_counters_and_gauges_are_typed():
    client = FakeClient(
        {"api/v2/monitor/system/ha-statistics": STATS, "api/v2/cmdb/system/ha": CONFIG}
    )
    types = {m.name: m.value_type for m in probe_system_ha_statistics(client, META)}
    assert types["fortigate_ha_member_packets_total"] is ValueType.COUNTER
    assert types["fortigate_ha_member_sessions"] is ValueType.GAUGE


def test_no_members_yield_no_metrics():
    client = FakeClient(
        {
            "api/v2/monitor/system/ha-statistics": {"vdom": "root", "results": []},
            "api/v2/cmdb/system/ha": CONFIG,
        }
    )
    assert probe_system_ha_statistics(client, META) == []


def test_api_error_propagates():
    with pytest.raises(ApiError):
        probe_system_ha_statistics(FailingClient(), META)