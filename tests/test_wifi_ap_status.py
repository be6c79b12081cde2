import copy
import re

import pytest

from fortiprobe.base import ApiError, TargetMetadata, render
from fortiprobe.wifi_ap_status import probe_wifi_ap_status

META = TargetMetadata(7, 0)
PATH = "api/v2/monitor/wifi/ap_status"

_LABEL = re.compile(r'(\w+)="((?:[^"\\]|\\.)*)"')


def _parse(text):
    meta = {}
    samples = {}
    for raw in text.strip().splitlines():
        line = raw.strip()
        if not line:
            continue
        if line.startswith("# HELP "):
            name, _, help_text = line[len("# HELP "):].partition(" ")
            meta.setdefault(name, {})["help"] = help_text
        elif line.startswith("# TYPE "):
            name, _, kind = line[len("# TYPE "):].partition(" ")
            meta.setdefault(name, {})["type"] = kind
        else:
            series, _, value = line.rpartition(" ")
            name, _, labels = series.partition("{")
            samples[(name, tuple(sorted(_LABEL.findall(labels))))] = float(value)
    return meta, samples


class FakeClient:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def get(self, path, query=""):
        self.calls.append((path, query))
        return copy.deepcopy(self.responses[path])


class FailingClient:
    def get(self, path, query=""):
        raise ApiError("unreachable")


AP_STATUS = [
    {
        "http_method": "GET",
        "vdom": "root",
        "status": "success",
        "results": {
            "wtp_session_count": 3,
            "wtp_active": 3,
            "wtp_down": 0,
            "wtp_rebooted": 0,
            "client_count": 17,
            "client_count_max": 0,
        },
    }
]

EXPECTED = """
# HELP fortigate_wifi_fabric_max_allowed_clients Maximum number of clients which are allowed to connect
# TYPE fortigate_wifi_fabric_max_allowed_clients gauge
fortigate_wifi_fabric_max_allowed_clients{vdom="root"} 0
# HELP fortigate_wifi_fabric_clients Number of connected clients
# TYPE fortigate_wifi_fabric_clients gauge
fortigate_wifi_fabric_clients{vdom="root"} 17
# HELP fortigate_wifi_access_points Number of connected access points by status
# TYPE fortigate_wifi_access_points gauge
fortigate_wifi_access_points{status="active",vdom="root"} 3
fortigate_wifi_access_points{status="down",vdom="root"} 0
fortigate_wifi_access_points{status="rebooting",vdom="root"} 0
"""


def test_probe_wifi_ap_status():
    client = FakeClient({PATH: AP_STATUS})
    got_meta, got_samples = _parse(render(probe_wifi_ap_status(client, META)))
    exp_meta, exp_samples = _parse(EXPECTED)
    assert got_meta == exp_meta
    assert got_samples == pytest.approx(exp_samples)
    assert client.calls == [(PATH, "vdom=*")]


def test_one_block_per_vdom():
    data = AP_STATUS + [{"vdom": "guest", "results": {"wtp_down": 2, "client_count": 4}}]
    metrics = probe_wifi_ap_status(FakeClient({PATH: data}), META)
    assert len(metrics) == 10
    guest = {(m.name, m.labels.get("status")): m.value for m in metrics if m.labels["vdom"] == "guest"}
    assert guest[("fortigate_wifi_access_points", "down")] == 2
    assert guest[("fortigate_wifi_fabric_clients", None)] == 4


def test_no_vdoms_gives_no_metrics():
    assert probe_wifi_ap_status(FakeClient({PATH: []}), META) == []


def test_api_error_propagates():
    with pytest.raises(ApiError):
        probe_wifi_ap_status(FailingClient(), META)