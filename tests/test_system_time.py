from types import SimpleNamespace

import pytest

from fortiprobe.base import ApiError, TargetMetadata, render
from fortiprobe.system_time import probe_system_time

CLOCK_META = TargetMetadata(version_major=7, version_minor=2)


def _clock(payload):
    def get(path, query):
        assert (path, query) == ("api/v2/monitor/system/time", "vdom=root")
        return payload

    return SimpleNamespace(get=get)


def test_system_time():
    device = _clock(
        {"http_method": "GET", "results": {"time": 1630313596}, "vdom": "root", "status": "success"}
    )
    assert render(probe_system_time(device, CLOCK_META)) == (
        "# HELP fortigate_time_seconds System epoch time in seconds\n"
        "# TYPE fortigate_time_seconds gauge\n"
        "fortigate_time_seconds 1.630313596e+09\n"
    )


def test_missing_results_reads_zero():
    (metric,) = probe_system_time(_clock({}), CLOCK_META)
    assert metric.value == 0.0


def test_system_time_error_propagates():
    def unreachable(path, query):
        raise ApiError("clock unreachable")

    with pytest.raises(ApiError):
        probe_system_time(SimpleNamespace(get=unreachable), CLOCK_META)