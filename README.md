# fortiprobe

Probe functions that query a FortiGate firewall's REST API and turn the
answers into Prometheus metrics, plus a renderer for the Prometheus text
exposition format. It has no dependencies outside the standard library.

## Installation

    pip install fortiprobe

## Building blocks

All of these live in `fortiprobe.base`:

- `ApiClient(base_url, headers=None, timeout=30.0, ssl_context=None)` is a
  small JSON-over-HTTP client. `get(path, query="")` sends a GET request to
  `base_url/path?query` and returns the decoded JSON. HTTP errors, connection
  failures and invalid JSON raise `ApiError`.
- `TargetMetadata(version_major, version_minor)` carries the firmware version
  of the target and is handed to every probe.
- `Desc(name, help, label_names)` describes a metric family.
  `Desc.metric(value_type, value, *label_values)` builds a `Metric`; it raises
  `ValueError` when the number of label values is wrong and `TypeError` when a
  label value is not a string.
- `ValueType` is `GAUGE` or `COUNTER`.
- `Metric` holds a description, value type, value and label values, with
  `name` and `labels` properties.
- `render(metrics)` returns the exposition text, with families sorted by name
  and samples sorted by labels. It raises `ValueError` for duplicate samples or
  for two different descriptions under one metric name.

## Probes

Each probe is a function `probe_<name>(client, meta)` that calls
`client.get(...)` and returns a list of `Metric` objects. Any object with a
`get(path, query)` method returning decoded JSON can serve as the client.
Errors from the client are not caught; they propagate to the caller.

| Module | Function |
| --- | --- |
| `fortiprobe.system_status` | `probe_system_status` |
| `fortiprobe.system_time` | `probe_system_time` |
| `fortiprobe.webui_state` | `probe_webui_state` |
| `fortiprobe.system_sensor_info` | `probe_system_sensor_info` |
| `fortiprobe.user_fsso` | `probe_user_fsso` |
| `fortiprobe.system_sdn_connector` | `probe_system_sdn_connector` |
| `fortiprobe.vpn_ssl_stats` | `probe_vpn_ssl_stats` |
| `fortiprobe.system_available_certificates` | `probe_system_available_certificates` |
| `fortiprobe.system_fortimanager` | `probe_system_fortimanager_status` |
| `fortiprobe.system_ha_checksum` | `probe_system_ha_checksum` |
| `fortiprobe.system_ha_statistics` | `probe_system_ha_statistics` |
| `fortiprobe.system_link_monitor` | `probe_system_link_monitor` |
| `fortiprobe.wifi_ap_status` | `probe_wifi_ap_status` |
| `fortiprobe.wifi_clients` | `probe_wifi_clients` |
| `fortiprobe.system_resources_usage` | `probe_system_resource_usage`, `probe_system_vdom_resources` |
| `fortiprobe.virtual_wan_health_check` | `probe_virtual_wan_health_check` |
| `fortiprobe.vpn_ipsec` | `probe_vpn_ipsec` |

The resource usage probes raise `ApiError` when the answer lacks the memory,
session or CPU samples that they need.

## Example

    from fortiprobe.base import ApiClient, TargetMetadata, render
    from fortiprobe.system_status import probe_system_status
    from fortiprobe.system_time import probe_system_time

    client = ApiClient(
        "https://firewall.example.com",
        headers={"Authorization": "Bearer token"},
    )
    meta = TargetMetadata(7, 0)

    metrics = probe_system_time(client, meta) + probe_system_status(client, meta)
    print(render(metrics), end="")

## What this package does not do

- It has no command and no HTTP server for Prometheus to scrape. You call
  the probes and `render` yourself and serve the text as you see fit.
- There is nothing that runs a whole set of probes for you, or selects
  probes by name. You choose and call the probe functions yourself.
- There is no probe for per-interface traffic counters and none for the
  individual SSL VPN user connections. Only the aggregate SSL VPN statistics
  are covered.

## Running the tests

    pip install "fortiprobe[test]"
    pytest