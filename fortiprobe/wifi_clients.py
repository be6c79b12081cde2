"""Probe for connected wireless clients."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

_LABELS = ("vdom", "mac")

CLIENT_INFO = Desc(
    "fortigate_wifi_client_info",
    "Number of connected access points by status",
    ("vdom", "mac", "hostname", "wtp_name"),
)
CLIENT_DATA_RATE = Desc(
    "fortigate_wifi_client_data_rate_bps", "Data rate of the client connection", _LABELS
)
BANDWIDTH_RX = Desc(
    "fortigate_wifi_client_bandwidth_rx_bps", "Bandwidth for receiving traffic", _LABELS
)
BANDWIDTH_TX = Desc(
    "fortigate_wifi_client_bandwidth_tx_bps", "Bandwidth for transmitting traffic", _LABELS
)
SIGNAL_STRENGTH = Desc(
    "fortigate_wifi_client_signal_strength_dBm", "Signal strength of the connected client", _LABELS
)
SIGNAL_NOISE = Desc(
    "fortigate_wifi_client_signal_noise_dBm", "Signal noise on the frequency of the client", _LABELS
)
TX_DISCARD_RATIO = Desc(
    "fortigate_wifi_client_tx_discard_ratio", "Percentage of discarded packets", _LABELS
)
TX_RETRY_RATIO = Desc(
    "fortigate_wifi_client_tx_retries_ratio",
    "Percentage of retried connection to all connection attempts",
    _LABELS,
)


def _number(data: dict, key: str) -> float:
    return float(data.get(key) or 0)


def probe_wifi_clients(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report radio and traffic figures of every wireless client.

    Only the first 1000 clients per VDOM are requested.
    """
    metrics = []
    query = "vdom=*&start=0&count=1000"
    for response in client.get("api/v2/monitor/wifi/client", query) or []:
        vdom = response.get("vdom") or ""
        for station in response.get("results") or []:
            mac = station.get("mac") or ""
            labels = (vdom, mac)
            metrics.extend(
                [
                    CLIENT_INFO.metric(
                        ValueType.COUNTER,
                        1.0,
                        vdom,
                        mac,
                        station.get("hostname") or "",
                        station.get("wtp_name") or "",
                    ),
                    CLIENT_DATA_RATE.metric(
                        ValueType.GAUGE, _number(station, "data_rate_bps"), *labels
                    ),
                    BANDWIDTH_RX.metric(ValueType.GAUGE, _number(station, "bandwidth_rx"), *labels),
                    BANDWIDTH_TX.metric(ValueType.GAUGE, _number(station, "bandwidth_tx"), *labels),
                    SIGNAL_STRENGTH.metric(ValueType.GAUGE, _number(station, "signal"), *labels),
                    SIGNAL_NOISE.metric(ValueType.GAUGE, _number(station, "noise"), *labels),
                    TX_DISCARD_RATIO.metric(
                        ValueType.GAUGE, _number(station, "tx_discard_percentage") / 100, *labels
                    ),
                    TX_RETRY_RATIO.metric(
                        ValueType.GAUGE, _number(station, "tx_retry_percentage") / 100, *labels
                    ),
                ]
            )
    return metrics