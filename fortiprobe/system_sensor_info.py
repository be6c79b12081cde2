"""Probe for hardware sensors: temperatures, fans and voltages."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

SENSOR_TEMPERATURE = Desc(
    "fortigate_sensor_temperature_celsius", "Sensor temperature in degree celsius", ("name",)
)
SENSOR_FAN = Desc("fortigate_sensor_fan_rpm", "Sensor fan rotation speed in RPM", ("name",))
SENSOR_VOLTAGE = Desc("fortigate_sensor_voltage_volts", "Sensor voltage in volts", ("name",))

_BY_TYPE = {
    "temperature": SENSOR_TEMPERATURE,
    "fan": SENSOR_FAN,
    "voltage": SENSOR_VOLTAGE,
}


def probe_system_sensor_info(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report every temperature, fan and voltage sensor; other types are ignored."""
    response = client.get("api/v2/monitor/system/sensor-info", "vdom=root") or {}
    metrics = []
    for sensor in response.get("results") or []:
        desc = _BY_TYPE.get(sensor.get("type"))
        if desc is not None:
            metrics.append(
                desc.metric(ValueType.GAUGE, float(sensor.get("value") or 0), sensor.get("name") or "")
            )
    return metrics