"""Probe for certificates available on the device, globally and per VDOM."""

from __future__ import annotations

from typing import Any

from fortiprobe.base import Desc, Metric, TargetMetadata, ValueType

CERTIFICATE_INFO = Desc(
    "fortigate_certificate_info",
    "Info metric containing meta information about the certificate",
    ("name", "source", "scope", "vdom", "status", "type"),
)
CERTIFICATE_VALID_FROM = Desc(
    "fortigate_certificate_valid_from_seconds",
    "Unix timestamp from which this certificate is valid",
    ("name", "source", "scope", "vdom"),
)
CERTIFICATE_VALID_TO = Desc(
    "fortigate_certificate_valid_to_seconds",
    "Unix timestamp till which this certificate is valid",
    ("name", "source", "scope", "vdom"),
)
CERTIFICATE_CMDB_REFERENCES = Desc(
    "fortigate_certificate_cmdb_references",
    "Number of times the certificate is referenced",
    ("name", "source", "scope", "vdom"),
)

_PATH = "api/v2/monitor/system/available-certificates"


def probe_system_available_certificates(client: Any, meta: TargetMetadata) -> list[Metric]:
    """Report info, validity window and reference count of every certificate.

    VDOM-scoped certificates come first, followed by the global ones.
    """
    global_response = client.get(_PATH, "scope=global") or {}
    vdom_responses = client.get(_PATH, "vdom=*") or []

    scoped = [(response, "vdom") for response in vdom_responses]
    scoped.append((global_response, "global"))

    metrics = []
    for response, scope in scoped:
        vdom = response.get("vdom") or ""
        for cert in response.get("results") or []:
            name = cert.get("name") or ""
            source = cert.get("source") or ""
            labels = (name, source, scope, vdom)
            metrics.append(
                CERTIFICATE_INFO.metric(
                    ValueType.GAUGE,
                    1.0,
                    *labels,
                    cert.get("status") or "",
                    cert.get("type") or "",
                )
            )
            metrics.append(
                CERTIFICATE_VALID_FROM.metric(
                    ValueType.GAUGE, float(cert.get("valid_from") or 0), *labels
                )
            )
            metrics.append(
                CERTIFICATE_VALID_TO.metric(
                    ValueType.GAUGE, float(cert.get("valid_to") or 0), *labels
                )
            )
            metrics.append(
                CERTIFICATE_CMDB_REFERENCES.metric(
                    ValueType.GAUGE, float(cert.get("q_ref") or 0), *labels
                )
            )
    return metrics