"""Metric model, text exposition and the JSON API client shared by every probe."""

from __future__ import annotations

import enum
import json
import math
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, Mapping


class ValueType(enum.Enum):
    """Kind of a metric sample."""

    GAUGE = "gauge"
    COUNTER = "counter"


@dataclass(frozen=True)
class Desc:
    """Describes a metric family: its name, help text and label names."""

    name: str
    help: str
    label_names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "label_names", tuple(self.label_names))

    def metric(self, value_type: ValueType | str, value: float, *args: str) -> Metric:
        """Build a sample of this family with the given label values."""
        if len(args) != len(self.label_names):
            raise ValueError(
                f"{self.name}: expected {len(self.label_names)} label values, got {len(args)}"
            )
        for arg in args:
            if not isinstance(arg, str):
                raise TypeError(f"{self.name}: label value {arg!r} is not a string")
        return Metric(self, ValueType(value_type), float(value), tuple(args))


@dataclass(frozen=True)
class Metric:
    """A single sample: a description, a value type, a value and label values."""

    desc: Desc
    value_type: ValueType
    value: float
    label_values: tuple[str, ...] = field(default=())

    @property
    def name(self) -> str:
        return self.desc.name

    @property
    def labels(self) -> dict[str, str]:
        return dict(zip(self.desc.label_names, self.label_values))


@dataclass(frozen=True)
class TargetMetadata:
    """Facts about the probed device that probes may depend on."""

    version_major: int
    version_minor: int


class ApiError(Exception):
    """Raised when the device API cannot be queried or answers with garbage."""


class ApiClient:
    """Minimal JSON-over-HTTP client for the device REST API."""

    def __init__(
        self,
        base_url: str,
        headers: Mapping[str, str] | None = None,
        timeout: float = 30.0,
        ssl_context: ssl.SSLContext | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = dict(headers or {})
        self.timeout = timeout
        self.ssl_context = ssl_context

    def get(self, path: str, query: str = "") -> Any:
        """Fetch ``path`` with the raw ``query`` string and return the decoded JSON."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        if query:
            url = f"{url}?{query}"
        request = urllib.request.Request(url, headers=self.headers, method="GET")
        request.add_header("Accept", "application/json")
        try:
            with urllib.request.urlopen(
                request, timeout=self.timeout, context=self.ssl_context
            ) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            raise ApiError(f"GET {path} returned HTTP {exc.code}") from exc
        except (urllib.error.URLError, OSError) as exc:
            raise ApiError(f"GET {path} failed: {exc}") from exc
        try:
            return json.loads(body)
        except ValueError as exc:
            raise ApiError(f"GET {path} returned invalid JSON: {exc}") from exc


def _format_value(value: float) -> str:
    """Format a float the way the Prometheus text format does (shortest %g)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return sign + "0"
    decimal = Decimal(repr(abs(value))).normalize()
    parts = decimal.as_tuple()
    digits = "".join(str(d) for d in parts.digits)
    point = len(digits) + int(parts.exponent)
    exponent = point - 1
    if exponent < -4 or exponent >= 6:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        exp_sign = "-" if exponent < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exponent):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return sign + digits + "0" * (point - len(digits))
    return f"{sign}{digits[:point]}.{digits[point:]}"


def _escape_label(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')


def _escape_help(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n")


def render(metrics: Iterable[Metric]) -> str:
    """Render metrics in the Prometheus text exposition format, sorted."""
    families: dict[str, tuple[Desc, ValueType, dict[tuple[tuple[str, str], ...], float]]] = {}
    for metric in metrics:
        family = families.get(metric.name)
        if family is None:
            family = (metric.desc, metric.value_type, {})
            families[metric.name] = family
        elif family[0] != metric.desc or family[1] != metric.value_type:
            raise ValueError(f"inconsistent descriptions for metric {metric.name}")
        key = tuple(sorted(metric.labels.items()))
        if key in family[2]:
            raise ValueError(f"duplicate sample for {metric.name} with labels {dict(key)}")
        family[2][key] = metric.value

    lines = []
    for name in sorted(families):
        desc, value_type, samples = families[name]
        lines.append(f"# HELP {name} {_escape_help(desc.help)}")
        lines.append(f"# TYPE {name} {value_type.value}")
        for key in sorted(samples):
            value = _format_value(samples[key])
            if key:
                labels = ",".join(f'{k}="{_escape_label(v)}"' for k, v in key)
                lines.append(f"{name}{{{labels}}} {value}")
            else:
                lines.append(f"{name} {value}")
    return "".join(line + "\n" for line in lines)