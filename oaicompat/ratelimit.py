"""Rate-limit information carried in response headers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal

_NANOS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_COMPONENT = re.compile(r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(ns|us|\u00b5s|\u03bcs|ms|s|m|h)")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_MAX_INT64 = 2**63 - 1
_MIN_INT64 = -(2**63)


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as "1h30m", "1.5s" or "300ms"."""
    body = text
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]
    if body == "0":
        return timedelta(0)
    if not body:
        raise ValueError(f"invalid duration {text!r}")

    nanos = Decimal(0)
    pos = 0
    while pos < len(body):
        match = _COMPONENT.match(body, pos)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        nanos += Decimal(match.group(1)) * _NANOS_PER_UNIT[match.group(2)]
        pos = match.end()

    whole = int(nanos)
    if whole > _MAX_INT64 + (1 if negative else 0):
        raise ValueError(f"invalid duration {text!r}")
    delta = timedelta(microseconds=whole // 1000)
    return -delta if negative else delta


class ResetTime(str):
    """A reset interval as sent by the server, e.g. "6m0s"."""

    def duration(self) -> timedelta:
        """The interval, or zero when it cannot be parsed."""
        try:
            return parse_duration(self)
        except ValueError:
            return timedelta(0)

    def time(self) -> datetime:
        """The moment of the reset, counted from now."""
        return datetime.now(timezone.utc) + self.duration()


@dataclass(frozen=True)
class RateLimitHeaders:
    """The x-ratelimit-* response headers."""

    limit_requests: int = 0
    limit_tokens: int = 0
    remaining_requests: int = 0
    remaining_tokens: int = 0
    reset_requests: ResetTime = ResetTime("")
    reset_tokens: ResetTime = ResetTime("")


def _atoi(value: str) -> int:
    if not _INTEGER.fullmatch(value):
        return 0
    return max(_MIN_INT64, min(_MAX_INT64, int(value)))


def _first_values(headers: Mapping[str, str] | Iterable[tuple[str, str]]) -> dict[str, str]:
    pairs = headers.items() if hasattr(headers, "items") else headers
    values: dict[str, str] = {}
    for key, value in pairs:
        values.setdefault(key.lower(), value)
    return values


def new_rate_limit_headers(headers: Mapping[str, str] | Iterable[tuple[str, str]]) -> RateLimitHeaders:
    """Read rate-limit values from headers; names match case-insensitively."""
    values = _first_values(headers)

    def get(name: str) -> str:
        return values.get(name, "")

    return RateLimitHeaders(
        limit_requests=_atoi(get("x-ratelimit-limit-requests")),
        limit_tokens=_atoi(get("x-ratelimit-limit-tokens")),
        remaining_requests=_atoi(get("x-ratelimit-remaining-requests")),
        remaining_tokens=_atoi(get("x-ratelimit-remaining-tokens")),
        reset_requests=ResetTime(get("x-ratelimit-reset-requests")),
        reset_tokens=ResetTime(get("x-ratelimit-reset-tokens")),
    )