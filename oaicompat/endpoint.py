"""Descriptions of API requests: method, path, query, body and headers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union
from urllib.parse import quote_plus

QueryValues = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


def encode_query(values: QueryValues) -> str:
    """Encode query values as "k=v&k=v", sorted by key, keeping value order per key."""
    grouped: dict[str, list[str]] = {}
    pairs = values.items() if isinstance(values, Mapping) else values
    for key, value in pairs:
        bucket = grouped.setdefault(str(key), [])
        if isinstance(value, (list, tuple)):
            bucket.extend(str(item) for item in value)
        else:
            bucket.append(str(value))
    return "&".join(
        f"{quote_plus(key, safe='')}={quote_plus(value, safe='')}"
        for key in sorted(grouped)
        for value in grouped[key]
    )


@dataclass(frozen=True)
class Pagination:
    """Cursor options accepted by list endpoints."""

    limit: int | None = None
    order: str | None = None
    after: str | None = None
    before: str | None = None

    def to_query(self) -> list[tuple[str, str]]:
        """The options that are set, as query pairs."""
        pairs: list[tuple[str, str]] = []
        if self.limit is not None:
            pairs.append(("limit", str(int(self.limit))))
        if self.order is not None:
            pairs.append(("order", self.order))
        if self.after is not None:
            pairs.append(("after", self.after))
        if self.before is not None:
            pairs.append(("before", self.before))
        return pairs


@dataclass(frozen=True)
class ApiRequest:
    """A request to send to the API, relative to a base URL."""

    method: str
    path: str
    query: tuple[tuple[str, str], ...] = ()
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    model: str = ""
    assistant_version: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "query", tuple((str(k), str(v)) for k, v in self.query))
        object.__setattr__(self, "headers", dict(self.headers))

    def url(self, base_url: str) -> str:
        """The full URL of the request under the given base URL."""
        target = base_url.rstrip("/") + self.path
        encoded = encode_query(self.query)
        return f"{target}?{encoded}" if encoded else target