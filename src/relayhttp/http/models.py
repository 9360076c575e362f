# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response value types exchanged by the client, interceptors and transports."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum

from .redaction import RedactionPolicy, redaction_policy

BODY_PREFIX_LIMIT = 256


def pretty_prefix(body: bytes | None, limit: int = BODY_PREFIX_LIMIT) -> str:
    """Decode a bounded prefix of a body for display. Lossy; never use for transport."""
    if body is None:
        return "<nil>"
    return bytes(body[:limit]).decode("utf-8", errors="replace")


@dataclass(frozen=True)
class HeaderField:
    """A header field; the name is lowercased on construction."""

    name: str
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", str(self.name).lower())

    def describe(self, policy: RedactionPolicy | None = None) -> str:
        """Render ``name: value``, redacting against ``policy`` (the shared policy by default)."""
        active = policy or redaction_policy
        return f"{self.name}: {active.redact(self.name, self.value)}"

    @property
    def description(self) -> str:
        return self.describe()

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class QueryItem:
    name: str
    value: str | None = None

    def __str__(self) -> str:
        return self.name if self.value is None else f"{self.name}={self.value}"


class HTTPMethod(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    PATCH = "PATCH"
    TRACE = "TRACE"

    @classmethod
    def parse(cls, raw: str) -> HTTPMethod | None:
        """Return the method whose textual form is exactly ``raw``, or None."""
        try:
            return cls(raw)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


def _describe_fields(fields: Iterable[HeaderField], policy: RedactionPolicy | None) -> str:
    return "[" + ", ".join(item.describe(policy) for item in fields) + "]"


def _find_header(fields: Iterable[HeaderField], name: str) -> str | None:
    lower = name.lower()
    for item in fields:
        if item.name == lower:
            return item.value
    return None


@dataclass(frozen=True)
class Request:
    """An HTTP request. ``path`` excludes the server base URL; query values are sent as given."""

    path: str
    method: HTTPMethod
    query: tuple[QueryItem, ...] = ()
    header_fields: tuple[HeaderField, ...] = ()
    body: bytes | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "query", tuple(self.query))
        object.__setattr__(self, "header_fields", tuple(self.header_fields))
        if isinstance(self.body, (bytearray, memoryview)):
            object.__setattr__(self, "body", bytes(self.body))

    def header_value(self, name: str) -> str | None:
        return _find_header(self.header_fields, name)

    def with_header_fields(self, *fields: HeaderField) -> Request:
        return replace(self, header_fields=self.header_fields + fields)

    def with_body(self, body: bytes | None) -> Request:
        return replace(self, body=body)

    def describe(self, policy: RedactionPolicy | None = None) -> str:
        query = "[" + ", ".join(str(item) for item in self.query) + "]"
        return (
            f"path: {self.path}, query: {query}, method: {self.method}, "
            f"header fields: {_describe_fields(self.header_fields, policy)}, "
            f"body (prefix): {pretty_prefix(self.body)}"
        )

    @property
    def description(self) -> str:
        return self.describe()

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class Response:
    """An HTTP response; an empty body is ``b""``, never None."""

    status_code: int
    header_fields: tuple[HeaderField, ...] = ()
    body: bytes = field(default=b"")

    def __post_init__(self) -> None:
        object.__setattr__(self, "header_fields", tuple(self.header_fields))
        object.__setattr__(self, "body", bytes(self.body or b""))

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def header_value(self, name: str) -> str | None:
        return _find_header(self.header_fields, name)

    def with_header_fields(self, *fields: HeaderField) -> Response:
        return replace(self, header_fields=self.header_fields + fields)

    def describe(self, policy: RedactionPolicy | None = None) -> str:
        return (
            f"status: {self.status_code}, "
            f"header fields: {_describe_fields(self.header_fields, policy)}, "
            f"body: {pretty_prefix(self.body)}"
        )

    @property
    def description(self) -> str:
        return self.describe()

    def __str__(self) -> str:
        return self.describe()
