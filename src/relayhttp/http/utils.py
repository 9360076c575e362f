# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Helpers for converting between domain values and Request/Response.

These run in caller code (before ``send`` or after it returns), so the errors they
raise reach the caller directly rather than through ClientError.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

import httpx

from ..errors import (
    FailedToDecodeStringConvertibleValue,
    InvalidServerURL,
    MissingRequiredHeaderField,
    MissingRequiredPathParameter,
    MissingRequiredQueryParameter,
    MissingRequiredRequestBody,
    UnexpectedAcceptHeader,
    UnexpectedContentTypeHeader,
)
from .headers import header_value, header_values
from .models import HeaderField, QueryItem, Request

T = TypeVar("T")


def server_url(raw: str | httpx.URL) -> httpx.URL:
    """Parse a server base URL; it must be absolute."""
    try:
        url = raw if isinstance(raw, httpx.URL) else httpx.URL(str(raw))
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidServerURL(str(raw)) from exc
    if not url.scheme or not url.host:
        raise InvalidServerURL(str(raw))
    return url


def build_url(base_url: httpx.URL, request: Request) -> httpx.URL:
    """
    Join the base URL path with the request path.

    Userinfo and port of the base URL are kept. A base URL query comes first,
    followed by the request's query items in order.
    """
    base_path = base_url.raw_path.decode("ascii").split("?", 1)[0].rstrip("/")
    path = request.path if request.path.startswith("/") else f"/{request.path}"
    authority = base_url.netloc.decode("ascii")
    if base_url.userinfo:
        authority = f"{base_url.userinfo.decode('ascii')}@{authority}"
    query = [base_url.query.decode("ascii")] if base_url.query else []
    query.extend(str(item) for item in request.query)
    target = f"{base_url.scheme}://{authority}{base_path}{path}"
    if query:
        target += "?" + "&".join(query)
    return httpx.URL(target)


def require_header(fields: Iterable[HeaderField], name: str) -> str:
    values = header_values(fields, name)
    if not values:
        raise MissingRequiredHeaderField(name)
    return values[0]


def require_path_parameter(params: Mapping[str, Any], name: str) -> str:
    value = params.get(name)
    if value is None:
        raise MissingRequiredPathParameter(name)
    return str(value)


def require_query_parameter(items: Iterable[QueryItem], name: str) -> str:
    for item in items:
        if item.name == name and item.value is not None:
            return item.value
    raise MissingRequiredQueryParameter(name)


def require_body(request: Request) -> bytes:
    if request.body is None:
        raise MissingRequiredRequestBody()
    return request.body


def _media_type(value: str) -> str:
    return value.split(";", 1)[0].strip().lower()


def _media_type_matches(content_type: str, pattern: str) -> bool:
    if pattern == "*/*":
        return True
    ct_type, _, ct_subtype = content_type.partition("/")
    p_type, _, p_subtype = pattern.partition("/")
    return ct_type == p_type and p_subtype in ("*", ct_subtype)


def validate_content_type(fields: Iterable[HeaderField], expected: str) -> str:
    """Return the received Content-Type if it matches ``expected`` (parameters ignored)."""
    fields = tuple(fields)
    received = require_header(fields, "content-type")
    if not _media_type_matches(_media_type(received), _media_type(expected)):
        raise UnexpectedContentTypeHeader(received)
    return received


def validate_accept(fields: Iterable[HeaderField], content_type: str) -> None:
    """Raise if an Accept header is present and none of its ranges allow ``content_type``."""
    accept = header_value(fields, "accept")
    if not accept:
        return
    target = _media_type(content_type)
    for media_range in accept.split(","):
        if _media_type_matches(target, _media_type(media_range)):
            return
    raise UnexpectedAcceptHeader(accept)


def decode_string_convertible(raw: str, type_: type[T]) -> T:
    """Convert a header/path/query string into ``type_``."""
    if type_ is bool:
        lowered = raw.strip().lower()
        if lowered not in {"true", "false"}:
            raise FailedToDecodeStringConvertibleValue(type_.__name__)
        return lowered == "true"  # type: ignore[return-value]
    try:
        return type_(raw)  # type: ignore[call-arg]
    except (TypeError, ValueError) as exc:
        raise FailedToDecodeStringConvertibleValue(type_.__name__) from exc


__all__ = [
    "build_url",
    "decode_string_convertible",
    "require_body",
    "require_header",
    "require_path_parameter",
    "require_query_parameter",
    "server_url",
    "validate_accept",
    "validate_content_type",
]
