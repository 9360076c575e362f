# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization utilities.

HTTP header field names are case-insensitive (RFC 9110). Requests and responses carry
ordered ``HeaderField`` tuples with lowercased names; these helpers convert to and
from the containers other HTTP stacks use.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .models import HeaderField


def _coerce_header_pairs(headers: Any) -> list[tuple[object, object]]:
    """
    Best-effort coercion of header containers into a list of pairs.

    Accepts:
    - plain dicts and other Mappings
    - httpx.Headers (``multi_items`` keeps repeated fields)
    - iterables of HeaderField
    - iterable-of-pairs (e.g. list[tuple[str, str]])
    """
    if not headers:
        return []
    multi_items = getattr(headers, "multi_items", None)
    if callable(multi_items):
        return list(multi_items())
    if isinstance(headers, Mapping):
        return list(headers.items())

    pairs: list[tuple[object, object]] = []
    for item in headers:
        if isinstance(item, HeaderField):
            pairs.append((item.name, item.value))
        else:
            key, value = item
            pairs.append((key, value))
    return pairs


def header_fields(headers: Any) -> tuple[HeaderField, ...]:
    """Return an ordered tuple of HeaderField from any supported header container."""
    out: list[HeaderField] = []
    for key, value in _coerce_header_pairs(headers):
        if key is None:
            continue
        name = str(key).strip()
        if not name:
            continue
        out.append(HeaderField(name=name, value="" if value is None else str(value)))
    return tuple(out)


def normalize_headers(headers: Any) -> dict[str, str]:
    """Return a lowercase-keyed dict; repeated fields are joined with ``, ``."""
    out: dict[str, str] = {}
    for item in header_fields(headers):
        if item.name in out:
            out[item.name] = f"{out[item.name]}, {item.value}"
        else:
            out[item.name] = item.value
    return out


def header_values(fields: Iterable[HeaderField], name: str) -> list[str]:
    lower = name.lower()
    return [item.value for item in fields if item.name == lower]


def header_value(fields: Iterable[HeaderField], name: str, default: str = "") -> str:
    """Return the first value for ``name`` (case-insensitive), stripped."""
    values = header_values(fields, name)
    if not values:
        return default
    return values[0].strip()


__all__ = ["header_fields", "header_value", "header_values", "normalize_headers"]
