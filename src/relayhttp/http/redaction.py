# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header redaction policy.

Values of header fields whose names are in the policy render as ``<redacted>``
in descriptions and log lines. The policy never changes equality, hashing or
what is sent on the wire.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from ..config import HttpSettings

REDACTED_PLACEHOLDER = "<redacted>"

DEFAULT_REDACTED_HEADER_FIELDS: frozenset[str] = frozenset({"authorization", "cookie", "set-cookie"})


class RedactionPolicy:
    """Lock-guarded set of lowercased header names to redact."""

    def __init__(self, names: Iterable[str] = DEFAULT_REDACTED_HEADER_FIELDS):
        self._lock = threading.Lock()
        self._names = frozenset(str(name).lower() for name in names)

    @property
    def names(self) -> frozenset[str]:
        with self._lock:
            return self._names

    def replace(self, names: Iterable[str]) -> None:
        """Swap the whole set; names are lowercased so lookups stay O(1)."""
        normalized = frozenset(str(name).lower() for name in names)
        with self._lock:
            self._names = normalized

    def contains(self, name: str) -> bool:
        return name.lower() in self.names

    __contains__ = contains

    def redact(self, name: str, value: str) -> str:
        return REDACTED_PLACEHOLDER if self.contains(name) else value

    def __repr__(self) -> str:
        return f"RedactionPolicy({sorted(self.names)!r})"


# The only process-wide mutable state in relayhttp.
redaction_policy = RedactionPolicy()


def get_redacted_header_fields() -> frozenset[str]:
    return redaction_policy.names


def set_redacted_header_fields(names: Iterable[str]) -> None:
    redaction_policy.replace(names)


def apply_redaction_settings(settings: HttpSettings, policy: RedactionPolicy | None = None) -> None:
    """Replace the policy from settings when they carry an explicit header list."""
    if settings.redacted_header_fields is None:
        return
    (policy or redaction_policy).replace(settings.redacted_header_fields)


__all__ = [
    "DEFAULT_REDACTED_HEADER_FIELDS",
    "REDACTED_PLACEHOLDER",
    "RedactionPolicy",
    "apply_redaction_settings",
    "get_redacted_header_fields",
    "redaction_policy",
    "set_redacted_header_fields",
]
