# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for relayhttp."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"relayhttp/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _names_env(name: str) -> frozenset[str] | None:
    value = os.getenv(name)
    if value is None:
        return None
    return frozenset(part.strip().lower() for part in value.split(",") if part.strip())


@dataclass
class HttpSettings:
    """HTTP client defaults.

    ``redacted_header_fields`` of ``None`` leaves the shared redaction policy untouched.
    """

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024
    redacted_header_fields: frozenset[str] | None = None

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("RELAYHTTP_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            timeout=_float_env("RELAYHTTP_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("RELAYHTTP_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("RELAYHTTP_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("RELAYHTTP_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
            redacted_header_fields=_names_env("RELAYHTTP_REDACTED_HEADERS"),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
