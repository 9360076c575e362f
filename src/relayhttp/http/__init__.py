# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP pipeline exports."""

from .adapters import CallableTransport, StubTransport
from .client import ClientInterceptor, ClientTransport, HTTPClient, Next, create_default_http_client
from .headers import header_fields, header_value, normalize_headers
from .httpx_transport import HttpxTransport
from .interceptors import HeaderInjectionInterceptor, LoggingInterceptor
from .models import HeaderField, HTTPMethod, QueryItem, Request, Response, pretty_prefix
from .redaction import (
    DEFAULT_REDACTED_HEADER_FIELDS,
    RedactionPolicy,
    apply_redaction_settings,
    get_redacted_header_fields,
    redaction_policy,
    set_redacted_header_fields,
)
from .utils import build_url, server_url

__all__ = [
    "DEFAULT_REDACTED_HEADER_FIELDS",
    "CallableTransport",
    "ClientInterceptor",
    "ClientTransport",
    "HTTPClient",
    "HTTPMethod",
    "HeaderField",
    "HeaderInjectionInterceptor",
    "HttpxTransport",
    "LoggingInterceptor",
    "Next",
    "QueryItem",
    "RedactionPolicy",
    "Request",
    "Response",
    "StubTransport",
    "apply_redaction_settings",
    "build_url",
    "create_default_http_client",
    "get_redacted_header_fields",
    "header_fields",
    "header_value",
    "normalize_headers",
    "pretty_prefix",
    "redaction_policy",
    "server_url",
    "set_redacted_header_fields",
]
