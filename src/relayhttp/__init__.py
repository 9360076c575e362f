# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
relayhttp package entrypoint.

relayhttp sends abstract requests through an ordered chain of interceptors to an
injected transport and returns abstract responses. Failures inside the pipeline
surface as a single ClientError carrying the request, base URL and any response
obtained before the failure.
"""

from .config import HttpSettings, load_http_settings
from .errors import ClientError, ErrorCategory, HandlerFailed, PipelineError, TransportFailed
from .http import (
    ClientInterceptor,
    ClientTransport,
    HeaderField,
    HTTPClient,
    HTTPMethod,
    HttpxTransport,
    QueryItem,
    RedactionPolicy,
    Request,
    Response,
    create_default_http_client,
)
from .version import __version__

__all__ = [
    "ClientError",
    "ClientInterceptor",
    "ClientTransport",
    "ErrorCategory",
    "HTTPClient",
    "HTTPMethod",
    "HandlerFailed",
    "HeaderField",
    "HttpSettings",
    "HttpxTransport",
    "PipelineError",
    "QueryItem",
    "RedactionPolicy",
    "Request",
    "Response",
    "TransportFailed",
    "create_default_http_client",
    "load_http_settings",
    "__version__",
]
