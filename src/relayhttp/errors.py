# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and the ClientError wrapper raised at the client boundary."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from .http.models import Request, Response


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, TimeoutError):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def describe_error(error: BaseException) -> str:
    """Prefer an error's ``pretty_description``; fall back to its default text."""
    pretty = getattr(error, "pretty_description", None)
    if isinstance(pretty, str):
        return pretty
    return str(error) or type(error).__name__


class PipelineError(Exception):
    """Base for failures raised inside the request pipeline before ClientError wrapping."""

    @property
    def pretty_description(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.pretty_description


class InvalidServerURL(PipelineError):
    def __init__(self, url: str):
        super().__init__(url)
        self.url = url

    @property
    def pretty_description(self) -> str:
        return f"Invalid server URL: {self.url}"


class FailedToDecodeStringConvertibleValue(PipelineError):
    def __init__(self, type_name: str):
        super().__init__(type_name)
        self.type_name = type_name

    @property
    def pretty_description(self) -> str:
        return f"Failed to decode a value of type '{self.type_name}'."


class MissingRequiredHeaderField(PipelineError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    @property
    def pretty_description(self) -> str:
        return f"The required header field named '{self.name}' is missing."


class UnexpectedContentTypeHeader(PipelineError):
    def __init__(self, content_type: str):
        super().__init__(content_type)
        self.content_type = content_type

    @property
    def pretty_description(self) -> str:
        return f"Unexpected Content-Type header: {self.content_type}"


class UnexpectedAcceptHeader(PipelineError):
    def __init__(self, accept: str):
        super().__init__(accept)
        self.accept = accept

    @property
    def pretty_description(self) -> str:
        return f"Unexpected Accept header: {self.accept}"


class MissingRequiredPathParameter(PipelineError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    @property
    def pretty_description(self) -> str:
        return f"Missing required path parameter named: {self.name}"


class MissingRequiredQueryParameter(PipelineError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    @property
    def pretty_description(self) -> str:
        return f"Missing required query parameter named: {self.name}"


class MissingRequiredRequestBody(PipelineError):
    @property
    def pretty_description(self) -> str:
        return "Missing required request body"


class TransportFailed(PipelineError):
    """The transport raised; ``error`` is what it raised."""

    def __init__(self, error: BaseException):
        super().__init__(error)
        self.error = error

    @property
    def category(self) -> ErrorCategory:
        return categorize_exception(self.error)

    @property
    def pretty_description(self) -> str:
        return f"Transport failed with error: {describe_error(self.error)}"


class HandlerFailed(PipelineError):
    """An interceptor raised; ``error`` is what it raised."""

    def __init__(self, error: BaseException):
        super().__init__(error)
        self.error = error

    @property
    def pretty_description(self) -> str:
        return f"User handler failed with error: {describe_error(self.error)}"


class ClientError(Exception):
    """
    The single error type raised by ``HTTPClient.send``.

    ``request``, ``base_url`` and ``response`` hold whatever context existed when the
    failure happened; a ``None`` field means that stage was never reached.
    """

    def __init__(
        self,
        underlying_error: BaseException,
        *,
        request: Request | None = None,
        base_url: httpx.URL | None = None,
        response: Response | None = None,
    ):
        super().__init__(underlying_error)
        self.request = request
        self.base_url = base_url
        self.response = response
        self.underlying_error = underlying_error

    @property
    def description(self) -> str:
        request = self.request.description if self.request is not None else "<nil>"
        base_url = str(self.base_url) if self.base_url is not None else "<nil>"
        response = self.response.description if self.response is not None else "<nil>"
        return (
            f"Client error - request: {request}, baseURL: {base_url}, "
            f"response: {response}, underlying error: {describe_error(self.underlying_error)}"
        )

    def __str__(self) -> str:
        return self.description


__all__ = [
    "ClientError",
    "ErrorCategory",
    "FailedToDecodeStringConvertibleValue",
    "HandlerFailed",
    "InvalidServerURL",
    "MissingRequiredHeaderField",
    "MissingRequiredPathParameter",
    "MissingRequiredQueryParameter",
    "MissingRequiredRequestBody",
    "PipelineError",
    "TransportFailed",
    "UnexpectedAcceptHeader",
    "UnexpectedContentTypeHeader",
    "categorize_exception",
    "describe_error",
]
