# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client abstraction: transport/interceptor protocols and the pipeline runner."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Protocol

import httpx

from ..config import HttpSettings
from ..errors import ClientError, HandlerFailed, TransportFailed, describe_error
from .models import Request, Response
from .utils import server_url as parse_server_url

logger = logging.getLogger(__name__)

Next = Callable[[Request, httpx.URL], Awaitable[Response]]


class ClientTransport(Protocol):
    """Performs the actual exchange for a request against a base URL."""

    async def send(self, request: Request, base_url: httpx.URL) -> Response: ...


class ClientInterceptor(Protocol):
    """
    Wraps the rest of the pipeline.

    ``next`` continues to the following interceptor (or the transport). It may be
    awaited zero, one or several times; the interceptor returns the response the
    caller should see.
    """

    async def intercept(self, request: Request, base_url: httpx.URL, next: Next) -> Response: ...


class _Exchange:
    """Per-send record of the response obtained by the most recently entered stage.

    Entering a stage clears it, so a failure after a retry never reports the
    response of an earlier attempt.
    """

    __slots__ = ("response",)

    def __init__(self) -> None:
        self.response: Response | None = None


def _bind(interceptor: ClientInterceptor, next_: Next, exchange: _Exchange) -> Next:
    async def call(request: Request, base_url: httpx.URL) -> Response:
        exchange.response = None
        try:
            response = await interceptor.intercept(request, base_url, next_)
        except (TransportFailed, HandlerFailed):
            raise
        except Exception as exc:
            raise HandlerFailed(exc) from exc
        exchange.response = response
        return response

    return call


class HTTPClient:
    """
    Sends requests through an ordered interceptor chain to a transport.

    ``interceptors[0]`` is outermost: it sees the request first and the response last.
    Every failure inside ``send`` is raised as a single ClientError.
    """

    def __init__(
        self,
        server_url: str | httpx.URL,
        transport: ClientTransport,
        interceptors: Iterable[ClientInterceptor] = (),
    ):
        self.server_url = parse_server_url(server_url)
        self.transport = transport
        self.interceptors: tuple[ClientInterceptor, ...] = tuple(interceptors)

    def _compose(self, exchange: _Exchange) -> Next:
        transport = self.transport

        async def terminal(request: Request, base_url: httpx.URL) -> Response:
            exchange.response = None
            try:
                response = await transport.send(request, base_url)
            except Exception as exc:
                raise TransportFailed(exc) from exc
            exchange.response = response
            return response

        chain: Next = terminal
        for interceptor in reversed(self.interceptors):
            chain = _bind(interceptor, chain, exchange)
        return chain

    async def send(self, request: Request) -> Response:
        base_url = self.server_url
        exchange = _Exchange()
        try:
            chain = self._compose(exchange)
            return await chain(request, base_url)
        except Exception as exc:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("%s %s failed: %s", request.method, request.path, describe_error(exc))
            raise ClientError(
                exc,
                request=request,
                base_url=base_url,
                response=exchange.response,
            ) from exc

    async def aclose(self) -> None:
        close = getattr(self.transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def create_default_http_client(
    server_url: str | httpx.URL,
    interceptors: Iterable[ClientInterceptor] = (),
    settings: HttpSettings | None = None,
) -> HTTPClient:
    """Factory for a client backed by the default httpx transport."""
    from .httpx_transport import HttpxTransport

    return HTTPClient(server_url, HttpxTransport(settings), interceptors)
