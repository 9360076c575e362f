# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Adapters that satisfy the ClientTransport protocol without a network stack."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import httpx

from .client import ClientTransport
from .models import Request, Response


class CallableTransport(ClientTransport):
    """
    Adapter for a plain coroutine function ``(request, base_url) -> Response``.
    """

    def __init__(self, func: Callable[[Request, httpx.URL], Awaitable[Response]]):
        self._func = func

    async def send(self, request: Request, base_url: httpx.URL) -> Response:
        return await self._func(request, base_url)


class StubTransport(ClientTransport):
    """Deterministic, programmable transport for tests.

    Responses are keyed by request path; ``default`` answers unknown paths. Without
    a default, unknown paths raise ``LookupError``.
    """

    def __init__(self, responses: dict[str, Response] | None = None, default: Response | None = None):
        self._responses = responses or {}
        self._default = default
        self.requests: list[tuple[Request, httpx.URL]] = []

    def add(self, path: str, response: Response) -> None:
        self._responses[path] = response

    async def send(self, request: Request, base_url: httpx.URL) -> Response:
        self.requests.append((request, base_url))
        if request.path in self._responses:
            return self._responses[request.path]
        if self._default is not None:
            return self._default
        raise LookupError(f"No stubbed response configured for {request.path}")

    async def aclose(self) -> None:
        return None
