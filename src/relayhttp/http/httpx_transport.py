# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed ClientTransport implementation."""

from __future__ import annotations

import httpx

from ..config import HttpSettings, load_http_settings
from .client import ClientTransport
from .headers import header_fields
from .models import Request, Response
from .utils import build_url


class HttpxTransport(ClientTransport):
    """Asynchronous httpx transport. httpx errors propagate to the client unchanged."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or load_http_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    async def send(self, request: Request, base_url: httpx.URL) -> Response:
        headers = [(item.name, item.value) for item in request.header_fields]
        if request.header_value("user-agent") is None:
            headers.append(("user-agent", self.settings.user_agent))

        max_body_bytes = self.settings.max_body_bytes
        if max_body_bytes <= 0:
            max_body_bytes = 16 * 1024 * 1024

        async with self._client.stream(
            request.method.value,
            build_url(base_url, request),
            headers=headers,
            content=request.body,
        ) as resp:
            content = bytearray()
            async for chunk in resp.aiter_bytes():
                if not chunk:
                    continue
                remaining = max_body_bytes - len(content)
                if remaining <= 0:
                    break
                content.extend(chunk[:remaining])

        return Response(
            status_code=resp.status_code,
            header_fields=header_fields(resp.headers),
            body=bytes(content),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
