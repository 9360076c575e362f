# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Interceptors shipped with relayhttp."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

import httpx

from ..errors import describe_error
from .client import ClientInterceptor, Next
from .models import HeaderField, Request, Response
from .redaction import RedactionPolicy


class HeaderInjectionInterceptor(ClientInterceptor):
    """Append fixed header fields to every outbound request."""

    def __init__(self, fields: Iterable[HeaderField]):
        self.fields = tuple(fields)

    async def intercept(self, request: Request, base_url: httpx.URL, next: Next) -> Response:
        return await next(request.with_header_fields(*self.fields), base_url)


class LoggingInterceptor(ClientInterceptor):
    """
    Log the outbound request, the inbound response and failures.

    Descriptions are rendered against ``policy`` (the shared redaction policy when
    omitted) so credentials never reach the log.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        policy: RedactionPolicy | None = None,
        level: int = logging.DEBUG,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.policy = policy
        self.level = level

    async def intercept(self, request: Request, base_url: httpx.URL, next: Next) -> Response:
        self.logger.log(self.level, "Request to %s: %s", base_url, request.describe(self.policy))
        started = time.monotonic()
        try:
            response = await next(request, base_url)
        except Exception as exc:
            self.logger.log(
                self.level,
                "Request %s %s failed after %.3fs: %s",
                request.method,
                request.path,
                time.monotonic() - started,
                describe_error(exc),
            )
            raise
        self.logger.log(
            self.level,
            "Response in %.3fs: %s",
            time.monotonic() - started,
            response.describe(self.policy),
        )
        return response


__all__ = ["HeaderInjectionInterceptor", "LoggingInterceptor"]
