# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx
import pytest

from relayhttp import config
from relayhttp.config import DEFAULT_USER_AGENT
from relayhttp.errors import (
    ClientError,
    ErrorCategory,
    HandlerFailed,
    TransportFailed,
    categorize_exception,
    describe_error,
)
from relayhttp.http.models import HTTPMethod, Request, Response
from relayhttp.http.redaction import RedactionPolicy, apply_redaction_settings


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("RELAYHTTP_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("RELAYHTTP_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("RELAYHTTP_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("RELAYHTTP_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("RELAYHTTP_HTTP_MAX_BODY_BYTES", "1024")
    monkeypatch.setenv("RELAYHTTP_REDACTED_HEADERS", "Authorization, X-Api-Key,,")

    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False
    assert settings.max_body_bytes == 1024
    assert settings.redacted_header_fields == frozenset({"authorization", "x-api-key"})


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("RELAYHTTP_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("RELAYHTTP_HTTP_MAX_BODY_BYTES", "-5")
    monkeypatch.delenv("RELAYHTTP_USER_AGENT", raising=False)
    monkeypatch.delenv("RELAYHTTP_REDACTED_HEADERS", raising=False)

    settings = config.load_http_settings()

    assert settings.timeout == config.HttpSettings.timeout
    assert settings.max_body_bytes == config.HttpSettings.max_body_bytes
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.redacted_header_fields is None


def test_http_settings_redirects_truthy_variants(monkeypatch):
    monkeypatch.setenv("RELAYHTTP_HTTP_REDIRECTS", "1")
    assert config.load_http_settings().allow_redirects is True

    monkeypatch.setenv("RELAYHTTP_HTTP_REDIRECTS", "on")
    assert config.load_http_settings().allow_redirects is True


def test_load_http_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("RELAYHTTP_HTTP_TIMEOUT", "7.7")
    assert config.load_http_settings().timeout == 7.7
    monkeypatch.setenv("RELAYHTTP_HTTP_TIMEOUT", "8.8")
    assert config.load_http_settings().timeout == 8.8


def test_apply_redaction_settings_only_replaces_explicit_lists():
    policy = RedactionPolicy()
    apply_redaction_settings(config.HttpSettings(), policy)
    assert "authorization" in policy

    apply_redaction_settings(config.HttpSettings(redacted_header_fields=frozenset({"X-Token"})), policy)
    assert policy.names == frozenset({"x-token"})


@pytest.mark.parametrize(
    ("exc", "category"),
    [
        (httpx.ReadTimeout("slow"), ErrorCategory.TIMEOUT),
        (httpx.ConnectError("refused"), ErrorCategory.CONNECTION_ERROR),
        (ssl.SSLError("bad cert"), ErrorCategory.SSL_ERROR),
        (socket.gaierror("no such host"), ErrorCategory.DNS_ERROR),
        (TimeoutError(), ErrorCategory.TIMEOUT),
        (ConnectionRefusedError(), ErrorCategory.CONNECTION_ERROR),
        (ValueError("nope"), ErrorCategory.UNKNOWN_ERROR),
    ],
)
def test_categorize_exception(exc, category):
    assert categorize_exception(exc) is category


def test_describe_error_prefers_pretty_description():
    assert describe_error(HandlerFailed(KeyError("missing"))) == "User handler failed with error: 'missing'"
    assert describe_error(RuntimeError("plain")) == "plain"
    assert describe_error(RuntimeError()) == "RuntimeError"


def test_client_error_fields_default_to_absent():
    error = ClientError(TransportFailed(OSError("down")))
    assert error.request is None
    assert error.base_url is None
    assert error.response is None
    assert str(error) == (
        "Client error - request: <nil>, baseURL: <nil>, response: <nil>, "
        "underlying error: Transport failed with error: down"
    )


def test_client_error_renders_full_context():
    error = ClientError(
        ValueError("bad"),
        request=Request(path="/p", method=HTTPMethod.DELETE),
        base_url=httpx.URL("https://api.example.com"),
        response=Response(409, body=b"conflict"),
    )
    text = str(error)
    assert "request: path: /p, query: [], method: DELETE" in text
    assert "baseURL: https://api.example.com" in text
    assert "response: status: 409, header fields: [], body: conflict" in text
    assert text.endswith("underlying error: bad")
