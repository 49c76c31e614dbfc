"""Tests for the shared HTTP client with retry logic."""

from __future__ import annotations

from unittest.mock import patch

import requests
from urllib3.util.retry import Retry

from weather_lookup.services.http import DEFAULT_RETRY, DEFAULT_TIMEOUT, create_session, session


class TestDefaultRetry:
    """Verify retry strategy configuration."""

    def test_total_retries(self) -> None:
        assert DEFAULT_RETRY.total == 3

    def test_backoff_factor(self) -> None:
        assert DEFAULT_RETRY.backoff_factor == 1

    def test_retries_on_server_errors(self) -> None:
        assert 502 in DEFAULT_RETRY.status_forcelist
        assert 503 in DEFAULT_RETRY.status_forcelist
        assert 504 in DEFAULT_RETRY.status_forcelist

    def test_retries_on_rate_limit(self) -> None:
        assert 429 in DEFAULT_RETRY.status_forcelist

    def test_not_found_is_final(self) -> None:
        """Unknown cities answer 404; retrying would only delay the error."""
        assert 404 not in DEFAULT_RETRY.status_forcelist
        assert 401 not in DEFAULT_RETRY.status_forcelist

    def test_only_safe_methods(self) -> None:
        allowed = DEFAULT_RETRY.allowed_methods
        assert "GET" in allowed
        assert "POST" not in allowed


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        s = create_session()
        assert isinstance(s, requests.Session)

    def test_mounts_https_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_adapter_has_retry(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 3

    def test_custom_retry(self) -> None:
        custom = Retry(total=10, backoff_factor=1)
        s = create_session(retry=custom)
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 10

    def test_user_agent_header(self) -> None:
        s = create_session()
        assert s.headers["User-Agent"].startswith("weather-lookup/")

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_default_timeout_reaches_adapter_via_get(self) -> None:
        """``session.get`` passes ``timeout=None``; the default still applies."""
        s = create_session(timeout=42)
        resp = requests.Response()
        resp.status_code = 200
        resp._content = b"{}"
        with patch.object(requests.adapters.HTTPAdapter, "send", return_value=resp) as mock_send:
            s.get("https://example.com")
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_via_get(self) -> None:
        s = create_session(timeout=42)
        resp = requests.Response()
        resp.status_code = 200
        resp._content = b"{}"
        with patch.object(requests.adapters.HTTPAdapter, "send", return_value=resp) as mock_send:
            s.get("https://example.com", timeout=5)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 5

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=99)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 99


class TestModuleSession:
    """Verify the module-level singleton."""

    def test_session_is_configured(self) -> None:
        adapter = session.get_adapter("https://api.openweathermap.org")
        assert adapter.max_retries.total == 3

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 30
