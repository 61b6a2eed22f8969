"""
tests/test_connector_probe.py

Pytest unit tests for ConnectorProbe and RequestsTransport.

Transports are stubbed; no network access.
"""

from __future__ import annotations

from typing import Any, Mapping
from unittest.mock import MagicMock

import pytest
import requests

from app.config import ConnectorProbeSettings
from app.connectors.base import ConnectorRequestError, RequestsTransport, TransportResponse
from app.connectors.probe import ConnectorProbe


class StubTransport:
    def __init__(self, response: TransportResponse | None = None, error: Exception | None = None) -> None:
        self._response = response
        self._error = error
        self.calls: list[tuple[str, str, dict[str, str]]] = []

    def fetch(self, url: str, method: str, headers: Mapping[str, str]) -> TransportResponse:
        self.calls.append((url, method, dict(headers)))
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response


class TestConnectorProbe:
    def test_success_returns_sample(self) -> None:
        transport = StubTransport(TransportResponse(status=200, body={"items": [1, 2]}))

        result = ConnectorProbe(transport=transport).probe("https://api.example.com/items")

        assert result.reachable is True
        assert result.message == "Connection successful"
        assert result.sample == {"items": [1, 2]}
        assert len(transport.calls) == 1
        assert transport.calls[0][1] == "GET"

    def test_server_error_is_unreachable(self) -> None:
        transport = StubTransport(TransportResponse(status=500, body="boom"))

        result = ConnectorProbe(transport=transport).probe("https://api.example.com/items")

        assert result.reachable is False
        assert result.message == "API returned status 500"
        assert result.sample is None

    @pytest.mark.parametrize("status", [201, 204, 299])
    def test_any_2xx_is_reachable(self, status: int) -> None:
        result = ConnectorProbe(transport=StubTransport(TransportResponse(status=status))).probe("https://x")

        assert result.reachable is True

    @pytest.mark.parametrize("status", [301, 401, 404])
    def test_non_2xx_is_unreachable(self, status: int) -> None:
        result = ConnectorProbe(transport=StubTransport(TransportResponse(status=status))).probe("https://x")

        assert result.reachable is False
        assert result.message == f"API returned status {status}"

    def test_transport_failure_is_reported(self) -> None:
        transport = StubTransport(error=ConnectorRequestError("Name or service not known"))

        result = ConnectorProbe(transport=transport).probe("https://nowhere.invalid")

        assert result.reachable is False
        assert result.message == "Name or service not known"

    def test_transport_failure_without_message(self) -> None:
        result = ConnectorProbe(transport=StubTransport(error=RuntimeError())).probe("https://x")

        assert result.message == "Connection failed"

    def test_headers_include_credential_and_extras(self) -> None:
        transport = StubTransport(TransportResponse(status=200))

        ConnectorProbe(transport=transport).probe(
            "https://x",
            credential="secret",
            extra_headers={"X-Shop": "demo", "Authorization": "Basic abc"},
        )

        headers = transport.calls[0][2]
        assert headers["Content-Type"] == "application/json"
        assert headers["X-Shop"] == "demo"
        assert headers["Authorization"] == "Bearer secret"

    def test_extra_headers_override_content_type(self) -> None:
        headers = ConnectorProbe.build_headers(extra_headers={"Content-Type": "text/plain"})

        assert headers == {"Content-Type": "text/plain"}


class TestRequestsTransport:
    def _transport(self, session: Any) -> RequestsTransport:
        return RequestsTransport(settings=ConnectorProbeSettings(timeout_seconds=3.0), session=session)

    def test_json_body_is_decoded(self) -> None:
        response = MagicMock(status_code=200, content=b'{"ok": true}')
        response.json.return_value = {"ok": True}
        session = MagicMock()
        session.request.return_value = response

        result = self._transport(session).fetch("https://x", "GET", {"A": "b"})

        assert result == TransportResponse(status=200, body={"ok": True})
        session.request.assert_called_once_with(method="GET", url="https://x", headers={"A": "b"}, timeout=3.0)

    def test_text_body_fallback(self) -> None:
        response = MagicMock(status_code=503, content=b"down", text="down")
        response.json.side_effect = ValueError("not json")
        session = MagicMock()
        session.request.return_value = response

        result = self._transport(session).fetch("https://x", "GET", {})

        assert result == TransportResponse(status=503, body="down")

    def test_request_exception_is_wrapped(self) -> None:
        session = MagicMock()
        session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(ConnectorRequestError, match="refused"):
            self._transport(session).fetch("https://x", "GET", {})
