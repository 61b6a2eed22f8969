"""
app/connectors/base.py

HTTP transport abstraction shared by API connectors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Protocol

import requests

from app.config import ConnectorProbeSettings

logger = logging.getLogger(__name__)


class ConnectorRequestError(RuntimeError):
    """
    Raised when a transport cannot complete a request.
    """


@dataclass(frozen=True)
class TransportResponse:
    """
    Status and decoded body of one HTTP response.
    """

    status: int
    body: Any = None


class HTTPTransport(Protocol):
    """
    Minimal transport used by connectors: one request, one response.
    """

    def fetch(self, url: str, method: str, headers: Mapping[str, str]) -> TransportResponse:
        ...


class RequestsTransport:
    """
    HTTP transport backed by a requests session.

    Bodies are decoded as JSON when possible, otherwise returned as text.
    """

    def __init__(
        self,
        *,
        settings: ConnectorProbeSettings,
        session: requests.Session | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout_seconds = settings.timeout_seconds

    def fetch(self, url: str, method: str, headers: Mapping[str, str]) -> TransportResponse:
        try:
            response = self._session.request(
                method=method,
                url=url,
                headers=dict(headers),
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.warning("Connector request failed method=%s url=%s error=%s", method, url, exc)
            raise ConnectorRequestError(str(exc)) from exc

        return TransportResponse(status=response.status_code, body=self._decode_body(response))

    @staticmethod
    def _decode_body(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text
