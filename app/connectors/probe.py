"""
app/connectors/probe.py

Connectivity check for API-type data sources before they are registered.

One GET is issued through the injected transport. There are no retries; this
is a smoke test, not a resilient client.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Mapping

from app.config import get_connector_probe_settings
from app.connectors.base import HTTPTransport, RequestsTransport
from app.domain.data_source import ProbeResult

logger = logging.getLogger(__name__)


class ConnectorProbe:
    """
    Verifies reachability and credentials of an external API endpoint.
    """

    def __init__(self, *, transport: HTTPTransport) -> None:
        self._transport = transport

    def probe(
        self,
        endpoint: str,
        credential: str | None = None,
        extra_headers: Mapping[str, str] | None = None,
    ) -> ProbeResult:
        headers = self.build_headers(credential=credential, extra_headers=extra_headers)

        try:
            response = self._transport.fetch(endpoint, "GET", headers)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Connector probe failed url=%s error=%s", endpoint, exc)
            return ProbeResult(reachable=False, message=str(exc) or "Connection failed")

        if 200 <= response.status < 300:
            logger.info("Connector probe succeeded url=%s status=%s", endpoint, response.status)
            return ProbeResult(reachable=True, message="Connection successful", sample=response.body)

        logger.warning("Connector probe rejected url=%s status=%s", endpoint, response.status)
        return ProbeResult(reachable=False, message=f"API returned status {response.status}")

    @staticmethod
    def build_headers(
        *,
        credential: str | None = None,
        extra_headers: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        """
        Default JSON content type, caller headers, then bearer credential.
        """

        headers: dict[str, str] = {"Content-Type": "application/json"}
        if extra_headers:
            headers.update(extra_headers)
        if credential:
            headers["Authorization"] = f"Bearer {credential}"
        return headers


@lru_cache(maxsize=1)
def get_connector_probe() -> ConnectorProbe:
    """
    Build and cache a probe using a requests-backed transport.
    """
    return ConnectorProbe(transport=RequestsTransport(settings=get_connector_probe_settings()))
