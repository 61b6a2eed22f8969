"""
app/connectors package marker.
"""

from app.connectors.base import ConnectorRequestError, HTTPTransport, RequestsTransport, TransportResponse
from app.connectors.probe import ConnectorProbe, get_connector_probe

__all__ = [
    "ConnectorProbe",
    "ConnectorRequestError",
    "HTTPTransport",
    "RequestsTransport",
    "TransportResponse",
    "get_connector_probe",
]
