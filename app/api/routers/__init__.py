"""
app/api/routers package marker.
"""

from app.api.routers.data_sources import router as data_sources_router

__all__ = [
    "data_sources_router",
]
