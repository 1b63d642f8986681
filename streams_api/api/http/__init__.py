from streams_api.api.http.health import router as health_router
from streams_api.api.http.streams import router as streams_router

__all__ = [
    "health_router",
    "streams_router",
]
