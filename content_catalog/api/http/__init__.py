from content_catalog.api.http.health import router as health_router
from content_catalog.api.http.contents import router as contents_router

__all__ = [
    "health_router",
    "contents_router"
]
