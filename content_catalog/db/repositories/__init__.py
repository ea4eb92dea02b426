from content_catalog.db.repositories.content_repository import ContentRepository

__all__ = [
    "ContentRepository",
]
