from content_catalog.db.models.content import Content

__all__ = [
    "Content",
]
