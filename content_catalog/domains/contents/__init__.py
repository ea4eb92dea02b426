from content_catalog.domains.contents.entities import Content
from content_catalog.domains.contents.schemas import ContentBase, ContentInput, ContentResponse
from content_catalog.domains.contents.services import (
    ContentService, GenreService, merge_genres, subtract_genres, unique_genres
)

__all__ = [
    "Content",
    "ContentBase", "ContentInput", "ContentResponse",
    "ContentService", "GenreService",
    "merge_genres", "subtract_genres", "unique_genres"
]
