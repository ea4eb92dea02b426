import uuid
from datetime import datetime
from typing import Optional, List, Iterable, Dict, Any


class Content:
    """Сущность контента каталога"""

    def __init__(
        self,
        id: Optional[uuid.UUID] = None,
        title: Optional[str] = None,
        subtitle: Optional[str] = None,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        duration_minutes: Optional[int] = None,
        start_time: Optional[datetime] = None,
        end_time: Optional[datetime] = None,
        genres: Optional[Iterable[str]] = None
    ):
        self.id = id
        self.title = title
        self.subtitle = subtitle
        self.description = description
        self.image_url = image_url
        self.duration_minutes = duration_minutes
        self.start_time = start_time
        self.end_time = end_time
        self.genres: List[str] = list(genres) if genres else []

    def with_genres(self, genres: Iterable[str]) -> "Content":
        """Копия контента с другим списком жанров"""
        data = self.to_dict()
        data["genres"] = list(genres)
        return Content(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "subtitle": self.subtitle,
            "description": self.description,
            "image_url": self.image_url,
            "duration_minutes": self.duration_minutes,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "genres": list(self.genres),
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Content):
            return False
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Content(id={self.id}, title={self.title}, genres={self.genres})"
