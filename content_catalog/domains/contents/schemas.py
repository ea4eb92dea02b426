from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
import uuid
from datetime import datetime

from content_catalog.domains.contents.entities import Content


class ContentBase(BaseModel):
    """Базовая схема контента"""
    title: Optional[str] = None
    subtitle: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    duration_minutes: Optional[int] = Field(None, ge=0)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContentInput(ContentBase):
    """Схема для создания и полного обновления контента.

    Поля, не переданные клиентом, при обновлении очищаются.
    Идентификатор в теле запроса игнорируется.
    """
    genres: Optional[List[str]] = None

    def to_entity(self, content_id: Optional[uuid.UUID] = None) -> Content:
        return Content(id=content_id, **self.model_dump())


class ContentResponse(ContentBase):
    """Схема для ответа с данными контента"""
    id: uuid.UUID
    genres: List[str] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
