from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional, List, AsyncIterator
import logging
import uuid

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from content_catalog.core.exceptions import StorageError
from content_catalog.db.models.content import Content as ContentModel
from content_catalog.domains.contents.entities import Content

logger = logging.getLogger(__name__)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Приведение времени к UTC; время без зоны считается временем UTC"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ContentRepository:
    """Репозиторий для работы с контентом.

    Каждая операция открывает собственную сессию и освобождает соединение
    при любом выходе, включая ошибки. Обновление заменяет строку целиком.
    Время хранится и возвращается в UTC с явной зоной: смещение переводится
    в UTC без потери момента, время без зоны считается временем UTC.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self.session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Storage failure during {operation}: {e}")
            raise StorageError(str(e)) from e

    async def create(self, content: Content) -> Content:
        """Создание нового контента, идентификатор назначает хранилище"""
        async with self._session("create") as session:
            db_content = ContentModel(**self._to_columns(content))
            session.add(db_content)
            await session.commit()
            await session.refresh(db_content)
            return self._to_domain(db_content)

    async def get_by_id(self, content_id: uuid.UUID) -> Optional[Content]:
        """Получение контента по идентификатору"""
        async with self._session("read") as session:
            result = await session.execute(
                select(ContentModel).where(ContentModel.id == content_id)
            )
            db_content = result.scalar_one_or_none()
            return self._to_domain(db_content) if db_content else None

    async def get_all(self) -> List[Content]:
        """Получение всего каталога"""
        async with self._session("read_all") as session:
            result = await session.execute(select(ContentModel))
            return [self._to_domain(row) for row in result.scalars().all()]

    async def update(self, content_id: uuid.UUID, content: Content) -> Optional[Content]:
        """Полная замена всех полей контента"""
        async with self._session("update") as session:
            result = await session.execute(
                update(ContentModel)
                .where(ContentModel.id == content_id)
                .values(**self._to_columns(content))
            )
            await session.commit()
            if result.rowcount == 0:
                return None

            refreshed = await session.execute(
                select(ContentModel)
                .where(ContentModel.id == content_id)
                .execution_options(populate_existing=True)
            )
            db_content = refreshed.scalar_one_or_none()
            return self._to_domain(db_content) if db_content else None

    async def delete(self, content_id: uuid.UUID) -> Optional[uuid.UUID]:
        """Удаление контента, возвращает идентификатор удаленной записи"""
        async with self._session("delete") as session:
            result = await session.execute(
                delete(ContentModel).where(ContentModel.id == content_id)
            )
            await session.commit()
            return content_id if result.rowcount > 0 else None

    @staticmethod
    def _to_columns(content: Content) -> dict:
        # id не входит в изменяемые колонки
        return {
            "title": content.title,
            "subtitle": content.subtitle,
            "description": content.description,
            "image_url": content.image_url,
            "duration_minutes": content.duration_minutes,
            "start_time": as_utc(content.start_time),
            "end_time": as_utc(content.end_time),
            "genres": list(content.genres),
        }

    def _to_domain(self, db_content: ContentModel) -> Content:
        """Преобразование модели БД в доменную сущность"""
        return Content(
            id=db_content.id,
            title=db_content.title,
            subtitle=db_content.subtitle,
            description=db_content.description,
            image_url=db_content.image_url,
            duration_minutes=db_content.duration_minutes,
            start_time=as_utc(db_content.start_time),
            end_time=as_utc(db_content.end_time),
            genres=db_content.genres or []
        )
