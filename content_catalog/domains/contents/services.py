from typing import List, Iterable, TYPE_CHECKING
import logging
import uuid

from content_catalog.core.exceptions import ContentNotFoundError
from content_catalog.domains.contents.entities import Content

if TYPE_CHECKING:
    from content_catalog.db.repositories.content_repository import ContentRepository

logger = logging.getLogger(__name__)


def unique_genres(genres: Iterable[str]) -> List[str]:
    """Жанры без повторов, в порядке первого появления"""
    seen = set()
    result = []
    for genre in genres:
        if genre not in seen:
            seen.add(genre)
            result.append(genre)
    return result


def merge_genres(existing: Iterable[str], requested: Iterable[str]) -> List[str]:
    """Добавление жанров: новые дописываются в конец в порядке запроса.

    Сравнение точное, с учетом регистра. Уже присутствующие жанры и повторы
    внутри запроса пропускаются, порядок существующих не меняется.
    """
    return unique_genres([*existing, *requested])


def subtract_genres(existing: Iterable[str], requested: Iterable[str]) -> List[str]:
    """Удаление жанров: отсутствующий жанр пропускается без ошибки"""
    result = unique_genres(existing)
    for genre in requested:
        if genre in result:
            result.remove(genre)
    return result


class ContentService:
    """Сервис для работы с контентом"""

    def __init__(self, repository: "ContentRepository"):
        self.repository = repository

    async def get_many_contents(self) -> List[Content]:
        """Получение всего каталога"""
        return await self.repository.get_all()

    async def get_content(self, content_id: uuid.UUID) -> Content:
        """Получение контента по идентификатору"""
        content = await self.repository.get_by_id(content_id)
        if content is None:
            raise ContentNotFoundError(content_id)
        return content

    async def create_content(self, content: Content) -> Content:
        """Создание нового контента"""
        return await self.repository.create(content)

    async def update_content(self, content_id: uuid.UUID, content: Content) -> Content:
        """Полная замена контента: все поля берутся из переданной записи"""
        updated = await self.repository.update(content_id, content)
        if updated is None:
            raise ContentNotFoundError(content_id)
        return updated

    async def delete_content(self, content_id: uuid.UUID) -> uuid.UUID:
        """Удаление контента"""
        deleted_id = await self.repository.delete(content_id)
        if deleted_id is None:
            raise ContentNotFoundError(content_id)
        return deleted_id


class GenreService:
    """Добавление и удаление жанров поверх полной замены записи.

    Чтение, слияние и запись не защищены блокировкой: при конкурентных
    изменениях одной записи побеждает последняя запись.
    """

    def __init__(self, content_service: ContentService):
        self.content_service = content_service

    async def add_genres(self, content_id: uuid.UUID, genres: Iterable[str]) -> None:
        """Добавление жанров к контенту"""
        content = await self.content_service.get_content(content_id)
        merged = content.with_genres(merge_genres(content.genres, genres))
        await self.content_service.update_content(content_id, merged)
        logger.debug(f"Genres of content {content_id}: {content.genres} -> {merged.genres}")

    async def remove_genres(self, content_id: uuid.UUID, genres: Iterable[str]) -> None:
        """Удаление жанров из контента"""
        content = await self.content_service.get_content(content_id)
        filtered = content.with_genres(subtract_genres(content.genres, genres))
        await self.content_service.update_content(content_id, filtered)
        logger.debug(f"Genres of content {content_id}: {content.genres} -> {filtered.genres}")
