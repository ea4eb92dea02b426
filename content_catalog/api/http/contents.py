from fastapi import APIRouter, Body, Depends, Response, status
from typing import List
import logging
import uuid

from content_catalog.core.config import settings
from content_catalog.core.db import SessionLocal
from content_catalog.core.exceptions import CatalogEmptyError
from content_catalog.db.repositories.content_repository import ContentRepository
from content_catalog.domains.contents.schemas import ContentInput, ContentResponse
from content_catalog.domains.contents.services import ContentService, GenreService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contents", tags=["contents"])


def get_content_service() -> ContentService:
    return ContentService(ContentRepository(SessionLocal))


def get_genre_service(
    content_service: ContentService = Depends(get_content_service)
) -> GenreService:
    return GenreService(content_service)


@router.get("", response_model=List[ContentResponse])
async def get_many_contents(
    content_service: ContentService = Depends(get_content_service)
):
    """Получение списка контента"""
    contents = await content_service.get_many_contents()

    if not contents and settings.empty_catalog_not_found:
        logger.info("No contents found")
        raise CatalogEmptyError()

    return [ContentResponse.model_validate(content) for content in contents]


@router.get("/{content_id}", response_model=ContentResponse)
async def get_content(
    content_id: uuid.UUID,
    content_service: ContentService = Depends(get_content_service)
):
    """Получение контента по идентификатору"""
    content = await content_service.get_content(content_id)
    return ContentResponse.model_validate(content)


@router.post("", response_model=ContentResponse)
async def create_content(
    content_data: ContentInput,
    content_service: ContentService = Depends(get_content_service)
):
    """Создание нового контента"""
    content = await content_service.create_content(content_data.to_entity())
    logger.info(f"Content created: {content.id}")
    return ContentResponse.model_validate(content)


@router.patch("/{content_id}", response_model=ContentResponse)
async def update_content(
    content_id: uuid.UUID,
    content_data: ContentInput,
    content_service: ContentService = Depends(get_content_service)
):
    """Обновление контента (полная замена, непереданные поля очищаются)"""
    content = await content_service.update_content(
        content_id,
        content_data.to_entity(content_id)
    )
    logger.info(f"Content updated: {content_id}")
    return ContentResponse.model_validate(content)


@router.delete("/{content_id}", response_model=uuid.UUID)
async def delete_content(
    content_id: uuid.UUID,
    content_service: ContentService = Depends(get_content_service)
):
    """Удаление контента"""
    deleted_id = await content_service.delete_content(content_id)
    logger.info(f"Content deleted: {deleted_id}")
    return deleted_id


@router.post("/{content_id}/genre")
async def add_genres(
    content_id: uuid.UUID,
    genres: List[str] = Body(...),
    genre_service: GenreService = Depends(get_genre_service)
):
    """Добавление жанров к контенту"""
    await genre_service.add_genres(content_id, genres)
    logger.info(f"Genres added to content {content_id}: {genres}")
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{content_id}/genre")
async def remove_genres(
    content_id: uuid.UUID,
    genres: List[str] = Body(...),
    genre_service: GenreService = Depends(get_genre_service)
):
    """Удаление жанров из контента"""
    await genre_service.remove_genres(content_id, genres)
    logger.info(f"Genres removed from content {content_id}: {genres}")
    return Response(status_code=status.HTTP_200_OK)
