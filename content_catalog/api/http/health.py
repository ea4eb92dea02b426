from fastapi import APIRouter

from content_catalog.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    """Проверка работоспособности сервиса"""
    return {"status": "healthy", "version": settings.app_version}
