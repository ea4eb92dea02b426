from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from content_catalog.core.config import settings

# Асинхронный движок (соединения берутся из пула на время одной операции)
engine = create_async_engine(settings.database_url, echo=settings.database_echo)

# Фабрика сессий
SessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False)


async def create_tables() -> None:
    """Создание таблиц по метаданным моделей"""
    from content_catalog.db.base import Base
    import content_catalog.db.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
