"""Ошибки каталога и их коды для HTTP-ответов."""

from typing import Optional
import uuid

NOT_FOUND = "not_found"
STORAGE_ERROR = "storage_error"


class CatalogError(Exception):
    """Базовая ошибка каталога"""

    code = "catalog_error"
    status_code = 500
    public_message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message


class ContentNotFoundError(CatalogError):
    """Контент с указанным идентификатором не найден"""

    code = NOT_FOUND
    status_code = 404
    public_message = "Content not found"

    def __init__(self, content_id: uuid.UUID):
        super().__init__(f"Content {content_id} not found")
        self.content_id = content_id


class StorageError(CatalogError):
    """Сбой хранилища: соединение, ограничения, некорректные данные"""

    code = STORAGE_ERROR
    status_code = 500
    public_message = "Storage operation failed"


class CatalogEmptyError(CatalogError):
    """Каталог пуст (совместимость со старыми клиентами)"""

    code = NOT_FOUND
    status_code = 404
    public_message = "No contents found"
