"""
Структура ответов API.

Ошибка: { "success": false, "error": "<code>", "message": "<text>" }
Один продукт: { "success": true, "product": {...} }
Сообщение: { "success": true, "message": "<text>" }
Служебные ответы (health): { "success": true, "data": <payload> }
"""
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from app.schemas.product import Product

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Успешный ответ: success=true, data — полезная нагрузка."""

    success: bool = True
    data: T | None = Field(default=None, description="Тело ответа")


class ProductEnvelope(BaseModel):
    """Ответ get/update по id."""

    success: bool = True
    product: Product


class MessageResponse(BaseModel):
    """Подтверждение без данных (delete)."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Ответ с ошибкой: success=false, error и message."""

    success: bool = False
    error: str = Field(..., description="Код ошибки (например, not_found, invalid_id)")
    message: str = Field(..., description="Человекочитаемое сообщение")
