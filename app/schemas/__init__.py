# schemas — Pydantic-модели для запроса/ответа API. Валидация и сериализация из коробки.
from app.schemas.common import ErrorResponse, MessageResponse, ProductEnvelope, SuccessResponse
from app.schemas.product import Product, ProductCreate, ProductUpdate

__all__ = [
    "SuccessResponse",
    "ErrorResponse",
    "ProductEnvelope",
    "MessageResponse",
    "Product",
    "ProductCreate",
    "ProductUpdate",
]
