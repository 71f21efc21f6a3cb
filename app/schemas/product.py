"""
Схемы для ресурса Product.

ProductCreate — тело POST, ProductUpdate — частичное тело PATCH, Product — ответ с id.
В MongoDB поля хранятся под теми же именами, что и в JSON (imageUrl, visibility).
"""
from pydantic import BaseModel, ConfigDict, Field

DESCRIPTION_MAX_LENGTH = 250


class ProductCreate(BaseModel):
    """Тело запроса при создании.

    name и price формально опциональны: их наличие проверяет сам эндпоинт,
    чтобы вернуть 400 с фиксированным сообщением.
    """

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    name: str | None = None
    price: float | None = None
    description: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    visibility: bool = True

    def to_document(self) -> dict:
        """Документ для insert_one. Отсутствующие опциональные поля не пишем."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ProductUpdate(BaseModel):
    """Тело PATCH: любое подмножество полей, кроме id."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    name: str | None = None
    price: float | None = None
    description: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    visibility: bool | None = None

    def to_set(self) -> dict:
        """Поля для $set: только переданные и не null."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)


class Product(BaseModel):
    """Ответ API: продукт с id. id в MongoDB — ObjectId, в API отдаём строкой."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    price: float
    description: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    visibility: bool = True


def doc_to_product(doc: dict) -> Product:
    """Документ из Mongo → Pydantic. _id → id (строка)."""
    return Product(
        id=str(doc["_id"]),
        name=doc["name"],
        price=doc["price"],
        description=doc.get("description"),
        imageUrl=doc.get("imageUrl"),
        visibility=doc.get("visibility", True),
    )
