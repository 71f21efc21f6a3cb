"""
CRUD для ресурса products (Collection API).

Роутер принимает запрос, проверяет id, вызывает коллекцию, возвращает ответ.
Ошибки Mongo не ловим здесь: их превращает в 500 обработчик в main.py.
"""
from bson import ObjectId
from fastapi import APIRouter, HTTPException, status
from pymongo import ReturnDocument

from app.core.database import get_products_collection
from app.schemas.common import ErrorResponse, MessageResponse, ProductEnvelope
from app.schemas.product import Product, ProductCreate, ProductUpdate, doc_to_product

router = APIRouter(prefix="/api/products", tags=["products"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _parse_id(product_id: str) -> ObjectId:
    """Проверить формат id до запроса в БД. 400 если не ObjectId."""
    if not ObjectId.is_valid(product_id):
        raise HTTPException(400, detail={"error": "invalid_id", "message": "Invalid ID"})
    return ObjectId(product_id)


def _not_found() -> HTTPException:
    return HTTPException(404, detail={"error": "not_found", "message": "Product not found"})


@router.get("", response_model=list[Product], responses={500: {"model": ErrorResponse}})
def list_products():
    """Все продукты без фильтрации, в порядке хранения."""
    coll = get_products_collection()
    return [doc_to_product(doc) for doc in coll.find()]


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
def create_product(data: ProductCreate):
    """Создать продукт. name и price обязательны."""
    if not data.name or data.price is None:
        raise HTTPException(
            400, detail={"error": "validation_error", "message": "Name and price are required"}
        )
    doc = data.to_document()
    coll = get_products_collection()
    result = coll.insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc_to_product(doc)


@router.get("/{product_id}", response_model=ProductEnvelope, responses=_ERROR_RESPONSES)
def get_product(product_id: str):
    """Один продукт по id."""
    oid = _parse_id(product_id)
    doc = get_products_collection().find_one({"_id": oid})
    if not doc:
        raise _not_found()
    return ProductEnvelope(product=doc_to_product(doc))


@router.patch("/{product_id}", response_model=ProductEnvelope, responses=_ERROR_RESPONSES)
def update_product(product_id: str, data: ProductUpdate):
    """Частичное обновление: меняются только переданные поля, last write wins."""
    oid = _parse_id(product_id)
    coll = get_products_collection()
    fields = data.to_set()
    if fields:
        doc = coll.find_one_and_update(
            {"_id": oid},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
    else:
        doc = coll.find_one({"_id": oid})
    if not doc:
        raise _not_found()
    return ProductEnvelope(product=doc_to_product(doc))


@router.delete("/{product_id}", response_model=MessageResponse, responses=_ERROR_RESPONSES)
def delete_product(product_id: str):
    """Удалить продукт. Повторное удаление — 404."""
    oid = _parse_id(product_id)
    result = get_products_collection().delete_one({"_id": oid})
    if result.deleted_count == 0:
        raise _not_found()
    return MessageResponse(message="Product deleted successfully")
