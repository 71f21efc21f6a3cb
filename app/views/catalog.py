"""
Чистые проекции над списком продуктов для страниц.

Каждая функция получает полный список (снимок) и возвращает новый,
исходный список не меняется. Порядок элементов всегда исходный.
"""
import math
from collections.abc import Iterable, Sequence
from typing import Literal

from app.schemas.product import Product

Visibility = Literal["all", "public", "hidden"]

PAGE_SIZE = 5
MIN_PRICE = 50
MAX_PRICE = 350000


def filter_products(
    products: Iterable[Product],
    visibility: Visibility = "all",
    min_price: float = MIN_PRICE,
    max_price: float = MAX_PRICE,
) -> list[Product]:
    """Фильтр админки: сначала видимость, потом диапазон цены (включительно)."""
    result = []
    for p in products:
        if visibility == "public" and not p.visibility:
            continue
        if visibility == "hidden" and p.visibility:
            continue
        if min_price <= p.price <= max_price:
            result.append(p)
    return result


def paginate(items: Sequence[Product], page: int, page_size: int = PAGE_SIZE) -> list[Product]:
    """Срез страницы: (page-1)*size .. page*size. Страницы с 1."""
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Число страниц, минимум 1."""
    return max(1, math.ceil(count / page_size))


def visible_only(products: Iterable[Product]) -> list[Product]:
    return [p for p in products if p.visibility]


def search_by_name(products: Iterable[Product], query: str) -> list[Product]:
    """Подстрока в name без учёта регистра. Пустой запрос — всё."""
    needle = query.lower()
    return [p for p in products if needle in p.name.lower()]


def image_suggestions(known_urls: Iterable[str], typed: str) -> list[str]:
    """Подсказки для поля imageUrl: содержат введённое, но не равны ему."""
    needle = typed.lower()
    return [url for url in known_urls if needle in url.lower() and url != typed]
