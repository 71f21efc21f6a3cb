"""
HTTP-клиент Collection API для страниц (views).

Обёртка над httpx.Client: методы возвращают Product, ошибки сети и статусы 4xx/5xx
пробрасываются как httpx.HTTPError, кривые записи в ответе — как pydantic.ValidationError.
Их обрабатывают сами views.
"""
import httpx

from app.core.config import settings
from app.schemas.product import Product

PRODUCTS_PATH = "/api/products"


class ProductsClient:
    """Клиент /api/products. http можно подменить (TestClient — тоже httpx.Client).

    Закрывает только тот httpx.Client, который создал сам.
    Использовать как контекстный менеджер: with ProductsClient() as client: ...
    """

    def __init__(self, http: httpx.Client | None = None, base_url: str | None = None):
        self._owns_http = http is None
        self.http = http or httpx.Client(base_url=base_url or settings.API_BASE_URL)

    def __enter__(self) -> "ProductsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def list_products(self) -> list[Product]:
        resp = self.http.get(PRODUCTS_PATH)
        resp.raise_for_status()
        return [Product.model_validate(item) for item in resp.json()]

    def create(self, payload: dict) -> Product:
        resp = self.http.post(PRODUCTS_PATH, json=payload)
        resp.raise_for_status()
        return Product.model_validate(resp.json())

    def update(self, product_id: str, payload: dict) -> Product:
        resp = self.http.patch(f"{PRODUCTS_PATH}/{product_id}", json=payload)
        resp.raise_for_status()
        return Product.model_validate(resp.json()["product"])

    def delete(self, product_id: str) -> str:
        resp = self.http.delete(f"{PRODUCTS_PATH}/{product_id}")
        resp.raise_for_status()
        return resp.json()["message"]

    def close(self) -> None:
        if self._owns_http:
            self.http.close()
