"""
Состояние страницы покупателя: только видимые продукты и поиск по имени.
"""
import logging

import httpx
from pydantic import ValidationError

from app.schemas.product import Product
from app.views import catalog
from app.views.client import ProductsClient

logger = logging.getLogger(__name__)


class CustomerView:
    """Только чтение. Скрытые продукты отбрасываются сразу при загрузке."""

    def __init__(self, client: ProductsClient):
        self.client = client
        self.products: list[Product] = []
        self.query = ""
        self.notifications: list[tuple[str, str]] = []
        self.loading = False

    def load(self) -> None:
        self.loading = True
        try:
            products = self.client.list_products()
        except (httpx.HTTPError, ValidationError) as exc:
            logger.error("Failed to fetch products: %s", exc)
            self.notifications.append(("error", "Failed to fetch products"))
            return
        finally:
            self.loading = False
        self.products = catalog.visible_only(products)

    def search(self, query: str) -> None:
        self.query = query

    @property
    def results(self) -> list[Product]:
        return catalog.search_by_name(self.products, self.query)
