"""
Состояние страницы администратора.

AdminView хранит полный список продуктов (перезапрашивается после каждой мутации),
фильтр, страницу, черновик формы и режим редактора. Видимый срез — чистая проекция
из app.views.catalog, пересчитывается на каждое обращение.
Любая ошибка HTTP или невалидный ответ API оставляет состояние как было и добавляет уведомление.
"""
import logging
from collections.abc import Callable
from typing import Literal

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.schemas.product import DESCRIPTION_MAX_LENGTH, Product
from app.views import catalog
from app.views.client import ProductsClient

logger = logging.getLogger(__name__)

EditorMode = Literal["closed", "create", "update"]

DELETE_PROMPT = "Delete this product?"


class ProductForm(BaseModel):
    """Черновик формы создания/редактирования."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    name: str = ""
    price: float = 0
    description: str = ""
    image_url: str = Field(default="", alias="imageUrl")
    visibility: bool = True

    @classmethod
    def from_product(cls, product: Product) -> "ProductForm":
        return cls(
            name=product.name or "",
            price=product.price,
            description=product.description or "",
            image_url=product.image_url or "",
            visibility=product.visibility,
        )

    def payload(self) -> dict:
        return self.model_dump(by_alias=True)


class AdminView:
    """Машина состояний админки поверх ProductsClient."""

    def __init__(self, client: ProductsClient):
        self.client = client
        self.products: list[Product] = []
        self.visibility: catalog.Visibility = "all"
        self.min_price: float = catalog.MIN_PRICE
        self.max_price: float = catalog.MAX_PRICE
        self.page = 1
        self.page_size = catalog.PAGE_SIZE
        self.form = ProductForm()
        self.mode: EditorMode = "closed"
        self.editing: Product | None = None
        self.viewing: Product | None = None
        self.known_image_urls: list[str] = []
        self.notifications: list[tuple[str, str]] = []
        self.loading = False

    # ---- уведомления ----

    def _notify(self, level: str, message: str) -> None:
        self.notifications.append((level, message))

    def _remember_url(self, url: str | None) -> None:
        if url and url not in self.known_image_urls:
            self.known_image_urls.append(url)

    # ---- загрузка ----

    def load(self) -> None:
        """Запросить полный список. При ошибке список не меняется."""
        try:
            products = self.client.list_products()
        except (httpx.HTTPError, ValidationError) as exc:
            logger.error("Failed to fetch products: %s", exc)
            self._notify("error", "Failed to fetch products")
            return
        self.products = products
        for p in products:
            self._remember_url(p.image_url)

    # ---- редактор ----

    def open_add(self) -> None:
        self.editing = None
        self.form = ProductForm()
        self.mode = "create"

    def open_edit(self, product: Product) -> None:
        self.editing = product
        self.form = ProductForm.from_product(product)
        self.mode = "update"

    def close_editor(self) -> None:
        self.mode = "closed"

    def set_form(self, **fields) -> None:
        """Изменить поля черновика с валидацией. Принимает имена полей и алиасы (imageUrl).

        description обрезается до 250 символов. Невалидное значение — ValidationError,
        черновик остаётся прежним.
        """
        for name, info in ProductForm.model_fields.items():
            if info.alias and info.alias in fields:
                fields[name] = fields.pop(info.alias)
        if "description" in fields and fields["description"] is not None:
            fields["description"] = fields["description"][:DESCRIPTION_MAX_LENGTH]
        self.form = ProductForm.model_validate({**self.form.model_dump(), **fields})

    @property
    def description_remaining(self) -> int:
        return DESCRIPTION_MAX_LENGTH - len(self.form.description)

    @property
    def image_suggestions(self) -> list[str]:
        return catalog.image_suggestions(self.known_image_urls, self.form.image_url)

    def save(self) -> bool:
        """Создать или обновить по режиму, перезапросить список, закрыть редактор."""
        if self.mode == "closed":
            return False
        self.loading = True
        try:
            self._remember_url(self.form.image_url)
            if self.mode == "update" and self.editing is not None:
                self.client.update(self.editing.id, self.form.payload())
                message = "Product updated successfully!"
            else:
                self.client.create(self.form.payload())
                message = "Product added successfully!"
        except (httpx.HTTPError, ValidationError) as exc:
            logger.error("Save failed: %s", exc)
            self._notify("error", "Operation failed!")
            return False
        finally:
            self.loading = False
        self._notify("success", message)
        self.load()
        self.mode = "closed"
        self.editing = None
        self.form = ProductForm()
        return True

    def delete(self, product_id: str, confirm: Callable[[str], bool]) -> bool:
        """Удалить после подтверждения и перезапросить список."""
        if not confirm(DELETE_PROMPT):
            return False
        try:
            self.client.delete(product_id)
        except (httpx.HTTPError, ValidationError) as exc:
            logger.error("Delete failed: %s", exc)
            self._notify("error", "Failed to delete product")
            return False
        self._notify("success", "Product deleted successfully!")
        self.load()
        return True

    # ---- просмотр ----

    def view(self, product: Product) -> None:
        self.viewing = product

    def close_view(self) -> None:
        self.viewing = None

    # ---- фильтр и пагинация (без запросов к серверу) ----

    def set_filter(
        self,
        visibility: catalog.Visibility | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
    ) -> None:
        if visibility is not None:
            self.visibility = visibility
        if min_price is not None:
            self.min_price = min_price
        if max_price is not None:
            self.max_price = max_price

    def set_page(self, page: int) -> None:
        self.page = page

    def next_page(self) -> None:
        if self.page < self.total_pages:
            self.page += 1

    def previous_page(self) -> None:
        if self.page > 1:
            self.page -= 1

    @property
    def filtered(self) -> list[Product]:
        return catalog.filter_products(self.products, self.visibility, self.min_price, self.max_price)

    @property
    def paginated(self) -> list[Product]:
        return catalog.paginate(self.filtered, self.page, self.page_size)

    @property
    def total_pages(self) -> int:
        return catalog.total_pages(len(self.filtered), self.page_size)
