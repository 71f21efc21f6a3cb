"""
HTML-страницы: лендинг, админка, каталог покупателя.

Страницы — клиенты Collection API: данные берут через ProductsClient,
состояние и проекцию строят AdminView / CustomerView. Мутации админка делает
запросами к /api/products из браузера и перезагружается, то есть снова
проходит load() с полным перезапросом списка.
"""
from collections.abc import Iterator
from pathlib import Path

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.schemas.product import DESCRIPTION_MAX_LENGTH
from app.views import catalog
from app.views.admin import AdminView
from app.views.client import ProductsClient
from app.views.customer import CustomerView

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

PLACEHOLDER_IMAGE = "https://via.placeholder.com/150"

router = APIRouter(tags=["pages"], include_in_schema=False)


def get_products_client() -> Iterator[ProductsClient]:
    """Клиент API на время запроса страницы (base_url из settings.API_BASE_URL)."""
    with ProductsClient() as client:
        yield client


@router.get("/", response_class=HTMLResponse)
def landing(request: Request):
    """Выбор роли: админ или покупатель."""
    return templates.TemplateResponse(request, "landing.html", {})


@router.get("/admin", response_class=HTMLResponse)
def admin_page(
    request: Request,
    visibility: catalog.Visibility = "all",
    min_price: float = Query(catalog.MIN_PRICE),
    max_price: float = Query(catalog.MAX_PRICE),
    page: int = Query(1, ge=1),
    client: ProductsClient = Depends(get_products_client),
):
    """Таблица продуктов с фильтром и пагинацией по 5."""
    view = AdminView(client)
    view.load()
    view.set_filter(visibility=visibility, min_price=min_price, max_price=max_price)
    view.set_page(min(page, view.total_pages))
    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "products": view.paginated,
            "page": view.page,
            "total_pages": view.total_pages,
            "visibility": view.visibility,
            "min_price": view.min_price,
            "max_price": view.max_price,
            "bounds": (catalog.MIN_PRICE, catalog.MAX_PRICE),
            "known_urls": view.known_image_urls,
            "notifications": view.notifications,
            "description_max": DESCRIPTION_MAX_LENGTH,
            "placeholder": PLACEHOLDER_IMAGE,
        },
    )


@router.get("/customer", response_class=HTMLResponse)
def customer_page(
    request: Request,
    q: str = "",
    client: ProductsClient = Depends(get_products_client),
):
    """Только видимые продукты, поиск по имени."""
    view = CustomerView(client)
    view.load()
    view.search(q)
    return templates.TemplateResponse(
        request,
        "customer.html",
        {
            "products": view.results,
            "q": view.query,
            "notifications": view.notifications,
            "placeholder": PLACEHOLDER_IMAGE,
        },
    )
