import os

# MONGO_URI обязателен: задаём до импорта приложения
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")

import mongomock  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core import database  # noqa: E402
from app.core.config import settings  # noqa: E402
from app.main import app  # noqa: E402
from app.routers.pages import get_products_client  # noqa: E402
from app.views.client import ProductsClient  # noqa: E402


@pytest.fixture(scope="function")
def mongo(monkeypatch):
    """In-memory MongoDB вместо реального клиента."""
    client = mongomock.MongoClient()
    monkeypatch.setattr(database, "_client", client)
    yield client


@pytest.fixture(scope="function")
def products_collection(mongo):
    return mongo[settings.MONGO_DB_NAME]["products"]


@pytest.fixture(scope="function")
def client(mongo):
    """Тестовый клиент со свежей базой на каждый тест.

    Страницы ходят в Collection API через тот же TestClient.
    """
    with TestClient(app) as test_client:
        app.dependency_overrides[get_products_client] = lambda: ProductsClient(http=test_client)
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_product(client):
    """Создать продукт через API и вернуть JSON ответа."""

    def _make(**fields):
        payload = {"name": "Test Product", "price": 100.0}
        payload.update(fields)
        response = client.post("/api/products", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
