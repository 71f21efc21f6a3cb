"""Tests for HTML pages and the health endpoint."""
import httpx
import pytest
from pymongo.errors import ServerSelectionTimeoutError

from app.main import app
from app.routers import health
from app.routers.pages import get_products_client
from app.views.client import ProductsClient


def test_landing_links_to_both_views(client):
    response = client.get("/")

    assert response.status_code == 200
    assert 'href="/admin"' in response.text
    assert 'href="/customer"' in response.text


def test_customer_page_hides_invisible(client, make_product):
    make_product(name="Shown Item")
    make_product(name="Secret Item", visibility=False)

    response = client.get("/customer")

    assert response.status_code == 200
    assert "Shown Item" in response.text
    assert "Secret Item" not in response.text


def test_customer_page_search(client, make_product):
    make_product(name="Green Tea")
    make_product(name="Coffee")

    response = client.get("/customer", params={"q": "TEA"})

    assert "Green Tea" in response.text
    assert "Coffee" not in response.text


def test_customer_page_empty(client):
    assert "No products found." in client.get("/customer").text


def test_admin_page_paginates_by_five(client, make_product):
    for i in range(7):
        make_product(name=f"Item-{i:02d}", price=100 + i)

    first = client.get("/admin")
    second = client.get("/admin", params={"page": 2})

    assert first.status_code == 200
    assert first.text.count('class="product-name"') == 5
    assert "Page 1 of 2" in first.text
    assert second.text.count('class="product-name"') == 2
    assert "Item-06" in second.text


def test_admin_page_filters(client, make_product):
    make_product(name="Visible-Cheap", price=60)
    make_product(name="Hidden-Cheap", price=60, visibility=False)
    make_product(name="Visible-Pricey", price=5000)

    response = client.get("/admin", params={"visibility": "public", "max_price": 1000})

    assert "Visible-Cheap" in response.text
    assert "Hidden-Cheap" not in response.text
    assert "Visible-Pricey" not in response.text
    assert "Page 1 of 1" in response.text


def test_admin_page_rejects_unknown_visibility(client):
    assert client.get("/admin", params={"visibility": "secret"}).status_code == 400


def test_health_connected(client, monkeypatch):
    class Pinger:
        admin = None

        def command(self, name):
            return {"ok": 1}

    pinger = Pinger()
    pinger.admin = pinger
    monkeypatch.setattr(health, "get_client", lambda: pinger)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"status": "ok", "mongo": "connected"}}


def test_health_disconnected(client, monkeypatch):
    def _unreachable():
        raise ServerSelectionTimeoutError("no servers")

    monkeypatch.setattr(health, "get_client", _unreachable)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["data"]["mongo"] == "disconnected"


def _override_client(payload, status_code=200):
    transport = httpx.MockTransport(lambda request: httpx.Response(status_code, json=payload))
    return lambda: ProductsClient(http=httpx.Client(transport=transport, base_url="http://testserver"))


def test_pages_read_through_collection_api(client, products_collection):
    app.dependency_overrides[get_products_client] = _override_client(
        [
            {"id": "a1", "name": "From-Api-Shown", "price": 120, "visibility": True},
            {"id": "a2", "name": "From-Api-Hidden", "price": 130, "visibility": False},
        ]
    )

    admin = client.get("/admin")
    customer = client.get("/customer")

    assert products_collection.count_documents({}) == 0
    assert "From-Api-Shown" in admin.text
    assert "From-Api-Hidden" in admin.text
    assert "From-Api-Shown" in customer.text
    assert "From-Api-Hidden" not in customer.text


@pytest.mark.parametrize("path", ["/admin", "/customer"])
def test_pages_show_notification_when_api_fails(client, path):
    app.dependency_overrides[get_products_client] = _override_client({"success": False}, status_code=500)

    response = client.get(path)

    assert response.status_code == 200
    assert "Failed to fetch products" in response.text


@pytest.mark.parametrize("path", ["/admin", "/customer"])
def test_pages_survive_invalid_record_from_api(client, path):
    app.dependency_overrides[get_products_client] = _override_client(
        [{"id": "bad", "name": "Broken", "price": None}]
    )

    response = client.get(path)

    assert response.status_code == 200
    assert "Failed to fetch products" in response.text
    assert "Broken" not in response.text
