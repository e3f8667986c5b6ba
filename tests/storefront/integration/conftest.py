import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers

from storefront.api import order_router, product_router

_ADMIN = {"X-User-Id": "admin-001", "X-User-Role": "admin"}


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(product_router)
    app.include_router(order_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def create_product(client):
    def _create(**overrides):
        body = {
            "name": "Fresh Irish Potatoes",
            "description": "Freshly harvested from the Jos Plateau",
            "price": 1000,
            "category": "fresh",
            "weight": "50kg",
            "stock": 20,
        }
        body.update(overrides)
        response = client.post("/products", json=body, headers=_ADMIN)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
