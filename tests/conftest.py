import pytest

from halkit import Link, Resource
from halkit.config.settings import settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Pin serializer defaults so a local .env or HALKIT_* vars can't leak in"""
    monkeypatch.setattr(settings, "JSON_INDENT", None)
    monkeypatch.setattr(settings, "XML_INDENT", None)
    monkeypatch.setattr(settings, "XML_PRETTY", False)
    yield settings


@pytest.fixture
def orders():
    orders = Resource({"currentlyProcessing": 14, "shippedToday": 20}, "/orders")
    orders.link("next", "/orders?page=2")
    orders.link("find", {"href": "/orders{?id}", "templated": True})

    order_123 = Resource({"total": 30, "currency": "USD", "status": "shipped"}, "/orders/123")
    order_123.link(Link("basket", "/baskets/98712"))
    order_123.link(Link("customer", {"href": "/customers/7809"}))

    order_124 = Resource({"total": 20, "currency": "USD", "status": "processing"}, "/orders/124")
    order_124.link("basket", "/baskets/97213")
    order_124.link("customer", "/customers/12369")

    orders.embed("orders", [order_123, order_124])
    return orders
