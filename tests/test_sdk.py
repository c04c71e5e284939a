# tests/test_sdk.py
from unittest import mock

import pytest
import requests

from fastapi.testclient import TestClient
from app.main import create_app
from sdk.pyproducts import ProductClient, build_parser, run

def _mock_client(payload):
    c = ProductClient(base_url="http://api.local/")
    c.session = mock.Mock()
    c.session.request.return_value.json.return_value = payload
    return c

def test_list_only_sends_given_params():
    c = _mock_client({"total": 0, "page": 1, "products": []})
    c.list_products(category="kitchen", limit=2)
    c.session.request.assert_called_once_with(
        "GET", "http://api.local/api/products", timeout=10, params={"category": "kitchen", "limit": 2}
    )

def test_create_sends_camel_case_in_stock():
    c = _mock_client({"id": "x"})
    assert c.create_product("Kettle", "Electric", 0, "kitchen", False) == {"id": "x"}
    _, kwargs = c.session.request.call_args
    assert kwargs["json"] == {"name": "Kettle", "description": "Electric", "price": 0,
                              "category": "kitchen", "inStock": False}

def test_errors_raise():
    c = _mock_client({})
    c.session.request.return_value.raise_for_status.side_effect = requests.HTTPError("404")
    with pytest.raises(requests.HTTPError):
        c.get_product("nope")

def test_update_command_parses_values():
    args = build_parser().parse_args(["update", "1", "price=999", "name=Big Laptop", "inStock=false"])
    client = mock.Mock()
    run(args, client)
    client.update_product.assert_called_once_with("1", price=999, name="Big Laptop", inStock=False)

def test_create_command():
    args = build_parser().parse_args(["create", "Kettle", "Electric", "12.5", "kitchen", "yes"])
    client = mock.Mock()
    run(args, client)
    client.create_product.assert_called_once_with("Kettle", "Electric", 12.5, "kitchen", True)

def test_client_against_app():
    c = ProductClient(base_url="http://testserver")
    c.session = TestClient(create_app())
    assert c.product_stats() == {"electronics": 2, "kitchen": 1}
    created = c.create_product("Kettle", "Electric", 20, "kitchen", True)
    assert c.update_product(created["id"], price=25)["price"] == 25
    assert [p["id"] for p in c.search_products("kett")] == [created["id"]]
    assert c.delete_product(created["id"])["deleted"][0]["id"] == created["id"]
    assert c.list_products(page=2, limit=2)["products"][0]["name"] == "Coffee Maker"
