# tests/test_store.py
import math
from app.core import ProductIn, js_truthy, js_string, as_fields, to_number, json_number, window, paginate
from app.database import ProductStore, NOT_FOUND
from app.errors import ValidationError, NotFoundError, InternalError

def test_seeded_with_three_products_in_order():
    store = ProductStore()
    assert [p["id"] for p in store.list_all()] == ["1", "2", "3"]
    assert len(store) == 3

def test_stores_do_not_share_records():
    a, b = ProductStore(), ProductStore()
    a.replace_at(0, {**a.list_all()[0], "price": 1})
    assert b.find_by_id("1")["price"] == 1200

def test_list_all_is_a_snapshot():
    store = ProductStore()
    snapshot = store.list_all()
    snapshot.reverse()
    snapshot.pop()
    assert [p["id"] for p in store.list_all()] == ["1", "2", "3"]

def test_find_by_id_and_index():
    store = ProductStore()
    assert store.find_by_id("3")["name"] == "Coffee Maker"
    assert store.find_by_id("missing") is None
    assert store.find_index_by_id("2") == 1
    assert store.find_index_by_id("missing") == NOT_FOUND

def test_insert_assigns_fresh_id_and_appends():
    store = ProductStore(seed=[])
    first = store.insert({"id": "caller-chosen", "name": "A"})
    second = store.insert({"name": "B"})
    assert first["id"] and first["id"] != "caller-chosen"
    assert first["id"] != second["id"]
    assert store.list_all() == [first, second]

def test_replace_and_remove():
    store = ProductStore()
    store.replace_at(1, {"id": "2", "name": "Phone"})
    assert store.find_by_id("2") == {"id": "2", "name": "Phone"}
    removed = store.remove_at(0)
    assert removed["name"] == "Laptop"
    assert [p["id"] for p in store.list_all()] == ["2", "3"]

def test_missing_fields_distinguishes_absent_from_falsy():
    full = ProductIn(name="a", description="b", price=0, category="c", inStock=False)
    assert full.missing_fields() == []
    assert ProductIn.model_validate({"name": "a", "description": "b", "price": None,
                                     "category": "c", "inStock": True}).missing_fields() == []
    assert ProductIn(name="a", description="b", price=1, category="c").missing_fields() == ["inStock"]
    assert ProductIn(name="", description="b", price=1, category="c", inStock=True).missing_fields() == ["name"]

def test_to_number_coercion():
    assert to_number(None, 5) == 5
    assert to_number("2", 1) == 2
    assert to_number(" 3 ", 1) == 3
    assert to_number("", 1) == 0
    assert math.isnan(to_number("abc", 1))

def test_json_number():
    assert json_number(2.0) == 2
    assert isinstance(json_number(2.0), int)
    assert json_number(1.5) == 1.5
    assert json_number(math.nan) is None
    assert json_number(math.inf) is None

def test_window_bounds():
    items = [1, 2, 3, 4, 5]
    assert window(items, 1, 3) == [2, 3]
    assert window(items, -2, 5) == [4, 5]
    assert window(items, 0, -1) == [1, 2, 3, 4]
    assert window(items, math.nan, math.nan) == []
    assert window(items, 3, 1) == []
    assert window(items, 0, math.inf) == items

def test_paginate():
    items = [1, 2, 3, 4, 5]
    assert paginate(items, 1, 2) == [1, 2]
    assert paginate(items, 3, 2) == [5]
    assert paginate(items, 4, 2) == []
    assert paginate(items, 0, 2) == []
    assert paginate(items, math.nan, 2) == []

def test_error_responses():
    assert ValidationError("bad").as_response() == (400, {"error": "bad"})
    assert NotFoundError("Product not found").as_response() == (404, {"error": "Product not found"})
    assert InternalError().as_response() == (500, {"error": "Internal server error"})
    assert ValidationError("x") != NotFoundError("x")

def test_get_at_reads_one_record():
    store = ProductStore()
    assert store.get_at(2)["name"] == "Coffee Maker"
    assert store.get_at(-1) is store.find_by_id("3")

def test_js_truthy():
    for value in (None, False, 0, 0.0, math.nan, ""):
        assert not js_truthy(value), value
    for value in (True, 1, -1.5, "0", " ", [], {}, [0]):
        assert js_truthy(value), value

def test_js_string():
    assert js_string("kitchen") == "kitchen"
    assert js_string(1) == "1"
    assert js_string(1.0) == "1"
    assert js_string(2.5) == "2.5"
    assert js_string(True) == "true"
    assert js_string(None) == "null"
    assert js_string(["a", "b"]) == "a,b"
    assert js_string([1, None, [2, 3]]) == "1,,2,3"
    assert js_string({"a": 1}) == "[object Object]"

def test_as_fields():
    assert as_fields({"price": 1}) == {"price": 1}
    assert as_fields(["x", "y"]) == {"0": "x", "1": "y"}
    assert as_fields(None) == {}

def test_from_body_ignores_non_objects():
    assert ProductIn.from_body([1, 2]).missing_fields() == ["name", "description", "category", "price", "inStock"]
    assert ProductIn.from_body({"name": [], "description": {}, "category": "c",
                                "price": 1, "inStock": True}).missing_fields() == []
