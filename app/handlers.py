from typing import Optional, Dict, Any

from .core import ProductIn, _make_product_dict, js_string, to_number, json_number, paginate
from .database import ProductStore, NOT_FOUND
from .errors import Result, ValidationError, NotFoundError, PRODUCT_NOT_FOUND

# This file contains the logic for every API endpoint. Each function maps
# the parsed request and the store to a (status_code, body) pair.

WELCOME_TEXT = "Welcome to the Product API! Go to /api/products to see all products."

def welcome_logic() -> Result:
    return 200, WELCOME_TEXT

def list_products_logic(
    store: ProductStore,
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Result:
    data = store.list_all()
    if category:
        data = [p for p in data if p.get("category") == category]

    page_num = to_number(page, 1)
    limit_num = to_number(limit, 5)

    return 200, {
        "total": len(data),
        "page": json_number(page_num),
        "products": paginate(data, page_num, limit_num),
    }

def get_product_logic(store: ProductStore, product_id: str) -> Result:
    p = store.find_by_id(product_id)
    if p is None:
        return NotFoundError(PRODUCT_NOT_FOUND).as_response()
    return 200, p

def create_product_logic(store: ProductStore, payload: ProductIn) -> Result:
    if payload.missing_fields():
        return ValidationError("Missing required product fields").as_response()
    product = store.insert(_make_product_dict("", payload))
    return 201, product

def update_product_logic(store: ProductStore, product_id: str, changes: Dict[str, Any]) -> Result:
    with store.lock:
        index = store.find_index_by_id(product_id)
        if index == NOT_FOUND:
            return NotFoundError(PRODUCT_NOT_FOUND).as_response()
        # shallow merge; a body "id" overwrites the stored one
        updated = {**store.get_at(index), **changes}
        store.replace_at(index, updated)
    return 200, updated

def delete_product_logic(store: ProductStore, product_id: str) -> Result:
    with store.lock:
        index = store.find_index_by_id(product_id)
        if index == NOT_FOUND:
            return NotFoundError(PRODUCT_NOT_FOUND).as_response()
        deleted = store.remove_at(index)
    return 200, {"message": "Product deleted successfully", "deleted": [deleted]}

def search_products_logic(store: ProductStore, name: Optional[str]) -> Result:
    if not name:
        return ValidationError("Missing search term: name").as_response()
    term = name.lower()
    results = [p for p in store.list_all() if term in p["name"].lower()]
    return 200, results

def product_stats_logic(store: ProductStore) -> Result:
    stats: Dict[str, int] = {}
    for p in store.list_all():
        # keys are strings, so 1 and "1" share a count
        key = js_string(p["category"])
        stats[key] = stats.get(key, 0) + 1
    return 200, stats
