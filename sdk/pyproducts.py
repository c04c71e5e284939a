# sdk/pyproducts.py
import argparse
import json
import sys
from typing import Optional, Dict, Any

import httpx
import requests
from rich import print

from app.config import PRODUCT_API_URL

class ProductClient:
    def __init__(self, base_url: str = PRODUCT_API_URL, timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs):
        r = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        r.raise_for_status()
        return r

    def welcome(self) -> str:
        return self._request("GET", "/").text

    @staticmethod
    def _list_params(category: Optional[str], page: Optional[int], limit: Optional[int]) -> Dict[str, Any]:
        params = {}
        if category:
            params["category"] = category
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        return params

    def list_products(self, category: Optional[str] = None, page: Optional[int] = None, limit: Optional[int] = None):
        return self._request("GET", "/api/products", params=self._list_params(category, page, limit)).json()

    def get_product(self, product_id: str):
        return self._request("GET", f"/api/products/{product_id}").json()

    def create_product(self, name: str, description: str, price: float, category: str, in_stock: bool):
        return self._request("POST", "/api/products", json={
            "name": name, "description": description, "price": price,
            "category": category, "inStock": in_stock
        }).json()

    def update_product(self, product_id: str, **fields):
        return self._request("PUT", f"/api/products/{product_id}", json=fields).json()

    def delete_product(self, product_id: str):
        return self._request("DELETE", f"/api/products/{product_id}").json()

    def search_products(self, name: str):
        return self._request("GET", "/api/products-search", params={"name": name}).json()

    def product_stats(self) -> Dict[str, int]:
        return self._request("GET", "/api/products-stats").json()

    # Async listing (example for concurrent callers)
    async def list_products_async(self, category: Optional[str] = None, page: Optional[int] = None, limit: Optional[int] = None):
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.get(f"{self.base_url}/api/products", params=self._list_params(category, page, limit))
            r.raise_for_status()
            return r.json()

# ---------------------------
# Command line
# ---------------------------
def _parse_value(raw: str) -> Any:
    # field values on the command line are JSON when they parse, text otherwise
    try:
        return json.loads(raw)
    except ValueError:
        return raw

def _bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "y")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pyproducts", description="Client for the in-memory product API")
    parser.add_argument("--url", default=PRODUCT_API_URL, help="API base URL")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("welcome")

    p = sub.add_parser("list")
    p.add_argument("--category")
    p.add_argument("--page", type=int)
    p.add_argument("--limit", type=int)

    p = sub.add_parser("get")
    p.add_argument("id")

    p = sub.add_parser("create")
    p.add_argument("name")
    p.add_argument("description")
    p.add_argument("price", type=float)
    p.add_argument("category")
    p.add_argument("in_stock", type=_bool)

    p = sub.add_parser("update")
    p.add_argument("id")
    p.add_argument("fields", nargs="+", metavar="FIELD=VALUE")

    p = sub.add_parser("delete")
    p.add_argument("id")

    p = sub.add_parser("search")
    p.add_argument("name")

    sub.add_parser("stats")
    return parser

def run(args: argparse.Namespace, client: ProductClient) -> Any:
    if args.command == "welcome":
        return client.welcome()
    if args.command == "list":
        return client.list_products(args.category, args.page, args.limit)
    if args.command == "get":
        return client.get_product(args.id)
    if args.command == "create":
        return client.create_product(args.name, args.description, args.price, args.category, args.in_stock)
    if args.command == "update":
        fields = {}
        for pair in args.fields:
            key, sep, value = pair.partition("=")
            if not sep:
                raise SystemExit(f"expected FIELD=VALUE, got {pair!r}")
            fields[key] = _parse_value(value)
        return client.update_product(args.id, **fields)
    if args.command == "delete":
        return client.delete_product(args.id)
    if args.command == "search":
        return client.search_products(args.name)
    if args.command == "stats":
        return client.product_stats()
    raise SystemExit(f"unknown command {args.command!r}")

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    client = ProductClient(base_url=args.url)
    try:
        result = run(args, client)
    except requests.exceptions.HTTPError as e:
        print(f"[red]{e}[/red]", file=sys.stderr)
        return 1
    print(result)
    return 0

if __name__ == "__main__":
    sys.exit(main())
