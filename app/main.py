# app/main.py
import logging
from typing import Optional, Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import HOST, PORT, LOG_LEVEL
from .core import ProductIn, as_fields
from .database import ProductStore
from .errors import Result
from .handlers import (
    welcome_logic, list_products_logic, get_product_logic,
    create_product_logic, update_product_logic, delete_product_logic,
    search_products_logic, product_stats_logic
)
from .middleware import log_requests, catch_all_errors

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s │ %(levelname)-7s │ %(name)s │ %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("product-api")

def _respond(result: Result):
    status, body = result
    if isinstance(body, str):
        return PlainTextResponse(body, status_code=status)
    return JSONResponse(status_code=status, content=body)

async def read_json_body(request: Request) -> Any:
    """
    Missing, empty or non-JSON bodies read as {}. Unparseable JSON and bare
    scalars raise, which the error middleware turns into a 500.
    """
    if "json" not in request.headers.get("content-type", ""):
        return {}
    if not (await request.body()).strip():
        return {}
    body = await request.json()
    if not isinstance(body, (dict, list)):
        raise ValueError(f"JSON body must be an object or array, got {type(body).__name__}")
    return body

def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """Build the product API around ``store`` (a freshly seeded one by default)."""
    if store is None:
        store = ProductStore()

    # trailing slashes are served in place, not redirected
    app = FastAPI(title="product-api (in-memory demo)", redirect_slashes=False)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # last registered runs first: errors wrap the logger, which wraps routing
    app.middleware("http")(log_requests)
    app.middleware("http")(catch_all_errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    def route(path: str, method: str):
        def register(endpoint):
            app.add_api_route(path, endpoint, methods=[method])
            if path != "/":
                app.add_api_route(path + "/", endpoint, methods=[method], include_in_schema=False)
            return endpoint
        return register

    # ---------------------------
    # Routes
    # ---------------------------
    @route("/", "GET")
    async def welcome():
        return _respond(welcome_logic())

    @route("/api/products", "GET")
    async def list_products(category: Optional[str] = None, page: Optional[str] = None, limit: Optional[str] = None):
        return _respond(list_products_logic(store, category, page, limit))

    @route("/api/products/{product_id}", "GET")
    async def get_product(product_id: str):
        return _respond(get_product_logic(store, product_id))

    @route("/api/products", "POST")
    async def create_product(request: Request):
        payload = ProductIn.from_body(await read_json_body(request))
        return _respond(create_product_logic(store, payload))

    @route("/api/products/{product_id}", "PUT")
    async def update_product(product_id: str, request: Request):
        changes = as_fields(await read_json_body(request))
        return _respond(update_product_logic(store, product_id, changes))

    @route("/api/products/{product_id}", "DELETE")
    async def delete_product(product_id: str):
        return _respond(delete_product_logic(store, product_id))

    @route("/api/products-search", "GET")
    async def search_products(name: Optional[str] = None):
        return _respond(search_products_logic(store, name))

    @route("/api/products-stats", "GET")
    async def product_stats():
        return _respond(product_stats_logic(store))

    return app

app = create_app()

if __name__ == "__main__":
    logger.info("Server is running on http://localhost:%d", PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
