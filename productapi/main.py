# productapi/main.py
import logging
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from .core import INTERNAL_ERROR
from .database import ProductStore
from .logging_config import setup_logging
from .middleware import (
    ProductJSONResponse, RequestContext, ShortCircuit, authenticate, error_response,
    log_requests, pipeline, validate_product
)
from .sdk import (
    create_product_logic, delete_product_logic, get_product_logic,
    list_products_logic, product_stats_logic, replace_product_logic,
    search_products_logic
)

error_logger = logging.getLogger("productapi.errors")

authenticated = pipeline(authenticate)
authenticated_product = pipeline(authenticate, validate_product)


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def create_app(store: Optional[ProductStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the products API around ``store`` (a fresh, empty one by default)."""
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    # Only the product routes are served: no interactive docs or schema, and
    # a trailing slash matches the same route instead of redirecting.
    app = FastAPI(
        title=settings.project_name,
        default_response_class=ProductJSONResponse,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    # ---------------------------
    # Error handlers
    # ---------------------------
    @app.exception_handler(ShortCircuit)
    async def short_circuit_handler(request: Request, exc: ShortCircuit):
        return exc.response

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        error_logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return error_response(500, INTERNAL_ERROR)

    # ---------------------------
    # Product endpoints
    # ---------------------------
    def route(method: str, path: str, **kwargs):
        def decorator(endpoint):
            app.add_api_route(path, endpoint, methods=[method], **kwargs)
            app.add_api_route(path + "/", endpoint, methods=[method], include_in_schema=False, **kwargs)
            return endpoint
        return decorator

    # search and stats are registered ahead of /{product_id} so they are not
    # captured as ids.
    @route("GET", "/api/products", dependencies=[Depends(authenticated)])
    async def list_products(category: Optional[str] = None, page: Optional[str] = None,
                            limit: Optional[str] = None,
                            store: ProductStore = Depends(get_store)):
        return await list_products_logic(store, category, page, limit)

    @route("GET", "/api/products/search", dependencies=[Depends(authenticated)])
    async def search_products(q: Optional[str] = None,
                              store: ProductStore = Depends(get_store)):
        return await search_products_logic(store, q)

    @route("GET", "/api/products/stats", dependencies=[Depends(authenticated)])
    async def product_stats(store: ProductStore = Depends(get_store)):
        return await product_stats_logic(store)

    @route("GET", "/api/products/{product_id}", dependencies=[Depends(authenticated)])
    async def get_product(product_id: str,
                          store: ProductStore = Depends(get_store)):
        return await get_product_logic(store, product_id)

    @route("POST", "/api/products", status_code=201)
    async def create_product(ctx: RequestContext = Depends(authenticated_product),
                             store: ProductStore = Depends(get_store)):
        return await create_product_logic(store, ctx.payload)

    @route("PUT", "/api/products/{product_id}")
    async def replace_product(product_id: str,
                              ctx: RequestContext = Depends(authenticated_product),
                              store: ProductStore = Depends(get_store)):
        return await replace_product_logic(store, product_id, ctx.payload)

    @route("DELETE", "/api/products/{product_id}", status_code=204, dependencies=[Depends(authenticated)])
    async def delete_product(product_id: str,
                             store: ProductStore = Depends(get_store)):
        return await delete_product_logic(store, product_id)

    return app


app = create_app()
