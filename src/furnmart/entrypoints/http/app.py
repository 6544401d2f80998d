from fastapi import FastAPI

from furnmart.entrypoints.http.exception_handlers import register_exception_handlers
from furnmart.entrypoints.http.routes.cart import router as cart_router
from furnmart.entrypoints.http.routes.catalog import router as catalog_router
from furnmart.entrypoints.http.routes.health import router as health_router
from furnmart.entrypoints.http.routes.search import router as search_router
from furnmart.entrypoints.http.routes.wishlist import router as wishlist_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Furnmart Storefront State API",
        description="""
        Catalog query state and shopping cart ledger for the Furnmart storefront.

        ## Features
        - Catalog filters, sorting, view mode and paging, bound to the page URL
        - Cart quantities, removals, promo codes and totals
        - Wishlist toggling
        - Search-as-you-type tickets that let the client drop stale results

        ## Error Handling
        Expected failures (invalid promo code, missing cart item) are returned
        in the response `outcome`. Malformed requests return structured JSON
        errors with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(catalog_router, prefix="/v1")
    app.include_router(cart_router, prefix="/v1")
    app.include_router(wishlist_router, prefix="/v1")
    app.include_router(search_router, prefix="/v1")

    return app


app = build_app()
