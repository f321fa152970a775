# storefront/api/__init__.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.errors import register_error_handlers
from storefront.api.routers import admin_orders, admin_products, cart, health, orders, products
from storefront.utils.settings import API_PREFIX, CORS_ORIGINS


def create_app(lifespan=None) -> FastAPI:
    app = FastAPI(
        title="Storefront",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(health.router)
    for module in (products, cart, orders, admin_products, admin_orders):
        app.include_router(module.router, prefix=API_PREFIX)

    return app
