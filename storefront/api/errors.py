# storefront/api/errors.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.domain.errors import StorefrontError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI):
    @app.exception_handler(StorefrontError)
    async def storefront_error(request: Request, exc: StorefrontError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message, **exc.extra},
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={
                "title": "Unexpected error",
                "detail": str(exc),
                "status": 500,
            },
        )
