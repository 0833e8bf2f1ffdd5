# app/main.py
import logging
import sys
from typing import Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import settings
from .core import seed_store
from .database import ProductStore
from .handlers import get_product_logic, update_product_details_logic
from .models import ErrorResponse, Product

logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.LOG_LEVEL):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------
# Helpers
# ---------------------------
def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    body = ErrorResponse(code=status_code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


# ---------------------------
# Product endpoints
# ---------------------------
router = APIRouter()


@router.get(
    "/products/{product_id}",
    response_model=Product,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return get_product_logic(store, product_id)


@router.post(
    "/products/{product_id}/details",
    status_code=204,
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_product_details(product_id: str, request: Request, store: ProductStore = Depends(get_store)):
    body = await request.body()
    # the store lock is a blocking one, keep it off the event loop
    await run_in_threadpool(update_product_details_logic, store, product_id, body)
    return Response(status_code=204)


@router.get("/health", response_class=PlainTextResponse)
def health():
    return "OK"


# ---------------------------
# App factory
# ---------------------------
def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    if store is None:
        store = ProductStore()
        seed_store(store)

    app = FastAPI(title="product-catalog (in-memory)")
    app.state.store = store
    app.include_router(router)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    # Registered first so it sits inside the request logger.
    @app.middleware("http")
    async def recover_unhandled_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error serving %s %s", request.method, request.url.path)
            return error_response(500, "Internal server error")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        uri = request.url.path
        if request.url.query:
            uri = f"{uri}?{request.url.query}"
        remote = f"{request.client.host}:{request.client.port}" if request.client else "-"
        logger.info("[%s] %s %s", request.method, uri, remote)
        return await call_next(request)

    return app


app = create_app()


def main():
    configure_logging()
    server_app = create_app()
    ids = server_app.state.store.ids()
    logger.info("Starting server on port %s", settings.PORT)
    logger.info(
        "Initial products seeded: %d products available (IDs: %s)",
        len(ids), ", ".join(str(i) for i in ids),
    )
    try:
        uvicorn.run(
            server_app,
            host=settings.HOST,
            port=settings.PORT,
            log_level=settings.LOG_LEVEL.lower(),
            access_log=False,
        )
    except OSError as e:
        logger.critical("Server failed to start: %s", e)
        sys.exit(1)
    except SystemExit as e:
        # uvicorn exits on its own when it cannot bind
        if e.code:
            logger.critical("Server failed to start: exit status %s", e.code)
        raise


if __name__ == "__main__":
    main()
