import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from eclat import __version__
from eclat.crud.stores import build_stores
from eclat.routers.admin_router import router as admin_router, stats_router
from eclat.routers.contact_routes import router as contact_router
from eclat.routers.customer_router import router as customer_router
from eclat.routers.menu_router import router as menu_router
from eclat.routers.order_routes import router as order_router
from eclat.routers.reservation_routes import router as reservation_router
from eclat.routers.ws_router import router as ws_router
from eclat.utils.config import Settings, settings as default_settings
from eclat.utils.middleware.logger import LoggingMiddleware, setup_logging
from eclat.utils.ws_manager import WebSocketManager

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        detail = exc.detail
        if exc.status_code == status.HTTP_404_NOT_FOUND and detail == "Not Found" and request.url.path.startswith("/api/"):
            detail = "API endpoint not found"
        return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Internal server error"})


def create_app(settings: Settings = None, stores=None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME, version=__version__)
    app.state.settings = settings
    app.state.stores = stores if stores is not None else build_stores(settings)
    app.state.feed = WebSocketManager()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    register_exception_handlers(app)

    @app.get("/", tags=["Health"])
    def root():
        return {"service": settings.APP_NAME, "status": "ok"}

    app.include_router(menu_router)
    app.include_router(order_router)
    app.include_router(reservation_router)
    app.include_router(contact_router)
    app.include_router(customer_router)
    app.include_router(admin_router)
    app.include_router(stats_router)
    app.include_router(ws_router)
    return app


app = create_app()


def main():
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=default_settings.PORT)


if __name__ == "__main__":
    main()
