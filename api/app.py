import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response

from api.core.config import get_settings
from api.core.log import configure_logging
from api.core.responses import IndentedJSONResponse, message_response
from api.repositories.sql_repository import StorageError
from api.routers import cars as cars_router
from api.services.car_service import CarService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load the mirror once per process; a storage failure here aborts startup.
    settings = get_settings()
    logger.info("Opening car storage at %s", settings.database_url)
    car_service = CarService()
    car_service.load()
    app.state.car_service = car_service
    try:
        yield
    finally:
        app.state.car_service = None


async def _storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return message_response("storage error.", 500)


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    # Unparsable bodies get a bare 400, no payload.
    logger.info("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    return Response(status_code=400)


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Cars API",
        lifespan=lifespan,
        default_response_class=IndentedJSONResponse,
    )
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.include_router(cars_router.router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
