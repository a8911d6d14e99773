"""FastAPI application factory for the Jobly API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobly.config import load_config
from jobly.db import init_db
from jobly.errors import JoblyError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load config and open the database for the app's lifetime."""
    config = load_config()
    engine = init_db(config.db_path)

    app.state.config = config
    app.state.engine = engine
    logger.info("Jobly API using database %s", config.db_path)

    yield

    engine.dispose()


def _error_response(message, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


def _format_validation_error(err: dict) -> str:
    location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
    return f"{location}: {err['msg']}" if location else err["msg"]


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(JoblyError)
    async def jobly_error_handler(request: Request, exc: JoblyError):
        return _error_response(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        messages = [_format_validation_error(err) for err in exc.errors()]
        return _error_response(messages, 400)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.detail, exc.status_code)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Jobly", lifespan=lifespan)
    register_error_handlers(app)

    from jobly.web.routes import router

    app.include_router(router)

    return app
