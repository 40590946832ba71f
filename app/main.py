import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pymongo import MongoClient
from app.core.config import Settings, get_settings
from app.core.email import EmailNotifier
from app.core.errors import (
    AppError,
    handle_app_error,
    handle_request_validation_error,
    internal_error_boundary,
)
from app.core.logging import configure_logging
from app.core.mongo import create_client, ensure_indexes, get_database
from app.core.security import TokenSigner
from app.routes.auth import router as auth_router
from app.routes.dashboard import router as dashboard_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    owns_client = app.state.mongo_client is None
    if owns_client:
        app.state.mongo_client = create_client(settings)
    app.state.db = get_database(app.state.mongo_client, settings)
    ensure_indexes(app.state.db)
    logger.info("Connected to MongoDB database %s", settings.mongo_db)
    try:
        yield
    finally:
        if owns_client:
            app.state.mongo_client.close()


def create_app(settings: Settings | None = None, mongo_client: MongoClient | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Auth API", lifespan=lifespan)
    app.state.settings = settings
    app.state.mongo_client = mongo_client
    app.state.db = None
    app.state.token_signer = TokenSigner(settings)
    app.state.notifier = EmailNotifier(settings)

    # Registered before CORS so CORS stays outermost and error responses keep their headers.
    app.middleware("http")(internal_error_boundary)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    app.include_router(auth_router)
    app.include_router(dashboard_router)
    return app


app = create_app()
