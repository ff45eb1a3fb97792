import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from db import create_db_and_tables
from utils.error_handler import register_exception_handlers
from web.api_router import api_router
from web.catalog_router import catalog_router
from web.user_router import user_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown."""
    # Startup
    await create_db_and_tables()
    logging.info(f"[Startup] Store API ready ({config.RUNTIME_ENVIRONMENT.value})")

    yield

    # Shutdown
    logging.warning('Shutting down..')


def create_app() -> FastAPI:
    app = FastAPI(title="Store API", lifespan=lifespan)

    if config.CORS_ALLOWED_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ALLOWED_ORIGINS,
            allow_credentials=False,
            allow_methods=["GET", "POST", "PATCH", "DELETE"],
            allow_headers=["Content-Type", "X-User-Id", "X-User-Role"],
        )
        logging.info(f"[Startup] CORS middleware enabled for origins: {config.CORS_ALLOWED_ORIGINS}")
    else:
        logging.debug("[Startup] CORS middleware disabled (no allowed origins configured)")

    app.include_router(catalog_router)
    app.include_router(api_router)
    app.include_router(user_router)
    register_exception_handlers(app)

    # Health check endpoint (for container monitoring)
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()


def main() -> None:
    uvicorn.run(app, host=config.WEBAPP_HOST, port=config.WEBAPP_PORT)
