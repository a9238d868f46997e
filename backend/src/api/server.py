"""FastAPI application factory for the Kennedy classification API."""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware

import kennedy
from kennedy.config import get_settings
from kennedy.engine import default_classifier
from logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="Kennedy Classification API",
        description="Kennedy classification of partially edentulous dental arches",
        version=kennedy.__version__,
    )

    # Descriptor overrides load eagerly
    try:
        default_classifier()
    except Exception:
        logger.exception("Descriptor loading failed")
        raise

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    from api.routes import classification_router, system_router

    app.include_router(system_router)
    app.include_router(classification_router)

    return app


def main():
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    app = create_app()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
