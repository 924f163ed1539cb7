"""FastAPI application factory for the catalog content API."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from content import ContentRepository

from .config import APIConfig, load_config
from .routes import router


def create_app(
    config: APIConfig | None = None,
    repository: ContentRepository | None = None,
) -> FastAPI:
    """Create the API application.

    Args:
        config: API configuration (default: load_config(), which reads the
            nearest catalog.config.yaml and CATALOG_* env vars).
        repository: Content repository to serve. When omitted, each request
            builds one from catalog.config.yaml and CATALOG_* env vars.

    Returns:
        Configured FastAPI app.
    """
    config = config or load_config()

    logging.basicConfig(
        level=logging.DEBUG if config.debug else config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Clock Catalog Content API", debug=config.debug)
    app.state.config = config
    app.state.repository = repository
    app.include_router(router)
    return app


app = create_app()
