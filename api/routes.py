"""FastAPI route handlers for the catalog content API.

These are thin read-only wrappers over `ContentRepository`. The repository
already degrades failures to empty results, so handlers only translate
"absent" into 404 where a single record was requested.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from content import ContentRepository, get_repository

from .config import APIConfig
from .schemas import HealthResponse, HoursErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_content_repository(request: Request) -> ContentRepository:
    """Repository attached by create_app(), or one built from env/config file."""
    repository = getattr(request.app.state, "repository", None)
    return repository if repository is not None else get_repository()


def get_api_config(request: Request) -> APIConfig:
    config = getattr(request.app.state, "config", None)
    return config if config is not None else APIConfig()


@router.get("/products")
def list_products(
    category: str | None = None,
    repository: ContentRepository = Depends(get_content_repository),
) -> list[dict[str, Any]]:
    """List catalog products, optionally filtered by category name or id."""
    if category:
        products = repository.find_products_by_category(category)
    else:
        products = repository.load_products()
    return [product.to_wire() for product in products]


@router.get("/products/{product_id}")
def get_product(
    product_id: str,
    repository: ContentRepository = Depends(get_content_repository),
) -> dict[str, Any]:
    """Fetch one product by id or slug."""
    product = repository.find_product_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product.to_wire()


@router.get("/categories")
def list_categories(
    repository: ContentRepository = Depends(get_content_repository),
) -> list[dict[str, Any]]:
    return [category.to_wire() for category in repository.load_categories()]


@router.get("/business-hours", responses={500: {"model": HoursErrorResponse}})
def list_business_hours(
    response: Response,
    repository: ContentRepository = Depends(get_content_repository),
    config: APIConfig = Depends(get_api_config),
) -> Any:
    """Business hours Monday -> Sunday, with shared-cache hints."""
    try:
        hours = [hour.to_wire() for hour in repository.load_business_hours()]
    except Exception:
        logger.exception("Error fetching business hours")
        return JSONResponse(
            status_code=500,
            content=HoursErrorResponse(error="Failed to load business hours").model_dump(),
        )

    response.headers["Cache-Control"] = config.cache_control
    return hours


@router.get("/contact")
def get_contact(
    repository: ContentRepository = Depends(get_content_repository),
) -> dict[str, Any]:
    """Contact details, location and holiday note."""
    contact = repository.load_business_contact()
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact information not available")
    return contact.to_wire()


@router.get("/health", response_model=HealthResponse)
def health(
    repository: ContentRepository = Depends(get_content_repository),
) -> HealthResponse:
    formats = repository.describe()
    return HealthResponse(
        status="ok",
        products_format=formats["products"],
        hours_format=formats["hours"],
    )
