"""FastAPI endpoint for the box packer."""

from __future__ import annotations

import json
import logging
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from box_packer.catalog import Catalog, UnknownProductError, load_catalog, validate_selections
from box_packer.config import Settings
from box_packer.models import Box, Product, ProductSelection
from box_packer.packer import pack_products
from box_packer.report import format_result, summarize

# Load .env once (e.g. local dev); does not override existing env
load_dotenv()

logger = logging.getLogger(__name__)


class PackRequest(BaseModel):
    """Request body for /pack. products/boxes override the configured catalog."""
    selections: list[ProductSelection] = Field(description="Requested products and quantities")
    products: list[Product] | None = Field(default=None, description="Inline product catalog")
    boxes: list[Box] | None = Field(default=None, description="Inline box type catalog")


app = FastAPI(
    title="Box Packer API",
    description="Assigns product quantities to catalog boxes",
)

_startup_settings = Settings.from_env()
if _startup_settings.cors_origin_regex:
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=_startup_settings.cors_origin_regex,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        max_age=3600,
    )


def _error(code: str, summary: str, details: Any = None) -> Response:
    error_response = {"error": code, "summary": summary, "details": details}
    return Response(
        content=json.dumps(error_response),
        status_code=422,
        media_type="application/json",
    )


def configured_catalog(settings: Settings) -> Catalog | None:
    if not settings.catalog_path:
        return None
    return load_catalog(settings.catalog_path)


def _catalog_unavailable(settings: Settings, exc: Exception) -> Response:
    logger.warning(f"Configured catalog unavailable: {exc}")
    return _error(
        "MISSING_CATALOG",
        f"Configured catalog could not be loaded: {settings.catalog_path}",
        str(exc),
    )


@app.post("/pack")
async def pack(request: PackRequest) -> Any:
    """
    Pack the requested selections.

    Input (request body):
        {
            "selections": [{"product_id": 1, "quantity": 3}],
            "products": [...],   # optional
            "boxes": [...]       # optional
        }

    Returns:
        {"result": PackingResult, "metrics": {...}, "summary": "..."}
    """
    settings = Settings.from_env()
    try:
        validate_selections(request.selections, settings.max_selections)
    except ValueError as e:
        return _error("TOO_MANY_SELECTIONS", str(e), {"max_selections": settings.max_selections})

    try:
        products, boxes = request.products, request.boxes
        if products is None or boxes is None:
            try:
                configured = configured_catalog(settings)
            except (OSError, ValueError) as e:
                return _catalog_unavailable(settings, e)
            if configured is None:
                return _error(
                    "MISSING_CATALOG",
                    "No catalog configured; include 'products' and 'boxes' in the request.",
                    [name for name, value in (("products", products), ("boxes", boxes)) if value is None],
                )
            products = configured.products if products is None else products
            boxes = configured.boxes if boxes is None else boxes

        try:
            result = pack_products(request.selections, products, boxes)
        except UnknownProductError as e:
            return _error("UNKNOWN_PRODUCT", str(e), {"product_id": e.product_id, "valid_ids": e.valid_ids})
        except ValueError as e:
            return _error("INVALID_CATALOG", str(e))

        metrics = summarize(result)
        logger.info(
            f"boxes={metrics['box_count']}, units_packed={metrics['units_packed']}, "
            f"units_unpacked={metrics['units_unpacked']}"
        )
        return {
            "result": result.model_dump(mode="json"),
            "metrics": metrics,
            "summary": format_result(result),
        }
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/catalog")
async def catalog() -> Any:
    """Configured products and box types."""
    settings = Settings.from_env()
    try:
        configured = configured_catalog(settings)
    except (OSError, ValueError) as e:
        return _catalog_unavailable(settings, e)
    if configured is None:
        raise HTTPException(status_code=404, detail="No catalog configured")
    return configured.model_dump(mode="json")


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "ok": True,
        "has_catalog": bool(Settings.from_env().catalog_path),
    }
