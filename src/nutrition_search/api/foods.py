"""Single-food lookup endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from fastapi import APIRouter, HTTPException, Request, status

from nutrition_search.api.models import ProductModel
from nutrition_search.services.catalog import to_product

if TYPE_CHECKING:
    from nutrition_search.containers import AppContainer
    from nutrition_search.domain.products import Product

router = APIRouter(prefix="/foods", tags=["foods"])

_logger = logging.getLogger(__name__)


@router.get("/local/{food_id}")
async def local_food(food_id: str, request: Request) -> ProductModel:
    """Return a catalog food by id."""
    container: AppContainer = request.app.state.container
    food = container.catalog.get_food(food_id)
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return ProductModel.model_validate(to_product(food))


@router.get("/usda/{fdc_id}")
async def usda_food(fdc_id: int, request: Request) -> ProductModel:
    """Return a USDA food by FDC id."""
    container: AppContainer = request.app.state.container
    try:
        product = await container.usda.get_food(fdc_id)
    except httpx.HTTPError as exc:
        product = _not_found_or_raise(exc, f"USDA food {fdc_id}")
    return _found(product)


@router.get("/barcode/{barcode}")
async def barcode_product(barcode: str, request: Request) -> ProductModel:
    """Return an Open Food Facts product by barcode."""
    container: AppContainer = request.app.state.container
    try:
        product = await container.open_food_facts.get_by_barcode(barcode)
    except httpx.HTTPError as exc:
        product = _not_found_or_raise(exc, f"barcode {barcode}")
    return _found(product)


def _found(product: Product | None) -> ProductModel:
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return ProductModel.model_validate(product)


def _not_found_or_raise(exc: httpx.HTTPError, label: str) -> None:
    if (
        isinstance(exc, httpx.HTTPStatusError)
        and exc.response.status_code == httpx.codes.NOT_FOUND
    ):
        return None
    _logger.warning("Lookup for %s failed: %s", label, exc)
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY) from exc
