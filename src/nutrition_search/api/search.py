"""Search endpoints."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from nutrition_search.api.models import (
    ProductModel,
    RecentSearchModel,
    SearchResponse,
    TrendingTermModel,
)
from nutrition_search.services.filters import QuickFilter, apply_quick_filter
from nutrition_search.services.query import expand_abbreviations

if TYPE_CHECKING:
    from nutrition_search.containers import AppContainer

router = APIRouter(prefix="/search", tags=["search"])


@router.get("")
async def search(  # noqa: PLR0913
    request: Request,
    q: str = "",
    page_size: int | None = Query(default=None, ge=1, le=50),
    timeout_ms: int | None = Query(default=None, ge=100, le=30000),
    quick_filter: QuickFilter | None = Query(default=None, alias="filter"),
    rank: bool = True,
) -> SearchResponse:
    """Search the local catalog and every configured source."""
    container: AppContainer = request.app.state.container
    settings = container.settings
    local_results = container.catalog.search_products(expand_abbreviations(q))
    service = container.search_service
    if not rank:
        service = replace(service, rank_results=False)
    result = await service.search_all_sources(
        q,
        local_results,
        page_size=page_size or settings.search_page_size,
        timeout_ms=timeout_ms or settings.search_timeout_ms,
    )
    if q.strip():
        service.commit_search(q.strip(), len(result.products))
    products = apply_quick_filter(result.products, quick_filter)
    return SearchResponse(
        products=[ProductModel.model_validate(product) for product in products],
        count=result.count,
        sources=result.sources,
    )


@router.get("/recent")
async def recent_searches(
    request: Request, limit: int = Query(default=10, ge=1, le=50)
) -> dict[str, object]:
    """Return the most recent committed searches."""
    container: AppContainer = request.app.state.container
    recent = container.history_service.get_recent_searches(limit)
    return {"recent": [RecentSearchModel.model_validate(item) for item in recent]}


@router.delete("/recent")
async def clear_recent_searches(request: Request) -> dict[str, str]:
    """Forget every recent search."""
    container: AppContainer = request.app.state.container
    container.history_service.clear_recent_searches()
    return {"status": "ok"}


@router.get("/trending")
async def trending_terms(
    request: Request, limit: int = Query(default=8, ge=1, le=30)
) -> dict[str, object]:
    """Return the most frequently searched terms."""
    container: AppContainer = request.app.state.container
    trending = container.history_service.get_trending_terms(limit)
    return {"trending": [TrendingTermModel.model_validate(item) for item in trending]}
