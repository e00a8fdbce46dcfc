"""Fan-out search across the local catalog and external food sources."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import partial
from typing import Protocol

from nutrition_search.domain.products import (
    Product,
    SearchResult,
    SourceFailure,
    SourceName,
    SourceOutcome,
    SourceResult,
)
from nutrition_search.services.history import SearchHistoryService
from nutrition_search.services.query import canonical_name, expand_abbreviations
from nutrition_search.services.ranking import rank_products

DEFAULT_PAGE_SIZE = 25
DEFAULT_TIMEOUT_MS = 4000
OPTIONAL_TIMEOUT_BONUS_MS = 1000
NUTRITIONIX_MAX_RESULTS = 10

_logger = logging.getLogger(__name__)


class FoodSource(Protocol):
    """A searchable external food source."""

    async def search(
        self, query: str, page_size: int, timeout_ms: int
    ) -> SourceResult:
        """Search the source; may raise on any failure."""


class OptionalFoodSource(FoodSource, Protocol):
    """A food source that needs credentials before it can be called."""

    def is_configured(self) -> bool:
        """Return True when the source can be called."""


@dataclass
class SearchService:
    """Merge local catalog results with every available external source."""

    usda: FoodSource
    open_food_facts: FoodSource
    fatsecret: OptionalFoodSource
    nutritionix: OptionalFoodSource
    history: SearchHistoryService | None = None
    rank_results: bool = True

    async def search_all_sources(
        self,
        query: str,
        local_results: list[Product],
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ) -> SearchResult:
        """Search every enabled source concurrently and merge the results.

        Duplicates across sources are collapsed by canonical name, keeping
        the copy from the highest-priority source. A failing or slow source
        contributes nothing; this method never raises.
        """
        if not query.strip():
            return SearchResult.empty()
        expanded = expand_abbreviations(query)

        calls: dict[SourceName, Callable[[], Awaitable[SourceResult]]] = {
            SourceName.USDA: partial(self.usda.search, expanded, page_size, timeout_ms),
            SourceName.OPEN_FOOD_FACTS: partial(
                self.open_food_facts.search, expanded, page_size, timeout_ms
            ),
        }
        optional_timeout_ms = timeout_ms + OPTIONAL_TIMEOUT_BONUS_MS
        if _is_configured(SourceName.FATSECRET, self.fatsecret):
            calls[SourceName.FATSECRET] = partial(
                self.fatsecret.search, expanded, page_size, optional_timeout_ms
            )
        if _is_configured(SourceName.NUTRITIONIX, self.nutritionix):
            calls[SourceName.NUTRITIONIX] = partial(
                self.nutritionix.search,
                expanded,
                min(page_size, NUTRITIONIX_MAX_RESULTS),
                optional_timeout_ms,
            )

        timeouts = {
            SourceName.USDA: timeout_ms,
            SourceName.OPEN_FOOD_FACTS: timeout_ms,
            SourceName.FATSECRET: optional_timeout_ms,
            SourceName.NUTRITIONIX: optional_timeout_ms,
        }
        settled = await asyncio.gather(
            *(
                _settle(source, call, timeouts[source])
                for source, call in calls.items()
            )
        )
        outcomes: dict[SourceName, SourceOutcome] = {
            SourceName.LOCAL: SourceResult(
                products=list(local_results), count=len(local_results)
            ),
            **dict(zip(calls, settled, strict=True)),
        }
        result = merge_outcomes(outcomes)
        if self.rank_results:
            result = SearchResult(
                products=rank_products(result.products, expanded),
                count=result.count,
                sources=result.sources,
            )
        return result

    def commit_search(self, term: str, result_count: int) -> None:
        """Record a committed search in the recent and trending history."""
        if self.history is None:
            return
        try:
            self.history.save_recent_search(term, result_count)
            self.history.track_search_term(term)
        except Exception:
            _logger.exception("Failed to record search history for %r", term)


def _is_configured(source: SourceName, adapter: OptionalFoodSource) -> bool:
    try:
        return adapter.is_configured()
    except Exception as exc:
        _logger.warning("%s configuration check failed: %s", source.value, exc)
        return False


async def _settle(
    source: SourceName,
    call: Callable[[], Awaitable[SourceResult]],
    timeout_ms: int,
) -> SourceOutcome:
    try:
        return await asyncio.wait_for(call(), timeout=timeout_ms / 1000)
    except TimeoutError:
        _logger.warning("%s search timed out after %sms", source.value, timeout_ms)
        return SourceFailure(source=source, reason="timeout")
    except Exception as exc:
        _logger.warning("%s search failed: %s", source.value, exc)
        return SourceFailure(source=source, reason=str(exc) or type(exc).__name__)


def merge_outcomes(outcomes: dict[SourceName, SourceOutcome]) -> SearchResult:
    """Merge settled source outcomes in priority order, dropping duplicates."""
    products: list[Product] = []
    seen: set[str] = set()
    sources = {source.value: 0 for source in SourceName}
    count = 0
    for source in SourceName:
        outcome = outcomes.get(source)
        if not isinstance(outcome, SourceResult):
            continue
        count += outcome.count
        for product in outcome.products:
            key = canonical_name(product.name)
            if key in seen:
                continue
            seen.add(key)
            products.append(product)
            sources[source.value] += 1
    return SearchResult(products=products, count=count, sources=sources)
