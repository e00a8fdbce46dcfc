"""Relevance ranking for merged search results."""

import re

from nutrition_search.domain.products import Product
from nutrition_search.services.completeness import nutrition_completeness_score
from nutrition_search.services.similarity import bigram_similarity

_EXACT = 100.0
_PREFIX = 80.0
_WORD = 60.0
_SUBSTRING = 40.0
_FUZZY_WEIGHT = 30.0
_COMPLETENESS_WEIGHT = 20.0
_IMAGE_BONUS = 5.0
_SERVING_BONUS = 3.0
_BRAND_BONUS = 2.0


def relevance_score(product: Product, query: str) -> float:
    """Combine name match quality with data-quality bonuses."""
    query_lower = query.lower().strip()
    name_lower = product.name.lower()
    if name_lower == query_lower:
        score = _EXACT
    elif name_lower.startswith(query_lower):
        score = _PREFIX
    elif re.search(rf"\b{re.escape(query_lower)}\b", name_lower):
        score = _WORD
    elif query_lower in name_lower:
        score = _SUBSTRING
    else:
        score = bigram_similarity(name_lower, query_lower) * _FUZZY_WEIGHT

    score += nutrition_completeness_score(product) * _COMPLETENESS_WEIGHT
    if product.image:
        score += _IMAGE_BONUS
    if product.serving and product.serving != "100g":
        score += _SERVING_BONUS
    if product.brand:
        score += _BRAND_BONUS
    return score


def rank_products(products: list[Product], query: str) -> list[Product]:
    """Sort products by descending relevance, keeping input order on ties."""
    return sorted(
        products, key=lambda product: relevance_score(product, query), reverse=True
    )
