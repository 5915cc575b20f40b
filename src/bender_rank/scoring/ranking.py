"""Score-based ranking of catalog products.

Products are ordered by descending total score. Ties keep their input
order; the sort key carries the input index so this does not depend on
sort stability.
"""

import logging
from typing import Optional

from bender_rank.config import get_settings
from bender_rank.scoring.filters import ListingFilters, apply_filters
from bender_rank.scoring.models import Product, ScoredProduct
from bender_rank.scoring.scorer import score_product_safe

logger = logging.getLogger(__name__)


def score_catalog(products: list[Product]) -> list[ScoredProduct]:
    """Score every product, in input order."""
    return [
        ScoredProduct(product=product, breakdown=score_product_safe(product))
        for product in products
    ]


def rank_scored(products: list[Product]) -> list[ScoredProduct]:
    """Score and sort products by descending total.

    Args:
        products: Products to rank (not modified)

    Returns:
        New list of ScoredProduct, highest total first, ties in input order
    """
    scored = score_catalog(products)
    order = sorted(
        range(len(scored)),
        key=lambda index: (-scored[index].total_score, index),
    )
    return [scored[index] for index in order]


def rank_products(products: list[Product]) -> list[Product]:
    """Sort products by descending total score (stable)."""
    return [item.product for item in rank_scored(products)]


def filter_and_rank(products: list[Product], filters: ListingFilters) -> list[Product]:
    """Apply listing filters, then rank the survivors."""
    survivors = apply_filters(products, filters)
    logger.debug(f"Filters kept {len(survivors)} of {len(products)} products")
    return rank_products(survivors)


def recommended_products(
    products: list[Product],
    limit: Optional[int] = None,
) -> list[Product]:
    """Top products by score ("top picks").

    Args:
        products: Catalog products
        limit: How many to return (defaults to settings.recommended_limit)

    Returns:
        The first ``limit`` products of the ranking
    """
    if limit is None:
        limit = get_settings().recommended_limit
    recommended = rank_products(products)[: max(0, limit)]
    logger.debug(f"Generated {len(recommended)} recommendations")
    return recommended
