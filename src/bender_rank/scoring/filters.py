"""Listing filters for the catalog and comparison pages.

Filters are simple predicates over a product. Every active filter must
pass (logical AND); inactive filters are ``None``, ``False`` or ``"all"``.
An empty result is valid.
"""

from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, Field

from bender_rank.scoring.models import USA_ORIGINS, Product
from bender_rank.scoring.parsing import parse_listing_price


class BenderType(str, Enum):
    """Power classification used by the listing filter."""

    ALL = "all"
    MANUAL = "manual"
    HYDRAULIC = "hydraulic"


class PriceBucket(str, Enum):
    """Price tiers derived from the listing price."""

    ALL = "all"
    BUDGET = "budget"  # < $800
    MID = "mid"  # $800 - $1,499
    PREMIUM = "premium"  # >= $1,500


# Lower bounds of the mid and premium buckets
MID_BUCKET_FLOOR = 800.0
PREMIUM_BUCKET_FLOOR = 1500.0


class ListingFilters(BaseModel):
    """Filter state for catalog listings."""

    max_price: Optional[float] = Field(None, ge=0, description="Listing price ceiling")
    usa_only: bool = Field(False, description="Only USA-made products")
    pipe_capable: bool = Field(False, description="Feature list mentions pipe/round tube")
    square_tube_capable: bool = Field(
        False, description="Feature list mentions square/rectangular tube"
    )
    feature_search: Optional[str] = Field(None, description="Substring searched in features")
    bender_type: BenderType = Field(BenderType.ALL, description="Manual or hydraulic")
    category: Optional[str] = Field(None, description="Exact category, e.g. 'professional'")
    price_bucket: PriceBucket = Field(PriceBucket.ALL, description="budget, mid or premium")
    brand: Optional[str] = Field(None, description="Exact brand")
    country_of_origin: Optional[str] = Field(None, description="Exact country of origin")


def listing_price(product: Product) -> float:
    """Price used by listing filters (first amount of the display price)."""
    return parse_listing_price(product.price_range)


def is_hydraulic(product: Product) -> bool:
    """Whether a product counts as hydraulic.

    Hydraulic when the power type or any feature mentions "hydraulic".
    """
    if "hydraulic" in product.power_type.lower():
        return True
    return any("hydraulic" in feature.lower() for feature in product.features)


def has_feature(product: Product, *terms: str) -> bool:
    """Whether any feature contains any of the terms (case-insensitive)."""
    lowered = [term.lower() for term in terms]
    return any(
        term in feature.lower() for feature in product.features for term in lowered
    )


def price_bucket_for(product: Product) -> PriceBucket:
    """Classify a product into a price bucket."""
    price = listing_price(product)
    if price < MID_BUCKET_FLOOR:
        return PriceBucket.BUDGET
    if price < PREMIUM_BUCKET_FLOOR:
        return PriceBucket.MID
    return PriceBucket.PREMIUM


def build_predicates(filters: ListingFilters) -> list[Callable[[Product], bool]]:
    """Build one predicate per active filter."""
    predicates: list[Callable[[Product], bool]] = []

    # --- Price ---

    if filters.max_price is not None:
        max_price = filters.max_price
        predicates.append(lambda p: listing_price(p) <= max_price)

    if filters.price_bucket is not PriceBucket.ALL:
        bucket = filters.price_bucket
        predicates.append(lambda p: price_bucket_for(p) is bucket)

    # --- Origin ---

    if filters.usa_only:
        predicates.append(lambda p: p.country_of_origin in USA_ORIGINS)

    if filters.country_of_origin:
        origin = filters.country_of_origin
        predicates.append(lambda p: p.country_of_origin == origin)

    # --- Die / feature capability ---

    if filters.pipe_capable:
        predicates.append(lambda p: has_feature(p, "pipe", "round tube"))

    if filters.square_tube_capable:
        predicates.append(lambda p: has_feature(p, "square", "rectangular"))

    if filters.feature_search:
        term = filters.feature_search
        predicates.append(lambda p: has_feature(p, term))

    # --- Classification ---

    if filters.bender_type is BenderType.HYDRAULIC:
        predicates.append(is_hydraulic)
    elif filters.bender_type is BenderType.MANUAL:
        predicates.append(lambda p: not is_hydraulic(p))

    if filters.category:
        category = filters.category
        predicates.append(lambda p: p.category == category)

    if filters.brand:
        brand = filters.brand
        predicates.append(lambda p: p.brand == brand)

    return predicates


def apply_filters(products: list[Product], filters: ListingFilters) -> list[Product]:
    """Apply all active filters, preserving input order.

    Args:
        products: Candidate products
        filters: Filter state

    Returns:
        New list of products passing every active filter
    """
    predicates = build_predicates(filters)
    return [p for p in products if all(predicate(p) for predicate in predicates)]


def active_filter_count(filters: ListingFilters, products: list[Product]) -> int:
    """Count active filters.

    A price ceiling only counts when it is below the catalog's highest
    listing price (otherwise it excludes nothing).
    """
    highest = max((listing_price(p) for p in products), default=0.0)
    flags = [
        filters.max_price is not None and filters.max_price < highest,
        filters.usa_only,
        filters.pipe_capable,
        filters.square_tube_capable,
        bool(filters.feature_search),
        filters.bender_type is not BenderType.ALL,
        bool(filters.category),
        filters.price_bucket is not PriceBucket.ALL,
        bool(filters.brand),
        bool(filters.country_of_origin),
    ]
    return sum(flags)
