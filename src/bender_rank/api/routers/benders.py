"""Tube bender listing and scoring endpoints.

Endpoints:
- GET /tube-benders - all products, ranked by score
- GET /tube-benders/recommended - top picks by score
- GET /tube-benders/filter - listing filters, then ranked
- GET /tube-benders/{id} - one product
- GET /tube-benders/{id}/score - point-by-point score breakdown
- GET /scoring/methodology - published scoring methodology
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from bender_rank.api.dependencies import get_products
from bender_rank.catalog import find_product
from bender_rank.scoring import (
    SCORING_CRITERIA,
    BenderType,
    Criterion,
    ListingFilters,
    PriceBucket,
    Product,
    ScoreBreakdown,
    active_filter_count,
    filter_and_rank,
    rank_products,
    recommended_products,
    score_product_safe,
    scoring_methodology,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tube-benders", tags=["tube-benders"])
methodology_router = APIRouter(prefix="/scoring", tags=["scoring"])


class FilteredProductsResponse(BaseModel):
    """Filtered, ranked listing."""

    items: list[Product]
    total: int
    active_filters: int


class MethodologyResponse(BaseModel):
    """Scoring methodology as criteria plus rendered markdown."""

    criteria: list[Criterion]
    markdown: str


@router.get("", response_model=list[Product])
async def list_tube_benders(
    products: list[Product] = Depends(get_products),
) -> list[Product]:
    """List all products, highest score first."""
    logger.debug(f"Retrieved {len(products)} tube benders")
    return rank_products(products)


@router.get("/recommended", response_model=list[Product])
async def list_recommended(
    limit: int | None = Query(None, ge=1, le=50, description="Number of top picks"),
    products: list[Product] = Depends(get_products),
) -> list[Product]:
    """Top products by score."""
    return recommended_products(products, limit)


@router.get("/filter", response_model=FilteredProductsResponse)
async def filter_tube_benders(
    max_price: float | None = Query(None, ge=0, description="Listing price ceiling"),
    usa_only: bool = Query(False, description="Only USA-made products"),
    pipe_capable: bool = Query(False, description="Pipe / round tube capable"),
    square_tube_capable: bool = Query(False, description="Square / rectangular capable"),
    feature_search: str | None = Query(None, description="Substring searched in features"),
    bender_type: BenderType = Query(BenderType.ALL, description="all, manual or hydraulic"),
    category: str | None = Query(None, description="Exact category"),
    price_bucket: PriceBucket = Query(PriceBucket.ALL, description="all, budget, mid, premium"),
    brand: str | None = Query(None, description="Exact brand"),
    country_of_origin: str | None = Query(None, description="Exact country of origin"),
    products: list[Product] = Depends(get_products),
) -> FilteredProductsResponse:
    """Apply listing filters, then rank the survivors by score."""
    filters = ListingFilters(
        max_price=max_price,
        usa_only=usa_only,
        pipe_capable=pipe_capable,
        square_tube_capable=square_tube_capable,
        feature_search=feature_search,
        bender_type=bender_type,
        category=category,
        price_bucket=price_bucket,
        brand=brand,
        country_of_origin=country_of_origin,
    )
    items = filter_and_rank(products, filters)
    return FilteredProductsResponse(
        items=items,
        total=len(items),
        active_filters=active_filter_count(filters, products),
    )


@router.get("/{product_id}", response_model=Product)
async def get_tube_bender(
    product_id: int,
    products: list[Product] = Depends(get_products),
) -> Product:
    """Get a product by id."""
    product = find_product(products, product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tube bender not found",
        )
    return product


@router.get("/{product_id}/score", response_model=ScoreBreakdown)
async def get_tube_bender_score(
    product_id: int,
    products: list[Product] = Depends(get_products),
) -> ScoreBreakdown:
    """Get the point-by-point score breakdown for a product."""
    product = find_product(products, product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tube bender not found",
        )
    return score_product_safe(product)


@methodology_router.get("/methodology", response_model=MethodologyResponse)
async def get_methodology() -> MethodologyResponse:
    """Published scoring criteria."""
    return MethodologyResponse(
        criteria=list(SCORING_CRITERIA),
        markdown=scoring_methodology(),
    )
