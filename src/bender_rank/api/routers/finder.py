"""Finder endpoints.

Endpoints:
- POST /finder/basic - shortlist from the basic wizard's answers
- POST /finder/enhanced - shortlist from the enhanced wizard's answers
"""

from fastapi import APIRouter, Depends

from bender_rank.api.dependencies import get_products
from bender_rank.finder import (
    BasicFinderCriteria,
    FinderCriteria,
    MatchResult,
    basic_match,
    enhanced_match,
)
from bender_rank.scoring import Product

router = APIRouter(prefix="/finder", tags=["finder"])


@router.post("/basic", response_model=list[MatchResult])
async def find_basic(
    criteria: BasicFinderCriteria,
    products: list[Product] = Depends(get_products),
) -> list[MatchResult]:
    """Top matches for the basic finder."""
    return basic_match(products, criteria)


@router.post("/enhanced", response_model=list[MatchResult])
async def find_enhanced(
    criteria: FinderCriteria,
    products: list[Product] = Depends(get_products),
) -> list[MatchResult]:
    """Top matches for the enhanced finder (eliminated candidates never appear)."""
    return enhanced_match(products, criteria)
