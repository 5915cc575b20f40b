"""Tube bender scoring module."""

from bender_rank.scoring.criteria import CRITERIA, SCORING_CRITERIA
from bender_rank.scoring.filters import (
    BenderType,
    ListingFilters,
    PriceBucket,
    active_filter_count,
    apply_filters,
    is_hydraulic,
)
from bender_rank.scoring.models import (
    Criterion,
    Product,
    ScoreBreakdown,
    ScoredProduct,
    ScoreEntry,
)
from bender_rank.scoring.ranking import (
    filter_and_rank,
    rank_products,
    rank_scored,
    recommended_products,
    score_catalog,
)
from bender_rank.scoring.scorer import (
    fallback_breakdown,
    score_product,
    score_product_safe,
    scoring_methodology,
)

__all__ = [
    # Models
    "Criterion",
    "Product",
    "ScoreBreakdown",
    "ScoredProduct",
    "ScoreEntry",
    # Criteria
    "CRITERIA",
    "SCORING_CRITERIA",
    # Scorer
    "fallback_breakdown",
    "score_product",
    "score_product_safe",
    "scoring_methodology",
    # Filters
    "BenderType",
    "ListingFilters",
    "PriceBucket",
    "active_filter_count",
    "apply_filters",
    "is_hydraulic",
    # Ranking
    "filter_and_rank",
    "rank_products",
    "rank_scored",
    "recommended_products",
    "score_catalog",
]
