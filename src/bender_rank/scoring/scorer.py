"""Transparent point scoring for tube benders.

Each product is scored against the eleven criteria in
``bender_rank.scoring.criteria``; the total is the plain sum of the awarded
points (0-100). No weighting or rounding is applied beyond the ladders.

If full scoring fails, callers can fall back to a coarse estimate derived
from the product's 0-10 editorial rating scaled to 100 (degraded mode).
"""

import logging
import math

from bender_rank.scoring.criteria import CRITERIA, SCORING_CRITERIA
from bender_rank.scoring.models import Product, ScoreBreakdown, ScoreEntry
from bender_rank.scoring.parsing import parse_leading_number

logger = logging.getLogger(__name__)

FALLBACK_CRITERION = "Overall Rating"


def score_product(product: Product) -> ScoreBreakdown:
    """Score a product against all eleven criteria.

    This is the main entry point for scoring a product. It is pure and
    deterministic: the same product always yields the same breakdown.

    Args:
        product: Product to score

    Returns:
        ScoreBreakdown with one entry per criterion, in criterion order
    """
    entries = tuple(criterion.evaluate(product) for criterion in CRITERIA)
    return ScoreBreakdown(product_id=product.id, entries=entries)


def fallback_breakdown(product: Product) -> ScoreBreakdown:
    """Coarse single-entry score from the product's 0-10 rating.

    A rating of "8.5" becomes 85 points. Unparseable ratings score 0;
    ratings are clamped to 0-10 first, so results stay within 0-100.
    """
    rating = parse_leading_number(product.rating)
    if rating is None:
        base_score = 0
    else:
        # Clamp first: very long digit strings parse to inf
        rating = max(0.0, min(10.0, rating))
        # Half-up rounding: "8.25" -> 83
        base_score = math.floor(rating * 10 + 0.5)

    entry = ScoreEntry(
        criterion=FALLBACK_CRITERION,
        points=base_score,
        max_points=100,
        reasoning=f"Based on {product.rating}/10 rating",
    )
    return ScoreBreakdown(product_id=product.id, entries=(entry,), degraded=True)


def score_product_safe(product: Product) -> ScoreBreakdown:
    """Score a product, degrading to the rating estimate on failure.

    Display code uses this so a scoring failure never blocks rendering.
    """
    try:
        return score_product(product)
    except Exception as e:
        logger.warning(f"Full scoring failed for product {product.id}, using rating fallback: {e}")
        return fallback_breakdown(product)


def scoring_methodology() -> str:
    """Render the published scoring methodology as markdown."""
    total = sum(criterion.max_points for criterion in SCORING_CRITERIA)
    criteria_text = "\n\n".join(
        f"**{criterion.name}** ({criterion.max_points} points): {criterion.description}"
        for criterion in SCORING_CRITERIA
    )
    return f"""## Tube Bender Scoring Methodology

Our transparent scoring system evaluates tube benders across {len(SCORING_CRITERIA)} key criteria. Each bender receives 0-{total} points total.

### Scoring Criteria:

{criteria_text}

### Scoring Philosophy:
- Every point is traceable to a published rule
- Emphasizes value, build quality, and user experience
- Includes areas where different brands excel
- No single brand dominates all categories"""
