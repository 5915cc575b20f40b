"""Basic finder: budget, diameter, usage, experience and priority.

Unlike the enhanced finder nothing is eliminated while scoring. Budget
overruns just earn fewer points and an undersized machine takes a -50
penalty; the shortlist then keeps only machines that can bend the
requested diameter.
"""

from typing import Optional

from bender_rank.finder.matcher import MatchTally, RecommendationMatcher, register_matcher
from bender_rank.finder.models import (
    BasicExperience,
    BasicFinderCriteria,
    MatchResult,
    Priority,
    Usage,
)
from bender_rank.scoring.models import Product
from bender_rank.scoring.parsing import parse_diameter, parse_range_start

# Budget overrun still considered
BUDGET_STRETCH = 1.2
GROWTH_FACTOR = 1.5


class BasicMatcher(RecommendationMatcher[BasicFinderCriteria]):
    """Five-question finder."""

    name = "basic"

    def evaluate(self, product: Product, criteria: BasicFinderCriteria) -> MatchResult:
        tally = MatchTally()

        # Budget (unpriced products earn nothing here)
        price = parse_range_start(product.price_range)
        if price is not None:
            if price <= criteria.budget:
                tally.award(25)
            elif price <= criteria.budget * BUDGET_STRETCH:
                tally.award(15, reason="Slightly over budget but excellent value")

        # Diameter capacity
        capacity = parse_diameter(product.max_capacity)
        if capacity >= criteria.max_diameter:
            tally.award(20)
            if capacity >= criteria.max_diameter * GROWTH_FACTOR:
                tally.award(5, reason="Handles larger tubes for future growth")
        else:
            tally.penalize(50)

        # Usage pattern
        if criteria.usage is Usage.HOBBY and product.category == "Manual":
            tally.award(15, reason="Perfect for hobby use")
        elif criteria.usage is Usage.SMALL_BUSINESS and (
            product.category == "Semi-Automatic" or product.brand == "RogueFab"
        ):
            tally.award(15, reason="Great for small business efficiency")
        elif criteria.usage is Usage.PRODUCTION and (
            product.category == "CNC" or product.brand == "RogueFab"
        ):
            tally.award(20, reason="Built for production environments")

        # Experience level
        if criteria.experience is BasicExperience.BEGINNER and product.brand == "RogueFab":
            tally.award(10, reason="User-friendly for beginners")
        elif criteria.experience is BasicExperience.EXPERT and product.category == "CNC":
            tally.award(15, reason="Advanced features for experts")

        # Priority
        if criteria.priority is Priority.QUALITY and (
            product.brand == "RogueFab" or product.is_usa_made
        ):
            tally.award(15, reason="Superior American-made quality")
        elif criteria.priority is Priority.PRICE and not product.is_usa_made:
            tally.award(10, reason="Budget-friendly option")
        elif criteria.priority is Priority.SPEED and product.brand == "RogueFab":
            tally.award(10, reason="Fast setup and operation")

        # Country of origin bonus
        if product.is_usa_made:
            tally.award(10, reason="Made in USA - superior support and quality")

        return tally.to_result(product)

    def is_eligible(self, result: MatchResult, criteria: BasicFinderCriteria) -> bool:
        if parse_diameter(result.product.max_capacity) < criteria.max_diameter:
            return False
        return super().is_eligible(result, criteria)


basic_matcher = register_matcher(BasicMatcher())


def basic_match(
    products: list[Product],
    criteria: BasicFinderCriteria,
    limit: Optional[int] = None,
) -> list[MatchResult]:
    """Shortlist products with the basic finder."""
    return basic_matcher.match(products, criteria, limit)
