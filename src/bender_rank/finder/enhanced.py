"""Enhanced finder: eleven criteria with hard eliminations.

Hard filters (candidate is eliminated with a single reason):
- Starting price above budget
- Capacity below the required diameter
- Mandrel required but not offered
- S-bends required but not supported

Soft adjustments:
| Criterion           | Match       | Miss |
|---------------------|-------------|------|
| Budget              | +20 (+5)    | elim |
| Diameter            | +15 (+5)    | elim |
| USA preference      | +15         | -5   |
| Mandrel             | +10         | elim |
| Bend angle          | +10 (+3)    | -8   |
| Wall thickness      | +8          | -5   |
| Die shapes          | +8          | 0    |
| Reliability         | +7          | 0    |
| Modular clamping    | +6          | -3   |
| S-bend              | +4          | elim |
| Ease of use         | +8 / +5     | 0    |
"""

from typing import Optional

from bender_rank.finder.matcher import MatchTally, RecommendationMatcher, register_matcher
from bender_rank.finder.models import DieShape, ExperienceLevel, FinderCriteria, MatchResult
from bender_rank.scoring.models import Product
from bender_rank.scoring.parsing import (
    DEFAULT_FINDER_WALL_THICKNESS,
    format_inches,
    format_price,
    parse_diameter,
    parse_starting_price,
    parse_wall_thickness,
)

ESTABLISHED_BRANDS: frozenset[str] = frozenset({"JD2", "Hossfeld", "RogueFab"})
VERSATILE_DIE_BRANDS: frozenset[str] = frozenset({"RogueFab", "Hossfeld"})
MANDREL_OFFERINGS: frozenset[str] = frozenset({"Available", "Standard"})

# Share of the budget under which a price counts as excellent value
VALUE_THRESHOLD = 0.8
# Capacity headroom that earns the growth bonus
GROWTH_FACTOR = 1.5
EXCEPTIONAL_BEND_ANGLE = 195


def _finder_wall_capacity(product: Product) -> float:
    if not product.wall_thickness_capacity:
        return DEFAULT_FINDER_WALL_THICKNESS
    thickness = parse_wall_thickness(product.wall_thickness_capacity)
    return thickness if thickness is not None else 0.0


class EnhancedMatcher(RecommendationMatcher[FinderCriteria]):
    """Eleven-criterion finder with hard eliminations."""

    name = "enhanced"

    def evaluate(self, product: Product, criteria: FinderCriteria) -> MatchResult:
        tally = MatchTally()

        # 1. Budget: only the starting price matters
        if criteria.budget is not None:
            start = parse_starting_price(product.price_range, product.price_min)
            if start is None:
                tally.eliminate("Starting price unavailable")
                return tally.to_result(product)
            if start > criteria.budget:
                tally.eliminate(f"Starting price {format_price(start)} exceeds budget")
                return tally.to_result(product)
            tally.award(20, "Within Budget")
            if start <= criteria.budget * VALUE_THRESHOLD:
                tally.award(5, reason=f"Excellent value at {format_price(start)}")

        # 2. Diameter capacity
        if criteria.max_diameter is not None:
            capacity = parse_diameter(product.max_capacity)
            if capacity < criteria.max_diameter:
                tally.eliminate(f'Cannot handle {format_inches(criteria.max_diameter)}" diameter')
                return tally.to_result(product)
            tally.award(15, "Diameter Capacity")
            if capacity >= criteria.max_diameter * GROWTH_FACTOR:
                tally.award(5, reason="Handles larger tubes for future growth")

        # 3. USA preference never eliminates
        if criteria.usa_preference:
            if product.is_usa_made:
                tally.award(15, "Made in USA", "American-made quality and support")
            else:
                tally.penalize(5)

        # 4. Mandrel ("Standard" counts here, unlike the objective score)
        if criteria.mandrel_required:
            if product.mandrel_bender not in MANDREL_OFFERINGS:
                tally.eliminate("No mandrel capability available")
                return tally.to_result(product)
            tally.award(10, "Mandrel Available")

        # 5. Bend angle
        if product.bend_angle >= criteria.min_bend_angle:
            tally.award(10, "Bend Angle")
            if product.bend_angle >= EXCEPTIONAL_BEND_ANGLE:
                tally.award(3, reason=f"Exceptional {product.bend_angle}° bend capability")
        else:
            tally.penalize(8, f"Limited to {product.bend_angle}° bends")

        # 6. Wall thickness
        if criteria.wall_thickness is not None:
            if _finder_wall_capacity(product) >= criteria.wall_thickness:
                tally.award(8, "Wall Thickness")
            else:
                tally.penalize(5, "Limited wall thickness capability")

        # 7. Die shapes (brand hint only)
        if criteria.die_shapes:
            if product.brand in VERSATILE_DIE_BRANDS or DieShape.ROUND in criteria.die_shapes:
                tally.award(8, "Die Compatibility")

        # 8. Reliability
        if criteria.reliability_important and product.brand in ESTABLISHED_BRANDS:
            tally.award(7, "Established Brand", "Proven reliability and support")

        # 9. Modular clamping
        if criteria.modular_clamping_needed:
            if product.brand == "RogueFab":
                tally.award(6, "Modular Clamping", "Advanced modular clamping system")
            else:
                tally.penalize(3)

        # 10. S-bend
        if criteria.s_bend_required:
            if not product.s_bend_capability:
                tally.eliminate("No S-bend capability")
                return tally.to_result(product)
            tally.award(4, "S-Bend Capable")

        # 11. Ease of use
        self._score_ease_of_use(tally, product, criteria.ease_of_use)

        return tally.to_result(product)

    @staticmethod
    def _score_ease_of_use(
        tally: MatchTally,
        product: Product,
        level: Optional[ExperienceLevel],
    ) -> None:
        if level is ExperienceLevel.BEGINNER and product.brand == "RogueFab":
            tally.award(8, "Beginner Friendly", "User-friendly design and setup")
        elif level is ExperienceLevel.ADVANCED and (
            product.category == "professional" or product.brand == "RogueFab"
        ):
            tally.award(8, "Professional Grade", "Advanced features for professionals")
        elif level is ExperienceLevel.INTERMEDIATE:
            tally.award(5, "Moderate Complexity")


enhanced_matcher = register_matcher(EnhancedMatcher())


def enhanced_match(
    products: list[Product],
    criteria: FinderCriteria,
    limit: Optional[int] = None,
) -> list[MatchResult]:
    """Shortlist products with the enhanced finder."""
    return enhanced_matcher.match(products, criteria, limit)
