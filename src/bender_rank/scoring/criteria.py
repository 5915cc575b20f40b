"""The eleven scoring criteria as ordered rule ladders.

Every criterion is a tier ladder: an ordered tuple of ``Rule(predicate,
points)`` pairs evaluated top to bottom, first match wins, with an explicit
default when nothing matches. Each criterion also explains its result in a
fixed-format string that embeds the input driving the decision.

| #  | Criterion                      | Max Points |
|----|--------------------------------|------------|
| 1  | Value for Money                | 20         |
| 2  | Ease of Use & Setup            | 12         |
| 3  | Max Diameter & Radius Capacity | 12         |
| 4  | USA Manufacturing              | 10         |
| 5  | Bend Angle Capability          | 10         |
| 6  | Wall Thickness Capability      | 9          |
| 7  | Die Selection & Shapes         | 8          |
| 8  | Years in Business              | 7          |
| 9  | Modular Clamping System        | 6          |
| 10 | Mandrel Availability           | 4          |
| 11 | S-Bend Capability              | 2          |

Total possible: 100 points
"""

from dataclasses import dataclass
from typing import Callable, Optional

from bender_rank.scoring.models import Criterion, Product, ScoreEntry
from bender_rank.scoring.parsing import parse_wall_thickness

Predicate = Callable[[Product], bool]
Explanation = Callable[[Product, int], str]


@dataclass(frozen=True)
class Rule:
    """One rung of a tier ladder."""

    predicate: Predicate
    points: int
    label: str = ""


@dataclass(frozen=True)
class LadderCriterion:
    """A scoring criterion evaluated as a first-match-wins ladder."""

    criterion: Criterion
    rules: tuple[Rule, ...]
    default_points: int
    explain: Explanation

    @property
    def name(self) -> str:
        return self.criterion.name

    @property
    def max_points(self) -> int:
        return self.criterion.max_points

    def points_for(self, product: Product) -> int:
        """Points from the first matching rule, else the default."""
        for rule in self.rules:
            if rule.predicate(product):
                return rule.points
        return self.default_points

    def evaluate(self, product: Product) -> ScoreEntry:
        points = self.points_for(product)
        return ScoreEntry(
            criterion=self.name,
            points=points,
            max_points=self.max_points,
            reasoning=self.explain(product, points),
        )


# --- Predicate builders ---


def price_mentions(*tokens: str) -> Predicate:
    """Price string contains any of the tokens (case-insensitive)."""
    lowered = tuple(token.lower() for token in tokens)
    return lambda product: any(token in product.price_range.lower() for token in lowered)


def capacity_mentions(*tokens: str) -> Predicate:
    """Capacity string contains any of the tokens (case-insensitive)."""
    lowered = tuple(token.lower() for token in tokens)
    return lambda product: any(token in product.max_capacity.lower() for token in lowered)


def brand_is(*brands: str) -> Predicate:
    return lambda product: product.brand in brands


def power_type_mentions(token: str) -> Predicate:
    return lambda product: token in product.power_type


def bend_angle_at_least(degrees: int) -> Predicate:
    return lambda product: product.bend_angle >= degrees


def wall_thickness_at_least(inches: float) -> Predicate:
    def predicate(product: Product) -> bool:
        thickness = parse_wall_thickness(product.wall_thickness_capacity)
        return thickness is not None and thickness >= inches

    return predicate


# --- Criteria ---

VALUE_FOR_MONEY = LadderCriterion(
    criterion=Criterion(
        name="Value for Money",
        max_points=20,
        description="Price-to-performance ratio based on base/minimum price of the range",
        weight=0.20,
    ),
    # Known price bands; anything else falls through to 0
    rules=(
        Rule(price_mentions("$780", "$885"), 20, "JMR budget options"),
        Rule(price_mentions("$839", "$970"), 19, "Woodward, SWAG"),
        Rule(price_mentions("$1,000", "$1,250"), 17, "JMR RaceLine"),
        Rule(price_mentions("$1,105", "$1,755"), 16, "RogueFab"),
        Rule(price_mentions("$1,609", "$1,895"), 15, "Pro-Tools 105HD"),
        Rule(price_mentions("$2,050", "$2,895"), 12, "Hossfeld, Baileigh"),
        Rule(price_mentions("$3,850", "$5,000"), 8, "Mittler, Pro-Tools BRUTE"),
    ),
    default_points=0,
    explain=lambda product, points: (
        f"Price point {product.price_range} relative to features and capacity"
    ),
)

EASE_OF_USE = LadderCriterion(
    criterion=Criterion(
        name="Ease of Use & Setup",
        max_points=12,
        description="Assembly time, portability, operation simplicity",
        weight=0.12,
    ),
    rules=(
        Rule(brand_is("RogueFab"), 11, "vertical design, portable"),
        Rule(brand_is("SWAG Off Road"), 10, "95% pre-assembled"),
        Rule(brand_is("JD2"), 9, "simple, well-documented"),
        Rule(power_type_mentions("Manual"), 8),
        Rule(power_type_mentions("Hydraulic"), 9),
    ),
    default_points=7,
    explain=lambda product, points: (
        f"{product.power_type} operation with "
        f"{'vertical space-saving design' if product.brand == 'RogueFab' else 'standard setup'}"
    ),
)

CAPACITY = LadderCriterion(
    criterion=Criterion(
        name="Max Diameter & Radius Capacity",
        max_points=12,
        description="Maximum tube diameter and minimum bend radius capability",
        weight=0.12,
    ),
    # Descending diameter order; first match wins
    rules=(
        Rule(capacity_mentions("2.5", "2-1/2"), 12),
        Rule(capacity_mentions("2-3/8", "2.375"), 11),
        Rule(capacity_mentions("2.25", "2-1/4"), 10),
        Rule(capacity_mentions("2.0", '2"'), 9),
        Rule(capacity_mentions("1.75", "1-3/4"), 7),
        Rule(capacity_mentions("1.5", "1-1/2"), 5),
    ),
    default_points=4,
    explain=lambda product, points: f"{product.max_capacity} maximum tube diameter capacity",
)

USA_MANUFACTURING = LadderCriterion(
    criterion=Criterion(
        name="USA Manufacturing",
        max_points=10,
        description="American-made components and assembly",
        weight=0.10,
    ),
    rules=(Rule(lambda product: product.is_usa_made, 10),),
    default_points=0,
    explain=lambda product, points: f"Made in {product.country_of_origin}",
)

BEND_ANGLE = LadderCriterion(
    criterion=Criterion(
        name="Bend Angle Capability",
        max_points=10,
        description="Maximum bend angle achievable (180°+ preferred)",
        weight=0.10,
    ),
    rules=(
        Rule(bend_angle_at_least(195), 10),
        Rule(bend_angle_at_least(180), 8),
        Rule(bend_angle_at_least(120), 5),
    ),
    default_points=3,
    explain=lambda product, points: f"{product.bend_angle}° maximum bend angle",
)


def _explain_wall(product: Product, points: int) -> str:
    if product.wall_thickness_capacity:
        return f'{product.wall_thickness_capacity}" wall capacity for 1.75" OD DOM'
    return "No published wall thickness data"


WALL_THICKNESS = LadderCriterion(
    criterion=Criterion(
        name="Wall Thickness Capability",
        max_points=9,
        description='Maximum wall thickness for 1.75" OD DOM tubing',
        weight=0.09,
    ),
    # Missing data scores the same as the lowest tier
    rules=(
        Rule(wall_thickness_at_least(0.156), 9),
        Rule(wall_thickness_at_least(0.120), 7),
        Rule(wall_thickness_at_least(0.095), 5),
    ),
    default_points=3,
    explain=_explain_wall,
)


def _explain_dies(product: Product, points: int) -> str:
    if product.brand == "Hossfeld":
        return "Extensive universal tooling system"
    if points >= 6:
        return "Good variety of die shapes available"
    return "Basic die selection"


# Brand-keyed only: features and materials do not change this score
DIE_SELECTION = LadderCriterion(
    criterion=Criterion(
        name="Die Selection & Shapes",
        max_points=8,
        description=(
            "Available die shapes: round, square, rectangle, EMT, flat bar, "
            "hexagon, combination dies"
        ),
        weight=0.08,
    ),
    rules=(
        Rule(brand_is("Hossfeld"), 8, "universal tooling system"),
        Rule(brand_is("RogueFab"), 7, "round, square, rectangle confirmed"),
        Rule(brand_is("Pro-Tools"), 6),
        Rule(brand_is("JD2"), 5),
        Rule(brand_is("SWAG Off Road"), 4, "round focus"),
    ),
    default_points=3,
    explain=_explain_dies,
)


def _explain_years(product: Product, points: int) -> str:
    if points >= 6:
        return "Established industry veteran (20+ years)"
    if points >= 4:
        return "Proven track record (10+ years)"
    return "Newer market entry"


YEARS_IN_BUSINESS = LadderCriterion(
    criterion=Criterion(
        name="Years in Business",
        max_points=7,
        description="Company longevity and market experience",
        weight=0.07,
    ),
    rules=(
        Rule(brand_is("Hossfeld"), 7, "founded 1915"),
        Rule(brand_is("JD2"), 6),
        Rule(brand_is("Pro-Tools", "Baileigh"), 5),
        Rule(brand_is("RogueFab"), 4),
        Rule(brand_is("SWAG Off Road"), 3),
    ),
    default_points=3,
    explain=_explain_years,
)

MODULAR_CLAMPING = LadderCriterion(
    criterion=Criterion(
        name="Modular Clamping System",
        max_points=6,
        description="Advanced modular clamping system for versatile workpiece orientation",
        weight=0.06,
    ),
    rules=(Rule(lambda product: product.brand == "RogueFab" and "M6" in product.model, 6),),
    default_points=0,
    explain=lambda product, points: (
        "Advanced modular clamping system for versatile workpiece orientation"
        if points == 6
        else "Standard clamping system"
    ),
)

MANDREL = LadderCriterion(
    criterion=Criterion(
        name="Mandrel Availability",
        max_points=4,
        description="Mandrel bending capability - 4 points if available, 0 if not",
        weight=0.04,
    ),
    # Exact "Available" only; "Standard" earns nothing
    rules=(Rule(lambda product: product.mandrel_bender == "Available", 4),),
    default_points=0,
    explain=lambda product, points: (
        "Mandrel bending capability available" if points == 4 else "No mandrel capability"
    ),
)

S_BEND = LadderCriterion(
    criterion=Criterion(
        name="S-Bend Capability",
        max_points=2,
        description="Ability to create S-bends and complex geometries",
        weight=0.02,
    ),
    rules=(Rule(lambda product: product.s_bend_capability is True, 2),),
    default_points=0,
    explain=lambda product, points: (
        "Documented S-bend capability" if product.s_bend_capability else "No S-bend capability"
    ),
)

CRITERIA: tuple[LadderCriterion, ...] = (
    VALUE_FOR_MONEY,
    EASE_OF_USE,
    CAPACITY,
    USA_MANUFACTURING,
    BEND_ANGLE,
    WALL_THICKNESS,
    DIE_SELECTION,
    YEARS_IN_BUSINESS,
    MODULAR_CLAMPING,
    MANDREL,
    S_BEND,
)

SCORING_CRITERIA: tuple[Criterion, ...] = tuple(item.criterion for item in CRITERIA)


def get_criterion(name: str) -> Optional[LadderCriterion]:
    """Look up a criterion by its display name."""
    for item in CRITERIA:
        if item.name == name:
            return item
    return None
