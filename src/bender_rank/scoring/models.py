"""Data models for tube bender scoring."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel


# Origins treated as domestic manufacturing by the listing filters
USA_ORIGINS: frozenset[str] = frozenset({"USA", "United States"})


class Product(BaseModel):
    """Tube bender catalog record.

    Owned by the storage layer and read-only here. Accepts both snake_case
    and the storage API's camelCase keys (``priceRange``, ``maxCapacity``...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    # Identification
    id: int = Field(..., description="Unique product identifier")
    name: str = Field(..., description="Display name")
    brand: str = Field(..., description="Manufacturer brand")
    model: str = Field("", description="Model designation, e.g. 'M601/M605/M625'")
    rating: str = Field("0", description="Editorial rating on a 0-10 scale")

    # Pricing (display string plus optional structured bounds)
    price_range: str = Field("", description="Display price, e.g. '$1,895 - $2,695'")
    price_min: Optional[str] = Field(None, description="Starting price as a decimal string")
    price_max: Optional[str] = Field(None, description="Top price as a decimal string")

    # Capabilities
    max_capacity: str = Field("", description="Max tube OD with units, e.g. '2-3/8\" OD'")
    power_type: str = Field("", description="Manual, Hydraulic, Manual/Hydraulic...")
    bend_angle: int = Field(0, ge=0, description="Maximum bend angle in degrees")
    country_of_origin: str = Field("", description="Country of manufacture")
    category: str = Field("", description="professional, heavy-duty, budget...")
    materials: list[str] = Field(default_factory=list, description="Bendable materials")
    features: list[str] = Field(default_factory=list, description="Free-text feature list")
    mandrel_bender: Optional[str] = Field(
        None, description="'Available', 'Standard', 'No' or absent"
    )
    wall_thickness_capacity: Optional[str] = Field(
        None, description="Max wall for 1.75\" OD DOM, e.g. '0.156'"
    )
    s_bend_capability: Optional[bool] = Field(None, description="Documented S-bend capability")

    # Display-only metadata
    warranty: str = ""
    description: str = ""
    image_url: Optional[str] = None
    purchase_url: Optional[str] = None
    is_recommended: bool = False
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)

    @field_validator("price_min", "price_max", "wall_thickness_capacity", mode="before")
    @classmethod
    def _numbers_as_text(cls, value: object) -> object:
        # Storage returns decimals as strings; accept bare numbers too
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def is_usa_made(self) -> bool:
        """Whether the product is made in the USA (strict, scoring sense)."""
        return self.country_of_origin == "USA"


class Criterion(BaseModel):
    """Published description of one scoring criterion."""

    model_config = ConfigDict(frozen=True)

    name: str
    max_points: int = Field(..., gt=0)
    description: str
    weight: float = Field(..., description="Share of the 100-point total")


class ScoreEntry(BaseModel):
    """Points awarded for a single criterion."""

    model_config = ConfigDict(frozen=True)

    criterion: str
    points: int = Field(..., ge=0)
    max_points: int = Field(..., gt=0)
    reasoning: str


class ScoreBreakdown(BaseModel):
    """Per-criterion accounting of one product's objective score."""

    model_config = ConfigDict(frozen=True)

    product_id: int
    entries: tuple[ScoreEntry, ...]
    degraded: bool = Field(
        False, description="True when produced by the single-rating fallback"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        """Total points (sum of entries, 0-100)."""
        return sum(entry.points for entry in self.entries)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def max_total(self) -> int:
        """Maximum attainable points."""
        return sum(entry.max_points for entry in self.entries)

    def points_for(self, criterion: str) -> int:
        """Points awarded for a criterion by name.

        Raises:
            KeyError: If the breakdown has no entry for the criterion.
        """
        for entry in self.entries:
            if entry.criterion == criterion:
                return entry.points
        raise KeyError(criterion)


class ScoredProduct(BaseModel):
    """A product paired with its score breakdown."""

    model_config = ConfigDict(frozen=True)

    product: Product
    breakdown: ScoreBreakdown

    @property
    def total_score(self) -> int:
        return self.breakdown.total
