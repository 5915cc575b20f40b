"""Data models for the tube bender finder."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from bender_rank.scoring.models import Product


class ExperienceLevel(str, Enum):
    """Ease-of-use preference in the enhanced finder."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class DieShape(str, Enum):
    """Die shapes a user can ask for."""

    ROUND = "round"
    SQUARE = "square"
    RECTANGLE = "rectangle"
    HEXAGON = "hexagon"
    FLAT = "flat"
    ANGLE = "angle"


class Usage(str, Enum):
    """How the bender will be used (basic finder)."""

    HOBBY = "hobby"
    SMALL_BUSINESS = "small-business"
    PRODUCTION = "production"


class BasicExperience(str, Enum):
    """Operator experience (basic finder)."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


class Priority(str, Enum):
    """What the buyer cares about most (basic finder)."""

    PRICE = "price"
    QUALITY = "quality"
    SPEED = "speed"
    VERSATILITY = "versatility"


class FinderCriteria(BaseModel):
    """User constraints collected by the enhanced finder wizard.

    Each field is either a hard filter (budget, diameter, mandrel, S-bend)
    or a soft adjustment (everything else).
    """

    # Step 1: budget & diameter
    budget: Optional[float] = Field(
        5000.0, ge=0, description="Starting-price ceiling (None = no budget)"
    )
    max_diameter: Optional[float] = Field(
        None, gt=0, description="Largest tube OD needed, inches"
    )

    # Step 2: manufacturing & features
    usa_preference: bool = Field(False, description="Prefer USA-made")
    mandrel_required: bool = Field(False, description="Mandrel bending required")
    min_bend_angle: int = Field(180, ge=0, description="Minimum bend angle, degrees")

    # Step 3: materials & dies
    wall_thickness: Optional[float] = Field(
        None, gt=0, description="Wall thickness to bend, inches"
    )
    die_shapes: set[DieShape] = Field(default_factory=set, description="Die shapes needed")

    # Step 4: reliability & usability
    reliability_important: bool = Field(False, description="Weight established brands")
    modular_clamping_needed: bool = Field(False, description="Modular clamping needed")
    s_bend_required: bool = Field(False, description="S-bends required")
    ease_of_use: Optional[ExperienceLevel] = Field(None, description="Experience level")


class BasicFinderCriteria(BaseModel):
    """User constraints collected by the basic finder wizard."""

    budget: float = Field(5000.0, ge=0, description="Budget ceiling")
    max_diameter: float = Field(..., gt=0, description="Largest tube OD needed, inches")
    usage: Optional[Usage] = None
    experience: Optional[BasicExperience] = None
    priority: Optional[Priority] = None


class MatchResult(BaseModel):
    """A product annotated with its finder match score.

    The match score is unrelated to the objective 100-point score: it is
    unbounded and only ranks one user's shortlist.
    """

    product: Product
    score: int = Field(..., description="Match score (-100 when eliminated)")
    reasons: list[str] = Field(default_factory=list, description="Why it matched")
    matched_criteria: list[str] = Field(default_factory=list, description="Badge labels")
    eliminated: bool = Field(False, description="Hard-eliminated candidate")
