"""Guided finder recommendation strategies."""

from bender_rank.finder.basic import BasicMatcher, basic_match
from bender_rank.finder.enhanced import EnhancedMatcher, enhanced_match
from bender_rank.finder.matcher import (
    ELIMINATED_SCORE,
    MatchTally,
    RecommendationMatcher,
    UnknownMatcherError,
    available_matchers,
    get_matcher,
)
from bender_rank.finder.models import (
    BasicExperience,
    BasicFinderCriteria,
    DieShape,
    ExperienceLevel,
    FinderCriteria,
    MatchResult,
    Priority,
    Usage,
)

__all__ = [
    # Models
    "BasicExperience",
    "BasicFinderCriteria",
    "DieShape",
    "ExperienceLevel",
    "FinderCriteria",
    "MatchResult",
    "Priority",
    "Usage",
    # Strategies
    "BasicMatcher",
    "EnhancedMatcher",
    "RecommendationMatcher",
    "MatchTally",
    "ELIMINATED_SCORE",
    "UnknownMatcherError",
    "available_matchers",
    "basic_match",
    "enhanced_match",
    "get_matcher",
]
