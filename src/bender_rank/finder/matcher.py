"""Shared machinery for finder recommendation strategies.

A strategy scores each candidate independently into a ``MatchResult``,
then ``match`` drops ineligible candidates, sorts by descending match score
(ties in catalog order) and keeps the top few.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from bender_rank.config import get_settings
from bender_rank.finder.models import MatchResult
from bender_rank.scoring.models import Product

logger = logging.getLogger(__name__)

# Internal marker for a hard-eliminated candidate; never shown as a score
ELIMINATED_SCORE = -100

CriteriaT = TypeVar("CriteriaT", bound=BaseModel)


class UnknownMatcherError(KeyError):
    """Raised when a finder strategy name is not registered."""


@dataclass
class MatchTally:
    """Running match score for one candidate."""

    score: int = 0
    reasons: list[str] = field(default_factory=list)
    matched_criteria: list[str] = field(default_factory=list)
    eliminated: bool = False

    def award(self, points: int, tag: Optional[str] = None, reason: Optional[str] = None) -> None:
        """Add points with an optional badge and explanation."""
        self.score += points
        if tag:
            self.matched_criteria.append(tag)
        if reason:
            self.reasons.append(reason)

    def penalize(self, points: int, reason: Optional[str] = None) -> None:
        """Subtract points with an optional explanation."""
        self.score -= points
        if reason:
            self.reasons.append(reason)

    def eliminate(self, reason: str) -> None:
        """Disqualify the candidate, replacing everything with one reason."""
        self.score = ELIMINATED_SCORE
        self.reasons = [reason]
        self.matched_criteria = []
        self.eliminated = True

    def to_result(self, product: Product) -> MatchResult:
        return MatchResult(
            product=product,
            score=self.score,
            reasons=list(self.reasons),
            matched_criteria=list(self.matched_criteria),
            eliminated=self.eliminated,
        )


class RecommendationMatcher(ABC, Generic[CriteriaT]):
    """Base class for finder strategies."""

    name: str = ""

    @abstractmethod
    def evaluate(self, product: Product, criteria: CriteriaT) -> MatchResult:
        """Score one candidate against the user's criteria."""

    def is_eligible(self, result: MatchResult, criteria: CriteriaT) -> bool:
        """Whether a scored candidate may appear in the shortlist."""
        return not result.eliminated and result.score >= 0

    def match(
        self,
        products: list[Product],
        criteria: CriteriaT,
        limit: Optional[int] = None,
    ) -> list[MatchResult]:
        """Build the shortlist for a set of criteria.

        Args:
            products: Catalog products (not modified)
            criteria: User criteria
            limit: Shortlist length (defaults to settings.finder_result_limit)

        Returns:
            Up to ``limit`` results, best match first
        """
        if limit is None:
            limit = get_settings().finder_result_limit

        results = [self.evaluate(product, criteria) for product in products]
        eligible = [
            (index, result)
            for index, result in enumerate(results)
            if self.is_eligible(result, criteria)
        ]
        eligible.sort(key=lambda pair: (-pair[1].score, pair[0]))

        logger.info(
            f"{self.name} finder: {len(eligible)} of {len(products)} candidates eligible"
        )
        return [result for _, result in eligible[: max(0, limit)]]


_REGISTRY: dict[str, RecommendationMatcher] = {}


def register_matcher(matcher: RecommendationMatcher) -> RecommendationMatcher:
    """Register a strategy under its name."""
    _REGISTRY[matcher.name] = matcher
    return matcher


def get_matcher(name: str) -> RecommendationMatcher:
    """Look up a registered strategy.

    Raises:
        UnknownMatcherError: If no strategy has that name
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownMatcherError(
            f"Unknown finder strategy '{name}' (available: {', '.join(sorted(_REGISTRY))})"
        ) from None


def available_matchers() -> list[str]:
    return sorted(_REGISTRY)
