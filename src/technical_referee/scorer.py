"""Scorer - turns a normalized option into an OptionScore.

Knowledge registry scores (with rule bonuses) are adjusted for the user's
situation and then combined by the weighting engine.
"""

import logging
from typing import Optional

from .config import RefereeConfig
from .context import ContextualAdjuster
from .knowledge import KnowledgeRegistry
from .schema import OptionScore, TechnicalOption, UserConstraints
from .weighting import WeightingEngine

logger = logging.getLogger(__name__)


class OptionScorer:
    """Scores options against user constraints."""

    def __init__(
        self,
        registry: KnowledgeRegistry,
        config: Optional[RefereeConfig] = None,
    ):
        self.registry = registry
        self.config = config or RefereeConfig()
        self.adjuster = ContextualAdjuster(self.config)
        self.weighting = WeightingEngine(self.config)

    def score(self, option: TechnicalOption, constraints: UserConstraints) -> OptionScore:
        """Score a single (already normalized) option."""
        base_scores = self.registry.comprehensive_evaluation(option)
        adjusted = self.adjuster.adjust(option, base_scores, constraints)
        weighted = self.weighting.weighted_score(adjusted, constraints.priorities)

        logger.debug("Scored %s: weighted=%.2f", option.name, weighted)

        return OptionScore(
            option=option,
            criteria_scores=adjusted,
            weighted_score=weighted,
            normalized_score=max(0, min(100, round(weighted))),
        )

    def score_all(
        self,
        options: list[TechnicalOption],
        constraints: UserConstraints,
    ) -> list[OptionScore]:
        return [self.score(option, constraints) for option in options]
