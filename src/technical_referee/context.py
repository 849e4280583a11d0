"""Contextual Adjuster - situational score deltas.

Budget, timeline, team skill, team experience and expected scale each
nudge specific criteria. Deltas for the same criterion stack, and the
adjusted score is clamped once to [0, 100].
"""

import logging
from collections import defaultdict
from typing import Mapping, Optional

from .config import RefereeConfig
from .knowledge import clamp
from .schema import (
    Budget,
    Criterion,
    SkillLevel,
    TechnicalOption,
    Timeline,
    Traffic,
    UserConstraints,
)

logger = logging.getLogger(__name__)


def team_knows(name: str, constraints: UserConstraints) -> bool:
    """True if any team experience entry mentions the name (case-insensitive)."""
    lowered = name.lower()
    return any(lowered in entry.lower() for entry in constraints.team.experience)


class ContextualAdjuster:
    """Derives and applies score deltas from user constraints."""

    def __init__(self, config: Optional[RefereeConfig] = None):
        self.config = config or RefereeConfig()

    def adjustments_for(
        self,
        option: TechnicalOption,
        constraints: UserConstraints,
    ) -> dict[Criterion, float]:
        """Summed deltas per criterion for an option under the constraints."""
        cfg = self.config.context_adjustments
        deltas: dict[Criterion, float] = defaultdict(float)

        if constraints.budget == Budget.LOW:
            deltas[Criterion.COST] += cfg.low_budget_cost
        elif constraints.budget == Budget.HIGH:
            deltas[Criterion.PERFORMANCE] += cfg.high_budget_performance

        if constraints.timeline == Timeline.IMMEDIATE:
            deltas[Criterion.LEARNING_CURVE] += cfg.immediate_timeline_learning_curve
        elif constraints.timeline == Timeline.LONG:
            deltas[Criterion.SCALABILITY] += cfg.long_timeline_scalability

        if constraints.team.skill_level == SkillLevel.JUNIOR:
            deltas[Criterion.LEARNING_CURVE] += cfg.junior_learning_curve
            deltas[Criterion.MAINTAINABILITY] += cfg.junior_maintainability
        elif constraints.team.skill_level == SkillLevel.SENIOR:
            deltas[Criterion.PERFORMANCE] += cfg.senior_performance

        if team_knows(option.name, constraints):
            deltas[Criterion.LEARNING_CURVE] += cfg.experience_learning_curve
            deltas[Criterion.MAINTAINABILITY] += cfg.experience_maintainability

        if constraints.scale.users > cfg.high_scale_users or constraints.scale.traffic == Traffic.HIGH:
            deltas[Criterion.SCALABILITY] += cfg.high_scale_scalability
            deltas[Criterion.PERFORMANCE] += cfg.high_scale_performance

        return dict(deltas)

    def apply(
        self,
        criteria_scores: Mapping[Criterion, float],
        deltas: Mapping[Criterion, float],
    ) -> dict[Criterion, float]:
        """Add deltas to the scores and clamp each result once."""
        adjusted = dict(criteria_scores)
        for criterion, delta in deltas.items():
            if criterion in adjusted:
                adjusted[criterion] = clamp(adjusted[criterion] + delta)
        return adjusted

    def adjust(
        self,
        option: TechnicalOption,
        criteria_scores: Mapping[Criterion, float],
        constraints: UserConstraints,
    ) -> dict[Criterion, float]:
        """Compute and apply the contextual deltas for an option."""
        deltas = self.adjustments_for(option, constraints)
        if deltas:
            logger.debug("Contextual adjustments for %s: %s", option.name, deltas)
        return self.apply(criteria_scores, deltas)
