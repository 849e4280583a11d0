"""Explainer - recommendation, confidence and alternative scenarios.

Turns an EvaluationResult into a justified final recommendation and
describes the conditions under which a different option would win.
"""

import statistics
from typing import Optional

from .config import RefereeConfig
from .context import team_knows
from .ranker import best_option_for, option_strengths, score_of
from .schema import (
    CRITERION_DISPLAY_NAMES,
    AlternativeScenario,
    Budget,
    Criterion,
    EvaluationResult,
    OptionScore,
    PriorityKey,
    Recommendation,
    SkillLevel,
    Timeline,
    UserConstraints,
)
from .weighting import criterion_for_priority, normalize_priorities, top_priority

NEUTRAL_SCORE = 50.0

SCENARIO_PRIORITY_NAMES = {
    PriorityKey.COST: "cost optimization",
    PriorityKey.PERFORMANCE: "maximum performance",
    PriorityKey.EASE_OF_USE: "ease of implementation",
    PriorityKey.SCALABILITY: "future scalability",
    PriorityKey.VENDOR_LOCK_IN: "vendor independence",
}


def display_name(criterion: Criterion) -> str:
    return CRITERION_DISPLAY_NAMES.get(criterion, criterion.value)


class RecommendationExplainer:
    """Builds the final recommendation for an evaluation result.

    Confidence combines three signals:
    - the score gap between the top two options
    - how well the top option scores where the user cares most
    - how evenly the top option performs across all criteria

    Configuration:
    - Thresholds and factors can be customized via referee-config.yaml
    """

    def __init__(self, config: Optional[RefereeConfig] = None):
        self.config = config or RefereeConfig()

    # -------------------------------------------------------------------------
    # Confidence
    # -------------------------------------------------------------------------

    def confidence(self, result: EvaluationResult, constraints: UserConstraints) -> float:
        """Deterministic confidence in the top-ranked option, in [0.1, 1.0]."""
        cfg = self.config.confidence
        rankings = result.rankings

        if len(rankings) < 2:
            return cfg.single_option_confidence

        gap = rankings[0].score - rankings[1].score
        if gap > cfg.large_gap:
            confidence = cfg.large_gap_confidence
        elif gap > cfg.medium_gap:
            confidence = cfg.medium_gap_confidence
        elif gap > cfg.small_gap:
            confidence = cfg.small_gap_confidence
        else:
            confidence = cfg.close_call_confidence

        top = score_of(result.scores, rankings[0].option)
        if top is not None:
            alignment = self.priority_alignment(top, constraints)
            confidence += (alignment - 0.5) * cfg.alignment_factor
            confidence += self.consistency_bonus(top)

        return max(cfg.minimum, min(cfg.maximum, confidence))

    def priority_alignment(self, option_score: OptionScore, constraints: UserConstraints) -> float:
        """Priority-weighted average of the option's scores, scaled to 0-1."""
        weights = normalize_priorities(constraints.priorities)

        alignment = 0.0
        total_weight = 0.0
        for key, weight in weights.items():
            value = option_score.criteria_scores.get(criterion_for_priority(key), NEUTRAL_SCORE)
            alignment += (value / 100) * weight
            total_weight += weight

        return alignment / total_weight if total_weight > 0 else 0.5

    def consistency_bonus(self, option_score: OptionScore) -> float:
        """Reward for even performance across criteria."""
        cfg = self.config.confidence
        values = list(option_score.criteria_scores.values())
        if not values:
            return 0.0
        deviation = statistics.pstdev(values)
        bonus = max(0.0, (cfg.consistency_target - deviation) / 100)
        return min(cfg.max_consistency_bonus, bonus)

    # -------------------------------------------------------------------------
    # Recommendation
    # -------------------------------------------------------------------------

    def recommend(self, result: EvaluationResult, constraints: UserConstraints) -> Recommendation:
        """Build the final recommendation for the top-ranked option.

        Raises:
            ValueError: If the result has no rankings.
        """
        if not result.rankings:
            raise ValueError("Cannot generate recommendation without ranked options")

        top_ranked = result.rankings[0]
        top = score_of(result.scores, top_ranked.option)
        if top is None:
            raise ValueError("Cannot find score data for top-ranked option")

        confidence = self.confidence(result, constraints)

        return Recommendation(
            recommended_option=top_ranked.option,
            confidence=confidence,
            reasoning=self._reasoning(top, result, constraints),
            key_factors=self._key_factors(top, constraints),
            warnings=self._warnings(top, confidence, constraints),
        )

    def _reasoning(self, top: OptionScore, result: EvaluationResult, constraints: UserConstraints) -> str:
        parts = [f"{top.option.name} is recommended with an overall score of {top.normalized_score}/100."]

        focus = criterion_for_priority(top_priority(constraints.priorities))
        focus_score = top.criteria_scores.get(focus, 0.0)
        parts.append(
            f"Given your priority on {display_name(focus)}, "
            f"this option scores {round(focus_score)}/100 in this area."
        )

        strengths = option_strengths(top, result.scores)
        if strengths:
            parts.append(f"Key strengths include {' and '.join(strengths[:2])}.")

        parts.extend(self._contextual_reasons(top, constraints))

        if len(result.rankings) > 1:
            runner_up = result.rankings[1]
            if top.normalized_score - runner_up.score < 15:
                parts.append(
                    f"While {runner_up.option.name} is also a strong contender "
                    f"({round(runner_up.score)}/100), {top.option.name} edges ahead "
                    "due to better alignment with your specific requirements."
                )

        return " ".join(parts)

    def _contextual_reasons(self, top: OptionScore, constraints: UserConstraints) -> list[str]:
        attrs = top.option.attributes or {}
        reasons = []

        if constraints.budget == Budget.LOW and attrs.get("costTier") == "low":
            reasons.append("This aligns well with your budget constraints.")
        if constraints.timeline == Timeline.IMMEDIATE and attrs.get("learningCurve") == "low":
            reasons.append("The low learning curve supports your immediate timeline needs.")
        if team_knows(top.option.name, constraints):
            reasons.append("Your team's existing experience with this technology reduces implementation risk.")
        high_scale = self.config.context_adjustments.high_scale_users
        if constraints.scale.users > high_scale and top.criteria_scores.get(Criterion.SCALABILITY, 0.0) >= 80:
            reasons.append("It handles your high-scale requirements effectively.")

        return reasons

    def _key_factors(self, top: OptionScore, constraints: UserConstraints) -> list[str]:
        factors = []

        # sorted() is stable, so tied priorities keep their declaration order
        by_importance = sorted(
            constraints.priorities.by_key().items(),
            key=lambda item: item[1],
            reverse=True,
        )
        for key, value in by_importance[:2]:
            if value >= 4:
                criterion = criterion_for_priority(key)
                factors.append(
                    f"Strong {display_name(criterion).lower()} "
                    f"({round(top.criteria_scores.get(criterion, 0.0))}/100)"
                )

        if constraints.budget == Budget.LOW:
            factors.append("Cost-effective solution")
        if constraints.timeline == Timeline.IMMEDIATE:
            factors.append("Quick implementation timeline")
        if constraints.team.skill_level == SkillLevel.JUNIOR:
            factors.append("Suitable for junior team")
        if team_knows(top.option.name, constraints):
            factors.append("Team has existing experience")
        if constraints.scale.users > self.config.context_adjustments.high_scale_users:
            factors.append("Handles high-scale requirements")

        return factors[:4]

    def _warnings(self, top: OptionScore, confidence: float, constraints: UserConstraints) -> list[str]:
        attrs = top.option.attributes or {}
        warnings = []

        if confidence < self.config.confidence.low_confidence_warning:
            warnings.append("Options are very close in scoring - consider additional evaluation criteria")

        focus = criterion_for_priority(top_priority(constraints.priorities))
        if top.criteria_scores.get(focus, 0.0) < 60:
            warnings.append(
                f"Recommended option scores below 60/100 in your top priority ({display_name(focus)})"
            )

        if constraints.budget == Budget.LOW and attrs.get("costTier") == "high":
            warnings.append("This option may exceed your budget constraints")

        steep = attrs.get("learningCurve") == "high"
        if constraints.timeline == Timeline.IMMEDIATE and steep:
            warnings.append("Implementation may take longer than desired due to learning curve")
        if steep and not team_knows(top.option.name, constraints):
            warnings.append("Team lacks experience with this technology - plan for additional training time")

        if constraints.priorities.vendor_lock_in >= 4 and attrs.get("vendorLockIn") == "high":
            warnings.append("This option has high vendor lock-in risk despite your preference to avoid it")

        return warnings

    # -------------------------------------------------------------------------
    # Alternative scenarios
    # -------------------------------------------------------------------------

    def alternative_scenarios(
        self,
        result: EvaluationResult,
        constraints: UserConstraints,
    ) -> list[AlternativeScenario]:
        """What-if scenarios: priority flips, then context flips, then scale."""
        if len(result.rankings) < 2:
            return []

        scenarios = (
            self._priority_scenarios(result, constraints)
            + self._context_scenarios(result, constraints)
            + self._scale_scenarios(result, constraints)
        )
        return scenarios[:self.config.scenarios.max_scenarios]

    def _priority_scenarios(
        self,
        result: EvaluationResult,
        constraints: UserConstraints,
    ) -> list[AlternativeScenario]:
        current = result.rankings[0].option
        dominant = criterion_for_priority(top_priority(constraints.priorities))
        scenarios = []

        for key in PriorityKey:
            criterion = criterion_for_priority(key)
            if criterion == dominant:
                continue

            best = best_option_for(result.scores, criterion)
            if best is None or best == current:
                continue

            best_score = score_of(result.scores, best)
            value = best_score.criteria_scores.get(criterion, 0.0) if best_score else 0.0
            scenarios.append(AlternativeScenario(
                scenario=f"If {SCENARIO_PRIORITY_NAMES[key]} becomes your top priority",
                recommended_option=best,
                reasoning=(
                    f"{best.name} excels in {display_name(criterion).lower()} "
                    f"({round(value)}/100), making it the optimal choice for this focus area."
                ),
            ))

        return scenarios

    def _context_scenarios(
        self,
        result: EvaluationResult,
        constraints: UserConstraints,
    ) -> list[AlternativeScenario]:
        current = result.rankings[0].option
        scenarios = []

        if constraints.budget != Budget.LOW:
            best = best_option_for(result.scores, Criterion.COST)
            if best is not None and best != current:
                scenarios.append(AlternativeScenario(
                    scenario="If budget becomes a primary concern",
                    recommended_option=best,
                    reasoning=(
                        f"{best.name} offers the best cost-effectiveness, "
                        "making it ideal for budget-constrained projects."
                    ),
                ))

        if constraints.timeline != Timeline.IMMEDIATE:
            best = best_option_for(result.scores, Criterion.LEARNING_CURVE)
            if best is not None and best != current:
                scenarios.append(AlternativeScenario(
                    scenario="If you need immediate deployment",
                    recommended_option=best,
                    reasoning=(
                        f"{best.name} has the shortest learning curve, "
                        "enabling faster implementation and deployment."
                    ),
                ))

        if constraints.team.skill_level != SkillLevel.JUNIOR:
            best = best_option_for(result.scores, Criterion.PERFORMANCE)
            if best is not None and best != current:
                scenarios.append(AlternativeScenario(
                    scenario="If your team has strong technical expertise",
                    recommended_option=best,
                    reasoning=(
                        f"{best.name} offers superior performance, "
                        "which experienced teams can fully leverage despite complexity."
                    ),
                ))

        return scenarios

    def _scale_scenarios(
        self,
        result: EvaluationResult,
        constraints: UserConstraints,
    ) -> list[AlternativeScenario]:
        current = result.rankings[0].option
        scenarios = []

        if constraints.scale.users <= self.config.context_adjustments.high_scale_users:
            best = best_option_for(result.scores, Criterion.SCALABILITY)
            if best is not None and best != current:
                scenarios.append(AlternativeScenario(
                    scenario="If you expect rapid growth to millions of users",
                    recommended_option=best,
                    reasoning=(
                        f"{best.name} excels at horizontal scaling, "
                        "making it the better choice for high-growth scenarios."
                    ),
                ))

        best = self._best_for_enterprise(result)
        if best is not None and best != current:
            scenarios.append(AlternativeScenario(
                scenario="If this becomes an enterprise-critical system",
                recommended_option=best,
                reasoning=(
                    f"{best.name} provides enterprise-grade features "
                    "and support that become crucial for mission-critical applications."
                ),
            ))

        return scenarios

    @staticmethod
    def _best_for_enterprise(result: EvaluationResult):
        best = None
        best_value = -1.0
        for score in result.scores:
            maintainability = score.criteria_scores.get(Criterion.MAINTAINABILITY, 0.0)
            scalability = score.criteria_scores.get(Criterion.SCALABILITY, 0.0)
            features = (score.option.attributes or {}).get("enterpriseFeatures") or []
            value = (maintainability + scalability) / 2 + len(features) * 2
            if value > best_value:
                best, best_value = score.option, value
        return best
