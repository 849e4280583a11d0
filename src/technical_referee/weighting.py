"""Weighting Engine - combines criterion scores into a single weighted score.

User priorities are normalized, sharpened with a non-linear emphasis
transform and projected onto the six standard criteria through a single
lookup table. Maintainability has no priority of its own and receives a
blend of the cost and performance weights.
"""

from typing import Mapping, Optional, Union

from .config import RefereeConfig
from .schema import Criterion, Priorities, PriorityKey

NEUTRAL_SCORE = 50.0
DEFAULT_PRIORITY = 3

PriorityInput = Union[Priorities, Mapping[str, float]]

# criterion -> [(priority key, share of that priority's emphasized weight)]
CRITERION_WEIGHT_TABLE: dict[Criterion, tuple[tuple[PriorityKey, float], ...]] = {
    Criterion.COST: ((PriorityKey.COST, 1.0),),
    Criterion.PERFORMANCE: ((PriorityKey.PERFORMANCE, 1.0),),
    Criterion.SCALABILITY: ((PriorityKey.SCALABILITY, 1.0),),
    Criterion.LEARNING_CURVE: ((PriorityKey.EASE_OF_USE, 1.0),),
    Criterion.VENDOR_LOCK_IN: ((PriorityKey.VENDOR_LOCK_IN, 1.0),),
    Criterion.MAINTAINABILITY: ((PriorityKey.COST, 0.3), (PriorityKey.PERFORMANCE, 0.2)),
}

# criterion -> priority key it answers to, for reporting priorities per criterion
PRIMARY_PRIORITY: dict[Criterion, PriorityKey] = {
    Criterion.COST: PriorityKey.COST,
    Criterion.PERFORMANCE: PriorityKey.PERFORMANCE,
    Criterion.SCALABILITY: PriorityKey.SCALABILITY,
    Criterion.LEARNING_CURVE: PriorityKey.EASE_OF_USE,
    Criterion.VENDOR_LOCK_IN: PriorityKey.VENDOR_LOCK_IN,
}


def raw_priorities(priorities: PriorityInput) -> dict[PriorityKey, float]:
    """Coerce priorities to a {PriorityKey: value} dict with defaults."""
    if isinstance(priorities, Priorities):
        return {key: float(value) for key, value in priorities.by_key().items()}

    result = {}
    for key in PriorityKey:
        # accepts camelCase ("easeOfUse") and snake_case ("ease_of_use") keys
        value = priorities.get(key.value, priorities.get(key.name.lower()))
        result[key] = float(DEFAULT_PRIORITY if value is None else value)
    return result


def normalize_priorities(priorities: PriorityInput) -> dict[PriorityKey, float]:
    """Scale the five priorities so they sum to 1.

    All-zero priorities yield equal weights.
    """
    raw = raw_priorities(priorities)
    total = sum(raw.values())
    if total == 0:
        return {key: 1.0 / len(raw) for key in raw}
    return {key: value / total for key, value in raw.items()}


class WeightingEngine:
    """Computes emphasized criterion weights and weighted scores."""

    def __init__(self, config: Optional[RefereeConfig] = None):
        self.config = config or RefereeConfig()

    def emphasized_weights(self, priorities: PriorityInput) -> dict[PriorityKey, float]:
        """Normalized priorities multiplied by emphasis factors, re-normalized."""
        raw = raw_priorities(priorities)
        normalized = normalize_priorities(raw)
        emphasis = self.config.emphasis

        emphasized = {
            key: weight * emphasis.factor_for(raw[key])
            for key, weight in normalized.items()
        }
        total = sum(emphasized.values())
        if total == 0:
            return normalized
        return {key: value / total for key, value in emphasized.items()}

    def criterion_weights(self, priorities: PriorityInput) -> dict[Criterion, float]:
        """Project emphasized priority weights onto the six criteria."""
        emphasized = self.emphasized_weights(priorities)
        return {
            criterion: sum(emphasized[key] * share for key, share in sources)
            for criterion, sources in CRITERION_WEIGHT_TABLE.items()
        }

    def weighted_score(
        self,
        criteria_scores: Mapping[Criterion, float],
        priorities: PriorityInput,
    ) -> float:
        """Weighted average of the criteria present in criteria_scores."""
        weights = self.criterion_weights(priorities)

        total_score = 0.0
        total_weight = 0.0
        for criterion, score in criteria_scores.items():
            weight = weights.get(criterion, 0.0)
            if weight > 0:
                total_score += score * weight
                total_weight += weight

        if total_weight == 0:
            return NEUTRAL_SCORE
        return total_score / total_weight


def priority_for_criterion(criterion: Criterion, priorities: PriorityInput) -> float:
    """The raw user priority that governs a criterion.

    Maintainability answers to the stronger of cost and performance;
    anything unmapped gets the default priority.
    """
    raw = raw_priorities(priorities)
    if criterion == Criterion.MAINTAINABILITY:
        return max(raw[PriorityKey.COST], raw[PriorityKey.PERFORMANCE])
    key = PRIMARY_PRIORITY.get(criterion)
    if key is None:
        return float(DEFAULT_PRIORITY)
    return raw[key]


def top_priority(priorities: PriorityInput) -> PriorityKey:
    """The highest-rated priority key; earlier keys win ties."""
    raw = raw_priorities(priorities)
    return max(raw, key=lambda key: raw[key])


def criterion_for_priority(key: PriorityKey) -> Criterion:
    """The criterion a priority key maps onto directly."""
    for criterion, primary in PRIMARY_PRIORITY.items():
        if primary == key:
            return criterion
    raise KeyError(key)
