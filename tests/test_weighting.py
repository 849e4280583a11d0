"""Tests for priority normalization and weighted scoring."""

import pytest

from technical_referee.config import EmphasisConfig, RefereeConfig
from technical_referee.schema import STANDARD_CRITERIA, Criterion, Priorities, PriorityKey
from technical_referee.weighting import (
    NEUTRAL_SCORE,
    WeightingEngine,
    criterion_for_priority,
    normalize_priorities,
    priority_for_criterion,
    raw_priorities,
    top_priority,
)


@pytest.fixture
def engine() -> WeightingEngine:
    return WeightingEngine()


class TestNormalizePriorities:
    """Tests for normalize_priorities."""

    def test_sums_to_one(self):
        weights = normalize_priorities(Priorities(cost=5, performance=1, ease_of_use=2))
        assert sum(weights.values()) == pytest.approx(1.0)
        assert weights[PriorityKey.COST] == pytest.approx(5 / 14)

    def test_idempotent(self):
        """Normalizing already normalized weights changes nothing."""
        once = normalize_priorities(Priorities(cost=4, scalability=2))
        twice = normalize_priorities({key.value: value for key, value in once.items()})

        for key in PriorityKey:
            assert twice[key] == pytest.approx(once[key])

    def test_all_zero_gives_equal_weights(self):
        weights = normalize_priorities({key.value: 0 for key in PriorityKey})
        assert all(value == pytest.approx(0.2) for value in weights.values())

    def test_missing_keys_default_to_three(self):
        raw = raw_priorities({"cost": 5})
        assert raw[PriorityKey.COST] == 5
        assert raw[PriorityKey.EASE_OF_USE] == 3

    def test_snake_case_keys(self):
        raw = raw_priorities({"ease_of_use": 1, "vendor_lock_in": 4})
        assert raw[PriorityKey.EASE_OF_USE] == 1
        assert raw[PriorityKey.VENDOR_LOCK_IN] == 4


class TestEmphasis:
    """Tests for the non-linear emphasis transform."""

    def test_equal_priorities_stay_equal(self, engine):
        weights = engine.emphasized_weights(Priorities())
        assert all(value == pytest.approx(0.2) for value in weights.values())

    def test_high_priority_amplified(self, engine):
        """A 5 gets more than its linear share, a 1 gets less."""
        priorities = Priorities(cost=5, performance=1)
        linear = normalize_priorities(priorities)
        emphasized = engine.emphasized_weights(priorities)

        assert emphasized[PriorityKey.COST] > linear[PriorityKey.COST]
        assert emphasized[PriorityKey.PERFORMANCE] < linear[PriorityKey.PERFORMANCE]
        assert sum(emphasized.values()) == pytest.approx(1.0)

    def test_configured_factors(self):
        config = RefereeConfig(emphasis=EmphasisConfig(very_high=3.0))
        weights = WeightingEngine(config).emphasized_weights(Priorities(cost=5))

        # cost: 5/17 * 3.0, others: 3/17 * 1.0
        assert weights[PriorityKey.COST] == pytest.approx(15 / 27)

    def test_unmapped_priority_factor(self):
        assert EmphasisConfig().factor_for(0) == 1.0


class TestCriterionWeights:
    """Tests for projecting priorities onto criteria."""

    def test_maintainability_is_composite(self, engine):
        weights = engine.criterion_weights(Priorities())

        assert weights[Criterion.COST] == pytest.approx(0.2)
        assert weights[Criterion.MAINTAINABILITY] == pytest.approx(0.3 * 0.2 + 0.2 * 0.2)

    def test_all_criteria_weighted(self, engine):
        weights = engine.criterion_weights(Priorities())
        assert set(weights) == set(STANDARD_CRITERIA)


class TestWeightedScore:
    """Tests for the weighted average."""

    def test_uniform_scores(self, engine):
        scores = {criterion: 70.0 for criterion in STANDARD_CRITERIA}
        assert engine.weighted_score(scores, Priorities(cost=5)) == pytest.approx(70.0)

    def test_equal_priorities_are_symmetric(self, engine):
        """Swapping scores between two equally weighted criteria changes nothing."""
        base = {criterion: 60.0 for criterion in STANDARD_CRITERIA}
        a = {**base, Criterion.PERFORMANCE: 90.0, Criterion.SCALABILITY: 30.0}
        b = {**base, Criterion.PERFORMANCE: 30.0, Criterion.SCALABILITY: 90.0}

        assert engine.weighted_score(a, Priorities()) == pytest.approx(engine.weighted_score(b, Priorities()))

    def test_equal_priorities_direct_value(self, engine):
        """Five criteria at 0.2 and maintainability at 0.1, divided by 1.1."""
        scores = {
            Criterion.COST: 80.0,
            Criterion.PERFORMANCE: 60.0,
            Criterion.SCALABILITY: 40.0,
            Criterion.LEARNING_CURVE: 70.0,
            Criterion.VENDOR_LOCK_IN: 50.0,
            Criterion.MAINTAINABILITY: 100.0,
        }
        expected = (0.2 * (80 + 60 + 40 + 70 + 50) + 0.1 * 100) / 1.1

        assert engine.weighted_score(scores, Priorities()) == pytest.approx(expected)
        assert engine.weighted_score(scores, Priorities()) == pytest.approx(63.636, abs=1e-3)

    def test_priority_shifts_score(self, engine):
        scores = {criterion: 50.0 for criterion in STANDARD_CRITERIA}
        scores[Criterion.COST] = 100.0

        low = engine.weighted_score(scores, Priorities(cost=1))
        high = engine.weighted_score(scores, Priorities(cost=5))

        assert high > low

    def test_no_weighted_criteria_is_neutral(self, engine):
        assert engine.weighted_score({}, Priorities()) == NEUTRAL_SCORE


class TestPriorityLookups:
    """Tests for priority/criterion helpers."""

    def test_maintainability_priority(self):
        priorities = Priorities(cost=2, performance=4)
        assert priority_for_criterion(Criterion.MAINTAINABILITY, priorities) == 4

    def test_direct_priority(self):
        priorities = Priorities(ease_of_use=5)
        assert priority_for_criterion(Criterion.LEARNING_CURVE, priorities) == 5

    def test_top_priority(self):
        assert top_priority(Priorities(scalability=5)) == PriorityKey.SCALABILITY

    def test_top_priority_tie_keeps_first(self):
        assert top_priority(Priorities()) == PriorityKey.COST

    def test_criterion_for_priority(self):
        assert criterion_for_priority(PriorityKey.EASE_OF_USE) == Criterion.LEARNING_CURVE
        assert criterion_for_priority(PriorityKey.VENDOR_LOCK_IN) == Criterion.VENDOR_LOCK_IN
