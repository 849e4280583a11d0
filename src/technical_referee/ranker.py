"""Ranker and Trade-off Analyzer.

Orders scored options and explains, per criterion, who leads, who trails
and which weaknesses a choice would mean accepting.
"""

from typing import Optional

from .config import RefereeConfig
from .schema import (
    CRITERION_DISPLAY_NAMES,
    Compromise,
    Criterion,
    ImpactLevel,
    OptionScore,
    RankedOption,
    TechnicalOption,
    TradeOffAnalysis,
)
from .weighting import PriorityInput, priority_for_criterion


def rank_options(scores: list[OptionScore]) -> list[RankedOption]:
    """Dense ranking by weighted score, highest first.

    sorted() is stable, so equal scores keep their input order.
    """
    ordered = sorted(scores, key=lambda s: s.weighted_score, reverse=True)
    return [
        RankedOption(option=score.option, rank=index, score=score.weighted_score)
        for index, score in enumerate(ordered, 1)
    ]


def criteria_in(scores: list[OptionScore]) -> list[Criterion]:
    """Every criterion present in any option, in first-seen order."""
    seen: dict[Criterion, None] = {}
    for score in scores:
        for criterion in score.criteria_scores:
            seen.setdefault(criterion, None)
    return list(seen)


class TradeOffAnalyzer:
    """Finds per-criterion leaders, laggards and compromises."""

    def __init__(self, config: Optional[RefereeConfig] = None):
        self.config = config or RefereeConfig()

    def analyze(self, scores: list[OptionScore], priorities: PriorityInput) -> TradeOffAnalysis:
        strongest: dict[Criterion, TechnicalOption] = {}
        weakest: dict[Criterion, TechnicalOption] = {}

        for criterion in criteria_in(scores):
            best: Optional[OptionScore] = None
            worst: Optional[OptionScore] = None
            best_value = float("-inf")
            worst_value = float("inf")

            # Strict comparisons keep the first option on ties
            for score in scores:
                value = score.criteria_scores.get(criterion, 0.0)
                if value > best_value:
                    best, best_value = score, value
                if value < worst_value:
                    worst, worst_value = score, value

            if best is not None:
                strongest[criterion] = best.option
            if worst is not None:
                weakest[criterion] = worst.option

        return TradeOffAnalysis(
            strongest_option=strongest,
            weakest_option=weakest,
            compromises=self.find_compromises(scores, priorities),
        )

    def find_compromises(self, scores: list[OptionScore], priorities: PriorityInput) -> list[Compromise]:
        """Criteria where an option trails the best other option by too much."""
        threshold = self.config.trade_offs.compromise_gap
        compromises = []

        for index, score in enumerate(scores):
            others = [other for position, other in enumerate(scores) if position != index]
            if not others:
                continue

            for criterion, value in score.criteria_scores.items():
                best_other = max(other.criteria_scores.get(criterion, 0.0) for other in others)
                gap = best_other - value
                if gap <= threshold:
                    continue

                priority = priority_for_criterion(criterion, priorities)
                display = CRITERION_DISPLAY_NAMES.get(criterion, criterion.value).lower()
                compromises.append(Compromise(
                    option_name=score.option.name,
                    description=(
                        f"Choosing {score.option.name} means accepting weaker {display} performance"
                    ),
                    impact=self.impact_level(gap, priority),
                    affected_criteria=[criterion],
                    score_gap=gap,
                ))

        return compromises

    def impact_level(self, score_gap: float, priority: float) -> ImpactLevel:
        """Severity scales with both the gap and how much the user cares."""
        cfg = self.config.trade_offs
        impact = (score_gap / 100) * priority
        if impact > cfg.high_impact_threshold:
            return ImpactLevel.HIGH
        if impact > cfg.medium_impact_threshold:
            return ImpactLevel.MEDIUM
        return ImpactLevel.LOW


def score_of(scores: list[OptionScore], option: TechnicalOption) -> Optional[OptionScore]:
    """The OptionScore belonging to an option."""
    for score in scores:
        if score.option == option:
            return score
    return None


def best_option_for(scores: list[OptionScore], criterion: Criterion) -> Optional[TechnicalOption]:
    """Highest scorer on one criterion; the first option wins ties."""
    best: Optional[TechnicalOption] = None
    best_value = -1.0
    for score in scores:
        value = score.criteria_scores.get(criterion, 0.0)
        if value > best_value:
            best, best_value = score.option, value
    return best


def _criterion_column(scores: list[OptionScore], criterion: Criterion) -> list[float]:
    return [score.criteria_scores.get(criterion, 0.0) for score in scores]


def option_strengths(option_score: OptionScore, scores: list[OptionScore], limit: int = 3) -> list[str]:
    """Criteria where the option leads clearly or sits far above average."""
    strengths = []
    for criterion, value in option_score.criteria_scores.items():
        column = _criterion_column(scores, criterion)
        average = sum(column) / len(column)
        if (value == max(column) and value > average + 10) or value > average + 20:
            strengths.append(CRITERION_DISPLAY_NAMES.get(criterion, criterion.value).lower())
    return strengths[:limit]


def option_sacrifices(option_score: OptionScore, scores: list[OptionScore], limit: int = 3) -> list[str]:
    """Criteria where the option falls well below the average or is the worst."""
    sacrifices = []
    for criterion, value in option_score.criteria_scores.items():
        column = _criterion_column(scores, criterion)
        average = sum(column) / len(column)
        if value < average - 15 or (value == min(column) and value < average - 5):
            sacrifices.append(CRITERION_DISPLAY_NAMES.get(criterion, criterion.value).lower())
    return sacrifices[:limit]
