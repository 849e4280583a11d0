"""Comparison report - renders an evaluation for people.

Produces the side-by-side comparison table, per-option pros and cons and
the trade-off narrative, then bundles them with the recommendation into a
ComparisonOutput.
"""

from typing import Optional

from .config import RefereeConfig
from .context import team_knows
from .explainer import RecommendationExplainer, display_name
from .ranker import criteria_in, option_sacrifices, option_strengths, score_of
from .schema import (
    Budget,
    Category,
    ComparisonOutput,
    ComparisonTable,
    Criterion,
    EvaluationResult,
    OptionScore,
    ProsCons,
    RankedOption,
    Timeline,
    UserConstraints,
)
from .weighting import criterion_for_priority, top_priority

MAX_PROS = 5
MAX_CONS = 5


def score_label(score: float) -> str:
    """Qualitative label for a 0-100 score."""
    rounded = round(score)
    if rounded >= 80:
        return "Excellent"
    if rounded >= 60:
        return "Good"
    if rounded >= 40:
        return "Fair"
    if rounded >= 20:
        return "Poor"
    return "Very Poor"


def format_score(score: float) -> str:
    return f"{round(score)}/100 ({score_label(score)})"


class ComparisonReporter:
    """Builds the human-readable parts of a comparison."""

    def __init__(self, config: Optional[RefereeConfig] = None):
        self.config = config or RefereeConfig()

    def comparison_table(self, result: EvaluationResult) -> ComparisonTable:
        """Options as rows, criteria as columns, best overall score first."""
        criteria = criteria_in(result.scores)
        headers = ["Option"] + [display_name(c) for c in criteria] + ["Overall Score"]

        ordered = sorted(result.scores, key=lambda s: s.normalized_score, reverse=True)
        rows = []
        for score in ordered:
            row = [score.option.name]
            for criterion in criteria:
                value = score.criteria_scores.get(criterion)
                row.append("N/A" if value is None else format_score(value))
            row.append(f"{score.normalized_score}/100")
            rows.append(row)

        return ComparisonTable(headers=headers, rows=rows)

    def pros_and_cons(self, result: EvaluationResult) -> list[ProsCons]:
        """One entry per scored option, in score order."""
        return [self.option_pros_and_cons(index, result) for index in range(len(result.scores))]

    def option_pros_and_cons(self, index: int, result: EvaluationResult) -> ProsCons:
        """Pros and cons of the option at `index` relative to the others."""
        option_score = result.scores[index]
        others = [s for position, s in enumerate(result.scores) if position != index]
        pros: list[str] = []
        cons: list[str] = []

        for criterion, value in option_score.criteria_scores.items():
            if not others:
                break
            other_values = [s.criteria_scores.get(criterion, 0.0) for s in others]
            average = sum(other_values) / len(other_values)
            label = f"{display_name(criterion).lower()} ({round(value)}/100)"

            if value > max(other_values) + 10:
                pros.append(f"Superior {label}")
            elif value > average + 15:
                pros.append(f"Strong {label}")
            elif value >= 80:
                pros.append(f"Excellent {label}")

            if value < min(other_values) - 10:
                cons.append(f"Weak {label}")
            elif value < average - 15:
                cons.append(f"Below average {label}")
            elif value <= 30:
                cons.append(f"Poor {label}")

        attribute_pros, attribute_cons = self._attribute_insights(option_score)
        pros.extend(attribute_pros)
        cons.extend(attribute_cons)

        if not pros:
            pros.append(f"Overall score of {option_score.normalized_score}/100")
        if not cons and option_score.normalized_score < 90:
            cons.append("May not be the optimal choice for all use cases")

        return ProsCons(option=option_score.option, pros=pros[:MAX_PROS], cons=cons[:MAX_CONS])

    @staticmethod
    def _attribute_insights(option_score: OptionScore) -> tuple[list[str], list[str]]:
        option = option_score.option
        data = option.attributes or {}
        pros: list[str] = []
        cons: list[str] = []

        if option.category == Category.CLOUD:
            if (data.get("serviceCount") or 0) > 200:
                pros.append("Comprehensive service ecosystem")
            if (data.get("marketShare") or 0) > 30:
                pros.append("Market leader with strong community")
            if len(data.get("enterpriseFeatures") or []) > 10:
                pros.append("Rich enterprise feature set")
        elif option.category == Category.BACKEND:
            if (data.get("developmentSpeed") or 0) > 8:
                pros.append("Rapid development capabilities")
            if (data.get("communitySize") or 0) > 50000:
                pros.append("Large, active community")
            if (data.get("performanceRating") or 0) > 8:
                pros.append("High performance runtime")
        elif option.category == Category.DATABASE:
            if "complex" in (data.get("queryCapabilities") or []):
                pros.append("Advanced query capabilities")
            if data.get("horizontalScaling") == "excellent" or data.get("scalingPattern") == "horizontal":
                pros.append("Excellent horizontal scaling")

        if data.get("learningCurve") == "low":
            pros.append("Easy to learn and adopt")
        elif data.get("learningCurve") == "high":
            cons.append("Steep learning curve")

        if data.get("vendorLockIn") == "high":
            cons.append("High vendor lock-in risk")
        elif data.get("vendorLockIn") == "low":
            pros.append("Low vendor lock-in risk")

        return pros, cons

    # -------------------------------------------------------------------------
    # Trade-off narrative
    # -------------------------------------------------------------------------

    def trade_off_explanation(self, result: EvaluationResult, constraints: UserConstraints) -> str:
        """Markdown narrative of what each option optimizes for and sacrifices."""
        lines = [self._summary(result, constraints), "", "**Detailed Trade-offs:**"]

        for score in result.scores:
            lines.append(f"\n**{score.option.name}:**")
            lines.append(self._option_trade_offs(score, result, constraints))

        lines.append("")
        lines.append(self._impact_analysis(result, constraints))
        return "\n".join(lines)

    def _summary(self, result: EvaluationResult, constraints: UserConstraints) -> str:
        if len(result.rankings) < 2:
            return "Unable to generate trade-off analysis with insufficient options."

        first, second = result.rankings[0], result.rankings[1]
        first_score = score_of(result.scores, first.option)
        second_score = score_of(result.scores, second.option)
        if first_score is None or second_score is None:
            return "Unable to generate trade-off analysis due to missing score data."

        summary = "**Trade-off Summary:**\n"
        summary += (
            f"{first.option.name} ranks highest overall ({round(first.score)}/100) "
            f"compared to {second.option.name} ({round(second.score)}/100). "
        )

        differences = self.key_differences(first_score, second_score)
        if differences:
            criterion, winner, winner_value, loser_value = differences[0]
            summary += (
                f"The key differentiator is {display_name(criterion)} where "
                f"{winner} scores {round(winner_value)} vs {round(loser_value)}. "
            )

        focus = criterion_for_priority(top_priority(constraints.priorities))
        summary += f"Given your priority on {display_name(focus)}, this aligns well with your requirements."
        return summary

    def key_differences(
        self,
        first: OptionScore,
        second: OptionScore,
    ) -> list[tuple[Criterion, str, float, float]]:
        """(criterion, winner, winner score, loser score), largest gap first."""
        threshold = self.config.trade_offs.key_difference_gap
        differences = []

        for criterion in criteria_in([first, second]):
            a = first.criteria_scores.get(criterion, 0.0)
            b = second.criteria_scores.get(criterion, 0.0)
            gap = abs(a - b)
            if gap > threshold:
                winner = first.option.name if a > b else second.option.name
                differences.append((gap, criterion, winner, max(a, b), min(a, b)))

        differences.sort(key=lambda d: d[0], reverse=True)
        return [(criterion, winner, high, low) for _, criterion, winner, high, low in differences]

    def _option_trade_offs(
        self,
        option_score: OptionScore,
        result: EvaluationResult,
        constraints: UserConstraints,
    ) -> str:
        lines = []

        strengths = option_strengths(option_score, result.scores)
        if strengths:
            lines.append(f"• **Optimizes for:** {', '.join(strengths)}")

        sacrifices = option_sacrifices(option_score, result.scores)
        if sacrifices:
            lines.append(f"• **Sacrifices:** {', '.join(sacrifices)}")

        considerations = self._considerations(option_score, constraints)
        if considerations:
            lines.append(f"• **Considerations:** {', '.join(considerations)}")

        return "\n".join(lines)

    def _considerations(self, option_score: OptionScore, constraints: UserConstraints) -> list[str]:
        data = option_score.option.attributes or {}
        considerations = []

        if constraints.budget == Budget.LOW and data.get("costTier") == "high":
            considerations.append("may exceed budget constraints")
        if constraints.timeline == Timeline.IMMEDIATE and data.get("learningCurve") == "high":
            considerations.append("requires significant learning time")
        if data.get("learningCurve") == "high" and not team_knows(option_score.option.name, constraints):
            considerations.append("team lacks experience with this technology")
        if (
            constraints.scale.users > self.config.context_adjustments.high_scale_users
            and option_score.criteria_scores.get(Criterion.SCALABILITY, 0.0) < 70
        ):
            considerations.append("may struggle with high-scale requirements")

        return considerations

    def _impact_analysis(self, result: EvaluationResult, constraints: UserConstraints) -> str:
        lines = ["**Impact Analysis:**"]
        if not result.rankings:
            return lines[0]

        top = result.rankings[0]
        for alternative in result.rankings[1:]:
            lines.append(
                f"• Choosing {alternative.option.name} over {top.option.name}: "
                f"{self.impact_of(top, alternative)}"
            )

        priority_impact = self._priority_impact(result, constraints)
        if priority_impact:
            lines.append("")
            lines.append(priority_impact)

        return "\n".join(lines)

    @staticmethod
    def impact_of(top: RankedOption, alternative: RankedOption) -> str:
        difference = round(top.score - alternative.score)
        if difference < 5:
            return f"Minimal impact ({difference} point difference) - both options are very similar"
        if difference < 15:
            return f"Low impact ({difference} point difference) - minor trade-offs in specific areas"
        if difference < 30:
            return f"Moderate impact ({difference} point difference) - noticeable differences in key criteria"
        return f"High impact ({difference} point difference) - significant compromises in multiple areas"

    @staticmethod
    def _priority_impact(result: EvaluationResult, constraints: UserConstraints) -> Optional[str]:
        top = result.rankings[0]
        top_score = score_of(result.scores, top.option)
        if top_score is None:
            return None

        focus = criterion_for_priority(top_priority(constraints.priorities))
        value = top_score.criteria_scores.get(focus, 0.0)
        analysis = f"**Priority Impact:** Given your focus on {display_name(focus)}, "

        if value >= 80:
            analysis += (
                f"{top.option.name} excels in this area ({round(value)}/100), "
                "making it an excellent fit for your requirements."
            )
        elif value >= 60:
            analysis += (
                f"{top.option.name} performs well in this area ({round(value)}/100), "
                "meeting your requirements adequately."
            )
        else:
            analysis += (
                f"{top.option.name} has room for improvement in this area ({round(value)}/100). "
                "Consider if this trade-off is acceptable for your use case."
            )
        return analysis


def build_comparison_output(
    result: EvaluationResult,
    constraints: UserConstraints,
    config: Optional[RefereeConfig] = None,
) -> ComparisonOutput:
    """Build the complete comparison report.

    Args:
        result: Evaluation result to report on
        constraints: Constraints the result was evaluated under
        config: Referee configuration (defaults if omitted)

    Returns:
        ComparisonOutput ready for display or serialization
    """
    config = config or RefereeConfig()
    reporter = ComparisonReporter(config)
    explainer = RecommendationExplainer(config)

    return ComparisonOutput(
        comparison_table=reporter.comparison_table(result),
        pros_and_cons=reporter.pros_and_cons(result),
        trade_off_explanation=reporter.trade_off_explanation(result, constraints),
        final_recommendation=explainer.recommend(result, constraints),
        alternative_scenarios=explainer.alternative_scenarios(result, constraints),
        warnings=list(result.warnings),
    )
