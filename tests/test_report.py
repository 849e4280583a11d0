"""Tests for the human-readable comparison report."""

import pytest

from technical_referee.ranker import rank_options
from technical_referee.report import (
    ComparisonReporter,
    build_comparison_output,
    format_score,
    score_label,
)
from technical_referee.schema import (
    STANDARD_CRITERIA,
    Category,
    Criterion,
    EvaluationResult,
    OptionScore,
    RankedOption,
    TechnicalOption,
    TradeOffAnalysis,
    UserConstraints,
)


def make_score(name: str, weighted: float, criteria: dict[Criterion, float], **attributes) -> OptionScore:
    return OptionScore(
        option=TechnicalOption(name=name, category=Category.CLOUD, attributes=attributes),
        criteria_scores=criteria,
        weighted_score=weighted,
        normalized_score=round(weighted),
    )


def make_result(*scores: OptionScore) -> EvaluationResult:
    return EvaluationResult(
        scores=list(scores),
        rankings=rank_options(list(scores)),
        trade_offs=TradeOffAnalysis(),
        warnings=["Something to note"],
    )


def uniform(value: float) -> dict[Criterion, float]:
    return {criterion: value for criterion in STANDARD_CRITERIA}


def by_name(pros_and_cons) -> dict:
    return {entry.option.name: entry for entry in pros_and_cons}


@pytest.fixture
def reporter() -> ComparisonReporter:
    return ComparisonReporter()


@pytest.fixture
def result() -> EvaluationResult:
    """Budget option listed first, premium option ranked first."""
    budget = {**uniform(55.0), Criterion.COST: 90.0, Criterion.PERFORMANCE: 30.0}
    premium = {**uniform(75.0), Criterion.COST: 50.0, Criterion.PERFORMANCE: 95.0}
    return make_result(
        make_score("Budget", 60.0, budget, learningCurve="low"),
        make_score("Premium", 78.0, premium, learningCurve="high", vendorLockIn="high"),
    )


class TestScoreLabels:
    """Tests for score labels."""

    @pytest.mark.parametrize("score,label", [
        (100, "Excellent"),
        (80, "Excellent"),
        (79.4, "Good"),
        (60, "Good"),
        (40, "Fair"),
        (20, "Poor"),
        (19, "Very Poor"),
        (0, "Very Poor"),
    ])
    def test_labels(self, score, label):
        assert score_label(score) == label

    def test_format_score(self):
        assert format_score(84.6) == "85/100 (Excellent)"


class TestComparisonTable:
    """Tests for the comparison table."""

    def test_headers(self, reporter, result):
        table = reporter.comparison_table(result)

        assert table.headers == [
            "Option",
            "Cost Effectiveness",
            "Performance",
            "Scalability",
            "Ease of Use",
            "Vendor Independence",
            "Maintainability",
            "Overall Score",
        ]

    def test_rows_sorted_by_overall_score(self, reporter, result):
        table = reporter.comparison_table(result)

        assert [row[0] for row in table.rows] == ["Premium", "Budget"]
        assert table.rows[0][1] == "50/100 (Fair)"
        assert table.rows[0][-1] == "78/100"

    def test_missing_criterion(self, reporter):
        result = make_result(
            make_score("A", 70.0, {Criterion.COST: 70.0}),
            make_score("B", 60.0, {Criterion.COST: 60.0, Criterion.PERFORMANCE: 60.0}),
        )
        table = reporter.comparison_table(result)
        assert table.rows[0][2] == "N/A"


class TestProsAndCons:
    """Tests for per-option pros and cons."""

    def test_one_entry_per_option_in_score_order(self, reporter, result):
        pros_and_cons = reporter.pros_and_cons(result)

        assert [entry.option.name for entry in pros_and_cons] == ["Budget", "Premium"]
        assert pros_and_cons[0].option is result.scores[0].option

    def test_same_name_in_two_categories(self, reporter):
        """Options sharing a name stay separate when their categories differ."""
        cache = OptionScore(
            option=TechnicalOption(name="Redis", category=Category.DATABASE, attributes={}),
            criteria_scores={**uniform(60.0), Criterion.PERFORMANCE: 95.0},
            weighted_score=70.0,
            normalized_score=70,
        )
        server = OptionScore(
            option=TechnicalOption(name="Redis", category=Category.BACKEND, attributes={}),
            criteria_scores={**uniform(60.0), Criterion.PERFORMANCE: 30.0},
            weighted_score=55.0,
            normalized_score=55,
        )
        pros_and_cons = reporter.pros_and_cons(make_result(cache, server))

        assert len(pros_and_cons) == 2
        assert [entry.option.category for entry in pros_and_cons] == [Category.DATABASE, Category.BACKEND]
        assert "Superior performance (95/100)" in pros_and_cons[0].pros
        assert "Weak performance (30/100)" in pros_and_cons[1].cons

    def test_relative_strengths(self, reporter, result):
        pros_and_cons = by_name(reporter.pros_and_cons(result))

        assert "Superior cost effectiveness (90/100)" in pros_and_cons["Budget"].pros
        assert "Weak performance (30/100)" in pros_and_cons["Budget"].cons
        assert "Superior performance (95/100)" in pros_and_cons["Premium"].pros

    def test_attribute_insights(self, reporter, result):
        pros_and_cons = by_name(reporter.pros_and_cons(result))

        assert "Easy to learn and adopt" in pros_and_cons["Budget"].pros
        assert "Steep learning curve" in pros_and_cons["Premium"].cons
        assert "High vendor lock-in risk" in pros_and_cons["Premium"].cons

    def test_fallback_entries(self, reporter):
        result = make_result(
            make_score("A", 70.0, uniform(70.0)),
            make_score("B", 70.0, uniform(70.0)),
        )
        pros_cons = reporter.option_pros_and_cons(0, result)

        assert pros_cons.pros == ["Overall score of 70/100"]
        assert pros_cons.cons == ["May not be the optimal choice for all use cases"]

    def test_capped(self, reporter):
        strong = uniform(95.0)
        weak = uniform(20.0)
        result = make_result(
            make_score("Strong", 95.0, strong, learningCurve="low", vendorLockIn="low"),
            make_score("Weak", 20.0, weak),
        )
        assert len(reporter.option_pros_and_cons(0, result).pros) == 5


class TestTradeOffExplanation:
    """Tests for the trade-off narrative."""

    def test_sections(self, reporter, result):
        text = reporter.trade_off_explanation(result, UserConstraints())

        assert text.startswith("**Trade-off Summary:**")
        assert "**Detailed Trade-offs:**" in text
        assert "**Impact Analysis:**" in text
        assert "**Priority Impact:**" in text

    def test_summary_names_key_differentiator(self, reporter, result):
        text = reporter.trade_off_explanation(result, UserConstraints())

        assert "Premium ranks highest overall (78/100) compared to Budget (60/100)." in text
        assert "The key differentiator is Performance where Premium scores 95 vs 30." in text

    def test_optimizes_and_sacrifices(self, reporter, result):
        text = reporter.trade_off_explanation(result, UserConstraints())

        assert "• **Optimizes for:** cost effectiveness" in text
        assert "• **Sacrifices:** performance" in text

    def test_impact_line(self, reporter, result):
        text = reporter.trade_off_explanation(result, UserConstraints())
        assert "• Choosing Budget over Premium: Moderate impact (18 point difference)" in text

    def test_considerations(self, reporter, result):
        constraints = UserConstraints.model_validate({"timeline": "immediate"})
        text = reporter.trade_off_explanation(result, constraints)

        assert "requires significant learning time" in text
        assert "team lacks experience with this technology" in text

    @pytest.mark.parametrize("gap,prefix", [
        (3, "Minimal impact"),
        (10, "Low impact"),
        (20, "Moderate impact"),
        (40, "High impact"),
    ])
    def test_impact_of(self, gap, prefix):
        option = TechnicalOption(name="X", category=Category.CLOUD)
        top = RankedOption(option=option, rank=1, score=80.0)
        alternative = RankedOption(option=option, rank=2, score=80.0 - gap)

        assert ComparisonReporter.impact_of(top, alternative).startswith(prefix)


class TestBuildComparisonOutput:
    """Tests for the bundled report."""

    def test_bundles_every_section(self, result):
        output = build_comparison_output(result, UserConstraints())

        assert output.final_recommendation.recommended_option.name == "Premium"
        assert len(output.comparison_table.rows) == 2
        assert [entry.option.name for entry in output.pros_and_cons] == ["Budget", "Premium"]
        assert output.trade_off_explanation
        assert output.warnings == ["Something to note"]

    def test_alternative_scenarios(self, result):
        output = build_comparison_output(result, UserConstraints())
        names = [scenario.recommended_option.name for scenario in output.alternative_scenarios]

        assert names
        assert set(names) == {"Budget"}
