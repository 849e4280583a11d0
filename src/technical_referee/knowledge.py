"""Domain Knowledge Registry - first stage of the decision pipeline.

Turns raw option attributes into 0-100 scores for the six standard
criteria. Each category owns a table of pure scoring functions plus a list
of rule records (predicate, delta, affected criteria). Categories without a
table are scored neutrally so evaluation never fails on an unfamiliar
technology.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .schema import STANDARD_CRITERIA, Category, Criterion, TechnicalOption

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 50.0

ScoringFunction = Callable[[TechnicalOption], float]
RuleCondition = Callable[[TechnicalOption], bool]


@dataclass(frozen=True)
class CriterionDefinition:
    """A criterion together with the function that scores it."""
    criterion: Criterion
    description: str
    scoring_fn: ScoringFunction


@dataclass(frozen=True)
class ScoringRule:
    """A fixed score delta applied when the condition holds."""
    name: str
    condition: RuleCondition
    score_adjustment: float
    affected_criteria: tuple[Criterion, ...]


def clamp(score: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a score into [low, high]."""
    return max(low, min(high, score))


def _attrs(option: TechnicalOption) -> dict[str, Any]:
    return option.attributes or {}


def _count(value: Any) -> int:
    return len(value or [])


# =============================================================================
# Cloud providers
# =============================================================================


def score_cloud_cost(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 50.0

    pricing = data.get("pricingModel")
    if pricing == "pay-as-you-go":
        score += 15
    elif pricing == "hybrid":
        score += 10
    elif pricing == "reserved":
        score += 5

    # Larger providers get economies of scale
    share = data.get("marketShare") or 0
    if share > 30:
        score += 10
    elif share > 15:
        score += 5

    return clamp(score)


def score_cloud_performance(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 50.0

    regions = data.get("regions") or 0
    if regions > 20:
        score += 20
    elif regions > 10:
        score += 15
    elif regions > 5:
        score += 10

    share = data.get("marketShare") or 0
    if share > 30:
        score += 15
    elif share > 15:
        score += 10

    return clamp(score)


def score_cloud_scalability(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 50.0

    services = data.get("serviceCount") or 0
    if services > 200:
        score += 20
    elif services > 100:
        score += 15
    elif services > 50:
        score += 10

    regions = data.get("regions") or 0
    if regions > 15:
        score += 15
    elif regions > 8:
        score += 10

    return clamp(score)


def score_cloud_learning_curve(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 50.0

    tier = data.get("learningCurve")
    if tier == "low":
        score += 20
    elif tier == "medium":
        score += 10

    # Popular providers have more tutorials and answers available
    share = data.get("marketShare") or 0
    if share > 30:
        score += 15
    elif share > 15:
        score += 10

    return clamp(score)


def score_cloud_vendor_lock_in(option: TechnicalOption) -> float:
    """Higher is better: fewer proprietary services means easier exit."""
    data = _attrs(option)
    score = 50.0

    services = data.get("serviceCount")
    if services and services < 50:
        score += 20
    elif services and services < 100:
        score += 10

    share = data.get("marketShare")
    if share and share < 10:
        score += 15
    elif share and share < 25:
        score += 10

    return clamp(score)


def score_cloud_maintainability(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 50.0

    score += min(20, _count(data.get("enterpriseFeatures")) * 2)
    score += min(15, _count(data.get("certifications")) * 3)

    share = data.get("marketShare") or 0
    if share > 30:
        score += 10
    elif share > 15:
        score += 5

    return clamp(score)


def has_enterprise_features(option: TechnicalOption) -> bool:
    return _count(_attrs(option).get("enterpriseFeatures")) > 5


def has_high_market_share(option: TechnicalOption) -> bool:
    return (_attrs(option).get("marketShare") or 0) > 25


def has_pay_as_you_go_pricing(option: TechnicalOption) -> bool:
    return _attrs(option).get("pricingModel") == "pay-as-you-go"


CLOUD_CRITERIA = (
    CriterionDefinition(
        Criterion.COST,
        "Pricing models, operational costs, and resource efficiency",
        score_cloud_cost,
    ),
    CriterionDefinition(
        Criterion.PERFORMANCE,
        "Compute performance, network speed, and global infrastructure",
        score_cloud_performance,
    ),
    CriterionDefinition(
        Criterion.SCALABILITY,
        "Auto-scaling capabilities and global reach",
        score_cloud_scalability,
    ),
    CriterionDefinition(
        Criterion.LEARNING_CURVE,
        "Ease of getting started and documentation quality",
        score_cloud_learning_curve,
    ),
    CriterionDefinition(
        Criterion.VENDOR_LOCK_IN,
        "Portability and standards compliance",
        score_cloud_vendor_lock_in,
    ),
    CriterionDefinition(
        Criterion.MAINTAINABILITY,
        "Service reliability and enterprise support",
        score_cloud_maintainability,
    ),
)

CLOUD_RULES = (
    ScoringRule(
        "Enterprise Features Bonus",
        has_enterprise_features,
        10,
        (Criterion.MAINTAINABILITY,),
    ),
    ScoringRule(
        "High Market Share Bonus",
        has_high_market_share,
        5,
        (Criterion.LEARNING_CURVE, Criterion.MAINTAINABILITY),
    ),
    ScoringRule(
        "Pay-as-you-go Cost Advantage",
        has_pay_as_you_go_pricing,
        8,
        (Criterion.COST,),
    ),
)


# =============================================================================
# Backend frameworks
# =============================================================================


def score_backend_cost(option: TechnicalOption) -> float:
    data = _attrs(option)
    # Frameworks are open source, so licensing is never a cost
    score = 50.0 + 15

    language = data.get("language")
    if language in ("javascript", "python"):
        score += 10
    elif language in ("java", "c#"):
        score += 5

    speed = data.get("developmentSpeed") or 0
    if speed >= 8:
        score += 15
    elif speed >= 6:
        score += 10

    return clamp(score)


def score_backend_performance(option: TechnicalOption) -> float:
    rating = _attrs(option).get("performanceRating") or 0
    return clamp(30.0 + rating * 7)


def score_backend_scalability(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 50.0

    rating = data.get("performanceRating") or 0
    if rating >= 8:
        score += 20
    elif rating >= 6:
        score += 15
    elif rating >= 4:
        score += 10

    adoption = data.get("enterpriseAdoption") or 0
    if adoption >= 8:
        score += 15
    elif adoption >= 6:
        score += 10

    return clamp(score)


def score_backend_learning_curve(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 30.0 + (data.get("developmentSpeed") or 0) * 5

    tier = data.get("learningCurve")
    if tier == "low":
        score += 20
    elif tier == "medium":
        score += 10

    return clamp(score)


def score_backend_vendor_lock_in(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 70.0

    if data.get("language") in ("javascript", "python", "java"):
        score += 15

    packages = data.get("packageEcosystem") or 0
    if packages > 100000:
        score += 15
    elif packages > 50000:
        score += 10

    return clamp(score)


def score_backend_maintainability(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 30.0

    community = data.get("communitySize") or 0
    if community > 100000:
        score += 25
    elif community > 50000:
        score += 20
    elif community > 10000:
        score += 15

    adoption = data.get("enterpriseAdoption") or 0
    if adoption >= 8:
        score += 20
    elif adoption >= 6:
        score += 15
    elif adoption >= 4:
        score += 10

    packages = data.get("packageEcosystem") or 0
    if packages > 100000:
        score += 15
    elif packages > 50000:
        score += 10

    return clamp(score)


def has_high_development_speed(option: TechnicalOption) -> bool:
    return (_attrs(option).get("developmentSpeed") or 0) >= 8


def has_large_community(option: TechnicalOption) -> bool:
    return (_attrs(option).get("communitySize") or 0) > 50000


def has_enterprise_adoption(option: TechnicalOption) -> bool:
    return (_attrs(option).get("enterpriseAdoption") or 0) >= 7


BACKEND_CRITERIA = (
    CriterionDefinition(
        Criterion.COST,
        "Development costs, hosting requirements, and licensing",
        score_backend_cost,
    ),
    CriterionDefinition(
        Criterion.PERFORMANCE,
        "Runtime performance and throughput capabilities",
        score_backend_performance,
    ),
    CriterionDefinition(
        Criterion.SCALABILITY,
        "Horizontal scaling and load handling capabilities",
        score_backend_scalability,
    ),
    CriterionDefinition(
        Criterion.LEARNING_CURVE,
        "Development speed and ease of learning",
        score_backend_learning_curve,
    ),
    CriterionDefinition(
        Criterion.VENDOR_LOCK_IN,
        "Framework independence and portability",
        score_backend_vendor_lock_in,
    ),
    CriterionDefinition(
        Criterion.MAINTAINABILITY,
        "Code structure, testing support, and community",
        score_backend_maintainability,
    ),
)

BACKEND_RULES = (
    ScoringRule(
        "High Development Speed Bonus",
        has_high_development_speed,
        10,
        (Criterion.LEARNING_CURVE,),
    ),
    ScoringRule(
        "Large Community Bonus",
        has_large_community,
        8,
        (Criterion.MAINTAINABILITY, Criterion.LEARNING_CURVE),
    ),
    ScoringRule(
        "Enterprise Adoption Bonus",
        has_enterprise_adoption,
        6,
        (Criterion.MAINTAINABILITY,),
    ),
)


# =============================================================================
# Databases
# =============================================================================

OPEN_SOURCE_DATABASES = frozenset(["postgresql", "mysql", "mongodb", "redis", "cassandra"])


def _is_open_source_database(option: TechnicalOption) -> bool:
    return option.name.lower() in OPEN_SOURCE_DATABASES


def score_database_cost(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 50.0

    if _is_open_source_database(option):
        score += 20

    complexity = data.get("queryComplexity")
    if complexity == "simple":
        score += 15
    elif complexity == "moderate":
        score += 10

    return clamp(score)


def score_database_performance(option: TechnicalOption) -> float:
    rating = _attrs(option).get("performanceRating") or 0
    return clamp(30.0 + rating * 7)


def score_database_scalability(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 50.0

    scaling = data.get("horizontalScaling")
    if scaling == "excellent":
        score += 25
    elif scaling == "good":
        score += 15
    elif scaling == "poor":
        score -= 10

    flexibility = data.get("schemaFlexibility")
    if flexibility == "schemaless":
        score += 15
    elif flexibility == "flexible":
        score += 10

    # NoSQL stores typically shard more easily
    if data.get("type") != "relational":
        score += 10

    return clamp(score)


def score_database_learning_curve(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 50.0

    complexity = data.get("queryComplexity")
    if complexity == "simple":
        score += 20
    elif complexity == "moderate":
        score += 10

    # SQL is widely known
    if data.get("type") == "relational":
        score += 15

    if data.get("schemaFlexibility") == "rigid":
        score += 10

    return clamp(score)


def score_database_vendor_lock_in(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 50.0

    relational = data.get("type") == "relational"
    if relational:
        score += 20

    if _is_open_source_database(option):
        score += 25

    # Standard SQL keeps data portable
    if relational:
        score += 10

    return clamp(score)


def score_database_maintainability(option: TechnicalOption) -> float:
    data = _attrs(option)
    score = 50.0

    if data.get("acidCompliance"):
        score += 20

    consistency = data.get("consistencyModel")
    if consistency == "strong":
        score += 15
    elif consistency == "configurable":
        score += 10

    if data.get("type") == "relational":
        score += 10

    return clamp(score)


def has_acid_compliance(option: TechnicalOption) -> bool:
    return _attrs(option).get("acidCompliance") is True


def has_schema_flexibility(option: TechnicalOption) -> bool:
    return _attrs(option).get("schemaFlexibility") in ("flexible", "schemaless")


def has_strong_consistency(option: TechnicalOption) -> bool:
    return _attrs(option).get("consistencyModel") == "strong"


DATABASE_CRITERIA = (
    CriterionDefinition(
        Criterion.COST,
        "Licensing costs, hosting requirements, and operational expenses",
        score_database_cost,
    ),
    CriterionDefinition(
        Criterion.PERFORMANCE,
        "Query performance and throughput capabilities",
        score_database_performance,
    ),
    CriterionDefinition(
        Criterion.SCALABILITY,
        "Horizontal scaling and data distribution capabilities",
        score_database_scalability,
    ),
    CriterionDefinition(
        Criterion.LEARNING_CURVE,
        "Query language complexity and ease of use",
        score_database_learning_curve,
    ),
    CriterionDefinition(
        Criterion.VENDOR_LOCK_IN,
        "Standards compliance and data portability",
        score_database_vendor_lock_in,
    ),
    CriterionDefinition(
        Criterion.MAINTAINABILITY,
        "ACID compliance, backup capabilities, and tooling",
        score_database_maintainability,
    ),
)

DATABASE_RULES = (
    ScoringRule(
        "ACID Compliance Bonus",
        has_acid_compliance,
        10,
        (Criterion.MAINTAINABILITY,),
    ),
    ScoringRule(
        "Schema Flexibility Bonus",
        has_schema_flexibility,
        8,
        (Criterion.SCALABILITY,),
    ),
    ScoringRule(
        "Strong Consistency Bonus",
        has_strong_consistency,
        6,
        (Criterion.MAINTAINABILITY,),
    ),
)


# =============================================================================
# Generic fallback
# =============================================================================


def score_neutral(option: TechnicalOption) -> float:
    return NEUTRAL_SCORE


GENERIC_CRITERIA = (
    CriterionDefinition(Criterion.COST, "Overall cost considerations", score_neutral),
    CriterionDefinition(Criterion.PERFORMANCE, "Performance characteristics", score_neutral),
    CriterionDefinition(Criterion.SCALABILITY, "Scaling capabilities", score_neutral),
    CriterionDefinition(Criterion.LEARNING_CURVE, "Ease of adoption", score_neutral),
    CriterionDefinition(Criterion.VENDOR_LOCK_IN, "Vendor independence", score_neutral),
    CriterionDefinition(Criterion.MAINTAINABILITY, "Long-term maintainability", score_neutral),
)


DEFAULT_CRITERIA: dict[Category, tuple[CriterionDefinition, ...]] = {
    Category.CLOUD: CLOUD_CRITERIA,
    Category.BACKEND: BACKEND_CRITERIA,
    Category.DATABASE: DATABASE_CRITERIA,
}

DEFAULT_RULES: dict[Category, tuple[ScoringRule, ...]] = {
    Category.CLOUD: CLOUD_RULES,
    Category.BACKEND: BACKEND_RULES,
    Category.DATABASE: DATABASE_RULES,
}

KNOWN_TECHNOLOGIES: dict[Category, frozenset[str]] = {
    Category.CLOUD: frozenset(["aws", "gcp", "azure", "digitalocean", "linode", "vultr"]),
    Category.BACKEND: frozenset([
        "node.js", "django", "spring boot", "express", "fastapi", "rails", "laravel",
    ]),
    Category.DATABASE: frozenset([
        "postgresql", "mysql", "mongodb", "redis", "cassandra", "dynamodb",
    ]),
}

FALLBACK_ATTRIBUTES: dict[Category, dict[str, Any]] = {
    Category.CLOUD: {
        "pricingModel": "pay-as-you-go",
        "serviceCount": 50,
        "enterpriseFeatures": [],
        "learningCurve": "medium",
        "marketShare": 5,
        "regions": 5,
        "certifications": [],
    },
    Category.BACKEND: {
        "language": "unknown",
        "developmentSpeed": 5,
        "communitySize": 10000,
        "enterpriseAdoption": 5,
        "performanceRating": 5,
        "learningCurve": "medium",
        "packageEcosystem": 10000,
    },
    Category.DATABASE: {
        "type": "relational",
        "schemaFlexibility": "rigid",
        "queryComplexity": "moderate",
        "horizontalScaling": "good",
        "consistencyModel": "strong",
        "acidCompliance": True,
        "performanceRating": 5,
    },
}

# (required fields, {field: allowed values}, numeric fields)
ATTRIBUTE_REQUIREMENTS: dict[Category, tuple[tuple[str, ...], dict[str, tuple[str, ...]], tuple[str, ...]]] = {
    Category.CLOUD: (
        ("pricingModel", "serviceCount", "learningCurve", "marketShare", "regions"),
        {
            "pricingModel": ("pay-as-you-go", "reserved", "hybrid"),
            "learningCurve": ("low", "medium", "high"),
        },
        (),
    ),
    Category.BACKEND: (
        ("language", "developmentSpeed", "communitySize", "enterpriseAdoption", "performanceRating"),
        {},
        ("developmentSpeed", "communitySize", "enterpriseAdoption", "performanceRating"),
    ),
    Category.DATABASE: (
        (
            "type", "schemaFlexibility", "queryComplexity",
            "horizontalScaling", "consistencyModel", "performanceRating",
        ),
        {
            "type": ("relational", "document", "key-value", "graph", "columnar"),
            "schemaFlexibility": ("rigid", "flexible", "schemaless"),
        },
        (),
    ),
}

INVALID_VALUE_MESSAGES = {
    "pricingModel": "Invalid pricing model",
    "learningCurve": "Invalid learning curve value",
    "type": "Invalid database type",
    "schemaFlexibility": "Invalid schema flexibility value",
}


class KnowledgeRegistry:
    """Registry of per-category scoring tables and rules.

    The registry is read-only once built and is passed explicitly into the
    pipeline. Custom tables can be supplied to extend or replace categories.
    """

    def __init__(
        self,
        criteria: Optional[dict[Category, tuple[CriterionDefinition, ...]]] = None,
        rules: Optional[dict[Category, tuple[ScoringRule, ...]]] = None,
        known_technologies: Optional[dict[Category, frozenset[str]]] = None,
    ):
        self._criteria = dict(DEFAULT_CRITERIA if criteria is None else criteria)
        self._rules = dict(DEFAULT_RULES if rules is None else rules)
        self._known = dict(KNOWN_TECHNOLOGIES if known_technologies is None else known_technologies)

    def categories(self) -> list[Category]:
        """Categories that have a dedicated scoring table."""
        return list(self._criteria)

    def criteria_for(self, category: Category) -> list[CriterionDefinition]:
        """Ordered criterion definitions for a category (generic if unknown)."""
        return list(self._criteria.get(category, GENERIC_CRITERIA))

    def scoring_rules_for(self, category: Category) -> list[ScoringRule]:
        """Scoring rules for a category (none if unknown)."""
        return list(self._rules.get(category, ()))

    def is_known_technology(self, option: TechnicalOption) -> bool:
        """Check whether the category+name pair is a known technology."""
        return option.name.lower() in self._known.get(option.category, frozenset())

    def fallback_attributes(self, category: Category) -> dict[str, Any]:
        """Default attribute values for unknown technologies of a category."""
        defaults = FALLBACK_ATTRIBUTES.get(category, {})
        return {key: list(value) if isinstance(value, list) else value for key, value in defaults.items()}

    def evaluate_option(self, option: TechnicalOption) -> dict[Criterion, float]:
        """Run every criterion function for the option's category.

        Options without metadata score neutrally. A function that raises
        is logged and scored neutrally.
        """
        scores: dict[Criterion, float] = {}

        for definition in self.criteria_for(option.category):
            if option.attributes is None:
                scores[definition.criterion] = NEUTRAL_SCORE
                continue
            try:
                scores[definition.criterion] = clamp(float(definition.scoring_fn(option)))
            except Exception as e:
                logger.warning(
                    "Scoring function failed for %s on %s: %s",
                    option.name, definition.criterion.value, e,
                )
                scores[definition.criterion] = NEUTRAL_SCORE

        return scores

    def apply_score_adjustments(
        self,
        option: TechnicalOption,
        base_scores: dict[Criterion, float],
    ) -> dict[Criterion, float]:
        """Apply every matching rule's delta to its affected criteria."""
        adjusted = dict(base_scores)

        for rule in self.scoring_rules_for(option.category):
            try:
                matched = rule.condition(option)
            except Exception as e:
                logger.warning("Scoring rule %r failed for %s: %s", rule.name, option.name, e)
                continue
            if not matched:
                continue
            logger.debug("Rule %r applies to %s", rule.name, option.name)
            for criterion in rule.affected_criteria:
                if criterion in adjusted:
                    adjusted[criterion] = clamp(adjusted[criterion] + rule.score_adjustment)

        return adjusted

    def comprehensive_evaluation(self, option: TechnicalOption) -> dict[Criterion, float]:
        """Base scores plus rule adjustments, with all six criteria present."""
        scores = self.apply_score_adjustments(option, self.evaluate_option(option))
        return {criterion: scores.get(criterion, NEUTRAL_SCORE) for criterion in STANDARD_CRITERIA}

    def validate_option_attributes(self, option: TechnicalOption) -> list[str]:
        """Describe missing or invalid category-specific attributes."""
        if option.attributes is None:
            return ["Option metadata is missing"]

        requirements = ATTRIBUTE_REQUIREMENTS.get(option.category)
        if requirements is None:
            return []

        required, allowed_values, numeric = requirements
        data = option.attributes
        errors = []

        for field in required:
            if field not in data:
                errors.append(f"Missing required field: {field}")

        for field, allowed in allowed_values.items():
            value = data.get(field)
            if value and value not in allowed:
                errors.append(INVALID_VALUE_MESSAGES[field])

        for field in numeric:
            value = data.get(field)
            if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
                errors.append(f"Field {field} must be numeric")

        return errors


def sample_technologies() -> dict[Category, list[TechnicalOption]]:
    """Well-known technologies with representative attributes."""
    return {
        Category.CLOUD: [
            TechnicalOption(name="AWS", category=Category.CLOUD, attributes={
                "pricingModel": "pay-as-you-go",
                "serviceCount": 200,
                "enterpriseFeatures": [
                    "IAM", "CloudTrail", "Config", "Organizations", "Control Tower", "Security Hub",
                ],
                "learningCurve": "high",
                "marketShare": 32,
                "regions": 25,
                "certifications": ["SOC", "ISO", "HIPAA", "PCI DSS"],
            }),
            TechnicalOption(name="GCP", category=Category.CLOUD, attributes={
                "pricingModel": "pay-as-you-go",
                "serviceCount": 100,
                "enterpriseFeatures": [
                    "IAM", "Cloud Audit Logs", "Resource Manager", "Security Command Center",
                ],
                "learningCurve": "medium",
                "marketShare": 9,
                "regions": 24,
                "certifications": ["SOC", "ISO", "HIPAA"],
            }),
            TechnicalOption(name="Azure", category=Category.CLOUD, attributes={
                "pricingModel": "hybrid",
                "serviceCount": 150,
                "enterpriseFeatures": ["Active Directory", "Azure Policy", "Security Center", "Sentinel"],
                "learningCurve": "medium",
                "marketShare": 20,
                "regions": 22,
                "certifications": ["SOC", "ISO", "HIPAA", "FedRAMP"],
            }),
        ],
        Category.BACKEND: [
            TechnicalOption(name="Node.js", category=Category.BACKEND, attributes={
                "language": "javascript",
                "developmentSpeed": 8,
                "communitySize": 150000,
                "enterpriseAdoption": 7,
                "performanceRating": 7,
                "learningCurve": "low",
                "packageEcosystem": 1300000,
            }),
            TechnicalOption(name="Django", category=Category.BACKEND, attributes={
                "language": "python",
                "developmentSpeed": 9,
                "communitySize": 80000,
                "enterpriseAdoption": 8,
                "performanceRating": 6,
                "learningCurve": "low",
                "packageEcosystem": 300000,
            }),
            TechnicalOption(name="Spring Boot", category=Category.BACKEND, attributes={
                "language": "java",
                "developmentSpeed": 6,
                "communitySize": 60000,
                "enterpriseAdoption": 9,
                "performanceRating": 8,
                "learningCurve": "medium",
                "packageEcosystem": 400000,
            }),
        ],
        Category.DATABASE: [
            TechnicalOption(name="PostgreSQL", category=Category.DATABASE, attributes={
                "type": "relational",
                "schemaFlexibility": "rigid",
                "queryComplexity": "moderate",
                "horizontalScaling": "good",
                "consistencyModel": "strong",
                "acidCompliance": True,
                "performanceRating": 8,
            }),
            TechnicalOption(name="MongoDB", category=Category.DATABASE, attributes={
                "type": "document",
                "schemaFlexibility": "schemaless",
                "queryComplexity": "simple",
                "horizontalScaling": "excellent",
                "consistencyModel": "configurable",
                "acidCompliance": False,
                "performanceRating": 7,
            }),
            TechnicalOption(name="MySQL", category=Category.DATABASE, attributes={
                "type": "relational",
                "schemaFlexibility": "rigid",
                "queryComplexity": "simple",
                "horizontalScaling": "poor",
                "consistencyModel": "strong",
                "acidCompliance": True,
                "performanceRating": 7,
            }),
        ],
    }
