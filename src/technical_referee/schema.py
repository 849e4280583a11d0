"""Pydantic models for the Technical Referee decision engine.

Input schemas for candidate options and user constraints, intermediate
scoring models, and the output schemas for recommendations.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Enums
# =============================================================================


class Category(str, Enum):
    """Technology category of a candidate option."""
    CLOUD = "cloud"
    BACKEND = "backend"
    DATABASE = "database"
    FRONTEND = "frontend"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, value: str) -> "Category":
        """Parse category from string (unrecognised values become UNKNOWN)."""
        if not value:
            return cls.UNKNOWN
        mapping = {
            "cloud": cls.CLOUD,
            "backend": cls.BACKEND,
            "database": cls.DATABASE,
            "frontend": cls.FRONTEND,
        }
        return mapping.get(value.strip().lower(), cls.UNKNOWN)


class Criterion(str, Enum):
    """The six standard evaluation criteria."""
    COST = "cost"
    PERFORMANCE = "performance"
    SCALABILITY = "scalability"
    LEARNING_CURVE = "learningCurve"
    VENDOR_LOCK_IN = "vendorLockIn"
    MAINTAINABILITY = "maintainability"


STANDARD_CRITERIA: tuple[Criterion, ...] = tuple(Criterion)

CRITERION_DISPLAY_NAMES: dict[Criterion, str] = {
    Criterion.COST: "Cost Effectiveness",
    Criterion.PERFORMANCE: "Performance",
    Criterion.SCALABILITY: "Scalability",
    Criterion.LEARNING_CURVE: "Ease of Use",
    Criterion.VENDOR_LOCK_IN: "Vendor Independence",
    Criterion.MAINTAINABILITY: "Maintainability",
}


class PriorityKey(str, Enum):
    """User-facing priority keys."""
    COST = "cost"
    PERFORMANCE = "performance"
    EASE_OF_USE = "easeOfUse"
    SCALABILITY = "scalability"
    VENDOR_LOCK_IN = "vendorLockIn"


class Budget(str, Enum):
    """Budget level."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Traffic(str, Enum):
    """Expected traffic volume."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SkillLevel(str, Enum):
    """Overall skill level of the team."""
    JUNIOR = "junior"
    MIXED = "mixed"
    SENIOR = "senior"


class Timeline(str, Enum):
    """Delivery timeline."""
    IMMEDIATE = "immediate"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class ImpactLevel(str, Enum):
    """Severity of a compromise."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# =============================================================================
# Input Models
# =============================================================================


class TechnicalOption(BaseModel):
    """A candidate technology to compare.

    Attributes are free-form and interpreted per category, e.g. a cloud
    provider carries pricingModel, serviceCount, marketShare and regions.
    None means no metadata was supplied; an empty dict is scored as-is.
    """
    name: str
    category: Category
    attributes: Optional[dict[str, Any]] = Field(None, alias="metadata")

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("category", mode="before")
    @classmethod
    def parse_category(cls, v):
        if isinstance(v, Category):
            return v
        if isinstance(v, str):
            return Category.from_string(v)
        return v


class Priorities(BaseModel):
    """Importance (1-5) of each user-facing priority key."""
    cost: int = Field(3, ge=1, le=5)
    performance: int = Field(3, ge=1, le=5)
    ease_of_use: int = Field(3, ge=1, le=5, alias="easeOfUse")
    scalability: int = Field(3, ge=1, le=5)
    vendor_lock_in: int = Field(3, ge=1, le=5, alias="vendorLockIn")

    class Config:
        populate_by_name = True

    def by_key(self) -> dict[PriorityKey, int]:
        """Return the priorities keyed by PriorityKey."""
        return {
            PriorityKey.COST: self.cost,
            PriorityKey.PERFORMANCE: self.performance,
            PriorityKey.EASE_OF_USE: self.ease_of_use,
            PriorityKey.SCALABILITY: self.scalability,
            PriorityKey.VENDOR_LOCK_IN: self.vendor_lock_in,
        }


class Scale(BaseModel):
    """Expected scale of the system."""
    users: int = Field(0, ge=0)
    traffic: Traffic = Traffic.MEDIUM


class Team(BaseModel):
    """Team capabilities."""
    skill_level: SkillLevel = Field(SkillLevel.MIXED, alias="skillLevel")
    experience: list[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True


class UserConstraints(BaseModel):
    """Situational constraints and priorities supplied by the user."""
    budget: Budget = Budget.MEDIUM
    scale: Scale = Field(default_factory=Scale)
    team: Team = Field(default_factory=Team)
    timeline: Timeline = Timeline.MEDIUM
    priorities: Priorities = Field(default_factory=Priorities)


# =============================================================================
# Evaluation Models
# =============================================================================


class OptionScore(BaseModel):
    """Scores for one option after knowledge, context and weighting."""
    option: TechnicalOption
    criteria_scores: dict[Criterion, float]
    weighted_score: float
    normalized_score: int = Field(..., ge=0, le=100)

    class Config:
        frozen = True


class RankedOption(BaseModel):
    """An option with its position in the ranking."""
    option: TechnicalOption
    rank: int = Field(..., ge=1)
    score: float


class Compromise(BaseModel):
    """A weakness of one option relative to the others."""
    option_name: str
    description: str
    impact: ImpactLevel
    affected_criteria: list[Criterion] = Field(default_factory=list)
    score_gap: float = 0.0


class TradeOffAnalysis(BaseModel):
    """Per-criterion leaders and laggards plus detected compromises."""
    strongest_option: dict[Criterion, TechnicalOption] = Field(default_factory=dict)
    weakest_option: dict[Criterion, TechnicalOption] = Field(default_factory=dict)
    compromises: list[Compromise] = Field(default_factory=list)


class EvaluationResult(BaseModel):
    """Result of a single evaluate() call."""
    scores: list[OptionScore]
    rankings: list[RankedOption]
    trade_offs: TradeOffAnalysis
    warnings: list[str] = Field(default_factory=list)

    def score_for(self, name: str) -> Optional[OptionScore]:
        """Look up the score of an option by name."""
        for score in self.scores:
            if score.option.name == name:
                return score
        return None


# =============================================================================
# Output Models
# =============================================================================


class ComparisonTable(BaseModel):
    """Tabular side-by-side view of all options."""
    headers: list[str]
    rows: list[list[str]]


class ProsCons(BaseModel):
    """Advantages and disadvantages of a single option."""
    option: TechnicalOption
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)


class Recommendation(BaseModel):
    """Final recommendation with confidence and justification."""
    recommended_option: TechnicalOption
    confidence: float = Field(..., ge=0.0, le=1.0)
    reasoning: str
    key_factors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class AlternativeScenario(BaseModel):
    """A what-if condition under which another option would win."""
    scenario: str
    recommended_option: TechnicalOption
    reasoning: str


class ComparisonOutput(BaseModel):
    """Complete comparison report handed to collaborators."""
    comparison_table: ComparisonTable
    pros_and_cons: list[ProsCons]
    trade_off_explanation: str
    final_recommendation: Recommendation
    alternative_scenarios: list[AlternativeScenario] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
