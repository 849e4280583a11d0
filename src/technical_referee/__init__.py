"""Technical Referee - multi-criteria comparison of technical options."""

from technical_referee.config import RefereeConfig, load_config, resolve_config
from technical_referee.engine import RefereeEngine, evaluate, load_constraints, load_options
from technical_referee.errors import (
    InvalidConfig,
    InvalidConstraints,
    InvalidOption,
    InvalidOptionCount,
    RefereeError,
)
from technical_referee.knowledge import KnowledgeRegistry
from technical_referee.schema import (
    Category,
    ComparisonOutput,
    Criterion,
    EvaluationResult,
    TechnicalOption,
    UserConstraints,
)

__all__ = [
    "RefereeEngine",
    "evaluate",
    "load_options",
    "load_constraints",
    "KnowledgeRegistry",
    "RefereeConfig",
    "load_config",
    "resolve_config",
    "RefereeError",
    "InvalidOptionCount",
    "InvalidOption",
    "InvalidConstraints",
    "InvalidConfig",
    "Category",
    "Criterion",
    "TechnicalOption",
    "UserConstraints",
    "EvaluationResult",
    "ComparisonOutput",
]
