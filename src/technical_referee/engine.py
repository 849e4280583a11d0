"""Technical Referee engine - the main entry point.

Pipeline:
1. Validate the option set (count, names, duplicates) and collect warnings
2. Merge fallback attributes for unknown technologies
3. Score each option (knowledge registry, contextual deltas, weighting)
4. Rank and analyze trade-offs
5. Optionally build the human-readable comparison report
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from .config import RefereeConfig
from .errors import InvalidConstraints, InvalidOption, InvalidOptionCount, RefereeError
from .knowledge import KnowledgeRegistry
from .normalizer import OptionNormalizer
from .ranker import TradeOffAnalyzer, rank_options
from .report import build_comparison_output
from .schema import ComparisonOutput, EvaluationResult, TechnicalOption, UserConstraints
from .scorer import OptionScorer

logger = logging.getLogger(__name__)

OptionInput = Union[TechnicalOption, dict[str, Any]]
ConstraintsInput = Union[UserConstraints, dict[str, Any], None]


def _format_validation_error(error: ValidationError) -> list[str]:
    issues = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ()))
        issues.append(f"{location}: {detail.get('msg')}" if location else str(detail.get("msg")))
    return issues


def coerce_options(options: list[OptionInput]) -> list[TechnicalOption]:
    """Turn raw dicts into TechnicalOptions.

    Raises:
        InvalidOptionCount: If options is not a list.
        InvalidOption: If an entry cannot be parsed.
    """
    if not isinstance(options, list):
        raise InvalidOptionCount(
            "Options must be provided as a list",
            count=0,
            code="OPTIONS_INVALID_TYPE",
        )

    parsed = []
    for index, option in enumerate(options):
        if isinstance(option, TechnicalOption):
            parsed.append(option)
            continue
        if option is None:
            raise InvalidOption(
                f"Option {index + 1} is null or undefined",
                field=f"options[{index}]",
                code="OPTION_NULL",
            )
        try:
            parsed.append(TechnicalOption.model_validate(option))
        except ValidationError as e:
            issues = _format_validation_error(e)
            raise InvalidOption(
                f"Option {index + 1} is invalid: {'; '.join(issues)}",
                field=f"options[{index}]",
                code="OPTION_INVALID",
            ) from e
    return parsed


def coerce_constraints(constraints: ConstraintsInput) -> UserConstraints:
    """Turn a raw dict into UserConstraints (None gives neutral defaults).

    Raises:
        InvalidConstraints: If the document fails validation.
    """
    if constraints is None:
        return UserConstraints()
    if isinstance(constraints, UserConstraints):
        return constraints
    try:
        return UserConstraints.model_validate(constraints)
    except ValidationError as e:
        issues = _format_validation_error(e)
        in_priorities = any("priorities" in detail.get("loc", ()) for detail in e.errors())
        raise InvalidConstraints(
            f"Invalid constraints: {'; '.join(issues)}",
            field="priorities" if in_priorities else None,
            code="PRIORITY_OUT_OF_RANGE" if in_priorities else "CONSTRAINTS_INVALID",
            issues=issues,
        ) from e


class RefereeEngine:
    """Main entry point for comparing technical options.

    Usage:
        engine = RefereeEngine()
        result = engine.evaluate(options, constraints)
        report = engine.compare(options, constraints)
    """

    def __init__(
        self,
        registry: Optional[KnowledgeRegistry] = None,
        config: Optional[RefereeConfig] = None,
    ):
        self.registry = registry or KnowledgeRegistry()
        self.config = config or RefereeConfig()
        self.normalizer = OptionNormalizer(self.registry)
        self.scorer = OptionScorer(self.registry, self.config)
        self.analyzer = TradeOffAnalyzer(self.config)

    def evaluate(
        self,
        options: list[OptionInput],
        constraints: ConstraintsInput = None,
    ) -> EvaluationResult:
        """Score, rank and analyze 2-3 options under the given constraints.

        Raises:
            InvalidOptionCount: Fewer than 2 or more than 3 options.
            InvalidOption: An option failed structural validation.
            InvalidConstraints: Constraints could not be parsed.
        """
        parsed_options = coerce_options(options)
        parsed_constraints = coerce_constraints(constraints)

        warnings = self.normalizer.validate(parsed_options)
        normalized = self.normalizer.normalize_all(parsed_options)

        logger.info("Evaluating %d options: %s", len(normalized), ", ".join(o.name for o in normalized))

        scores = self.scorer.score_all(normalized, parsed_constraints)
        rankings = rank_options(scores)
        trade_offs = self.analyzer.analyze(scores, parsed_constraints.priorities)

        return EvaluationResult(
            scores=scores,
            rankings=rankings,
            trade_offs=trade_offs,
            warnings=warnings,
        )

    def compare(
        self,
        options: list[OptionInput],
        constraints: ConstraintsInput = None,
    ) -> ComparisonOutput:
        """Evaluate and build the full comparison report."""
        parsed_constraints = coerce_constraints(constraints)
        result = self.evaluate(options, parsed_constraints)
        return build_comparison_output(result, parsed_constraints, self.config)


def evaluate(
    options: list[OptionInput],
    constraints: ConstraintsInput = None,
    registry: Optional[KnowledgeRegistry] = None,
    config: Optional[RefereeConfig] = None,
) -> EvaluationResult:
    """Evaluate options with a one-off engine."""
    return RefereeEngine(registry=registry, config=config).evaluate(options, constraints)


# =============================================================================
# File loading
# =============================================================================


def load_document(path: Union[str, Path]) -> Any:
    """Load a JSON or YAML document (chosen by file extension)."""
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(f)
        return json.load(f)


def load_options(path: Union[str, Path]) -> list[TechnicalOption]:
    """Load options from a file holding a list or an {"options": [...]} object."""
    data = load_document(path)
    if isinstance(data, dict) and "options" in data:
        data = data["options"]
    return coerce_options(data)


def load_constraints(path: Union[str, Path]) -> UserConstraints:
    """Load constraints from a file holding an object or {"constraints": {...}}."""
    data = load_document(path)
    if isinstance(data, dict) and "constraints" in data:
        data = data["constraints"]
    return coerce_constraints(data or {})


def validate_options_file(path: Union[str, Path]) -> tuple[bool, list[str]]:
    """Validate an options file.

    Returns:
        Tuple of (is_valid, list of issues). Non-fatal warnings are
        reported as issues but do not make the file invalid.
    """
    try:
        options = load_options(path)
        warnings = OptionNormalizer(KnowledgeRegistry()).validate(options)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        return False, [f"Could not parse file: {e}"]
    except RefereeError as e:
        return False, [e.message]
    except OSError as e:
        return False, [str(e)]
    return True, warnings


def validate_constraints_file(path: Union[str, Path]) -> tuple[bool, list[str]]:
    """Validate a constraints file.

    Returns:
        Tuple of (is_valid, list of issues).
    """
    try:
        load_constraints(path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        return False, [f"Could not parse file: {e}"]
    except InvalidConstraints as e:
        return False, e.issues or [e.message]
    except OSError as e:
        return False, [str(e)]
    return True, []
