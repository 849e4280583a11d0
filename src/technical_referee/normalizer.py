"""Option Normalizer - validates candidate options and fills in attributes.

Rejects option sets that cannot be compared, collects non-fatal warnings
and substitutes category defaults for technologies the registry does not
know.
"""

import logging

from .errors import InvalidOption, InvalidOptionCount
from .knowledge import KnowledgeRegistry
from .schema import Category, TechnicalOption

logger = logging.getLogger(__name__)

MIN_OPTIONS = 2
MAX_OPTIONS = 3

RECOGNISED_CATEGORIES = (Category.CLOUD, Category.BACKEND, Category.DATABASE, Category.FRONTEND)


class OptionNormalizer:
    """Validates option sets and merges fallback attributes."""

    def __init__(self, registry: KnowledgeRegistry):
        self.registry = registry

    def validate(self, options: list[TechnicalOption]) -> list[str]:
        """Validate the option set.

        Raises:
            InvalidOptionCount: Fewer than 2 or more than 3 options.
            InvalidOption: Empty name or duplicate name/category pair.

        Returns:
            Warnings for issues that do not block evaluation.
        """
        if len(options) < MIN_OPTIONS:
            raise InvalidOptionCount(
                f"At least {MIN_OPTIONS} options are required for comparison",
                count=len(options),
                code="OPTIONS_TOO_FEW",
            )
        if len(options) > MAX_OPTIONS:
            raise InvalidOptionCount(
                f"Maximum {MAX_OPTIONS} options allowed for comparison",
                count=len(options),
                code="OPTIONS_TOO_MANY",
            )

        warnings: list[str] = []
        seen: set[tuple[str, Category]] = set()

        for index, option in enumerate(options):
            if not option.name or not option.name.strip():
                raise InvalidOption(
                    f"Option {index + 1} name cannot be empty",
                    field=f"options[{index}].name",
                    code="OPTION_NAME_EMPTY",
                )

            key = (option.name.strip().lower(), option.category)
            if key in seen:
                raise InvalidOption(
                    f"Duplicate option: {option.name} ({option.category.value})",
                    field=f"options[{index}]",
                    code="OPTION_DUPLICATE",
                    option_name=option.name,
                )
            seen.add(key)

            if option.category not in RECOGNISED_CATEGORIES:
                warnings.append(
                    f"Option {option.name} has unknown category '{option.category.value}' "
                    "- will use generic evaluation"
                )

            if option.attributes is None:
                warnings.append(f"Option {option.name} has no metadata - will use fallback values")
            else:
                for issue in self.registry.validate_option_attributes(option):
                    warnings.append(f"Option {option.name} metadata issue: {issue}")

        categories = list(dict.fromkeys(option.category.value for option in options))
        if len(categories) > 1:
            warnings.append(
                f"Mixed categories detected: {', '.join(categories)}. "
                "Comparisons are most meaningful when all options are from the same category."
            )

        for warning in warnings:
            logger.info(warning)

        return warnings

    def normalize(self, option: TechnicalOption) -> TechnicalOption:
        """Return the option with fallback attributes merged in.

        Known technologies are returned unchanged. For everything else the
        category defaults are laid down first and the option's own
        attributes override them.
        """
        if self.registry.is_known_technology(option):
            return option

        fallback = self.registry.fallback_attributes(option.category)
        if not fallback:
            return option

        merged = {**fallback, **(option.attributes or {})}
        logger.debug("Using fallback attributes for unknown technology %s", option.name)
        return option.model_copy(update={"attributes": merged})

    def normalize_all(self, options: list[TechnicalOption]) -> list[TechnicalOption]:
        return [self.normalize(option) for option in options]
