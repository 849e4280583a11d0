"""Tests for option set validation and fallback attributes."""

import pytest

from technical_referee.errors import InvalidOption, InvalidOptionCount
from technical_referee.knowledge import KnowledgeRegistry
from technical_referee.normalizer import OptionNormalizer
from technical_referee.schema import Category, TechnicalOption


@pytest.fixture
def normalizer() -> OptionNormalizer:
    return OptionNormalizer(KnowledgeRegistry())


class TestOptionCount:
    """Only 2 or 3 options can be compared."""

    def test_too_few(self, normalizer, aws):
        with pytest.raises(InvalidOptionCount) as exc_info:
            normalizer.validate([aws])

        assert exc_info.value.code == "OPTIONS_TOO_FEW"
        assert exc_info.value.count == 1
        assert exc_info.value.field == "options"
        assert "At least 2 options" in exc_info.value.message

    def test_too_many(self, normalizer):
        options = [
            TechnicalOption(name=f"Cloud {i}", category=Category.CLOUD, attributes={"regions": i})
            for i in range(4)
        ]
        with pytest.raises(InvalidOptionCount) as exc_info:
            normalizer.validate(options)

        assert exc_info.value.code == "OPTIONS_TOO_MANY"
        assert "Maximum 3 options" in exc_info.value.message

    def test_two_and_three_are_accepted(self, normalizer, aws, digitalocean):
        normalizer.validate([aws, digitalocean])
        gcp = TechnicalOption(name="GCP", category=Category.CLOUD, attributes={
            "pricingModel": "pay-as-you-go",
            "serviceCount": 100,
            "learningCurve": "medium",
            "marketShare": 9,
            "regions": 24,
        })
        normalizer.validate([aws, digitalocean, gcp])


class TestOptionIdentity:
    """Names must be present and unique per category."""

    def test_empty_name(self, normalizer, aws):
        blank = TechnicalOption(name="   ", category=Category.CLOUD)
        with pytest.raises(InvalidOption) as exc_info:
            normalizer.validate([aws, blank])

        assert exc_info.value.code == "OPTION_NAME_EMPTY"
        assert exc_info.value.field == "options[1].name"

    def test_duplicate_is_case_insensitive(self, normalizer, aws):
        twin = TechnicalOption(name="aws", category=Category.CLOUD, attributes=aws.attributes)
        with pytest.raises(InvalidOption) as exc_info:
            normalizer.validate([aws, twin])

        assert exc_info.value.code == "OPTION_DUPLICATE"
        assert exc_info.value.option_name == "aws"

    def test_same_name_different_category(self, normalizer):
        """Same name in two categories is not a duplicate."""
        options = [
            TechnicalOption(name="Redis", category=Category.DATABASE, attributes={"type": "key-value"}),
            TechnicalOption(name="Redis", category=Category.BACKEND, attributes={"language": "c"}),
        ]
        warnings = normalizer.validate(options)
        assert any("Mixed categories" in w for w in warnings)


class TestWarnings:
    """Non-fatal issues are reported as warnings."""

    def test_clean_set_has_no_warnings(self, normalizer, aws, digitalocean):
        assert normalizer.validate([aws, digitalocean]) == []

    def test_unknown_category(self, normalizer, aws):
        odd = TechnicalOption(name="Quantum", category="quantum", attributes={"qubits": 5})
        warnings = normalizer.validate([aws, odd])

        assert "Option Quantum has unknown category 'unknown' - will use generic evaluation" in warnings

    def test_frontend_is_recognised(self, normalizer):
        options = [
            TechnicalOption(name="React", category=Category.FRONTEND, attributes={"x": 1}),
            TechnicalOption(name="Vue", category=Category.FRONTEND, attributes={"x": 1}),
        ]
        assert normalizer.validate(options) == []

    def test_missing_metadata(self, normalizer, aws):
        bare = TechnicalOption(name="Linode", category=Category.CLOUD)
        warnings = normalizer.validate([aws, bare])

        assert warnings == ["Option Linode has no metadata - will use fallback values"]

    def test_empty_metadata_is_validated(self, normalizer, aws):
        """An empty metadata dict is checked field by field, not treated as missing."""
        empty = TechnicalOption(name="Linode", category=Category.CLOUD, attributes={})
        warnings = normalizer.validate([aws, empty])

        assert "Option Linode metadata issue: Missing required field: pricingModel" in warnings
        assert not any("has no metadata" in w for w in warnings)

    def test_metadata_issue(self, normalizer, aws):
        partial = TechnicalOption(name="Vultr", category=Category.CLOUD, attributes={
            "pricingModel": "pay-as-you-go",
            "serviceCount": 30,
            "learningCurve": "low",
            "marketShare": 1,
        })
        warnings = normalizer.validate([aws, partial])

        assert warnings == ["Option Vultr metadata issue: Missing required field: regions"]

    def test_mixed_categories(self, normalizer, aws):
        postgres = TechnicalOption(name="PostgreSQL", category=Category.DATABASE, attributes={
            "type": "relational",
            "schemaFlexibility": "rigid",
            "queryComplexity": "moderate",
            "horizontalScaling": "good",
            "consistencyModel": "strong",
            "performanceRating": 8,
        })
        warnings = normalizer.validate([aws, postgres])

        assert warnings == [
            "Mixed categories detected: cloud, database. "
            "Comparisons are most meaningful when all options are from the same category."
        ]


class TestNormalize:
    """Fallback attributes for unknown technologies."""

    def test_known_technology_unchanged(self, normalizer, aws):
        assert normalizer.normalize(aws) is aws

    def test_unknown_technology_gets_defaults(self, normalizer):
        option = TechnicalOption(name="Hetzner", category=Category.CLOUD)
        normalized = normalizer.normalize(option)

        assert normalized.attributes["pricingModel"] == "pay-as-you-go"
        assert normalized.attributes["regions"] == 5
        assert option.attributes is None

    def test_user_attributes_win(self, normalizer):
        option = TechnicalOption(name="Hetzner", category=Category.CLOUD, attributes={"regions": 12})
        normalized = normalizer.normalize(option)

        assert normalized.attributes["regions"] == 12
        assert normalized.attributes["serviceCount"] == 50

    def test_unscored_category_unchanged(self, normalizer):
        option = TechnicalOption(name="Svelte", category=Category.FRONTEND)
        assert normalizer.normalize(option) is option

    def test_known_technology_without_metadata_stays_bare(self, normalizer):
        """Known names without metadata are left bare and score neutrally."""
        option = TechnicalOption(name="Linode", category=Category.CLOUD)
        assert normalizer.normalize(option).attributes is None
