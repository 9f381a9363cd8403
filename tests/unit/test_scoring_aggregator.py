"""Tests for SEO score aggregation."""

from seoscore.entities import (
    ORGANIZATION_CONFIG,
    EntityConfig,
    FieldConfig,
    get_entity_config,
)
from seoscore.scoring import (
    HealthLevel,
    OverallRating,
    ScoreResult,
    average_percentage,
    calculate_seo_score,
    evaluate,
    round_half_up,
    summarize,
    to_percentage,
)
from seoscore.structured_data import generate_collection_structured_data
from seoscore.validation import ValidationResult, ValidationStatus


def fixed(score: float, status: ValidationStatus = ValidationStatus.GOOD):
    def validate(value, record, settings=None) -> ValidationResult:
        return ValidationResult(status, "fixed", score)

    return validate


def make_config(*scores: float, max_score: float = 100) -> EntityConfig:
    fields = tuple(
        FieldConfig(f"field{i}", f"Field {i}", fixed(score))
        for i, score in enumerate(scores)
    )
    return EntityConfig(
        entity_type="Test",
        max_score=max_score,
        fields=fields,
        generate_structured_data=generate_collection_structured_data,
    )


class TestRounding:
    """Tests for percentage rounding."""

    def test_half_rounds_up(self) -> None:
        """12.5 rounds to 13, not to even."""
        assert round_half_up(12.5) == 13
        assert round_half_up(13.5) == 14
        assert round_half_up(12.4) == 12

    def test_percentage_clamped(self) -> None:
        assert to_percentage(250, 200) == 100
        assert to_percentage(-5, 100) == 0

    def test_zero_max_score(self) -> None:
        assert to_percentage(10, 0) == 0


class TestEvaluate:
    """Tests for evaluate()."""

    def test_acme_end_to_end(self, acme_record) -> None:
        """Name, slug and url alone give 25/200 = 13%."""
        result = evaluate(acme_record, ORGANIZATION_CONFIG)

        by_label = {check.label: check for check in result.checks}
        assert by_label["Client Name"].score == 5
        assert by_label["URL Slug"].score == 5
        assert by_label["Website URL & HTTPS"].score == 15
        assert by_label["Website URL & HTTPS"].status == ValidationStatus.GOOD
        assert result.score == 25
        assert result.max_score == 200
        assert result.percentage == 13

    def test_complete_organization_clamped(self, complete_organization) -> None:
        """A fully populated organization reaches 100%."""
        result = evaluate(complete_organization, ORGANIZATION_CONFIG)

        assert result.score == 200
        assert result.percentage == 100
        assert result.level == HealthLevel.EXCELLENT

    def test_sum_over_max_clamped(self) -> None:
        """Raw sum 140 against max 100 gives 100."""
        result = evaluate({}, make_config(70, 70, max_score=100))

        assert result.score == 100
        assert result.percentage == 100

    def test_duplicate_names_all_scored(self) -> None:
        """Entries sharing a field name each contribute."""
        config = EntityConfig(
            entity_type="Test",
            max_score=100,
            fields=(
                FieldConfig("seoTitle", "SEO Title", fixed(10)),
                FieldConfig("seoTitle", "Open Graph Tags", fixed(7)),
            ),
            generate_structured_data=generate_collection_structured_data,
        )
        result = evaluate({}, config)

        assert result.score == 17
        assert len(result.checks) == 2
        assert len(result.display_checks()) == 1
        assert result.display_checks()[0].label == "SEO Title"

    def test_checks_in_config_order(self, acme_record) -> None:
        result = evaluate(acme_record, ORGANIZATION_CONFIG)

        assert [c.label for c in result.checks] == ORGANIZATION_CONFIG.labels

    def test_status_counts(self) -> None:
        config = EntityConfig(
            entity_type="Test",
            max_score=100,
            fields=(
                FieldConfig("a", "A", fixed(5)),
                FieldConfig("b", "B", fixed(0, ValidationStatus.INFO)),
                FieldConfig("c", "C", fixed(0, ValidationStatus.INFO)),
            ),
            generate_structured_data=generate_collection_structured_data,
        )
        result = evaluate({}, config)

        assert result.status_counts[ValidationStatus.GOOD] == 1
        assert result.status_counts[ValidationStatus.INFO] == 2
        assert result.status_counts[ValidationStatus.ERROR] == 0

    def test_idempotent(self, complete_organization) -> None:
        first = evaluate(complete_organization, ORGANIZATION_CONFIG)
        second = evaluate(complete_organization, ORGANIZATION_CONFIG)

        assert first == second

    def test_monotonic_when_field_added(self, acme_record) -> None:
        """Populating a missing field never lowers the score."""
        before = evaluate(acme_record, ORGANIZATION_CONFIG)
        after = evaluate({**acme_record, "legalName": "Acme LLC"}, ORGANIZATION_CONFIG)

        assert after.score >= before.score
        assert after.score == before.score + 5

    def test_record_not_mutated(self, acme_record) -> None:
        snapshot = dict(acme_record)
        evaluate(acme_record, ORGANIZATION_CONFIG)

        assert acme_record == snapshot

    def test_non_mapping_record(self) -> None:
        """Garbage input scores as an empty record."""
        result = evaluate(None, ORGANIZATION_CONFIG)

        assert result.score == 0
        assert result.percentage == 0

    def test_failing_validator_recorded_as_error(self) -> None:
        """A validator that raises does not abort scoring."""

        def broken(value, record, settings=None) -> ValidationResult:
            raise RuntimeError("boom")

        config = EntityConfig(
            entity_type="Test",
            max_score=10,
            fields=(
                FieldConfig("a", "Broken", broken),
                FieldConfig("b", "Fine", fixed(5)),
            ),
            generate_structured_data=generate_collection_structured_data,
        )
        result = evaluate({}, config)

        assert result.checks[0].status == ValidationStatus.ERROR
        assert result.checks[0].score == 0
        assert result.score == 5
        assert result.percentage == 50

    def test_percentage_bounds_for_every_entity(self, complete_organization) -> None:
        for entity_type in ("Organization", "Article", "Person", "Category", "Tag"):
            config = get_entity_config(entity_type)
            for record in ({}, complete_organization):
                result = evaluate(record, config)
                assert 0 <= result.percentage <= 100
                assert result.score <= result.max_score


class TestScoreResult:
    """Tests for ScoreResult presentation."""

    def test_to_dict(self, acme_record) -> None:
        data = evaluate(acme_record, ORGANIZATION_CONFIG).to_dict()

        assert data["percentage"] == 13
        assert data["level"] == "poor"
        assert data["status_counts"]["good"] == 3
        assert len(data["checks"]) == len(ORGANIZATION_CONFIG.fields)

    def test_show_the_math(self, acme_record) -> None:
        text = evaluate(acme_record, ORGANIZATION_CONFIG).show_the_math()

        assert "ORGANIZATION SEO HEALTH" in text
        assert "25/200 = 13%" in text
        assert "Website URL & HTTPS: 15" in text

    def test_health_levels(self) -> None:
        assert ScoreResult(score=80, max_score=100, percentage=80).level == HealthLevel.EXCELLENT
        assert ScoreResult(score=60, max_score=100, percentage=60).level == HealthLevel.GOOD
        assert ScoreResult(score=59, max_score=100, percentage=59).level == HealthLevel.POOR

    def test_health_messages(self) -> None:
        assert HealthLevel.GOOD.label == "Good SEO health - room for improvement"
        assert HealthLevel.POOR.description.startswith("Fill in missing SEO fields")


class TestAggregates:
    """Tests for multi-record helpers."""

    def test_average_percentage(self, acme_record, complete_organization) -> None:
        """(13 + 100) / 2 = 56.5 rounds to 57."""
        average = average_percentage(
            [acme_record, complete_organization], ORGANIZATION_CONFIG
        )

        assert average == 57

    def test_average_of_nothing(self) -> None:
        assert average_percentage([], ORGANIZATION_CONFIG) == 0

    def test_overall_rating(self) -> None:
        assert OverallRating.from_percentage(95) == OverallRating.EXCELLENT
        assert OverallRating.from_percentage(70) == OverallRating.GOOD
        assert OverallRating.from_percentage(50) == OverallRating.FAIR
        assert OverallRating.from_percentage(49) == OverallRating.POOR

    def test_summarize(self, acme_record) -> None:
        result = calculate_seo_score(acme_record, "Client")
        summary = summarize([result, result])

        assert summary == {"count": 2, "average_percentage": 13, "rating": "poor"}
        assert summarize([])["count"] == 0
