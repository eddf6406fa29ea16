# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the Pydantic models to ensure:
# - Signals are normalized, never rejected
# - Store rows with nulls load with sensible defaults
# - Models serialize to camelCase for the client
# - Paging bounds are enforced
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import uuid

import pytest
from pydantic import ValidationError

from core.models import (
    DEFAULT_MATCH_LIMIT,
    MAX_MATCH_LIMIT,
    BrandReference,
    BrandSignalProfile,
    BucketPair,
    CoverageReport,
    DeliverableStyleReference,
    MatchLevel,
    MatchRequest,
    MatchResponse,
    SignalRequest,
)
from tests.conftest import make_brand_row, make_style_row


# =============================================================================
# Signal Model Tests
# =============================================================================

class TestBrandSignalProfile:
    """Tests for BrandSignalProfile model."""

    def test_defaults_to_midpoint(self):
        """Test that every signal defaults to 50."""
        profile = BrandSignalProfile()

        assert (profile.tone, profile.density, profile.warmth, profile.energy) == (50, 50, 50, 50)

    def test_out_of_range_is_normalized(self):
        """Test that out-of-range values become 50 instead of failing."""
        profile = BrandSignalProfile(tone=150, energy=-10, density=None, warmth="hot")

        assert profile.tone == 50
        assert profile.energy == 50
        assert profile.density == 50
        assert profile.warmth == 50

    def test_valid_values_kept(self):
        profile = BrandSignalProfile(tone=0, energy=100)

        assert profile.tone == 0
        assert profile.energy == 100


class TestSignalRequest:
    """Tests for SignalRequest model."""

    def test_accepts_camel_case(self):
        """Test the wire shape sent by the onboarding client."""
        request = SignalRequest.model_validate({
            "signalTone": 10,
            "signalEnergy": 80,
            "primaryColor": "#ff6600",
        })

        assert request.signal_tone == 10
        assert request.signal_energy == 80
        assert request.primary_color == "#ff6600"

    def test_accepts_snake_case(self):
        request = SignalRequest(signal_tone=20)

        assert request.signal_tone == 20
        assert request.signal_energy == 50

    def test_to_profile(self):
        request = SignalRequest(signal_tone=10, signal_density=20, signal_warmth=30, signal_energy=40)

        profile = request.to_profile()

        assert profile == BrandSignalProfile(tone=10, density=20, warmth=30, energy=40)

    def test_garbage_signals_normalized(self):
        request = SignalRequest.model_validate({"signalTone": "loud", "signalEnergy": 1000})

        assert request.signal_tone == 50
        assert request.signal_energy == 50


class TestBucketPair:
    """Tests for BucketPair serialization."""

    def test_color_omitted_when_absent(self):
        assert BucketPair(tone="serious", energy="minimal").model_dump(by_alias=True) == {
            "tone": "serious",
            "energy": "minimal",
        }

    def test_color_included_when_present(self):
        dumped = BucketPair(tone="serious", energy="minimal", color="warm").model_dump(by_alias=True)

        assert dumped["color"] == "warm"


# =============================================================================
# Reference Model Tests
# =============================================================================

class TestBrandReference:
    """Tests for BrandReference model."""

    def test_from_row(self):
        reference = BrandReference.model_validate(make_brand_row("playful", "bold", id="r1"))

        assert reference.id == "r1"
        assert reference.tone_bucket == "playful"
        assert reference.is_active is True

    def test_uuid_id_is_stringified(self):
        ref_id = uuid.uuid4()

        reference = BrandReference.model_validate(make_brand_row(id=ref_id))

        assert reference.id == str(ref_id)

    def test_null_columns_get_defaults(self):
        row = make_brand_row(
            color_samples=None,
            visual_styles=None,
            industries=None,
            display_order=None,
            usage_count=None,
        )

        reference = BrandReference.model_validate(row)

        assert reference.color_samples == []
        assert reference.visual_styles == []
        assert reference.industries == []
        assert reference.display_order == 0
        assert reference.usage_count == 0

    def test_missing_required_fields(self):
        with pytest.raises(ValidationError):
            BrandReference.model_validate({"id": "x", "tone_bucket": "serious"})

    def test_negative_usage_rejected(self):
        with pytest.raises(ValidationError):
            BrandReference.model_validate(make_brand_row(usage_count=-1))

    def test_camel_case_dump(self):
        dumped = BrandReference.model_validate(make_brand_row()).model_dump(by_alias=True)

        assert "imageUrl" in dumped
        assert "toneBucket" in dumped
        assert "usageCount" in dumped


class TestDeliverableStyleReference:
    """Tests for DeliverableStyleReference model."""

    def test_unknown_keys_still_load(self):
        """Anomalous rows must load so they can be reported."""
        style = DeliverableStyleReference.model_validate(make_style_row("billboard", None))

        assert style.deliverable_type == "billboard"
        assert style.style_axis is None

    @pytest.mark.parametrize("samples,expected", [
        (None, False),
        ([], False),
        (["#ffffff"], True),
    ])
    def test_has_color_samples(self, samples, expected):
        style = DeliverableStyleReference.model_validate(make_style_row(color_samples=samples))

        assert style.has_color_samples is expected


# =============================================================================
# Matching Contract Tests
# =============================================================================

class TestMatchRequest:
    """Tests for MatchRequest paging bounds."""

    def test_defaults(self):
        request = MatchRequest()

        assert request.limit == DEFAULT_MATCH_LIMIT
        assert request.offset == 0

    @pytest.mark.parametrize("limit", [0, -1, MAX_MATCH_LIMIT + 1])
    def test_limit_out_of_bounds(self, limit):
        with pytest.raises(ValidationError):
            MatchRequest(limit=limit)

    def test_negative_offset_rejected(self):
        with pytest.raises(ValidationError):
            MatchRequest(offset=-1)

    def test_signals_still_normalized(self):
        request = MatchRequest.model_validate({"signalTone": 500, "limit": 3})

        assert request.signal_tone == 50
        assert request.limit == 3


class TestMatchResponse:
    """Tests for MatchResponse serialization."""

    def test_camel_case_dump(self):
        response = MatchResponse(
            buckets=BucketPair(tone="balanced", energy="balanced"),
            style_name="Versatile Classic",
            match_level=MatchLevel.ANY,
        )

        dumped = response.model_dump(by_alias=True, mode="json")

        assert dumped["styleName"] == "Versatile Classic"
        assert dumped["matchLevel"] == "any"
        assert dumped["suggestionsAvailable"] is True
        assert dumped["references"] == []
        assert "color" not in dumped["buckets"]


class TestCoverageReport:
    """Tests for CoverageReport bounds."""

    def test_score_above_100_rejected(self):
        with pytest.raises(ValidationError):
            CoverageReport(coverage_score=101)
