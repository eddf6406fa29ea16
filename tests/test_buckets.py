# =============================================================================
# tests/test_buckets.py - Signal Bucketing Tests
# =============================================================================
# Tests for:
# - bucketize() boundaries
# - classify() tone/energy mapping and normalization
# - slider_label() display text
# - analyze_color_bucket() hex classification
#
# Run with: pytest tests/test_buckets.py -v
# =============================================================================

import pytest

from core.models import BrandSignalProfile
from core.taste.buckets import (
    ToneEnergyBuckets,
    analyze_color_bucket,
    bucketize,
    classify,
    normalize_signal,
    slider_label,
)


# =============================================================================
# bucketize
# =============================================================================

class TestBucketize:
    """Tests for the single-signal bucketizer."""

    @pytest.mark.parametrize("value,expected", [
        (0, "low"),
        (34, "low"),
        (35, "balanced"),
        (50, "balanced"),
        (65, "balanced"),
        (66, "high"),
        (100, "high"),
    ])
    def test_boundaries(self, value, expected):
        """Test the fixed 35/65 thresholds."""
        assert bucketize(value, "low", "high") == expected

    def test_out_of_range_values_use_same_rule(self):
        """Test that bucketize itself does not validate range."""
        assert bucketize(-20, "low", "high") == "low"
        assert bucketize(250, "low", "high") == "high"

    def test_deterministic_and_closed(self):
        """Every value in range maps to one of exactly three labels, every time."""
        labels = {"low", "balanced", "high"}
        for value in range(0, 101):
            first = bucketize(value, "low", "high")
            assert first in labels
            assert bucketize(value, "low", "high") == first


# =============================================================================
# normalize_signal
# =============================================================================

class TestNormalizeSignal:
    """Tests for raw signal normalization."""

    @pytest.mark.parametrize("raw,expected", [
        (None, 50),
        (0, 0),
        (100, 100),
        (101, 50),
        (-1, 50),
        ("40", 40),
        ("abc", 50),
        (42.9, 42),
        (True, 50),
        ([], 50),
    ])
    def test_normalization(self, raw, expected):
        assert normalize_signal(raw) == expected


# =============================================================================
# classify
# =============================================================================

class TestClassify:
    """Tests for tone/energy classification."""

    def test_midpoint_is_balanced(self):
        """Test classify({tone:50, energy:50}) -> (balanced, balanced)."""
        assert classify({"tone": 50, "energy": 50}) == ToneEnergyBuckets("balanced", "balanced")

    def test_low_values(self):
        """Low tone reads serious, low energy reads minimal."""
        buckets = classify(BrandSignalProfile(tone=10, energy=10))
        assert buckets.tone == "serious"
        assert buckets.energy == "minimal"

    def test_high_values(self):
        """High tone reads playful, high energy reads bold."""
        buckets = classify(BrandSignalProfile(tone=90, energy=80))
        assert buckets.tone == "playful"
        assert buckets.energy == "bold"

    def test_missing_signals_default_to_midpoint(self):
        """Missing values are treated as 50, never as an error."""
        assert classify({}) == ToneEnergyBuckets("balanced", "balanced")
        assert classify({"tone": None, "energy": 5}) == ToneEnergyBuckets("balanced", "minimal")
        assert classify(None) == ToneEnergyBuckets("balanced", "balanced")

    def test_out_of_range_signals_default_to_midpoint(self):
        """Out-of-range values are normalized before bucketing."""
        assert classify({"tone": 500, "energy": -3}) == ToneEnergyBuckets("balanced", "balanced")

    def test_density_and_warmth_are_ignored(self):
        """Density and warmth never change the result."""
        base = classify(BrandSignalProfile(tone=20, energy=80))
        for density, warmth in [(0, 0), (100, 100), (0, 100), (50, 50)]:
            profile = BrandSignalProfile(tone=20, energy=80, density=density, warmth=warmth)
            assert classify(profile) == base

    def test_as_dict(self):
        assert classify({"tone": 90, "energy": 10}).as_dict() == {"tone": "playful", "energy": "minimal"}


# =============================================================================
# slider_label
# =============================================================================

class TestSliderLabel:
    """Tests for onboarding slider display labels."""

    def test_labels(self):
        assert slider_label(10, "Serious", "Playful") == "Serious"
        assert slider_label(50, "Serious", "Playful") == "Balanced"
        assert slider_label(90, "Serious", "Playful") == "Playful"


# =============================================================================
# analyze_color_bucket
# =============================================================================

class TestAnalyzeColorBucket:
    """Tests for hex color classification."""

    @pytest.mark.parametrize("hex_color,expected", [
        ("#808080", "neutral"),    # gray, no saturation
        ("#ff0000", "vibrant"),    # pure red
        ("#c89664", "warm"),       # tan: saturation 0.5, warmth ~0.39
        ("#6496c8", "cool"),       # steel blue: saturation 0.5, warmth ~-0.39
        ("#649664", "muted"),      # sage: saturation ~0.33, warmth 0
        ("f00", "vibrant"),        # 3-char hex, no '#'
    ])
    def test_buckets(self, hex_color, expected):
        assert analyze_color_bucket(hex_color) == expected

    @pytest.mark.parametrize("hex_color", [None, "", "#zzzzzz", "#12345"])
    def test_empty_or_malformed_is_neutral(self, hex_color):
        assert analyze_color_bucket(hex_color) == "neutral"

    def test_black_is_neutral(self):
        assert analyze_color_bucket("#000000") == "neutral"
