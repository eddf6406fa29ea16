# =============================================================================
# core/taste/buckets.py - Signal Bucketing
# =============================================================================
# Turns continuous 0-100 brand personality sliders into discrete buckets:
# - bucketize(): one signal -> low label / "balanced" / high label
# - classify(): brand profile -> (tone bucket, energy bucket)
# - analyze_color_bucket(): hex color -> color bucket
#
# Every downstream decision (reference matching, style naming) keys off
# the buckets produced here, so these functions are pure and total.
# =============================================================================

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from core.constants import BALANCED, ColorBucket, EnergyBucket, ToneBucket

# Fixed thresholds, symmetric around the midpoint
LOW_THRESHOLD = 35
HIGH_THRESHOLD = 65

DEFAULT_SIGNAL = 50
MIN_SIGNAL = 0
MAX_SIGNAL = 100

# Color analysis thresholds
NEUTRAL_SATURATION = 0.15
VIBRANT_SATURATION = 0.65
WARMTH_THRESHOLD = 0.25


@dataclass(frozen=True)
class ToneEnergyBuckets:
    """The two buckets used for matching and naming."""
    tone: str
    energy: str

    def as_dict(self) -> dict[str, str]:
        return {"tone": self.tone, "energy": self.energy}


def bucketize(value: int, low_label: str, high_label: str) -> str:
    """
    Map one signal value to a three-way bucket.

    Any integer is accepted; range validation happens upstream.

    Example:
        bucketize(34, "serious", "playful")  # "serious"
        bucketize(35, "serious", "playful")  # "balanced"
        bucketize(66, "serious", "playful")  # "playful"
    """
    if value < LOW_THRESHOLD:
        return low_label
    if value > HIGH_THRESHOLD:
        return high_label
    return BALANCED


def slider_label(value: int, low_label: str, high_label: str) -> str:
    """Display label shown next to an onboarding slider."""
    label = bucketize(value, low_label, high_label)
    return "Balanced" if label == BALANCED else label


def normalize_signal(value: Any) -> int:
    """
    Coerce a raw signal to an int in [0, 100].

    Absent, non-numeric and out-of-range values become the midpoint.
    Never raises.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_SIGNAL
    try:
        number = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_SIGNAL
    if number < MIN_SIGNAL or number > MAX_SIGNAL:
        return DEFAULT_SIGNAL
    return number


def _read_signal(profile: Any, name: str) -> int:
    if profile is None:
        return DEFAULT_SIGNAL
    if isinstance(profile, Mapping):
        raw = profile.get(name)
    else:
        raw = getattr(profile, name, None)
    return normalize_signal(raw)


def classify(profile: Any) -> ToneEnergyBuckets:
    """
    Classify a brand profile into (tone, energy) buckets.

    Accepts a BrandSignalProfile or any mapping with "tone"/"energy" keys.
    Density and warmth are intentionally ignored.

    Returns:
        ToneEnergyBuckets with tone in serious/balanced/playful and
        energy in minimal/balanced/bold
    """
    tone = bucketize(
        _read_signal(profile, "tone"),
        ToneBucket.SERIOUS.value,
        ToneBucket.PLAYFUL.value,
    )
    energy = bucketize(
        _read_signal(profile, "energy"),
        EnergyBucket.MINIMAL.value,
        EnergyBucket.BOLD.value,
    )
    return ToneEnergyBuckets(tone=tone, energy=energy)


def _parse_hex(hex_color: str) -> tuple[int, int, int] | None:
    digits = hex_color.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        return None
    try:
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    except ValueError:
        return None


def analyze_color_bucket(hex_color: str | None) -> str:
    """
    Classify a hex color (e.g. "#ff6600" or "f60") into a color bucket.

    Low saturation reads as neutral, high saturation as vibrant; otherwise
    the red/blue balance decides warm, cool or muted. Empty or malformed
    input is neutral.
    """
    if not hex_color:
        return ColorBucket.NEUTRAL.value

    rgb = _parse_hex(hex_color)
    if rgb is None:
        return ColorBucket.NEUTRAL.value

    r, g, b = rgb
    high = max(r, g, b)
    low = min(r, g, b)
    saturation = 0.0 if high == 0 else (high - low) / high
    warmth = (r - b) / 255

    if saturation < NEUTRAL_SATURATION:
        return ColorBucket.NEUTRAL.value
    if saturation > VIBRANT_SATURATION:
        return ColorBucket.VIBRANT.value
    if warmth > WARMTH_THRESHOLD:
        return ColorBucket.WARM.value
    if warmth < -WARMTH_THRESHOLD:
        return ColorBucket.COOL.value
    return ColorBucket.MUTED.value
