# =============================================================================
# core/models/signals.py - Brand Signal Schemas
# =============================================================================
# These models carry the brand personality sliders into the engine:
# - BrandSignalProfile: the four normalized 0-100 signals
# - SignalRequest: the wire shape (signalTone, signalEnergy, ...)
# - BucketPair: classified buckets returned to clients
#
# Signals are normalized, never rejected: a missing or out-of-range value
# simply becomes the midpoint (50).
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_serializer

from core.models.base import ApiModel
from core.taste.buckets import DEFAULT_SIGNAL, ToneEnergyBuckets, normalize_signal

SIGNAL_FIELDS = ("tone", "density", "warmth", "energy")


class BrandSignalProfile(BaseModel):
    """
    Four independent brand personality signals.

    Held only for the duration of a request. Density and warmth are
    accepted for completeness but do not influence classification.

    Example:
        BrandSignalProfile(tone=10, energy=80)
        BrandSignalProfile(tone=None)  # tone == 50
    """

    # serious (0) <-> playful (100)
    tone: int = Field(default=DEFAULT_SIGNAL, ge=0, le=100)

    # minimal (0) <-> rich (100)
    density: int = Field(default=DEFAULT_SIGNAL, ge=0, le=100)

    # cold (0) <-> warm (100)
    warmth: int = Field(default=DEFAULT_SIGNAL, ge=0, le=100)

    # calm (0) <-> energetic (100)
    energy: int = Field(default=DEFAULT_SIGNAL, ge=0, le=100)

    @field_validator(*SIGNAL_FIELDS, mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> int:
        return normalize_signal(value)


class SignalRequest(ApiModel):
    """
    Slider values as sent by the onboarding client.

    Every signal is optional. Used directly by POST /brand-styles/classify
    and as the base of the match request.

    Example:
        {"signalTone": 10, "signalEnergy": 80, "primaryColor": "#ff6600"}
    """

    signal_tone: int = Field(
        default=DEFAULT_SIGNAL,
        description="Tone slider: serious (0) to playful (100)"
    )
    signal_density: int = Field(
        default=DEFAULT_SIGNAL,
        description="Density slider: minimal (0) to rich (100)"
    )
    signal_warmth: int = Field(
        default=DEFAULT_SIGNAL,
        description="Warmth slider: cold (0) to warm (100)"
    )
    signal_energy: int = Field(
        default=DEFAULT_SIGNAL,
        description="Energy slider: calm (0) to energetic (100)"
    )
    primary_color: str | None = Field(
        default=None,
        description="Optional brand primary color as hex (descriptive only)"
    )

    @field_validator(
        "signal_tone", "signal_density", "signal_warmth", "signal_energy",
        mode="before",
    )
    @classmethod
    def _normalize(cls, value: Any) -> int:
        return normalize_signal(value)

    def to_profile(self) -> BrandSignalProfile:
        """Strip the wire prefix and build the engine-side profile."""
        return BrandSignalProfile(
            tone=self.signal_tone,
            density=self.signal_density,
            warmth=self.signal_warmth,
            energy=self.signal_energy,
        )


class BucketPair(ApiModel):
    """Buckets detected for a profile. Color is only present when requested."""

    tone: str
    energy: str
    color: str | None = None

    @classmethod
    def from_buckets(cls, buckets: ToneEnergyBuckets, color: str | None = None) -> "BucketPair":
        return cls(tone=buckets.tone, energy=buckets.energy, color=color)

    @model_serializer(mode="wrap")
    def _drop_missing_color(self, handler):
        data = handler(self)
        if self.color is None:
            data.pop("color", None)
        return data


class SliderLabels(ApiModel):
    """Display labels for the tone and energy sliders."""
    tone: str
    energy: str


class ClassifyResponse(ApiModel):
    """Response for POST /brand-styles/classify."""
    buckets: BucketPair
    style_name: str
    labels: SliderLabels


class StyleNameResponse(ApiModel):
    """Response for GET /brand-styles/name."""
    tone: str | None = None
    energy: str | None = None
    style_name: str
