# =============================================================================
# core/models/references.py - Reference Library Schemas
# =============================================================================
# These models define the API contract for the two curated libraries:
# - BrandReference: exemplar images tagged with tone/energy/color buckets
# - DeliverableStyleReference: exemplars keyed by (deliverable type, style axis)
# - MatchRequest / MatchResponse: brand reference matching contract
#
# Rows come from the record store in snake_case and are returned to clients
# in camelCase (see ApiModel).
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from core.models.base import ApiModel
from core.models.signals import BucketPair, SignalRequest

DEFAULT_MATCH_LIMIT = 12
MAX_MATCH_LIMIT = 50


def _empty_list_if_none(value: Any) -> Any:
    # jsonb columns may come back as null
    return [] if value is None else value


class BrandReference(ApiModel):
    """
    A curated brand exemplar.

    Only tone_bucket and energy_bucket take part in matching; the rest is
    descriptive. usage_count grows each time the entry is suggested.

    Example row:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "Soft Pastel Studio",
            "image_url": "https://cdn.example.com/refs/pastel.jpg",
            "tone_bucket": "playful",
            "energy_bucket": "minimal",
            "color_bucket": "warm",
            "display_order": 0,
            "usage_count": 14
        }
    """

    id: str = Field(..., description="Reference identifier")
    name: str = Field(..., description="Display name")
    description: str | None = Field(default=None)
    image_url: str = Field(..., description="Image location")
    tone_bucket: str = Field(..., description="serious | balanced | playful")
    energy_bucket: str = Field(..., description="minimal | balanced | bold")
    color_bucket: str | None = Field(default=None)
    color_samples: list[Any] = Field(default_factory=list)
    visual_styles: list[str] = Field(default_factory=list)
    industries: list[str] = Field(default_factory=list)
    display_order: int = Field(default=0)
    is_active: bool = Field(default=True)
    usage_count: int = Field(default=0, ge=0)
    created_at: datetime | None = Field(default=None)
    updated_at: datetime | None = Field(default=None)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        return str(value) if value is not None else value

    @field_validator("color_samples", "visual_styles", "industries", mode="before")
    @classmethod
    def _lists(cls, value: Any) -> Any:
        return _empty_list_if_none(value)

    @field_validator("display_order", "usage_count", mode="before")
    @classmethod
    def _zero_if_none(cls, value: Any) -> Any:
        return 0 if value is None else value


class DeliverableStyleReference(ApiModel):
    """
    A curated deliverable style exemplar.

    deliverable_type and style_axis stay plain strings so a row with a
    missing or unknown key can still be loaded and reported as an anomaly.
    Many entries may share the same (deliverable_type, style_axis) cell.
    """

    id: str = Field(..., description="Reference identifier")
    name: str | None = Field(default=None)
    description: str | None = Field(default=None)
    image_url: str | None = Field(default=None)
    deliverable_type: str | None = Field(default=None)
    style_axis: str | None = Field(default=None)
    sub_style: str | None = Field(default=None)
    semantic_tags: list[str] = Field(default_factory=list)
    color_samples: list[Any] | None = Field(default=None)
    featured_order: int = Field(default=0)
    display_order: int = Field(default=0)
    is_active: bool = Field(default=True)
    usage_count: int = Field(default=0)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        return str(value) if value is not None else value

    @field_validator("semantic_tags", mode="before")
    @classmethod
    def _lists(cls, value: Any) -> Any:
        return _empty_list_if_none(value)

    @field_validator("featured_order", "display_order", "usage_count", mode="before")
    @classmethod
    def _zero_if_none(cls, value: Any) -> Any:
        return 0 if value is None else value

    @property
    def has_color_samples(self) -> bool:
        return bool(self.color_samples)


# =============================================================================
# Matching Contract
# =============================================================================

class MatchLevel(str, Enum):
    """
    Which filter produced the candidates.

    - exact: tone and energy both matched
    - tone: tone matched, energy relaxed
    - energy: energy matched, tone relaxed
    - any: no bucket matched, any active entry
    """
    EXACT = "exact"
    TONE = "tone"
    ENERGY = "energy"
    ANY = "any"


class MatchRequest(SignalRequest):
    """
    Request body for POST /brand-references/match.

    Example:
        {"signalTone": 10, "signalEnergy": 10, "limit": 6}
    """

    limit: int = Field(
        default=DEFAULT_MATCH_LIMIT,
        ge=1,
        le=MAX_MATCH_LIMIT,
        description="Maximum number of references to return"
    )
    offset: int = Field(
        default=0,
        ge=0,
        description="Number of ranked references to skip (pagination)"
    )


class MatchResponse(ApiModel):
    """
    Response for POST /brand-references/match.

    references may be empty (library empty or store unreachable); buckets
    and style_name are always present so the client can still name the
    brand style.
    """

    references: list[BrandReference] = Field(default_factory=list)
    buckets: BucketPair
    style_name: str
    match_level: MatchLevel | None = Field(
        default=None,
        description="Relaxation level used, None when nothing matched"
    )
    total: int = Field(
        default=0,
        ge=0,
        description="Size of the candidate pool before pagination"
    )
    suggestions_available: bool = Field(
        default=True,
        description="False when the reference store could not be reached"
    )


class BrandReferenceList(ApiModel):
    """Response for GET /brand-references."""
    references: list[BrandReference] = Field(default_factory=list)
