# =============================================================================
# app/routers/reference_libraries.py - Reference Library Vocabularies
# =============================================================================
# Exposes the closed vocabularies so clients can render pickers and matrix
# headers without hard-coding them.
# =============================================================================

from fastapi import APIRouter

from core.constants import (
    COLOR_BUCKET_LABELS,
    DELIVERABLE_TYPE_LABELS,
    ENERGY_BUCKET_LABELS,
    STYLE_AXIS_LABELS,
    TONE_BUCKET_LABELS,
)
from core.models.base import ApiModel

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class Option(ApiModel):
    """One selectable value."""
    value: str
    label: str
    description: str | None = None


class ReferenceLibraryOptions(ApiModel):
    """All vocabularies used by the reference libraries."""
    tone_buckets: list[Option]
    energy_buckets: list[Option]
    color_buckets: list[Option]
    deliverable_types: list[Option]
    style_axes: list[Option]


def _options(labels: dict[str, str]) -> list[Option]:
    return [Option(value=value, label=label) for value, label in labels.items()]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/options", response_model=ReferenceLibraryOptions)
async def get_reference_library_options():
    """
    List bucket vocabularies, deliverable types and style axes with labels.
    """
    return ReferenceLibraryOptions(
        tone_buckets=_options(TONE_BUCKET_LABELS),
        energy_buckets=_options(ENERGY_BUCKET_LABELS),
        color_buckets=_options(COLOR_BUCKET_LABELS),
        deliverable_types=_options(DELIVERABLE_TYPE_LABELS),
        style_axes=[
            Option(value=value, label=label, description=description)
            for value, (label, description) in STYLE_AXIS_LABELS.items()
        ],
    )
