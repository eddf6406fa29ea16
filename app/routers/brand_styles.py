# =============================================================================
# app/routers/brand_styles.py - Brand Style Naming Endpoints
# =============================================================================
# Store-free endpoints used by the onboarding wizard to label sliders and
# name the detected style.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Query

from core.models.signals import ClassifyResponse, SignalRequest, StyleNameResponse
from core.services.reference_service import BrandReferenceService
from core.taste.naming import name_style

router = APIRouter()


@router.get("/name", response_model=StyleNameResponse)
async def get_style_name(
    tone: Annotated[str | None, Query(description="serious | balanced | playful")] = None,
    energy: Annotated[str | None, Query(description="minimal | balanced | bold")] = None,
):
    """
    Name the style for a (tone, energy) bucket pair.

    Unknown buckets are not an error; they fall back to "Your Brand Style".
    """
    return StyleNameResponse(tone=tone, energy=energy, style_name=name_style(tone, energy))


@router.post("/classify", response_model=ClassifyResponse)
async def classify_brand_signals(request: SignalRequest):
    """
    Bucket the brand sliders and name the resulting style.
    """
    return BrandReferenceService.classify_signals(request)
