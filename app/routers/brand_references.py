# =============================================================================
# app/routers/brand_references.py - Brand Reference Endpoints
# =============================================================================
# Matching and browsing of the curated brand reference library.
# Matching never fails the onboarding flow: when the store is unreachable
# the response carries buckets and a style name but no references.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Query

from app.dependencies import ReferenceStoreDep
from core.constants import ColorBucket, EnergyBucket, ToneBucket
from core.models.references import (
    DEFAULT_MATCH_LIMIT,
    MAX_MATCH_LIMIT,
    BrandReferenceList,
    MatchRequest,
    MatchResponse,
)
from core.services.reference_service import BrandReferenceService

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/match", response_model=MatchResponse)
async def match_brand_references(
    request: MatchRequest,
    background_tasks: BackgroundTasks,
    store: ReferenceStoreDep,
):
    """
    Suggest brand references for the onboarding sliders.

    Signals are bucketed (values below 35 and above 65 leave the balanced
    band), then references are matched on both buckets, relaxing to tone
    only, energy only and finally any active reference.

    Usage counters of the returned references are incremented after the
    response is sent.
    """
    def schedule_usage(reference_ids: list[str]) -> None:
        background_tasks.add_task(BrandReferenceService.record_usage, reference_ids, store)

    return BrandReferenceService.match(request, store=store, schedule_usage=schedule_usage)


@router.get("", response_model=BrandReferenceList)
async def list_brand_references(
    store: ReferenceStoreDep,
    tone_bucket: Annotated[ToneBucket | None, Query(alias="toneBucket")] = None,
    energy_bucket: Annotated[EnergyBucket | None, Query(alias="energyBucket")] = None,
    color_bucket: Annotated[ColorBucket | None, Query(alias="colorBucket")] = None,
    limit: Annotated[int, Query(ge=1, le=MAX_MATCH_LIMIT)] = DEFAULT_MATCH_LIMIT,
    offset: Annotated[int, Query(ge=0)] = 0,
):
    """
    Browse active brand references by explicit buckets.

    Omitted buckets are not filtered on. Results are ordered by display
    order, then by how often each reference has been suggested.
    """
    references = BrandReferenceService.list_references(
        tone_bucket=tone_bucket.value if tone_bucket else None,
        energy_bucket=energy_bucket.value if energy_bucket else None,
        color_bucket=color_bucket.value if color_bucket else None,
        limit=limit,
        offset=offset,
        store=store,
    )
    return BrandReferenceList(references=references)
