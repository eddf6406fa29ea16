# =============================================================================
# app/routers/deliverable_styles.py - Deliverable Style Curation Endpoints
# =============================================================================
# Coverage statistics for the admin curation dashboard.
# A store failure is a 503 (retryable), never an all-zero report.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import ReferenceStoreDep
from core.models.coverage import CoverageReport
from core.services.reference_service import DeliverableStyleService

router = APIRouter()


@router.get("/coverage", response_model=CoverageReport)
async def get_coverage_report(store: ReferenceStoreDep):
    """
    Coverage of the deliverable style library.

    Counts active references per (deliverable type, style axis) cell.
    A cell with fewer than two active references is a gap. Entries with a
    missing or unknown type/axis are returned under `anomalies`.
    """
    return DeliverableStyleService.coverage_report(store=store)
