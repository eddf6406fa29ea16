# =============================================================================
# core/models/coverage.py - Coverage Report Schemas
# =============================================================================
# Output of the deliverable style coverage analysis used by curators to find
# under-populated (deliverable type x style axis) combinations.
# =============================================================================

from pydantic import Field

from core.models.base import ApiModel


class CoverageAnomaly(ApiModel):
    """
    An active entry that could not be placed in the matrix.

    These are data-integrity defects in the record store: they are reported,
    never silently dropped or counted into another cell.
    """
    entry_id: str
    field: str = Field(..., description="deliverable_type, style_axis, or row for a row that failed validation")
    value: str | None = Field(default=None, description="Offending value, None when missing")
    reason: str


class CoverageReport(ApiModel):
    """
    Coverage statistics over the deliverable style library.

    Example:
        {
            "matrix": {"instagram_post-minimal": 3, ...},
            "gaps": 97,
            "coverageScore": 7,
            "missingColors": 4,
            "missingColorsByType": {"instagram_post": 4}
        }
    """

    # Active entries per "{type}-{axis}" cell, cross-product order
    matrix: dict[str, int] = Field(default_factory=dict)

    gaps: int = Field(default=0, ge=0, description="Cells with fewer than 2 active entries")
    coverage_score: int = Field(default=0, ge=0, le=100, description="Percent of cells that are not gaps")
    missing_colors: int = Field(default=0, ge=0, description="Active entries without color samples")
    missing_colors_by_type: dict[str, int] = Field(
        default_factory=dict,
        description="Per deliverable type, only types with missing colors"
    )

    # Dashboard summary
    total: int = Field(default=0, ge=0, description="All entries, active or not")
    active: int = Field(default=0, ge=0)
    types_count: int = Field(default=0, ge=0, description="Distinct deliverable types present")
    axes_count: int = Field(default=0, ge=0, description="Distinct style axes present")
    total_usage: int = Field(default=0, ge=0)
    total_cells: int = Field(default=0, ge=0)
    gap_cells: list[str] = Field(default_factory=list)

    anomalies: list[CoverageAnomaly] = Field(default_factory=list)
