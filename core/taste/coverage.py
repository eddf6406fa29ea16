# =============================================================================
# core/taste/coverage.py - Deliverable Style Coverage
# =============================================================================
# Computes how well the deliverable style library covers every
# (deliverable type x style axis) combination:
# - matrix: active entries per cell
# - gaps: cells with fewer than GAP_THRESHOLD active entries
# - coverage_score: percent of cells that are not gaps
# - missing color sample counts, overall and per deliverable type
#
# Read-only and derived; the report is recomputed on every request.
# =============================================================================

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Mapping
from typing import Any, Iterable, Sequence

from pydantic import ValidationError

from core.constants import DELIVERABLE_TYPES, STYLE_AXES
from core.models.coverage import CoverageAnomaly, CoverageReport
from core.models.references import DeliverableStyleReference

logger = logging.getLogger(__name__)

# A single exemplar is not enough for a cell
GAP_THRESHOLD = 2

# Anomaly entry_id for rows that have no usable id
UNKNOWN_ENTRY_ID = "<unknown>"


def cell_key(deliverable_type: str, style_axis: str) -> str:
    """Matrix key for a (deliverable type, style axis) cell."""
    return f"{deliverable_type}-{style_axis}"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def coverage_score(total_cells: int, gaps: int) -> int:
    """Percentage of cells that are not gaps, 0 when there are no cells."""
    if total_cells <= 0:
        return 0
    return _round_half_up((total_cells - gaps) * 100 / total_cells)


def _load_entries(entries: Iterable[Any]) -> tuple[list[DeliverableStyleReference], list[CoverageAnomaly]]:
    """Validate rows; rows that fail validation become anomalies."""
    styles: list[DeliverableStyleReference] = []
    malformed: list[CoverageAnomaly] = []
    for entry in entries:
        if isinstance(entry, DeliverableStyleReference):
            styles.append(entry)
            continue
        try:
            styles.append(DeliverableStyleReference.model_validate(entry))
        except ValidationError as e:
            raw_id = entry.get("id") if isinstance(entry, Mapping) else None
            malformed.append(CoverageAnomaly(
                entry_id=str(raw_id) if raw_id is not None else UNKNOWN_ENTRY_ID,
                field="row",
                value=None,
                reason=f"Row failed validation with {e.error_count()} errors",
            ))
    return styles, malformed


def _key_anomalies(
    entry: DeliverableStyleReference,
    deliverable_types: Sequence[str],
    style_axes: Sequence[str],
) -> list[CoverageAnomaly]:
    anomalies = []
    for field_name, value, allowed in (
        ("deliverable_type", entry.deliverable_type, deliverable_types),
        ("style_axis", entry.style_axis, style_axes),
    ):
        if not value:
            anomalies.append(CoverageAnomaly(
                entry_id=entry.id,
                field=field_name,
                value=None,
                reason=f"Active entry has no {field_name}",
            ))
        elif value not in allowed:
            anomalies.append(CoverageAnomaly(
                entry_id=entry.id,
                field=field_name,
                value=value,
                reason=f"Unknown {field_name}: {value}",
            ))
    return anomalies


def analyze_coverage(
    entries: Iterable[Any],
    deliverable_types: Sequence[str] = DELIVERABLE_TYPES,
    style_axes: Sequence[str] = STYLE_AXES,
) -> CoverageReport:
    """
    Build the coverage report for a full deliverable style collection.

    Args:
        entries: Every entry in the library, active or not, as
            DeliverableStyleReference models or store rows
        deliverable_types: Row dimension of the matrix
        style_axes: Column dimension of the matrix

    Returns:
        CoverageReport. Active entries whose key is missing or outside the
        enumerations are listed in `anomalies` and left out of the matrix.
        Rows that fail validation are listed too, with field "row", and
        count only towards `total`.

    Example:
        report = analyze_coverage([])
        report.gaps            # 104
        report.coverage_score  # 0
    """
    styles, anomalies = _load_entries(entries)
    malformed_rows = len(anomalies)
    active = [style for style in styles if style.is_active]

    cell_counts: Counter[tuple[str, str]] = Counter()
    missing_by_type: Counter[str] = Counter()
    missing_colors = 0

    for style in active:
        if not style.has_color_samples:
            missing_colors += 1
            if style.deliverable_type in deliverable_types:
                missing_by_type[style.deliverable_type] += 1

        problems = _key_anomalies(style, deliverable_types, style_axes)
        if problems:
            anomalies.extend(problems)
            continue
        cell_counts[(style.deliverable_type, style.style_axis)] += 1

    matrix: dict[str, int] = {}
    gap_cells: list[str] = []
    for deliverable_type in deliverable_types:
        for style_axis in style_axes:
            key = cell_key(deliverable_type, style_axis)
            count = cell_counts[(deliverable_type, style_axis)]
            matrix[key] = count
            if count < GAP_THRESHOLD:
                gap_cells.append(key)

    total_cells = len(deliverable_types) * len(style_axes)
    gaps = len(gap_cells)

    if anomalies:
        logger.warning(
            f"Coverage analysis found {len(anomalies)} anomalies in "
            f"{len({a.entry_id for a in anomalies})} deliverable style entries"
        )

    return CoverageReport(
        matrix=matrix,
        gaps=gaps,
        coverage_score=coverage_score(total_cells, gaps),
        missing_colors=missing_colors,
        missing_colors_by_type={
            deliverable_type: missing_by_type[deliverable_type]
            for deliverable_type in deliverable_types
            if missing_by_type[deliverable_type] > 0
        },
        total=len(styles) + malformed_rows,
        active=len(active),
        types_count=len({s.deliverable_type for s in styles if s.deliverable_type}),
        axes_count=len({s.style_axis for s in styles if s.style_axis}),
        total_usage=sum(max(s.usage_count, 0) for s in styles),
        total_cells=total_cells,
        gap_cells=gap_cells,
        anomalies=anomalies,
    )
