# =============================================================================
# core/services/reference_service.py - Reference Library Business Logic
# =============================================================================
# Glue between the API routes, the record store and the taste engine:
# - BrandReferenceService: matching, browsing, usage counting
# - DeliverableStyleService: coverage reporting
#
# Brand reference matching is an enhancement to onboarding, never a blocking
# step: if the store cannot be read the match still returns buckets and a
# style name, just without suggestions.
# =============================================================================

import logging
from typing import Any, Callable

from app.exceptions import ReferenceStoreUnavailableError
from core.models.coverage import CoverageReport
from core.models.references import (
    DEFAULT_MATCH_LIMIT,
    BrandReference,
    MatchRequest,
    MatchResponse,
)
from core.models.signals import BucketPair, ClassifyResponse, SignalRequest, SliderLabels
from core.taste.buckets import analyze_color_bucket, classify, slider_label
from core.taste.coverage import analyze_coverage
from core.taste.matching import ReferenceMatcher, load_active_references, rank_references
from core.taste.naming import name_style
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)

# Schedules a usage increment for the given reference ids
UsageScheduler = Callable[[list[str]], Any]


class BrandReferenceService:
    """
    Service for brand reference operations.

    The store defaults to SupabaseClient; tests and the API layer can pass
    any object with the same fetch/increment methods.
    """

    @staticmethod
    def classify_signals(request: SignalRequest) -> ClassifyResponse:
        """
        Bucket the sliders and name the style without touching the store.
        """
        profile = request.to_profile()
        buckets = classify(profile)
        color = analyze_color_bucket(request.primary_color) if request.primary_color else None

        return ClassifyResponse(
            buckets=BucketPair.from_buckets(buckets, color=color),
            style_name=name_style(buckets.tone, buckets.energy),
            labels=SliderLabels(
                tone=slider_label(profile.tone, "Serious", "Playful"),
                energy=slider_label(profile.energy, "Minimal", "Bold"),
            ),
        )

    @staticmethod
    def record_usage(reference_ids: list[str], store: Any = SupabaseClient) -> None:
        """
        Increment usage counters for suggested references.

        Best-effort telemetry: failures are logged, never raised.
        """
        if not reference_ids:
            return
        try:
            store.increment_brand_reference_usage(reference_ids)
        except Exception as e:
            logger.warning(f"Usage counter update failed for {len(reference_ids)} references: {e}")

    @staticmethod
    def match(
        request: MatchRequest,
        store: Any = SupabaseClient,
        schedule_usage: UsageScheduler | None = None,
    ) -> MatchResponse:
        """
        Match brand references for the onboarding sliders.

        Args:
            request: Slider values plus paging
            store: Brand reference store
            schedule_usage: Called with the returned ids so usage can be
                counted after the response; defaults to counting inline

        Returns:
            MatchResponse. On store failure: empty references,
            suggestions_available=False, buckets and style_name still set.
        """
        if schedule_usage is None:
            def schedule_usage(ids: list[str]) -> None:
                BrandReferenceService.record_usage(ids, store=store)

        profile = request.to_profile()
        color = analyze_color_bucket(request.primary_color) if request.primary_color else None
        matcher = ReferenceMatcher(store)

        try:
            result = matcher.match(
                profile,
                limit=request.limit,
                offset=request.offset,
                record_usage=schedule_usage,
            )
        except ReferenceStoreUnavailableError as e:
            buckets = classify(profile)
            logger.warning(f"Brand reference matching degraded, returning no suggestions: {e.details}")
            return MatchResponse(
                references=[],
                buckets=BucketPair.from_buckets(buckets, color=color),
                style_name=name_style(buckets.tone, buckets.energy),
                match_level=None,
                total=0,
                suggestions_available=False,
            )

        if result.match_level is None:
            logger.info("Brand reference library has no active entries")

        return MatchResponse(
            references=result.references,
            buckets=BucketPair.from_buckets(result.buckets, color=color),
            style_name=name_style(result.buckets.tone, result.buckets.energy),
            match_level=result.match_level,
            total=result.total,
        )

    @staticmethod
    def list_references(
        tone_bucket: str | None = None,
        energy_bucket: str | None = None,
        color_bucket: str | None = None,
        limit: int = DEFAULT_MATCH_LIMIT,
        offset: int = 0,
        store: Any = SupabaseClient,
    ) -> list[BrandReference]:
        """
        Browse active references by explicit buckets, ranked like matches.

        Raises:
            ReferenceStoreUnavailableError: If the store cannot be read
        """
        try:
            rows = store.fetch_brand_references(
                tone_bucket=tone_bucket,
                energy_bucket=energy_bucket,
                color_bucket=color_bucket,
                active_only=True,
            )
        except SupabaseClientError as e:
            raise ReferenceStoreUnavailableError(collection="brand_references", error=str(e)) from e

        ranked = rank_references(load_active_references(rows))
        return ranked[offset:offset + limit]


class DeliverableStyleService:
    """Service for deliverable style library operations."""

    @staticmethod
    def coverage_report(store: Any = SupabaseClient) -> CoverageReport:
        """
        Load the whole deliverable style collection and analyze coverage.

        Raises:
            ReferenceStoreUnavailableError: If the collection cannot be
                loaded; a failed load is never reported as zero coverage
        """
        try:
            rows = store.fetch_deliverable_style_references()
        except SupabaseClientError as e:
            raise ReferenceStoreUnavailableError(
                collection="deliverable_style_references",
                error=str(e),
            ) from e

        report = analyze_coverage(rows)
        logger.info(
            f"Coverage report: {report.active}/{report.total} active, "
            f"{report.gaps} gaps, score {report.coverage_score}%"
        )
        return report
