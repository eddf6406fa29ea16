# =============================================================================
# core/taste/matching.py - Brand Reference Matching
# =============================================================================
# Picks exemplar images from the brand reference library for a brand profile.
#
# Flow:
# 1. Classify the profile into (tone, energy) buckets
# 2. Query active references, relaxing the filter until something matches:
#    exact (tone + energy) -> tone only -> energy only -> any active entry
# 3. Rank by display_order ascending, then usage_count descending
# 4. Page with offset/limit
# 5. Report returned ids for usage counting (best-effort)
#
# The store is anything with fetch_brand_references(...) returning rows,
# normally the SupabaseClient class itself.
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

from pydantic import ValidationError

from app.exceptions import ReferenceStoreUnavailableError
from core.models.references import DEFAULT_MATCH_LIMIT, BrandReference, MatchLevel
from core.taste.buckets import ToneEnergyBuckets, classify
from lib.supabase_client import SupabaseClientError

logger = logging.getLogger(__name__)

# Receives the ids of the references handed back to the client
UsageRecorder = Callable[[list[str]], Any]


class BrandReferenceStore(Protocol):
    """Read side of the brand reference collection."""

    def fetch_brand_references(
        self,
        tone_bucket: str | None = None,
        energy_bucket: str | None = None,
        color_bucket: str | None = None,
        active_only: bool = True,
    ) -> list[dict[str, Any]]:
        ...


@dataclass(frozen=True)
class RelaxationLevel:
    """One step of the fallback chain: which buckets constrain the query."""
    level: MatchLevel
    use_tone: bool
    use_energy: bool

    def filters(self, buckets: ToneEnergyBuckets) -> dict[str, str | None]:
        return {
            "tone_bucket": buckets.tone if self.use_tone else None,
            "energy_bucket": buckets.energy if self.use_energy else None,
        }


# Tried in order; the first non-empty candidate set wins
RELAXATION_LEVELS: tuple[RelaxationLevel, ...] = (
    RelaxationLevel(MatchLevel.EXACT, use_tone=True, use_energy=True),
    RelaxationLevel(MatchLevel.TONE, use_tone=True, use_energy=False),
    RelaxationLevel(MatchLevel.ENERGY, use_tone=False, use_energy=True),
    RelaxationLevel(MatchLevel.ANY, use_tone=False, use_energy=False),
)


@dataclass
class MatchResult:
    """Ranked references plus the buckets they were matched on."""
    buckets: ToneEnergyBuckets
    references: list[BrandReference] = field(default_factory=list)
    match_level: MatchLevel | None = None
    total: int = 0

    @property
    def reference_ids(self) -> list[str]:
        return [ref.id for ref in self.references]


def rank_references(references: list[BrandReference]) -> list[BrandReference]:
    """Order by display_order ascending, ties broken by usage_count descending."""
    return sorted(references, key=lambda ref: (ref.display_order, -ref.usage_count))


def load_active_references(rows: list[dict[str, Any]] | None) -> list[BrandReference]:
    """
    Validate store rows into BrandReference models, keeping active ones.

    Malformed rows are logged and skipped so one bad entry cannot fail a
    whole match or browse request.
    """
    references = []
    for row in rows or []:
        try:
            reference = BrandReference.model_validate(row)
        except ValidationError as e:
            logger.warning(f"Skipping malformed brand reference {row.get('id')}: {e.error_count()} errors")
            continue
        # The store filters on is_active too; never trust that alone
        if reference.is_active:
            references.append(reference)
    return references


def record_usage_safely(record_usage: UsageRecorder, reference_ids: list[str]) -> bool:
    """
    Hand reference ids to a usage recorder without letting it fail the caller.

    Returns:
        True if the recorder ran without raising
    """
    if not reference_ids:
        return True
    try:
        record_usage(reference_ids)
        return True
    except Exception as e:
        logger.warning(f"Failed to record usage for {len(reference_ids)} references: {e}")
        return False


class ReferenceMatcher:
    """
    Matches a brand profile against the brand reference library.

    Example:
        matcher = ReferenceMatcher(SupabaseClient)
        result = matcher.match(BrandSignalProfile(tone=10, energy=10), limit=6)
        result.buckets       # ToneEnergyBuckets(tone="serious", energy="minimal")
        result.match_level   # MatchLevel.EXACT
    """

    def __init__(
        self,
        store: BrandReferenceStore,
        levels: tuple[RelaxationLevel, ...] = RELAXATION_LEVELS,
    ):
        self.store = store
        self.levels = levels

    def _fetch(self, level: RelaxationLevel, buckets: ToneEnergyBuckets) -> list[BrandReference]:
        try:
            rows = self.store.fetch_brand_references(active_only=True, **level.filters(buckets))
        except SupabaseClientError as e:
            raise ReferenceStoreUnavailableError(
                collection="brand_references",
                error=str(e),
            ) from e

        return load_active_references(rows)

    def find_candidates(
        self,
        buckets: ToneEnergyBuckets,
    ) -> tuple[MatchLevel | None, list[BrandReference]]:
        """
        Walk the relaxation levels and return the first non-empty candidate set.

        Returns:
            (level, candidates), or (None, []) when the library has no
            active entries at all

        Raises:
            ReferenceStoreUnavailableError: If the store cannot be read
        """
        for level in self.levels:
            candidates = self._fetch(level, buckets)
            if candidates:
                logger.debug(
                    f"Matched {len(candidates)} references at level '{level.level.value}' "
                    f"for tone={buckets.tone} energy={buckets.energy}"
                )
                return level.level, candidates
        return None, []

    def match(
        self,
        profile: Any,
        limit: int = DEFAULT_MATCH_LIMIT,
        offset: int = 0,
        record_usage: UsageRecorder | None = None,
    ) -> MatchResult:
        """
        Find ranked references for a brand profile.

        Args:
            profile: BrandSignalProfile or mapping with tone/energy signals
            limit: Maximum number of references to return
            offset: Number of ranked references to skip
            record_usage: Optional callable given the returned ids; its
                failures are logged and ignored

        Returns:
            MatchResult with at most `limit` references

        Raises:
            ReferenceStoreUnavailableError: If the store cannot be read
        """
        buckets = classify(profile)
        level, candidates = self.find_candidates(buckets)

        start = max(offset, 0)
        page = rank_references(candidates)[start:start + max(limit, 0)]

        result = MatchResult(
            buckets=buckets,
            references=page,
            match_level=level,
            total=len(candidates),
        )

        if record_usage is not None:
            record_usage_safely(record_usage, result.reference_ids)

        return result
