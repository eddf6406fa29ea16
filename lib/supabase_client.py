# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for the record store holding the two
# curated reference libraries. It implements the singleton pattern to reuse a
# single client connection and provides specialized methods for:
# - Fetching brand references filtered by bucket
# - Incrementing brand reference usage counters
# - Fetching the full deliverable style collection
#
# The matching engine treats this class itself as its store: all methods are
# class methods, so `ReferenceMatcher(SupabaseClient)` works without an
# instance.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   rows = SupabaseClient.fetch_brand_references(tone_bucket="playful")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings
from lib.utils import ApplicationError, normalize_uuids

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(ApplicationError):
    """
    Error during Supabase operations.

    Every PostgREST failure is wrapped in this error so callers only have
    one exception type to handle for "the store could not be reached".
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        # Active playful references, best first
        rows = SupabaseClient.fetch_brand_references(tone_bucket="playful")

        # Count three suggestions as used
        SupabaseClient.increment_brand_reference_usage([id1, id2, id3])
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def reset_client(cls) -> None:
        """Drop the cached client (used by tests and after key rotation)."""
        cls._instance = None

    # -------------------------------------------------------------------------
    # Brand References
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_brand_references(
        cls,
        tone_bucket: str | None = None,
        energy_bucket: str | None = None,
        color_bucket: str | None = None,
        active_only: bool = True,
    ) -> list[dict[str, Any]]:
        """
        Fetch brand references, optionally filtered by bucket.

        Rows come back ordered by display_order ascending, then usage_count
        descending. None filters are not applied.

        Args:
            tone_bucket: serious | balanced | playful
            energy_bucket: minimal | balanced | bold
            color_bucket: warm | cool | neutral | vibrant | muted
            active_only: Only return entries with is_active = true

        Returns:
            List of brand reference rows (snake_case columns)

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        filters = {
            "tone_bucket": tone_bucket,
            "energy_bucket": energy_bucket,
            "color_bucket": color_bucket,
        }

        try:
            query = client.table(settings.BRAND_REFERENCES_TABLE).select("*")

            if active_only:
                query = query.eq("is_active", True)
            for column, value in filters.items():
                if value is not None:
                    query = query.eq(column, value)

            response = (
                query
                .order("display_order")
                .order("usage_count", desc=True)
                .execute()
            )

            rows = response.data or []
            logger.debug(f"Fetched {len(rows)} brand references for filters {filters}")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch brand references: {e}",
                code="FETCH_BRAND_REFERENCES_FAILED",
                suggestion=f"Check that the {settings.BRAND_REFERENCES_TABLE} table exists and is accessible",
                details={k: v for k, v in filters.items() if v is not None}
            )

    @classmethod
    def increment_brand_reference_usage(cls, reference_ids: list[str | UUID]) -> None:
        """
        Add one to usage_count for each given reference.

        Runs the increment as a single Postgres function call so the store
        does the arithmetic atomically.

        Raises:
            SupabaseClientError: If the RPC fails
        """
        ids = normalize_uuids(reference_ids)
        if not ids:
            return

        client = cls.get_client()

        try:
            client.rpc(
                settings.USAGE_INCREMENT_FUNCTION,
                {"reference_ids": ids},
            ).execute()
            logger.debug(f"Incremented usage for {len(ids)} brand references")

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to increment brand reference usage: {e}",
                code="INCREMENT_USAGE_FAILED",
                suggestion=f"Check that the {settings.USAGE_INCREMENT_FUNCTION} function is installed",
                details={"reference_ids": ids}
            )

    # -------------------------------------------------------------------------
    # Deliverable Style References
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_deliverable_style_references(cls) -> list[dict[str, Any]]:
        """
        Fetch every deliverable style reference, active or not.

        No filter is pushed down: coverage analysis needs the whole
        collection and does its own is_active filtering.

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(settings.DELIVERABLE_STYLES_TABLE)
                .select("*")
                .order("deliverable_type")
                .order("display_order")
                .execute()
            )

            rows = response.data or []
            logger.debug(f"Fetched {len(rows)} deliverable style references")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch deliverable style references: {e}",
                code="FETCH_DELIVERABLE_STYLES_FAILED",
                suggestion=f"Check that the {settings.DELIVERABLE_STYLES_TABLE} table exists and is accessible"
            )

    # -------------------------------------------------------------------------
    # Connectivity
    # -------------------------------------------------------------------------

    @classmethod
    def ping(cls) -> None:
        """
        Run a minimal query against the brand reference table.

        Raises:
            SupabaseClientError: If the store cannot be queried
        """
        client = cls.get_client()
        try:
            client.table(settings.BRAND_REFERENCES_TABLE).select("id").limit(1).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Record store ping failed: {e}",
                code="PING_FAILED",
            )
