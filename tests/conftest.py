# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an in-memory reference store standing in for Supabase
# - Provides row factories for both reference libraries
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import itertools
from typing import Any

import pytest

from lib.supabase_client import SupabaseClientError

_ids = itertools.count(1)


# =============================================================================
# In-Memory Store
# =============================================================================

class InMemoryReferenceStore:
    """
    Mimics the SupabaseClient methods used by the engine.

    Set fail_reads / fail_increments to simulate an unreachable store.
    """

    def __init__(
        self,
        brand_rows: list[dict[str, Any]] | None = None,
        style_rows: list[dict[str, Any]] | None = None,
    ):
        self.brand_rows = brand_rows or []
        self.style_rows = style_rows or []
        self.fail_reads = False
        self.fail_increments = False
        self.brand_queries: list[dict[str, Any]] = []
        self.increment_calls: list[list[str]] = []

    def fetch_brand_references(
        self,
        tone_bucket=None,
        energy_bucket=None,
        color_bucket=None,
        active_only=True,
    ):
        self.brand_queries.append({
            "tone_bucket": tone_bucket,
            "energy_bucket": energy_bucket,
            "color_bucket": color_bucket,
            "active_only": active_only,
        })
        if self.fail_reads:
            raise SupabaseClientError("connection refused", code="FETCH_BRAND_REFERENCES_FAILED")

        rows = []
        for row in self.brand_rows:
            if active_only and not row.get("is_active", True):
                continue
            if tone_bucket is not None and row.get("tone_bucket") != tone_bucket:
                continue
            if energy_bucket is not None and row.get("energy_bucket") != energy_bucket:
                continue
            if color_bucket is not None and row.get("color_bucket") != color_bucket:
                continue
            rows.append(dict(row))
        return rows

    def increment_brand_reference_usage(self, reference_ids):
        self.increment_calls.append(list(reference_ids))
        if self.fail_increments:
            raise SupabaseClientError("rpc failed", code="INCREMENT_USAGE_FAILED")
        for row in self.brand_rows:
            if row["id"] in reference_ids:
                row["usage_count"] = row.get("usage_count", 0) + 1

    def fetch_deliverable_style_references(self):
        if self.fail_reads:
            raise SupabaseClientError("connection refused", code="FETCH_DELIVERABLE_STYLES_FAILED")
        return [dict(row) for row in self.style_rows]

    def ping(self):
        if self.fail_reads:
            raise SupabaseClientError("connection refused", code="PING_FAILED")


# =============================================================================
# Row Factories
# =============================================================================

def make_brand_row(
    tone_bucket: str = "balanced",
    energy_bucket: str = "balanced",
    **overrides: Any,
) -> dict[str, Any]:
    """Build a brand_references row with sensible defaults."""
    n = next(_ids)
    row = {
        "id": f"brand-{n}",
        "name": f"Brand Reference {n}",
        "description": None,
        "image_url": f"https://cdn.example.com/brand/{n}.jpg",
        "tone_bucket": tone_bucket,
        "energy_bucket": energy_bucket,
        "color_bucket": "neutral",
        "color_samples": ["#222222", "#f5f5f5"],
        "visual_styles": [],
        "industries": [],
        "display_order": 0,
        "is_active": True,
        "usage_count": 0,
    }
    row.update(overrides)
    return row


def make_style_row(
    deliverable_type: str | None = "instagram_post",
    style_axis: str | None = "minimal",
    **overrides: Any,
) -> dict[str, Any]:
    """Build a deliverable_style_references row with sensible defaults."""
    n = next(_ids)
    row = {
        "id": f"style-{n}",
        "name": f"Style Reference {n}",
        "image_url": f"https://cdn.example.com/style/{n}.jpg",
        "deliverable_type": deliverable_type,
        "style_axis": style_axis,
        "sub_style": None,
        "semantic_tags": ["clean"],
        "color_samples": ["#ffffff"],
        "featured_order": 0,
        "display_order": 0,
        "is_active": True,
        "usage_count": 0,
    }
    row.update(overrides)
    return row


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """Empty in-memory reference store."""
    return InMemoryReferenceStore()


@pytest.fixture
def sample_brand_rows():
    """One reference per notable bucket combination."""
    return [
        make_brand_row("serious", "minimal", id="serious-minimal", display_order=1),
        make_brand_row("playful", "bold", id="playful-bold", display_order=1),
        make_brand_row("playful", "minimal", id="playful-minimal", display_order=2),
        make_brand_row("balanced", "balanced", id="balanced-balanced", display_order=0),
        make_brand_row("serious", "bold", id="serious-bold-inactive", is_active=False),
    ]


@pytest.fixture
def sample_store(sample_brand_rows):
    """In-memory store loaded with sample brand references."""
    return InMemoryReferenceStore(brand_rows=sample_brand_rows)
