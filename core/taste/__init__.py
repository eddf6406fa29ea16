# =============================================================================
# core/taste/ - Taste Signal Engine
# =============================================================================
# Computation behind brand onboarding and curation:
# - buckets.py: slider values -> tone/energy/color buckets
# - naming.py: bucket pair -> aesthetic label
# - matching.py: brand reference matching with progressive relaxation
# - coverage.py: deliverable style coverage matrix and gap statistics
#
# buckets, naming and coverage are pure. matching reads the store and raises
# app.exceptions errors, so importing it loads app.config (Supabase env vars
# must be set). matching and coverage depend on core.models; import them by
# module path.
# =============================================================================

from core.taste.buckets import (
    HIGH_THRESHOLD,
    LOW_THRESHOLD,
    ToneEnergyBuckets,
    analyze_color_bucket,
    bucketize,
    classify,
    normalize_signal,
    slider_label,
)
from core.taste.naming import STYLE_RULES, StyleRule, matching_rule, name_style

__all__ = [
    # Buckets
    "HIGH_THRESHOLD",
    "LOW_THRESHOLD",
    "ToneEnergyBuckets",
    "analyze_color_bucket",
    "bucketize",
    "classify",
    "normalize_signal",
    "slider_label",
    # Naming
    "STYLE_RULES",
    "StyleRule",
    "matching_rule",
    "name_style",
]
