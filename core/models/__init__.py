# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - base.py: camelCase/snake_case bridging for API models
# - signals.py: Brand signal profile, signal request, bucket pair
# - references.py: Brand and deliverable style references, matching contract
# - coverage.py: Deliverable style coverage report
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Signal Models - Brand personality sliders
# -----------------------------------------------------------------------------
from .signals import (
    BrandSignalProfile,
    BucketPair,
    ClassifyResponse,
    SignalRequest,
    SliderLabels,
    StyleNameResponse,
)

# -----------------------------------------------------------------------------
# Reference Models - Curated libraries
# -----------------------------------------------------------------------------
from .references import (
    DEFAULT_MATCH_LIMIT,
    MAX_MATCH_LIMIT,
    BrandReference,
    BrandReferenceList,
    DeliverableStyleReference,
    MatchLevel,
    MatchRequest,
    MatchResponse,
)

# -----------------------------------------------------------------------------
# Coverage Models - Curation statistics
# -----------------------------------------------------------------------------
from .coverage import (
    CoverageAnomaly,
    CoverageReport,
)

# -----------------------------------------------------------------------------
# __all__ - Explicit public API
# -----------------------------------------------------------------------------
__all__ = [
    # Signals
    "BrandSignalProfile",
    "BucketPair",
    "ClassifyResponse",
    "SignalRequest",
    "SliderLabels",
    "StyleNameResponse",
    # References
    "DEFAULT_MATCH_LIMIT",
    "MAX_MATCH_LIMIT",
    "BrandReference",
    "BrandReferenceList",
    "DeliverableStyleReference",
    "MatchLevel",
    "MatchRequest",
    "MatchResponse",
    # Coverage
    "CoverageAnomaly",
    "CoverageReport",
]
