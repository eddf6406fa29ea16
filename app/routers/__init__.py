# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - brand_references.py: Brand reference matching and browsing
# - brand_styles.py: Slider classification and style naming
# - deliverable_styles.py: Deliverable style coverage for curators
# - reference_libraries.py: Vocabularies and display labels
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import brand_references
from . import brand_styles
from . import deliverable_styles
from . import reference_libraries

__all__ = [
    "health",
    "brand_references",
    "brand_styles",
    "deliverable_styles",
    "reference_libraries",
]
