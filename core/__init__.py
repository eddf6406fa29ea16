# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - constants.py: Bucket vocabularies, deliverable types, style axes
# - models/: Pydantic schemas for data validation
# - taste/: Bucketing, naming, matching and coverage computations
# - services/: Glue between routes, record store and taste engine
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
