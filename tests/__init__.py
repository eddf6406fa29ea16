# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Taste Engine API:
# - test_buckets.py: Signal bucketing and color classification
# - test_naming.py: Style naming rule table
# - test_matching.py: Reference matching, relaxation and usage counting
# - test_coverage.py: Deliverable style coverage analysis
# - test_models.py: Pydantic model validation and serialization
# - test_supabase_client.py: Supabase wrapper queries (mocked client)
# - test_config.py: Settings defaults and CORS parsing
# - test_api.py: HTTP endpoints with an in-memory store
#
# Run tests with: pytest
# =============================================================================
