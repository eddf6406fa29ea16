# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# Tests swap the store via app.dependency_overrides.
# =============================================================================

from typing import Annotated, Any

from fastapi import Depends

from lib.supabase_client import SupabaseClient


def get_reference_store() -> Any:
    """
    Get the reference library store.

    Returns the singleton client wrapper class.
    """
    return SupabaseClient


# Type alias for dependency injection
ReferenceStoreDep = Annotated[Any, Depends(get_reference_store)]
