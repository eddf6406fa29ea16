# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Helpers shared by the record store client and the services:
# - normalize_uuid / normalize_uuids: reference ids as plain strings
# - ApplicationError: base for errors that carry a fix suggestion
# =============================================================================

from typing import Any
from uuid import UUID


# =============================================================================
# Reference Ids
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Return a reference id as a string.

    Example:
        normalize_uuid(UUID("550e8400-e29b-41d4-a716-446655440000"))
        # "550e8400-e29b-41d4-a716-446655440000"
    """
    return str(value) if isinstance(value, UUID) else value


def normalize_uuids(values: list[str | UUID]) -> list[str]:
    """Normalize a list of ids, dropping duplicates but keeping order."""
    seen: dict[str, None] = {}
    for value in values:
        seen.setdefault(normalize_uuid(value), None)
    return list(seen)


# =============================================================================
# Errors
# =============================================================================

class ApplicationError(Exception):
    """
    Error raised outside the HTTP layer.

    Carries a machine-readable code and, where possible, a suggestion telling
    the operator how to fix the problem. The API maps these to
    TasteEngineException subclasses (see app/exceptions.py).
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result
