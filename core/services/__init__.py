# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .reference_service import BrandReferenceService, DeliverableStyleService

__all__ = [
    "BrandReferenceService",
    "DeliverableStyleService",
]
