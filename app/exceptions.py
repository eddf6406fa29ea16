# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class TasteEngineException(Exception):
    """
    Error that maps directly onto an HTTP response.

    Subclasses fix the status code and error code; the JSON body always has
    detail and code, plus suggestion and details when set.
    """

    def __init__(
        self,
        message: str,
        code: str = "TASTE_ENGINE_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Record Store Exceptions
# =============================================================================

class ReferenceStoreUnavailableError(TasteEngineException):
    """
    Raised when a reference collection cannot be read.

    Retryable. Distinct from an empty library, which is a valid result.
    """

    def __init__(self, collection: str, error: str):
        super().__init__(
            message=f"Reference store unavailable while reading {collection}",
            code="REFERENCE_STORE_UNAVAILABLE",
            status_code=503,
            suggestion="Retry the request; if it keeps failing check the record store connection",
            details={"collection": collection, "error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def taste_engine_exception_handler(
    request: Request,
    exc: TasteEngineException
) -> JSONResponse:
    """
    Render a TasteEngineException with its own status code.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Signal values never reach this handler (they are normalized); it covers
    fields like limit/offset that are out of bounds.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": [
                {"loc": list(error.get("loc", ())), "msg": error.get("msg")}
                for error in exc.errors()
            ],
        }
    )
