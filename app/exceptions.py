# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors carry a machine-readable code and a suggestion on how to fix them.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class QuoteBoardException(Exception):
    """
    Base exception for QuoteBoard.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "QUOTEBOARD_ERROR",
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
# Catalog Exceptions
# =============================================================================

class EmptyCatalogError(QuoteBoardException):
    """Raised when a quote is requested from a catalog with no quotes."""

    def __init__(self):
        super().__init__(
            message="Quote catalog is empty",
            code="EMPTY_CATALOG",
            status_code=500,
            suggestion="Build the catalog with at least one quote before serving requests",
            details={"quote_count": 0},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def quoteboard_exception_handler(
    request: Request,
    exc: QuoteBoardException
) -> JSONResponse:
    """
    Convert QuoteBoardException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
