"""
Standard API response models and helpers for consistent response formatting.

Envelopes:
- Success: { "success": true, "data": <payload>, "message": "..." }
- Error:   { "success": false, "message": "..." }

Order initiation is the one exception: it returns the gateway order under
"order" instead of "data", which the storefront checkout expects.
"""
from typing import Any
from pydantic import BaseModel, Field


class StandardErrorResponse(BaseModel):
    """Standard error response envelope."""
    success: bool = Field(False, description="Always false for errors")
    message: str = Field(..., description="Human-readable error message")


def success_response(data: Any, message: str | None = None) -> dict[str, Any]:
    """
    Create a standardized success response.

    Args:
        data: The response payload
        message: Optional human-readable confirmation

    Returns:
        dict: { "success": true, "message": <message>, "data": <data> }
    """
    response: dict[str, Any] = {"success": True}
    if message:
        response["message"] = message
    response["data"] = data
    return response


def error_response(message: str) -> dict[str, Any]:
    """Create a standardized error body."""
    return StandardErrorResponse(message=message).model_dump()
