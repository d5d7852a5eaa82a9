"""
Employee Service: Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract for the employee endpoints.
Why:   Request body typing, response serialization, and OpenAPI generation.
How:   FastAPI validates request bodies against EmployeePayload and serializes
       responses through Employee. Body errors are reported as 400 by the
       handler registered in main.py.

Design Decision:
    Request and response models are separate because `id` has opposite rules
    on each side: ignored when sent, always present when returned.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class EmployeePayload(BaseModel):
    """
    What:  Body of POST /employees and PUT /employees/{id}.
    Why:   Missing fields default to zero values; an `id` in the body is
           accepted and thrown away (extra keys are ignored). Non-finite
           numbers are rejected with 400.
    """

    name: str = Field(default="", description="Employee's full name")
    # JSON allows 1e999 (parsed as inf) and NaN tokens; neither is a number on the way out
    salary: float = Field(default=0.0, allow_inf_nan=False, description="Salary amount")
    age: float = Field(default=0.0, allow_inf_nan=False, description="Age in years")

    model_config = {"extra": "ignore"}


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns
# ══════════════════════════════════════════════════════════════════════════


class Employee(BaseModel):
    """
    What:  An employee record as returned by every read/write endpoint.
    Note:  `id` is omitted from the JSON when empty (routes serialize with
           response_model_exclude_none).
    """

    id: Optional[str] = Field(default=None, description="24-char hex ObjectId")
    name: str = Field(description="Employee's full name")
    salary: float = Field(description="Salary amount")
    age: float = Field(description="Age in years")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all JSON error responses.

    Example:
        {
            "error": "not_found",
            "message": "not found",
            "request_id": "1f0c2a9e"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
