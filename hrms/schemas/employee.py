"""
HRMS Backend - Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the HTTP contract of the employee API.
How:   FastAPI validates request bodies against `EmployeeIn` and serializes
       responses through `APIResponse`, the `{status, message, data}` envelope.
Who:   Used by route handlers (input/output) and the service layer (output).

Schemas are kept apart from the stored document shape (see
models/employee.py): the store keys records by `_id` (an ObjectId), the API
exposes them as a plain string `id`.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeIn(BaseModel):
    """
    What:  Body of POST /employee and PUT /employee/{id}.

    Any `id` or `_id` key the client sends is dropped (`extra="ignore"`);
    identifiers are assigned by the store on create and taken from the path
    on update.

    Fields are strict: numeric strings and booleans are rejected, JSON
    integers are accepted as floats, and NaN/Infinity are refused.
    """
    name: str = Field(strict=True, description="Employee name")
    salary: float = Field(strict=True, allow_inf_nan=False, description="Employee salary")
    age: float = Field(strict=True, allow_inf_nan=False, description="Employee age")

    model_config = {"extra": "ignore"}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeOut(BaseModel):
    """Stored employee record as returned to clients."""
    id: str = Field(description="Store-assigned identifier (24-char hex ObjectId)")
    name: str
    salary: float
    age: float


class APIResponse(BaseModel):
    """
    What:  Uniform envelope wrapping every employee endpoint response.

    Fields:
        status:  1 on success, 0 on failure
        message: Human-readable outcome
        data:    Payload; omitted from the JSON when absent

    Example:
        {"status": 1, "message": "record deleted"}
    """
    status: int = Field(description="1 = success, 0 = failure")
    message: str = Field(description="Human-readable outcome")
    data: Optional[Any] = Field(default=None, description="Response payload, if any")

    def to_content(self) -> dict:
        """JSON-ready dict with `data` dropped when it is None."""
        return self.model_dump(mode="json", exclude_none=True)


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
