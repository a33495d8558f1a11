"""Calculation Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - Operands are StrictInt: floats, numeric strings and booleans are rejected
    - Paths are 1-255 chars, stripped, non-empty

Design Decisions:
    - Operation enum as field type: Pydantic rejects unknown operations before the route runs
"""

from pydantic import BaseModel, Field, StrictInt, field_validator

from srpcalc.core.domain_types import Operation


def _strip_path(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("path cannot be empty or whitespace")
    return v


class CalculationRequest(BaseModel):
    """Compute one operation, optionally persisting the result."""
    operation: Operation
    x: StrictInt
    y: StrictInt
    path: str | None = Field(None, min_length=1, max_length=255)

    @field_validator("path")
    @classmethod
    def strip_path(cls, v: str | None) -> str | None:
        return _strip_path(v)


class CalculationResponse(BaseModel):
    operation: Operation
    x: int
    y: int
    result: int
    persisted_to: str | None = None


class ResultWrite(BaseModel):
    """Persist an already-computed result."""
    result: StrictInt
    path: str = Field(min_length=1, max_length=255)

    @field_validator("path")
    @classmethod
    def strip_path(cls, v: str) -> str:
        return _strip_path(v)


class ResultResponse(BaseModel):
    result: int
    path: str
