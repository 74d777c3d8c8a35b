"""Operation Schemas: Pydantic models for the POST / request and its two response shapes.

Invariants:
    - OperationRequest.a and .b are JSON numbers: bool, str, null and containers rejected
    - NaN and +/-Infinity rejected (Python's JSON parser accepts them, JSON does not)
    - Integers too large for an IEEE-754 double rejected
    - A response is either OperationResult or ErrorResponse, never both

Design Decisions:
    - StrictInt | StrictFloat over float: rejects bool and numeric strings; the
      compute step converts both operands to doubles
    - Unknown body keys ignored: only a and b are part of the contract
"""

import math
from typing import Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator


class OperationRequest(BaseModel):
    """Two operands for a binary operation."""
    a: Union[StrictInt, StrictFloat] = Field(description="Left operand")
    b: Union[StrictInt, StrictFloat] = Field(description="Right operand")

    @field_validator("a", "b")
    @classmethod
    def require_finite(cls, v: int | float) -> int | float:
        try:
            as_double = float(v)
        except OverflowError:
            raise ValueError("must fit in a double") from None
        if not math.isfinite(as_double):
            raise ValueError("must be a finite number")
        return v


class OperationResult(BaseModel):
    """Success payload (HTTP 200)."""
    result: Union[int, float]


class ErrorResponse(BaseModel):
    """Error payload (HTTP 4xx/5xx)."""
    error: str
