"""Operations: the pure compute step behind every service.

Invariants:
    - Guards run before the binary function; a failing guard means no computation
    - Divide rejects b == 0 (int zero, 0.0 and -0.0) regardless of a
    - Operands are computed as IEEE-754 doubles; an int beyond the double range is
      an InvalidRequestError
    - Results are finite: a float overflow becomes ResultOutOfRangeError
    - Integral results within +/-2**53 are returned as int
    - No IO, no state: identical inputs always give identical results

Design Decisions:
    - OperationSpec pairs an operator function with an optional guard, so the
      HTTP layer stays identical across all four services
    - operator module functions over lambdas: native double semantics, no rounding
"""

import math
import operator
from dataclasses import dataclass
from typing import Callable, Optional

from arithmetic_services.core.domain_types import Number, Operation
from arithmetic_services.core.errors import (
    DivisionByZeroError,
    InvalidRequestError,
    ResultOutOfRangeError,
)


MAX_EXACT_INTEGER = 2**53

BinaryFunction = Callable[[float, float], float]
Guard = Callable[[float, float], None]


def reject_zero_divisor(a: float, b: float) -> None:
    """Raise DivisionByZeroError when the divisor is zero."""
    if b == 0:
        raise DivisionByZeroError()


@dataclass(frozen=True)
class OperationSpec:
    """One binary operation plus the domain check that must pass first."""
    operation: Operation
    function: BinaryFunction
    guard: Optional[Guard] = None

    def apply(self, a: Number, b: Number) -> Number:
        x, y = to_double(a), to_double(b)
        if self.guard is not None:
            self.guard(x, y)
        result = self.function(x, y)
        if not math.isfinite(result):
            raise ResultOutOfRangeError()
        return normalize_result(result)


def to_double(value: Number) -> float:
    """Convert an operand to an IEEE-754 double."""
    try:
        return float(value)
    except OverflowError as exc:
        # int operand beyond the double range
        raise InvalidRequestError() from exc


def normalize_result(result: float) -> Number:
    """Integral doubles within the exact-integer range go out as int (6 / 3 -> 2)."""
    if result.is_integer() and abs(result) <= MAX_EXACT_INTEGER:
        return int(result)
    return result


OPERATION_SPECS: dict[Operation, OperationSpec] = {
    Operation.ADD: OperationSpec(Operation.ADD, operator.add),
    Operation.SUBTRACT: OperationSpec(Operation.SUBTRACT, operator.sub),
    Operation.MULTIPLY: OperationSpec(Operation.MULTIPLY, operator.mul),
    Operation.DIVIDE: OperationSpec(
        Operation.DIVIDE, operator.truediv, guard=reject_zero_divisor,
    ),
}


def get_spec(operation: Operation) -> OperationSpec:
    return OPERATION_SPECS[operation]


def compute(operation: Operation, a: Number, b: Number) -> Number:
    """Run one operation on validated operands."""
    return get_spec(operation).apply(a, b)
