"""Integer Arithmetic — pure implementation of the Arithmetic capability.

Invariants:
    - No IO, no state: every method is a pure function of its operands
    - divide() raises InvalidArgumentError when the divisor is zero
    - Operands must be int (bool rejected); the offending field is named in the error
    - Division is floor division (rounds toward negative infinity)

Design Decisions:
    - Floor division over truncation: matches Python's own int semantics (divide(-7, 2) == -4)
    - Dispatch via apply_operation(): works with any Arithmetic implementation, not just this one
"""

from srpcalc.core.capability_protocols import Arithmetic
from srpcalc.core.domain_types import Operand, Operation, Result
from srpcalc.core.errors import ErrorContext, InvalidArgumentError, UnknownOperationError


def _require_int(value: object, field: str, operation: Operation) -> None:
    # bool is an int subclass but never a meaningful operand
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"Operand '{field}' must be an integer, got {type(value).__name__}",
            field,
            ErrorContext(operation=operation.value),
        )


class IntegerArithmetic:
    """Add, subtract, multiply and divide two integers."""

    def add(self, x: Operand, y: Operand) -> Result:
        _require_int(x, "x", Operation.ADD)
        _require_int(y, "y", Operation.ADD)
        return Result(x + y)

    def subtract(self, x: Operand, y: Operand) -> Result:
        _require_int(x, "x", Operation.SUBTRACT)
        _require_int(y, "y", Operation.SUBTRACT)
        return Result(x - y)

    def multiply(self, x: Operand, y: Operand) -> Result:
        _require_int(x, "x", Operation.MULTIPLY)
        _require_int(y, "y", Operation.MULTIPLY)
        return Result(x * y)

    def divide(self, x: Operand, y: Operand) -> Result:
        """Floor-divide x by y. Raises InvalidArgumentError when y is zero."""
        _require_int(x, "x", Operation.DIVIDE)
        _require_int(y, "y", Operation.DIVIDE)
        if y == 0:
            raise InvalidArgumentError(
                "Cannot divide by zero", "y",
                ErrorContext(operation=Operation.DIVIDE.value),
            )
        return Result(x // y)


def parse_operation(name: str | Operation) -> Operation:
    """Resolve an operation name to Operation. Raises UnknownOperationError."""
    if isinstance(name, Operation):
        return name
    try:
        return Operation(str(name).strip().lower())
    except ValueError:
        raise UnknownOperationError(str(name)) from None


def apply_operation(
    arithmetic: Arithmetic, operation: str | Operation, x: Operand, y: Operand,
) -> Result:
    """Apply the named operation using the given Arithmetic implementation."""
    op = parse_operation(operation)
    handlers = {
        Operation.ADD: arithmetic.add,
        Operation.SUBTRACT: arithmetic.subtract,
        Operation.MULTIPLY: arithmetic.multiply,
        Operation.DIVIDE: arithmetic.divide,
    }
    return handlers[op](x, y)
