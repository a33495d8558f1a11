"""Calculation Service — composes the Arithmetic and ResultWriter capabilities.

Invariants:
    - compute() never touches the writer
    - compute_and_persist() writes only after a successful computation, and only when a path is given
    - Errors from either capability propagate unchanged (typed CalculatorError subclasses)

Design Decisions:
    - Composition at the caller, not inside arithmetic: each capability changes for its own reason
    - CalculationOutcome dataclass over raw dict: one place that knows the response shape
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from srpcalc.core.arithmetic import apply_operation, parse_operation
from srpcalc.core.capability_protocols import Arithmetic, ResultWriter
from srpcalc.core.domain_types import Operand, Operation, Result, ResultPath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationOutcome:
    """Result of one computation, with the location it was persisted to (if any)."""
    operation: Operation
    x: Operand
    y: Operand
    result: Result
    persisted_to: Path | None = None

    def to_dict(self) -> dict:
        return {
            "operation": self.operation.value,
            "x": self.x,
            "y": self.y,
            "result": self.result,
            "persisted_to": str(self.persisted_to) if self.persisted_to else None,
        }


class CalculationService:
    """Compute with one capability, optionally persist with another."""

    def __init__(self, arithmetic: Arithmetic, writer: ResultWriter):
        self.arithmetic = arithmetic
        self.writer = writer

    def compute(self, operation: str | Operation, x: Operand, y: Operand) -> Result:
        op = parse_operation(operation)
        result = apply_operation(self.arithmetic, op, x, y)
        logger.debug(f"Computed {op.value}", extra={"operation": op.value})
        return result

    def persist(self, result: Result, path: ResultPath) -> Path:
        return self.writer.write(result, path)

    def compute_and_persist(
        self,
        operation: str | Operation,
        x: Operand,
        y: Operand,
        path: ResultPath | None = None,
    ) -> CalculationOutcome:
        """Compute, then persist to path when one is given."""
        op = parse_operation(operation)
        result = self.compute(op, x, y)
        persisted_to = self.persist(result, path) if path is not None else None
        return CalculationOutcome(
            operation=op, x=x, y=y, result=result, persisted_to=persisted_to,
        )
