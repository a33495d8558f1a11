"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Operands and results are Python ints (arbitrary precision, no overflow)
    - All supported operations encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

import os
from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

Operand = NewType("Operand", int)
Result = NewType("Result", int)

ResultPath = str | os.PathLike


# ─── Enums ───────────────────────────────────────────────────────

class Operation(str, Enum):
    """The four arithmetic operations exposed by the calculator."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
