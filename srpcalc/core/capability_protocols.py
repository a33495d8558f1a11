"""Capability Protocols — contracts between the calculator core and its shell.

Invariants:
    - Arithmetic and persistence are separate contracts; neither references the other
    - Core NEVER imports from shell — dependency arrows point inward only
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: every operation completes without suspension points
"""

from pathlib import Path
from typing import Protocol

from srpcalc.core.domain_types import Operand, Result, ResultPath


class Arithmetic(Protocol):
    """Contract for integer arithmetic — pure, no IO."""
    def add(self, x: Operand, y: Operand) -> Result: ...
    def subtract(self, x: Operand, y: Operand) -> Result: ...
    def multiply(self, x: Operand, y: Operand) -> Result: ...
    def divide(self, x: Operand, y: Operand) -> Result: ...


class ResultWriter(Protocol):
    """Contract for result persistence — implemented by shell.

    write() overwrites any existing content at the location with the
    decimal text of the result and returns the location written.
    """
    def write(self, result: Result, path: ResultPath) -> Path: ...
