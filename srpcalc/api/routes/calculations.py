"""Calculations — compute an operation and optionally persist the result.

Invariants:
    - Divide-by-zero surfaces as 400 INVALID_ARGUMENT via the global handler
    - persisted_to echoes the caller's path (never the server's absolute path)
"""

import logging

from fastapi import APIRouter, Depends

from srpcalc.api.dependencies import get_calculation_service
from srpcalc.core.domain_types import Operand
from srpcalc.schemas.calculation import CalculationRequest, CalculationResponse
from srpcalc.services.calculation_service import CalculationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/calculations", tags=["calculations"])


@router.post("", response_model=CalculationResponse)
def create_calculation(
    body: CalculationRequest,
    service: CalculationService = Depends(get_calculation_service),
):
    """Compute body.operation(x, y); write the result to body.path if given."""
    outcome = service.compute_and_persist(
        body.operation, Operand(body.x), Operand(body.y), body.path,
    )
    return CalculationResponse(
        operation=outcome.operation,
        x=outcome.x,
        y=outcome.y,
        result=outcome.result,
        persisted_to=body.path if outcome.persisted_to else None,
    )
