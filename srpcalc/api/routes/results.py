"""Results — persist and read back integer results inside the output directory.

Invariants:
    - POST overwrites any existing result at the path (201 Created)
    - GET on a missing path returns 404 RESULT_NOT_FOUND
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from srpcalc.api.dependencies import get_calculation_service, get_result_writer
from srpcalc.core.domain_types import Result
from srpcalc.infrastructure.file_writer import FileResultWriter
from srpcalc.schemas.calculation import ResultResponse, ResultWrite
from srpcalc.services.calculation_service import CalculationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/results", tags=["results"])


@router.post(
    "", response_model=ResultResponse, status_code=status.HTTP_201_CREATED,
)
def write_result(
    body: ResultWrite,
    service: CalculationService = Depends(get_calculation_service),
):
    service.persist(Result(body.result), body.path)
    return ResultResponse(result=body.result, path=body.path)


@router.get("", response_model=ResultResponse)
def read_result(
    path: str = Query(min_length=1, max_length=255),
    writer: FileResultWriter = Depends(get_result_writer),
):
    """Read a stored result; the path is stripped the same way POST strips it."""
    path = path.strip()
    return ResultResponse(result=writer.read_result(path), path=path)
