"""Route Dependencies — builds capability implementations from settings.

Invariants:
    - API writes always confined to settings.output_dir
    - Tests replace these via app.dependency_overrides
"""

from fastapi import Depends

from srpcalc.config import get_settings
from srpcalc.core.arithmetic import IntegerArithmetic
from srpcalc.infrastructure.file_writer import FileResultWriter
from srpcalc.services.calculation_service import CalculationService


def get_result_writer() -> FileResultWriter:
    settings = get_settings()
    return FileResultWriter(
        base_dir=settings.output_dir,
        confine=True,
        encoding=settings.file_encoding,
    )


def get_calculation_service(
    writer: FileResultWriter = Depends(get_result_writer),
) -> CalculationService:
    return CalculationService(IntegerArithmetic(), writer)
