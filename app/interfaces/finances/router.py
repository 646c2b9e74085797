"""
FastAPI router for the finances bounded context.

All routes delegate to use cases. No business logic here.
"""

from fastapi import APIRouter, Body, Depends

from app.application.finances.dtos import ProcessRecurringCommand
from app.application.finances.process_recurring import ProcessRecurringUseCase
from app.interfaces.finances.dependencies import get_process_recurring_use_case
from app.interfaces.finances.schemas import (
    ProcessRecurringRequest,
    ProcessRecurringResponse,
)
from app.interfaces.schemas import ErrorResponse

router = APIRouter(prefix="/finances", tags=["finances"])


@router.post(
    "/recurring/process",
    response_model=ProcessRecurringResponse,
    responses={422: {"model": ErrorResponse}},
    summary="Execute due recurring transactions",
    description=(
        "Generates one ledger transaction for every active template due on "
        "the reference date, advances its schedule and notifies the owner."
    ),
)
def process_recurring(
    payload: ProcessRecurringRequest | None = Body(None),
    use_case: ProcessRecurringUseCase = Depends(get_process_recurring_use_case),
) -> ProcessRecurringResponse:
    """Run the recurring processor once."""
    today = payload.today if payload else None
    result = use_case.execute(ProcessRecurringCommand(today=today))
    return ProcessRecurringResponse(
        processed=result.processed,
        skipped=result.skipped,
        errors=result.errors or None,
    )
