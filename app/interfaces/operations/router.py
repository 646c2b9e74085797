"""
FastAPI router for the trading operations bounded context.

All routes delegate to use cases. No business logic here.
AI-backed routes carry the heavy rate limit; slowapi needs the raw
`Request` in their signature, so bodies are named `payload`.
"""

from fastapi import APIRouter, Depends, Request

from app.application.operations.bulk_classify_strategies import (
    BulkClassifyStrategiesUseCase,
)
from app.application.operations.classify_strategy import ClassifyStrategyUseCase
from app.application.operations.confirm_import import ConfirmImportUseCase
from app.application.operations.delete_operations_by_dates import (
    DeleteOperationsByDatesUseCase,
)
from app.application.operations.delete_operations_by_strategy import (
    DeleteOperationsByStrategyUseCase,
)
from app.application.operations.dtos import (
    BulkClassifyCommand,
    ClassifyStrategyCommand,
    ConfirmImportCommand,
    DeleteOperationsByDatesCommand,
    DeleteOperationsByStrategyCommand,
    ImportedOperation,
    ParseBrokerageNoteCommand,
)
from app.application.operations.parse_brokerage_note import ParseBrokerageNoteUseCase
from app.interfaces.operations.dependencies import (
    get_bulk_classify_use_case,
    get_classify_strategy_use_case,
    get_confirm_import_use_case,
    get_delete_by_dates_use_case,
    get_delete_by_strategy_use_case,
    get_parse_brokerage_note_use_case,
)
from app.interfaces.operations.schemas import (
    BrokerageNoteResponse,
    BulkClassifyRequest,
    BulkClassifyResponse,
    ClassifyStrategyRequest,
    ClassifyStrategyResponse,
    ConfirmImportRequest,
    ConfirmImportResponse,
    DeleteByDatesRequest,
    DeleteByStrategyRequest,
    DeleteOperationsResponse,
    OperationDraftItem,
    OperationItem,
    ParseBrokerageNoteRequest,
)
from app.interfaces.schemas import ErrorResponse
from app.shared.security.rate_limiting import HEAVY_RATE_LIMIT, limiter

router = APIRouter(prefix="/operations", tags=["operations"])

AI_ERROR_RESPONSES = {
    402: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


@router.post(
    "/import/parse",
    response_model=BrokerageNoteResponse,
    responses={400: {"model": ErrorResponse}, **AI_ERROR_RESPONSES},
    summary="Preview a brokerage note",
    description=(
        "Detects the broker and extracts the operations of a brokerage "
        "note with the AI model. Nothing is saved."
    ),
)
@limiter.limit(HEAVY_RATE_LIMIT)
def parse_brokerage_note(
    request: Request,
    payload: ParseBrokerageNoteRequest,
    use_case: ParseBrokerageNoteUseCase = Depends(get_parse_brokerage_note_use_case),
) -> BrokerageNoteResponse:
    result = use_case.execute(ParseBrokerageNoteCommand(file_content=payload.file_content))
    return BrokerageNoteResponse(
        broker=result.broker,
        operations=[
            OperationDraftItem(
                ticker=d.ticker,
                type=d.type,
                qty=d.qty,
                price=d.price,
                result=d.result,
                date=d.date,
                time=d.time,
                broker=d.broker,
                costs=d.costs,
                risk_level=d.risk_level,
                notes=d.notes,
            )
            for d in result.operations
        ],
        count=result.count,
    )


@router.post(
    "/import/confirm",
    response_model=ConfirmImportResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Save imported operations",
    description="Persists operations reviewed after a brokerage note preview.",
)
def confirm_import(
    payload: ConfirmImportRequest,
    use_case: ConfirmImportUseCase = Depends(get_confirm_import_use_case),
) -> ConfirmImportResponse:
    command = ConfirmImportCommand(
        user_id=payload.user_id,
        operations=[
            ImportedOperation(
                ticker=op.ticker,
                date=op.date,
                result=op.result,
                qty=op.qty,
                costs=op.costs,
                time=op.time,
                notes=op.notes,
                risk_level=op.risk_level,
            )
            for op in payload.operations
        ],
        raw_note=payload.raw_note,
    )
    result = use_case.execute(command)
    return ConfirmImportResponse(
        operations=[OperationItem(**vars(op)) for op in result.operations],
        count=result.count,
    )


@router.post(
    "/delete-by-strategy",
    response_model=DeleteOperationsResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Delete operations by strategy",
    description="Deletes every operation tagged with the strategy (case-insensitive).",
)
def delete_by_strategy(
    payload: DeleteByStrategyRequest,
    use_case: DeleteOperationsByStrategyUseCase = Depends(get_delete_by_strategy_use_case),
) -> DeleteOperationsResponse:
    result = use_case.execute(DeleteOperationsByStrategyCommand(strategy=payload.strategy))
    return DeleteOperationsResponse(deleted=result.deleted)


@router.post(
    "/delete-by-dates",
    response_model=DeleteOperationsResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Delete operations by date",
    description="Deletes a user's operations on the given dates, with their dependents.",
)
def delete_by_dates(
    payload: DeleteByDatesRequest,
    use_case: DeleteOperationsByDatesUseCase = Depends(get_delete_by_dates_use_case),
) -> DeleteOperationsResponse:
    result = use_case.execute(
        DeleteOperationsByDatesCommand(user_id=payload.user_id, dates=payload.dates)
    )
    return DeleteOperationsResponse(deleted=result.deleted)


@router.post(
    "/classify",
    response_model=ClassifyStrategyResponse,
    responses={404: {"model": ErrorResponse}, **AI_ERROR_RESPONSES},
    summary="Classify an operation's strategy",
)
@limiter.limit(HEAVY_RATE_LIMIT)
def classify_strategy(
    request: Request,
    payload: ClassifyStrategyRequest,
    use_case: ClassifyStrategyUseCase = Depends(get_classify_strategy_use_case),
) -> ClassifyStrategyResponse:
    result = use_case.execute(
        ClassifyStrategyCommand(
            operation_id=payload.operation_id,
            asset=payload.asset,
            result=payload.result,
            contracts=payload.contracts,
            costs=payload.costs,
            notes=payload.notes,
        )
    )
    return ClassifyStrategyResponse(
        success=result.success,
        strategy=result.strategy,
        confidence=result.confidence,
        error=result.error,
    )


@router.post(
    "/classify/bulk",
    response_model=BulkClassifyResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Classify all unclassified operations of a user",
)
@limiter.limit(HEAVY_RATE_LIMIT)
def bulk_classify(
    request: Request,
    payload: BulkClassifyRequest,
    use_case: BulkClassifyStrategiesUseCase = Depends(get_bulk_classify_use_case),
) -> BulkClassifyResponse:
    result = use_case.execute(BulkClassifyCommand(user_id=payload.user_id, limit=payload.limit))
    return BulkClassifyResponse(
        total=result.total,
        classified=result.classified,
        failed=result.failed,
        errors=result.errors,
    )
