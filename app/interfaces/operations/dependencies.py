"""
Dependency injection for the operations bounded context.

Provides FastAPI dependency functions that wire the SQL and AI gateway
adapters into use cases via constructor injection.
"""

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
from app.application.operations.parse_brokerage_note import ParseBrokerageNoteUseCase
from app.core.config import settings
from app.infrastructure.database import get_engine
from app.infrastructure.operations.chat_completion_adapter import (
    ChatCompletionAdapter,
)
from app.infrastructure.operations.classification_log_repository import (
    ClassificationLogRepositoryAdapter,
)
from app.infrastructure.operations.operation_repository import (
    OperationRepositoryAdapter,
)


def _chat_adapter() -> ChatCompletionAdapter:
    return ChatCompletionAdapter(
        url=settings.ai_gateway_url,
        api_key=settings.ai_api_key,
        model=settings.ai_model,
        timeout=settings.ai_timeout_seconds,
    )


def get_confirm_import_use_case() -> ConfirmImportUseCase:
    """Build ConfirmImportUseCase with its infrastructure dependencies."""
    return ConfirmImportUseCase(
        operation_repo=OperationRepositoryAdapter(engine=get_engine()),
    )


def get_parse_brokerage_note_use_case() -> ParseBrokerageNoteUseCase:
    """Build ParseBrokerageNoteUseCase with the AI gateway adapter."""
    return ParseBrokerageNoteUseCase(chat_port=_chat_adapter())


def get_delete_by_strategy_use_case() -> DeleteOperationsByStrategyUseCase:
    return DeleteOperationsByStrategyUseCase(
        operation_repo=OperationRepositoryAdapter(engine=get_engine()),
    )


def get_delete_by_dates_use_case() -> DeleteOperationsByDatesUseCase:
    return DeleteOperationsByDatesUseCase(
        operation_repo=OperationRepositoryAdapter(engine=get_engine()),
    )


def get_classify_strategy_use_case() -> ClassifyStrategyUseCase:
    """Build ClassifyStrategyUseCase with its infrastructure dependencies."""
    engine = get_engine()
    return ClassifyStrategyUseCase(
        operation_repo=OperationRepositoryAdapter(engine=engine),
        log_repo=ClassificationLogRepositoryAdapter(engine=engine),
        chat_port=_chat_adapter(),
    )


def get_bulk_classify_use_case() -> BulkClassifyStrategiesUseCase:
    """Build BulkClassifyStrategiesUseCase around a single-item classifier."""
    engine = get_engine()
    return BulkClassifyStrategiesUseCase(
        operation_repo=OperationRepositoryAdapter(engine=engine),
        classify_use_case=get_classify_strategy_use_case(),
        delay_seconds=settings.bulk_classify_delay_seconds,
    )
