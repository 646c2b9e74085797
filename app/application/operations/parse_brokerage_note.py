"""
Use case: Extract operations from a brokerage note for preview.

Input: ParseBrokerageNoteCommand (file_content)
Output: BrokerageNoteResult (broker, drafts, count)
Side effects: None. The client confirms drafts through ConfirmImportUseCase.
Failure cases: AIGatewayError, UnparseableNoteError, InvalidRequestError.
"""

import logging
from datetime import date

from app.application.operations.dtos import (
    BrokerageNoteResult,
    OperationDraftResult,
    ParseBrokerageNoteCommand,
)
from app.domain.errors import InvalidRequestError
from app.domain.operations.brokerage import (
    detect_broker,
    draft_from_raw,
    extract_json_array,
    extraction_prompt,
)
from app.domain.operations.ports import ChatCompletionPort

logger = logging.getLogger(__name__)

EXTRACTION_TEMPERATURE = 0.1


class ParseBrokerageNoteUseCase:
    """Asks the AI model to read a brokerage note and normalizes its answer."""

    def __init__(self, chat_port: ChatCompletionPort) -> None:
        self._chat_port = chat_port

    def execute(self, command: ParseBrokerageNoteCommand) -> BrokerageNoteResult:
        if not command.file_content or not command.file_content.strip():
            raise InvalidRequestError("fileContent is required")

        broker = detect_broker(command.file_content)
        logger.info("Parsing brokerage note, detected broker=%s", broker)

        reply = self._chat_port.complete(
            system_prompt=extraction_prompt(broker),
            user_prompt=command.file_content,
            temperature=EXTRACTION_TEMPERATURE,
        )
        raw_operations = extract_json_array(reply)

        today = date.today()
        drafts = [draft_from_raw(raw, broker, today) for raw in raw_operations]
        logger.info("Extracted %d operations from brokerage note", len(drafts))

        return BrokerageNoteResult(
            broker=broker,
            operations=[
                OperationDraftResult(
                    ticker=d.ticker,
                    type=d.type.value,
                    qty=d.qty,
                    price=d.price,
                    result=d.result,
                    date=d.date,
                    time=d.time,
                    broker=d.broker,
                    costs=d.costs,
                    risk_level=d.risk_level.value,
                    notes=d.notes,
                )
                for d in drafts
            ],
            count=len(drafts),
        )
