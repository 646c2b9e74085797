"""
Port interfaces (ABCs) for the operations bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from app.domain.operations.entities import StrategyClassification, TradingOperation


class OperationRepository(ABC):
    """Port for persisting and deleting trading operations."""

    @abstractmethod
    def add_batch(self, operations: list[TradingOperation]) -> list[TradingOperation]:
        """Insert operations and return them with their generated ids."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, operation_id: str) -> Optional[TradingOperation]:
        raise NotImplementedError

    @abstractmethod
    def get_unclassified(self, user_id: str, limit: int) -> list[TradingOperation]:
        """Return the user's operations that have no strategy yet."""
        raise NotImplementedError

    @abstractmethod
    def set_strategy(self, operation_id: str, strategy: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_ids_by_strategy(self, strategy: str, limit: int) -> list[str]:
        """Return ids of operations whose strategy matches case-insensitively."""
        raise NotImplementedError

    @abstractmethod
    def find_ids_by_dates(self, user_id: str, dates: list[date]) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def delete_dependents(self, operation_ids: list[str]) -> None:
        """Delete notifications and classification logs that reference the
        given operations."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_ids(self, operation_ids: list[str]) -> int:
        """Delete operations and return how many rows were removed."""
        raise NotImplementedError


class ClassificationLogRepository(ABC):
    """Port for auditing AI strategy classifications."""

    @abstractmethod
    def save(self, classification: StrategyClassification) -> None:
        raise NotImplementedError


class ChatCompletionPort(ABC):
    """Port for the AI chat-completion gateway."""

    @abstractmethod
    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.3,
        max_tokens: Optional[int] = None,
    ) -> str:
        """Return the text content of the first completion choice.

        Raises:
            AIGatewayError: If the gateway answers with a non-2xx status.
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def model(self) -> str:
        """Identifier of the model answering completions."""
        raise NotImplementedError
