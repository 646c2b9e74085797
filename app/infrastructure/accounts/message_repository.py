"""
Adapter: Inbox message repository.

Implements MessageRepository port on the messages table.
"""

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.domain.accounts.entities import Message
from app.domain.accounts.ports import MessageRepository

_INSERT = text(
    """
    INSERT INTO messages (user_id, title, content, priority, is_global)
    VALUES (:user_id, :title, :content, :priority, :is_global)
    """
)


def _params(message: Message) -> dict:
    return {
        "user_id": message.user_id,
        "title": message.title,
        "content": message.content,
        "priority": message.priority.value,
        "is_global": message.is_global,
    }


class MessageRepositoryAdapter(MessageRepository):
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def send(self, message: Message) -> None:
        with self._engine.begin() as conn:
            conn.execute(_INSERT, _params(message))

    def send_batch(self, messages: list[Message]) -> None:
        """Persist several messages in a single transaction."""
        if not messages:
            return
        with self._engine.begin() as conn:
            conn.execute(_INSERT, [_params(m) for m in messages])
