"""
Adapter: Notification repository.

Implements NotificationRepository port on the notifications table.
"""

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.domain.finances.entities import Notification
from app.domain.finances.ports import NotificationRepository

_INSERT = text(
    """
    INSERT INTO notifications (user_id, type, title, message)
    VALUES (:user_id, :type, :title, :message)
    """
)


class NotificationRepositoryAdapter(NotificationRepository):
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, notification: Notification) -> None:
        with self._engine.begin() as conn:
            conn.execute(
                _INSERT,
                {
                    "user_id": notification.user_id,
                    "type": notification.type,
                    "title": notification.title,
                    "message": notification.message,
                },
            )
