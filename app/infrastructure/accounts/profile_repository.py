"""
Adapter: Profile repository.

Implements ProfileRepository port on the profiles table.
"""

import logging
from datetime import datetime

from sqlalchemy import bindparam, text
from sqlalchemy.engine import Engine

from app.domain.accounts.entities import AccessStatus, ExpiredTrial
from app.domain.accounts.ports import ProfileRepository

logger = logging.getLogger(__name__)


class ProfileRepositoryAdapter(ProfileRepository):
    """PostgreSQL implementation of the profile repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_expired_trials(self, now: datetime) -> list[ExpiredTrial]:
        """Return approved profiles whose trial ended before `now`."""
        query = text(
            """
            SELECT id, full_name, email, trial_expires_at
            FROM profiles
            WHERE access_status = :status
              AND trial_expires_at IS NOT NULL
              AND trial_expires_at < :now
            """
        )
        with self._engine.connect() as conn:
            rows = conn.execute(
                query, {"status": AccessStatus.APPROVED.value, "now": now}
            ).mappings().all()

        return [
            ExpiredTrial(
                id=str(row["id"]),
                full_name=row["full_name"],
                email=row["email"],
                trial_expires_at=row["trial_expires_at"],
            )
            for row in rows
        ]

    def set_access_status(
        self, user_ids: list[str], status: AccessStatus, clear_trial: bool = False
    ) -> None:
        """Update the access status of several profiles in one statement.

        Args:
            user_ids: Profiles to update.
            status: New access status.
            clear_trial: Also reset trial_expires_at to NULL.
        """
        if not user_ids:
            return

        assignments = "access_status = :status"
        if clear_trial:
            assignments += ", trial_expires_at = NULL"
        query = text(
            f"UPDATE profiles SET {assignments} WHERE id IN :ids"
        ).bindparams(bindparam("ids", expanding=True))

        with self._engine.begin() as conn:
            conn.execute(query, {"status": status.value, "ids": user_ids})
        logger.info("Set access status %s on %d profiles.", status.value, len(user_ids))
