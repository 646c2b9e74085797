"""
Use case: Block profiles whose trial period has expired.

Input: ExpireTrialsCommand (now)
Output: ExpireTrialsResult (blocked count and users)
Side effects: Sets access status to blocked, clears the trial date,
    sends one high-priority message per blocked profile.
Failure cases:
    - Profile repository errors are raised.
    - A failed message insert is logged; the blocked result is still returned.
"""

import logging
from datetime import datetime, timezone

from app.application.accounts.dtos import (
    BlockedUser,
    ExpireTrialsCommand,
    ExpireTrialsResult,
)
from app.domain.accounts.entities import AccessStatus, Message, MessagePriority
from app.domain.accounts.ports import MessageRepository, ProfileRepository

logger = logging.getLogger(__name__)


class ExpireTrialsUseCase:
    """Revokes access of approved profiles past their trial date."""

    def __init__(
        self,
        profile_repo: ProfileRepository,
        message_repo: MessageRepository,
        message_title: str,
        message_content: str,
    ) -> None:
        self._profile_repo = profile_repo
        self._message_repo = message_repo
        self._message_title = message_title
        self._message_content = message_content

    def execute(self, command: ExpireTrialsCommand) -> ExpireTrialsResult:
        now = command.now or datetime.now(timezone.utc)
        expired = self._profile_repo.get_expired_trials(now)
        if not expired:
            logger.info("No expired trials found.")
            return ExpireTrialsResult(blocked=0)

        self._profile_repo.set_access_status(
            [p.id for p in expired], AccessStatus.BLOCKED, clear_trial=True
        )
        try:
            self._message_repo.send_batch(
                [
                    Message(
                        user_id=p.id,
                        title=self._message_title,
                        content=self._message_content,
                        priority=MessagePriority.HIGH,
                    )
                    for p in expired
                ]
            )
        except Exception:
            # Profiles are already blocked; a rerun would not select them again.
            logger.exception("Failed to send trial expiration messages")

        logger.info("Blocked %d profiles with expired trials", len(expired))
        return ExpireTrialsResult(
            blocked=len(expired),
            users=[
                BlockedUser(id=p.id, name=p.full_name, email=p.email) for p in expired
            ],
        )
