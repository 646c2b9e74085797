"""
Dependency injection for the accounts bounded context.
"""

from app.application.accounts.expire_trials import ExpireTrialsUseCase
from app.core.config import settings
from app.infrastructure.accounts.message_repository import MessageRepositoryAdapter
from app.infrastructure.accounts.profile_repository import ProfileRepositoryAdapter
from app.infrastructure.database import get_engine


def get_expire_trials_use_case() -> ExpireTrialsUseCase:
    """Build ExpireTrialsUseCase with its infrastructure dependencies."""
    engine = get_engine()
    return ExpireTrialsUseCase(
        profile_repo=ProfileRepositoryAdapter(engine=engine),
        message_repo=MessageRepositoryAdapter(engine=engine),
        message_title=settings.trial_expired_title,
        message_content=settings.trial_expired_message,
    )
