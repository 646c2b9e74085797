"""
FastAPI router for the accounts bounded context.

All routes delegate to use cases. No business logic here.
"""

from fastapi import APIRouter, Depends

from app.application.accounts.dtos import ExpireTrialsCommand
from app.application.accounts.expire_trials import ExpireTrialsUseCase
from app.interfaces.accounts.dependencies import get_expire_trials_use_case
from app.interfaces.accounts.schemas import BlockedUserItem, ExpireTrialsResponse

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post(
    "/trials/expire",
    response_model=ExpireTrialsResponse,
    summary="Block expired trial accounts",
    description=(
        "Blocks approved profiles whose trial period has ended and sends "
        "each one a high-priority message."
    ),
)
def expire_trials(
    use_case: ExpireTrialsUseCase = Depends(get_expire_trials_use_case),
) -> ExpireTrialsResponse:
    result = use_case.execute(ExpireTrialsCommand())
    return ExpireTrialsResponse(
        message=f"{result.blocked} user(s) blocked",
        blocked=result.blocked,
        users=[BlockedUserItem(id=u.id, name=u.name, email=u.email) for u in result.users],
    )
