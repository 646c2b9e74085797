"""
FastAPI router for the community bounded context.

All routes delegate to use cases. No business logic here.
"""

from fastapi import APIRouter, Depends

from app.application.community.dtos import (
    GetTrendingTopicsQuery,
    ResetWeeklyRankingCommand,
)
from app.application.community.get_trending_topics import GetTrendingTopicsUseCase
from app.application.community.reset_weekly_ranking import ResetWeeklyRankingUseCase
from app.interfaces.community.dependencies import (
    get_reset_weekly_ranking_use_case,
    get_trending_topics_use_case,
)
from app.interfaces.community.schemas import (
    PodiumItem,
    ResetWeeklyRankingResponse,
    TopicScoreItem,
    TrendingTopicsResponse,
)

router = APIRouter(prefix="/community", tags=["community"])


@router.get(
    "/trending",
    response_model=TrendingTopicsResponse,
    summary="Trending topics",
    description=(
        "Top 5 categories and hashtags of approved posts from the last "
        "7 days, scored as reactions x 2 + comments x 3."
    ),
)
def get_trending_topics(
    use_case: GetTrendingTopicsUseCase = Depends(get_trending_topics_use_case),
) -> TrendingTopicsResponse:
    result = use_case.execute(GetTrendingTopicsQuery())
    return TrendingTopicsResponse(
        categories=[TopicScoreItem(name=t.name, score=t.score) for t in result.categories],
        hashtags=[TopicScoreItem(name=t.name, score=t.score) for t in result.hashtags],
    )


@router.post(
    "/weekly-ranking/reset",
    response_model=ResetWeeklyRankingResponse,
    summary="Close the weekly ranking",
    description=(
        "Rewards the weekly podium, snapshots the ranking and grants the "
        "legend badge to repeat winners."
    ),
)
def reset_weekly_ranking(
    use_case: ResetWeeklyRankingUseCase = Depends(get_reset_weekly_ranking_use_case),
) -> ResetWeeklyRankingResponse:
    result = use_case.execute(ResetWeeklyRankingCommand())
    return ResetWeeklyRankingResponse(
        message="Weekly ranking processed",
        top3=[
            PodiumItem(position=p.position, name=p.name, points=p.points)
            for p in result.top3
        ],
        badges_awarded=result.badges_awarded,
    )
