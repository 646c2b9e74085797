"""
Dependency injection for the community bounded context.
"""

from app.application.community.get_trending_topics import GetTrendingTopicsUseCase
from app.application.community.reset_weekly_ranking import ResetWeeklyRankingUseCase
from app.infrastructure.accounts.message_repository import MessageRepositoryAdapter
from app.infrastructure.community.post_repository import PostRepositoryAdapter
from app.infrastructure.community.ranking_repository import RankingRepositoryAdapter
from app.infrastructure.database import get_engine


def get_trending_topics_use_case() -> GetTrendingTopicsUseCase:
    """Build GetTrendingTopicsUseCase with its infrastructure dependencies."""
    return GetTrendingTopicsUseCase(post_repo=PostRepositoryAdapter(engine=get_engine()))


def get_reset_weekly_ranking_use_case() -> ResetWeeklyRankingUseCase:
    """Build ResetWeeklyRankingUseCase with its infrastructure dependencies."""
    engine = get_engine()
    return ResetWeeklyRankingUseCase(
        ranking_repo=RankingRepositoryAdapter(engine=engine),
        message_repo=MessageRepositoryAdapter(engine=engine),
    )
