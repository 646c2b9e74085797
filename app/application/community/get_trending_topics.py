"""
Use case: Rank trending categories and hashtags.

Input: GetTrendingTopicsQuery (now)
Output: TrendingTopicsResult
Side effects: None.
"""

import logging
from datetime import datetime, timezone

from app.application.community.dtos import (
    GetTrendingTopicsQuery,
    TopicScoreResult,
    TrendingTopicsResult,
)
from app.domain.community.ports import PostRepository
from app.domain.community.trending import score_topics, window_start

logger = logging.getLogger(__name__)


class GetTrendingTopicsUseCase:
    """Scores the last week's approved posts per category and hashtag."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, query: GetTrendingTopicsQuery) -> TrendingTopicsResult:
        now = query.now or datetime.now(timezone.utc)
        posts = self._post_repo.get_approved_since(window_start(now))
        logger.info("Scoring %d posts for trending topics", len(posts))

        report = score_topics(posts)
        return TrendingTopicsResult(
            categories=[
                TopicScoreResult(name=t.name, score=t.score) for t in report.categories
            ],
            hashtags=[
                TopicScoreResult(name=t.name, score=t.score) for t in report.hashtags
            ],
        )
