"""
Pydantic schemas for the community API.
"""

from pydantic import BaseModel


class TopicScoreItem(BaseModel):
    """A category or hashtag with its engagement score."""

    name: str
    score: int


class TrendingTopicsResponse(BaseModel):
    """Top categories and hashtags over the trailing week."""

    success: bool = True
    categories: list[TopicScoreItem]
    hashtags: list[TopicScoreItem]


class PodiumItem(BaseModel):
    position: int
    name: str
    points: int


class ResetWeeklyRankingResponse(BaseModel):
    """Response schema for the weekly ranking reset.

    Attributes:
        top3: Winners with their points before the bonus.
        badges_awarded: Legend badges granted in this run.
    """

    success: bool = True
    message: str
    top3: list[PodiumItem]
    badges_awarded: int
