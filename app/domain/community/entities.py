"""
Domain entities for the community bounded context.

They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class Post:
    """An approved community post with its engagement counts attached."""

    id: str
    category: str
    content: str
    created_at: datetime
    reaction_count: int = 0
    comment_count: int = 0


@dataclass(frozen=True)
class TopicScore:
    """Popularity score of a category or hashtag."""

    name: str
    score: int


@dataclass(frozen=True)
class TrendingReport:
    """Top categories and hashtags over the trailing window."""

    categories: list[TopicScore] = field(default_factory=list)
    hashtags: list[TopicScore] = field(default_factory=list)


@dataclass(frozen=True)
class RankedProfile:
    """A profile's position input for the weekly ranking."""

    id: str
    full_name: str
    points: int


@dataclass(frozen=True)
class WeeklyReward:
    """Bonus granted to a podium position."""

    position: int
    points: int
    message: str


@dataclass(frozen=True)
class Week:
    """A Monday..Sunday calendar week."""

    start: date
    end: date
