"""
Data Transfer Objects for the community application layer.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class GetTrendingTopicsQuery:
    """Input DTO for the trending topics ranking.

    Attributes:
        now: End of the trailing window. Defaults to the current time.
    """

    now: datetime | None = None


@dataclass(frozen=True)
class TopicScoreResult:
    name: str
    score: int


@dataclass(frozen=True)
class TrendingTopicsResult:
    """Output DTO with the top categories and hashtags."""

    categories: list[TopicScoreResult] = field(default_factory=list)
    hashtags: list[TopicScoreResult] = field(default_factory=list)


@dataclass(frozen=True)
class ResetWeeklyRankingCommand:
    now: datetime | None = None


@dataclass(frozen=True)
class PodiumEntry:
    """A top-3 position of the weekly ranking.

    Attributes:
        position: 1, 2 or 3.
        name: Display name of the profile.
        points: Points before the weekly bonus was applied.
    """

    position: int
    name: str
    points: int


@dataclass(frozen=True)
class ResetWeeklyRankingResult:
    top3: list[PodiumEntry] = field(default_factory=list)
    badges_awarded: int = 0
