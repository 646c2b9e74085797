"""
Port interfaces (ABCs) for the community bounded context.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime

from app.domain.community.entities import Post, RankedProfile, Week


class PostRepository(ABC):
    """Port for reading community posts with their engagement counts."""

    @abstractmethod
    def get_approved_since(self, since: datetime) -> list[Post]:
        """Return approved posts created at or after `since`, with
        reaction_count and comment_count filled in."""
        raise NotImplementedError


class RankingRepository(ABC):
    """Port for points, weekly snapshots and badges."""

    @abstractmethod
    def get_top_profiles(self, limit: int) -> list[RankedProfile]:
        """Return profiles ordered by points descending."""
        raise NotImplementedError

    @abstractmethod
    def add_points(self, profile: RankedProfile, bonus: int) -> None:
        """Grant bonus points on top of the profile's current points."""
        raise NotImplementedError

    @abstractmethod
    def save_weekly_snapshot(self, profile: RankedProfile, week: Week) -> None:
        """Record the profile's points for the week. Duplicates are ignored."""
        raise NotImplementedError

    @abstractmethod
    def count_weeks_since(self, user_id: str, since: date) -> int:
        """Return how many weekly snapshots the user has since `since`."""
        raise NotImplementedError

    @abstractmethod
    def has_badge(self, user_id: str, badge_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def award_badge(self, user_id: str, badge_id: str) -> None:
        raise NotImplementedError
