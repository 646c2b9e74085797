"""
Use case: Close the weekly ranking.

Input: ResetWeeklyRankingCommand (now)
Output: ResetWeeklyRankingResult (podium, badges awarded)
Side effects:
    - Grants bonus points to the top 3 profiles and messages them.
    - Snapshots every ranked profile into the weekly history.
    - Awards the legend badge to podium profiles ranked 4+ weeks in 28 days.
Failure cases:
    - Loading the ranking fails: raised.
    - Reward, message, snapshot or badge failures for one profile are
      logged and do not stop the others.
"""

import logging
from datetime import datetime, timezone

from app.application.community.dtos import (
    PodiumEntry,
    ResetWeeklyRankingCommand,
    ResetWeeklyRankingResult,
)
from app.domain.accounts.entities import Message, MessagePriority
from app.domain.accounts.ports import MessageRepository
from app.domain.community.ports import RankingRepository
from app.domain.community.ranking import (
    LEGEND_BADGE_ID,
    RANKING_SIZE,
    current_week,
    legend_window_start,
    podium,
    qualifies_as_legend,
)

logger = logging.getLogger(__name__)


class ResetWeeklyRankingUseCase:
    """Distributes weekly rewards and records the ranking history."""

    def __init__(
        self,
        ranking_repo: RankingRepository,
        message_repo: MessageRepository,
    ) -> None:
        self._ranking_repo = ranking_repo
        self._message_repo = message_repo

    def execute(self, command: ResetWeeklyRankingCommand) -> ResetWeeklyRankingResult:
        now = command.now or datetime.now(timezone.utc)
        ranking = self._ranking_repo.get_top_profiles(limit=RANKING_SIZE)
        logger.info("Closing weekly ranking with %d profiles", len(ranking))

        winners = podium(ranking)
        for reward, profile in winners:
            try:
                self._ranking_repo.add_points(profile, reward.points)
                logger.info(
                    "Awarded %d points to %s (position %d)",
                    reward.points,
                    profile.id,
                    reward.position,
                )
            except Exception:
                logger.exception(
                    "Failed to award points for position %d", reward.position
                )
            try:
                self._message_repo.send(
                    Message(
                        user_id=profile.id,
                        title=f"Ranking Semanal - {reward.position}º Lugar",
                        content=reward.message,
                        priority=MessagePriority.HIGH,
                    )
                )
            except Exception:
                logger.exception(
                    "Failed to notify position %d", reward.position
                )

        week = current_week(now)
        for profile in ranking:
            try:
                self._ranking_repo.save_weekly_snapshot(profile, week)
            except Exception:
                logger.exception("Failed to save weekly points for %s", profile.id)

        badges_awarded = 0
        since = legend_window_start(now)
        for _, profile in winners:
            try:
                weeks = self._ranking_repo.count_weeks_since(profile.id, since)
                if qualifies_as_legend(weeks) and not self._ranking_repo.has_badge(
                    profile.id, LEGEND_BADGE_ID
                ):
                    self._ranking_repo.award_badge(profile.id, LEGEND_BADGE_ID)
                    badges_awarded += 1
                    logger.info("Awarded legend badge to %s", profile.id)
            except Exception:
                logger.exception("Failed to check legend badge for %s", profile.id)

        return ResetWeeklyRankingResult(
            top3=[
                PodiumEntry(
                    position=reward.position,
                    name=profile.full_name,
                    points=profile.points,
                )
                for reward, profile in winners
            ],
            badges_awarded=badges_awarded,
        )
