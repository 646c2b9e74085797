"""
Weekly ranking rules: podium rewards, week boundaries and the
"community legend" badge criterion.
"""

from datetime import date, datetime, timedelta

from app.domain.community.entities import RankedProfile, WeeklyReward, Week

RANKING_SIZE = 100
LEGEND_BADGE_ID = "lendaria"
LEGEND_WINDOW_DAYS = 28
LEGEND_MIN_WEEKS = 4

WEEKLY_REWARDS = (
    WeeklyReward(1, 500, "🏆 1º lugar no ranking semanal! +500 pontos bônus"),
    WeeklyReward(2, 300, "🥈 2º lugar no ranking semanal! +300 pontos bônus"),
    WeeklyReward(3, 150, "🥉 3º lugar no ranking semanal! +150 pontos bônus"),
)


def current_week(now: datetime) -> Week:
    """Return the Monday..Sunday week containing `now`."""
    monday = now.date() - timedelta(days=now.weekday())
    return Week(start=monday, end=monday + timedelta(days=6))


def legend_window_start(now: datetime) -> date:
    return (now - timedelta(days=LEGEND_WINDOW_DAYS)).date()


def podium(ranking: list[RankedProfile]) -> list[tuple[WeeklyReward, RankedProfile]]:
    """Pair each reward with the profile holding its position, if any."""
    return [
        (reward, ranking[reward.position - 1])
        for reward in WEEKLY_REWARDS
        if len(ranking) >= reward.position
    ]


def qualifies_as_legend(weeks_ranked: int) -> bool:
    return weeks_ranked >= LEGEND_MIN_WEEKS
