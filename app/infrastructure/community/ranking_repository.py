"""
Adapter: Ranking repository.

Implements RankingRepository port over the profiles, weekly_points
and user_badges tables.
"""

from datetime import date

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.domain.community.entities import RankedProfile, Week
from app.domain.community.ports import RankingRepository


class RankingRepositoryAdapter(RankingRepository):
    """PostgreSQL implementation of the ranking repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_top_profiles(self, limit: int) -> list[RankedProfile]:
        query = text(
            """
            SELECT id, full_name, COALESCE(points, 0) AS points
            FROM profiles
            ORDER BY points DESC NULLS LAST
            LIMIT :limit
            """
        )
        with self._engine.connect() as conn:
            rows = conn.execute(query, {"limit": limit}).mappings().all()

        return [
            RankedProfile(
                id=str(row["id"]),
                full_name=row["full_name"] or "",
                points=int(row["points"]),
            )
            for row in rows
        ]

    def add_points(self, profile: RankedProfile, bonus: int) -> None:
        """Increment points in place so concurrent point grants are kept."""
        query = text(
            "UPDATE profiles SET points = COALESCE(points, 0) + :bonus WHERE id = :id"
        )
        with self._engine.begin() as conn:
            conn.execute(query, {"id": profile.id, "bonus": bonus})

    def save_weekly_snapshot(self, profile: RankedProfile, week: Week) -> None:
        query = text(
            """
            INSERT INTO weekly_points (user_id, points, week_start, week_end)
            VALUES (:user_id, :points, :week_start, :week_end)
            ON CONFLICT DO NOTHING
            """
        )
        with self._engine.begin() as conn:
            conn.execute(
                query,
                {
                    "user_id": profile.id,
                    "points": profile.points,
                    "week_start": week.start,
                    "week_end": week.end,
                },
            )

    def count_weeks_since(self, user_id: str, since: date) -> int:
        query = text(
            """
            SELECT count(*) FROM weekly_points
            WHERE user_id = :user_id AND week_start >= :since
            """
        )
        with self._engine.connect() as conn:
            return int(conn.execute(query, {"user_id": user_id, "since": since}).scalar_one())

    def has_badge(self, user_id: str, badge_id: str) -> bool:
        query = text(
            """
            SELECT 1 FROM user_badges
            WHERE user_id = :user_id AND badge_id = :badge_id
            LIMIT 1
            """
        )
        with self._engine.connect() as conn:
            row = conn.execute(query, {"user_id": user_id, "badge_id": badge_id}).first()
        return row is not None

    def award_badge(self, user_id: str, badge_id: str) -> None:
        query = text(
            """
            INSERT INTO user_badges (user_id, badge_id)
            VALUES (:user_id, :badge_id)
            ON CONFLICT DO NOTHING
            """
        )
        with self._engine.begin() as conn:
            conn.execute(query, {"user_id": user_id, "badge_id": badge_id})
