"""
Adapter: Community post repository.

Implements PostRepository port.
Reads approved posts and counts their reactions and comments in a
single query.
"""

import logging
from datetime import datetime

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.domain.community.entities import Post
from app.domain.community.ports import PostRepository

logger = logging.getLogger(__name__)

_SELECT_APPROVED_SINCE = text(
    """
    SELECT p.id, p.category, p.content, p.created_at,
           (SELECT count(*) FROM post_reactions r WHERE r.post_id = p.id)
               AS reaction_count,
           (SELECT count(*) FROM community_comments c WHERE c.post_id = p.id)
               AS comment_count
    FROM community_posts p
    WHERE p.status = 'approved'
      AND p.created_at >= :since
    ORDER BY p.created_at
    """
)


class PostRepositoryAdapter(PostRepository):
    """Reads community posts from PostgreSQL."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_approved_since(self, since: datetime) -> list[Post]:
        """Return approved posts created at or after `since`.

        Args:
            since: Start of the window.

        Returns:
            Posts ordered by creation time, with engagement counts.
        """
        with self._engine.connect() as conn:
            rows = conn.execute(_SELECT_APPROVED_SINCE, {"since": since}).mappings().all()

        posts = [
            Post(
                id=str(row["id"]),
                category=row["category"],
                content=row["content"] or "",
                created_at=row["created_at"],
                reaction_count=int(row["reaction_count"] or 0),
                comment_count=int(row["comment_count"] or 0),
            )
            for row in rows
        ]
        logger.info("Fetched %d approved posts since %s.", len(posts), since.isoformat())
        return posts
