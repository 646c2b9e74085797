"""
Trending topics scoring.

A post's score weighs comments above reactions. Categories sum the
scores of their posts; hashtags sum the scores of every post that
mentions them, so one post counts towards each of its hashtags.
A hashtag repeated inside one post adds that post's score once, not
once per occurrence.
"""

import re
from datetime import datetime, timedelta
from typing import Iterable

from app.domain.community.entities import Post, TopicScore, TrendingReport

REACTION_WEIGHT = 2
COMMENT_WEIGHT = 3
WINDOW_DAYS = 7
TOP_N = 5

HASHTAG_PATTERN = re.compile(r"#\w+")


def window_start(now: datetime) -> datetime:
    """Return the oldest creation time still inside the trending window."""
    return now - timedelta(days=WINDOW_DAYS)


def post_score(post: Post) -> int:
    return post.reaction_count * REACTION_WEIGHT + post.comment_count * COMMENT_WEIGHT


def extract_hashtags(content: str) -> list[str]:
    """Return the distinct hashtags of a post in order of first appearance."""
    return list(dict.fromkeys(HASHTAG_PATTERN.findall(content or "")))


def _top(scores: dict[str, int], limit: int) -> list[TopicScore]:
    # sorted() is stable, ties keep insertion order
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return [TopicScore(name=name, score=score) for name, score in ranked[:limit]]


def score_topics(posts: Iterable[Post], limit: int = TOP_N) -> TrendingReport:
    """Aggregate post scores per category and per hashtag.

    Args:
        posts: Posts already restricted to the trending window.
        limit: How many entries to keep in each ranking.

    Returns:
        The top categories and hashtags, highest score first.
    """
    category_scores: dict[str, int] = {}
    hashtag_scores: dict[str, int] = {}

    for post in posts:
        score = post_score(post)
        category_scores[post.category] = category_scores.get(post.category, 0) + score
        for tag in extract_hashtags(post.content):
            hashtag_scores[tag] = hashtag_scores.get(tag, 0) + score

    return TrendingReport(
        categories=_top(category_scores, limit),
        hashtags=_top(hashtag_scores, limit),
    )
