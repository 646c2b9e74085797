"""
Community bounded context, domain layer.

- Trending topics scoring over recent posts
- Weekly ranking rewards and badges
"""
