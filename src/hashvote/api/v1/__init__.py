"""Version 1 API endpoints."""

from .endpoints import match_router, titles_router, votes_router

__all__ = [
    "match_router",
    "titles_router",
    "votes_router",
]
