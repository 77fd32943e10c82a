"""API endpoint modules for version 1."""

from .match import router as match_router
from .titles import router as titles_router
from .votes import router as votes_router

__all__ = [
    "match_router",
    "titles_router",
    "votes_router",
]
