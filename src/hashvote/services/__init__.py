"""Business logic services for the Hashvote application."""

from .match_service import MatchService
from .title_service import TitleService
from .vote_service import VoteService

__all__ = [
    "MatchService",
    "TitleService",
    "VoteService",
]
