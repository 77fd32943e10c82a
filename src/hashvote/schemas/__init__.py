"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .match import MatchQuery, MatchResult
from .title import HashVoteResponse, TitleListResponse, TitleResponse, TitleVotesResponse
from .vote import VoteListResponse, VoteResponse, VoteUpdate

__all__ = [
    "MatchQuery", "MatchResult",
    "HashVoteResponse", "TitleListResponse", "TitleResponse", "TitleVotesResponse",
    "VoteListResponse", "VoteResponse", "VoteUpdate",
]
