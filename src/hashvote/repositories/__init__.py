"""Repositories wrapping database access for the vote core."""

from .hash_repo import HashRepository
from .title_repo import TitleRepository
from .vote_count_repo import HashCount, HashTitleCount, VoteCountRepository
from .vote_repo import VoteRepository

__all__ = [
    "HashRepository",
    "TitleRepository",
    "VoteCountRepository",
    "HashCount",
    "HashTitleCount",
    "VoteRepository",
]
