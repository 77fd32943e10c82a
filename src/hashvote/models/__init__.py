"""SQLAlchemy models for the Hashvote application."""

from .hash_record import HashRecord
from .title import Title
from .vote_count import VoteCount
from .vote_record import VoteRecord

__all__ = [
    "HashRecord",
    "Title",
    "VoteCount",
    "VoteRecord",
]
