"""Match query schemas."""

from pydantic import BaseModel

from .common import HashSet


class MatchQuery(HashSet):
    """Schema for a best-match query."""


class MatchResult(BaseModel):
    """Schema for the best-matching title."""

    title_key: str
