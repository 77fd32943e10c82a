"""Vote-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict

from .common import HashSet, PageMeta


class VoteUpdate(HashSet):
    """Schema for submitting or replacing a vote."""


class VoteResponse(BaseModel):
    """Schema for one stored vote of the calling client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title_key: str
    hashes: list[str]


class VoteListResponse(PageMeta):
    """Paged list of the calling client's votes."""

    items: list[VoteResponse]
    ip: str
