"""Title report schemas."""

from pydantic import BaseModel, ConfigDict

from .common import PageMeta


class HashVoteResponse(BaseModel):
    """Vote count of one hash for a title."""

    model_config = ConfigDict(from_attributes=True)

    hash: str
    count: int
    is_dominant: bool


class TitleVotesResponse(BaseModel):
    """All hash votes of one title."""

    model_config = ConfigDict(from_attributes=True)

    title_key: str
    items: list[HashVoteResponse]


class TitleResponse(BaseModel):
    """Schema for a known title."""

    model_config = ConfigDict(from_attributes=True)

    title_key: str


class TitleListResponse(PageMeta):
    """Paged list of titles."""

    items: list[TitleResponse]
