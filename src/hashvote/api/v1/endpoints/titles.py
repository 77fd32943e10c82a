"""Title report and listing endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path, Query, status

from hashvote.api.deps import SessionDep
from hashvote.schemas.title import (
    HashVoteResponse,
    TitleListResponse,
    TitleResponse,
    TitleVotesResponse,
)
from hashvote.services.title_service import TitleService

router = APIRouter(tags=["titles"])


@router.get(
    "/title/{title_key}",
    response_model=TitleVotesResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Title not found"}},
)
def get_title_votes(
    title_key: Annotated[str, Path(min_length=1)],
    db: SessionDep,
) -> TitleVotesResponse:
    """Get each hash voted for a title, its count and whether the title dominates it."""
    report = TitleService(db).get_votes(title_key)
    return TitleVotesResponse(
        title_key=report.title_key,
        items=[HashVoteResponse.model_validate(item) for item in report.items],
    )


@router.get("/titles", response_model=TitleListResponse)
def list_titles(
    db: SessionDep,
    page: Annotated[int, Query()] = 1,
    page_size: Annotated[int, Query()] = 0,
) -> TitleListResponse:
    """List known titles in creation order."""
    result = TitleService(db).list_titles(page, page_size)
    return TitleListResponse(
        items=[TitleResponse.model_validate(title) for title in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
    )
