"""Vote-related endpoints for the Hashvote API."""

from typing import Annotated

from fastapi import APIRouter, Path, Query, Response, status

from hashvote.api.deps import ClientIpDep, SessionDep
from hashvote.schemas.vote import VoteListResponse, VoteResponse, VoteUpdate
from hashvote.services.vote_service import VoteService

router = APIRouter(tags=["votes"])


@router.patch(
    "/vote/{title_key}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "No usable hashes or non-IPv4 client"}},
)
def patch_vote(
    title_key: Annotated[str, Path(min_length=1)],
    vote_data: VoteUpdate,
    client_ip: ClientIpDep,
    db: SessionDep,
) -> Response:
    """Submit or replace the calling client's hash vote for a title."""
    VoteService(db).submit(client_ip, title_key, vote_data.hashes)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/votes", response_model=VoteListResponse)
def get_votes(
    client_ip: ClientIpDep,
    db: SessionDep,
    page: Annotated[int, Query()] = 1,
    page_size: Annotated[int, Query()] = 0,
) -> VoteListResponse:
    """List the calling client's votes, oldest first."""
    result = VoteService(db).list_votes(client_ip, page, page_size)
    return VoteListResponse(
        items=[VoteResponse.model_validate(record) for record in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        ip=result.ip,
    )
