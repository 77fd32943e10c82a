"""Best-match query endpoint."""

from fastapi import APIRouter, status

from hashvote.api.deps import SessionDep
from hashvote.schemas.match import MatchQuery, MatchResult
from hashvote.services.match_service import MatchService

router = APIRouter(prefix="/match", tags=["match"])


@router.post(
    "",
    response_model=MatchResult,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "No usable hashes"},
        status.HTTP_404_NOT_FOUND: {"description": "No matching title"},
    },
)
def query_by_hash(query: MatchQuery, db: SessionDep) -> MatchResult:
    """Infer the most likely title for a list of file hashes.

    Each hash is credited to the title(s) with the highest vote count for
    it; the title credited with the most hashes wins, ties going to the
    higher summed count and then to the smaller title key.
    """
    title_key = MatchService(db).query_best_match(query.hashes)
    return MatchResult(title_key=title_key)
