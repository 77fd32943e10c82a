"""Read-side reports over titles and their vote counts."""
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from hashvote.core.errors import NotFoundError
from hashvote.core.pagination import normalize_page
from hashvote.core.settings import settings
from hashvote.models import Title
from hashvote.repositories import TitleRepository, VoteCountRepository


@dataclass(slots=True, frozen=True)
class HashVote:
    """Vote count of one hash for one title."""

    hash: str
    count: int
    is_dominant: bool


@dataclass(slots=True, frozen=True)
class TitleVotes:
    """All hashes voted for one title."""

    title_key: str
    items: list[HashVote]


@dataclass(slots=True, frozen=True)
class TitlePage:
    """One page of known titles."""

    items: list[Title]
    total: int
    page: int
    page_size: int


class TitleService:
    """Reports per-title vote counts and lists known titles."""

    def __init__(self, session: Session) -> None:
        self.titles = TitleRepository(session)
        self.counts = VoteCountRepository(session)

    def get_votes(self, title_key: str) -> TitleVotes:
        """Return each hash voted for ``title_key`` with its count and dominance.

        A hash is dominant for this title when no other title holds a higher
        count for it. Items are ordered by count descending, then hash value.

        Raises:
            NotFoundError: If the title does not exist.
        """
        if self.titles.find_by_key(title_key) is None:
            raise NotFoundError(f"Title {title_key!r} not found")

        rows = self.counts.counts_for_title(title_key)
        if not rows:
            return TitleVotes(title_key=title_key, items=[])

        maxima: dict[str, int] = {}
        for row in self.counts.counts_for_hashes(row.hash_value for row in rows):
            maxima[row.hash_value] = max(maxima.get(row.hash_value, 0), row.count)

        items = [
            HashVote(
                hash=row.hash_value,
                count=row.count,
                is_dominant=maxima.get(row.hash_value, 0) > 0
                and row.count == maxima[row.hash_value],
            )
            for row in rows
        ]
        items.sort(key=lambda item: (-item.count, item.hash))
        return TitleVotes(title_key=title_key, items=items)

    def list_titles(self, page: int = 1, page_size: int = 0) -> TitlePage:
        """Return known titles in creation order."""
        paging = normalize_page(page, page_size, settings.titles_page_size)
        items, total = self.titles.list_page(paging.page, paging.page_size)
        return TitlePage(items=items, total=total, page=paging.page, page_size=paging.page_size)
