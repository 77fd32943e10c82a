"""Data access helpers for per-(title, hash) vote counts."""
from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from hashvote.db.session import dialect_insert
from hashvote.models import HashRecord, Title, VoteCount

__all__ = ["HashTitleCount", "HashCount", "VoteCountRepository"]


class HashTitleCount(NamedTuple):
    """One association row joined to its hash value and title key."""

    hash_value: str
    title_key: str
    count: int


class HashCount(NamedTuple):
    """One association row of a single title."""

    hash_value: str
    count: int


class VoteCountRepository:
    """Maintains the vote count for every (title, hash) pair.

    Counts are only ever changed through ``apply_delta``, which issues single
    statements instead of reading the row first. Concurrent deltas on the
    same pair are serialised by the database row lock.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def apply_delta(self, title_id: int, hash_id: int, delta: int) -> None:
        """Add ``delta`` to the count of one (title, hash) pair.

        A missing row is created when ``delta`` is positive and left alone
        otherwise. A row whose count drops to zero or below is deleted.
        Runs inside the caller's transaction.
        """
        if delta == 0:
            return

        if delta > 0:
            self.session.execute(
                dialect_insert(self.session, VoteCount)
                .values(title_id=title_id, hash_id=hash_id, count=delta)
                .on_conflict_do_update(
                    index_elements=["title_id", "hash_id"],
                    set_={"count": VoteCount.count + delta},
                )
            )
            return

        key = (VoteCount.title_id == title_id, VoteCount.hash_id == hash_id)
        result = self.session.execute(
            update(VoteCount)
            .where(*key)
            .values(count=VoteCount.count + delta)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount:
            self.session.execute(
                delete(VoteCount)
                .where(*key, VoteCount.count <= 0)
                .execution_options(synchronize_session=False)
            )

    def counts_for_hashes(self, hash_values: Iterable[str]) -> list[HashTitleCount]:
        """Return every association row whose hash value is in ``hash_values``."""
        values = set(hash_values)
        if not values:
            return []
        rows = self.session.execute(
            select(HashRecord.hash_value, Title.title_key, VoteCount.count)
            .join(HashRecord, HashRecord.id == VoteCount.hash_id)
            .join(Title, Title.id == VoteCount.title_id)
            .where(HashRecord.hash_value.in_(values))
        )
        return [HashTitleCount(*row) for row in rows]

    def counts_for_title(self, title_key: str) -> list[HashCount]:
        """Return every association row of one title."""
        rows = self.session.execute(
            select(HashRecord.hash_value, VoteCount.count)
            .join(HashRecord, HashRecord.id == VoteCount.hash_id)
            .join(Title, Title.id == VoteCount.title_id)
            .where(Title.title_key == title_key)
        )
        return [HashCount(*row) for row in rows]
