"""Data access helpers for the per-client vote ledger."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from hashvote.models import Title, VoteRecord

__all__ = ["VoteRepository"]


class VoteRepository:
    """Stores the current hash set each client submitted for each title."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def find(self, address: int, title_key: str) -> VoteRecord | None:
        """Return the client's record for a title, if one exists."""
        return self.session.scalars(
            select(VoteRecord)
            .join(Title, Title.id == VoteRecord.title_id)
            .where(VoteRecord.address == address, Title.title_key == title_key)
        ).first()

    def upsert(self, address: int, title: Title, hashes: Iterable[str]) -> VoteRecord:
        """Create or overwrite the client's record for ``title``.

        The stored hash list is sorted. Two concurrent first submissions for
        the same (address, title) collide on the unique constraint at flush.
        """
        stored = sorted(set(hashes))
        record = self.session.scalars(
            select(VoteRecord).where(
                VoteRecord.address == address,
                VoteRecord.title_id == title.id,
            )
        ).first()
        if record is None:
            record = VoteRecord(address=address, title_id=title.id, hashes=stored)
            record.title = title
            self.session.add(record)
        else:
            record.hashes = stored
        self.session.flush()
        return record

    def list_by_client(
        self,
        address: int,
        page: int,
        page_size: int,
    ) -> tuple[list[VoteRecord], int]:
        """Return one page of a client's records in creation order plus the total.

        ``page`` is 1-based; callers pass already normalised paging values.
        """
        total = self.session.scalar(
            select(func.count()).select_from(VoteRecord).where(VoteRecord.address == address)
        ) or 0
        records = self.session.scalars(
            select(VoteRecord)
            .where(VoteRecord.address == address)
            .order_by(VoteRecord.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
        ).all()
        return list(records), total
