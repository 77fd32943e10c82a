"""Data access helpers for working with hash records."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from hashvote.db.session import dialect_insert
from hashvote.models import HashRecord

__all__ = ["HashRepository"]


class HashRepository:
    """Resolves hash values to hash record identities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def find_by_value(self, hash_value: str) -> HashRecord | None:
        """Return the record for a single hash value, if known."""
        return self.session.scalars(
            select(HashRecord).where(HashRecord.hash_value == hash_value)
        ).first()

    def get_or_create_many(self, hash_values: Iterable[str]) -> dict[str, int]:
        """Map every given hash value to its record id, creating missing records.

        Args:
            hash_values: Hash strings to resolve; duplicates are ignored.

        Returns:
            Mapping of hash value to ``HashRecord.id``.
        """
        wanted = set(hash_values)
        if not wanted:
            return {}

        ids = self._lookup(wanted)
        missing = wanted - ids.keys()
        if missing:
            # Rows inserted concurrently by another client are kept as they are.
            self.session.execute(
                dialect_insert(self.session, HashRecord)
                .values([{"hash_value": value} for value in sorted(missing)])
                .on_conflict_do_nothing(index_elements=["hash_value"])
            )
            ids.update(self._lookup(missing))
        return ids

    def _lookup(self, hash_values: set[str]) -> dict[str, int]:
        rows = self.session.execute(
            select(HashRecord.hash_value, HashRecord.id).where(
                HashRecord.hash_value.in_(hash_values)
            )
        )
        return {value: record_id for value, record_id in rows}
