"""SQLAlchemy models for file hashes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hashvote.db.session import Base

if TYPE_CHECKING:
    from .vote_count import VoteCount


class HashRecord(Base):
    """An opaque fingerprint of one file found inside an installation."""

    __tablename__ = "hash_record"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Compared exactly; case is significant.
    hash_value: Mapped[str] = mapped_column(Text, unique=True, nullable=False)

    vote_counts: Mapped[list[VoteCount]] = relationship(
        "VoteCount",
        back_populates="hash_record",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
