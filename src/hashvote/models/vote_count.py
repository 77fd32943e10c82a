"""Aggregated vote counts between titles and hashes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hashvote.db.session import Base

if TYPE_CHECKING:
    from .hash_record import HashRecord
    from .title import Title


class VoteCount(Base):
    """Number of clients currently voting that a hash belongs to a title.

    A row exists only while its count is positive. Inside a transaction the
    count may pass through zero just before the row is deleted.
    """

    __tablename__ = "vote_count"
    __table_args__ = (
        Index("ix_vote_count_hash_id", "hash_id"),
    )

    title_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("title.id", ondelete="CASCADE"),
        primary_key=True,
    )
    hash_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("hash_record.id", ondelete="CASCADE"),
        primary_key=True,
    )
    count: Mapped[int] = mapped_column(Integer, nullable=False)

    title: Mapped[Title] = relationship("Title", back_populates="vote_counts")
    hash_record: Mapped[HashRecord] = relationship(
        "HashRecord",
        back_populates="vote_counts",
    )
