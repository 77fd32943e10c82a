"""Per-client vote ledger."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import JSON, BigInteger, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hashvote.db.session import Base

if TYPE_CHECKING:
    from .title import Title


class VoteRecord(Base):
    """The hash set one client last submitted for one title.

    The unique constraint on (address, title_id) is what serialises
    concurrent first submissions from the same client for the same title.
    """

    __tablename__ = "vote_record"
    __table_args__ = (
        UniqueConstraint("address", "title_id", name="uq_vote_record_address_title"),
    )

    # Autoincrement id doubles as the creation order for listings.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # IPv4 address as an unsigned 32-bit integer; BIGINT keeps it unsigned on Postgres.
    address: Mapped[int] = mapped_column(BigInteger, nullable=False)
    title_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("title.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Sorted list of hash values.
    hashes: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    title: Mapped[Title] = relationship("Title", lazy="joined")

    @property
    def title_key(self) -> str:
        """Return the external key of the voted title."""
        return self.title.title_key
