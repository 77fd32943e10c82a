"""SQLAlchemy models for known software titles."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hashvote.db.session import Base

if TYPE_CHECKING:
    from .vote_count import VoteCount


class Title(Base):
    """A distinct piece of identified software, keyed by an external catalog id.

    Rows are created lazily on the first vote that references them and are
    never updated afterwards.
    """

    __tablename__ = "title"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title_key: Mapped[str] = mapped_column(Text, unique=True, nullable=False)

    vote_counts: Mapped[list[VoteCount]] = relationship(
        "VoteCount",
        back_populates="title",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
