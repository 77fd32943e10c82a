"""Data access helpers for working with titles."""
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from hashvote.db.session import dialect_insert
from hashvote.models import Title

__all__ = ["TitleRepository"]


class TitleRepository:
    """Resolves external title keys to title rows."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def find_by_key(self, title_key: str) -> Title | None:
        """Return the title with the given external key, if it exists."""
        return self.session.scalars(
            select(Title).where(Title.title_key == title_key)
        ).first()

    def get_or_create(self, title_key: str) -> Title:
        """Return the title for ``title_key``, inserting it on first use.

        When another client inserts the same key concurrently, its row is
        returned instead of a duplicate.
        """
        title = self.find_by_key(title_key)
        if title is not None:
            return title
        self.session.execute(
            dialect_insert(self.session, Title)
            .values(title_key=title_key)
            .on_conflict_do_nothing(index_elements=["title_key"])
        )
        return self.session.scalars(
            select(Title).where(Title.title_key == title_key)
        ).one()

    def list_page(self, page: int, page_size: int) -> tuple[list[Title], int]:
        """Return one page of titles in creation order plus the total count."""
        total = self.session.scalar(select(func.count()).select_from(Title)) or 0
        titles = self.session.scalars(
            select(Title)
            .order_by(Title.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
        ).all()
        return list(titles), total
