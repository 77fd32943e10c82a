"""Tests for the per-title vote report and title listing."""

from __future__ import annotations

import pytest
from sqlalchemy.orm import Session

from hashvote.core.errors import NotFoundError
from hashvote.models import Title
from hashvote.services.title_service import HashVote, TitleService


def test_dominance_is_relative_to_other_titles(submit, db_session: Session) -> None:
    """The title holding the highest count for a hash dominates it."""
    submit("1.1.1.1", "gA", ["h1"])
    submit("2.2.2.2", "gA", ["h1"])
    submit("3.3.3.3", "gB", ["h1"])

    service = TitleService(db_session)
    assert service.get_votes("gA").items == [HashVote("h1", 2, True)]
    assert service.get_votes("gB").items == [HashVote("h1", 1, False)]


def test_tied_titles_are_both_dominant(submit, db_session: Session) -> None:
    """A tie on the maximum marks the hash dominant for every tied title."""
    submit("1.1.1.1", "gA", ["h1"])
    submit("2.2.2.2", "gB", ["h1"])

    service = TitleService(db_session)
    assert service.get_votes("gA").items[0].is_dominant
    assert service.get_votes("gB").items[0].is_dominant


def test_items_sorted_by_count_then_hash(submit, db_session: Session) -> None:
    """Higher counts first; equal counts by hash value."""
    submit("1.1.1.1", "g1", ["b", "a", "c"])
    submit("2.2.2.2", "g1", ["c"])

    report = TitleService(db_session).get_votes("g1")
    assert report.title_key == "g1"
    assert [(item.hash, item.count) for item in report.items] == [("c", 2), ("a", 1), ("b", 1)]


def test_unknown_title_is_not_found(db_session: Session) -> None:
    """A title nobody voted for is reported as missing, not empty."""
    with pytest.raises(NotFoundError):
        TitleService(db_session).get_votes("nope")


def test_known_title_without_hashes_is_empty(db_session: Session) -> None:
    """A title with no remaining counts yields an empty report."""
    db_session.add(Title(title_key="lonely"))
    db_session.commit()

    report = TitleService(db_session).get_votes("lonely")
    assert report.items == []


def test_list_titles_in_creation_order(submit, db_session: Session) -> None:
    """Titles are listed in the order they were first voted."""
    for key in ["t3", "t1", "t2"]:
        submit("1.1.1.1", key, ["h"])

    page = TitleService(db_session).list_titles(page=1, page_size=2)
    assert [title.title_key for title in page.items] == ["t3", "t1"]
    assert (page.total, page.page, page.page_size) == (3, 1, 2)

    default = TitleService(db_session).list_titles(page=0, page_size=0)
    assert (default.page, default.page_size) == (1, 20)
    assert len(default.items) == 3
