"""Tests for the vote count table."""

from __future__ import annotations

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from hashvote.models import HashRecord, Title, VoteCount
from hashvote.repositories import HashRepository, TitleRepository, VoteCountRepository


@pytest.fixture()
def ids(db_session: Session) -> tuple[int, int]:
    """Return (title_id, hash_id) for a fresh title and hash."""
    title = TitleRepository(db_session).get_or_create("g1")
    hash_ids = HashRepository(db_session).get_or_create_many(["h1"])
    db_session.commit()
    return title.id, hash_ids["h1"]


def _count(db_session: Session, title_id: int, hash_id: int) -> int | None:
    db_session.expire_all()
    return db_session.scalar(
        select(VoteCount.count).where(
            VoteCount.title_id == title_id,
            VoteCount.hash_id == hash_id,
        )
    )


def test_positive_delta_creates_row(db_session: Session, ids: tuple[int, int]) -> None:
    """The first increment inserts the row with the delta as its count."""
    repo = VoteCountRepository(db_session)
    repo.apply_delta(*ids, 1)
    db_session.commit()
    assert _count(db_session, *ids) == 1


def test_deltas_accumulate(db_session: Session, ids: tuple[int, int]) -> None:
    """Later deltas add to the stored count."""
    repo = VoteCountRepository(db_session)
    repo.apply_delta(*ids, 2)
    repo.apply_delta(*ids, 3)
    repo.apply_delta(*ids, -1)
    db_session.commit()
    assert _count(db_session, *ids) == 4


def test_decrement_to_zero_deletes_row(db_session: Session, ids: tuple[int, int]) -> None:
    """A count is never stored as zero."""
    repo = VoteCountRepository(db_session)
    repo.apply_delta(*ids, 1)
    repo.apply_delta(*ids, -1)
    db_session.commit()
    assert _count(db_session, *ids) is None


def test_decrement_below_zero_deletes_row(db_session: Session, ids: tuple[int, int]) -> None:
    """Overshooting a decrement also removes the row."""
    repo = VoteCountRepository(db_session)
    repo.apply_delta(*ids, 2)
    repo.apply_delta(*ids, -5)
    db_session.commit()
    assert _count(db_session, *ids) is None


@pytest.mark.parametrize("delta", [0, -1, -3])
def test_non_positive_delta_on_missing_row_is_noop(
    db_session: Session,
    ids: tuple[int, int],
    delta: int,
) -> None:
    """Decrementing something never incremented creates nothing."""
    VoteCountRepository(db_session).apply_delta(*ids, delta)
    db_session.commit()
    assert db_session.scalars(select(VoteCount)).all() == []


def test_counts_for_hashes_joins_title_keys(db_session: Session) -> None:
    """Rows come back as (hash value, title key, count) for the requested hashes only."""
    titles = TitleRepository(db_session)
    g1 = titles.get_or_create("g1")
    g2 = titles.get_or_create("g2")
    hash_ids = HashRepository(db_session).get_or_create_many(["h1", "h2", "h3"])
    repo = VoteCountRepository(db_session)
    repo.apply_delta(g1.id, hash_ids["h1"], 2)
    repo.apply_delta(g2.id, hash_ids["h1"], 1)
    repo.apply_delta(g2.id, hash_ids["h2"], 1)
    repo.apply_delta(g1.id, hash_ids["h3"], 4)
    db_session.commit()

    rows = repo.counts_for_hashes({"h1", "h2", "missing"})

    assert sorted(rows) == [("h1", "g1", 2), ("h1", "g2", 1), ("h2", "g2", 1)]
    assert repo.counts_for_hashes(set()) == []


def test_counts_for_title(db_session: Session) -> None:
    """Only the requested title's rows are returned."""
    titles = TitleRepository(db_session)
    g1 = titles.get_or_create("g1")
    g2 = titles.get_or_create("g2")
    hash_ids = HashRepository(db_session).get_or_create_many(["h1", "h2"])
    repo = VoteCountRepository(db_session)
    repo.apply_delta(g1.id, hash_ids["h1"], 1)
    repo.apply_delta(g1.id, hash_ids["h2"], 3)
    repo.apply_delta(g2.id, hash_ids["h1"], 5)
    db_session.commit()

    assert sorted(repo.counts_for_title("g1")) == [("h1", 1), ("h2", 3)]
    assert repo.counts_for_title("unknown") == []


def test_deleting_title_cascades_to_counts(db_session: Session, ids: tuple[int, int]) -> None:
    """Association rows go away with their title."""
    VoteCountRepository(db_session).apply_delta(*ids, 1)
    db_session.commit()

    db_session.delete(db_session.get(Title, ids[0]))
    db_session.commit()

    assert db_session.scalars(select(VoteCount)).all() == []
    assert db_session.get(HashRecord, ids[1]) is not None


def test_get_or_create_many_reuses_existing_records(db_session: Session) -> None:
    """Known hashes keep their identity; unknown ones are created once."""
    repo = HashRepository(db_session)
    first = repo.get_or_create_many(["a", "b"])
    second = repo.get_or_create_many(["b", "c", "c"])
    db_session.commit()

    assert second["b"] == first["b"]
    assert set(second) == {"b", "c"}
    assert len(db_session.scalars(select(HashRecord)).all()) == 3
    assert repo.find_by_value("c").id == second["c"]
    assert repo.get_or_create_many([]) == {}


def test_title_get_or_create_is_stable(db_session: Session) -> None:
    """Resolving the same key twice yields the same row."""
    repo = TitleRepository(db_session)
    first = repo.get_or_create("v17")
    second = repo.get_or_create("v17")
    assert first.id == second.id
    assert repo.find_by_key("v18") is None
