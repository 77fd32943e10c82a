"""Business logic for submitting and listing client votes."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy.orm import Session

from hashvote.core.address import format_ipv4, parse_ipv4
from hashvote.core.errors import InvalidInputError
from hashvote.core.pagination import normalize_page
from hashvote.core.settings import settings
from hashvote.db.session import atomic
from hashvote.models import VoteRecord
from hashvote.repositories import (
    HashRepository,
    TitleRepository,
    VoteCountRepository,
    VoteRepository,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class VotePage:
    """One page of a client's vote records."""

    items: list[VoteRecord]
    total: int
    page: int
    page_size: int
    ip: str


def require_title_key(title_key: str) -> str:
    """Reject empty or oversized title keys."""
    if not title_key or not title_key.strip():
        raise InvalidInputError("Title key must not be empty")
    if len(title_key) > settings.title_key_max_length:
        raise InvalidInputError(
            f"Title key longer than {settings.title_key_max_length} characters"
        )
    return title_key


class VoteService:
    """Applies client submissions to the vote ledger and the vote counts."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.titles = TitleRepository(session)
        self.hashes = HashRepository(session)
        self.counts = VoteCountRepository(session)
        self.votes = VoteRepository(session)

    def submit(self, client_ip: str, title_key: str, hashes: Iterable[str]) -> VoteRecord:
        """Record ``hashes`` as the client's current vote for ``title_key``.

        The difference against the client's previous submission is applied
        to the vote counts: hashes no longer present lose one vote, new
        hashes gain one. Counts and the ledger change in one transaction.
        Submitting the same set again changes nothing.

        Args:
            client_ip: IPv4 address identifying the client.
            title_key: External key of the voted title.
            hashes: Sanitised hash values (trimmed, non-empty).

        Returns:
            The stored vote record.

        Raises:
            InvalidInputError: Empty hash set, empty title key or non-IPv4 client.
            StorageFailureError: The transaction did not commit; nothing was applied.
        """
        address = parse_ipv4(client_ip)
        require_title_key(title_key)
        new_hashes = set(hashes)
        if not new_hashes:
            raise InvalidInputError("At least one hash is required")

        with atomic(self.session):
            title = self.titles.get_or_create(title_key)
            existing = self.votes.find(address, title_key)
            old_hashes = set(existing.hashes) if existing is not None else set()

            if existing is not None and new_hashes == old_hashes:
                logger.debug("Vote unchanged for %s on %s", client_ip, title_key)
                return existing

            to_remove = old_hashes - new_hashes
            to_add = new_hashes - old_hashes
            hash_ids = self.hashes.get_or_create_many(to_remove | to_add)

            deltas = dict.fromkeys(to_remove, -1)
            deltas.update(dict.fromkeys(to_add, +1))
            # Rows are touched in hash id order so concurrent submissions lock alike.
            for value in sorted(deltas, key=hash_ids.__getitem__):
                self.counts.apply_delta(title.id, hash_ids[value], deltas[value])

            record = self.votes.upsert(address, title, new_hashes)

        logger.debug(
            "Vote applied for %s on %s: +%d -%d",
            client_ip,
            title_key,
            len(to_add),
            len(to_remove),
        )
        return record

    def list_votes(self, client_ip: str, page: int = 1, page_size: int = 0) -> VotePage:
        """Return the client's vote records, oldest first."""
        address = parse_ipv4(client_ip)
        paging = normalize_page(page, page_size, settings.votes_page_size)
        items, total = self.votes.list_by_client(address, paging.page, paging.page_size)
        return VotePage(
            items=items,
            total=total,
            page=paging.page,
            page_size=paging.page_size,
            ip=format_ipv4(address),
        )
