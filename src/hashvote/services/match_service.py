"""Infer the title that most likely produced a set of file hashes."""
from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy.orm import Session

from hashvote.core.errors import InvalidInputError, NotFoundError
from hashvote.repositories import HashTitleCount, VoteCountRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TitleScore:
    """Per-title tally across the hashes the title dominates."""

    hit_count: int = 0
    total_count: int = 0


def score_titles(rows: Iterable[HashTitleCount]) -> dict[str, TitleScore]:
    """Credit each hash to the title(s) holding its highest count.

    Tied titles all receive the hit. ``total_count`` sums a title's counts
    over the hashes it dominates only.
    """
    by_hash: dict[str, list[HashTitleCount]] = defaultdict(list)
    for row in rows:
        by_hash[row.hash_value].append(row)

    scores: dict[str, TitleScore] = {}
    for entries in by_hash.values():
        top = max(entry.count for entry in entries)
        if top <= 0:
            continue
        for entry in entries:
            if entry.count != top:
                continue
            score = scores.setdefault(entry.title_key, TitleScore())
            score.hit_count += 1
            score.total_count += entry.count
    return scores


def pick_winner(scores: dict[str, TitleScore]) -> str | None:
    """Highest hit count, then highest total count, then smallest title key."""
    if not scores:
        return None
    return min(
        scores,
        key=lambda key: (-scores[key].hit_count, -scores[key].total_count, key),
    )


class MatchService:
    """Answers best-match queries from the aggregated vote counts."""

    def __init__(self, session: Session) -> None:
        self.counts = VoteCountRepository(session)

    def query_best_match(self, hashes: Iterable[str]) -> str:
        """Return the key of the title that best matches ``hashes``.

        Raises:
            InvalidInputError: If no hashes were given.
            NotFoundError: If no stored vote references any of the hashes.
        """
        query = set(hashes)
        if not query:
            raise InvalidInputError("At least one hash is required")

        rows = self.counts.counts_for_hashes(query)
        winner = pick_winner(score_titles(rows))
        logger.debug("Match over %d hashes, %d rows: %s", len(query), len(rows), winner)
        if winner is None:
            raise NotFoundError("No title matches the given hashes")
        return winner
