"""Paging parameter normalisation shared by the listing operations."""

from __future__ import annotations

from typing import NamedTuple

from hashvote.core.settings import settings


class PageRequest(NamedTuple):
    """Normalised 1-based page number and page size."""

    page: int
    page_size: int


def normalize_page(page: int, page_size: int, default_size: int) -> PageRequest:
    """Clamp paging input to ``page >= 1`` and ``1 <= page_size <= max_page_size``.

    A non-positive ``page_size`` falls back to ``default_size``.
    """
    page = page if page > 0 else 1
    page_size = page_size if page_size > 0 else default_size
    page_size = max(1, min(page_size, settings.max_page_size))
    return PageRequest(page, page_size)
