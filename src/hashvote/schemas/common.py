"""Shared Pydantic schemas and validators for API payloads."""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


def sanitize_hashes(values: list[str]) -> list[str]:
    """Trim entries, drop blank ones and de-duplicate (exact, case-sensitive).

    First-seen order is preserved.
    """
    seen: dict[str, None] = {}
    for value in values:
        trimmed = value.strip()
        if trimmed:
            seen.setdefault(trimmed, None)
    return list(seen)


class HashSet(BaseModel):
    """Request body carrying a list of file hashes."""

    # Missing and empty lists both reach the services, which reject them.
    hashes: list[str] = Field(
        default_factory=list,
        description="File hashes found in the installation.",
    )

    @field_validator("hashes")
    @classmethod
    def _sanitize(cls, value: list[str]) -> list[str]:
        return sanitize_hashes(value)


class PageMeta(BaseModel):
    """Paging fields shared by list responses."""

    total: int
    page: int
    page_size: int
