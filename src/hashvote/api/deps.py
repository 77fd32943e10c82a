"""Shared API dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from hashvote.core.settings import settings
from hashvote.db.session import get_db

LOOPBACK = "127.0.0.1"

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_client_ip(request: Request) -> str:
    """Return the address that identifies the calling client.

    ``X-Forwarded-For`` is honoured only when ``settings.trust_forwarded_for``
    is on; its first entry is the original client. IPv4-mapped IPv6 and
    non-IPv4 values are left for the vote core to map or reject.
    """
    if settings.trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for", "")
        first = forwarded.split(",", 1)[0].strip()
        if first:
            return first

    host = request.client.host if request.client else None
    return host or LOOPBACK


# Type alias for client address dependency
ClientIpDep = Annotated[str, Depends(get_client_ip)]
