"""Error kinds surfaced by the vote core to its callers."""

from __future__ import annotations


class HashvoteError(Exception):
    """Base exception for Hashvote core errors."""


class InvalidInputError(HashvoteError, ValueError):
    """Raised before any storage access when the caller's input is unusable.

    Covers an empty hash set on submission or query, an empty title key and a
    client identity that is not an IPv4 address.
    """


class NotFoundError(HashvoteError, LookupError):
    """Raised when a title does not exist or a match query has no qualifying hits."""


class StorageFailureError(HashvoteError, RuntimeError):
    """Raised when a transaction could not commit.

    The whole operation was rolled back; retrying it in full is safe.
    """
