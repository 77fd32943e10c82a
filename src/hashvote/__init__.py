"""Hashvote: identify software titles from crowd-voted file hashes."""

__version__ = "0.1.0"
