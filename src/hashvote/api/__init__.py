"""HTTP API for the Hashvote application."""
