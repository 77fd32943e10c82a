"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create titles, hashes, vote counts and the vote ledger."""
    op.create_table(
        "title",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title_key", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("title_key"),
    )
    op.create_table(
        "hash_record",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("hash_value", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("hash_value"),
    )
    op.create_table(
        "vote_count",
        sa.Column("title_id", sa.Integer(), nullable=False),
        sa.Column("hash_id", sa.Integer(), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["title_id"], ["title.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["hash_id"], ["hash_record.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("title_id", "hash_id"),
    )
    op.create_index("ix_vote_count_hash_id", "vote_count", ["hash_id"])
    op.create_table(
        "vote_record",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("address", sa.BigInteger(), nullable=False),
        sa.Column("title_id", sa.Integer(), nullable=False),
        sa.Column("hashes", sa.JSON(), nullable=False),
        sa.ForeignKeyConstraint(["title_id"], ["title.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("address", "title_id", name="uq_vote_record_address_title"),
    )


def downgrade() -> None:
    """Drop every table created by ``upgrade``."""
    op.drop_table("vote_record")
    op.drop_index("ix_vote_count_hash_id", table_name="vote_count")
    op.drop_table("vote_count")
    op.drop_table("hash_record")
    op.drop_table("title")
