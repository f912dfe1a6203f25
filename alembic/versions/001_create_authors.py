"""Create authors table.

Revision ID: 001_authors
Revises: None
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_authors"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "authors",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("family_name", sa.String(100), nullable=True),
        sa.Column("date_of_birth", sa.Date, nullable=False),
        sa.Column("date_of_death", sa.Date, nullable=False),
    )
    op.create_index("ix_authors_family_name", "authors", ["family_name"])


def downgrade() -> None:
    op.drop_index("ix_authors_family_name", table_name="authors")
    op.drop_table("authors")
