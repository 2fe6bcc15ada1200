"""Create review_entries table for spaced-repetition entries."""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261012_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "review_entries",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("category", sa.String(length=30), nullable=False, server_default=sa.text("'None'")),
        sa.Column("recall", sa.Float(), nullable=False, server_default=sa.text("-1")),
        sa.Column("interval", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("review_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_review", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_review_entries_review_date", "review_entries", ["review_date"])


def downgrade() -> None:
    op.drop_index("ix_review_entries_review_date", table_name="review_entries")
    op.drop_table("review_entries")
