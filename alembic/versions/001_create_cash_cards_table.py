"""Create cash_cards table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `cash_cards` table backing the /cashcards resource.
How:   BIGINT identity primary key (INTEGER on SQLite) and a double precision amount.

Rollback: downgrade() drops the table entirely (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the cash_cards table. Column docs live in cashcard/models/cash_card.py."""
    op.create_table(
        "cash_cards",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            autoincrement=True,
            nullable=False,
            comment="Store-assigned identifier",
        ),
        sa.Column(
            "amount",
            sa.Double(),
            nullable=False,
            comment="Card balance",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop the cash_cards table. All cash card data is lost."""
    op.drop_table("cash_cards")
