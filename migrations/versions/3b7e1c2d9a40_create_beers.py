"""create beers

Revision ID: 3b7e1c2d9a40
Revises:
Create Date: 2026-10-19 10:12:31.418207
"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3b7e1c2d9a40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

BEER_TYPES = ("LAGER", "MALZBIER", "WITBIER", "WEISS", "ALE", "IPA", "STOUT")


def upgrade() -> None:
    op.create_table(
        "beers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("brand", sa.String(length=200), nullable=False),
        sa.Column("max", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("type", sa.Enum(*BEER_TYPES, name="beer_type"), nullable=False),
        sa.CheckConstraint("quantity >= 0", name="ck_beers_quantity_non_negative"),
        sa.CheckConstraint("max > 0", name="ck_beers_max_positive"),
    )
    op.create_index("ix_beers_name", "beers", ["name"], unique=True)
    # El ORM gobierna el default de quantity
    with op.batch_alter_table("beers") as batch:
        batch.alter_column("quantity", server_default=None)


def downgrade() -> None:
    op.drop_index("ix_beers_name", table_name="beers")
    op.drop_table("beers")
    sa.Enum(name="beer_type").drop(op.get_bind(), checkfirst=True)
