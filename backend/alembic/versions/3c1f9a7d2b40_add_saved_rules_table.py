"""add_saved_rules_table

Revision ID: 3c1f9a7d2b40
Revises:
Create Date: 2026-10-19 10:12:41.208113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f9a7d2b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema - Create saved_rules table."""
    conn = op.get_bind()
    inspector = sa.inspect(conn)

    if not inspector.has_table('saved_rules'):
        op.create_table(
            'saved_rules',
            sa.Column('id', sa.String(length=64), nullable=False),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('nodes', sa.JSON(), nullable=False),
            sa.Column('edges', sa.JSON(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )


def downgrade() -> None:
    """Downgrade schema - Drop saved_rules table."""
    op.drop_table('saved_rules')
