"""add_storages_and_descriptions

Revision ID: 8c2e4f1a6b35
Revises: 3f1c2a9b7d10
Create Date: 2026-10-19 14:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8c2e4f1a6b35'
down_revision: Union[str, Sequence[str], None] = '3f1c2a9b7d10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema - Add team/carrier descriptions and the storages table."""
    with op.batch_alter_table('teams') as batch_op:
        batch_op.add_column(sa.Column('description', sa.Text(), nullable=True))
    with op.batch_alter_table('transport_companies') as batch_op:
        batch_op.add_column(sa.Column('description', sa.Text(), nullable=True))

    op.create_table(
        'storages',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('address_id', sa.Uuid(), nullable=False),
        sa.Column('team_id', sa.Uuid(), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['address_id'], ['addresses.id']),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_storages_team_id', 'storages', ['team_id'])


def downgrade() -> None:
    """Downgrade schema - Drop storages and description columns."""
    op.drop_index('ix_storages_team_id', table_name='storages')
    op.drop_table('storages')
    with op.batch_alter_table('transport_companies') as batch_op:
        batch_op.drop_column('description')
    with op.batch_alter_table('teams') as batch_op:
        batch_op.drop_column('description')
