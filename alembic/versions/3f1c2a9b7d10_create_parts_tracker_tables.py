"""create_parts_tracker_tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TRANSPORT_STATUSES = ('Pending', 'In Transit', 'In Storage', 'Finished')
USER_ROLES = ('Admin', 'Mechanic', 'Logistic')


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema - Create teams, users, carriers, addresses, transports, packages, car parts."""

    op.create_table(
        'teams',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('country_iso', sa.String(length=3), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )

    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('role', sa.Enum(*USER_ROLES, name='user_role_enum'), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('team_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index('ix_users_email', 'users', ['email'])
    op.create_index('ix_users_team_id', 'users', ['team_id'])

    op.create_table(
        'transport_companies',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )

    op.create_table(
        'addresses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('street_name', sa.String(), nullable=False),
        sa.Column('city_name', sa.String(), nullable=False),
        sa.Column('country_iso', sa.String(length=3), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'transports',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('company_id', sa.Uuid(), nullable=False),
        sa.Column('departure_address_id', sa.Uuid(), nullable=False),
        sa.Column('destination_address_id', sa.Uuid(), nullable=False),
        sa.Column('departure_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('arrival_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            'status',
            sa.Enum(*TRANSPORT_STATUSES, name='transport_status_enum'),
            nullable=False,
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(['company_id'], ['transport_companies.id']),
        sa.ForeignKeyConstraint(['departure_address_id'], ['addresses.id']),
        sa.ForeignKeyConstraint(['destination_address_id'], ['addresses.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_transports_status', 'transports', ['status'])

    op.create_table(
        'packages',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('transport_id', sa.Uuid(), nullable=False),
        sa.Column('team_id', sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['transport_id'], ['transports.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_packages_transport_id', 'packages', ['transport_id'])
    op.create_index('ix_packages_team_id', 'packages', ['team_id'])

    op.create_table(
        'car_parts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('package_id', sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['package_id'], ['packages.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_car_parts_package_id', 'car_parts', ['package_id'])


def downgrade() -> None:
    """Downgrade schema - Drop all parts tracker tables."""
    op.drop_index('ix_car_parts_package_id', table_name='car_parts')
    op.drop_table('car_parts')
    op.drop_index('ix_packages_team_id', table_name='packages')
    op.drop_index('ix_packages_transport_id', table_name='packages')
    op.drop_table('packages')
    op.drop_index('ix_transports_status', table_name='transports')
    op.drop_table('transports')
    op.drop_table('addresses')
    op.drop_table('transport_companies')
    op.drop_index('ix_users_team_id', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
    op.drop_table('teams')
    sa.Enum(name='transport_status_enum').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='user_role_enum').drop(op.get_bind(), checkfirst=True)
