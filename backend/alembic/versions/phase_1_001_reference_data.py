"""Phase 1: Geography (countries, locations, routes) and priced resources

Revision ID: phase_1_001
Revises:
Create Date: 2026-09-02
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = 'phase_1_001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('countries',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )

    op.create_table('locations',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('country_id', sa.Uuid(), nullable=True),
        sa.Column('type', sa.String(length=20), nullable=False, server_default='DESTINATION'),
        sa.Column('altitude', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['country_id'], ['countries.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )

    # --- Known routes between locations ---
    op.create_table('routes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('origin_id', sa.Uuid(), nullable=False),
        sa.Column('destination_id', sa.Uuid(), nullable=False),
        sa.Column('distance_km', sa.Integer(), nullable=True),
        sa.Column('duration_mins', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['origin_id'], ['locations.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['destination_id'], ['locations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('origin_id', 'destination_id', name='uq_routes_origin_destination'),
    )

    op.create_table('route_stopovers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('route_id', sa.Uuid(), nullable=False),
        sa.Column('location_id', sa.Uuid(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('is_lunch_stop', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(['route_id'], ['routes.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_route_stopovers_route', 'route_stopovers', ['route_id'])

    # --- Priced resources ---
    op.create_table('hotels',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('location_id', sa.Uuid(), nullable=True),
        sa.Column('contact_info', sa.String(length=200), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id']),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table('hotel_room_rates',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('hotel_id', sa.Uuid(), nullable=False),
        sa.Column('room_type', sa.String(length=100), nullable=False),
        sa.Column('meal_plan', sa.String(length=20), nullable=False),
        sa.Column('inclusions', sa.Text(), nullable=True),
        sa.Column('cost_price', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('sales_price', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['hotel_id'], ['hotels.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table('vehicles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('plate_number', sa.String(length=50), nullable=True),
        sa.Column('cost_per_day', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('sales_per_day', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table('activities',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('location_id', sa.Uuid(), nullable=True),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('cost_price', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('sales_price', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id']),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table('restaurants',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('location_id', sa.Uuid(), nullable=True),
        sa.Column('cuisine', sa.String(length=100), nullable=True),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('cost_price', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('sales_price', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id']),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    op.drop_table('restaurants')
    op.drop_table('activities')
    op.drop_table('vehicles')
    op.drop_table('hotel_room_rates')
    op.drop_table('hotels')
    op.drop_index('idx_route_stopovers_route', table_name='route_stopovers')
    op.drop_table('route_stopovers')
    op.drop_table('routes')
    op.drop_table('locations')
    op.drop_table('countries')
