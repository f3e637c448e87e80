"""Phase 2: Tours, participants, financials and the day-by-day itinerary

Revision ID: phase_2_001
Revises: phase_1_001
Create Date: 2026-09-09
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = 'phase_2_001'
down_revision: Union[str, None] = 'phase_1_001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('tours',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('client_name', sa.String(length=255), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='DRAFT'),
        sa.Column('start_location', sa.String(length=100), nullable=True),
        sa.Column('destination', sa.String(length=100), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tours_status_updated', 'tours', ['status', 'updated_at'])

    op.create_table('participant_summaries',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tour_id', sa.Uuid(), nullable=False),
        sa.Column('total_pax', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('boys', sa.Integer(), nullable=True),
        sa.Column('girls', sa.Integer(), nullable=True),
        sa.Column('non_veg', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['tour_id'], ['tours.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tour_id'),
    )

    op.create_table('tour_financials',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tour_id', sa.Uuid(), nullable=False),
        sa.Column('budget', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('profit_margin', sa.Numeric(precision=6, scale=2), nullable=False, server_default='0'),
        sa.Column('selling_price', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('total_collected', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['tour_id'], ['tours.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tour_id'),
    )

    # --- Itinerary ---
    op.create_table('itinerary_days',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tour_id', sa.Uuid(), nullable=False),
        sa.Column('day_number', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['tour_id'], ['tours.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_itinerary_days_tour_day', 'itinerary_days', ['tour_id', 'day_number'])

    op.create_table('itinerary_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('day_id', sa.Uuid(), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('cost_price', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('sales_price', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('hotel_id', sa.Uuid(), nullable=True),
        sa.Column('activity_id', sa.Uuid(), nullable=True),
        sa.Column('vehicle_id', sa.Uuid(), nullable=True),
        sa.Column('restaurant_id', sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(['day_id'], ['itinerary_days.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['hotel_id'], ['hotels.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['activity_id'], ['activities.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['vehicle_id'], ['vehicles.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['restaurant_id'], ['restaurants.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_itinerary_items_day_order', 'itinerary_items', ['day_id', 'order'])


def downgrade() -> None:
    op.drop_index('ix_itinerary_items_day_order', table_name='itinerary_items')
    op.drop_table('itinerary_items')
    op.drop_index('ix_itinerary_days_tour_day', table_name='itinerary_days')
    op.drop_table('itinerary_days')
    op.drop_table('tour_financials')
    op.drop_table('participant_summaries')
    op.drop_index('ix_tours_status_updated', table_name='tours')
    op.drop_table('tours')
