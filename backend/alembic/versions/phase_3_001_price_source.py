"""Phase 3: Record which field owns the selling price (margin slider or manual entry)

Revision ID: phase_3_001
Revises: phase_2_001
Create Date: 2026-09-23
"""
from alembic import op
import sqlalchemy as sa

revision = "phase_3_001"
down_revision = "phase_2_001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column(
        "tour_financials",
        sa.Column("price_source", sa.String(length=10), nullable=False, server_default="margin"),
    )
    # Existing non-zero prices were entered before margins drove pricing; keep them pinned
    op.execute("UPDATE tour_financials SET price_source = 'manual' WHERE selling_price > 0")


def downgrade() -> None:
    op.drop_column("tour_financials", "price_source")
