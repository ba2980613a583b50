"""create orders table

Revision ID: 0001_create_orders
Revises: 
Create Date: 2026-10-18 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

revision = '0001_create_orders'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('customer_name', sa.String(length=255), nullable=False),
        sa.Column('product', sa.String(length=255), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('order_date', sa.String(length=10), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint('quantity > 0', name='ck_orders_quantity_pos'),
        sa.CheckConstraint('amount > 0', name='ck_orders_amount_pos'),
        sa.CheckConstraint(
            "status IN ('pending', 'processing', 'completed', 'cancelled')",
            name='ck_orders_status_enum',
        ),
    )
    op.create_index('ix_orders_order_date_id', 'orders', ['order_date', 'id'])


def downgrade():
    op.drop_index('ix_orders_order_date_id', table_name='orders')
    op.drop_table('orders')
