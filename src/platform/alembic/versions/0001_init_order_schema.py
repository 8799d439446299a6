"""init_order_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- event, event_show, event_show_location, event_promotor, event_artist: event authoring
- order_rule_range_date, order_rule_day: per-event sales rules
- ticket_stock: per-show tier inventory (acquired never exceeds allocation)
- acquired_ticket: issued tickets, written by fulfillment, counted for entitlement
- ticket_order, order_item: customer orders
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name, sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False
    )


def upgrade() -> None:
    """Create all tables with final schema."""

    # ========== Event authoring ==========
    op.create_table(
        'event',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        _timestamp('created_at'),
        _timestamp('updated_at'),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'event_show',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('venue', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_event_show_event_id'), 'event_show', ['event_id'])

    op.create_table(
        'event_show_location',
        sa.Column('show_id', sa.String(length=64), nullable=False),
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('country', sa.String(length=100), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('formatted_address', sa.Text(), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint('show_id'),
    )
    op.create_index(
        op.f('ix_event_show_location_event_id'), 'event_show_location', ['event_id']
    )

    op.create_table(
        'event_promotor',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_event_promotor_event_id'), 'event_promotor', ['event_id'])

    op.create_table(
        'event_artist',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_event_artist_event_id'), 'event_artist', ['event_id'])

    # ========== Sales rules ==========
    op.create_table(
        'order_rule_range_date',
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('event_id'),
    )

    op.create_table(
        'order_rule_day',
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('day', sa.Integer(), nullable=False),
        sa.CheckConstraint('day BETWEEN 1 AND 7', name='ck_order_rule_day_day'),
        sa.PrimaryKeyConstraint('event_id', 'day'),
    )

    # ========== Inventory ==========
    op.create_table(
        'ticket_stock',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('show_id', sa.String(length=64), nullable=False),
        sa.Column('online_for', sa.String(length=64), nullable=True),
        sa.Column('tier', sa.String(length=20), nullable=False),
        sa.Column('allocation', sa.Integer(), nullable=False),
        sa.Column('acquired', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('price', sa.Float(), nullable=False),
        _timestamp('last_stock_update'),
        sa.CheckConstraint(
            'acquired >= 0 AND acquired <= allocation', name='ck_ticket_stock_acquired'
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_ticket_stock_event_id'), 'ticket_stock', ['event_id'])
    op.create_index(op.f('ix_ticket_stock_show_id'), 'ticket_stock', ['show_id'])

    op.create_table(
        'acquired_ticket',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('show_id', sa.String(length=64), nullable=False),
        sa.Column('ticket_stock_id', sa.String(length=64), nullable=False),
        sa.Column('order_id', sa.String(length=64), nullable=False),
        sa.Column('customer_id', sa.BigInteger(), nullable=False),
        _timestamp('created_at'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_acquired_ticket_event_id_customer_id',
        'acquired_ticket',
        ['event_id', 'customer_id'],
    )

    # ========== Orders ==========
    op.create_table(
        'ticket_order',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('payment_method', sa.String(length=20), nullable=False),
        sa.Column('transaction_id', sa.String(length=128), nullable=True),
        sa.Column('virtual_account', sa.String(length=64), nullable=True),
        sa.Column('status', sa.String(length=32), nullable=False),
        sa.Column('customer_id', sa.BigInteger(), nullable=False),
        sa.Column('customer_name', sa.String(length=255), nullable=False),
        sa.Column('customer_email', sa.String(length=255), nullable=False),
        sa.Column('tax_percentage', sa.Float(), nullable=False),
        sa.Column('service_charge_percentage', sa.Float(), nullable=False),
        sa.Column('discount_percentage', sa.Float(), nullable=False),
        sa.Column('service_charge', sa.Float(), nullable=False),
        sa.Column('tax', sa.Float(), nullable=False),
        sa.Column('discount', sa.Float(), nullable=False),
        sa.Column('subtotal', sa.Float(), nullable=False),
        sa.Column('total_amount', sa.Float(), nullable=False),
        _timestamp('created_at'),
        _timestamp('updated_at'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_ticket_order_customer_id'), 'ticket_order', ['customer_id'])
    op.create_index(op.f('ix_ticket_order_transaction_id'), 'ticket_order', ['transaction_id'])

    op.create_table(
        'order_item',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('order_id', sa.String(length=64), nullable=False),
        sa.Column('ticket_stock_id', sa.String(length=64), nullable=False),
        sa.Column('show_id', sa.String(length=64), nullable=False),
        sa.Column('event_id', sa.String(length=64), nullable=False),
        sa.Column('event_name', sa.String(length=255), nullable=False),
        sa.Column('show_venue', sa.String(length=255), nullable=False),
        sa.Column('tier', sa.String(length=20), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['order_id'], ['ticket_order.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_order_item_order_id'), 'order_item', ['order_id'])


def downgrade() -> None:
    for table in (
        'order_item',
        'ticket_order',
        'acquired_ticket',
        'ticket_stock',
        'order_rule_day',
        'order_rule_range_date',
        'event_artist',
        'event_promotor',
        'event_show_location',
        'event_show',
        'event',
    ):
        op.drop_table(table)
