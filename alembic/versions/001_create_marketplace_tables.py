"""Create marketplace tables for users, sellers, parts, searches, reviews and contacts

Revision ID: 001
Revises:
Create Date: 2025-09-14 00:00:00.000000

"""
from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column(
            'role',
            sa.Enum('buyer', 'seller', 'admin', name='user_role', native_enum=False),
            server_default='buyer',
            nullable=False
        ),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
        sa.UniqueConstraint('email')
    )

    op.create_table('sellers',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('shop_name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('address', sa.String(500), nullable=False),
        sa.Column('phone', sa.String(50), nullable=False),
        sa.Column('whatsapp', sa.String(50), nullable=True),
        sa.Column('location', sa.JSON(), nullable=True),
        sa.Column('verified', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('rating', sa.Numeric(3, 2), server_default='0', nullable=False),
        sa.Column('review_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id')
    )

    op.create_table('parts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('seller_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=True),
        sa.Column('vehicle_make', sa.String(100), nullable=True),
        sa.Column('vehicle_model', sa.String(100), nullable=True),
        sa.Column('vehicle_year', sa.String(50), nullable=True),
        sa.Column(
            'availability',
            sa.Enum('in_stock', 'low_stock', 'out_of_stock', name='part_availability', native_enum=False),
            server_default='in_stock',
            nullable=False
        ),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['seller_id'], ['sellers.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_parts_seller_id', 'parts', ['seller_id'])
    op.create_index('ix_parts_vehicle_make', 'parts', ['vehicle_make'])
    op.create_index('ix_parts_vehicle_model', 'parts', ['vehicle_model'])

    op.create_table('searches',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('vehicle_make', sa.String(100), nullable=True),
        sa.Column('vehicle_model', sa.String(100), nullable=True),
        sa.Column('vehicle_year', sa.String(50), nullable=True),
        sa.Column('part_name', sa.String(255), nullable=True),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_searches_user_id', 'searches', ['user_id'])

    op.create_table('reviews',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('seller_id', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Numeric(2, 1), nullable=False),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_reviews_rating_range'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['seller_id'], ['sellers.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_reviews_seller_id', 'reviews', ['seller_id'])

    op.create_table('contacts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('seller_id', sa.Integer(), nullable=False),
        sa.Column(
            'type',
            sa.Enum('whatsapp', 'call', 'profile_view', name='contact_type', native_enum=False),
            nullable=False
        ),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['seller_id'], ['sellers.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_contacts_seller_id', 'contacts', ['seller_id'])


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_index('ix_contacts_seller_id', table_name='contacts')
    op.drop_table('contacts')
    op.drop_index('ix_reviews_seller_id', table_name='reviews')
    op.drop_table('reviews')
    op.drop_index('ix_searches_user_id', table_name='searches')
    op.drop_table('searches')
    op.drop_index('ix_parts_vehicle_model', table_name='parts')
    op.drop_index('ix_parts_vehicle_make', table_name='parts')
    op.drop_index('ix_parts_seller_id', table_name='parts')
    op.drop_table('parts')
    op.drop_table('sellers')
    op.drop_table('users')
