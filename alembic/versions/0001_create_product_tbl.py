"""create product_tbl

Revision ID: 0001_create_product_tbl
Revises: 
Create Date: 2026-10-17 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

revision = '0001_create_product_tbl'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'product_tbl',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=False),
        sa.Column('price', sa.Numeric(19, 2), nullable=False),
        sa.CheckConstraint('price >= 0.01', name='ck_product_tbl_price_min'),
    )
    op.create_index('ix_product_tbl_id', 'product_tbl', ['id'])


def downgrade():
    op.drop_index('ix_product_tbl_id', table_name='product_tbl')
    op.drop_table('product_tbl')
