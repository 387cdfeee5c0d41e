"""Core families: ingredient, collection, quantity

Version: 1
Revises: (none)

"""
import sqlalchemy as sa


version = 1
description = 'ingredient, collection and quantity families'


def upgrade(op):
    op.create_table(
        'ingredient',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('description', sa.String(length=200), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=True),
        sa.Column('unit', sa.String(length=20), nullable=True),
        sa.Column('storage', sa.String(length=50), nullable=True),
    )
    op.create_table(
        'collection',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('description', sa.String(length=200), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=True),
        sa.Column('method_basic', sa.Text(), nullable=True),
        sa.Column('method_detailed', sa.Text(), nullable=True),
    )
    op.create_index('ix_collection_type', 'collection', ['type'])
    # No foreign keys: orphaned quantities are tolerated by readers
    op.create_table(
        'quantity',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('collection_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.JSON(), nullable=True),
    )
    op.create_index('ix_quantity_collection_id', 'quantity', ['collection_id'])
    op.create_index('ix_quantity_ingredient_id', 'quantity', ['ingredient_id'])
