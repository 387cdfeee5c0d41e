"""Weekly schedule family and ingredient type index

Version: 2
Revises: 1

"""
import sqlalchemy as sa


version = 2
description = 'schedule family, ingredient.type index'


def upgrade(op):
    op.create_table(
        'schedule',
        sa.Column('day', sa.String(length=9), primary_key=True),
        sa.Column('easy_id', sa.Integer(), nullable=False),
        sa.Column('less_easy_id', sa.Integer(), nullable=False),
    )
    op.create_index('ix_ingredient_type', 'ingredient', ['type'])
