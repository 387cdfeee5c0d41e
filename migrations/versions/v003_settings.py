"""Key-value settings (persisted view state)

Version: 3
Revises: 2

"""
import sqlalchemy as sa


version = 3
description = 'settings family'


def upgrade(op):
    op.create_table(
        'settings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('key', sa.String(length=50), nullable=False, unique=True),
        sa.Column('value', sa.String(length=200), nullable=True),
    )
