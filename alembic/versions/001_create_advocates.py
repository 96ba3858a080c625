"""Create advocates table with search indexes

Revision ID: 001_create_advocates
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '001_create_advocates'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the advocates table.

    Creates:
    1. The table (specialties stored as JSONB in the "payload" column)
    2. Single-column and composite btree indexes for filters and sorting
    3. A GIN index on the specialties array
    """
    op.create_table(
        'advocates',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('first_name', sa.Text(), nullable=False),
        sa.Column('last_name', sa.Text(), nullable=False),
        sa.Column('city', sa.Text(), nullable=False),
        sa.Column('degree', sa.Text(), nullable=False),
        sa.Column(
            'payload',
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column('years_of_experience', sa.Integer(), nullable=False),
        sa.Column('phone_number', sa.BigInteger(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP')),
    )

    op.create_index('advocates_first_name_idx', 'advocates', ['first_name'])
    op.create_index('advocates_last_name_idx', 'advocates', ['last_name'])
    op.create_index('advocates_city_idx', 'advocates', ['city'])
    op.create_index('advocates_degree_idx', 'advocates', ['degree'])
    op.create_index('advocates_experience_idx', 'advocates', ['years_of_experience'])

    # Composite indexes for common sorting and filtering patterns
    op.create_index('advocates_name_idx', 'advocates', ['last_name', 'first_name'])
    op.create_index('advocates_city_experience_idx', 'advocates', ['city', 'years_of_experience'])
    op.create_index('advocates_degree_experience_idx', 'advocates', ['degree', 'years_of_experience'])

    op.create_index(
        'advocates_specialties_gin_idx',
        'advocates',
        ['payload'],
        postgresql_using='gin'
    )


def downgrade() -> None:
    """Drop the advocates table and its indexes."""
    op.drop_index('advocates_specialties_gin_idx', table_name='advocates')
    op.drop_index('advocates_degree_experience_idx', table_name='advocates')
    op.drop_index('advocates_city_experience_idx', table_name='advocates')
    op.drop_index('advocates_name_idx', table_name='advocates')
    op.drop_index('advocates_experience_idx', table_name='advocates')
    op.drop_index('advocates_degree_idx', table_name='advocates')
    op.drop_index('advocates_city_idx', table_name='advocates')
    op.drop_index('advocates_last_name_idx', table_name='advocates')
    op.drop_index('advocates_first_name_idx', table_name='advocates')
    op.drop_table('advocates')
