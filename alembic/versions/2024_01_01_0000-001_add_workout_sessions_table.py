"""Add workout_sessions table

Revision ID: 001
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create workout_sessions table."""
    op.create_table('workout_sessions',
        sa.Column('id', sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('muscle_groups', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_sessions_date'), 'workout_sessions', ['date'], unique=False)


def downgrade() -> None:
    """Drop workout_sessions table."""
    op.drop_index(op.f('ix_workout_sessions_date'), table_name='workout_sessions')
    op.drop_table('workout_sessions')
