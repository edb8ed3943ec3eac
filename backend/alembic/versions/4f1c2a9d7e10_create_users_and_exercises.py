"""create users and exercises

Revision ID: 4f1c2a9d7e10
Revises:
Create Date: 2026-10-19 10:12:41.318204

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9d7e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('username', sa.String(length=255), nullable=False),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    # no ondelete: users are never removed
    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(length=32), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('duration', sa.Float(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=False), nullable=False),
    )
    op.create_index('ix_exercises_user_id', 'exercises', ['user_id'])
    op.create_index('ix_exercises_date', 'exercises', ['date'])


def downgrade() -> None:
    op.drop_index('ix_exercises_date', table_name='exercises')
    op.drop_index('ix_exercises_user_id', table_name='exercises')
    op.drop_table('exercises')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
