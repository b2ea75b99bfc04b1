"""Create sleep, mood, readiness and volume landmark tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

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

AutoString = sqlmodel.sql.sqltypes.AutoString


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True, server_default=sa.text('(CURRENT_TIMESTAMP)')),
    ]


def upgrade() -> None:
    op.create_table('sleep_entries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', AutoString(length=64), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.Time(), nullable=True),
        sa.Column('end_time', sa.Time(), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('quality', sa.Float(), nullable=False),
        sa.Column('deep_sleep', sa.Integer(), nullable=True),
        sa.Column('rem_sleep', sa.Integer(), nullable=True),
        sa.Column('light_sleep', sa.Integer(), nullable=True),
        sa.Column('hrv', sa.Float(), nullable=True),
        sa.Column('resting_heart_rate', sa.Integer(), nullable=True),
        sa.Column('factors', sa.JSON(), nullable=True),
        sa.Column('source', AutoString(length=20), nullable=False, server_default='manual'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'date', name='uq_sleep_user_date'))
    op.create_index(op.f('ix_sleep_entries_user_id'), 'sleep_entries', ['user_id'])
    op.create_index(op.f('ix_sleep_entries_date'), 'sleep_entries', ['date'])

    op.create_table('mood_entries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', AutoString(length=64), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('time', sa.Time(), nullable=True),
        sa.Column('mood_level', sa.Float(), nullable=False),
        sa.Column('energy_level', sa.Float(), nullable=False),
        sa.Column('stress_level', sa.Float(), nullable=False),
        sa.Column('anxiety_level', sa.Float(), nullable=False),
        sa.Column('mental_clarity', sa.Float(), nullable=False),
        sa.Column('emotion', AutoString(length=50), nullable=True),
        sa.Column('factors', sa.JSON(), nullable=False),
        sa.Column('notes', AutoString(length=1000), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'date', name='uq_mood_user_date'))
    op.create_index(op.f('ix_mood_entries_user_id'), 'mood_entries', ['user_id'])
    op.create_index(op.f('ix_mood_entries_date'), 'mood_entries', ['date'])

    op.create_table('readiness_scores',
        sa.Column('id', AutoString(length=36), nullable=False),
        sa.Column('user_id', AutoString(length=64), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('overall_score', sa.Integer(), nullable=False),
        sa.Column('sleep_score', sa.Integer(), nullable=False),
        sa.Column('physical_score', sa.Integer(), nullable=False),
        sa.Column('mental_score', sa.Integer(), nullable=False),
        sa.Column('lifestyle_score', sa.Integer(), nullable=False),
        sa.Column('training_adjustment', AutoString(length=20), nullable=False),
        sa.Column('recommendations', sa.JSON(), nullable=False),
        sa.Column('components', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'date', name='uq_readiness_user_date'))
    op.create_index(op.f('ix_readiness_scores_user_id'), 'readiness_scores', ['user_id'])
    op.create_index(op.f('ix_readiness_scores_date'), 'readiness_scores', ['date'])

    op.create_table('volume_landmarks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', AutoString(length=64), nullable=False),
        sa.Column('muscle_group', AutoString(length=50), nullable=False),
        sa.Column('mev', sa.Float(), nullable=False),
        sa.Column('mav', sa.Float(), nullable=False),
        sa.Column('mrv', sa.Float(), nullable=False),
        sa.Column('current_volume', sa.Float(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'muscle_group', name='uq_landmark_user_muscle'))
    op.create_index(op.f('ix_volume_landmarks_user_id'), 'volume_landmarks', ['user_id'])


def downgrade() -> None:
    op.drop_index(op.f('ix_volume_landmarks_user_id'), table_name='volume_landmarks')
    op.drop_table('volume_landmarks')
    op.drop_index(op.f('ix_readiness_scores_date'), table_name='readiness_scores')
    op.drop_index(op.f('ix_readiness_scores_user_id'), table_name='readiness_scores')
    op.drop_table('readiness_scores')
    op.drop_index(op.f('ix_mood_entries_date'), table_name='mood_entries')
    op.drop_index(op.f('ix_mood_entries_user_id'), table_name='mood_entries')
    op.drop_table('mood_entries')
    op.drop_index(op.f('ix_sleep_entries_date'), table_name='sleep_entries')
    op.drop_index(op.f('ix_sleep_entries_user_id'), table_name='sleep_entries')
    op.drop_table('sleep_entries')
