"""create_teams_and_members

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 10:00:00.000000

팀/회원 테이블 생성: teams, members.
Create the teams and members tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # teams — 팀 (Teams)
    op.create_table(
        'teams',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # members — 회원, 팀은 선택 (Members with an optional team)
    op.create_table(
        'members',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('username', sa.String(255), nullable=True),
        sa.Column('age', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('team_id', sa.Uuid(), sa.ForeignKey('teams.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # 회원 인덱스 — Member indexes (team join, page order)
    op.create_index('ix_members_team_id', 'members', ['team_id'])
    op.create_index('ix_members_created_at', 'members', ['created_at', 'id'])


def downgrade() -> None:
    op.drop_index('ix_members_created_at', table_name='members')
    op.drop_index('ix_members_team_id', table_name='members')
    op.drop_table('members')
    op.drop_table('teams')
