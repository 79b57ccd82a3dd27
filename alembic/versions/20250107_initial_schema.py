"""Initial schema for legal cases and users

Revision ID: 001_initial
Revises:
Create Date: 2025-01-07 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create legal_case, user and user_roles tables."""
    op.create_table(
        'legal_case',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('case_number', sa.String(length=20), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column(
            'status',
            sa.Enum('NEW', 'IN_PROGRESS', 'ON_HOLD', 'RESOLVED', 'CLOSED', name='casestatus'),
            nullable=False,
        ),
        sa.Column('created_date', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_legal_case_case_number'), 'legal_case', ['case_number'], unique=True)
    op.create_index(op.f('ix_legal_case_status'), 'legal_case', ['status'], unique=False)

    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_username'), 'user', ['username'], unique=True)

    op.create_table(
        'user_roles',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('role', sa.String(length=50), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('user_id', 'role'),
    )


def downgrade() -> None:
    """Drop all tables and indexes."""
    op.drop_table('user_roles')
    op.drop_index(op.f('ix_user_username'), table_name='user')
    op.drop_table('user')
    op.drop_index(op.f('ix_legal_case_status'), table_name='legal_case')
    op.drop_index(op.f('ix_legal_case_case_number'), table_name='legal_case')
    op.drop_table('legal_case')

    # Drop enum type (PostgreSQL only)
    # SQLite will ignore this
    sa.Enum(name='casestatus').drop(op.get_bind(), checkfirst=True)
