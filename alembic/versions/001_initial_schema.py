"""Initial schema: users, profiles, sub-resources and journals

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _credential_table(name: str, id_column: str) -> None:
    op.create_table(
        name,
        sa.Column(id_column, sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('institution', sa.String(length=255), nullable=False),
        sa.Column('start', sa.String(length=64), nullable=False),
        sa.Column('end', sa.String(length=64), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('cert_image', sa.String(length=2048), nullable=True),
        sa.PrimaryKeyConstraint(id_column, name=op.f(f'pk_{name}')),
    )
    op.create_index(op.f(f'ix_{name}_user_id'), name, ['user_id'], unique=False)


def upgrade() -> None:
    op.create_table(
        'pa_users',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_pa_users')),
    )
    op.create_index(op.f('ix_pa_users_email'), 'pa_users', ['email'], unique=True)

    op.create_table(
        'pa_profiles',
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('number', sa.String(length=64), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('profile_img', sa.String(length=2048), nullable=True),
        sa.Column('interests', sa.Text(), nullable=True),
        sa.Column('domain', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('user_id', name=op.f('pk_pa_profiles')),
    )

    op.create_table(
        'pa_skills',
        sa.Column('skill_id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('proficiency_level', sa.String(length=64), nullable=False),
        sa.Column('started_at', sa.String(length=64), nullable=False),
        sa.Column('last_used', sa.String(length=64), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('skill_id', name=op.f('pk_pa_skills')),
    )
    op.create_index(op.f('ix_pa_skills_user_id'), 'pa_skills', ['user_id'], unique=False)

    op.create_table(
        'pa_experience',
        sa.Column('experience_id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('company', sa.String(length=255), nullable=False),
        sa.Column('position', sa.String(length=255), nullable=False),
        sa.Column('start', sa.String(length=64), nullable=False),
        sa.Column('end', sa.String(length=64), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('experience_id', name=op.f('pk_pa_experience')),
    )
    op.create_index(op.f('ix_pa_experience_user_id'), 'pa_experience', ['user_id'], unique=False)

    _credential_table('pa_qualifications', 'qualification_id')
    _credential_table('pa_certificates', 'certificate_id')

    op.create_table(
        'pa_journals',
        sa.Column('journal_id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('head_version', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=64), nullable=False),
        sa.Column('summary', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('journal_id', name=op.f('pk_pa_journals')),
    )
    op.create_index(op.f('ix_pa_journals_user_id'), 'pa_journals', ['user_id'], unique=False)
    op.create_index(op.f('ix_pa_journals_status'), 'pa_journals', ['status'], unique=False)

    op.create_table(
        'pa_journal_entries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('journal_id', sa.String(length=36), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=512), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('attachments', sa.JSON(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ['journal_id'], ['pa_journals.journal_id'],
            name=op.f('fk_pa_journal_entries_journal_id_pa_journals'),
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_pa_journal_entries')),
        sa.UniqueConstraint('journal_id', 'version', name=op.f('uq_pa_journal_entries_journal_id')),
    )
    op.create_index(op.f('ix_pa_journal_entries_journal_id'), 'pa_journal_entries', ['journal_id'], unique=False)

    op.create_table(
        'pa_journal_terms',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('journal_id', sa.String(length=36), nullable=False),
        sa.Column('kind', sa.String(length=32), nullable=False),
        sa.Column('value', sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(
            ['journal_id'], ['pa_journals.journal_id'],
            name=op.f('fk_pa_journal_terms_journal_id_pa_journals'),
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_pa_journal_terms')),
        sa.UniqueConstraint('journal_id', 'kind', 'value', name=op.f('uq_pa_journal_terms_journal_id')),
    )
    op.create_index(op.f('ix_pa_journal_terms_journal_id'), 'pa_journal_terms', ['journal_id'], unique=False)
    op.create_index(op.f('ix_pa_journal_terms_value'), 'pa_journal_terms', ['value'], unique=False)


def downgrade() -> None:
    op.drop_table('pa_journal_terms')
    op.drop_table('pa_journal_entries')
    op.drop_table('pa_journals')
    op.drop_table('pa_certificates')
    op.drop_table('pa_qualifications')
    op.drop_table('pa_experience')
    op.drop_table('pa_skills')
    op.drop_table('pa_profiles')
    op.drop_index(op.f('ix_pa_users_email'), table_name='pa_users')
    op.drop_table('pa_users')
