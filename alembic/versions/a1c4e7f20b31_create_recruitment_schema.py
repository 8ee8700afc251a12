"""create_recruitment_schema

Revision ID: a1c4e7f20b31
Revises:
Create Date: 2026-10-17 10:00:00.000000

초기 스키마:
1. site_users, job_skills, user_job_skills — 사용자 및 스킬
2. job_postings, job_posting_skills — 채용 공고
3. categories, posts — 게시글 (단일 테이블 상속, post_type 구분자)
4. recruitment_users — 모집 신청
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c4e7f20b31'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ── 1. 사용자 및 스킬 ──
    op.create_table('site_users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('introduction', sa.Text(), nullable=True),
        sa.Column('job', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_table('job_skills',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('code', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table('user_job_skills',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('job_skill_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['site_users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['job_skill_id'], ['job_skills.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('user_id', 'job_skill_id'),
    )

    # ── 2. 채용 공고 ──
    op.create_table('job_postings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('subject', sa.String(length=255), nullable=False),
        sa.Column('url', sa.String(length=500), nullable=True),
        sa.Column('company_name', sa.String(length=255), nullable=False),
        sa.Column('company_link', sa.String(length=500), nullable=True),
        sa.Column('posted_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('open_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('close_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('experience_level_code', sa.Integer(), nullable=True),
        sa.Column('experience_level_name', sa.String(length=100), nullable=True),
        sa.Column('require_educate_code', sa.Integer(), nullable=True),
        sa.Column('require_educate_name', sa.String(length=100), nullable=True),
        sa.Column('salary_code', sa.Integer(), nullable=True),
        sa.Column('salary_name', sa.String(length=100), nullable=True),
        sa.Column('apply_cnt', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table('job_posting_skills',
        sa.Column('job_posting_id', sa.Integer(), nullable=False),
        sa.Column('job_skill_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['job_posting_id'], ['job_postings.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['job_skill_id'], ['job_skills.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('job_posting_id', 'job_skill_id'),
    )

    # ── 3. 게시글 ──
    op.create_table('categories',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table('posts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('subject', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('post_type', sa.String(length=30), nullable=False),
        sa.Column('recruitment_closing_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('num_of_applicants', sa.Integer(), nullable=True),
        sa.Column('recruitment_status', sa.String(length=20), nullable=True),
        sa.Column('job_posting_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['author_id'], ['site_users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id']),
        sa.ForeignKeyConstraint(['job_posting_id'], ['job_postings.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_posts_recruitment_status_closing', 'posts', ['recruitment_status', 'recruitment_closing_date'])

    # ── 4. 모집 신청 ──
    op.create_table('recruitment_users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('post_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['post_id'], ['posts.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['site_users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_recruitment_users_post_id', 'recruitment_users', ['post_id'])
    op.create_index('ix_recruitment_users_user_id', 'recruitment_users', ['user_id'])


def downgrade() -> None:
    op.drop_index('ix_recruitment_users_user_id', table_name='recruitment_users')
    op.drop_index('ix_recruitment_users_post_id', table_name='recruitment_users')
    op.drop_table('recruitment_users')
    op.drop_index('ix_posts_recruitment_status_closing', table_name='posts')
    op.drop_table('posts')
    op.drop_table('categories')
    op.drop_table('job_posting_skills')
    op.drop_table('job_postings')
    op.drop_table('user_job_skills')
    op.drop_table('job_skills')
    op.drop_table('site_users')
