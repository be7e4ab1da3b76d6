"""initial_schema

Revision ID: 4f2a9c71d0b3
Revises:
Create Date: 2026-10-19 10:12:40.318275

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f2a9c71d0b3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all application tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('credits', sa.Integer, nullable=False, server_default='0'),
        sa.Column('subscription_status', sa.String(40), nullable=True),
        sa.Column('subscription_plan', sa.String(40), nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=False),
    )

    op.create_table(
        'jobs',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('company', sa.String(255), nullable=False),
        sa.Column('location', sa.String(255), nullable=False, server_default=''),
        sa.Column('description', sa.Text, nullable=False, server_default=''),
        sa.Column('requirements', sa.Text, nullable=False, server_default=''),
        sa.Column('salary', sa.JSON, nullable=True),
        sa.Column('application_url', sa.Text, nullable=False, server_default=''),
        sa.Column('source', sa.String(40), nullable=False, server_default='google'),
        sa.Column('created_at', sa.DateTime, nullable=False),
    )

    op.create_table(
        'resumes',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('content', sa.Text, nullable=False, server_default=''),
        sa.Column('format', sa.String(40), nullable=False, server_default='standard'),
        sa.Column('version', sa.Integer, nullable=False, server_default='1'),
        sa.Column('analysis', sa.JSON, nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=False),
    )

    op.create_table(
        'job_applications',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('job_id', sa.String(36), sa.ForeignKey('jobs.id'), nullable=False),
        sa.Column('resume_id', sa.String(36), sa.ForeignKey('resumes.id'), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='applied'),
        sa.Column('notes', sa.Text, nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=False),
        sa.UniqueConstraint('user_id', 'job_id', name='uq_job_applications_user_job'),
    )

    op.create_table(
        'interviews',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('job_application_id', sa.String(36), sa.ForeignKey('job_applications.id'), nullable=False),
        sa.Column('type', sa.String(40), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False),
    )

    op.create_table(
        'interview_questions',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('interview_id', sa.String(36), sa.ForeignKey('interviews.id'), nullable=False),
        sa.Column('position', sa.Integer, nullable=False, server_default='0'),
        sa.Column('question', sa.Text, nullable=False),
        sa.Column('category', sa.String(100), nullable=False, server_default=''),
        sa.Column('difficulty', sa.String(10), nullable=False, server_default='medium'),
        sa.Column('answer', sa.Text, nullable=True),
        sa.Column('feedback', sa.Text, nullable=True),
        sa.Column('score', sa.Float, nullable=True),
    )

    op.create_table(
        'linkedin_profiles',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), unique=True, nullable=False),
        sa.Column('headline', sa.Text, nullable=False, server_default=''),
        sa.Column('summary', sa.Text, nullable=False, server_default=''),
        sa.Column('sections', sa.JSON, nullable=False),
        sa.Column('keywords', sa.JSON, nullable=False),
        sa.Column('optimization_score', sa.Float, nullable=False, server_default='0.0'),
        sa.Column('updated_at', sa.DateTime, nullable=False),
    )

    op.create_table(
        'interview_guides',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('job_id', sa.String(36), sa.ForeignKey('jobs.id'), nullable=True),
        sa.Column('resume_id', sa.String(36), sa.ForeignKey('resumes.id'), nullable=True),
        sa.Column('job_title', sa.String(255), nullable=False),
        sa.Column('company_name', sa.String(255), nullable=False),
        sa.Column('content', sa.JSON, nullable=False),
        sa.Column('used_fallback', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime, nullable=False),
        sa.Column('updated_at', sa.DateTime, nullable=False),
    )


def downgrade() -> None:
    """Drop all application tables."""
    op.drop_table('interview_guides')
    op.drop_table('linkedin_profiles')
    op.drop_table('interview_questions')
    op.drop_table('interviews')
    op.drop_table('job_applications')
    op.drop_table('resumes')
    op.drop_table('jobs')
    op.drop_table('users')
