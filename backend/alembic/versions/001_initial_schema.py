"""Initial schema - profile, skills, projects, project_skills, work_experiences, educations

Revision ID: 001_initial
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from backend.app.core.config import (
    EMPLOYMENT_TYPES,
    PROFICIENCY_LEVELS,
    PROJECT_STATUSES,
    SKILL_CATEGORIES,
)

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("title", sa.String(100), nullable=True),
        sa.Column("location", sa.String(100), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("website", sa.String(512), nullable=True),
        sa.Column("github_url", sa.String(512), nullable=True),
        sa.Column("linkedin_url", sa.String(512), nullable=True),
        sa.Column("twitter_url", sa.String(512), nullable=True),
        sa.Column("profile_image_url", sa.String(512), nullable=True),
        sa.Column("resume_url", sa.String(512), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_profiles_id"), "profiles", ["id"], unique=False)
    op.create_index(op.f("ix_profiles_email"), "profiles", ["email"], unique=True)
    op.create_index(op.f("ix_profiles_deleted_at"), "profiles", ["deleted_at"], unique=False)

    op.create_table(
        "skills",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("category", sa.Enum(*SKILL_CATEGORIES, name="skill_category"), nullable=False),
        sa.Column(
            "proficiency_level",
            sa.Enum(*PROFICIENCY_LEVELS, name="proficiency_level"),
            nullable=False,
        ),
        sa.Column("years_of_experience", sa.Integer(), nullable=True),
        sa.Column("is_featured", sa.Boolean(), nullable=False),
        sa.Column("icon_url", sa.String(512), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index(op.f("ix_skills_id"), "skills", ["id"], unique=False)
    op.create_index(op.f("ix_skills_category"), "skills", ["category"], unique=False)
    op.create_index(op.f("ix_skills_proficiency_level"), "skills", ["proficiency_level"], unique=False)
    op.create_index(op.f("ix_skills_is_featured"), "skills", ["is_featured"], unique=False)
    op.create_index(op.f("ix_skills_deleted_at"), "skills", ["deleted_at"], unique=False)

    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("short_description", sa.String(255), nullable=True),
        sa.Column("project_url", sa.String(512), nullable=True),
        sa.Column("github_url", sa.String(512), nullable=True),
        sa.Column("demo_url", sa.String(512), nullable=True),
        sa.Column("image_url", sa.String(512), nullable=True),
        sa.Column("status", sa.Enum(*PROJECT_STATUSES, name="project_status"), nullable=False),
        sa.Column("priority", sa.Integer(), nullable=False),
        sa.Column("is_featured", sa.Boolean(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    for column in ("id", "profile_id", "status", "priority", "is_featured", "deleted_at"):
        op.create_index(op.f(f"ix_projects_{column}"), "projects", [column], unique=False)

    op.create_table(
        "project_skills",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column("skill_id", sa.Integer(), nullable=False),
        sa.Column(
            "proficiency_used",
            sa.Enum(*PROFICIENCY_LEVELS, name="proficiency_used"),
            nullable=True,
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["skill_id"], ["skills.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("project_id", "skill_id", name="uq_project_skills_project_skill"),
    )
    for column in ("id", "project_id", "skill_id", "deleted_at"):
        op.create_index(op.f(f"ix_project_skills_{column}"), "project_skills", [column], unique=False)

    op.create_table(
        "work_experiences",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("company_name", sa.String(100), nullable=False),
        sa.Column("position", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("responsibilities", sa.JSON(), nullable=True),
        sa.Column("achievements", sa.JSON(), nullable=True),
        sa.Column("location", sa.String(100), nullable=True),
        sa.Column(
            "employment_type",
            sa.Enum(*EMPLOYMENT_TYPES, name="employment_type"),
            nullable=False,
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("is_current", sa.Boolean(), nullable=False),
        sa.Column("company_url", sa.String(512), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    for column in ("id", "profile_id", "start_date", "is_current", "deleted_at"):
        op.create_index(
            op.f(f"ix_work_experiences_{column}"), "work_experiences", [column], unique=False
        )

    op.create_table(
        "educations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("institution_name", sa.String(100), nullable=False),
        sa.Column("degree", sa.String(100), nullable=False),
        sa.Column("field_of_study", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("gpa", sa.Numeric(3, 2), nullable=True),
        sa.Column("location", sa.String(100), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("is_current", sa.Boolean(), nullable=False),
        sa.Column("institution_url", sa.String(512), nullable=True),
        sa.Column("achievements", sa.JSON(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    for column in ("id", "profile_id", "start_date", "is_current", "deleted_at"):
        op.create_index(op.f(f"ix_educations_{column}"), "educations", [column], unique=False)


def downgrade() -> None:
    op.drop_table("educations")
    op.drop_table("work_experiences")
    op.drop_table("project_skills")
    op.drop_table("projects")
    op.drop_table("skills")
    op.drop_table("profiles")
    for enum_name in (
        "employment_type", "proficiency_used", "project_status",
        "proficiency_level", "skill_category",
    ):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
