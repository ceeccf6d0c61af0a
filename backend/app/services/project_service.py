"""
Project service - list/get/create/update projects and their skill associations
"""
from sqlalchemy import and_
from sqlalchemy.orm import Session, selectinload

from backend.app.core.config import PROJECT_SORT_FIELDS
from backend.app.core.dependencies import Tenant
from backend.app.core.errors import NotFoundError
from backend.app.core.logging_config import get_logger
from backend.app.db.transaction import unit_of_work
from backend.app.models.project import Project
from backend.app.models.project_skill import ProjectSkill
from backend.app.models.skill import Skill
from backend.app.schemas.common import parse_bool_string
from backend.app.schemas.project import ProjectListParams, ProjectSkillIn, ProjectWrite
from backend.app.services.profile_service import ProfileService
from backend.app.services.query_builder import Page, QueryBuilder, contains_ci

logger = get_logger("services.projects")


def with_skills():
    """Eager-load options attaching each project's skills."""
    return [selectinload(Project.skill_links).selectinload(ProjectSkill.skill)]


def has_skill_named(term: str):
    """Project has at least one live associated skill whose name contains term."""
    return Project.skill_links.any(
        and_(
            ProjectSkill.not_deleted(),
            ProjectSkill.skill.has(and_(Skill.not_deleted(), contains_ci(Skill.name, term))),
        )
    )


class ProjectService:
    @staticmethod
    def list_projects(db: Session, tenant: Tenant, params: ProjectListParams) -> Page:
        builder = (
            QueryBuilder(Project, tenant=tenant, sort_fields=PROJECT_SORT_FIELDS, options=with_skills())
            .where_equal(status=params.status, is_featured=parse_bool_string(params.featured))
            .sort(params.sort, params.order)
        )
        if params.skill:
            builder.where(has_skill_named(params.skill))
        return builder.page(db, limit=params.limit, offset=params.offset)

    @staticmethod
    def get_project(db: Session, tenant: Tenant, project_id: int) -> Project:
        project = (
            QueryBuilder(Project, tenant=tenant, options=with_skills())
            .where(Project.id == project_id)
            .all(db, limit=1)
        )
        if not project:
            raise NotFoundError("Project not found")
        return project[0]

    @staticmethod
    def create_project(db: Session, tenant: Tenant, payload: ProjectWrite) -> Project:
        """Project row and its join rows commit together or not at all."""
        ProfileService.require_profile(db, tenant)
        project = Project(profile_id=tenant.profile_id, **payload.column_values())
        with unit_of_work(db):
            db.add(project)
            db.flush()
            attached = ProjectService._attach_skills(db, project, payload.skills or [])
        logger.info("Project created project_id=%s skills=%d", project.id, attached)
        db.expire_all()
        return ProjectService.get_project(db, tenant, project.id)

    @staticmethod
    def update_project(db: Session, tenant: Tenant, project_id: int, payload: ProjectWrite) -> Project:
        """
        Full replace of the project's columns. When `skills` is present the
        associations are replaced too; when absent they are left as they are.
        """
        project = ProjectService.get_project(db, tenant, project_id)
        with unit_of_work(db):
            for key, value in payload.column_values().items():
                setattr(project, key, value)
            if payload.skills is not None:
                project.skill_links.clear()
                db.flush()
                ProjectService._attach_skills(db, project, payload.skills)
        logger.info("Project updated project_id=%s", project.id)
        db.expire_all()
        return ProjectService.get_project(db, tenant, project.id)

    @staticmethod
    def _attach_skills(db: Session, project: Project, skills: list[ProjectSkillIn]) -> int:
        """
        Create join rows for skill ids that resolve to a live skill. Unknown ids
        are skipped without error; repeated ids keep their first entry.
        """
        seen: set[int] = set()
        attached = 0
        for item in skills:
            if item.skill_id in seen:
                continue
            seen.add(item.skill_id)
            skill = db.get(Skill, item.skill_id)
            if skill is None or skill.is_deleted:
                logger.info("Skipping unknown skill_id=%s for project_id=%s", item.skill_id, project.id)
                continue
            db.add(ProjectSkill(
                project_id=project.id,
                skill_id=skill.id,
                proficiency_used=item.proficiency_used,
            ))
            attached += 1
        return attached
