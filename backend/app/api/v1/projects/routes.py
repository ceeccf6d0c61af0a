"""
Projects endpoints - list/filter/sort, detail, create and replace
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from backend.app.core.config import MAX_DB_INTEGER
from backend.app.core.dependencies import Tenant, get_db, get_tenant, write_guards
from backend.app.schemas.common import Pagination, envelope
from backend.app.schemas.project import ProjectListParams, ProjectWrite, project_model_to_out
from backend.app.services.project_service import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])

ProjectId = Annotated[int, Path(ge=1, le=MAX_DB_INTEGER)]


@router.get("")
def list_projects(
    params: Annotated[ProjectListParams, Query()],
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_tenant),
):
    """
    Projects with their skills.

    - **skill**: keep projects using a skill whose name contains this text (case-insensitive)
    - **status**, **featured**: exact-match filters
    - **sort**: one of priority, created_at, updated_at, title, start_date
    - **order**: ASC or DESC (default DESC)
    """
    page = ProjectService.list_projects(db, tenant, params)
    return envelope(
        [project_model_to_out(p) for p in page.rows],
        pagination=Pagination.build(page.total, params.limit, params.offset),
    )


@router.get("/{project_id}")
def get_project(
    project_id: ProjectId,
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_tenant),
):
    project = ProjectService.get_project(db, tenant, project_id)
    return envelope(project_model_to_out(project))


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=write_guards)
def create_project(
    payload: ProjectWrite,
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_tenant),
):
    """
    Create a project. `skills: [{skill_id, proficiency_used}]` entries whose
    skill does not exist are skipped.
    """
    project = ProjectService.create_project(db, tenant, payload)
    return envelope(project_model_to_out(project), message="Project created successfully")


@router.put("/{project_id}", dependencies=write_guards)
def update_project(
    project_id: ProjectId,
    payload: ProjectWrite,
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_tenant),
):
    project = ProjectService.update_project(db, tenant, project_id, payload)
    return envelope(project_model_to_out(project), message="Project updated successfully")
