"""
Project Pydantic schemas - write payloads, list query, and response with attached skills
"""
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.app.core.config import (
    MAX_DB_INTEGER,
    MAX_PAGE_LIMIT,
    PROJECT_DEFAULT_SORT,
    PROJECTS_DEFAULT_LIMIT,
)
from backend.app.schemas.common import (
    BoolString,
    ProficiencyLevel,
    ProjectSortField,
    ProjectStatus,
    SortOrder,
    UrlStr,
)
from backend.app.schemas.skill import SkillOut


class ProjectSkillIn(BaseModel):
    """One entry of the embedded skills array: {skill_id, proficiency_used}"""
    model_config = ConfigDict(extra="ignore")

    skill_id: int = Field(ge=1, le=MAX_DB_INTEGER)
    proficiency_used: Optional[ProficiencyLevel] = None


class ProjectWrite(BaseModel):
    """POST /projects and PUT /projects/{id}"""
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1)
    short_description: Optional[str] = Field(default=None, max_length=255)
    project_url: Optional[UrlStr] = None
    github_url: Optional[UrlStr] = None
    demo_url: Optional[UrlStr] = None
    image_url: Optional[UrlStr] = None
    status: ProjectStatus = "Completed"
    priority: int = Field(default=0, ge=0, le=10)
    is_featured: bool = False
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    skills: Optional[List[ProjectSkillIn]] = None

    def column_values(self) -> dict:
        """Project column values (everything except the embedded skills)."""
        return self.model_dump(exclude={"skills"})


class ProjectListParams(BaseModel):
    """GET /projects query string"""
    skill: Optional[str] = Field(default=None, max_length=100)
    status: Optional[ProjectStatus] = None
    featured: Optional[BoolString] = None
    limit: int = Field(default=PROJECTS_DEFAULT_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    offset: int = Field(default=0, ge=0, le=MAX_DB_INTEGER)
    sort: ProjectSortField = PROJECT_DEFAULT_SORT
    order: SortOrder = "DESC"


class ProjectSkillOut(SkillOut):
    proficiency_used: Optional[str] = None


class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    short_description: Optional[str] = None
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    demo_url: Optional[str] = None
    image_url: Optional[str] = None
    status: str
    priority: int
    is_featured: bool
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    profile_id: int
    created_at: datetime
    updated_at: datetime
    skills: List[ProjectSkillOut] = Field(default_factory=list)


def project_model_to_out(project) -> ProjectOut:
    """Convert Project DB model (with skill_links loaded) to ProjectOut."""
    skills = [
        ProjectSkillOut(
            **SkillOut.model_validate(link.skill).model_dump(),
            proficiency_used=link.proficiency_used,
        )
        for link in project.skill_links
        if link.skill is not None and not link.is_deleted and not link.skill.is_deleted
    ]
    data = {
        name: getattr(project, name)
        for name in ProjectOut.model_fields
        if name != "skills"
    }
    return ProjectOut(**data, skills=skills)
