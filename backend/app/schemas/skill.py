"""
Skill Pydantic schemas
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.app.core.config import (
    MAX_DB_INTEGER,
    MAX_PAGE_LIMIT,
    SKILLS_DEFAULT_LIMIT,
    TOP_SKILLS_DEFAULT_LIMIT,
)
from backend.app.schemas.common import BoolString, ProficiencyLevel, SkillCategory, UrlStr


class SkillCreate(BaseModel):
    """POST /skills"""
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=50)
    category: SkillCategory
    proficiency_level: ProficiencyLevel
    years_of_experience: Optional[int] = Field(default=None, ge=0, le=50)
    is_featured: bool = False
    icon_url: Optional[UrlStr] = None
    description: Optional[str] = Field(default=None, max_length=500)


class SkillListParams(BaseModel):
    """GET /skills query string"""
    category: Optional[SkillCategory] = None
    proficiency: Optional[ProficiencyLevel] = None
    featured: Optional[BoolString] = None
    limit: int = Field(default=SKILLS_DEFAULT_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    offset: int = Field(default=0, ge=0, le=MAX_DB_INTEGER)


class TopSkillsParams(BaseModel):
    """GET /skills/top query string"""
    limit: int = Field(default=TOP_SKILLS_DEFAULT_LIMIT, ge=1, le=MAX_PAGE_LIMIT)


class SkillOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    proficiency_level: str
    years_of_experience: Optional[int] = None
    is_featured: bool = False
    icon_url: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
