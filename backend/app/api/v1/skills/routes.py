"""
Skills endpoints - list with filters, top featured skills, create
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_db, write_guards
from backend.app.schemas.common import Pagination, envelope
from backend.app.schemas.skill import SkillCreate, SkillListParams, SkillOut, TopSkillsParams
from backend.app.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("")
def list_skills(
    params: Annotated[SkillListParams, Query()],
    db: Session = Depends(get_db),
):
    """Skills filtered by category, proficiency and featured flag, ordered by name."""
    page = SkillService.list_skills(db, params)
    return envelope(
        [SkillOut.model_validate(s) for s in page.rows],
        pagination=Pagination.build(page.total, params.limit, params.offset),
    )


@router.get("/top")
def top_skills(
    params: Annotated[TopSkillsParams, Query()],
    db: Session = Depends(get_db),
):
    """Featured skills, most years of experience first."""
    skills = SkillService.top_skills(db, params.limit)
    return envelope([SkillOut.model_validate(s) for s in skills])


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=write_guards)
def create_skill(payload: SkillCreate, db: Session = Depends(get_db)):
    """Create a skill. 409 when the name is already taken."""
    skill = SkillService.create_skill(db, payload)
    return envelope(SkillOut.model_validate(skill), message="Skill created successfully")
