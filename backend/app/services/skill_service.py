"""
Skill service - list, top skills, create
"""
from sqlalchemy.orm import Session

from backend.app.core.errors import ConflictError
from backend.app.core.logging_config import get_logger
from backend.app.db.transaction import unit_of_work
from backend.app.models.skill import Skill
from backend.app.schemas.common import parse_bool_string
from backend.app.schemas.skill import SkillCreate, SkillListParams
from backend.app.services.query_builder import Page, QueryBuilder

logger = get_logger("services.skills")


class SkillService:
    @staticmethod
    def list_skills(db: Session, params: SkillListParams) -> Page:
        """Equality filters on category/proficiency/featured, name ascending."""
        return (
            QueryBuilder(Skill)
            .where_equal(
                category=params.category,
                proficiency_level=params.proficiency,
                is_featured=parse_bool_string(params.featured),
            )
            .order_by(Skill.name.asc())
            .page(db, limit=params.limit, offset=params.offset)
        )

    @staticmethod
    def top_skills(db: Session, limit: int) -> list[Skill]:
        """Featured skills, most experienced first."""
        return (
            QueryBuilder(Skill)
            .where_equal(is_featured=True)
            .order_by(Skill.years_of_experience.desc().nulls_last(), Skill.name.asc())
            .all(db, limit=limit)
        )

    @staticmethod
    def create_skill(db: Session, payload: SkillCreate) -> Skill:
        # Friendly check first; the unique constraint still settles concurrent writers
        existing = db.query(Skill).filter(Skill.name == payload.name).first()
        if existing:
            raise ConflictError(
                "Duplicate field value entered",
                [f"Skill '{payload.name}' already exists"],
            )
        skill = Skill(**payload.model_dump())
        with unit_of_work(db):
            db.add(skill)
        db.refresh(skill)
        logger.info("Skill created skill_id=%s name=%s", skill.id, skill.name)
        return skill
