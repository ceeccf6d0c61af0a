"""
Skill - a technology or tool, optionally featured
"""
from sqlalchemy import Boolean, Column, Enum, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.core.config import PROFICIENCY_LEVELS, SKILL_CATEGORIES
from backend.app.db.base import Base, TimestampMixin


class Skill(TimestampMixin, Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(50), unique=True, nullable=False)
    category = Column(
        Enum(*SKILL_CATEGORIES, name="skill_category", validate_strings=True),
        nullable=False,
        default="Other",
        index=True,
    )
    proficiency_level = Column(
        Enum(*PROFICIENCY_LEVELS, name="proficiency_level", validate_strings=True),
        nullable=False,
        default="Intermediate",
        index=True,
    )
    years_of_experience = Column(Integer, nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False, index=True)
    icon_url = Column(String(512), nullable=True)
    description = Column(Text, nullable=True)

    project_links = relationship("ProjectSkill", back_populates="skill", passive_deletes=True)
