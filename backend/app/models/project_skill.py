"""
ProjectSkill - join row between a project and a skill, with the proficiency used on it
"""
from sqlalchemy import Column, Enum, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from backend.app.core.config import PROFICIENCY_LEVELS
from backend.app.db.base import Base, TimestampMixin


class ProjectSkill(TimestampMixin, Base):
    __tablename__ = "project_skills"
    __table_args__ = (
        UniqueConstraint("project_id", "skill_id", name="uq_project_skills_project_skill"),
    )

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_id = Column(Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True)
    proficiency_used = Column(
        Enum(*PROFICIENCY_LEVELS, name="proficiency_used", validate_strings=True),
        nullable=True,
    )

    project = relationship("Project", back_populates="skill_links")
    skill = relationship("Skill", back_populates="project_links")
