"""
Project - portfolio work item owned by the profile, linked to skills via ProjectSkill
"""
from sqlalchemy import Boolean, Column, Date, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.core.config import PROJECT_STATUSES
from backend.app.db.base import Base, TimestampMixin


class Project(TimestampMixin, Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    profile_id = Column(Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    short_description = Column(String(255), nullable=True)

    project_url = Column(String(512), nullable=True)
    github_url = Column(String(512), nullable=True)
    demo_url = Column(String(512), nullable=True)
    image_url = Column(String(512), nullable=True)

    status = Column(
        Enum(*PROJECT_STATUSES, name="project_status", validate_strings=True),
        nullable=False,
        default="Completed",
        index=True,
    )
    priority = Column(Integer, nullable=False, default=0, index=True)
    is_featured = Column(Boolean, nullable=False, default=False, index=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)

    profile = relationship("Profile", back_populates="projects")
    skill_links = relationship(
        "ProjectSkill",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ProjectSkill.id",
        passive_deletes=True,
    )
