"""
WorkExperience - employment history entry owned by the profile
"""
from sqlalchemy import JSON, Boolean, Column, Date, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.core.config import EMPLOYMENT_TYPES
from backend.app.db.base import Base, TimestampMixin


class WorkExperience(TimestampMixin, Base):
    __tablename__ = "work_experiences"

    id = Column(Integer, primary_key=True, index=True)
    profile_id = Column(Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)

    company_name = Column(String(100), nullable=False)
    position = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    responsibilities = Column(JSON, default=list)  # ["Built RESTful APIs", ...]
    achievements = Column(JSON, default=list)
    location = Column(String(100), nullable=True)
    employment_type = Column(
        Enum(*EMPLOYMENT_TYPES, name="employment_type", validate_strings=True),
        nullable=False,
        default="Full-time",
    )
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=True)  # null + is_current means ongoing
    is_current = Column(Boolean, nullable=False, default=False, index=True)
    company_url = Column(String(512), nullable=True)

    profile = relationship("Profile", back_populates="work_experiences")
