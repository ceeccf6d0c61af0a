"""
Profile database model - the single owner of the portfolio
"""
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base import Base, TimestampMixin


class Profile(TimestampMixin, Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    bio = Column(Text, nullable=True)
    title = Column(String(100), nullable=True)
    location = Column(String(100), nullable=True)
    phone = Column(String(50), nullable=True)

    website = Column(String(512), nullable=True)
    github_url = Column(String(512), nullable=True)
    linkedin_url = Column(String(512), nullable=True)
    twitter_url = Column(String(512), nullable=True)
    profile_image_url = Column(String(512), nullable=True)
    resume_url = Column(String(512), nullable=True)

    projects = relationship("Project", back_populates="profile", passive_deletes=True)
    work_experiences = relationship(
        "WorkExperience",
        back_populates="profile",
        order_by="WorkExperience.start_date.desc()",
        passive_deletes=True,
    )
    educations = relationship(
        "Education",
        back_populates="profile",
        order_by="Education.start_date.desc()",
        passive_deletes=True,
    )
