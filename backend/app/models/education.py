"""
Education - degree or certification entry owned by the profile
"""
from sqlalchemy import JSON, Boolean, Column, Date, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base import Base, TimestampMixin


class Education(TimestampMixin, Base):
    __tablename__ = "educations"

    id = Column(Integer, primary_key=True, index=True)
    profile_id = Column(Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)

    institution_name = Column(String(100), nullable=False)
    degree = Column(String(100), nullable=False)
    field_of_study = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    gpa = Column(Numeric(3, 2), nullable=True)  # 0.00 - 4.00
    location = Column(String(100), nullable=True)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=True)
    is_current = Column(Boolean, nullable=False, default=False, index=True)
    institution_url = Column(String(512), nullable=True)
    achievements = Column(JSON, default=list)

    profile = relationship("Profile", back_populates="educations")
