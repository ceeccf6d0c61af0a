"""
Profile Pydantic schemas - request validation and response shape for the singleton profile
"""
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_serializer

from backend.app.schemas.common import EmploymentType, PhoneStr, UrlStr

_REQUEST_CONFIG = ConfigDict(extra="ignore", str_strip_whitespace=True)


# --- Requests ---
class ProfileCreate(BaseModel):
    """POST /profile - name and email are required."""
    model_config = _REQUEST_CONFIG

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    bio: Optional[str] = Field(default=None, max_length=1000)
    title: Optional[str] = Field(default=None, max_length=100)
    location: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[PhoneStr] = None
    website: Optional[UrlStr] = None
    github_url: Optional[UrlStr] = None
    linkedin_url: Optional[UrlStr] = None
    twitter_url: Optional[UrlStr] = None
    profile_image_url: Optional[UrlStr] = None
    resume_url: Optional[UrlStr] = None


class ProfileUpdate(BaseModel):
    """
    PUT /profile - every field optional; provided fields are written as-is.
    name/email may be omitted but never set to null.
    """
    model_config = _REQUEST_CONFIG

    name: str = Field(default=None, min_length=1, max_length=100)
    email: EmailStr = None
    bio: Optional[str] = Field(default=None, max_length=1000)
    title: Optional[str] = Field(default=None, max_length=100)
    location: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[PhoneStr] = None
    website: Optional[UrlStr] = None
    github_url: Optional[UrlStr] = None
    linkedin_url: Optional[UrlStr] = None
    twitter_url: Optional[UrlStr] = None
    profile_image_url: Optional[UrlStr] = None
    resume_url: Optional[UrlStr] = None


class ProfilePatch(ProfileUpdate):
    """PATCH /profile - same rules as PUT; null and absent fields are both left untouched."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None


class WorkExperienceCreate(BaseModel):
    model_config = _REQUEST_CONFIG

    company_name: str = Field(min_length=1, max_length=100)
    position: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    responsibilities: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)
    location: Optional[str] = Field(default=None, max_length=100)
    employment_type: EmploymentType = "Full-time"
    start_date: date
    end_date: Optional[date] = None
    is_current: bool = False
    company_url: Optional[UrlStr] = None


class EducationCreate(BaseModel):
    model_config = _REQUEST_CONFIG

    institution_name: str = Field(min_length=1, max_length=100)
    degree: str = Field(min_length=1, max_length=100)
    field_of_study: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = None
    gpa: Optional[Decimal] = Field(default=None, ge=0, le=4, max_digits=3, decimal_places=2)
    location: Optional[str] = Field(default=None, max_length=100)
    start_date: date
    end_date: Optional[date] = None
    is_current: bool = False
    institution_url: Optional[UrlStr] = None
    achievements: List[str] = Field(default_factory=list)


# --- Responses ---
class WorkExperienceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_name: str
    position: str
    description: Optional[str] = None
    responsibilities: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    employment_type: str
    start_date: date
    end_date: Optional[date] = None
    is_current: bool = False
    company_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class EducationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    institution_name: str
    degree: str
    field_of_study: Optional[str] = None
    description: Optional[str] = None
    gpa: Optional[Decimal] = None
    location: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    is_current: bool = False
    institution_url: Optional[str] = None
    achievements: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @field_serializer("gpa")
    def _gpa_as_float(self, gpa: Optional[Decimal]) -> Optional[float]:
        return float(gpa) if gpa is not None else None


class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    bio: Optional[str] = None
    title: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    twitter_url: Optional[str] = None
    profile_image_url: Optional[str] = None
    resume_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ProfileDetailOut(ProfileOut):
    work_experiences: List[WorkExperienceOut] = Field(default_factory=list)
    educations: List[EducationOut] = Field(default_factory=list)


def profile_model_to_detail(profile, work_experiences, educations) -> ProfileDetailOut:
    """Profile row plus its (already filtered and ordered) history lists."""
    base = ProfileOut.model_validate(profile).model_dump()
    return ProfileDetailOut(
        **base,
        work_experiences=[WorkExperienceOut.model_validate(w) for w in work_experiences],
        educations=[EducationOut.model_validate(e) for e in educations],
    )
