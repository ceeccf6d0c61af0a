"""
Profile service - the singleton profile and its work/education history
"""
from sqlalchemy.orm import Session

from backend.app.core.dependencies import Tenant
from backend.app.core.errors import ConflictError, NotFoundError
from backend.app.core.logging_config import get_logger
from backend.app.db.transaction import unit_of_work
from backend.app.models.education import Education
from backend.app.models.profile import Profile
from backend.app.models.work_experience import WorkExperience
from backend.app.schemas.profile import EducationCreate, WorkExperienceCreate
from backend.app.services.query_builder import QueryBuilder

logger = get_logger("services.profile")


class ProfileService:
    @staticmethod
    def get_the_profile(db: Session, tenant: Tenant) -> Profile | None:
        """The tenant's profile, or None if it was never created (or is soft-deleted)."""
        return (
            db.query(Profile)
            .filter(Profile.id == tenant.profile_id, Profile.not_deleted())
            .first()
        )

    @staticmethod
    def require_profile(db: Session, tenant: Tenant) -> Profile:
        profile = ProfileService.get_the_profile(db, tenant)
        if not profile:
            raise NotFoundError("Profile not found")
        return profile

    @staticmethod
    def set_the_profile(db: Session, tenant: Tenant, data: dict) -> Profile:
        """Create the singleton. A soft-deleted row for the tenant is overwritten and restored."""
        profile = db.get(Profile, tenant.profile_id)
        if profile is not None and not profile.is_deleted:
            raise ConflictError("Profile already exists")
        with unit_of_work(db):
            if profile is None:
                profile = Profile(id=tenant.profile_id, **data)
                db.add(profile)
            else:
                for key, value in data.items():
                    setattr(profile, key, value)
                profile.restore()
        db.refresh(profile)
        logger.info("Profile created profile_id=%s", profile.id)
        return profile

    @staticmethod
    def update_profile(db: Session, tenant: Tenant, data: dict) -> Profile:
        """PUT semantics: every provided key is written, including explicit nulls."""
        profile = ProfileService.require_profile(db, tenant)
        with unit_of_work(db):
            for key, value in data.items():
                setattr(profile, key, value)
        db.refresh(profile)
        logger.info("Profile updated profile_id=%s fields=%s", profile.id, sorted(data))
        return profile

    @staticmethod
    def patch_profile(db: Session, tenant: Tenant, data: dict) -> Profile:
        """PATCH semantics: keys whose value is None are dropped before writing."""
        changes = {key: value for key, value in data.items() if value is not None}
        return ProfileService.update_profile(db, tenant, changes)

    @staticmethod
    def get_history(db: Session, tenant: Tenant) -> tuple[list[WorkExperience], list[Education]]:
        """Work experience and education, most recent start date first."""
        experiences = (
            QueryBuilder(WorkExperience, tenant=tenant)
            .order_by(WorkExperience.start_date.desc())
            .all(db)
        )
        educations = (
            QueryBuilder(Education, tenant=tenant)
            .order_by(Education.start_date.desc())
            .all(db)
        )
        return experiences, educations

    @staticmethod
    def add_work_experience(db: Session, tenant: Tenant, payload: WorkExperienceCreate) -> WorkExperience:
        ProfileService.require_profile(db, tenant)
        entry = WorkExperience(profile_id=tenant.profile_id, **payload.model_dump())
        with unit_of_work(db):
            db.add(entry)
        db.refresh(entry)
        return entry

    @staticmethod
    def add_education(db: Session, tenant: Tenant, payload: EducationCreate) -> Education:
        ProfileService.require_profile(db, tenant)
        entry = Education(profile_id=tenant.profile_id, **payload.model_dump())
        with unit_of_work(db):
            db.add(entry)
        db.refresh(entry)
        return entry
