"""
Profile endpoints - the singleton owner profile
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.core.dependencies import Tenant, get_db, get_tenant, write_guards
from backend.app.schemas.common import envelope
from backend.app.schemas.profile import (
    ProfileCreate,
    ProfileOut,
    ProfilePatch,
    ProfileUpdate,
    profile_model_to_detail,
)
from backend.app.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


def _detail(db: Session, tenant: Tenant, profile):
    experiences, educations = ProfileService.get_history(db, tenant)
    return profile_model_to_detail(profile, experiences, educations)


@router.get("")
def get_profile(
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_tenant),
):
    """Profile with work experience and education, most recent first. 404 if not created yet."""
    profile = ProfileService.require_profile(db, tenant)
    return envelope(_detail(db, tenant, profile))


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=write_guards)
def create_profile(
    payload: ProfileCreate,
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_tenant),
):
    """
    Create the profile.

    - **name**: 1-100 characters (required)
    - **email**: valid, unique email address (required)
    - URL fields must be well-formed when present
    """
    profile = ProfileService.set_the_profile(db, tenant, payload.model_dump())
    return envelope(ProfileOut.model_validate(profile), message="Profile created successfully")


@router.put("", dependencies=write_guards)
def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_tenant),
):
    """Write every field present in the body; explicit nulls clear optional fields."""
    profile = ProfileService.update_profile(db, tenant, payload.model_dump(exclude_unset=True))
    return envelope(_detail(db, tenant, profile), message="Profile updated successfully")


@router.patch("", dependencies=write_guards)
def patch_profile(
    payload: ProfilePatch,
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_tenant),
):
    """Merge only fields that are present and non-null; everything else is untouched."""
    profile = ProfileService.patch_profile(db, tenant, payload.model_dump(exclude_unset=True))
    return envelope(ProfileOut.model_validate(profile), message="Profile updated successfully")
