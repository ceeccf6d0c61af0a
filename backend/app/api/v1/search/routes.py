"""
Search endpoint - substring search across profile, projects, skills, experience, education
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backend.app.core.dependencies import Tenant, get_db, get_tenant
from backend.app.schemas.search import SearchParams
from backend.app.services import search_service

router = APIRouter(prefix="/search", tags=["search"])


@router.get("")
def search(
    params: Annotated[SearchParams, Query()],
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_tenant),
):
    """
    - **q**: search text (required, trimmed)
    - **type**: all, profile, projects, skills, experience, education
    - **limit** / **offset**: only applied when type names a single entity
    """
    result = search_service.search(db, tenant, params)
    return {"success": True, **result}
