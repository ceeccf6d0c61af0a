"""
Search query-string schema
"""
from typing import Optional

from pydantic import BaseModel, Field

from backend.app.core.config import MAX_DB_INTEGER, MAX_PAGE_LIMIT, SEARCH_DEFAULT_LIMIT
from backend.app.schemas.common import SearchType


class SearchParams(BaseModel):
    """GET /search - q is checked for blankness in the service, not here."""
    q: Optional[str] = None
    type: SearchType = "all"
    limit: int = Field(default=SEARCH_DEFAULT_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    offset: int = Field(default=0, ge=0, le=MAX_DB_INTEGER)
