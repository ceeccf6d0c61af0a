"""
Shared schema pieces - URL/phone field types, pagination, response envelope
"""
import math
from typing import Annotated, Any, Literal, Optional

from pydantic import AfterValidator, BaseModel, Field, HttpUrl, TypeAdapter, ValidationError

from backend.app.core.config import (
    EMPLOYMENT_TYPES,
    PROFICIENCY_LEVELS,
    PROJECT_SORT_FIELDS,
    PROJECT_STATUSES,
    SEARCH_TYPES,
    SKILL_CATEGORIES,
)

# Fixed vocabularies, exact and case-sensitive
SkillCategory = Literal[SKILL_CATEGORIES]
ProficiencyLevel = Literal[PROFICIENCY_LEVELS]
ProjectStatus = Literal[PROJECT_STATUSES]
EmploymentType = Literal[EMPLOYMENT_TYPES]
SearchType = Literal[SEARCH_TYPES]
SortOrder = Literal["ASC", "DESC"]
# Only these columns may be used to order projects
ProjectSortField = Literal[PROJECT_SORT_FIELDS]

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    """Validate URL shape but keep the submitted string as stored value."""
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("Must be a valid URL")
    return value


UrlStr = Annotated[str, Field(max_length=512), AfterValidator(_check_url)]
PhoneStr = Annotated[str, Field(max_length=50, pattern=r"^\+?[0-9()\-.\s]{3,50}$")]

# Query-string booleans, as sent by browsers and curl
BoolString = Annotated[str, Field(pattern=r"^(true|false|1|0)$")]


def parse_bool_string(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    return value in ("true", "1")


class Pagination(BaseModel):
    total: int
    limit: int
    offset: int
    pages: int

    @classmethod
    def build(cls, total: int, limit: int, offset: int) -> "Pagination":
        return cls(total=total, limit=limit, offset=offset, pages=math.ceil(total / limit) if limit else 0)


def envelope(
    data: Any,
    message: str | None = None,
    pagination: Pagination | dict | None = None,
    **extra: Any,
) -> dict:
    """Uniform success body: {success, data, message?, pagination?}."""
    body: dict = {"success": True}
    if message:
        body["message"] = message
    body.update(extra)
    body["data"] = data
    if pagination is not None:
        body["pagination"] = pagination
    return body
