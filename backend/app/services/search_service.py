"""
Search aggregator - one case-insensitive substring query per entity type, merged by type.

Each entity type is searched independently with the same trimmed term. The
whole request fails if any one of the underlying queries fails.
"""
from dataclasses import dataclass
from typing import Callable

from sqlalchemy.orm import Session

from backend.app.core.config import SEARCH_PER_TYPE_CAP
from backend.app.core.dependencies import Tenant
from backend.app.core.errors import BadRequestError
from backend.app.core.logging_config import get_logger
from backend.app.models.education import Education
from backend.app.models.profile import Profile
from backend.app.models.project import Project
from backend.app.models.skill import Skill
from backend.app.models.work_experience import WorkExperience
from backend.app.schemas.profile import EducationOut, ProfileOut, WorkExperienceOut
from backend.app.schemas.project import project_model_to_out
from backend.app.schemas.search import SearchParams
from backend.app.schemas.skill import SkillOut
from backend.app.services.project_service import with_skills
from backend.app.services.query_builder import QueryBuilder

logger = get_logger("services.search")


@dataclass(frozen=True)
class SearchTarget:
    type_name: str  # value of ?type=
    result_key: str  # key in the response data mapping
    model: type
    fields: tuple[str, ...]
    order_by: Callable[[], tuple]
    serialize: Callable
    eager: Callable[[], list] = list


SEARCH_TARGETS: tuple[SearchTarget, ...] = (
    SearchTarget(
        type_name="profile",
        result_key="profiles",
        model=Profile,
        fields=("name", "bio", "title", "location"),
        order_by=lambda: (),
        serialize=ProfileOut.model_validate,
    ),
    SearchTarget(
        type_name="projects",
        result_key="projects",
        model=Project,
        fields=("title", "description", "short_description"),
        order_by=lambda: (Project.priority.desc(), Project.updated_at.desc()),
        serialize=project_model_to_out,
        eager=with_skills,
    ),
    SearchTarget(
        type_name="skills",
        result_key="skills",
        model=Skill,
        fields=("name", "description", "category"),
        order_by=lambda: (Skill.is_featured.desc(), Skill.name.asc()),
        serialize=SkillOut.model_validate,
    ),
    SearchTarget(
        type_name="experience",
        result_key="work_experiences",
        model=WorkExperience,
        fields=("company_name", "position", "description", "location"),
        order_by=lambda: (WorkExperience.start_date.desc(),),
        serialize=WorkExperienceOut.model_validate,
    ),
    SearchTarget(
        type_name="education",
        result_key="educations",
        model=Education,
        fields=("institution_name", "degree", "field_of_study", "description"),
        order_by=lambda: (Education.start_date.desc(),),
        serialize=EducationOut.model_validate,
    ),
)


def normalize_query(q: str | None) -> str:
    term = (q or "").strip()
    if not term:
        raise BadRequestError("Search query is required")
    return term


def _tenant_for(target: SearchTarget, tenant: Tenant) -> Tenant | None:
    # Skills are shared vocabulary, not owned by the profile
    return None if target.model is Skill else tenant


def search_target(
    db: Session,
    tenant: Tenant,
    target: SearchTarget,
    term: str,
    limit: int,
    offset: int = 0,
) -> list:
    model = target.model
    builder = (
        QueryBuilder(model, tenant=_tenant_for(target, tenant), options=target.eager())
        .where_any_contains([getattr(model, name) for name in target.fields], term)
        .order_by(*target.order_by())
    )
    if model is Profile:
        builder.where(Profile.id == tenant.profile_id)
    return [target.serialize(row) for row in builder.all(db, limit=limit, offset=offset)]


def search(db: Session, tenant: Tenant, params: SearchParams) -> dict:
    """
    Returns {query, total_results, data, pagination?}. With type=all each entity
    type is capped at SEARCH_PER_TYPE_CAP and limit/offset are ignored.
    """
    term = normalize_query(params.q)
    narrowed = params.type != "all"
    if narrowed:
        limit, offset = params.limit, params.offset
    else:
        limit, offset = SEARCH_PER_TYPE_CAP, 0

    data: dict[str, list] = {}
    for target in SEARCH_TARGETS:
        if narrowed and target.type_name != params.type:
            continue
        data[target.result_key] = search_target(db, tenant, target, term, limit, offset)

    total_results = sum(len(items) for items in data.values())
    logger.info("Search q=%r type=%s results=%d", term, params.type, total_results)
    result = {"query": term, "total_results": total_results, "data": data}
    if narrowed:
        result["pagination"] = {"limit": limit, "offset": offset}
    return result
