"""Unit tests for QueryBuilder, unit_of_work and shared schema helpers"""
import pytest
from pydantic import ValidationError

from backend.app.core.config import PROJECT_SORT_FIELDS
from backend.app.core.dependencies import Tenant
from backend.app.core.errors import ConflictError
from backend.app.db.transaction import unit_of_work
from backend.app.models import Project, Skill
from backend.app.schemas.common import Pagination, envelope, parse_bool_string
from backend.app.schemas.project import ProjectWrite
from backend.app.services.query_builder import QueryBuilder


def test_page_counts_before_pagination(db_session, make_skill):
    for name in ("A", "B", "C", "D", "E"):
        make_skill(name)
    page = QueryBuilder(Skill).order_by(Skill.name.asc()).page(db_session, limit=2, offset=2)
    assert [s.name for s in page.rows] == ["C", "D"]
    assert page.total == 5


def test_where_equal_ignores_none(db_session, make_skill):
    make_skill("A", category="Tools")
    make_skill("B", category="Databases")
    rows = QueryBuilder(Skill).where_equal(category=None, is_featured=None).all(db_session)
    assert len(rows) == 2
    rows = QueryBuilder(Skill).where_equal(category="Tools").all(db_session)
    assert [s.name for s in rows] == ["A"]


def test_sort_outside_allow_list_raises(db_session):
    with pytest.raises(ValueError):
        QueryBuilder(Project, sort_fields=PROJECT_SORT_FIELDS).sort("description")


def test_tenant_scope_applies_to_owned_models(db_session, make_project):
    make_project("Mine")
    assert QueryBuilder(Project, tenant=Tenant(profile_id=1)).count(db_session) == 1
    assert QueryBuilder(Project, tenant=Tenant(profile_id=2)).count(db_session) == 0


def test_any_contains_escapes_wildcards(db_session, make_skill):
    make_skill("C_Sharp")
    make_skill("CxSharp")
    rows = QueryBuilder(Skill).where_any_contains([Skill.name], "c_s").all(db_session)
    assert [s.name for s in rows] == ["C_Sharp"]


def test_unit_of_work_turns_unique_violation_into_conflict(db_session, make_skill):
    make_skill("React")
    with pytest.raises(ConflictError) as excinfo:
        with unit_of_work(db_session):
            db_session.add(Skill(name="React", category="Tools", proficiency_level="Expert"))
    assert excinfo.value.status_code == 409
    assert db_session.query(Skill).count() == 1


def test_unit_of_work_rolls_back_on_error(db_session):
    with pytest.raises(RuntimeError):
        with unit_of_work(db_session):
            db_session.add(Skill(name="Temp", category="Tools", proficiency_level="Expert"))
            db_session.flush()
            raise RuntimeError("boom")
    assert db_session.query(Skill).count() == 0


def test_pagination_pages_rounds_up():
    assert Pagination.build(total=3, limit=2, offset=1).pages == 2
    assert Pagination.build(total=0, limit=20, offset=0).pages == 0


def test_envelope_shape():
    body = envelope([1], message="ok", pagination={"total": 1})
    assert body == {"success": True, "message": "ok", "data": [1], "pagination": {"total": 1}}
    assert envelope(None) == {"success": True, "data": None}


@pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("false", False), ("0", False), (None, None)])
def test_parse_bool_string(raw, expected):
    assert parse_bool_string(raw) is expected


def test_project_write_keeps_submitted_url_string():
    payload = ProjectWrite(title="T", description="D", github_url="https://github.com/a")
    assert payload.github_url == "https://github.com/a"
    assert "skills" not in payload.column_values()


def test_project_write_rejects_non_http_url():
    with pytest.raises(ValidationError):
        ProjectWrite(title="T", description="D", demo_url="ftp://example.com/file")
