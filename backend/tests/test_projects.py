"""Tests for /api/projects"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from backend.app.models import Project, ProjectSkill
from backend.app.services.project_service import ProjectService
from backend.main import app


@pytest.fixture
def catalog(make_skill, make_project):
    react = make_skill("React", "Frameworks", "Expert", 4, True)
    node = make_skill("Node.js", "Frameworks", "Expert", 4, True)
    python = make_skill("Python", "Programming Languages", "Advanced", 4, True)
    shop = make_project(
        "E-Commerce Platform", priority=10, is_featured=True,
        skills=[(react, "Expert"), (node, "Expert")],
    )
    weather = make_project(
        "Weather Analytics API", priority=8, skills=[(python, "Advanced")],
    )
    finance = make_project(
        "Personal Finance Tracker", priority=6, status="In Progress", skills=[(react, "Advanced")],
    )
    return {"react": react, "node": node, "python": python,
            "shop": shop, "weather": weather, "finance": finance}


def _titles(r):
    return [p["title"] for p in r.json()["data"]]


def test_list_projects_default_priority_desc(client, catalog):
    r = client.get("/api/projects")
    assert r.status_code == 200
    body = r.json()
    assert _titles(r) == ["E-Commerce Platform", "Weather Analytics API", "Personal Finance Tracker"]
    priorities = [p["priority"] for p in body["data"]]
    assert priorities == sorted(priorities, reverse=True)
    assert body["pagination"] == {"total": 3, "limit": 20, "offset": 0, "pages": 1}


def test_list_projects_embeds_skills_with_proficiency_used(client, catalog):
    shop = client.get("/api/projects").json()["data"][0]
    assert [s["name"] for s in shop["skills"]] == ["React", "Node.js"]
    assert shop["skills"][0]["proficiency_used"] == "Expert"
    assert shop["skills"][0]["category"] == "Frameworks"


def test_list_projects_limit_offset(client, catalog):
    r = client.get("/api/projects", params={"limit": 2, "offset": 1})
    body = r.json()
    assert len(body["data"]) == 2
    assert body["pagination"] == {"total": 3, "limit": 2, "offset": 1, "pages": 2}


def test_list_projects_sort_title_asc(client, catalog):
    r = client.get("/api/projects", params={"sort": "title", "order": "ASC"})
    assert _titles(r) == ["E-Commerce Platform", "Personal Finance Tracker", "Weather Analytics API"]


def test_list_projects_equal_priority_tie_breaks_by_id(client, make_project):
    first = make_project("First", priority=5)
    second = make_project("Second", priority=5)
    r = client.get("/api/projects")
    assert [p["id"] for p in r.json()["data"]] == [first.id, second.id]


def test_list_projects_filter_by_skill_substring(client, catalog):
    """Case-insensitive substring on skill name; the full skill list is kept."""
    r = client.get("/api/projects", params={"skill": "reac"})
    assert _titles(r) == ["E-Commerce Platform", "Personal Finance Tracker"]
    shop = r.json()["data"][0]
    assert len(shop["skills"]) == 2
    assert r.json()["pagination"]["total"] == 2

    r = client.get("/api/projects", params={"skill": "PYTHON"})
    assert _titles(r) == ["Weather Analytics API"]


def test_list_projects_skill_filter_is_literal(client, catalog):
    r = client.get("/api/projects", params={"skill": "%"})
    assert r.json()["data"] == []


def test_list_projects_filter_status_and_featured(client, catalog):
    r = client.get("/api/projects", params={"status": "In Progress"})
    assert _titles(r) == ["Personal Finance Tracker"]

    r = client.get("/api/projects", params={"featured": "true"})
    assert _titles(r) == ["E-Commerce Platform"]

    r = client.get("/api/projects", params={"featured": "0"})
    assert _titles(r) == ["Weather Analytics API", "Personal Finance Tracker"]


@pytest.mark.parametrize("params", [
    {"sort": "description"},
    {"order": "sideways"},
    {"status": "Done"},
    {"limit": 500},
    {"offset": 10**23},
    {"offset": 2**63},
])
def test_list_projects_invalid_query(client, params):
    r = client.get("/api/projects", params=params)
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_get_project(client, catalog):
    r = client.get(f"/api/projects/{catalog['weather'].id}")
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["title"] == "Weather Analytics API"
    assert data["skills"][0]["name"] == "Python"
    assert data["skills"][0]["proficiency_used"] == "Advanced"


def test_get_project_unknown_id_is_404(client, catalog):
    r = client.get("/api/projects/999999")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Project not found"}


@pytest.mark.parametrize("bad_id", ["abc", "0", "-3", "1.5", str(2**63), "99999999999999999999999"])
def test_get_project_malformed_id_is_400(client, bad_id):
    r = client.get(f"/api/projects/{bad_id}")
    assert r.status_code == 400
    assert r.json()["message"] == "Validation errors"


def test_get_soft_deleted_project_is_404(client, db_session, catalog):
    catalog["shop"].soft_delete()
    db_session.commit()
    assert client.get(f"/api/projects/{catalog['shop'].id}").status_code == 404
    assert "E-Commerce Platform" not in _titles(client.get("/api/projects"))


def test_create_project_with_skills(client, catalog, write_headers):
    payload = {
        "title": "Realtime Chat",
        "description": "Socket based chat",
        "github_url": "https://github.com/alexjohnson/realtime-chat",
        "priority": 7,
        "start_date": "2022-10-01",
        "skills": [
            {"skill_id": catalog["react"].id, "proficiency_used": "Expert"},
            {"skill_id": catalog["node"].id},
        ],
    }
    r = client.post("/api/projects", json=payload, headers=write_headers)
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "Project created successfully"
    data = body["data"]
    assert data["status"] == "Completed"
    assert data["start_date"] == "2022-10-01"
    assert data["profile_id"] == 1
    assert [(s["name"], s["proficiency_used"]) for s in data["skills"]] == [
        ("React", "Expert"), ("Node.js", None),
    ]


def test_create_project_skips_unknown_skill(client, profile):
    r = client.post("/api/projects", json={
        "title": "Orphan", "description": "No real skills", "skills": [{"skill_id": 999999}],
    })
    assert r.status_code == 201
    assert r.json()["data"]["skills"] == []


def test_create_project_repeated_skill_keeps_first(client, catalog, db_session):
    skill_id = catalog["python"].id
    r = client.post("/api/projects", json={
        "title": "Scripts",
        "description": "Automation",
        "skills": [
            {"skill_id": skill_id, "proficiency_used": "Beginner"},
            {"skill_id": skill_id, "proficiency_used": "Expert"},
        ],
    })
    assert r.status_code == 201
    skills = r.json()["data"]["skills"]
    assert len(skills) == 1
    assert skills[0]["proficiency_used"] == "Beginner"


def test_create_project_without_profile_is_404(client, make_skill):
    r = client.post("/api/projects", json={"title": "T", "description": "D"})
    assert r.status_code == 404
    assert r.json()["message"] == "Profile not found"


def test_create_project_validation(client, profile, db_session):
    r = client.post("/api/projects", json={
        "title": "", "description": "D", "priority": 11, "demo_url": "not a url",
    })
    assert r.status_code == 400
    fields = {e["field"] for e in r.json()["errors"]}
    assert {"title", "priority", "demo_url"} <= fields
    assert db_session.query(Project).count() == 0


def test_create_project_skill_id_beyond_integer_range_is_400(client, profile, db_session):
    r = client.post("/api/projects", json={
        "title": "T", "description": "D", "skills": [{"skill_id": 2**63}],
    })
    assert r.status_code == 400
    assert db_session.query(Project).count() == 0


def test_create_project_bad_date(client, profile):
    r = client.post("/api/projects", json={"title": "T", "description": "D", "start_date": "yesterday"})
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "start_date"


def test_update_project_replaces_fields(client, catalog):
    project_id = catalog["shop"].id
    r = client.put(f"/api/projects/{project_id}", json={
        "title": "Shop v2", "description": "Rewritten", "priority": 3,
    })
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Project updated successfully"
    data = body["data"]
    assert data["title"] == "Shop v2"
    assert data["priority"] == 3
    # Omitted columns fall back to their defaults
    assert data["is_featured"] is False
    # No skills key: associations untouched
    assert [s["name"] for s in data["skills"]] == ["React", "Node.js"]


def test_update_project_replaces_skills(client, catalog, db_session):
    project_id = catalog["shop"].id
    r = client.put(f"/api/projects/{project_id}", json={
        "title": "Shop", "description": "D",
        "skills": [{"skill_id": catalog["python"].id, "proficiency_used": "Intermediate"}],
    })
    assert r.status_code == 200
    assert [s["name"] for s in r.json()["data"]["skills"]] == ["Python"]
    links = db_session.query(ProjectSkill).filter(ProjectSkill.project_id == project_id).all()
    assert len(links) == 1


def test_update_project_empty_skills_clears_associations(client, catalog):
    r = client.put(f"/api/projects/{catalog['shop'].id}", json={
        "title": "Shop", "description": "D", "skills": [],
    })
    assert r.status_code == 200
    assert r.json()["data"]["skills"] == []


def test_update_unknown_project_is_404(client, profile):
    r = client.put("/api/projects/424242", json={"title": "T", "description": "D"})
    assert r.status_code == 404


def _attach_then_fail():
    original = ProjectService._attach_skills

    def _fail(db, project, skills):
        original(db, project, skills)
        db.flush()
        raise RuntimeError("link table unavailable")

    return _fail


def test_create_project_rolls_back_when_skill_links_fail(db_session, catalog):
    client = TestClient(app, raise_server_exceptions=False)
    with patch.object(ProjectService, "_attach_skills", side_effect=_attach_then_fail()):
        r = client.post("/api/projects", json={
            "title": "Half Written",
            "description": "Never committed",
            "skills": [{"skill_id": catalog["python"].id, "proficiency_used": "Expert"}],
        })
    assert r.status_code == 500
    db_session.expire_all()
    assert db_session.query(Project).filter(Project.title == "Half Written").count() == 0
    assert db_session.query(Project).count() == 3
    assert db_session.query(ProjectSkill).count() == 4


def test_update_project_keeps_original_links_when_skill_links_fail(db_session, catalog):
    project_id = catalog["shop"].id
    client = TestClient(app, raise_server_exceptions=False)
    with patch.object(ProjectService, "_attach_skills", side_effect=_attach_then_fail()):
        r = client.put(f"/api/projects/{project_id}", json={
            "title": "Shop Rewrite",
            "description": "Never committed",
            "skills": [{"skill_id": catalog["python"].id, "proficiency_used": "Beginner"}],
        })
    assert r.status_code == 500

    data = client.get(f"/api/projects/{project_id}").json()["data"]
    assert data["title"] == "E-Commerce Platform"
    assert [s["name"] for s in data["skills"]] == ["React", "Node.js"]
    db_session.expire_all()
    links = db_session.query(ProjectSkill).filter(ProjectSkill.project_id == project_id).all()
    assert len(links) == 2
