"""Tests for the demo data seeder"""
from backend.app.models import Education, Profile, Project, ProjectSkill, Skill, WorkExperience
from backend.app.utils.seeder import seed_data


def test_seed_counts(db_session):
    counts = seed_data(db_session)
    assert counts == {
        "profiles": 1,
        "skills": 12,
        "work_experiences": 3,
        "educations": 2,
        "projects": 5,
        "project_skills": 21,
    }
    assert db_session.query(Skill).count() == 12
    assert db_session.query(ProjectSkill).count() == 21
    assert db_session.query(WorkExperience).count() == 3
    assert db_session.query(Education).count() == 2


def test_seed_is_repeatable(db_session):
    seed_data(db_session)
    seed_data(db_session)
    assert db_session.query(Profile).count() == 1
    assert db_session.query(Project).count() == 5


def test_seeded_data_served_by_api(client, db_session):
    seed_data(db_session)

    profile = client.get("/api/profile").json()["data"]
    assert profile["name"] == "Alex Johnson"
    assert profile["work_experiences"][0]["company_name"] == "TechCorp Inc."

    projects = client.get("/api/projects").json()["data"]
    assert projects[0]["title"] == "E-Commerce Platform"
    assert len(projects[0]["skills"]) == 5

    r = client.get("/api/search", params={"q": "commerce", "type": "projects"})
    assert [p["title"] for p in r.json()["data"]["projects"]] == ["E-Commerce Platform"]

    top = client.get("/api/skills/top", params={"limit": 1}).json()["data"]
    assert top[0]["name"] == "JavaScript"
