"""
Pytest fixtures for Portfolio API tests.
Uses in-memory SQLite, disables rate limiting, provides profile/skill/project factories.
"""
import os
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Use in-memory SQLite for tests - set before config/session load
# Must override any .env DATABASE_URL
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["API_KEY"] = "test-api-key"

from backend.app.db.base import Base
from backend.main import app
from backend.app.core.dependencies import get_db
from backend.app.models import Education, Profile, Project, ProjectSkill, Skill, WorkExperience

# In-memory SQLite for tests - StaticPool ensures all sessions share same DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so app uses our test engine
import backend.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal
# main.py imports engine directly; patch so startup uses our engine
import backend.main as main_module
main_module.engine = engine


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """TestClient against an empty schema."""
    return TestClient(app)


@pytest.fixture
def profile(db_session):
    """The owner profile (id 1) with one job and one degree."""
    owner = Profile(
        id=1,
        name="Alex Johnson",
        email="alex.johnson@example.com",
        bio="Full-stack developer who enjoys clean code",
        title="Senior Full-Stack Developer",
        location="San Francisco, CA",
    )
    db_session.add(owner)
    db_session.add_all([
        WorkExperience(
            profile_id=1,
            company_name="StartupXYZ",
            position="Full-Stack Developer",
            start_date=date(2019, 6, 1),
            end_date=date(2021, 2, 28),
            responsibilities=["Built the MVP"],
            achievements=[],
        ),
        WorkExperience(
            profile_id=1,
            company_name="TechCorp Inc.",
            position="Senior Full-Stack Developer",
            start_date=date(2021, 3, 1),
            is_current=True,
            responsibilities=[],
            achievements=["Led migration to microservices"],
        ),
        Education(
            profile_id=1,
            institution_name="University of California, Berkeley",
            degree="Bachelor of Science",
            field_of_study="Computer Science",
            gpa=3.7,
            start_date=date(2014, 8, 25),
            end_date=date(2018, 5, 15),
            achievements=[],
        ),
    ])
    db_session.commit()
    db_session.refresh(owner)
    return owner


@pytest.fixture
def make_skill(db_session):
    """Factory: make_skill("React", category="Frameworks", ...)"""
    def _make(name, category="Frameworks", proficiency_level="Advanced",
              years_of_experience=None, is_featured=False, description=None):
        skill = Skill(
            name=name,
            category=category,
            proficiency_level=proficiency_level,
            years_of_experience=years_of_experience,
            is_featured=is_featured,
            description=description,
        )
        db_session.add(skill)
        db_session.commit()
        db_session.refresh(skill)
        return skill
    return _make


@pytest.fixture
def make_project(db_session, profile):
    """Factory: make_project("Title", priority=5, skills=[(skill, "Expert")])"""
    def _make(title, description="A portfolio project", priority=0, status="Completed",
              is_featured=False, skills=(), **extra):
        project = Project(
            profile_id=profile.id,
            title=title,
            description=description,
            priority=priority,
            status=status,
            is_featured=is_featured,
            **extra,
        )
        db_session.add(project)
        db_session.flush()
        for skill, proficiency in skills:
            db_session.add(ProjectSkill(
                project_id=project.id, skill_id=skill.id, proficiency_used=proficiency,
            ))
        db_session.commit()
        db_session.refresh(project)
        return project
    return _make


@pytest.fixture
def write_headers():
    """Headers a production client would send on writes (optional outside production)."""
    return {"X-API-Key": "test-api-key"}
