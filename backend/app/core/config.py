"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All backend-related configs and constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: backend/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# Load .env into environment BEFORE pydantic reads. override=True ensures .env
# values override any shell env.
# When .env doesn't exist (prod), this is a no-op; platform env vars are used.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "Portfolio API"
    app_version: str = "1.0.0"
    port: int = 3000
    environment: str = "development"  # development, test, production

    # Database
    database_url: str = "sqlite:///./database.sqlite"

    # Tenancy: id of the single profile that owns projects, experience, education
    owner_profile_id: int = 1

    # CORS
    frontend_url: str = "http://localhost:3001"

    # Auth
    secret_key: str = "fallback-secret"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7
    api_key: str = ""

    # Rate limiting (sliding window per client IP)
    rate_limit_enabled: bool = True
    rate_limit_requests: int = 100
    rate_limit_window_seconds: int = 15 * 60

    # HTTP
    max_body_bytes: int = 10 * 1024 * 1024

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


settings = Settings()


# --- Constants (non-env, business config) ---

SKILL_CATEGORIES: tuple[str, ...] = (
    "Programming Languages",
    "Frameworks",
    "Databases",
    "Tools",
    "Cloud Services",
    "Other",
)
PROFICIENCY_LEVELS: tuple[str, ...] = ("Beginner", "Intermediate", "Advanced", "Expert")
PROJECT_STATUSES: tuple[str, ...] = ("Planning", "In Progress", "Completed", "On Hold", "Archived")
EMPLOYMENT_TYPES: tuple[str, ...] = ("Full-time", "Part-time", "Contract", "Freelance", "Internship")
SEARCH_TYPES: tuple[str, ...] = ("all", "profile", "projects", "skills", "experience", "education")

# Pagination
MAX_PAGE_LIMIT: int = 100
# Largest value a 64-bit INTEGER column or LIMIT/OFFSET accepts
MAX_DB_INTEGER: int = 2**63 - 1
PROJECTS_DEFAULT_LIMIT: int = 20
SKILLS_DEFAULT_LIMIT: int = 50
TOP_SKILLS_DEFAULT_LIMIT: int = 10
SEARCH_DEFAULT_LIMIT: int = 50
SEARCH_PER_TYPE_CAP: int = 10

# Sorting: the only columns a client may order projects by
PROJECT_SORT_FIELDS: tuple[str, ...] = ("priority", "created_at", "updated_at", "title", "start_date")
PROJECT_DEFAULT_SORT: str = "priority"

# Messages
RATE_LIMIT_MESSAGE: str = "Too many requests from this IP, please try again later"
NOT_FOUND_ROUTE_MESSAGE: str = "API endpoint not found"
