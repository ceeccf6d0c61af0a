from backend.app.models.profile import Profile
from backend.app.models.skill import Skill
from backend.app.models.project import Project
from backend.app.models.project_skill import ProjectSkill
from backend.app.models.work_experience import WorkExperience
from backend.app.models.education import Education
