"""
Demo data seeder.

Rebuilds the schema and loads a sample portfolio:

    python -m backend.app.utils.seeder
"""
import sys
from datetime import date
from decimal import Decimal

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.core.config import settings
from backend.app.core.logging_config import get_logger, setup_logging
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.models import Education, Profile, Project, ProjectSkill, Skill, WorkExperience

logger = get_logger("utils.seeder")

PROFILE = {
    "name": "Alex Johnson",
    "email": "alex.johnson@example.com",
    "bio": (
        "Full-stack developer with 5+ years of experience building scalable web applications. "
        "Passionate about clean code, user experience, and emerging technologies. Currently "
        "focusing on modern JavaScript frameworks and cloud architecture."
    ),
    "title": "Senior Full-Stack Developer",
    "location": "San Francisco, CA",
    "phone": "+1 (555) 123-4567",
    "website": "https://alexjohnson.dev",
    "github_url": "https://github.com/alexjohnson",
    "linkedin_url": "https://linkedin.com/in/alexjohnson-dev",
    "twitter_url": "https://twitter.com/alexjohnsondev",
    "profile_image_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=400",
    "resume_url": "https://alexjohnson.dev/resume.pdf",
}

# (name, category, proficiency, years, featured, description)
SKILLS = [
    ("JavaScript", "Programming Languages", "Expert", 5, True,
     "Advanced knowledge of modern ES6+ features, async programming, and performance optimization"),
    ("TypeScript", "Programming Languages", "Advanced", 3, True,
     "Strong typing, interfaces, generics, and large-scale application development"),
    ("Python", "Programming Languages", "Advanced", 4, True,
     "Backend development, data analysis, automation scripts, and API development"),
    ("React", "Frameworks", "Expert", 4, True,
     "Hooks, Context API, performance optimization, and component architecture"),
    ("Node.js", "Frameworks", "Expert", 4, True,
     "RESTful APIs, GraphQL, microservices, and server-side optimization"),
    ("Express.js", "Frameworks", "Advanced", 4, False,
     "Middleware, routing, authentication, and API development"),
    ("Next.js", "Frameworks", "Advanced", 2, True,
     "Server-side rendering, static generation, and full-stack development"),
    ("PostgreSQL", "Databases", "Advanced", 3, True,
     "Query optimization, database design, and performance tuning"),
    ("MongoDB", "Databases", "Intermediate", 2, False,
     "NoSQL design patterns, aggregation pipeline, and indexing"),
    ("AWS", "Cloud Services", "Advanced", 3, True,
     "EC2, S3, Lambda, RDS, and cloud architecture design"),
    ("Docker", "Tools", "Advanced", 3, False,
     "Containerization, multi-stage builds, and orchestration"),
    ("Git", "Tools", "Expert", 5, False,
     "Version control, branching strategies, and collaboration workflows"),
]

WORK_EXPERIENCES = [
    {
        "company_name": "TechCorp Inc.",
        "position": "Senior Full-Stack Developer",
        "description": (
            "Led development of customer-facing web applications serving 100K+ users daily. "
            "Architected microservices infrastructure and mentored junior developers."
        ),
        "responsibilities": [
            "Developed and maintained React-based web applications",
            "Built RESTful APIs using Node.js and Express",
            "Implemented CI/CD pipelines with Docker and AWS",
            "Mentored 3 junior developers and conducted code reviews",
            "Optimized application performance resulting in 40% faster load times",
        ],
        "achievements": [
            "Increased user engagement by 25% through UI/UX improvements",
            "Reduced deployment time by 60% with automated CI/CD pipeline",
            "Led migration to microservices architecture",
        ],
        "location": "San Francisco, CA",
        "employment_type": "Full-time",
        "start_date": date(2021, 3, 1),
        "end_date": None,
        "is_current": True,
        "company_url": "https://techcorp.com",
    },
    {
        "company_name": "StartupXYZ",
        "position": "Full-Stack Developer",
        "description": (
            "Built the entire web platform from scratch using modern technologies. Worked directly "
            "with founders to translate business requirements into technical solutions."
        ),
        "responsibilities": [
            "Developed MVP from concept to production in 6 months",
            "Created responsive web application using React and Node.js",
            "Designed and implemented PostgreSQL database schema",
            "Set up AWS infrastructure and deployment processes",
            "Integrated third-party APIs and payment systems",
        ],
        "achievements": [
            "Successfully launched platform with 1000+ beta users",
            "Built scalable architecture supporting 10x user growth",
            "Achieved 99.9% uptime in production environment",
        ],
        "location": "San Francisco, CA",
        "employment_type": "Full-time",
        "start_date": date(2019, 6, 1),
        "end_date": date(2021, 2, 28),
        "is_current": False,
        "company_url": "https://startupxyz.com",
    },
    {
        "company_name": "Digital Agency Pro",
        "position": "Junior Web Developer",
        "description": (
            "Developed custom websites and web applications for various clients. Gained "
            "experience in multiple technologies and client communication."
        ),
        "responsibilities": [
            "Built responsive websites using HTML, CSS, and JavaScript",
            "Developed WordPress themes and plugins",
            "Created simple web applications using PHP and MySQL",
            "Collaborated with design team to implement UI/UX specifications",
            "Provided technical support and maintenance for client websites",
        ],
        "achievements": [
            "Delivered 15+ client projects on time and within budget",
            "Improved website performance by 35% through optimization",
            "Received outstanding performance review and promotion",
        ],
        "location": "Oakland, CA",
        "employment_type": "Full-time",
        "start_date": date(2018, 1, 15),
        "end_date": date(2019, 5, 31),
        "is_current": False,
        "company_url": "https://digitalagencypro.com",
    },
]

EDUCATIONS = [
    {
        "institution_name": "University of California, Berkeley",
        "degree": "Bachelor of Science",
        "field_of_study": "Computer Science",
        "description": (
            "Focused on software engineering, algorithms, and web development. Participated in "
            "hackathons and open-source projects."
        ),
        "gpa": Decimal("3.70"),
        "location": "Berkeley, CA",
        "start_date": date(2014, 8, 25),
        "end_date": date(2018, 5, 15),
        "is_current": False,
        "institution_url": "https://berkeley.edu",
        "achievements": [
            "Dean's List for 3 consecutive semesters",
            "Winner of HackBerkeley 2017",
            "Computer Science Student Association Vice President",
            "Published research paper on web performance optimization",
        ],
    },
    {
        "institution_name": "freeCodeCamp",
        "degree": "Full Stack Web Development Certification",
        "field_of_study": "Web Development",
        "description": (
            "Comprehensive program covering HTML, CSS, JavaScript, React, Node.js, and "
            "database technologies."
        ),
        "location": "Online",
        "start_date": date(2017, 6, 1),
        "end_date": date(2017, 12, 15),
        "is_current": False,
        "institution_url": "https://freecodecamp.org",
        "achievements": [
            "Completed 300+ coding challenges",
            "Built 5 full-stack projects",
            "Contributed to open-source projects",
        ],
    },
]

PROJECTS = [
    {
        "title": "E-Commerce Platform",
        "description": (
            "A full-featured e-commerce platform built with React, Node.js, and PostgreSQL. "
            "Features include user authentication, product catalog, shopping cart, payment "
            "processing, and admin dashboard. Implemented advanced features like real-time "
            "inventory tracking, order management, and analytics dashboard."
        ),
        "short_description": "Full-stack e-commerce platform with React and Node.js",
        "project_url": "https://ecommerce-demo.alexjohnson.dev",
        "github_url": "https://github.com/alexjohnson/ecommerce-platform",
        "demo_url": "https://ecommerce-demo.alexjohnson.dev",
        "image_url": "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?w=800",
        "status": "Completed",
        "priority": 10,
        "is_featured": True,
        "start_date": date(2023, 1, 15),
        "end_date": date(2023, 4, 30),
        "skills": [("React", "Expert"), ("Node.js", "Expert"), ("PostgreSQL", "Advanced"),
                   ("JavaScript", "Expert"), ("Express.js", "Advanced")],
    },
    {
        "title": "Task Management Dashboard",
        "description": (
            "A comprehensive project management tool built with Next.js and MongoDB. Features "
            "include drag-and-drop task boards, team collaboration, real-time notifications, file "
            "attachments, and detailed analytics. Supports multiple project views including "
            "Kanban boards, Gantt charts, and calendar views."
        ),
        "short_description": "Next.js project management tool with real-time collaboration",
        "project_url": "https://taskmanager.alexjohnson.dev",
        "github_url": "https://github.com/alexjohnson/task-manager",
        "demo_url": "https://taskmanager.alexjohnson.dev",
        "image_url": "https://images.unsplash.com/photo-1611224923853-80b023f02d71?w=800",
        "status": "Completed",
        "priority": 9,
        "is_featured": True,
        "start_date": date(2023, 6, 1),
        "end_date": date(2023, 8, 15),
        "skills": [("Next.js", "Advanced"), ("React", "Expert"), ("MongoDB", "Intermediate"),
                   ("TypeScript", "Advanced")],
    },
    {
        "title": "Weather Analytics API",
        "description": (
            "RESTful API service that aggregates weather data from multiple sources and provides "
            "analytics endpoints. Built with Python FastAPI and PostgreSQL. Features include data "
            "caching, rate limiting, comprehensive documentation, and real-time weather alerts. "
            "Processes over 1M requests daily."
        ),
        "short_description": "Python API for weather data analytics and forecasting",
        "github_url": "https://github.com/alexjohnson/weather-analytics-api",
        "demo_url": "https://weather-api.alexjohnson.dev/docs",
        "image_url": "https://images.unsplash.com/photo-1504608524841-42fe6f032b4b?w=800",
        "status": "Completed",
        "priority": 8,
        "is_featured": True,
        "start_date": date(2023, 9, 1),
        "end_date": date(2023, 11, 30),
        "skills": [("Python", "Advanced"), ("PostgreSQL", "Advanced"), ("AWS", "Advanced"),
                   ("Docker", "Advanced")],
    },
    {
        "title": "Real-time Chat Application",
        "description": (
            "Modern chat application built with React, Socket.io, and Node.js. Features include "
            "private messaging, group chats, file sharing, emoji reactions, and push "
            "notifications. Implements end-to-end encryption and supports thousands of "
            "concurrent users."
        ),
        "short_description": "Real-time chat app with Socket.io and React",
        "project_url": "https://chat.alexjohnson.dev",
        "github_url": "https://github.com/alexjohnson/realtime-chat",
        "demo_url": "https://chat.alexjohnson.dev",
        "image_url": "https://images.unsplash.com/photo-1577563908411-5077b6dc7624?w=800",
        "status": "Completed",
        "priority": 7,
        "is_featured": False,
        "start_date": date(2022, 10, 1),
        "end_date": date(2022, 12, 15),
        "skills": [("React", "Expert"), ("Node.js", "Expert"), ("JavaScript", "Expert"),
                   ("MongoDB", "Intermediate")],
    },
    {
        "title": "Personal Finance Tracker",
        "description": (
            "Web application for tracking personal finances with automated transaction "
            "categorization, budget planning, and financial goal tracking. Built with React and "
            "Express.js, integrates with major banks APIs for transaction import."
        ),
        "short_description": "Personal finance management with automated categorization",
        "github_url": "https://github.com/alexjohnson/finance-tracker",
        "demo_url": "https://finance.alexjohnson.dev",
        "image_url": "https://images.unsplash.com/photo-1554224155-6726b3ff858f?w=800",
        "status": "In Progress",
        "priority": 6,
        "is_featured": False,
        "start_date": date(2024, 1, 1),
        "end_date": None,
        "skills": [("React", "Expert"), ("Express.js", "Advanced"), ("JavaScript", "Expert"),
                   ("PostgreSQL", "Advanced")],
    },
]


def seed_data(db: Session, bind: Engine | None = None, profile_id: int | None = None) -> dict:
    """
    Drop and recreate every table, then insert the demo portfolio.
    Returns the number of rows created per entity.
    """
    bind = bind or db.get_bind()
    profile_id = profile_id or settings.owner_profile_id

    Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
    # Rows held by the session no longer exist
    db.expunge_all()
    logger.info("Database schema rebuilt")

    try:
        profile = Profile(id=profile_id, **PROFILE)
        db.add(profile)

        skills = {}
        for name, category, level, years, featured, description in SKILLS:
            skills[name] = Skill(
                name=name,
                category=category,
                proficiency_level=level,
                years_of_experience=years,
                is_featured=featured,
                description=description,
            )
        db.add_all(skills.values())

        db.add_all(WorkExperience(profile_id=profile_id, **row) for row in WORK_EXPERIENCES)
        db.add_all(Education(profile_id=profile_id, **row) for row in EDUCATIONS)

        link_count = 0
        for row in PROJECTS:
            row = dict(row)
            skill_refs = row.pop("skills")
            project = Project(profile_id=profile_id, **row)
            for skill_name, proficiency in skill_refs:
                project.skill_links.append(
                    ProjectSkill(skill=skills[skill_name], proficiency_used=proficiency)
                )
                link_count += 1
            db.add(project)

        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    counts = {
        "profiles": 1,
        "skills": len(SKILLS),
        "work_experiences": len(WORK_EXPERIENCES),
        "educations": len(EDUCATIONS),
        "projects": len(PROJECTS),
        "project_skills": link_count,
    }
    logger.info("Database seeding completed: %s", counts)
    return counts


def main() -> int:
    setup_logging()
    db = SessionLocal()
    try:
        seed_data(db, bind=engine)
    except SQLAlchemyError as e:
        logger.error("Error seeding database: %s", e)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
