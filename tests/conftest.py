from datetime import datetime, timezone

import pytest

from models.resume_models import (
    Certification,
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeData,
    Skill,
)


def skills(*names):
    return [Skill(name=name) for name in names]


@pytest.fixture
def fixed_clock():
    moment = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
    return lambda: moment


@pytest.fixture
def strong_resume():
    return ResumeData(
        personal_info=PersonalInfo(
            first_name="Priya",
            last_name="Sharma",
            email="priya.sharma@example.com",
            phone="+91 98765 43210",
            location="Bengaluru, India",
            job_title="Software Engineer",
            summary=("Software engineer with four years building Python and React "
                     "services on AWS for payments teams."),
        ),
        experience=[
            Experience(
                company="Finly",
                position="Software Engineer",
                description=[
                    "Developed REST API services in Python serving 2M requests per day",
                    "Reduced deployment time by 40% using Docker and Kubernetes",
                    "Led migration of 12 services to PostgreSQL",
                ],
            ),
        ],
        education=[
            Education(institution="IIT Bombay", degree="B.Tech", field="Computer Science"),
        ],
        skills=skills("Python", "React", "Docker", "Kubernetes", "SQL", "Git"),
        projects=[Project(name="Ledger", description="Double-entry bookkeeping library")],
        certifications=[Certification(name="AWS Solutions Architect", issuer="Amazon")],
    )


@pytest.fixture
def scenario_b_resume():
    # No digits and no action verbs anywhere in the bullets
    return ResumeData(
        personal_info=PersonalInfo(first_name="Jane", last_name="Doe", email="jane@example.com"),
        experience=[
            Experience(
                company="Acme",
                position="Clerk",
                description=[
                    "Answered customer phone calls",
                    "Maintained filing system for the office",
                ],
            ),
        ],
        education=[Education(institution="State University", degree="BA", field="History")],
        skills=skills("Typing", "Filing", "Communication"),
    )
