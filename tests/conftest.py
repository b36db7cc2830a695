"""Shared test fixtures."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from career_compass.config import PipelineConfig
from career_compass.models.facts import GitHubFacts, RepoFacts
from career_compass.models.request import (
    CareerPathRequest,
    EducationEntry,
    ExperienceEntry,
    GitHubProfileRequest,
    LinkedInData,
    LinkedInPost,
    LinkedInProfileRequest,
    ResumeRequest,
)


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
jane.doe@example.com | +1 555 123 4567 | linkedin.com/in/janedoe

Summary
Backend engineer with 6 years of experience building APIs in Python and Go.

Experience
Senior Backend Engineer at Acme Corp (2021 - present)
- Led migration of 12 services to Kubernetes, reducing deploy time by 40%
- Built a Python ingestion pipeline processing 2,000,000 events per day
- Improved p99 latency by 35% through SQL query optimization

Backend Engineer at Globex (2018 - 2021)
- Developed REST APIs in Node.js serving 300 requests per second
- Managed AWS infrastructure with Docker and Git-based CI

Education
B.Sc. Computer Science, State University (2018)

Skills
Python, Go, SQL, Docker, Kubernetes, AWS, Git, Communication, Leadership
"""


@pytest.fixture
def career_request() -> CareerPathRequest:
    return CareerPathRequest(
        target_role="Frontend Developer",
        current_skills=("HTML", "CSS"),
        experience_level="entry",
        timeframe="8 weeks",
        interests=("web apps",),
    )


@pytest.fixture
def github_request() -> GitHubProfileRequest:
    return GitHubProfileRequest(profile_url="https://github.com/octocat")


@pytest.fixture
def linkedin_data() -> LinkedInData:
    return LinkedInData(
        headline="Backend Engineer | Python, AWS | Scaling APIs for fintech",
        summary="I build reliable backend systems. " * 10,
        experience=(
            ExperienceEntry(title="Backend Engineer", company="Acme", duration="3 yrs", description="Built payment APIs"),
            ExperienceEntry(title="Intern", company="Globex", duration="6 mos"),
        ),
        education=(EducationEntry(school="State University", degree="B.Sc.", field="Computer Science", year="2019"),),
        skills=("Python", "AWS", "SQL", "Docker", "Go", "Kubernetes"),
        recommendations=2,
        connections="500+",
        posts=(LinkedInPost(content="Shipped a new API", engagement=40),),
    )


@pytest.fixture
def linkedin_request(linkedin_data) -> LinkedInProfileRequest:
    return LinkedInProfileRequest(profile_url="https://www.linkedin.com/in/janedoe", linkedin_data=linkedin_data)


@pytest.fixture
def resume_request(sample_resume_text) -> ResumeRequest:
    return ResumeRequest(extracted_text=sample_resume_text, target_role="Backend Engineer", file_name="jane.txt")


@pytest.fixture
def github_facts() -> GitHubFacts:
    return GitHubFacts(
        username="octocat",
        name="The Octocat",
        bio="Open source enthusiast",
        location="San Francisco",
        blog="https://octocat.dev",
        public_repos=8,
        followers=120,
        following=3,
        repos=[
            RepoFacts(
                name="hello-world",
                description="My first repository",
                language="Python",
                stars=30,
                languages={"Python": 9000, "Shell": 1000},
                weekly_commits=[0] * 40 + [1] * 12,
            ),
            RepoFacts(name="spoon-knife", language="HTML", stars=5, weekly_commits=[2] * 52),
        ],
    )


@pytest.fixture
def fast_config() -> PipelineConfig:
    """Pipeline config with no retry backoff so failure paths run instantly."""
    return PipelineConfig(retry_backoff=0.0, deadline_seconds=5.0, completion_attempts=2)


@pytest.fixture
def mock_completion() -> MagicMock:
    """CompletionClient stand-in; tests set ``complete`` return values or side effects."""
    client = MagicMock()
    client.complete = AsyncMock(return_value="{}")
    client.get_token_summary = MagicMock(return_value={"input": 0, "output": 0, "calls": []})
    return client


@pytest.fixture
def career_path_json() -> str:
    return json.dumps(
        {
            "title": "Frontend Developer Path",
            "description": "Learn modern frontend development",
            "duration": "8 weeks",
            "difficulty": "beginner level",
            "totalWeeks": 2,
            "prerequisites": ["HTML basics"],
            "outcomes": ["Build SPAs"],
            "skillsToLearn": ["JavaScript", "React"],
            "weeklyPlan": [
                {
                    "week": 1,
                    "title": "JavaScript fundamentals",
                    "description": "Core language",
                    "skills": ["JavaScript"],
                    "resources": [
                        {
                            "title": "MDN JavaScript Guide",
                            "type": "documentation",
                            "url": "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Guide",
                            "duration": "5 hours",
                            "description": "Reference guide",
                            "source": "MDN",
                        }
                    ],
                    "milestones": ["Write a DOM script"],
                    "projects": ["Todo list"],
                },
                {"week": 2, "title": "React", "skills": ["React"]},
            ],
            "marketDemand": "High",
            "averageSalary": "$80,000 - $120,000",
            "jobTitles": ["Frontend Developer"],
        }
    )
