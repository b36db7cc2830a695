"""Pydantic models for analysis requests (one variant per analysis kind)."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Request(BaseModel):
    model_config = ConfigDict(frozen=True)


class CareerPathRequest(_Request):
    kind: Literal["career_path"] = "career_path"
    target_role: str
    current_skills: tuple[str, ...] = ()
    experience_level: str = "entry"
    timeframe: str = "8 weeks"
    pace: Literal["slow", "normal", "fast"] = "normal"
    interests: tuple[str, ...] = ()
    industry: str | None = None
    additional_context: str | None = None


class ExperienceEntry(_Request):
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str | None = None


class EducationEntry(_Request):
    school: str = ""
    degree: str = ""
    field: str = ""
    year: str | None = None


class LinkedInPost(_Request):
    content: str = ""
    engagement: int = 0


class LinkedInData(_Request):
    """Caller-supplied fact bundle for a LinkedIn profile (no public read API)."""

    headline: str | None = None
    summary: str | None = None
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    skills: tuple[str, ...] = ()
    recommendations: int = 0
    connections: str | None = None  # bucket, e.g. "500+"
    posts: tuple[LinkedInPost, ...] = ()


class GitHubProfileRequest(_Request):
    kind: Literal["github_profile"] = "github_profile"
    profile_url: str
    additional_context: str | None = None


class LinkedInProfileRequest(_Request):
    kind: Literal["linkedin_profile"] = "linkedin_profile"
    profile_url: str
    linkedin_data: LinkedInData | None = None
    additional_context: str | None = None


class ResumeRequest(_Request):
    kind: Literal["resume"] = "resume"
    extracted_text: str
    sections: dict[str, str] = Field(default_factory=dict)
    target_role: str | None = None
    target_industry: str | None = None
    experience_level: str = "mid"
    additional_context: str | None = None
    file_name: str = ""
    file_type: str = ""


class SkillGapRequest(_Request):
    kind: Literal["skill_gap"] = "skill_gap"
    target_role: str
    current_skills: tuple[str, ...] = ()


class ResourceRequest(_Request):
    kind: Literal["resources"] = "resources"
    skill: str
    level: str = "beginner"


AnalysisRequest = Annotated[
    Union[
        CareerPathRequest,
        GitHubProfileRequest,
        LinkedInProfileRequest,
        ResumeRequest,
        SkillGapRequest,
        ResourceRequest,
    ],
    Field(discriminator="kind"),
]
