"""Input validation run before any fetch or completion call."""

from __future__ import annotations

from career_compass.errors import InputValidationError
from career_compass.models.request import (
    CareerPathRequest,
    GitHubProfileRequest,
    LinkedInData,
    LinkedInProfileRequest,
    ResourceRequest,
    ResumeRequest,
    SkillGapRequest,
)
from career_compass.utils.url_validator import ProfileURLError, validate_profile_url

LINKEDIN_FIELDS = (
    "headline",
    "summary",
    "experience",
    "education",
    "skills",
    "recommendations",
    "connections",
)


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def missing_linkedin_fields(data: LinkedInData | None) -> list[str]:
    """Required LinkedIn fields that are absent or empty, in a fixed order."""
    if data is None:
        return list(LINKEDIN_FIELDS)
    missing = []
    if _blank(data.headline):
        missing.append("headline")
    if _blank(data.summary):
        missing.append("summary")
    if not data.experience:
        missing.append("experience")
    if not data.skills:
        missing.append("skills")
    return missing


def _profile_url(url: str, profile_type: str) -> None:
    if _blank(url):
        raise InputValidationError("Profile URL is required", ["profileUrl"])
    try:
        validate_profile_url(url, profile_type)
    except ProfileURLError as e:
        raise InputValidationError(str(e), ["profileUrl"]) from e


def validate_request(request) -> None:
    """Raise InputValidationError naming what the caller must fix."""
    if isinstance(request, (CareerPathRequest, SkillGapRequest)):
        if _blank(request.target_role):
            raise InputValidationError("Target role is required", ["targetRole"])
    elif isinstance(request, GitHubProfileRequest):
        _profile_url(request.profile_url, "github")
    elif isinstance(request, LinkedInProfileRequest):
        _profile_url(request.profile_url, "linkedin")
        missing = missing_linkedin_fields(request.linkedin_data)
        if missing:
            raise InputValidationError(
                f"LinkedIn profile data is incomplete; missing: {', '.join(missing)}",
                missing,
            )
    elif isinstance(request, ResumeRequest):
        if _blank(request.extracted_text):
            raise InputValidationError("No text content found in the resume", ["extractedText"])
    elif isinstance(request, ResourceRequest):
        if _blank(request.skill):
            raise InputValidationError("Skill is required", ["skill"])
    else:
        raise InputValidationError(f"Unsupported analysis request: {type(request).__name__}")
