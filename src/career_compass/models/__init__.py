"""Data models for career analyses."""

from career_compass.models.career import (
    CareerPath,
    LearningPriority,
    LearningResource,
    ResourceRecommendations,
    SkillGapAnalysis,
    WeeklyPlan,
)
from career_compass.models.facts import GitHubFacts, RepoFacts, ResumeFacts
from career_compass.models.profile import (
    ActionPlan,
    IndustryBenchmark,
    ProfileAnalysis,
    Suggestion,
)
from career_compass.models.request import (
    AnalysisRequest,
    CareerPathRequest,
    EducationEntry,
    ExperienceEntry,
    GitHubProfileRequest,
    LinkedInData,
    LinkedInPost,
    LinkedInProfileRequest,
    ResourceRequest,
    ResumeRequest,
    SkillGapRequest,
)
from career_compass.models.resume import ResumeAnalysis

__all__ = [
    "ActionPlan",
    "AnalysisRequest",
    "CareerPath",
    "CareerPathRequest",
    "EducationEntry",
    "ExperienceEntry",
    "GitHubFacts",
    "GitHubProfileRequest",
    "IndustryBenchmark",
    "LearningPriority",
    "LearningResource",
    "LinkedInData",
    "LinkedInPost",
    "LinkedInProfileRequest",
    "ProfileAnalysis",
    "RepoFacts",
    "ResourceRecommendations",
    "ResourceRequest",
    "ResumeAnalysis",
    "ResumeFacts",
    "ResumeRequest",
    "SkillGapAnalysis",
    "SkillGapRequest",
    "Suggestion",
    "WeeklyPlan",
]
