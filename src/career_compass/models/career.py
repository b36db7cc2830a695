"""Pydantic models for career path, skill gap and learning resource results."""

from __future__ import annotations

from pydantic import Field

from career_compass.models.base import (
    Difficulty,
    LearningPriorityLevel,
    ResourceType,
    WireModel,
)


class LearningResource(WireModel):
    title: str
    type: ResourceType = "article"
    url: str = ""  # http(s) URL or a "Search: <terms>" marker
    duration: str = ""
    description: str = ""
    source: str = ""
    difficulty: Difficulty = "Intermediate"
    rating: str = ""


class WeeklyPlan(WireModel):
    week: int = Field(ge=1)
    title: str
    description: str = ""
    skills: list[str] = []
    resources: list[LearningResource] = []
    milestones: list[str] = []
    projects: list[str] = []


class CareerPath(WireModel):
    title: str
    description: str = ""
    duration: str = ""
    difficulty: Difficulty = "Intermediate"
    total_weeks: int = Field(default=0, ge=0)
    prerequisites: list[str] = []
    outcomes: list[str] = []
    skills_to_learn: list[str] = []
    weekly_plan: list[WeeklyPlan] = []
    market_demand: str = ""
    average_salary: str = ""
    job_titles: list[str] = []


class LearningPriority(WireModel):
    skill: str
    priority: LearningPriorityLevel = "Medium"
    reason: str = ""
    time_to_learn: str = ""


class SkillGapAnalysis(WireModel):
    missing_skills: list[str] = []
    skills_to_improve: list[str] = []
    strong_skills: list[str] = []
    learning_priority: list[LearningPriority] = []
    recommendations: str = ""


class ResourceRecommendations(WireModel):
    skill: str
    level: str = "beginner"
    resources: list[LearningResource] = []
