"""Pydantic models for GitHub / LinkedIn profile analysis results."""

from __future__ import annotations

from pydantic import Field

from career_compass.models.base import Priority, WireModel


class Suggestion(WireModel):
    category: str
    priority: Priority = "medium"
    suggestion: str
    impact: str = ""


class IndustryBenchmark(WireModel):
    metric: str
    user_score: int = Field(default=0, ge=0, le=100)
    industry_average: int = Field(default=0, ge=0, le=100)
    recommendation: str = ""


class ActionPlan(WireModel):
    immediate: list[str] = []
    short_term: list[str] = []
    long_term: list[str] = []


class ProfileAnalysis(WireModel):
    overall_score: int = Field(ge=0, le=100)
    strengths: list[str] = []
    weaknesses: list[str] = []
    suggestions: list[Suggestion] = []
    industry_benchmarks: list[IndustryBenchmark] = []
    action_plan: ActionPlan = Field(default_factory=ActionPlan)
