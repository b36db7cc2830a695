"""Pydantic models for resume analysis results."""

from __future__ import annotations

from pydantic import Field

from career_compass.models.base import Priority, WireModel


class ContentAnalysis(WireModel):
    total_words: int = Field(default=0, ge=0)
    readability_score: int = Field(default=0, ge=0, le=100)
    grammar_issues: list[str] = []
    spelling_errors: list[str] = []
    tone_analysis: str = "Professional"
    clarity_score: int = Field(default=0, ge=0, le=100)


class SectionAnalysis(WireModel):
    section: str
    score: int = Field(default=0, ge=0, le=100)
    strengths: list[str] = []
    weaknesses: list[str] = []
    suggestions: list[str] = []
    word_count: int = Field(default=0, ge=0)


class IdentifiedSkill(WireModel):
    skill: str
    relevance: Priority = "medium"
    frequency: int = Field(default=1, ge=0)
    context: str = ""


class SkillsAnalysis(WireModel):
    identified_skills: list[IdentifiedSkill] = []
    skills_gap: list[str] = []
    recommended_skills: list[str] = []
    technical_skills: list[str] = []
    soft_skills: list[str] = []


class ExperienceAnalysis(WireModel):
    total_years: int = Field(default=0, ge=0)
    career_progression: str = "Unknown"
    achievement_count: int = Field(default=0, ge=0)
    quantified_achievements: int = Field(default=0, ge=0)
    action_verbs_used: list[str] = []
    improvement_suggestions: list[str] = []


class AtsAnalysis(WireModel):
    overall_score: int = Field(default=0, ge=0, le=100)
    keyword_match: int = Field(default=0, ge=0, le=100)
    formatting: int = Field(default=0, ge=0, le=100)
    readability: int = Field(default=0, ge=0, le=100)
    recommendations: list[str] = []
    missing_keywords: list[str] = []
    found_keywords: list[str] = []


class IndustryAnalysis(WireModel):
    target_industry: str = "General"
    industry_relevance: int = Field(default=0, ge=0, le=100)
    industry_keywords: list[str] = []
    competitor_analysis: str = "Standard"
    market_trends: list[str] = []


class FormattingAnalysis(WireModel):
    structure: str = "Standard"
    consistency: int = Field(default=0, ge=0, le=100)
    visual_appeal: int = Field(default=0, ge=0, le=100)
    length: str = "Appropriate"
    font_analysis: str = "Standard"
    spacing_analysis: str = "Standard"


class Recommendations(WireModel):
    immediate: list[str] = []
    short_term: list[str] = []
    long_term: list[str] = []
    priority_actions: list[str] = []


class ResumeBenchmark(WireModel):
    metric: str
    user_score: int = Field(default=0, ge=0, le=100)
    industry_average: int = Field(default=0, ge=0, le=100)
    top_percentile: int = Field(default=0, ge=0, le=100)
    recommendation: str = ""


class ImprovementPlan(WireModel):
    weekly_goals: list[str] = []
    monthly_goals: list[str] = []
    skill_development: list[str] = []
    networking_advice: list[str] = []


class ResumeAnalysis(WireModel):
    overall_score: int = Field(ge=0, le=100)
    content_analysis: ContentAnalysis = Field(default_factory=ContentAnalysis)
    section_analysis: list[SectionAnalysis] = []
    skills_analysis: SkillsAnalysis = Field(default_factory=SkillsAnalysis)
    experience_analysis: ExperienceAnalysis = Field(default_factory=ExperienceAnalysis)
    ats_analysis: AtsAnalysis = Field(default_factory=AtsAnalysis)
    industry_analysis: IndustryAnalysis = Field(default_factory=IndustryAnalysis)
    formatting_analysis: FormattingAnalysis = Field(default_factory=FormattingAnalysis)
    recommendations: Recommendations = Field(default_factory=Recommendations)
    industry_benchmarks: list[ResumeBenchmark] = []
    improvement_plan: ImprovementPlan = Field(default_factory=ImprovementPlan)
