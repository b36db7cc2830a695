"""Deterministic fallback generator.

Builds a complete result for every analysis kind from the request, the
gathered facts, the scoring rules and the static templates. Nothing here
touches the network, and nothing here raises for a well-formed request.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from career_compass.models.career import (
    CareerPath,
    LearningPriority,
    ResourceRecommendations,
    SkillGapAnalysis,
    WeeklyPlan,
)
from career_compass.models.facts import GitHubFacts, ResumeFacts
from career_compass.models.profile import ProfileAnalysis
from career_compass.models.request import (
    CareerPathRequest,
    GitHubProfileRequest,
    LinkedInData,
    LinkedInProfileRequest,
    ResourceRequest,
    ResumeRequest,
    SkillGapRequest,
)
from career_compass.models.resume import (
    AtsAnalysis,
    ContentAnalysis,
    ExperienceAnalysis,
    FormattingAnalysis,
    IdentifiedSkill,
    ImprovementPlan,
    IndustryAnalysis,
    Recommendations,
    ResumeAnalysis,
    ResumeBenchmark,
    SectionAnalysis,
    SkillsAnalysis,
)
from career_compass.pipeline import scoring
from career_compass.templates.resources import LEVEL_TO_DIFFICULTY, StaticResourceProvider
from career_compass.templates.roles import RoleTemplate, pick_template
from career_compass.utils.url_validator import extract_github_username

logger = logging.getLogger(__name__)

RESOURCES_PER_WEEK = 3
MAX_RECOMMENDED_RESOURCES = 8

_provider = StaticResourceProvider()


def _clamp(value: float) -> int:
    return max(0, min(100, int(round(value))))


def _normalized(skills) -> set[str]:
    return {s.strip().lower() for s in skills if s and s.strip()}


def skills_to_learn(template: RoleTemplate, current_skills) -> list[str]:
    """Template curriculum minus skills the user already has (all of it if nothing is left)."""
    known = _normalized(current_skills)
    remaining = [s for s in template.curriculum if s.lower() not in known]
    return remaining or list(template.curriculum)


def weekly_milestones(skill: str) -> list[str]:
    return [f"Explain the core concepts of {skill}", f"Complete a small exercise using {skill}"]


def weekly_projects(template: RoleTemplate, week: int, total_weeks: int) -> list[str]:
    """A portfolio project every fourth week and in the final week."""
    if week == total_weeks:
        return [f"Capstone: {template.projects[-1]}"]
    if week % 4 == 0:
        return [template.projects[(week // 4 - 1) % len(template.projects)]]
    return []


def career_path(request: CareerPathRequest) -> CareerPath:
    template = pick_template(request.target_role)
    total = scoring.parse_timeframe_weeks(request.timeframe, request.pace)
    skills = skills_to_learn(template, request.current_skills)
    difficulty = LEVEL_TO_DIFFICULTY.get(request.experience_level.strip().lower(), "Intermediate")
    level = difficulty.lower()

    plan = []
    for week in range(1, total + 1):
        skill = skills[(week - 1) * len(skills) // total]
        plan.append(
            WeeklyPlan(
                week=week,
                title=f"Week {week}: {skill}",
                description=f"Build a working understanding of {skill} for {request.target_role}.",
                skills=[skill],
                resources=_provider.resources_for(skill, level, limit=RESOURCES_PER_WEEK),
                milestones=weekly_milestones(skill),
                projects=weekly_projects(template, week, total),
            )
        )

    return CareerPath(
        title=f"{request.target_role.strip()} Roadmap ({template.track})",
        description=(
            f"A {total}-week {request.pace}-paced plan towards {request.target_role.strip()}, "
            f"covering {', '.join(skills[:4])}{' and more' if len(skills) > 4 else ''}."
        ),
        duration=f"{total} weeks",
        difficulty=difficulty,
        total_weeks=total,
        prerequisites=list(template.prerequisites),
        outcomes=list(template.outcomes),
        skills_to_learn=skills,
        weekly_plan=plan,
        market_demand=template.market_demand,
        average_salary=template.average_salary,
        job_titles=list(template.job_titles) or [request.target_role.strip()],
    )


def skill_gap(request: SkillGapRequest) -> SkillGapAnalysis:
    template = pick_template(request.target_role)
    known = _normalized(request.current_skills)
    curriculum = {s.lower() for s in template.curriculum}
    missing = [s for s in template.curriculum if s.lower() not in known]
    strong = [s for s in request.current_skills if s.strip().lower() in curriculum]
    to_improve = [s for s in request.current_skills if s.strip() and s.strip().lower() not in curriculum]

    third = max(1, len(missing) // 3)
    priorities = []
    for i, skill in enumerate(missing):
        level = "High" if i < third else "Medium" if i < 2 * third else "Low"
        priorities.append(
            LearningPriority(
                skill=skill,
                priority=level,
                reason=f"Core skill for {template.track} roles",
                time_to_learn={"High": "2-4 weeks", "Medium": "3-6 weeks", "Low": "4-8 weeks"}[level],
            )
        )

    if missing:
        advice = f"Focus first on {', '.join(missing[:3])}; they are the foundation of {template.track}."
    else:
        advice = f"You already cover the core {template.track} curriculum; deepen it with portfolio projects."
    return SkillGapAnalysis(
        missing_skills=missing,
        skills_to_improve=to_improve,
        strong_skills=strong,
        learning_priority=priorities,
        recommendations=advice,
    )


def resources(request: ResourceRequest) -> ResourceRecommendations:
    return ResourceRecommendations(
        skill=request.skill.strip(),
        level=request.level,
        resources=_provider.resources_for(request.skill, request.level, limit=MAX_RECOMMENDED_RESOURCES),
    )


def profile(facts: GitHubFacts | LinkedInData) -> ProfileAnalysis:
    suggestions = scoring.prioritized_suggestions(facts)
    return ProfileAnalysis(
        overall_score=scoring.score(facts).total,
        strengths=scoring.strengths(facts),
        weaknesses=scoring.weaknesses(facts),
        suggestions=suggestions,
        industry_benchmarks=scoring.benchmarks(facts),
        action_plan=scoring.action_plan(suggestions),
    )


def _length_label(words: int) -> str:
    if words > scoring.RESUME_IDEAL_MAX_WORDS:
        return "Too long"
    if words < scoring.RESUME_IDEAL_MIN_WORDS:
        return "Too short"
    return "Appropriate"


def resume(request: ResumeRequest, facts: ResumeFacts) -> ResumeAnalysis:
    template = pick_template(request.target_role or request.target_industry)
    breakdown = scoring.score(facts)
    overall = breakdown.total
    suggestions = scoring.prioritized_suggestions(facts)
    plan = scoring.action_plan(suggestions)
    found = _normalized(facts.skills_found)
    missing_keywords = [s for s in template.curriculum if s.lower() not in found]
    keyword_match = _clamp(100 * (len(template.curriculum) - len(missing_keywords)) / len(template.curriculum))
    formatting = breakdown.percent("Section coverage")
    readability = breakdown.percent("Length")

    sections = [
        SectionAnalysis(
            section="overall",
            score=overall,
            strengths=scoring.strengths(facts),
            weaknesses=scoring.weaknesses(facts),
            suggestions=[s.suggestion for s in suggestions],
            word_count=facts.word_count,
        )
    ]
    for name in facts.sections_present:
        body = request.sections.get(name, "")
        sections.append(SectionAnalysis(section=name, score=formatting, word_count=len(body.split())))

    return ResumeAnalysis(
        overall_score=overall,
        content_analysis=ContentAnalysis(
            total_words=facts.word_count,
            readability_score=readability,
            tone_analysis="Professional",
            clarity_score=breakdown.percent("Action verbs"),
        ),
        section_analysis=sections,
        skills_analysis=SkillsAnalysis(
            identified_skills=[
                IdentifiedSkill(skill=s, relevance="medium", frequency=1, context="Found in resume")
                for s in facts.skills_found
            ],
            skills_gap=missing_keywords,
            recommended_skills=missing_keywords[:5],
            technical_skills=facts.technical_skills,
            soft_skills=facts.soft_skills,
        ),
        experience_analysis=ExperienceAnalysis(
            total_years=facts.estimated_years,
            career_progression="Shows progression" if facts.estimated_years >= 3 else "Early career",
            achievement_count=facts.bullet_lines,
            quantified_achievements=facts.quantified_lines,
            action_verbs_used=facts.action_verbs,
            improvement_suggestions=[s.suggestion for s in suggestions if s.category in ("Achievements", "Language")],
        ),
        ats_analysis=AtsAnalysis(
            overall_score=_clamp((keyword_match + formatting + readability) / 3),
            keyword_match=keyword_match,
            formatting=formatting,
            readability=readability,
            recommendations=[s.suggestion for s in suggestions if s.category in ("Keywords", "Structure")],
            missing_keywords=missing_keywords,
            found_keywords=facts.skills_found[:5],
        ),
        industry_analysis=IndustryAnalysis(
            target_industry=request.target_industry or request.target_role or "Technology",
            industry_relevance=keyword_match,
            industry_keywords=list(template.industry_keywords),
            competitor_analysis="Competitive" if overall >= 70 else "Needs strengthening",
            market_trends=["Remote work", "Digital skills"],
        ),
        formatting_analysis=FormattingAnalysis(
            structure="Well-structured" if len(facts.sections_present) >= 4 else "Incomplete structure",
            consistency=formatting,
            visual_appeal=formatting,
            length=_length_label(facts.word_count),
        ),
        recommendations=Recommendations(
            immediate=plan.immediate,
            short_term=plan.short_term,
            long_term=plan.long_term,
            priority_actions=plan.immediate[:3],
        ),
        industry_benchmarks=[
            ResumeBenchmark(
                metric=b.metric,
                user_score=b.user_score,
                industry_average=b.industry_average,
                top_percentile=min(100, b.industry_average + 25),
                recommendation=b.recommendation,
            )
            for b in scoring.benchmarks(facts)
        ],
        improvement_plan=ImprovementPlan(
            weekly_goals=[s.suggestion for s in suggestions[:2]] or ["Update one section per week"],
            monthly_goals=["Complete a full resume revision", "Tailor the resume to three target job posts"],
            skill_development=[f"Learn {s}" for s in missing_keywords[:3]],
            networking_advice=["Connect with professionals in your target industry"],
        ),
    )


def _github_facts(request: GitHubProfileRequest, facts: Any) -> GitHubFacts:
    if isinstance(facts, GitHubFacts):
        return facts
    try:
        username = extract_github_username(request.profile_url)
    except ValueError:
        username = request.profile_url
    return GitHubFacts(username=username)


def fallback(request, facts: Any = None) -> BaseModel:
    """Model-free result for ``request``; ``facts`` is the bundle gathered for it, if any."""
    logger.info("Generating fallback result for %s", request.kind)
    if isinstance(request, CareerPathRequest):
        return career_path(request)
    if isinstance(request, GitHubProfileRequest):
        return profile(_github_facts(request, facts))
    if isinstance(request, LinkedInProfileRequest):
        return profile(facts if isinstance(facts, LinkedInData) else request.linkedin_data or LinkedInData())
    if isinstance(request, ResumeRequest):
        if not isinstance(facts, ResumeFacts):
            facts = scoring.resume_facts(
                request.extracted_text, request.sections, request.target_role, request.target_industry
            )
        return resume(request, facts)
    if isinstance(request, SkillGapRequest):
        return skill_gap(request)
    if isinstance(request, ResourceRequest):
        return resources(request)
    raise TypeError(f"Unsupported request type: {type(request).__name__}")
