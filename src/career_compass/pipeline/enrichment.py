"""Post-processing that fills gaps in a result without removing anything.

Career paths get per-skill resources (fetched concurrently, deduplicated and
capped per week) and synthesized milestones/projects for empty weeks.
Profile and resume results get scoring-derived lists where the upstream
result left them empty.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from career_compass.errors import BackendUnavailable
from career_compass.models.career import (
    CareerPath,
    LearningResource,
    ResourceRecommendations,
    WeeklyPlan,
)
from career_compass.models.facts import ResumeFacts
from career_compass.models.profile import ProfileAnalysis
from career_compass.models.request import CareerPathRequest
from career_compass.models.resume import ResumeAnalysis
from career_compass.pipeline import fallback, scoring
from career_compass.templates.resources import StaticResourceProvider
from career_compass.templates.roles import pick_template

logger = logging.getLogger(__name__)

ResourceSource = Callable[[str, str], Awaitable[list[LearningResource]]]


def _resource_key(resource: LearningResource) -> str:
    return (resource.url or resource.title).strip().lower()


def merge_resources(
    existing: list[LearningResource], extra: list[LearningResource], cap: int
) -> list[LearningResource]:
    """Top ``existing`` up to ``cap`` with ``extra`` resources it does not already hold.

    Existing resources are kept as given, duplicates included, even beyond
    ``cap``. Extras are deduplicated by URL (or title) against everything kept.
    """
    seen = {_resource_key(resource) for resource in existing}
    merged = list(existing)
    for resource in extra:
        if len(merged) >= cap:
            break
        key = _resource_key(resource)
        if key not in seen:
            seen.add(key)
            merged.append(resource)
    return merged


async def gather_resources(
    skills: list[str],
    level: str,
    source: ResourceSource,
    provider: StaticResourceProvider,
) -> dict[str, list[LearningResource]]:
    """Fetch resources for every skill concurrently; a failed skill degrades to static resources."""

    async def one(skill: str) -> list[LearningResource]:
        try:
            found = await source(skill, level)
        except (BackendUnavailable, asyncio.TimeoutError) as e:
            logger.warning("Resource lookup failed for %r (%s), using static resources", skill, e)
            found = []
        return found or provider.resources_for(skill, level)

    results = await asyncio.gather(*(one(s) for s in skills))
    return dict(zip(skills, results))


def _plan_skills(path: CareerPath, limit: int) -> list[str]:
    skills: list[str] = []
    for week in path.weekly_plan:
        for skill in week.skills or [week.title]:
            if skill and skill not in skills:
                skills.append(skill)
    return skills[:limit]


async def enrich_career_path(
    path: CareerPath,
    request: CareerPathRequest,
    source: ResourceSource,
    *,
    max_resources_per_week: int = 5,
    max_enriched_skills: int = 6,
    provider: StaticResourceProvider | None = None,
) -> CareerPath:
    provider = provider or StaticResourceProvider()
    template = pick_template(request.target_role)
    synthesized = fallback.career_path(request)

    update: dict = {}
    if not path.title.strip():
        update["title"] = synthesized.title
    if not path.description.strip():
        update["description"] = synthesized.description
    if not path.skills_to_learn:
        update["skills_to_learn"] = synthesized.skills_to_learn
    if not path.weekly_plan:
        update["weekly_plan"] = synthesized.weekly_plan
    if not path.prerequisites:
        update["prerequisites"] = synthesized.prerequisites
    if not path.outcomes:
        update["outcomes"] = synthesized.outcomes
    if not path.job_titles:
        update["job_titles"] = synthesized.job_titles
    if not path.duration.strip():
        update["duration"] = synthesized.duration
    if not path.market_demand.strip():
        update["market_demand"] = synthesized.market_demand
    if not path.average_salary.strip():
        update["average_salary"] = synthesized.average_salary
    path = path.model_copy(update=update)

    level = path.difficulty.lower()
    fetched = await gather_resources(_plan_skills(path, max_enriched_skills), level, source, provider)

    total = len(path.weekly_plan)
    weeks: list[WeeklyPlan] = []
    for i, week in enumerate(path.weekly_plan):
        skill = week.skills[0] if week.skills else week.title
        extra = [r for s in week.skills or [week.title] for r in fetched.get(s, ())]
        weeks.append(
            week.model_copy(
                update={
                    "resources": merge_resources(week.resources, extra, max_resources_per_week),
                    "milestones": week.milestones or fallback.weekly_milestones(skill),
                    "projects": week.projects
                    or fallback.weekly_projects(template, i + 1, total)
                    or [f"Practice exercise: apply {skill} in a small project"],
                }
            )
        )
    total_weeks = path.total_weeks if path.total_weeks >= total else total
    return path.model_copy(update={"weekly_plan": weeks, "total_weeks": total_weeks})


def enrich_resources(
    result: ResourceRecommendations, provider: StaticResourceProvider, cap: int = fallback.MAX_RECOMMENDED_RESOURCES
) -> ResourceRecommendations:
    if result.resources:
        return result
    return result.model_copy(update={"resources": provider.resources_for(result.skill, result.level, limit=cap)})


def enrich_profile(result: ProfileAnalysis, facts) -> ProfileAnalysis:
    update: dict = {}
    if not result.strengths:
        update["strengths"] = scoring.strengths(facts)
    if not result.weaknesses:
        update["weaknesses"] = scoring.weaknesses(facts)
    suggestions = result.suggestions or scoring.prioritized_suggestions(facts)
    if not result.suggestions:
        update["suggestions"] = suggestions
    if not result.industry_benchmarks:
        update["industry_benchmarks"] = scoring.benchmarks(facts)
    plan = result.action_plan
    if not (plan.immediate or plan.short_term or plan.long_term):
        update["action_plan"] = scoring.action_plan(suggestions)
    return result.model_copy(update=update)


def enrich_resume(result: ResumeAnalysis, facts: ResumeFacts) -> ResumeAnalysis:
    update: dict = {}
    recs = result.recommendations
    if not (recs.immediate or recs.short_term or recs.long_term):
        plan = scoring.action_plan(scoring.prioritized_suggestions(facts))
        update["recommendations"] = recs.model_copy(
            update={
                "immediate": plan.immediate,
                "short_term": plan.short_term,
                "long_term": plan.long_term,
                "priority_actions": recs.priority_actions or plan.immediate[:3],
            }
        )
    skills = result.skills_analysis
    if not skills.technical_skills and not skills.soft_skills and facts.skills_found:
        update["skills_analysis"] = skills.model_copy(
            update={"technical_skills": facts.technical_skills, "soft_skills": facts.soft_skills}
        )
    if not result.content_analysis.total_words:
        update["content_analysis"] = result.content_analysis.model_copy(update={"total_words": facts.word_count})
    return result.model_copy(update=update)
