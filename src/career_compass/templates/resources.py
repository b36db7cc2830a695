"""Deterministic learning-resource templates (no network access)."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote_plus

from career_compass.models.base import Difficulty
from career_compass.models.career import LearningResource

LEVEL_TO_DIFFICULTY: dict[str, Difficulty] = {
    "beginner": "Beginner",
    "entry": "Beginner",
    "junior": "Beginner",
    "intermediate": "Intermediate",
    "mid": "Intermediate",
    "advanced": "Advanced",
    "senior": "Advanced",
    "executive": "Advanced",
}


@dataclass(frozen=True)
class _ResourceTemplate:
    type: str
    source: str
    title: str
    url: str
    duration: str
    description: str


_TEMPLATES: tuple[_ResourceTemplate, ...] = (
    _ResourceTemplate(
        type="video",
        source="YouTube",
        title="{skill} crash course",
        url="https://www.youtube.com/results?search_query={q}+tutorial",
        duration="1-2 hours",
        description="Video walkthroughs covering {skill} from the ground up.",
    ),
    _ResourceTemplate(
        type="course",
        source="Coursera",
        title="{skill} courses on Coursera",
        url="https://www.coursera.org/search?query={q}",
        duration="4-6 hours",
        description="Structured {level} courses on {skill} from universities and companies.",
    ),
    _ResourceTemplate(
        type="practice",
        source="freeCodeCamp",
        title="{skill} practice on freeCodeCamp",
        url="https://www.freecodecamp.org/news/search/?query={q}",
        duration="2-3 hours",
        description="Hands-on articles and exercises to practice {skill}.",
    ),
    _ResourceTemplate(
        type="article",
        source="Official documentation",
        title="{skill} official documentation",
        url="Search: {skill} official documentation",
        duration="1 hour",
        description="Reference material straight from the maintainers of {skill}.",
    ),
    _ResourceTemplate(
        type="project",
        source="GitHub",
        title="{skill} example projects",
        url="https://github.com/search?q={q}&type=repositories",
        duration="3-5 hours",
        description="Open-source projects that use {skill}, to read and extend.",
    ),
)


class StaticResourceProvider:
    """Builds search-link resources for a skill from fixed templates."""

    def __init__(self, templates: tuple[_ResourceTemplate, ...] = _TEMPLATES):
        self.templates = templates

    def resources_for(self, skill: str, level: str = "beginner", limit: int | None = None) -> list[LearningResource]:
        skill = skill.strip() or "learning"
        difficulty = LEVEL_TO_DIFFICULTY.get(level.strip().lower(), "Intermediate")
        q = quote_plus(skill)
        resources = [
            LearningResource(
                title=t.title.format(skill=skill),
                type=t.type,
                url=t.url.format(skill=skill, q=q),
                duration=t.duration,
                description=t.description.format(skill=skill, level=difficulty.lower()),
                source=t.source,
                difficulty=difficulty,
            )
            for t in self.templates
        ]
        return resources[:limit] if limit is not None else resources
