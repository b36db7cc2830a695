"""Schema specs the reconciler normalizes parsed payloads against.

Each spec mirrors one result model, keyed by the camelCase wire names. The
enum synonym tables are a tunable policy, not a contract: extend them when
the completion backend produces a new near-miss spelling.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel

from career_compass.models.career import (
    CareerPath,
    LearningResource,
    SkillGapAnalysis,
)
from career_compass.models.profile import ProfileAnalysis
from career_compass.models.resume import ResumeAnalysis

_FILLER_WORDS = re.compile(r"\b(level|lvl|priority|relevance)\b")
_SEPARATORS = re.compile(r"[\s_\-/]+")


@dataclass(frozen=True)
class EnumPolicy:
    """Maps free-text values onto a closed set of legal values.

    Lookup order: exact (case-insensitive) legal value, exact synonym, synonyms
    found as whole words inside the value, then an abbreviation (>= 3 chars)
    that prefixes exactly one legal value or synonym. Values whose synonyms
    point at more than one legal value, and anything else, map to ``default``.
    """

    legal: tuple[str, ...]
    default: str
    synonyms: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def _clean(self, value: str) -> str:
        text = _FILLER_WORDS.sub(" ", value.lower())
        return _SEPARATORS.sub(" ", text).strip()

    def map(self, value: object) -> str:
        if not isinstance(value, str):
            return self.default
        raw = value.strip().lower()
        for legal in self.legal:
            if raw == legal.lower():
                return legal
        text = self._clean(value)
        if not text:
            return self.default
        for legal in self.legal:
            if text == legal.lower() or text in self.synonyms.get(legal, ()):
                return legal
        found = {
            legal
            for legal, words in self.synonyms.items()
            for word in words
            if re.search(rf"\b{re.escape(word)}\b", text)
        }
        if len(found) == 1:
            return found.pop()
        if found:
            return self.default
        if len(text) >= 3:
            hits = {
                legal
                for legal in self.legal
                for word in (legal.lower(), *self.synonyms.get(legal, ()))
                if word.startswith(text)
            }
            if len(hits) == 1:
                return hits.pop()
        return self.default


DIFFICULTY = EnumPolicy(
    legal=("Beginner", "Intermediate", "Advanced"),
    default="Intermediate",
    synonyms={
        "Beginner": ("entry", "basic", "novice", "junior", "introductory", "easy", "fundamental"),
        "Intermediate": ("mid", "medium", "moderate", "middle", "mid senior"),
        "Advanced": ("senior", "expert", "hard", "professional", "master", "lead"),
    },
)

PRIORITY = EnumPolicy(
    legal=("high", "medium", "low"),
    default="medium",
    synonyms={
        "high": ("critical", "urgent", "important", "top", "must have", "essential"),
        "medium": ("moderate", "normal", "mid", "average"),
        "low": ("minor", "optional", "nice to have", "trivial"),
    },
)

LEARNING_PRIORITY = EnumPolicy(
    legal=("High", "Medium", "Low"),
    default="Medium",
    synonyms={level.capitalize(): words for level, words in PRIORITY.synonyms.items()},
)

RESOURCE_TYPE = EnumPolicy(
    legal=("video", "article", "course", "practice", "project"),
    default="article",
    synonyms={
        "video": ("youtube", "screencast", "talk", "webinar"),
        "article": ("blog", "documentation", "docs", "tutorial", "guide", "book", "reading"),
        "course": ("mooc", "class", "bootcamp", "specialization", "certification"),
        "practice": ("exercise", "exercises", "challenge", "kata", "interactive", "lab"),
        "project": ("build", "portfolio", "capstone"),
    },
)


# Field kinds ------------------------------------------------------------------


@dataclass(frozen=True)
class Score:
    """Integer in [0, 100]; out-of-range values are clamped, junk gets ``default``."""

    default: int = 0


@dataclass(frozen=True)
class Count:
    """Non-negative integer."""

    default: int = 0
    minimum: int = 0


@dataclass(frozen=True)
class Text:
    default: str = ""


@dataclass(frozen=True)
class TextList:
    pass


@dataclass(frozen=True)
class Choice:
    policy: EnumPolicy


@dataclass(frozen=True)
class Nested:
    spec: ObjectSpec


@dataclass(frozen=True)
class NestedList:
    spec: ObjectSpec


FieldKind = Score | Count | Text | TextList | Choice | Nested | NestedList


@dataclass(frozen=True)
class ObjectSpec:
    fields: dict[str, FieldKind]
    # Items missing any of these (after normalization: empty string) are dropped from lists
    required_text: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResultSchema:
    name: str
    model: type[BaseModel]
    spec: ObjectSpec
    shape: Literal["object", "array"] = "object"
    max_items: int | None = None


# Career path ----------------------------------------------------------------------

RESOURCE_SPEC = ObjectSpec(
    fields={
        "title": Text(),
        "type": Choice(RESOURCE_TYPE),
        "url": Text(),
        "duration": Text(),
        "description": Text(),
        "source": Text(),
        "difficulty": Choice(DIFFICULTY),
        "rating": Text(),
    },
    required_text=("title",),
)

WEEK_SPEC = ObjectSpec(
    fields={
        "week": Count(default=1, minimum=1),
        "title": Text(),
        "description": Text(),
        "skills": TextList(),
        "resources": NestedList(RESOURCE_SPEC),
        "milestones": TextList(),
        "projects": TextList(),
    },
    required_text=("title",),
)

CAREER_PATH_SCHEMA = ResultSchema(
    name="career_path",
    model=CareerPath,
    spec=ObjectSpec(
        fields={
            "title": Text(),
            "description": Text(),
            "duration": Text(),
            "difficulty": Choice(DIFFICULTY),
            "totalWeeks": Count(),
            "prerequisites": TextList(),
            "outcomes": TextList(),
            "skillsToLearn": TextList(),
            "weeklyPlan": NestedList(WEEK_SPEC),
            "marketDemand": Text(),
            "averageSalary": Text(),
            "jobTitles": TextList(),
        }
    ),
)

SKILL_GAP_SCHEMA = ResultSchema(
    name="skill_gap",
    model=SkillGapAnalysis,
    spec=ObjectSpec(
        fields={
            "missingSkills": TextList(),
            "skillsToImprove": TextList(),
            "strongSkills": TextList(),
            "learningPriority": NestedList(
                ObjectSpec(
                    fields={
                        "skill": Text(),
                        "priority": Choice(LEARNING_PRIORITY),
                        "reason": Text(),
                        "timeToLearn": Text(),
                    },
                    required_text=("skill",),
                )
            ),
            "recommendations": Text(),
        }
    ),
)

RESOURCES_SCHEMA = ResultSchema(
    name="resources",
    model=LearningResource,
    spec=RESOURCE_SPEC,
    shape="array",
    max_items=8,
)

# Profile -------------------------------------------------------------------------

PROFILE_SCHEMA = ResultSchema(
    name="profile",
    model=ProfileAnalysis,
    spec=ObjectSpec(
        fields={
            "overallScore": Score(default=50),
            "strengths": TextList(),
            "weaknesses": TextList(),
            "suggestions": NestedList(
                ObjectSpec(
                    fields={
                        "category": Text(default="General"),
                        "priority": Choice(PRIORITY),
                        "suggestion": Text(),
                        "impact": Text(),
                    },
                    required_text=("suggestion",),
                )
            ),
            "industryBenchmarks": NestedList(
                ObjectSpec(
                    fields={
                        "metric": Text(),
                        "userScore": Score(),
                        "industryAverage": Score(),
                        "recommendation": Text(),
                    },
                    required_text=("metric",),
                )
            ),
            "actionPlan": Nested(
                ObjectSpec(
                    fields={
                        "immediate": TextList(),
                        "shortTerm": TextList(),
                        "longTerm": TextList(),
                    }
                )
            ),
        }
    ),
)

# Resume --------------------------------------------------------------------------

RESUME_SCHEMA = ResultSchema(
    name="resume",
    model=ResumeAnalysis,
    spec=ObjectSpec(
        fields={
            "overallScore": Score(default=70),
            "contentAnalysis": Nested(
                ObjectSpec(
                    fields={
                        "totalWords": Count(),
                        "readabilityScore": Score(default=70),
                        "grammarIssues": TextList(),
                        "spellingErrors": TextList(),
                        "toneAnalysis": Text(default="Professional"),
                        "clarityScore": Score(default=70),
                    }
                )
            ),
            "sectionAnalysis": NestedList(
                ObjectSpec(
                    fields={
                        "section": Text(),
                        "score": Score(default=70),
                        "strengths": TextList(),
                        "weaknesses": TextList(),
                        "suggestions": TextList(),
                        "wordCount": Count(),
                    },
                    required_text=("section",),
                )
            ),
            "skillsAnalysis": Nested(
                ObjectSpec(
                    fields={
                        "identifiedSkills": NestedList(
                            ObjectSpec(
                                fields={
                                    "skill": Text(),
                                    "relevance": Choice(PRIORITY),
                                    "frequency": Count(default=1),
                                    "context": Text(),
                                },
                                required_text=("skill",),
                            )
                        ),
                        "skillsGap": TextList(),
                        "recommendedSkills": TextList(),
                        "technicalSkills": TextList(),
                        "softSkills": TextList(),
                    }
                )
            ),
            "experienceAnalysis": Nested(
                ObjectSpec(
                    fields={
                        "totalYears": Count(),
                        "careerProgression": Text(default="Unknown"),
                        "achievementCount": Count(),
                        "quantifiedAchievements": Count(),
                        "actionVerbsUsed": TextList(),
                        "improvementSuggestions": TextList(),
                    }
                )
            ),
            "atsAnalysis": Nested(
                ObjectSpec(
                    fields={
                        "overallScore": Score(default=70),
                        "keywordMatch": Score(default=70),
                        "formatting": Score(default=70),
                        "readability": Score(default=70),
                        "recommendations": TextList(),
                        "missingKeywords": TextList(),
                        "foundKeywords": TextList(),
                    }
                )
            ),
            "industryAnalysis": Nested(
                ObjectSpec(
                    fields={
                        "targetIndustry": Text(default="General"),
                        "industryRelevance": Score(default=70),
                        "industryKeywords": TextList(),
                        "competitorAnalysis": Text(default="Standard"),
                        "marketTrends": TextList(),
                    }
                )
            ),
            "formattingAnalysis": Nested(
                ObjectSpec(
                    fields={
                        "structure": Text(default="Standard"),
                        "consistency": Score(default=70),
                        "visualAppeal": Score(default=70),
                        "length": Text(default="Appropriate"),
                        "fontAnalysis": Text(default="Standard"),
                        "spacingAnalysis": Text(default="Standard"),
                    }
                )
            ),
            "recommendations": Nested(
                ObjectSpec(
                    fields={
                        "immediate": TextList(),
                        "shortTerm": TextList(),
                        "longTerm": TextList(),
                        "priorityActions": TextList(),
                    }
                )
            ),
            "industryBenchmarks": NestedList(
                ObjectSpec(
                    fields={
                        "metric": Text(),
                        "userScore": Score(),
                        "industryAverage": Score(),
                        "topPercentile": Score(),
                        "recommendation": Text(),
                    },
                    required_text=("metric",),
                )
            ),
            "improvementPlan": Nested(
                ObjectSpec(
                    fields={
                        "weeklyGoals": TextList(),
                        "monthlyGoals": TextList(),
                        "skillDevelopment": TextList(),
                        "networkingAdvice": TextList(),
                    }
                )
            ),
        }
    ),
)
